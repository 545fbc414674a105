# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2026 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

from enum import Enum, IntEnum

ACCESS_LOG_TYPE = 'access'

# Protocol controls may embed another control of the same kind, the chain
# is cut off at this depth.
MAX_CONTROL_NESTING_DEPTH = 32

INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1
LONG_MIN = -(2 ** 63)
LONG_MAX = 2 ** 63 - 1

# Common fields
TIMESTAMP = 'timestamp'
LOG_TYPE = 'logType'
MESSAGE_TYPE = 'messageType'
PRODUCT_NAME = 'product'
INSTANCE_NAME = 'instanceName'
STARTUP_ID = 'startupID'
THREAD_ID = 'threadID'
CONNECTION_ID = 'connectionID'

# Operation fields
OPERATION_TYPE = 'operationType'
OPERATION_ID = 'operationID'
MESSAGE_ID = 'messageID'
TRIGGERED_BY_CONNECTION_ID = 'triggeredByConnectionID'
TRIGGERED_BY_OPERATION_ID = 'triggeredByOperationID'
ORIGIN = 'origin'
ORIGIN_DETAILS = 'originDetails'
REQUESTER_IP_ADDRESS = 'requesterIP'
REQUESTER_DN = 'requesterDN'
REQUEST_CONTROL_OIDS = 'requestControlOIDs'
USING_ADMIN_SESSION_WORKER_THREAD = 'usingAdminSessionWorkerThread'
ADMINISTRATIVE_OPERATION = 'administrativeOperation'
INTERMEDIATE_CLIENT_REQUEST_CONTROL = 'intermediateClientRequestControl'
OPERATION_PURPOSE = 'operationPurposeRequestControl'
INTER_SERVER_REQUEST_CONTROLS = 'interServerRequestControls'

# Forwarding
TARGET_HOST = 'targetHost'
TARGET_PORT = 'targetPort'
TARGET_PROTOCOL = 'targetProtocol'

# Results
RESULT_CODE_VALUE = 'resultCode'
RESULT_CODE_NAME = 'resultCodeName'
DIAGNOSTIC_MESSAGE = 'message'
ADDITIONAL_INFO = 'additionalInfo'
MATCHED_DN = 'matchedDN'
REFERRAL_URLS = 'referralURLs'
SERVERS_ACCESSED = 'serversAccessed'
UNCACHED_DATA_ACCESSED = 'uncachedDataAccessed'
WORK_QUEUE_WAIT_TIME_MILLIS = 'workQueueWaitTimeMillis'
PROCESSING_TIME_MILLIS = 'processingTimeMillis'
INTERMEDIATE_RESPONSES_RETURNED = 'intermediateResponsesReturned'
RESPONSE_CONTROL_OIDS = 'responseControlOIDs'
USED_PRIVILEGES = 'usedPrivileges'
PRE_AUTHORIZATION_USED_PRIVILEGES = 'preAuthorizationUsedPrivileges'
MISSING_PRIVILEGES = 'missingPrivileges'
AUTHORIZATION_DN = 'authorizationDN'
REPLICATION_CHANGE_ID = 'replicationChangeID'
ASSURED_REPLICATION_REQUIREMENTS = 'assuredReplicationRequirements'
INDEXES_WITH_KEYS_ACCESSED_NEAR_ENTRY_LIMIT = \
    'indexesWithKeysAccessedNearEntryLimit'
INDEXES_WITH_KEYS_ACCESSED_EXCEEDING_ENTRY_LIMIT = \
    'indexesWithKeysAccessedExceedingEntryLimit'
INTERMEDIATE_CLIENT_RESPONSE_CONTROL = 'intermediateClientResponseControl'
CLIENT_CONNECTION_POLICY = 'clientConnectionPolicy'

# Assurance completion
LOCAL_ASSURANCE_SATISFIED = 'localAssuranceSatisfied'
REMOTE_ASSURANCE_SATISFIED = 'remoteAssuranceSatisfied'
SERVER_ASSURANCE_RESULTS = 'serverAssuranceResults'

# Assured replication requirements and server results
LOCAL_ASSURANCE_LEVEL = 'localAssuranceLevel'
REMOTE_ASSURANCE_LEVEL = 'remoteAssuranceLevel'
ASSURANCE_TIMEOUT_MILLIS = 'assuranceTimeoutMillis'
RESPONSE_DELAYED_BY_ASSURANCE = 'responseDelayedByAssurance'
ALTERED_BY_REQUEST_CONTROL = 'alteredByRequestControl'
REPLICATION_SERVER_ID = 'replicationServerID'
REPLICA_ID = 'replicaID'

# Intermediate client controls
CLIENT_IDENTITY = 'clientIdentity'
CLIENT_NAME = 'clientName'
CLIENT_REQUEST_ID = 'clientRequestID'
CLIENT_SESSION_ID = 'clientSessionID'
DOWNSTREAM_CLIENT_ADDRESS = 'downstreamClientAddress'
DOWNSTREAM_CLIENT_SECURE = 'downstreamClientSecure'
DOWNSTREAM_REQUEST = 'downstreamRequest'
SERVER_RESPONSE_ID = 'serverResponseID'
SERVER_NAME = 'serverName'
SERVER_SESSION_ID = 'serverSessionID'
UPSTREAM_SERVER_ADDRESS = 'upstreamServerAddress'
UPSTREAM_SERVER_SECURE = 'upstreamServerSecure'
UPSTREAM_RESPONSE = 'upstreamResponse'

# Operation purpose and inter-server controls
APPLICATION_NAME = 'applicationName'
APPLICATION_VERSION = 'applicationVersion'
CODE_LOCATION = 'codeLocation'
REQUEST_PURPOSE = 'requestPurpose'
COMPONENT_NAME = 'componentName'
INTER_SERVER_OPERATION_PURPOSE = 'operationPurpose'
PROPERTIES = 'properties'

# name/value pairs
PAIR_NAME = 'name'
PAIR_VALUE = 'value'

# Connection level messages
CONNECT_FROM_ADDRESS = 'fromAddress'
CONNECT_FROM_PORT = 'fromPort'
CONNECT_TO_ADDRESS = 'toAddress'
CONNECT_TO_PORT = 'toPort'
PROTOCOL = 'protocol'
DISCONNECT_REASON = 'disconnectReason'
DISCONNECT_MESSAGE = 'message'
CIPHER = 'cipher'
SECURITY_NEGOTIATION_PROPERTIES = 'negotiationProperties'
PEER_CERTIFICATE_CHAIN = 'certificateChain'
AUTO_AUTHENTICATED_AS = 'autoAuthenticatedAs'

# Certificates
CERT_SUBJECT_DN = 'subject'
CERT_ISSUER_SUBJECT_DN = 'issuerSubject'
CERT_TYPE = 'type'
CERT_NOT_BEFORE = 'notBefore'
CERT_NOT_AFTER = 'notAfter'
CERT_SERIAL_NUMBER = 'serialNumber'
CERT_SIGNATURE_ALGORITHM = 'signatureAlgorithm'
CERT_SIGNATURE_BYTES = 'signatureBytes'
CERT_CERTIFICATE_BYTES = 'certificateBytes'
CERT_STRING_REPRESENTATION = 'toString'

# Entry rebalancing
ENTRY_REBALANCING_OPERATION_ID = 'rebalancingOperationID'
ENTRY_REBALANCING_BASE_DN = 'baseDN'
ENTRY_REBALANCING_SIZE_LIMIT = 'sizeLimit'
ENTRY_REBALANCING_SOURCE_BACKEND_SET = 'sourceBackendSet'
ENTRY_REBALANCING_SOURCE_SERVER = 'sourceServer'
ENTRY_REBALANCING_TARGET_BACKEND_SET = 'targetBackendSet'
ENTRY_REBALANCING_TARGET_SERVER = 'targetServer'
ENTRY_REBALANCING_SERVER_ADDRESS = 'address'
ENTRY_REBALANCING_SERVER_PORT = 'port'
ENTRY_REBALANCING_SOURCE_SERVER_ALTERED = 'sourceServerAltered'
ENTRY_REBALANCING_TARGET_SERVER_ALTERED = 'targetServerAltered'
ENTRY_REBALANCING_ERROR_MESSAGE = 'errorMessage'
ENTRY_REBALANCING_ADMIN_ACTION_MESSAGE = 'adminActionRequired'
ENTRY_REBALANCING_ENTRIES_READ_FROM_SOURCE = 'entriesReadFromSource'
ENTRY_REBALANCING_ENTRIES_ADDED_TO_TARGET = 'entriesAddedToTarget'
ENTRY_REBALANCING_ENTRIES_DELETED_FROM_SOURCE = 'entriesDeletedFromSource'

# Operation specific fields
ENTRY_DN = 'dn'
ABANDON_MESSAGE_ID = 'idToAbandon'
ATTRIBUTES = 'attributes'
ADD_UNDELETE_FROM_DN = 'undeleteFromDN'
BIND_PROTOCOL_VERSION = 'version'
BIND_AUTHENTICATION_TYPE = 'authType'
BIND_SASL_MECHANISM = 'saslMechanism'
BIND_AUTHENTICATION_DN = 'authenticationDN'
BIND_AUTHORIZATION_DN = 'authorizationDN'
BIND_AUTHENTICATION_FAILURE_REASON = 'authenticationFailureReason'
BIND_AUTHENTICATION_FAILURE_ID = 'id'
BIND_AUTHENTICATION_FAILURE_NAME = 'name'
BIND_AUTHENTICATION_FAILURE_MESSAGE = 'message'
BIND_RETIRED_PASSWORD_USED = 'retiredPasswordUsed'
COMPARE_ATTRIBUTE_NAME = 'attr'
COMPARE_ASSERTION_VALUE = 'assertionValue'
DELETE_SOFT_DELETED_ENTRY_DN = 'softDeletedEntryDN'
CHANGE_TO_SOFT_DELETED_ENTRY = 'changeToSoftDeletedEntry'
EXTENDED_REQUEST_OID = 'requestOID'
EXTENDED_REQUEST_TYPE = 'requestType'
EXTENDED_RESPONSE_OID = 'responseOID'
EXTENDED_RESPONSE_TYPE = 'responseType'
MODDN_NEW_RDN = 'newRDN'
MODDN_DELETE_OLD_RDN = 'deleteOldRDN'
MODDN_NEW_SUPERIOR_DN = 'newSuperior'
SEARCH_BASE_DN = 'baseDN'
SEARCH_SCOPE_VALUE = 'scope'
SEARCH_SCOPE_NAME = 'scopeName'
SEARCH_DEREF_POLICY = 'dereferenceAliases'
SEARCH_SIZE_LIMIT = 'requestedSizeLimit'
SEARCH_TIME_LIMIT_SECONDS = 'requestedTimeLimitSeconds'
SEARCH_TYPES_ONLY = 'typesOnly'
SEARCH_FILTER = 'filter'
SEARCH_REQUESTED_ATTRIBUTES = 'requestedAttributes'
SEARCH_ENTRIES_RETURNED = 'entriesReturned'
SEARCH_INDEXED = 'isIndexed'
INTERMEDIATE_RESPONSE_OID = 'oid'
INTERMEDIATE_RESPONSE_NAME = 'name'
INTERMEDIATE_RESPONSE_VALUE = 'value'


def normalize_token(token):
    """Fold a log token so that case and the choice of '-' or '_' or ' '
    as a word separator do not matter.
    """
    return token.strip().lower().replace('_', '-').replace(' ', '-')


class LogToken(Enum):
    """An enum whose members are written to the log as string tokens."""

    @classmethod
    def from_identifier(cls, identifier):
        """Find the member matching a token from the log.

        :param identifier: Token as it appears in the log
        :type identifier: str
        :returns: The matching member, or None if there isn't one
        """
        if not isinstance(identifier, str):
            return None
        key = normalize_token(identifier)
        for member in cls:
            if key == normalize_token(member.value) or \
               key == normalize_token(member.name):
                return member
        return None

    def __str__(self):
        return self.value


class MessageType(LogToken):
    CONNECT = 'connect'
    DISCONNECT = 'disconnect'
    SECURITY_NEGOTIATION = 'security-negotiation'
    CLIENT_CERTIFICATE = 'client-certificate'
    ENTRY_REBALANCING_REQUEST = 'entry-rebalancing-request'
    ENTRY_REBALANCING_RESULT = 'entry-rebalancing-result'
    REQUEST = 'request'
    FORWARD = 'forward'
    FORWARD_FAILED = 'forward-failed'
    RESULT = 'result'
    ASSURANCE_COMPLETE = 'assurance-complete'
    ENTRY = 'entry'
    REFERENCE = 'reference'
    INTERMEDIATE_RESPONSE = 'intermediate-response'

    @property
    def is_operation(self):
        """True if records of this type describe one stage of an operation
        and so carry an operation type.
        """
        return self in OPERATION_MESSAGE_TYPES


OPERATION_MESSAGE_TYPES = frozenset((
    MessageType.REQUEST,
    MessageType.FORWARD,
    MessageType.FORWARD_FAILED,
    MessageType.RESULT,
    MessageType.ASSURANCE_COMPLETE,
    MessageType.ENTRY,
    MessageType.REFERENCE,
    MessageType.INTERMEDIATE_RESPONSE,
))


class OperationType(LogToken):
    ABANDON = 'abandon'
    ADD = 'add'
    BIND = 'bind'
    COMPARE = 'compare'
    DELETE = 'delete'
    EXTENDED = 'extended'
    MODIFY = 'modify'
    MODDN = 'moddn'
    SEARCH = 'search'
    UNBIND = 'unbind'


# Operations that change data and so can be subject to assured replication
UPDATE_OPERATION_TYPES = frozenset((
    OperationType.ADD,
    OperationType.DELETE,
    OperationType.MODIFY,
    OperationType.MODDN,
))


class SearchScope(IntEnum):
    BASE = 0
    ONE = 1
    SUB = 2
    SUBORDINATE_SUBTREE = 3

    @classmethod
    def from_identifier(cls, identifier):
        if not isinstance(identifier, str):
            return None
        key = normalize_token(identifier)
        for member in cls:
            if key in SEARCH_SCOPE_ALIASES[member]:
                return member
        return None


SEARCH_SCOPE_ALIASES = {
    SearchScope.BASE: ('base', 'baseobject', 'base-object'),
    SearchScope.ONE: ('one', 'onelevel', 'one-level', 'singlelevel',
                      'single-level'),
    SearchScope.SUB: ('sub', 'subtree', 'wholesubtree', 'whole-subtree'),
    SearchScope.SUBORDINATE_SUBTREE: ('subordinate-subtree', 'subordinates',
                                      'subordinatesubtree'),
}


class DereferencePolicy(LogToken):
    NEVER = 'never'
    SEARCHING = 'searching'
    FINDING = 'finding'
    ALWAYS = 'always'


class AssuredReplicationLocalLevel(LogToken):
    NONE = 'none'
    RECEIVED_ANY_SERVER = 'received-any-server'
    PROCESSED_ALL_SERVERS = 'processed-all-servers'


class AssuredReplicationRemoteLevel(LogToken):
    NONE = 'none'
    RECEIVED_ANY_REMOTE_LOCATION = 'received-any-remote-location'
    RECEIVED_ALL_REMOTE_LOCATIONS = 'received-all-remote-locations'
    PROCESSED_ALL_REMOTE_SERVERS = 'processed-all-remote-servers'


class AssuredReplicationServerResultCode(LogToken):
    COMPLETE = 'complete'
    TIMEOUT = 'timeout'
    CONFLICT = 'conflict'
    SERVER_SHUTDOWN = 'server-shutdown'
    UNAVAILABLE = 'unavailable'
    DUPLICATE = 'duplicate'


class ReaderState(Enum):
    OPEN = 'open'
    EXHAUSTED = 'exhausted'
    FAILED = 'failed'
    CLOSED = 'closed'
