# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2026 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

"""Messages logged for the stages of LDAP operations.

Each stage (request, forward, forward failed, result, assurance completed,
intermediate response) has a base class holding the fields every operation
logs at that stage. Each operation type has a field set with the details of
its request, and where it has them, of its result. A concrete message class
combines one field set with one stage, for example ``SearchResultMessage``
is the search field sets on top of ``ResultMessage``.
"""

from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple
from dsaccesslog import _decoding as d
from dsaccesslog._constants import (
    ABANDON_MESSAGE_ID,
    ADD_UNDELETE_FROM_DN,
    ADDITIONAL_INFO,
    ASSURED_REPLICATION_REQUIREMENTS,
    ATTRIBUTES,
    AUTHORIZATION_DN,
    BIND_AUTHENTICATION_DN,
    BIND_AUTHENTICATION_FAILURE_ID,
    BIND_AUTHENTICATION_FAILURE_MESSAGE,
    BIND_AUTHENTICATION_FAILURE_NAME,
    BIND_AUTHENTICATION_FAILURE_REASON,
    BIND_AUTHENTICATION_TYPE,
    BIND_AUTHORIZATION_DN,
    BIND_PROTOCOL_VERSION,
    BIND_RETIRED_PASSWORD_USED,
    BIND_SASL_MECHANISM,
    CHANGE_TO_SOFT_DELETED_ENTRY,
    CLIENT_CONNECTION_POLICY,
    COMPARE_ASSERTION_VALUE,
    COMPARE_ATTRIBUTE_NAME,
    DELETE_SOFT_DELETED_ENTRY_DN,
    DIAGNOSTIC_MESSAGE,
    ENTRY_DN,
    EXTENDED_REQUEST_OID,
    EXTENDED_REQUEST_TYPE,
    EXTENDED_RESPONSE_OID,
    EXTENDED_RESPONSE_TYPE,
    INDEXES_WITH_KEYS_ACCESSED_EXCEEDING_ENTRY_LIMIT,
    INDEXES_WITH_KEYS_ACCESSED_NEAR_ENTRY_LIMIT,
    INTERMEDIATE_CLIENT_RESPONSE_CONTROL,
    INTERMEDIATE_RESPONSE_NAME,
    INTERMEDIATE_RESPONSE_OID,
    INTERMEDIATE_RESPONSE_VALUE,
    INTERMEDIATE_RESPONSES_RETURNED,
    LOCAL_ASSURANCE_SATISFIED,
    MATCHED_DN,
    MISSING_PRIVILEGES,
    MODDN_DELETE_OLD_RDN,
    MODDN_NEW_RDN,
    MODDN_NEW_SUPERIOR_DN,
    PRE_AUTHORIZATION_USED_PRIVILEGES,
    PROCESSING_TIME_MILLIS,
    REFERRAL_URLS,
    REMOTE_ASSURANCE_SATISFIED,
    REPLICATION_CHANGE_ID,
    RESPONSE_CONTROL_OIDS,
    RESULT_CODE_VALUE,
    SEARCH_BASE_DN,
    SEARCH_DEREF_POLICY,
    SEARCH_ENTRIES_RETURNED,
    SEARCH_FILTER,
    SEARCH_INDEXED,
    SEARCH_REQUESTED_ATTRIBUTES,
    SEARCH_SCOPE_NAME,
    SEARCH_SCOPE_VALUE,
    SEARCH_SIZE_LIMIT,
    SEARCH_TIME_LIMIT_SECONDS,
    SEARCH_TYPES_ONLY,
    SERVER_ASSURANCE_RESULTS,
    SERVERS_ACCESSED,
    TARGET_HOST,
    TARGET_PORT,
    TARGET_PROTOCOL,
    UNCACHED_DATA_ACCESSED,
    USED_PRIVILEGES,
    WORK_QUEUE_WAIT_TIME_MILLIS,
    DereferencePolicy,
    MessageType,
    OperationType,
    SearchScope,
)
from dsaccesslog.controls import IntermediateClientResponseControl
from dsaccesslog.exceptions import FieldFormatError
from dsaccesslog.messages.base import OperationMessage
from dsaccesslog.replication import (
    AssuredReplicationRequirements,
    AssuredReplicationServerResult,
)
from dsaccesslog.resultcode import ResultCode, decode_result_code


def decode_search_scope(fields, key):
    """Read the numeric search scope, falling back to the scope name when
    only the name was logged.

    :returns: SearchScope or None
    """
    value = fields.get_integer(key)
    if value is not None:
        try:
            return SearchScope(value)
        except ValueError:
            raise FieldFormatError(fields.field_path(key), "a search scope",
                                   value)
    name = fields.get_string(SEARCH_SCOPE_NAME)
    if name is None:
        return None
    scope = SearchScope.from_identifier(name)
    if scope is None:
        raise FieldFormatError(fields.field_path(SEARCH_SCOPE_NAME),
                               "a search scope name", name)
    return scope


@dataclass(frozen=True)
class AuthenticationFailureReason:
    """Why the server rejected a bind"""

    id: Optional[int] = d.wire(BIND_AUTHENTICATION_FAILURE_ID, d.long)
    name: Optional[str] = d.wire(BIND_AUTHENTICATION_FAILURE_NAME, d.string)
    message: Optional[str] = \
        d.wire(BIND_AUTHENTICATION_FAILURE_MESSAGE, d.string)

    @classmethod
    def decode(cls, fields):
        return d.build(cls, fields)


#
# Stages
#

@dataclass(frozen=True, kw_only=True)
class RequestMessage(OperationMessage):
    MESSAGE_TYPE = MessageType.REQUEST


@dataclass(frozen=True, kw_only=True)
class _TargetFields:
    # Where the operation was forwarded, if it was.
    target_host: Optional[str] = d.wire(TARGET_HOST, d.string)
    target_port: Optional[int] = d.wire(TARGET_PORT, d.integer)
    target_protocol: Optional[str] = d.wire(TARGET_PROTOCOL, d.string)


@dataclass(frozen=True, kw_only=True)
class ForwardMessage(_TargetFields, OperationMessage):
    MESSAGE_TYPE = MessageType.FORWARD


@dataclass(frozen=True, kw_only=True)
class ForwardFailedMessage(ForwardMessage):
    MESSAGE_TYPE = MessageType.FORWARD_FAILED

    result_code: Optional[ResultCode] = \
        d.wire(RESULT_CODE_VALUE, decode_result_code)
    diagnostic_message: Optional[str] = d.wire(DIAGNOSTIC_MESSAGE, d.string)


@dataclass(frozen=True, kw_only=True)
class ResultMessage(_TargetFields, OperationMessage):
    """The response the server sent for an operation.

    Timing values are in milliseconds. The privilege and index sets are
    unordered.
    """

    MESSAGE_TYPE = MessageType.RESULT

    result_code: Optional[ResultCode] = \
        d.wire(RESULT_CODE_VALUE, decode_result_code)
    diagnostic_message: Optional[str] = d.wire(DIAGNOSTIC_MESSAGE, d.string)
    additional_information: Optional[str] = d.wire(ADDITIONAL_INFO, d.string)
    matched_dn: Optional[str] = d.wire(MATCHED_DN, d.string)
    referral_urls: Tuple[str, ...] = \
        d.wire(REFERRAL_URLS, d.string_list, default=())
    servers_accessed: Tuple[str, ...] = \
        d.wire(SERVERS_ACCESSED, d.string_list, default=())
    uncached_data_accessed: Optional[bool] = \
        d.wire(UNCACHED_DATA_ACCESSED, d.boolean)
    work_queue_wait_time_millis: Optional[float] = \
        d.wire(WORK_QUEUE_WAIT_TIME_MILLIS, d.double)
    processing_time_millis: Optional[float] = \
        d.wire(PROCESSING_TIME_MILLIS, d.double)
    intermediate_responses_returned: Optional[int] = \
        d.wire(INTERMEDIATE_RESPONSES_RETURNED, d.long)
    response_control_oids: FrozenSet[str] = \
        d.wire(RESPONSE_CONTROL_OIDS, d.string_set, default=frozenset())
    used_privileges: FrozenSet[str] = \
        d.wire(USED_PRIVILEGES, d.string_set, default=frozenset())
    pre_authorization_used_privileges: FrozenSet[str] = d.wire(
        PRE_AUTHORIZATION_USED_PRIVILEGES, d.string_set, default=frozenset())
    missing_privileges: FrozenSet[str] = \
        d.wire(MISSING_PRIVILEGES, d.string_set, default=frozenset())
    alternate_authorization_dn: Optional[str] = \
        d.wire(AUTHORIZATION_DN, d.string)
    replication_change_id: Optional[str] = \
        d.wire(REPLICATION_CHANGE_ID, d.string)
    assured_replication_requirements: \
        Optional[AssuredReplicationRequirements] = d.wire(
            ASSURED_REPLICATION_REQUIREMENTS,
            d.nested(AssuredReplicationRequirements.decode))
    indexes_with_keys_accessed_near_entry_limit: FrozenSet[str] = d.wire(
        INDEXES_WITH_KEYS_ACCESSED_NEAR_ENTRY_LIMIT, d.string_set,
        default=frozenset())
    indexes_with_keys_accessed_exceeding_entry_limit: FrozenSet[str] = \
        d.wire(INDEXES_WITH_KEYS_ACCESSED_EXCEEDING_ENTRY_LIMIT,
               d.string_set, default=frozenset())
    intermediate_client_response_control: \
        Optional[IntermediateClientResponseControl] = d.wire(
            INTERMEDIATE_CLIENT_RESPONSE_CONTROL,
            d.nested(IntermediateClientResponseControl.decode))


@dataclass(frozen=True, kw_only=True)
class AssuranceCompletedMessage(ResultMessage):
    """Logged once assured replication of an update has finished, after the
    result itself may already have been sent.
    """

    MESSAGE_TYPE = MessageType.ASSURANCE_COMPLETE

    local_assurance_satisfied: Optional[bool] = \
        d.wire(LOCAL_ASSURANCE_SATISFIED, d.boolean)
    remote_assurance_satisfied: Optional[bool] = \
        d.wire(REMOTE_ASSURANCE_SATISFIED, d.boolean)
    server_assurance_results: Tuple[AssuredReplicationServerResult, ...] = \
        d.wire(SERVER_ASSURANCE_RESULTS,
               d.nested_list(AssuredReplicationServerResult.decode),
               default=())


@dataclass(frozen=True, kw_only=True)
class IntermediateResponseMessage(OperationMessage):
    MESSAGE_TYPE = MessageType.INTERMEDIATE_RESPONSE

    oid: Optional[str] = d.wire(INTERMEDIATE_RESPONSE_OID, d.string)
    name: Optional[str] = d.wire(INTERMEDIATE_RESPONSE_NAME, d.string)
    value: Optional[str] = d.wire(INTERMEDIATE_RESPONSE_VALUE, d.string)


#
# Operation field sets
#

@dataclass(frozen=True, kw_only=True)
class _AbandonFields:
    message_id_to_abandon: Optional[int] = \
        d.wire(ABANDON_MESSAGE_ID, d.integer)


@dataclass(frozen=True, kw_only=True)
class _AddFields:
    dn: Optional[str] = d.wire(ENTRY_DN, d.string)
    attribute_names: Tuple[str, ...] = \
        d.wire(ATTRIBUTES, d.string_list, default=())
    undelete_from_dn: Optional[str] = d.wire(ADD_UNDELETE_FROM_DN, d.string)


@dataclass(frozen=True, kw_only=True)
class _BindFields:
    protocol_version: Optional[str] = \
        d.wire(BIND_PROTOCOL_VERSION, d.string)
    authentication_type: Optional[str] = \
        d.wire(BIND_AUTHENTICATION_TYPE, d.string)
    dn: Optional[str] = d.wire(ENTRY_DN, d.string)
    sasl_mechanism_name: Optional[str] = \
        d.wire(BIND_SASL_MECHANISM, d.string)


@dataclass(frozen=True, kw_only=True)
class _BindResultFields:
    authentication_dn: Optional[str] = d.wire(BIND_AUTHENTICATION_DN, d.string)
    authorization_dn: Optional[str] = d.wire(BIND_AUTHORIZATION_DN, d.string)
    authentication_failure_reason: Optional[AuthenticationFailureReason] = \
        d.wire(BIND_AUTHENTICATION_FAILURE_REASON,
               d.nested(AuthenticationFailureReason.decode))
    retired_password_used: Optional[bool] = \
        d.wire(BIND_RETIRED_PASSWORD_USED, d.boolean)
    client_connection_policy: Optional[str] = \
        d.wire(CLIENT_CONNECTION_POLICY, d.string)


@dataclass(frozen=True, kw_only=True)
class _CompareFields:
    dn: Optional[str] = d.wire(ENTRY_DN, d.string)
    attribute_name: Optional[str] = d.wire(COMPARE_ATTRIBUTE_NAME, d.string)
    assertion_value: Optional[str] = \
        d.wire(COMPARE_ASSERTION_VALUE, d.string)


@dataclass(frozen=True, kw_only=True)
class _DeleteFields:
    dn: Optional[str] = d.wire(ENTRY_DN, d.string)


@dataclass(frozen=True, kw_only=True)
class _DeleteResultFields:
    soft_deleted_entry_dn: Optional[str] = \
        d.wire(DELETE_SOFT_DELETED_ENTRY_DN, d.string)
    change_to_soft_deleted_entry: Optional[bool] = \
        d.wire(CHANGE_TO_SOFT_DELETED_ENTRY, d.boolean)


@dataclass(frozen=True, kw_only=True)
class _ExtendedFields:
    request_oid: Optional[str] = d.wire(EXTENDED_REQUEST_OID, d.string)
    request_type: Optional[str] = d.wire(EXTENDED_REQUEST_TYPE, d.string)


@dataclass(frozen=True, kw_only=True)
class _ExtendedResultFields:
    response_oid: Optional[str] = d.wire(EXTENDED_RESPONSE_OID, d.string)
    response_type: Optional[str] = d.wire(EXTENDED_RESPONSE_TYPE, d.string)


@dataclass(frozen=True, kw_only=True)
class _ModifyFields:
    dn: Optional[str] = d.wire(ENTRY_DN, d.string)
    attribute_names: Tuple[str, ...] = \
        d.wire(ATTRIBUTES, d.string_list, default=())


@dataclass(frozen=True, kw_only=True)
class _ModifyResultFields:
    change_to_soft_deleted_entry: Optional[bool] = \
        d.wire(CHANGE_TO_SOFT_DELETED_ENTRY, d.boolean)


@dataclass(frozen=True, kw_only=True)
class _ModifyDNFields:
    dn: Optional[str] = d.wire(ENTRY_DN, d.string)
    new_rdn: Optional[str] = d.wire(MODDN_NEW_RDN, d.string)
    delete_old_rdn: Optional[bool] = d.wire(MODDN_DELETE_OLD_RDN, d.boolean)
    new_superior_dn: Optional[str] = d.wire(MODDN_NEW_SUPERIOR_DN, d.string)


@dataclass(frozen=True, kw_only=True)
class _SearchFields:
    base_dn: Optional[str] = d.wire(SEARCH_BASE_DN, d.string)
    scope: Optional[SearchScope] = \
        d.wire(SEARCH_SCOPE_VALUE, decode_search_scope)
    filter: Optional[str] = d.wire(SEARCH_FILTER, d.string)
    dereference_policy: Optional[DereferencePolicy] = \
        d.wire(SEARCH_DEREF_POLICY, d.enum(DereferencePolicy))
    size_limit: Optional[int] = d.wire(SEARCH_SIZE_LIMIT, d.integer)
    time_limit_seconds: Optional[int] = \
        d.wire(SEARCH_TIME_LIMIT_SECONDS, d.integer)
    types_only: Optional[bool] = d.wire(SEARCH_TYPES_ONLY, d.boolean)
    requested_attributes: Tuple[str, ...] = \
        d.wire(SEARCH_REQUESTED_ATTRIBUTES, d.string_list, default=())


@dataclass(frozen=True, kw_only=True)
class _SearchResultFields:
    entries_returned: Optional[int] = \
        d.wire(SEARCH_ENTRIES_RETURNED, d.long)
    is_indexed: Optional[bool] = d.wire(SEARCH_INDEXED, d.boolean)

    @property
    def unindexed(self):
        """True if the server had to evaluate the search without an index,
        None if that was not logged.
        """
        if self.is_indexed is None:
            return None
        return not self.is_indexed


#
# Abandon
#

@dataclass(frozen=True, kw_only=True)
class AbandonRequestMessage(_AbandonFields, RequestMessage):
    OPERATION_TYPE = OperationType.ABANDON


@dataclass(frozen=True, kw_only=True)
class AbandonForwardMessage(_AbandonFields, ForwardMessage):
    OPERATION_TYPE = OperationType.ABANDON


@dataclass(frozen=True, kw_only=True)
class AbandonForwardFailedMessage(_AbandonFields, ForwardFailedMessage):
    OPERATION_TYPE = OperationType.ABANDON


@dataclass(frozen=True, kw_only=True)
class AbandonResultMessage(_AbandonFields, ResultMessage):
    OPERATION_TYPE = OperationType.ABANDON


@dataclass(frozen=True, kw_only=True)
class AbandonIntermediateResponseMessage(_AbandonFields,
                                         IntermediateResponseMessage):
    OPERATION_TYPE = OperationType.ABANDON


#
# Add
#

@dataclass(frozen=True, kw_only=True)
class AddRequestMessage(_AddFields, RequestMessage):
    OPERATION_TYPE = OperationType.ADD


@dataclass(frozen=True, kw_only=True)
class AddForwardMessage(_AddFields, ForwardMessage):
    OPERATION_TYPE = OperationType.ADD


@dataclass(frozen=True, kw_only=True)
class AddForwardFailedMessage(_AddFields, ForwardFailedMessage):
    OPERATION_TYPE = OperationType.ADD


@dataclass(frozen=True, kw_only=True)
class AddResultMessage(_AddFields, ResultMessage):
    OPERATION_TYPE = OperationType.ADD


@dataclass(frozen=True, kw_only=True)
class AddAssuranceCompletedMessage(_AddFields, AssuranceCompletedMessage):
    OPERATION_TYPE = OperationType.ADD


@dataclass(frozen=True, kw_only=True)
class AddIntermediateResponseMessage(_AddFields, IntermediateResponseMessage):
    OPERATION_TYPE = OperationType.ADD


#
# Bind
#

@dataclass(frozen=True, kw_only=True)
class BindRequestMessage(_BindFields, RequestMessage):
    OPERATION_TYPE = OperationType.BIND


@dataclass(frozen=True, kw_only=True)
class BindForwardMessage(_BindFields, ForwardMessage):
    OPERATION_TYPE = OperationType.BIND


@dataclass(frozen=True, kw_only=True)
class BindForwardFailedMessage(_BindFields, ForwardFailedMessage):
    OPERATION_TYPE = OperationType.BIND


@dataclass(frozen=True, kw_only=True)
class BindResultMessage(_BindResultFields, _BindFields, ResultMessage):
    OPERATION_TYPE = OperationType.BIND


@dataclass(frozen=True, kw_only=True)
class BindIntermediateResponseMessage(_BindFields,
                                      IntermediateResponseMessage):
    OPERATION_TYPE = OperationType.BIND


#
# Compare
#

@dataclass(frozen=True, kw_only=True)
class CompareRequestMessage(_CompareFields, RequestMessage):
    OPERATION_TYPE = OperationType.COMPARE


@dataclass(frozen=True, kw_only=True)
class CompareForwardMessage(_CompareFields, ForwardMessage):
    OPERATION_TYPE = OperationType.COMPARE


@dataclass(frozen=True, kw_only=True)
class CompareForwardFailedMessage(_CompareFields, ForwardFailedMessage):
    OPERATION_TYPE = OperationType.COMPARE


@dataclass(frozen=True, kw_only=True)
class CompareResultMessage(_CompareFields, ResultMessage):
    OPERATION_TYPE = OperationType.COMPARE


@dataclass(frozen=True, kw_only=True)
class CompareIntermediateResponseMessage(_CompareFields,
                                         IntermediateResponseMessage):
    OPERATION_TYPE = OperationType.COMPARE


#
# Delete
#

@dataclass(frozen=True, kw_only=True)
class DeleteRequestMessage(_DeleteFields, RequestMessage):
    OPERATION_TYPE = OperationType.DELETE


@dataclass(frozen=True, kw_only=True)
class DeleteForwardMessage(_DeleteFields, ForwardMessage):
    OPERATION_TYPE = OperationType.DELETE


@dataclass(frozen=True, kw_only=True)
class DeleteForwardFailedMessage(_DeleteFields, ForwardFailedMessage):
    OPERATION_TYPE = OperationType.DELETE


@dataclass(frozen=True, kw_only=True)
class DeleteResultMessage(_DeleteResultFields, _DeleteFields, ResultMessage):
    OPERATION_TYPE = OperationType.DELETE


@dataclass(frozen=True, kw_only=True)
class DeleteAssuranceCompletedMessage(_DeleteResultFields, _DeleteFields,
                                      AssuranceCompletedMessage):
    OPERATION_TYPE = OperationType.DELETE


@dataclass(frozen=True, kw_only=True)
class DeleteIntermediateResponseMessage(_DeleteFields,
                                        IntermediateResponseMessage):
    OPERATION_TYPE = OperationType.DELETE


#
# Extended
#

@dataclass(frozen=True, kw_only=True)
class ExtendedRequestMessage(_ExtendedFields, RequestMessage):
    OPERATION_TYPE = OperationType.EXTENDED


@dataclass(frozen=True, kw_only=True)
class ExtendedForwardMessage(_ExtendedFields, ForwardMessage):
    OPERATION_TYPE = OperationType.EXTENDED


@dataclass(frozen=True, kw_only=True)
class ExtendedForwardFailedMessage(_ExtendedFields, ForwardFailedMessage):
    OPERATION_TYPE = OperationType.EXTENDED


@dataclass(frozen=True, kw_only=True)
class ExtendedResultMessage(_ExtendedResultFields, _ExtendedFields,
                            ResultMessage):
    OPERATION_TYPE = OperationType.EXTENDED


@dataclass(frozen=True, kw_only=True)
class ExtendedIntermediateResponseMessage(_ExtendedFields,
                                          IntermediateResponseMessage):
    OPERATION_TYPE = OperationType.EXTENDED


#
# Modify
#

@dataclass(frozen=True, kw_only=True)
class ModifyRequestMessage(_ModifyFields, RequestMessage):
    OPERATION_TYPE = OperationType.MODIFY


@dataclass(frozen=True, kw_only=True)
class ModifyForwardMessage(_ModifyFields, ForwardMessage):
    OPERATION_TYPE = OperationType.MODIFY


@dataclass(frozen=True, kw_only=True)
class ModifyForwardFailedMessage(_ModifyFields, ForwardFailedMessage):
    OPERATION_TYPE = OperationType.MODIFY


@dataclass(frozen=True, kw_only=True)
class ModifyResultMessage(_ModifyResultFields, _ModifyFields, ResultMessage):
    OPERATION_TYPE = OperationType.MODIFY


@dataclass(frozen=True, kw_only=True)
class ModifyAssuranceCompletedMessage(_ModifyResultFields, _ModifyFields,
                                      AssuranceCompletedMessage):
    OPERATION_TYPE = OperationType.MODIFY


@dataclass(frozen=True, kw_only=True)
class ModifyIntermediateResponseMessage(_ModifyFields,
                                        IntermediateResponseMessage):
    OPERATION_TYPE = OperationType.MODIFY


#
# Modify DN
#

@dataclass(frozen=True, kw_only=True)
class ModifyDNRequestMessage(_ModifyDNFields, RequestMessage):
    OPERATION_TYPE = OperationType.MODDN


@dataclass(frozen=True, kw_only=True)
class ModifyDNForwardMessage(_ModifyDNFields, ForwardMessage):
    OPERATION_TYPE = OperationType.MODDN


@dataclass(frozen=True, kw_only=True)
class ModifyDNForwardFailedMessage(_ModifyDNFields, ForwardFailedMessage):
    OPERATION_TYPE = OperationType.MODDN


@dataclass(frozen=True, kw_only=True)
class ModifyDNResultMessage(_ModifyDNFields, ResultMessage):
    OPERATION_TYPE = OperationType.MODDN


@dataclass(frozen=True, kw_only=True)
class ModifyDNAssuranceCompletedMessage(_ModifyDNFields,
                                        AssuranceCompletedMessage):
    OPERATION_TYPE = OperationType.MODDN


@dataclass(frozen=True, kw_only=True)
class ModifyDNIntermediateResponseMessage(_ModifyDNFields,
                                          IntermediateResponseMessage):
    OPERATION_TYPE = OperationType.MODDN


#
# Search
#

@dataclass(frozen=True, kw_only=True)
class SearchRequestMessage(_SearchFields, RequestMessage):
    OPERATION_TYPE = OperationType.SEARCH


@dataclass(frozen=True, kw_only=True)
class SearchForwardMessage(_SearchFields, ForwardMessage):
    OPERATION_TYPE = OperationType.SEARCH


@dataclass(frozen=True, kw_only=True)
class SearchForwardFailedMessage(_SearchFields, ForwardFailedMessage):
    OPERATION_TYPE = OperationType.SEARCH


@dataclass(frozen=True, kw_only=True)
class SearchResultMessage(_SearchResultFields, _SearchFields, ResultMessage):
    OPERATION_TYPE = OperationType.SEARCH


@dataclass(frozen=True, kw_only=True)
class SearchEntryMessage(_SearchFields, OperationMessage):
    """One entry returned by a search"""

    MESSAGE_TYPE = MessageType.ENTRY
    OPERATION_TYPE = OperationType.SEARCH

    dn: Optional[str] = d.wire(ENTRY_DN, d.string)
    attribute_names: Tuple[str, ...] = \
        d.wire(ATTRIBUTES, d.string_list, default=())


@dataclass(frozen=True, kw_only=True)
class SearchReferenceMessage(_SearchFields, OperationMessage):
    """A search result reference returned by a search"""

    MESSAGE_TYPE = MessageType.REFERENCE
    OPERATION_TYPE = OperationType.SEARCH

    referral_urls: Tuple[str, ...] = \
        d.wire(REFERRAL_URLS, d.string_list, default=())


@dataclass(frozen=True, kw_only=True)
class SearchIntermediateResponseMessage(_SearchFields,
                                        IntermediateResponseMessage):
    OPERATION_TYPE = OperationType.SEARCH


#
# Unbind, a one way notification that is never forwarded or answered
#

@dataclass(frozen=True, kw_only=True)
class UnbindRequestMessage(RequestMessage):
    OPERATION_TYPE = OperationType.UNBIND


@dataclass(frozen=True, kw_only=True)
class UnbindIntermediateResponseMessage(IntermediateResponseMessage):
    OPERATION_TYPE = OperationType.UNBIND


__all__ = [
    'AuthenticationFailureReason',
    'RequestMessage',
    'ForwardMessage',
    'ForwardFailedMessage',
    'ResultMessage',
    'AssuranceCompletedMessage',
    'IntermediateResponseMessage',
    'AbandonRequestMessage',
    'AbandonForwardMessage',
    'AbandonForwardFailedMessage',
    'AbandonResultMessage',
    'AbandonIntermediateResponseMessage',
    'AddRequestMessage',
    'AddForwardMessage',
    'AddForwardFailedMessage',
    'AddResultMessage',
    'AddAssuranceCompletedMessage',
    'AddIntermediateResponseMessage',
    'BindRequestMessage',
    'BindForwardMessage',
    'BindForwardFailedMessage',
    'BindResultMessage',
    'BindIntermediateResponseMessage',
    'CompareRequestMessage',
    'CompareForwardMessage',
    'CompareForwardFailedMessage',
    'CompareResultMessage',
    'CompareIntermediateResponseMessage',
    'DeleteRequestMessage',
    'DeleteForwardMessage',
    'DeleteForwardFailedMessage',
    'DeleteResultMessage',
    'DeleteAssuranceCompletedMessage',
    'DeleteIntermediateResponseMessage',
    'ExtendedRequestMessage',
    'ExtendedForwardMessage',
    'ExtendedForwardFailedMessage',
    'ExtendedResultMessage',
    'ExtendedIntermediateResponseMessage',
    'ModifyRequestMessage',
    'ModifyForwardMessage',
    'ModifyForwardFailedMessage',
    'ModifyResultMessage',
    'ModifyAssuranceCompletedMessage',
    'ModifyIntermediateResponseMessage',
    'ModifyDNRequestMessage',
    'ModifyDNForwardMessage',
    'ModifyDNForwardFailedMessage',
    'ModifyDNResultMessage',
    'ModifyDNAssuranceCompletedMessage',
    'ModifyDNIntermediateResponseMessage',
    'SearchRequestMessage',
    'SearchForwardMessage',
    'SearchForwardFailedMessage',
    'SearchResultMessage',
    'SearchEntryMessage',
    'SearchReferenceMessage',
    'SearchIntermediateResponseMessage',
    'UnbindRequestMessage',
    'UnbindIntermediateResponseMessage',
    'decode_search_scope',
]
