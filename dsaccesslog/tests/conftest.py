# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2026 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

import copy
import json
import logging
import pytest
from datetime import datetime
from types import SimpleNamespace
from dateutil.tz import tzutc

from dsaccesslog._constants import (
    ACCESS_LOG_TYPE,
    AssuredReplicationLocalLevel,
    AssuredReplicationRemoteLevel,
)
from dsaccesslog.controls import (
    IntermediateClientRequestControl,
    IntermediateClientResponseControl,
    InterServerRequestControl,
    OperationPurposeRequestControl,
)
from dsaccesslog.replication import AssuredReplicationRequirements
from dsaccesslog.resultcode import ResultCode

DEFAULT_TIMESTAMP = '2026-03-04T05:06:07.890Z'
DEFAULT_TIMESTAMP_DATE = datetime(2026, 3, 4, 5, 6, 7, 890000,
                                  tzinfo=tzutc())

COMMON_FIELDS = {
    'product': 'Product Name',
    'instanceName': 'Instance Name',
    'startupID': 'Startup ID',
    'threadID': 2,
    'connectionID': 0,
}

COMMON_EXPECTED = {
    'timestamp': DEFAULT_TIMESTAMP_DATE,
    'log_type': ACCESS_LOG_TYPE,
    'product_name': 'Product Name',
    'instance_name': 'Instance Name',
    'startup_id': 'Startup ID',
    'thread_id': 2,
    'connection_id': 0,
}

OPERATION_FIELDS = {
    'operationID': 1,
    'messageID': 3,
    'triggeredByConnectionID': 5,
    'triggeredByOperationID': 6,
    'origin': 'Default Origin',
    'originDetails': [
        {'name': 'client', 'value': 'replication'},
        {'name': 'purpose', 'value': 'resync'},
    ],
    'requesterIP': '1.2.3.4',
    'requesterDN': 'cn=Default,cn=Requester',
    'requestControlOIDs': ['1.2.3.5', '1.2.3.6'],
    'usingAdminSessionWorkerThread': True,
    'administrativeOperation': 'Administrative Operation',
    'intermediateClientRequestControl': {
        'clientIdentity': 'dn:cn=Client Identity',
        'clientName': 'Client Name',
        'clientRequestID': 'request-1',
        'clientSessionID': 'session-1',
        'downstreamClientAddress': '1.2.3.13',
        'downstreamClientSecure': True,
    },
    'operationPurposeRequestControl': {
        'applicationName': 'Application Name',
        'applicationVersion': '1.2.3',
        'codeLocation': 'Code Location',
        'requestPurpose': 'Request Purpose',
    },
    'interServerRequestControls': [
        {
            'componentName': 'Proxy',
            'operationPurpose': 'Forwarding',
            'properties': [{'name': 'hop', 'value': '1'}],
        },
    ],
}

OPERATION_EXPECTED = {
    'operation_id': 1,
    'message_id': 3,
    'triggered_by_connection_id': 5,
    'triggered_by_operation_id': 6,
    'origin': 'Default Origin',
    'origin_details': {'client': 'replication', 'purpose': 'resync'},
    'requester_ip_address': '1.2.3.4',
    'requester_dn': 'cn=Default,cn=Requester',
    'request_control_oids': frozenset(['1.2.3.5', '1.2.3.6']),
    'using_admin_session_worker_thread': True,
    'administrative_operation_message': 'Administrative Operation',
    'intermediate_client_request_control': IntermediateClientRequestControl(
        client_identity='dn:cn=Client Identity',
        client_name='Client Name',
        client_request_id='request-1',
        client_session_id='session-1',
        downstream_client_address='1.2.3.13',
        downstream_client_secure=True),
    'operation_purpose_request_control': OperationPurposeRequestControl(
        application_name='Application Name',
        application_version='1.2.3',
        code_location='Code Location',
        request_purpose='Request Purpose'),
    'inter_server_request_controls': (
        InterServerRequestControl(component_name='Proxy',
                                  operation_purpose='Forwarding',
                                  properties={'hop': '1'}),
    ),
}

TARGET_FIELDS = {
    'targetHost': '1.2.3.9',
    'targetPort': 389,
    'targetProtocol': 'LDAP',
}

TARGET_EXPECTED = {
    'target_host': '1.2.3.9',
    'target_port': 389,
    'target_protocol': 'LDAP',
}

RESULT_FIELDS = dict(TARGET_FIELDS, **{
    'resultCode': 80,
    'resultCodeName': 'other',
    'message': 'Diagnostic Message',
    'additionalInfo': 'Additional Info',
    'matchedDN': 'cn=Matched,cn=DN',
    'referralURLs': ['ldap://1.2.3.4:389/dc=example,dc=com',
                     'ldap://1.2.3.5:389/dc=example,dc=com'],
    'serversAccessed': ['1.2.3.11:389', '1.2.3.12:389'],
    'uncachedDataAccessed': True,
    'workQueueWaitTimeMillis': 1.234,
    'processingTimeMillis': 2.345,
    'intermediateResponsesReturned': 4,
    'responseControlOIDs': ['1.2.3.7', '1.2.3.8'],
    'usedPrivileges': ['config-read', 'config-write'],
    'preAuthorizationUsedPrivileges': ['proxied-auth'],
    'missingPrivileges': ['password-reset'],
    'authorizationDN': 'cn=Alternate,cn=Authorization',
    'replicationChangeID': 'replication-change-id',
    'assuredReplicationRequirements': {
        'localAssuranceLevel': 'PROCESSED_ALL_SERVERS',
        'remoteAssuranceLevel': 'RECEIVED_ALL_REMOTE_LOCATIONS',
        'assuranceTimeoutMillis': 2345,
        'responseDelayedByAssurance': True,
        'alteredByRequestControl': False,
    },
    'indexesWithKeysAccessedNearEntryLimit': ['near-attr-1', 'near-attr-2'],
    'indexesWithKeysAccessedExceedingEntryLimit': ['exceeding-attr-1',
                                                   'exceeding-attr-2'],
    'intermediateClientResponseControl': {
        'serverResponseID': 'response-1',
        'serverName': 'Server Name',
        'serverSessionID': 'session-2',
        'upstreamServerAddress': '1.2.3.14',
        'upstreamServerSecure': False,
    },
})

RESULT_EXPECTED = dict(TARGET_EXPECTED, **{
    'result_code': ResultCode.OTHER,
    'diagnostic_message': 'Diagnostic Message',
    'additional_information': 'Additional Info',
    'matched_dn': 'cn=Matched,cn=DN',
    'referral_urls': ('ldap://1.2.3.4:389/dc=example,dc=com',
                      'ldap://1.2.3.5:389/dc=example,dc=com'),
    'servers_accessed': ('1.2.3.11:389', '1.2.3.12:389'),
    'uncached_data_accessed': True,
    'work_queue_wait_time_millis': 1.234,
    'processing_time_millis': 2.345,
    'intermediate_responses_returned': 4,
    'response_control_oids': frozenset(['1.2.3.7', '1.2.3.8']),
    'used_privileges': frozenset(['config-read', 'config-write']),
    'pre_authorization_used_privileges': frozenset(['proxied-auth']),
    'missing_privileges': frozenset(['password-reset']),
    'alternate_authorization_dn': 'cn=Alternate,cn=Authorization',
    'replication_change_id': 'replication-change-id',
    'assured_replication_requirements': AssuredReplicationRequirements(
        local_level=AssuredReplicationLocalLevel.PROCESSED_ALL_SERVERS,
        remote_level=(
            AssuredReplicationRemoteLevel.RECEIVED_ALL_REMOTE_LOCATIONS),
        timeout_millis=2345,
        response_delayed_by_assurance=True,
        altered_by_request_control=False),
    'indexes_with_keys_accessed_near_entry_limit':
        frozenset(['near-attr-1', 'near-attr-2']),
    'indexes_with_keys_accessed_exceeding_entry_limit':
        frozenset(['exceeding-attr-1', 'exceeding-attr-2']),
    'intermediate_client_response_control': IntermediateClientResponseControl(
        server_response_id='response-1',
        server_name='Server Name',
        server_session_id='session-2',
        upstream_server_address='1.2.3.14',
        upstream_server_secure=False),
})


def _make_record(message_type, operation_type=None, *field_maps, **fields):
    """Build a record with the required fields, plus any given ones"""
    record = {
        'timestamp': DEFAULT_TIMESTAMP,
        'logType': ACCESS_LOG_TYPE,
        'messageType': message_type,
    }
    if operation_type is not None:
        record['operationType'] = operation_type
    for field_map in field_maps:
        record.update(copy.deepcopy(field_map))
    record.update(fields)
    return record


@pytest.fixture
def make_record():
    return _make_record


@pytest.fixture
def write_log(tmp_path):
    """Write records, one per line, to a file and return its path"""
    def _write(records, name='access.json'):
        path = tmp_path / name
        with open(path, 'w') as f:
            for record in records:
                if isinstance(record, str):
                    f.write(record + '\n')
                else:
                    f.write(json.dumps(record) + '\n')
        return path
    return _write


class LogCapture(logging.Handler):
    """Keeps every record it is handed so tests can look for messages"""

    def __init__(self):
        super(LogCapture, self).__init__()
        self.outputs = []

    def emit(self, record):
        self.outputs.append(record)

    def contains(self, query):
        return any(query in r.getMessage() for r in self.outputs)


@pytest.fixture
def log_capture():
    """Capture debug output of the package loggers"""
    handler = LogCapture()
    loggers = [logging.getLogger('dsaccesslog'),
               logging.getLogger('AccessLogReader')]
    levels = [lg.level for lg in loggers]
    for lg in loggers:
        lg.addHandler(handler)
        lg.setLevel(logging.DEBUG)
    yield handler
    for lg, level in zip(loggers, levels):
        lg.removeHandler(handler)
        lg.setLevel(level)


@pytest.fixture
def defaults():
    """Fully populated field maps and the attribute values they decode to"""
    return SimpleNamespace(
        timestamp=DEFAULT_TIMESTAMP,
        timestamp_date=DEFAULT_TIMESTAMP_DATE,
        common_fields=copy.deepcopy(COMMON_FIELDS),
        common_expected=dict(COMMON_EXPECTED),
        operation_fields=copy.deepcopy(OPERATION_FIELDS),
        operation_expected=dict(OPERATION_EXPECTED),
        target_fields=copy.deepcopy(TARGET_FIELDS),
        target_expected=dict(TARGET_EXPECTED),
        result_fields=copy.deepcopy(RESULT_FIELDS),
        result_expected=dict(RESULT_EXPECTED),
    )
