# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2026 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

"""Messages about client connections and entry rebalancing, which are not
tied to any one operation.
"""

from dataclasses import dataclass
from typing import Mapping, Optional, Tuple
from dsaccesslog import _decoding as d
from dsaccesslog._constants import (
    AUTO_AUTHENTICATED_AS,
    CIPHER,
    CLIENT_CONNECTION_POLICY,
    CONNECT_FROM_ADDRESS,
    CONNECT_FROM_PORT,
    CONNECT_TO_ADDRESS,
    CONNECT_TO_PORT,
    DISCONNECT_MESSAGE,
    DISCONNECT_REASON,
    ENTRY_REBALANCING_ADMIN_ACTION_MESSAGE,
    ENTRY_REBALANCING_BASE_DN,
    ENTRY_REBALANCING_ENTRIES_ADDED_TO_TARGET,
    ENTRY_REBALANCING_ENTRIES_DELETED_FROM_SOURCE,
    ENTRY_REBALANCING_ENTRIES_READ_FROM_SOURCE,
    ENTRY_REBALANCING_ERROR_MESSAGE,
    ENTRY_REBALANCING_OPERATION_ID,
    ENTRY_REBALANCING_SERVER_ADDRESS,
    ENTRY_REBALANCING_SERVER_PORT,
    ENTRY_REBALANCING_SIZE_LIMIT,
    ENTRY_REBALANCING_SOURCE_BACKEND_SET,
    ENTRY_REBALANCING_SOURCE_SERVER,
    ENTRY_REBALANCING_SOURCE_SERVER_ALTERED,
    ENTRY_REBALANCING_TARGET_BACKEND_SET,
    ENTRY_REBALANCING_TARGET_SERVER,
    ENTRY_REBALANCING_TARGET_SERVER_ALTERED,
    PEER_CERTIFICATE_CHAIN,
    PROTOCOL,
    RESULT_CODE_VALUE,
    SECURITY_NEGOTIATION_PROPERTIES,
    TRIGGERED_BY_CONNECTION_ID,
    TRIGGERED_BY_OPERATION_ID,
    MessageType,
)
from dsaccesslog.certificate import Certificate, decode_certificate_chain
from dsaccesslog.messages.base import LogMessage
from dsaccesslog.resultcode import ResultCode, decode_result_code


@dataclass(frozen=True, kw_only=True)
class ConnectMessage(LogMessage):
    MESSAGE_TYPE = MessageType.CONNECT

    source_address: Optional[str] = d.wire(CONNECT_FROM_ADDRESS, d.string)
    source_port: Optional[int] = d.wire(CONNECT_FROM_PORT, d.integer)
    target_address: Optional[str] = d.wire(CONNECT_TO_ADDRESS, d.string)
    target_port: Optional[int] = d.wire(CONNECT_TO_PORT, d.integer)
    protocol_name: Optional[str] = d.wire(PROTOCOL, d.string)
    client_connection_policy: Optional[str] = \
        d.wire(CLIENT_CONNECTION_POLICY, d.string)


@dataclass(frozen=True, kw_only=True)
class DisconnectMessage(LogMessage):
    MESSAGE_TYPE = MessageType.DISCONNECT

    disconnect_reason: Optional[str] = d.wire(DISCONNECT_REASON, d.string)
    disconnect_message: Optional[str] = d.wire(DISCONNECT_MESSAGE, d.string)


@dataclass(frozen=True, kw_only=True)
class SecurityNegotiationMessage(LogMessage):
    """The result of TLS negotiation on a connection.

    ``negotiation_properties`` maps property names to values. When a name is
    logged more than once the last value wins.
    """

    MESSAGE_TYPE = MessageType.SECURITY_NEGOTIATION

    protocol: Optional[str] = d.wire(PROTOCOL, d.string)
    cipher: Optional[str] = d.wire(CIPHER, d.string)
    negotiation_properties: Mapping[str, Optional[str]] = d.wire(
        SECURITY_NEGOTIATION_PROPERTIES, d.name_value_pairs,
        default_factory=d.empty_mapping, hash=False)


@dataclass(frozen=True, kw_only=True)
class ClientCertificateMessage(LogMessage):
    MESSAGE_TYPE = MessageType.CLIENT_CERTIFICATE

    peer_certificate_chain: Tuple[Certificate, ...] = \
        d.wire(PEER_CERTIFICATE_CHAIN, decode_certificate_chain, default=())
    auto_authenticated_as_dn: Optional[str] = \
        d.wire(AUTO_AUTHENTICATED_AS, d.string)


@dataclass(frozen=True)
class RebalancingServer:
    """A backend server taking part in entry rebalancing"""

    address: Optional[str] = d.wire(ENTRY_REBALANCING_SERVER_ADDRESS, d.string)
    port: Optional[int] = d.wire(ENTRY_REBALANCING_SERVER_PORT, d.integer)

    @classmethod
    def decode(cls, fields):
        return d.build(cls, fields)

    def __str__(self):
        if self.address is not None and self.port is not None:
            return "%s:%d" % (self.address, self.port)
        return self.address or ''


@dataclass(frozen=True, kw_only=True)
class EntryRebalancingRequestMessage(LogMessage):
    MESSAGE_TYPE = MessageType.ENTRY_REBALANCING_REQUEST

    rebalancing_operation_id: Optional[int] = \
        d.wire(ENTRY_REBALANCING_OPERATION_ID, d.long)
    triggering_connection_id: Optional[int] = \
        d.wire(TRIGGERED_BY_CONNECTION_ID, d.long)
    triggering_operation_id: Optional[int] = \
        d.wire(TRIGGERED_BY_OPERATION_ID, d.long)
    subtree_base_dn: Optional[str] = \
        d.wire(ENTRY_REBALANCING_BASE_DN, d.string)
    size_limit: Optional[int] = d.wire(ENTRY_REBALANCING_SIZE_LIMIT, d.integer)
    source_backend_set_name: Optional[str] = \
        d.wire(ENTRY_REBALANCING_SOURCE_BACKEND_SET, d.string)
    source_backend_server: Optional[RebalancingServer] = d.wire(
        ENTRY_REBALANCING_SOURCE_SERVER, d.nested(RebalancingServer.decode))
    target_backend_set_name: Optional[str] = \
        d.wire(ENTRY_REBALANCING_TARGET_BACKEND_SET, d.string)
    target_backend_server: Optional[RebalancingServer] = d.wire(
        ENTRY_REBALANCING_TARGET_SERVER, d.nested(RebalancingServer.decode))


@dataclass(frozen=True, kw_only=True)
class EntryRebalancingResultMessage(EntryRebalancingRequestMessage):
    MESSAGE_TYPE = MessageType.ENTRY_REBALANCING_RESULT

    result_code: Optional[ResultCode] = \
        d.wire(RESULT_CODE_VALUE, decode_result_code)
    error_message: Optional[str] = \
        d.wire(ENTRY_REBALANCING_ERROR_MESSAGE, d.string)
    admin_action_message: Optional[str] = \
        d.wire(ENTRY_REBALANCING_ADMIN_ACTION_MESSAGE, d.string)
    source_altered: Optional[bool] = \
        d.wire(ENTRY_REBALANCING_SOURCE_SERVER_ALTERED, d.boolean)
    target_altered: Optional[bool] = \
        d.wire(ENTRY_REBALANCING_TARGET_SERVER_ALTERED, d.boolean)
    entries_read_from_source: Optional[int] = \
        d.wire(ENTRY_REBALANCING_ENTRIES_READ_FROM_SOURCE, d.long)
    entries_added_to_target: Optional[int] = \
        d.wire(ENTRY_REBALANCING_ENTRIES_ADDED_TO_TARGET, d.long)
    entries_deleted_from_source: Optional[int] = \
        d.wire(ENTRY_REBALANCING_ENTRIES_DELETED_FROM_SOURCE, d.long)


__all__ = [
    'ConnectMessage',
    'DisconnectMessage',
    'SecurityNegotiationMessage',
    'ClientCertificateMessage',
    'RebalancingServer',
    'EntryRebalancingRequestMessage',
    'EntryRebalancingResultMessage',
]
