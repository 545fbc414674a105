# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2026 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

"""Fields shared by every access log message, and by every message that
describes a stage of an operation.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar, FrozenSet, Mapping, Optional, Tuple
from dsaccesslog import _decoding as d
from dsaccesslog._constants import (
    ADMINISTRATIVE_OPERATION,
    CONNECTION_ID,
    INSTANCE_NAME,
    INTER_SERVER_REQUEST_CONTROLS,
    INTERMEDIATE_CLIENT_REQUEST_CONTROL,
    LOG_TYPE,
    MESSAGE_ID,
    MESSAGE_TYPE,
    OPERATION_ID,
    OPERATION_PURPOSE,
    OPERATION_TYPE,
    ORIGIN,
    ORIGIN_DETAILS,
    PRODUCT_NAME,
    REQUEST_CONTROL_OIDS,
    REQUESTER_DN,
    REQUESTER_IP_ADDRESS,
    STARTUP_ID,
    THREAD_ID,
    TIMESTAMP,
    TRIGGERED_BY_CONNECTION_ID,
    TRIGGERED_BY_OPERATION_ID,
    USING_ADMIN_SESSION_WORKER_THREAD,
    MessageType,
    OperationType,
)
from dsaccesslog.controls import (
    IntermediateClientRequestControl,
    InterServerRequestControl,
    OperationPurposeRequestControl,
)
from dsaccesslog.exceptions import (
    FieldFormatError,
    InvalidEnumValue,
    MissingRequiredField,
)
from dsaccesslog.fields import RecordFields


def read_message_type(fields):
    """Read the mandatory message type of a record.

    :param fields: The record
    :type fields: RecordFields
    :returns: MessageType
    :raises: MissingRequiredField, InvalidEnumValue
    """
    value = fields.get_string(MESSAGE_TYPE)
    if value is None:
        raise MissingRequiredField(MESSAGE_TYPE)
    message_type = MessageType.from_identifier(value)
    if message_type is None:
        raise InvalidEnumValue(MESSAGE_TYPE, value)
    return message_type


def read_operation_type(fields):
    """Read the operation type, which is mandatory for operation messages.

    :param fields: The record
    :type fields: RecordFields
    :returns: OperationType
    :raises: MissingRequiredField, InvalidEnumValue
    """
    value = fields.get_string(OPERATION_TYPE)
    if value is None:
        raise MissingRequiredField(OPERATION_TYPE)
    operation_type = OperationType.from_identifier(value)
    if operation_type is None:
        raise InvalidEnumValue(OPERATION_TYPE, value)
    return operation_type


@dataclass(frozen=True, kw_only=True)
class LogMessage:
    """Base class of every decoded access log message.

    Concrete subclasses set MESSAGE_TYPE, and OPERATION_TYPE when they
    describe an operation. ``record`` holds the JSON object the message was
    decoded from and takes no part in comparisons.
    """

    MESSAGE_TYPE: ClassVar[Optional[MessageType]] = None
    OPERATION_TYPE: ClassVar[Optional[OperationType]] = None

    timestamp: datetime = d.wire(TIMESTAMP, d.required_timestamp)
    message_type: MessageType = None
    log_type: Optional[str] = d.wire(LOG_TYPE, d.string)
    product_name: Optional[str] = d.wire(PRODUCT_NAME, d.string)
    instance_name: Optional[str] = d.wire(INSTANCE_NAME, d.string)
    startup_id: Optional[str] = d.wire(STARTUP_ID, d.string)
    thread_id: Optional[int] = d.wire(THREAD_ID, d.long)
    connection_id: Optional[int] = d.wire(CONNECTION_ID, d.long)
    record: Mapping = field(default=None, compare=False, hash=False,
                            repr=False)

    @classmethod
    def from_record(cls, record):
        """Decode a record into an instance of this class.

        :param record: The JSON object read from one log line
        :type record: dict or RecordFields
        :returns: An instance of cls
        :raises: DecodeError - if any field of the record can not be decoded
        """
        if not isinstance(record, RecordFields):
            record = RecordFields(record)
        values = {'message_type': read_message_type(record),
                  'record': record.record}
        if values['message_type'] is not cls.MESSAGE_TYPE:
            raise FieldFormatError(MESSAGE_TYPE, "'%s'" % cls.MESSAGE_TYPE,
                                   record.get_string(MESSAGE_TYPE))
        if cls.OPERATION_TYPE is not None:
            values['operation_type'] = read_operation_type(record)
            if values['operation_type'] is not cls.OPERATION_TYPE:
                raise FieldFormatError(OPERATION_TYPE,
                                       "'%s'" % cls.OPERATION_TYPE,
                                       record.get_string(OPERATION_TYPE))
        return d.build(cls, record, **values)


@dataclass(frozen=True, kw_only=True)
class OperationMessage(LogMessage):
    operation_type: OperationType = None
    operation_id: Optional[int] = d.wire(OPERATION_ID, d.long)
    message_id: Optional[int] = d.wire(MESSAGE_ID, d.integer)
    triggered_by_connection_id: Optional[int] = \
        d.wire(TRIGGERED_BY_CONNECTION_ID, d.long)
    triggered_by_operation_id: Optional[int] = \
        d.wire(TRIGGERED_BY_OPERATION_ID, d.long)
    origin: Optional[str] = d.wire(ORIGIN, d.string)
    origin_details: Mapping[str, Optional[str]] = d.wire(
        ORIGIN_DETAILS, d.name_value_pairs, default_factory=d.empty_mapping,
        hash=False)
    requester_ip_address: Optional[str] = \
        d.wire(REQUESTER_IP_ADDRESS, d.string)
    requester_dn: Optional[str] = d.wire(REQUESTER_DN, d.string)
    request_control_oids: FrozenSet[str] = \
        d.wire(REQUEST_CONTROL_OIDS, d.string_set, default=frozenset())
    using_admin_session_worker_thread: Optional[bool] = \
        d.wire(USING_ADMIN_SESSION_WORKER_THREAD, d.boolean)
    administrative_operation_message: Optional[str] = \
        d.wire(ADMINISTRATIVE_OPERATION, d.string)
    intermediate_client_request_control: \
        Optional[IntermediateClientRequestControl] = d.wire(
            INTERMEDIATE_CLIENT_REQUEST_CONTROL,
            d.nested(IntermediateClientRequestControl.decode))
    operation_purpose_request_control: \
        Optional[OperationPurposeRequestControl] = d.wire(
            OPERATION_PURPOSE, d.nested(OperationPurposeRequestControl.decode))
    inter_server_request_controls: Tuple[InterServerRequestControl, ...] = \
        d.wire(INTER_SERVER_REQUEST_CONTROLS,
               d.nested_list(InterServerRequestControl.decode), default=())
