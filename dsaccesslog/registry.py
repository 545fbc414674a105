# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2026 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

"""Select the message class for a record.

Every record names a message type. Records for operation stages also name
an operation type. Not every pairing exists. An unbind is never forwarded or
answered. Entries and references belong to searches, and only updates are
subject to assured replication.
"""

from dsaccesslog._constants import (
    MessageType,
    OperationType,
    UPDATE_OPERATION_TYPES,
)
from dsaccesslog.exceptions import IllegalCombination
from dsaccesslog.fields import RecordFields
from dsaccesslog.messages import concrete_message_classes
from dsaccesslog.messages.base import read_message_type, read_operation_type

NO_UNBIND_MESSAGE_TYPES = frozenset((
    MessageType.FORWARD,
    MessageType.FORWARD_FAILED,
    MessageType.RESULT,
    MessageType.ASSURANCE_COMPLETE,
))

SEARCH_ONLY_MESSAGE_TYPES = frozenset((
    MessageType.ENTRY,
    MessageType.REFERENCE,
))


def is_legal(message_type, operation_type):
    """Check whether a message type may appear with an operation type.

    :param message_type: The message type
    :type message_type: MessageType
    :param operation_type: The operation type, None for messages that are
                           not about an operation
    :type operation_type: OperationType
    :returns: bool
    """
    if not message_type.is_operation:
        return operation_type is None
    if operation_type is None:
        return False
    if operation_type is OperationType.UNBIND and \
       message_type in NO_UNBIND_MESSAGE_TYPES:
        return False
    if message_type in SEARCH_ONLY_MESSAGE_TYPES:
        return operation_type is OperationType.SEARCH
    if message_type is MessageType.ASSURANCE_COMPLETE:
        return operation_type in UPDATE_OPERATION_TYPES
    return True


def _build_table():
    table = {}
    for cls in concrete_message_classes():
        key = (cls.MESSAGE_TYPE, cls.OPERATION_TYPE)
        if not is_legal(*key):
            raise RuntimeError("%s is declared for the illegal combination "
                               "%s/%s" % (cls.__name__, key[0], key[1]))
        if key in table:
            raise RuntimeError("%s and %s are both declared for %s/%s" %
                               (table[key].__name__, cls.__name__,
                                key[0], key[1]))
        table[key] = cls
    return table


MESSAGE_CLASSES = _build_table()


def message_class_for(message_type, operation_type=None):
    """Get the class that decodes a message type and operation type pair.

    :param message_type: The message type
    :type message_type: MessageType
    :param operation_type: The operation type, None for connection level
                           messages
    :type operation_type: OperationType
    :returns: A LogMessage subclass
    :raises: IllegalCombination - if the pair is not valid
    """
    cls = None
    if is_legal(message_type, operation_type):
        cls = MESSAGE_CLASSES.get((message_type, operation_type))
    if cls is None:
        raise IllegalCombination(message_type, operation_type)
    return cls


def decode_record(record):
    """Decode one access log record.

    :param record: The JSON object read from one log line
    :type record: dict
    :returns: A LogMessage subclass instance
    :raises: DecodeError - if the record does not describe a valid message
    """
    fields = record if isinstance(record, RecordFields) else \
        RecordFields(record)
    message_type = read_message_type(fields)
    operation_type = None
    if message_type.is_operation:
        operation_type = read_operation_type(fields)
    cls = message_class_for(message_type, operation_type)
    return cls.from_record(fields)
