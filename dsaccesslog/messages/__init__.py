# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2026 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

from dsaccesslog.messages.base import LogMessage, OperationMessage
from dsaccesslog.messages.connection import *  # noqa: F401,F403
from dsaccesslog.messages.operations import *  # noqa: F401,F403


def concrete_message_classes():
    """Return every message class that can be decoded from a record.

    A class is concrete when it names its message type and, for operation
    messages, its operation type.
    """
    found = []
    pending = [LogMessage]
    while pending:
        cls = pending.pop(0)
        pending.extend(cls.__subclasses__())
        if cls.MESSAGE_TYPE is None:
            continue
        if cls.MESSAGE_TYPE.is_operation and cls.OPERATION_TYPE is None:
            continue
        if cls not in found:
            found.append(cls)
    return found
