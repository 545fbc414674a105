# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2026 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

"""Decode directory server JSON access logs into typed messages.

    >>> from dsaccesslog import open_reader
    >>> with open_reader('/var/log/dirsrv/access.json') as reader:
    ...     for message in reader:
    ...         print(message.message_type, message.timestamp)
"""

import logging

from dsaccesslog._constants import (
    AssuredReplicationLocalLevel,
    AssuredReplicationRemoteLevel,
    AssuredReplicationServerResultCode,
    DereferencePolicy,
    MessageType,
    OperationType,
    ReaderState,
    SearchScope,
)
from dsaccesslog.exceptions import (
    DecodeError,
    Error,
    FieldFormatError,
    IllegalCombination,
    InvalidEnumValue,
    MalformedRecord,
    MissingRequiredField,
    ReaderClosed,
    SourceUnavailable,
)
from dsaccesslog.fields import RecordFields
from dsaccesslog.reader import AccessLogReader, JSONRecordSource, open_reader
from dsaccesslog.registry import decode_record, is_legal, message_class_for
from dsaccesslog.resultcode import ResultCode

__version__ = '1.0.0'

logger = logging.getLogger(__name__)
