# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2026 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

"""Assured replication details logged with update operation results."""

from dataclasses import dataclass
from typing import Optional
from dsaccesslog import _decoding as d
from dsaccesslog._constants import (
    ALTERED_BY_REQUEST_CONTROL,
    ASSURANCE_TIMEOUT_MILLIS,
    LOCAL_ASSURANCE_LEVEL,
    REMOTE_ASSURANCE_LEVEL,
    REPLICA_ID,
    REPLICATION_SERVER_ID,
    RESPONSE_DELAYED_BY_ASSURANCE,
    RESULT_CODE_VALUE,
    AssuredReplicationLocalLevel,
    AssuredReplicationRemoteLevel,
    AssuredReplicationServerResultCode,
)


@dataclass(frozen=True)
class AssuredReplicationRequirements:
    local_level: Optional[AssuredReplicationLocalLevel] = \
        d.wire(LOCAL_ASSURANCE_LEVEL, d.enum(AssuredReplicationLocalLevel))
    remote_level: Optional[AssuredReplicationRemoteLevel] = \
        d.wire(REMOTE_ASSURANCE_LEVEL, d.enum(AssuredReplicationRemoteLevel))
    timeout_millis: Optional[int] = \
        d.wire(ASSURANCE_TIMEOUT_MILLIS, d.long)
    response_delayed_by_assurance: Optional[bool] = \
        d.wire(RESPONSE_DELAYED_BY_ASSURANCE, d.boolean)
    altered_by_request_control: Optional[bool] = \
        d.wire(ALTERED_BY_REQUEST_CONTROL, d.boolean)

    @classmethod
    def decode(cls, fields):
        return d.build(cls, fields)


@dataclass(frozen=True)
class AssuredReplicationServerResult:
    """The outcome of assured replication to one replication server.

    Unlike operation results, ``result_code`` is a token naming the
    replication outcome (COMPLETE, TIMEOUT, ...) and not an LDAP result code.
    """

    result_code: Optional[AssuredReplicationServerResultCode] = \
        d.wire(RESULT_CODE_VALUE, d.enum(AssuredReplicationServerResultCode))
    replication_server_id: Optional[int] = \
        d.wire(REPLICATION_SERVER_ID, d.integer)
    replica_id: Optional[int] = d.wire(REPLICA_ID, d.integer)

    @classmethod
    def decode(cls, fields):
        return d.build(cls, fields)
