# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2026 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

"""Request and response controls that the server logs in decoded form.

Only the controls below are surfaced. The intermediate client controls can
wrap another control of the same kind, one per proxy hop, so they are
decoded recursively up to MAX_CONTROL_NESTING_DEPTH levels.
"""

from dataclasses import dataclass
from typing import Mapping, Optional
from dsaccesslog import _decoding as d
from dsaccesslog._constants import (
    APPLICATION_NAME,
    APPLICATION_VERSION,
    CLIENT_IDENTITY,
    CLIENT_NAME,
    CLIENT_REQUEST_ID,
    CLIENT_SESSION_ID,
    CODE_LOCATION,
    COMPONENT_NAME,
    DOWNSTREAM_CLIENT_ADDRESS,
    DOWNSTREAM_CLIENT_SECURE,
    DOWNSTREAM_REQUEST,
    INTER_SERVER_OPERATION_PURPOSE,
    MAX_CONTROL_NESTING_DEPTH,
    PROPERTIES,
    REQUEST_PURPOSE,
    SERVER_NAME,
    SERVER_RESPONSE_ID,
    SERVER_SESSION_ID,
    UPSTREAM_RESPONSE,
    UPSTREAM_SERVER_ADDRESS,
    UPSTREAM_SERVER_SECURE,
)
from dsaccesslog.exceptions import FieldFormatError


def _check_depth(fields, depth):
    if depth > MAX_CONTROL_NESTING_DEPTH:
        raise FieldFormatError(
            fields.path,
            "nested no more than %d levels deep" % MAX_CONTROL_NESTING_DEPTH,
            "<depth %d>" % depth)


@dataclass(frozen=True)
class IntermediateClientRequestControl:
    """Identifies the client on whose behalf a proxy sent the request.

    ``downstream_request`` holds the control that the proxy itself received
    from the next client down the chain, if any.
    """

    client_identity: Optional[str] = d.wire(CLIENT_IDENTITY, d.string)
    client_name: Optional[str] = d.wire(CLIENT_NAME, d.string)
    client_request_id: Optional[str] = d.wire(CLIENT_REQUEST_ID, d.string)
    client_session_id: Optional[str] = d.wire(CLIENT_SESSION_ID, d.string)
    downstream_client_address: Optional[str] = \
        d.wire(DOWNSTREAM_CLIENT_ADDRESS, d.string)
    downstream_client_secure: Optional[bool] = \
        d.wire(DOWNSTREAM_CLIENT_SECURE, d.boolean)
    downstream_request: Optional['IntermediateClientRequestControl'] = None

    @classmethod
    def decode(cls, fields, depth=1):
        """
        :param fields: The control object
        :type fields: RecordFields
        :param depth: Nesting level of this control, 1 for the outermost
        :type depth: int
        :returns: IntermediateClientRequestControl
        :raises: FieldFormatError - if the chain is nested too deeply
        """
        _check_depth(fields, depth)
        downstream = fields.get_object(DOWNSTREAM_REQUEST)
        if downstream is not None:
            downstream = cls.decode(downstream, depth + 1)
        return d.build(cls, fields, downstream_request=downstream)

    def chain(self):
        """Yield this control and then every downstream control"""
        control = self
        while control is not None:
            yield control
            control = control.downstream_request


@dataclass(frozen=True)
class IntermediateClientResponseControl:
    server_response_id: Optional[str] = d.wire(SERVER_RESPONSE_ID, d.string)
    server_name: Optional[str] = d.wire(SERVER_NAME, d.string)
    server_session_id: Optional[str] = d.wire(SERVER_SESSION_ID, d.string)
    upstream_server_address: Optional[str] = \
        d.wire(UPSTREAM_SERVER_ADDRESS, d.string)
    upstream_server_secure: Optional[bool] = \
        d.wire(UPSTREAM_SERVER_SECURE, d.boolean)
    upstream_response: Optional['IntermediateClientResponseControl'] = None

    @classmethod
    def decode(cls, fields, depth=1):
        _check_depth(fields, depth)
        upstream = fields.get_object(UPSTREAM_RESPONSE)
        if upstream is not None:
            upstream = cls.decode(upstream, depth + 1)
        return d.build(cls, fields, upstream_response=upstream)

    def chain(self):
        control = self
        while control is not None:
            yield control
            control = control.upstream_response


@dataclass(frozen=True)
class OperationPurposeRequestControl:
    application_name: Optional[str] = d.wire(APPLICATION_NAME, d.string)
    application_version: Optional[str] = \
        d.wire(APPLICATION_VERSION, d.string)
    code_location: Optional[str] = d.wire(CODE_LOCATION, d.string)
    request_purpose: Optional[str] = d.wire(REQUEST_PURPOSE, d.string)

    @classmethod
    def decode(cls, fields):
        return d.build(cls, fields)


@dataclass(frozen=True)
class InterServerRequestControl:
    component_name: Optional[str] = d.wire(COMPONENT_NAME, d.string)
    operation_purpose: Optional[str] = \
        d.wire(INTER_SERVER_OPERATION_PURPOSE, d.string)
    properties: Mapping[str, Optional[str]] = d.wire(
        PROPERTIES, d.name_value_pairs, default_factory=d.empty_mapping,
        hash=False)

    @classmethod
    def decode(cls, fields):
        return d.build(cls, fields)
