# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2026 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

"""LDAP result codes as they appear in access log result messages.

The server logs both the numeric value and a name for every result code. The
numeric value is authoritative: two result codes are equal when their values
are equal, whatever names they were logged with. Values that are not in the
table below are still accepted, so that logs written by newer servers keep
decoding. Each distinct unknown value is remembered for the life of the
process and shared by every reader, so the cache grows with the number of
different unknown codes seen.
"""

from dsaccesslog._constants import RESULT_CODE_NAME, normalize_token

# (value, name, attribute)
RESULT_CODES = (
    (0, 'success', 'SUCCESS'),
    (1, 'operations error', 'OPERATIONS_ERROR'),
    (2, 'protocol error', 'PROTOCOL_ERROR'),
    (3, 'time limit exceeded', 'TIME_LIMIT_EXCEEDED'),
    (4, 'size limit exceeded', 'SIZE_LIMIT_EXCEEDED'),
    (5, 'compare false', 'COMPARE_FALSE'),
    (6, 'compare true', 'COMPARE_TRUE'),
    (7, 'auth method not supported', 'AUTH_METHOD_NOT_SUPPORTED'),
    (8, 'strong auth required', 'STRONG_AUTH_REQUIRED'),
    (10, 'referral', 'REFERRAL'),
    (11, 'admin limit exceeded', 'ADMIN_LIMIT_EXCEEDED'),
    (12, 'unavailable critical extension', 'UNAVAILABLE_CRITICAL_EXTENSION'),
    (13, 'confidentiality required', 'CONFIDENTIALITY_REQUIRED'),
    (14, 'sasl bind in progress', 'SASL_BIND_IN_PROGRESS'),
    (16, 'no such attribute', 'NO_SUCH_ATTRIBUTE'),
    (17, 'undefined attribute type', 'UNDEFINED_ATTRIBUTE_TYPE'),
    (18, 'inappropriate matching', 'INAPPROPRIATE_MATCHING'),
    (19, 'constraint violation', 'CONSTRAINT_VIOLATION'),
    (20, 'attribute or value exists', 'ATTRIBUTE_OR_VALUE_EXISTS'),
    (21, 'invalid attribute syntax', 'INVALID_ATTRIBUTE_SYNTAX'),
    (32, 'no such object', 'NO_SUCH_OBJECT'),
    (33, 'alias problem', 'ALIAS_PROBLEM'),
    (34, 'invalid DN syntax', 'INVALID_DN_SYNTAX'),
    (36, 'alias dereferencing problem', 'ALIAS_DEREFERENCING_PROBLEM'),
    (48, 'inappropriate authentication', 'INAPPROPRIATE_AUTHENTICATION'),
    (49, 'invalid credentials', 'INVALID_CREDENTIALS'),
    (50, 'insufficient access rights', 'INSUFFICIENT_ACCESS_RIGHTS'),
    (51, 'busy', 'BUSY'),
    (52, 'unavailable', 'UNAVAILABLE'),
    (53, 'unwilling to perform', 'UNWILLING_TO_PERFORM'),
    (54, 'loop detected', 'LOOP_DETECT'),
    (60, 'sort control missing', 'SORT_CONTROL_MISSING'),
    (61, 'offset range error', 'OFFSET_RANGE_ERROR'),
    (64, 'naming violation', 'NAMING_VIOLATION'),
    (65, 'object class violation', 'OBJECT_CLASS_VIOLATION'),
    (66, 'not allowed on nonleaf', 'NOT_ALLOWED_ON_NONLEAF'),
    (67, 'not allowed on RDN', 'NOT_ALLOWED_ON_RDN'),
    (68, 'entry already exists', 'ENTRY_ALREADY_EXISTS'),
    (69, 'object class mods prohibited', 'OBJECT_CLASS_MODS_PROHIBITED'),
    (71, 'affects multiple DSAs', 'AFFECTS_MULTIPLE_DSAS'),
    (76, 'virtual list view error', 'VIRTUAL_LIST_VIEW_ERROR'),
    (80, 'other', 'OTHER'),
    (81, 'server down', 'SERVER_DOWN'),
    (82, 'local error', 'LOCAL_ERROR'),
    (83, 'encoding error', 'ENCODING_ERROR'),
    (84, 'decoding error', 'DECODING_ERROR'),
    (85, 'timeout', 'TIMEOUT'),
    (86, 'auth unknown', 'AUTH_UNKNOWN'),
    (87, 'filter error', 'FILTER_ERROR'),
    (88, 'user canceled', 'USER_CANCELED'),
    (89, 'param error', 'PARAM_ERROR'),
    (90, 'no memory', 'NO_MEMORY'),
    (91, 'connect error', 'CONNECT_ERROR'),
    (92, 'not supported', 'NOT_SUPPORTED'),
    (93, 'control not found', 'CONTROL_NOT_FOUND'),
    (94, 'no results returned', 'NO_RESULTS_RETURNED'),
    (95, 'more results to return', 'MORE_RESULTS_TO_RETURN'),
    (96, 'client loop', 'CLIENT_LOOP'),
    (97, 'referral limit exceeded', 'REFERRAL_LIMIT_EXCEEDED'),
    (118, 'canceled', 'CANCELED'),
    (119, 'no such operation', 'NO_SUCH_OPERATION'),
    (120, 'too late', 'TOO_LATE'),
    (121, 'cannot cancel', 'CANNOT_CANCEL'),
    (122, 'assertion failed', 'ASSERTION_FAILED'),
    (123, 'authorization denied', 'AUTHORIZATION_DENIED'),
    (4096, 'e-sync refresh required', 'E_SYNC_REFRESH_REQUIRED'),
    (16654, 'no operation', 'NO_OPERATION'),
    (30221001, 'interactive transaction aborted',
     'INTERACTIVE_TRANSACTION_ABORTED'),
    (30221002, 'database lock conflict', 'DATABASE_LOCK_CONFLICT'),
    (30221003, 'mirrored subtree digest mismatch',
     'MIRRORED_SUBTREE_DIGEST_MISMATCH'),
    (30221004, 'token delivery mechanism unavailable',
     'TOKEN_DELIVERY_MECHANISM_UNAVAILABLE'),
    (30221005, 'token delivery attempt failed',
     'TOKEN_DELIVERY_ATTEMPT_FAILED'),
    (30221006, 'token delivery invalid recipient id',
     'TOKEN_DELIVERY_INVALID_RECIPIENT_ID'),
    (30221007, 'token delivery invalid account state',
     'TOKEN_DELIVERY_INVALID_ACCOUNT_STATE'),
)


class ResultCode(object):
    """A numeric LDAP result code with its name.

    Use :meth:`value_of` and :meth:`for_name` rather than the constructor,
    they return the shared instance for a value.
    """

    _by_value = {}
    _by_name = {}

    def __init__(self, int_value, name, known=False):
        self._int_value = int_value
        self._name = name
        self._known = known

    @property
    def int_value(self):
        return self._int_value

    @property
    def name(self):
        return self._name

    @property
    def is_known(self):
        """True for the result codes defined by this module."""
        return self._known

    @classmethod
    def _define(cls, int_value, name):
        code = cls(int_value, name, known=True)
        cls._by_value[int_value] = code
        cls._by_name[normalize_token(name)] = code
        return code

    @classmethod
    def value_of(cls, int_value, name=None):
        """Return the result code for a numeric value.

        Unknown values are remembered the first time they are seen, using
        the name they were logged with, or the value itself when there is
        no name.

        :param int_value: The numeric result code
        :type int_value: int
        :param name: The name logged alongside the value, may be None
        :type name: str
        :returns: ResultCode
        """
        code = cls._by_value.get(int_value)
        if code is None:
            if not name:
                name = str(int_value)
            code = cls._by_value.setdefault(int_value, cls(int_value, name))
        return code

    @classmethod
    def for_name(cls, name):
        """Find a known result code by name, or None"""
        if name is None:
            return None
        return cls._by_name.get(normalize_token(name))

    @classmethod
    def values(cls):
        """All of the known result codes in numeric order"""
        return [c for c in sorted(cls._by_value.values(),
                                  key=lambda c: c.int_value) if c.is_known]

    def __int__(self):
        return self._int_value

    def __eq__(self, other):
        if isinstance(other, ResultCode):
            return self._int_value == other._int_value
        return NotImplemented

    def __hash__(self):
        return hash(self._int_value)

    def __str__(self):
        return "%d (%s)" % (self._int_value, self._name)

    def __repr__(self):
        return "ResultCode(%d, %r)" % (self._int_value, self._name)


for _value, _name, _attr in RESULT_CODES:
    setattr(ResultCode, _attr, ResultCode._define(_value, _name))
del _value, _name, _attr


def decode_result_code(fields, key):
    """Read the numeric result code field and its companion name field.

    The numeric value wins when present. A name on its own is only resolved
    against the known result codes.

    :param fields: Object holding the result code
    :type fields: RecordFields
    :param key: Name of the numeric result code field
    :type key: str
    :returns: ResultCode or None
    """
    value = fields.get_integer(key)
    name = fields.get_string(RESULT_CODE_NAME)
    if value is not None:
        return ResultCode.value_of(value, name)
    return ResultCode.for_name(name)
