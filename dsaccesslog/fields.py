# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2026 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

"""Typed access to the fields of one JSON access log record.

Every getter follows the same rule: a field that is absent (or null) gives
the empty value for its type, while a field that is present with a value of
the wrong kind raises :class:`~dsaccesslog.exceptions.FieldFormatError`.
New fields added to the log format are ignored, corrupt ones are not.
"""

import re
from dateutil.parser import isoparse
from dsaccesslog._constants import INT_MIN, INT_MAX, LONG_MIN, LONG_MAX
from dsaccesslog.exceptions import FieldFormatError, MissingRequiredField

INTEGER_PATTERN = re.compile(r'^\s*[+-]?\d+\s*$')


class RecordFields(object):
    """Wraps a decoded JSON object.

    :param record: The object decoded from the log line
    :type record: dict
    :param path: Dotted path of this object inside the top level record,
                 used in error messages. Empty for the record itself.
    :type path: str
    """

    def __init__(self, record, path=''):
        self._record = record
        self._path = path

    @property
    def record(self):
        return self._record

    @property
    def path(self):
        return self._path

    def field_path(self, name):
        if self._path:
            return "%s.%s" % (self._path, name)
        return name

    def has(self, name):
        """True if the field is present with a non-null value"""
        return self._record.get(name) is not None

    def names(self):
        return list(self._record.keys())

    def _raw(self, name):
        return self._record.get(name)

    def _fail(self, name, expected, value):
        raise FieldFormatError(self.field_path(name), expected, value)

    def get_string(self, name):
        """Get a field as text. Numbers and booleans are rendered the way
        they are written in JSON.

        :param name: Field name
        :type name: str
        :returns: str or None
        :raises: FieldFormatError - if the value is an array or object
        """
        value = self._raw(name)
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, bool):
            return 'true' if value else 'false'
        if isinstance(value, (int, float)):
            return str(value)
        self._fail(name, "a string", value)

    def get_required_string(self, name):
        value = self.get_string(name)
        if value is None:
            raise MissingRequiredField(self.field_path(name))
        return value

    def _get_int(self, name, minimum, maximum, expected):
        value = self._raw(name)
        if value is None:
            return None
        if isinstance(value, bool):
            self._fail(name, expected, value)
        if isinstance(value, str):
            if not INTEGER_PATTERN.match(value):
                self._fail(name, expected, value)
            result = int(value)
        elif isinstance(value, int):
            result = value
        else:
            self._fail(name, expected, value)
        if result < minimum or result > maximum:
            self._fail(name, expected, value)
        return result

    def get_integer(self, name):
        """Get a field as a signed 32 bit integer.

        Integer strings are accepted. Fractional numbers are not.
        """
        return self._get_int(name, INT_MIN, INT_MAX, "a 32-bit integer")

    def get_long(self, name):
        """Get a field as a signed 64 bit integer"""
        return self._get_int(name, LONG_MIN, LONG_MAX, "a 64-bit integer")

    def get_double(self, name):
        value = self._raw(name)
        if value is None:
            return None
        if isinstance(value, bool):
            self._fail(name, "a number", value)
        if isinstance(value, (int, float)):
            return float(value)
        if isinstance(value, str):
            try:
                return float(value)
            except ValueError:
                self._fail(name, "a number", value)
        self._fail(name, "a number", value)

    def get_boolean(self, name):
        value = self._raw(name)
        if value is None or isinstance(value, bool):
            return value
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered == 'true':
                return True
            if lowered == 'false':
                return False
        self._fail(name, "a boolean", value)

    def get_timestamp(self, name):
        """Get a field holding an RFC 3339 timestamp.

        :param name: Field name
        :type name: str
        :returns: datetime.datetime or None
        :raises: FieldFormatError - if the value can not be parsed
        """
        value = self._raw(name)
        if value is None:
            return None
        if not isinstance(value, str):
            self._fail(name, "an RFC 3339 timestamp", value)
        try:
            return isoparse(value.strip())
        except (ValueError, OverflowError):
            self._fail(name, "an RFC 3339 timestamp", value)

    def get_required_timestamp(self, name):
        value = self.get_timestamp(name)
        if value is None:
            raise MissingRequiredField(self.field_path(name))
        return value

    def _get_strings(self, name, expected):
        value = self._raw(name)
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        if not isinstance(value, list):
            self._fail(name, expected, value)
        for item in value:
            if not isinstance(item, str):
                self._fail(name, expected, value)
        return value

    def get_string_list(self, name):
        """Get an ordered array of strings as a tuple, () if absent"""
        return tuple(self._get_strings(name, "an array of strings"))

    def get_string_set(self, name):
        """Get an array of strings whose order carries no meaning"""
        return frozenset(self._get_strings(name, "an array of strings"))

    def get_object(self, name):
        """Get a nested JSON object.

        :returns: RecordFields or None
        """
        value = self._raw(name)
        if value is None:
            return None
        if not isinstance(value, dict):
            self._fail(name, "an object", value)
        return RecordFields(value, self.field_path(name))

    def get_object_list(self, name):
        """Get an array of nested JSON objects.

        :returns: tuple of RecordFields
        """
        value = self._raw(name)
        if value is None:
            return ()
        if not isinstance(value, list):
            self._fail(name, "an array of objects", value)
        objects = []
        for index, item in enumerate(value):
            if not isinstance(item, dict):
                self._fail(name, "an array of objects", value)
            objects.append(
                RecordFields(item, "%s[%d]" % (self.field_path(name), index)))
        return tuple(objects)

    def get_enum(self, name, enum_cls):
        """Get a string field and resolve it to a member of enum_cls"""
        value = self.get_string(name)
        if value is None:
            return None
        member = enum_cls.from_identifier(value)
        if member is None:
            self._fail(name, "one of %s" % ", ".join(
                str(m.value) for m in enum_cls), value)
        return member

    def __repr__(self):
        return "RecordFields(%r)" % (self._path or '<record>')
