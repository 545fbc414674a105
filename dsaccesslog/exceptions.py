# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2026 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---


class Error(Exception):
    pass


class SourceUnavailable(Error):
    """The access log could not be opened or read."""
    pass


class ReaderClosed(Error):
    """A read was attempted on a reader that was already closed."""
    pass


class DecodeError(Error):
    """Base class for problems that are fatal to a single log record.

    :param msg: Description of the problem
    :type msg: str
    :param line_number: Line of the source the record was read from, if known
    :type line_number: int
    """

    def __init__(self, msg, line_number=None):
        super(DecodeError, self).__init__(msg)
        self.msg = msg
        self.line_number = line_number

    def __str__(self):
        if self.line_number is None:
            return self.msg
        return "line %d: %s" % (self.line_number, self.msg)


class MalformedRecord(DecodeError):
    """A line is not a well-formed JSON object."""
    pass


class MissingRequiredField(DecodeError):
    def __init__(self, field_name, line_number=None):
        super(MissingRequiredField, self).__init__(
            "required field '%s' is missing" % field_name, line_number)
        self.field_name = field_name


class InvalidEnumValue(DecodeError):
    def __init__(self, field_name, value, line_number=None):
        super(InvalidEnumValue, self).__init__(
            "field '%s' has unrecognized value %r" % (field_name, value),
            line_number)
        self.field_name = field_name
        self.value = value


class IllegalCombination(DecodeError):
    """The message type and operation type can not appear together."""

    def __init__(self, message_type, operation_type, line_number=None):
        super(IllegalCombination, self).__init__(
            "message type '%s' is not valid for operation type '%s'" %
            (message_type, operation_type), line_number)
        self.message_type = message_type
        self.operation_type = operation_type


class FieldFormatError(DecodeError):
    """A field is present but its value is not of the expected kind.

    :param field_name: Dotted path of the offending field
    :type field_name: str
    :param expected: Human readable description of the expected kind
    :type expected: str
    :param value: The raw value found in the record
    """

    def __init__(self, field_name, expected, value=None, line_number=None):
        super(FieldFormatError, self).__init__(
            "field '%s' must be %s, found %r" % (field_name, expected, value),
            line_number)
        self.field_name = field_name
        self.expected = expected
        self.value = value
