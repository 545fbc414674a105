# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2026 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

"""Declarative mapping between dataclass attributes and record fields.

Message and sub-object classes are frozen dataclasses whose attributes are
declared with :func:`wire`. The declaration names the JSON field and the
function that reads it, and :func:`build` walks the declarations to create
an instance. Supporting a new field means declaring a new attribute.
"""

import dataclasses
import logging
from types import MappingProxyType
from dsaccesslog._constants import PAIR_NAME, PAIR_VALUE
from dsaccesslog.exceptions import FieldFormatError
from dsaccesslog.fields import RecordFields

log = logging.getLogger(__name__)

WIRE_KEY = 'dsaccesslog.wire_key'
DECODER = 'dsaccesslog.decoder'
TOLERANT = 'dsaccesslog.tolerant'


def wire(key, decoder, default=None, default_factory=dataclasses.MISSING,
         tolerant=False, **kwargs):
    """Declare a dataclass attribute that is read from a record field.

    :param key: JSON field name
    :type key: str
    :param decoder: Callable taking (RecordFields, key) and returning the
                    attribute value, or its empty value when absent
    :param tolerant: When True a FieldFormatError from the decoder is
                     logged and the attribute is set to None instead
    :type tolerant: bool
    """
    metadata = {WIRE_KEY: key, DECODER: decoder, TOLERANT: tolerant}
    if default_factory is not dataclasses.MISSING:
        return dataclasses.field(default_factory=default_factory,
                                 metadata=metadata, **kwargs)
    return dataclasses.field(default=default, metadata=metadata, **kwargs)


def build(cls, fields, **values):
    """Create an instance of a wire-mapped dataclass.

    :param cls: The class to create
    :param fields: The object to read attributes from
    :type fields: RecordFields
    :param values: Attributes the caller has already decoded
    :returns: An instance of cls
    :raises: DecodeError - if a non-tolerant attribute can not be decoded
    """
    for f in dataclasses.fields(cls):
        if f.name in values or DECODER not in f.metadata:
            continue
        key = f.metadata[WIRE_KEY]
        try:
            values[f.name] = f.metadata[DECODER](fields, key)
        except FieldFormatError as e:
            if not f.metadata[TOLERANT]:
                raise
            log.debug("Ignoring unparseable field %s: %s", e.field_name, e)
            values[f.name] = None
    return cls(**values)


string = RecordFields.get_string
required_string = RecordFields.get_required_string
integer = RecordFields.get_integer
long = RecordFields.get_long
double = RecordFields.get_double
boolean = RecordFields.get_boolean
timestamp = RecordFields.get_timestamp
required_timestamp = RecordFields.get_required_timestamp
string_list = RecordFields.get_string_list
string_set = RecordFields.get_string_set


def enum(enum_cls):
    def decode(fields, key):
        return fields.get_enum(key, enum_cls)
    return decode


def nested(decode_object):
    """Decoder for a field holding one object, decoded with decode_object"""
    def decode(fields, key):
        obj = fields.get_object(key)
        if obj is None:
            return None
        return decode_object(obj)
    return decode


def nested_list(decode_object):
    """Decoder for an array of objects, giving a tuple in log order"""
    def decode(fields, key):
        return tuple(decode_object(obj) for obj in fields.get_object_list(key))
    return decode


def name_value_pairs(fields, key):
    """Read an array of {name, value} objects into a read-only mapping.

    A name that appears more than once keeps its last value.
    """
    pairs = {}
    for obj in fields.get_object_list(key):
        pairs[obj.get_required_string(PAIR_NAME)] = obj.get_string(PAIR_VALUE)
    return MappingProxyType(pairs)


def empty_mapping():
    return MappingProxyType({})
