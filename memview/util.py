# Copyright 2016 Amazon.com, Inc. or its affiliates. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License").
# You may not use this file except in compliance with the License.
# A copy of the License is located at:
#
#    http://aws.amazon.com/apache2.0/
#
# or in the "license" file accompanying this file. This file is
# distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS
# OF ANY KIND, either express or implied. See the License for the
# specific language governing permissions and limitations under the
# License.

"""General purpose utilities."""

import operator

from collections import namedtuple


class _RecordMetaClass(type):
    """Rebinds a class declared over :func:`record` onto a ``namedtuple`` carrying the class's own name."""
    def __new__(cls, name, bases, attrs):
        if attrs.get('_record_sentinel') is None:
            fields = [field for base_class in bases for field in vars(base_class).get('_record_fields', ())]
            if fields:
                bases = (namedtuple(name, fields),)
        return super(_RecordMetaClass, cls).__new__(cls, name, bases, attrs)


def record(*fields):
    """Constructs a type that can be extended to create immutable, value types.

    Examples:
        A typical declaration looks like::

            class Extent(record('start', 'stop')):
                pass

        ``Extent`` is then a sub-class of a ``collections.namedtuple`` also named ``Extent``.

    Args:
        fields (str): The field names, in tuple order.

    Raises:
        ValueError: if a field name is not a ``str``.
    """
    for field in fields:
        if not isinstance(field, str):
            raise ValueError('Unable to bind record field: %r' % (field,))

    class RecordType(object, metaclass=_RecordMetaClass):
        _record_sentinel = True
        _record_fields = fields

    return RecordType


def unsigned(value, name='value'):
    """Returns ``value`` as a non-negative ``int``.

    Sizes and offsets are never wrapped or clamped here; a negative value is a caller bug.

    Raises:
        TypeError: if ``value`` is not an integer (``bool`` included).
        ValueError: if ``value`` is negative.
    """
    if isinstance(value, bool):
        raise TypeError('%s must be an integer, not bool' % name)
    try:
        value = operator.index(value)
    except TypeError:
        raise TypeError('%s must be an integer, not %s' % (name, type(value).__name__))
    if value < 0:
        raise ValueError('%s must be >= 0, got %d' % (name, value))
    return value


def byte_view(storage):
    """Returns a flat, unsigned byte ``memoryview`` over ``storage`` without copying it.

    Raises:
        TypeError: if ``storage`` does not support the buffer protocol.
        ValueError: if ``storage`` is not C-contiguous.
    """
    view = memoryview(storage)
    if view.format == 'B' and view.ndim == 1:
        return view
    if not view.c_contiguous:
        raise ValueError('Segment storage must be contiguous')
    return view.cast('B')
