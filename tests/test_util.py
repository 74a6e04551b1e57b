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

import array

import pytest

from memview.util import byte_view, record, unsigned


def test_fields():
    class TestRecord(record('a', 'b')):
        pass

    a = TestRecord(1, 2)
    assert a.a == 1
    assert a.b == 2
    assert a == (1, 2)
    assert repr(a) == 'TestRecord(a=1, b=2)'


def test_subclass_keeps_fields():
    class TestRecord(record('a', 'b')):
        pass

    class SubRecord(TestRecord):
        pass

    b = SubRecord(1, 2)
    assert isinstance(b, TestRecord)
    assert b._fields == ('a', 'b')


def test_bad_parameter():
    with pytest.raises(ValueError):
        class TestRecord(record(True)):
            pass


def test_unsigned():
    assert unsigned(0) == 0
    assert unsigned(7, 'length') == 7


def test_unsigned_negative():
    with pytest.raises(ValueError) as info:
        unsigned(-1, 'offset')
    assert 'offset' in str(info.value)


@pytest.mark.parametrize('value', [1.5, '1', None, True])
def test_unsigned_not_integer(value):
    with pytest.raises(TypeError):
        unsigned(value)


def test_byte_view_bytes():
    view = byte_view(b'abc')
    assert view.format == 'B'
    assert view.tobytes() == b'abc'


def test_byte_view_cast():
    storage = array.array('I', [0])
    view = byte_view(storage)
    assert view.format == 'B'
    assert len(view) == storage.itemsize


def test_byte_view_not_contiguous():
    with pytest.raises(ValueError):
        byte_view(memoryview(array.array('H', [1, 2, 3, 4]))[::2])
