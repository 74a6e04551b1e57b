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

"""Descriptors of contiguous runs of borrowed bytes."""

from .util import byte_view, record, unsigned


class Segment(record('data', 'length')):
    """A contiguous run of bytes owned elsewhere.

    ``data`` is an unsigned byte ``memoryview`` over the storage and ``length`` is the number of
    valid bytes reachable from it; the two always agree. Segments are never mutated; advancing
    past consumed bytes produces a new descriptor over the same storage.

    Users should use :meth:`wrap` to build segments.

    Args:
        data (memoryview): The bytes of the segment.
        length (int): The number of bytes in ``data``.
    """
    __slots__ = ()

    @staticmethod
    def wrap(storage, length=None):
        """Describe the first ``length`` bytes of ``storage`` without copying them.

        Args:
            storage (bytes-like): Any object supporting the buffer protocol.
            length (Optional[int]): The number of bytes to expose, defaulting to all of ``storage``.

        Raises:
            TypeError: if ``storage`` is not a buffer or ``length`` is not an integer.
            ValueError: if ``length`` is negative or larger than ``storage``.
        """
        data = byte_view(storage)
        if length is None:
            length = len(data)
        else:
            length = unsigned(length, 'length')
            if length > len(data):
                raise ValueError(
                    'Segment length %d exceeds its %d byte storage' % (length, len(data)))
        return Segment(data[:length], length)

    def advance(self, count):
        """Returns a segment starting ``count`` bytes later in the same storage."""
        count = unsigned(count, 'count')
        if count > self.length:
            raise ValueError('Cannot advance %d bytes into a %d byte segment' % (count, self.length))
        return Segment(self.data[count:], self.length - count)

    def tobytes(self):
        return self.data.tobytes()

    def __repr__(self):
        return 'Segment(length=%d)' % self.length
