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

"""A contiguous address space over discrete segments of memory.

A memory view maps a logical address space (the "view") onto a sequence of buffers that need not
be adjacent in memory. For example, two separately allocated buffers::

    Memory address   Name
    0x08000-0x0c000  BUFFER1
    0x10000-0x11000  BUFFER2

can be addressed as if ``BUFFER2`` was located immediately after ``BUFFER1``::

    View offset      Name
    0x0000-0x4000    BUFFER1
    0x4000-0x5000    BUFFER2

Editors and stream buffers use this to consume bytes from the front without moving the bytes
that remain.
"""

import logging

from collections import deque

from .exceptions import AllocationError, RangeError
from .segment import Segment
from .util import byte_view, unsigned

logger = logging.getLogger(__name__)


def _as_segment(item):
    """Builds a view-owned descriptor from a segment, a ``(storage, length)`` pair or a buffer."""
    if isinstance(item, tuple):
        if len(item) != 2:
            raise TypeError('Expected a (storage, length) pair, got %d items' % len(item))
        storage, length = item
        return Segment.wrap(storage, length)
    return Segment.wrap(item)


class MemView(object):
    """A read-only view over an ordered sequence of segments, as though they were concatenated.

    The view never copies, mutates or frees the storage behind its segments; the caller must keep
    that storage alive (and unresized) for as long as the view is in use. Views are not
    thread-safe: callers sharing one between threads must serialize every call.

    Examples:
        >>> view = MemView([b'hello', b'world', b'!'])
        >>> view.read(3, 4)
        b'lowo'
        >>> view.discard_front(2)
        2
        >>> view.read(2, 7)
        b'oworld!'

    Args:
        segments (Iterable[Segment | (bytes-like, int) | bytes-like]): The segments, in view order.
        drop_empty (bool): Drop zero-length segments instead of keeping them in the table.

    Raises:
        AllocationError: if the segment table cannot be allocated.
    """
    def __init__(self, segments=(), drop_empty=False):
        table = deque()
        nbytes = 0
        try:
            for item in segments:
                segment = _as_segment(item)
                if drop_empty and segment.length == 0:
                    continue
                table.append(segment)
                nbytes += segment.length
        except MemoryError as e:
            raise AllocationError('Unable to allocate the segment table') from e
        # retired segments are popped, so every entry in the table is live
        self._segments = table
        self._nbytes = nbytes
        logger.debug('Created view of %d bytes over %d segments', nbytes, len(table))

    @property
    def nbytes(self):
        """Number of bytes remaining in the view."""
        return self._nbytes

    @property
    def released(self):
        return self._segments is None

    @property
    def segments(self):
        """Snapshot of the active segments, front first."""
        return tuple(self._live())

    def _live(self):
        segments = self._segments
        if segments is None:
            raise ValueError('operation forbidden on released memory view')
        return segments

    def _check_range(self, offset, length):
        offset = unsigned(offset, 'offset')
        length = unsigned(length, 'length')
        nbytes = self._nbytes
        if offset > nbytes or length > nbytes - offset:
            logger.debug('Rejected read of %d bytes at offset %d from %d byte view', length, offset, nbytes)
            raise RangeError(
                'Cannot read %d bytes at offset %d, view has %d bytes' % (length, offset, nbytes))
        return offset, length

    def _slices(self, offset, length):
        """Yields the segment slices covering a range that has already been bounds checked."""
        for (data, segment_len) in self._segments:
            if length == 0:
                return
            if offset >= segment_len:
                offset -= segment_len
                continue
            count = min(segment_len - offset, length)
            yield data[offset:offset + count]
            length -= count
            offset = 0

    def locate(self, offset):
        """Translate a view offset into ``(segment index, offset within that segment)``.

        The index is relative to :attr:`segments`. Zero-length segments are never returned.

        Raises:
            RangeError: if ``offset`` is not less than :attr:`nbytes`.
        """
        segments = self._live()
        offset = unsigned(offset, 'offset')
        if offset >= self._nbytes:
            raise RangeError('Offset %d is outside of %d byte view' % (offset, self._nbytes))
        for (index, (_, segment_len)) in enumerate(segments):
            if offset < segment_len:
                return index, offset
            offset -= segment_len
        raise AssertionError('Segment table does not add up to %d bytes' % self._nbytes)

    def slices(self, offset, length):
        """Returns the list of segment slices which together make up ``length`` bytes at ``offset``.

        No bytes are copied, which suits scatter/gather writes such as ``socket.sendmsg``.

        Raises:
            RangeError: if the range does not lie within the view.
        """
        self._live()
        offset, length = self._check_range(offset, length)
        return [chunk.toreadonly() for chunk in self._slices(offset, length)]

    def read(self, offset, length):
        """Copy ``length`` bytes starting at view ``offset``.

        Raises:
            RangeError: if the range does not lie within the view. Reads are never short.
        """
        self._live()
        offset, length = self._check_range(offset, length)
        return b''.join(self._slices(offset, length))

    def read_into(self, offset, destination, length=None):
        """Copy bytes starting at view ``offset`` into ``destination``, returning the number copied.

        Args:
            offset (int): The view offset to start from.
            destination (bytes-like): A writable buffer of at least ``length`` bytes.
            length (Optional[int]): The number of bytes to copy, defaulting to ``len(destination)``.

        Raises:
            RangeError: if the range does not lie within the view; ``destination`` is untouched.
            TypeError: if ``destination`` is not a writable buffer.
            ValueError: if ``destination`` is smaller than ``length``.
        """
        self._live()
        out = byte_view(destination)
        if out.readonly:
            raise TypeError('Destination buffer is read-only')
        if length is None:
            length = len(out)
        offset, length = self._check_range(offset, length)
        if length > len(out):
            raise ValueError('Destination holds %d bytes, %d were requested' % (len(out), length))

        cursor = 0
        for chunk in self._slices(offset, length):
            end = cursor + len(chunk)
            out[cursor:end] = chunk
            cursor = end
        return cursor

    def read_slice(self, offset, length):
        """Read ``length`` bytes at ``offset`` as a read-only ``memoryview``.

        Bytes are only copied if the read requires bridging segments; otherwise the result
        shares the segment's storage.

        Raises:
            RangeError: if the range does not lie within the view.
        """
        self._live()
        offset, length = self._check_range(offset, length)
        pieces = list(self._slices(offset, length))
        if len(pieces) == 1:
            return pieces[0].toreadonly()

        combined = bytearray(length)
        cursor = 0
        for chunk in pieces:
            combined[cursor:cursor + len(chunk)] = chunk
            cursor += len(chunk)
        return memoryview(combined).toreadonly()

    def discard_front(self, count):
        """Drop ``count`` bytes from the start of the view, returning the number dropped.

        Offsets past ``count`` shift down by ``count``. Discarding more than :attr:`nbytes`
        empties the view. Cost is proportional to the number of segments retired, not to
        ``count``.
        """
        segments = self._live()
        count = unsigned(count, 'count')
        nbytes = self._nbytes
        if count >= nbytes:
            retired = len(segments)
            segments.clear()
            self._nbytes = 0
            logger.debug('Discarded %d bytes (%d requested), retired %d segments', nbytes, count, retired)
            return nbytes

        remaining = count
        retired = 0
        # count < nbytes, so some segment is longer than what is left to discard.
        while segments[0].length <= remaining:
            remaining -= segments.popleft().length
            retired += 1
        if remaining:
            segments[0] = segments[0].advance(remaining)
        self._nbytes = nbytes - count
        logger.debug('Discarded %d bytes, retired %d segments', count, retired)
        return count

    def tobytes(self):
        """Copy the whole view into a single ``bytes``."""
        return self.read(0, self._nbytes)

    def release(self):
        """Release the segment table and the view's own slices of the storage.

        The storage itself is left alone; a ``bytearray`` can be resized again once every view
        over it has been released. Releasing twice is harmless.
        """
        segments = self._segments
        if segments is None:
            return
        self._segments = None
        self._nbytes = 0
        for segment in segments:
            segment.data.release()
        logger.debug('Released view of %d segments', len(segments))

    def __enter__(self):
        self._live()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.release()

    def __bytes__(self):
        return self.tobytes()

    def __len__(self):
        """Length of data in bytes remaining in the view."""
        return self._nbytes

    def __repr__(self):
        if self._segments is None:
            return '<released MemView>'
        return '<MemView nbytes=%d segments=%d>' % (self._nbytes, len(self._segments))
