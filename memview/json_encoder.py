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

from base64 import standard_b64encode

from jsonconversion.encoder import JSONExtendedEncoder

from .segment import Segment
from .view import MemView


class MemViewToJSONEncoder(JSONExtendedEncoder):
    """JSON Encoder for memory views and their segments, for diagnostics. Used in the json.dumps method as the cls
    parameter: json.dumps(view, cls=MemViewToJSONEncoder)

    A view encodes as ``{"nbytes": ..., "segments": [...]}`` and a segment as ``{"length": ..., "data": ...}`` where
    ``data`` is the standard base64 of the segment's bytes. Pass ``include_data=False`` to only dump the lengths.
    """

    def __init__(self, *args, include_data=True, **kwargs):
        super(MemViewToJSONEncoder, self).__init__(*args, **kwargs)
        self.include_data = include_data

    def isinstance(self, obj, cls):
        # segments are tuples; keep them away from the list encoding.
        if isinstance(obj, Segment):
            return False
        return isinstance(obj, cls)

    def default(self, o):
        if isinstance(o, Segment):
            encoded = {'length': o.length}
            if self.include_data:
                encoded['data'] = standard_b64encode(o.data).decode('utf-8')
            return encoded
        elif isinstance(o, MemView):
            return {'nbytes': o.nbytes, 'segments': [self.default(segment) for segment in o.segments]}
        elif isinstance(o, memoryview):
            return standard_b64encode(o).decode('utf-8')
        return super(MemViewToJSONEncoder, self).default(o)
