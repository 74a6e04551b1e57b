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

from .exceptions import AllocationError, MemViewException, RangeError
from .segment import Segment
from .view import MemView

__author__ = 'Amazon.com, Inc.'
__version__ = '0.1.0'

__all__ = [
    'AllocationError',
    'MemView',
    'MemViewException',
    'RangeError',
    'Segment',
    'exceptions',
    'json_encoder',
    'segment',
    'util',
    'view',
]
