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

"""Exceptions raised by memory views."""


class MemViewException(Exception):
    """Root exception for memory view errors."""


class AllocationError(MemViewException, MemoryError):
    """The bookkeeping for a view could not be allocated.

    The view was never constructed; the underlying storage is untouched.
    """


class RangeError(MemViewException, IndexError):
    """A read referenced bytes outside of ``[0, nbytes]``.

    The view is left unchanged and nothing was copied to the destination.
    """
