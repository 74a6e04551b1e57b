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

"""Common test utilities for the ``tests`` package."""

import pytest


def parametrize(*values):
    """Idiomatic test parametrization.

    Parametrizes single parameter testing functions.
    The assumption is that the function decorated uses something
    like a ``namedtuple`` as its sole argument.

    Makes the ``id`` string be based on the parameter value's ``__str__``
    method.

    Examples:
        Usage of this decorator typically looks something like::

            class _P(record('desc', 'segments', 'expected')):
                def __str__(self):
                    return self.desc

            @tests.parametrize(
                _P('ONE', [b'ab'], b'ab'),
                _P('TWO', [b'a', b'b'], b'ab'),
            )
            def test_concat(p):
                assert MemView(p.segments).tobytes() == p.expected

    Args:
        values (Sequence[Any]): A sequence of values to pass to a single argument
            function.

    Returns:
        pytest.mark.parametrize: The decorator.
    """
    values = tuple((value,) for value in values)
    def decorator(func):
        if func.__code__.co_argcount != 1:
            raise ValueError('Expected a function with a single parameter.')
        argname = func.__code__.co_varnames[0]
        real_decorator = pytest.mark.parametrize(
            argnames=[argname],
            argvalues=values,
            ids=lambda x: str(x).replace('.', '_')
        )
        return real_decorator(func)

    return decorator


def hello_world():
    """The segments ``hello``, ``world`` and ``!`` as separately allocated buffers."""
    return [bytearray(b'hello'), bytearray(b'world'), bytearray(b'!')]
