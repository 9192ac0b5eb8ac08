"""Copyright 2011 Herman Sheremetyev. All rights reserved.

Redistribution and use in source and binary forms, with or without
modification, are permitted provided that the following conditions are met:

   1. Redistributions of source code must retain the above copyright notice,
   this list of conditions and the following disclaimer.

   2. Redistributions in binary form must reproduce the above copyright notice,
   this list of conditions and the following disclaimer in the documentation
   and/or other materials provided with the distribution.

THIS SOFTWARE IS PROVIDED BY THE AUTHOR ``AS IS'' AND ANY EXPRESS OR IMPLIED
WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE IMPLIED WARRANTIES OF
MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO
EVENT SHALL THE AUTHOR OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT,
INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT
LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR
PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF
LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE
OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF
ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.  """


import contextlib

from mockexpect.exceptions import CallCountMismatch
from mockexpect.exceptions import InterceptionError
from mockexpect.expectation import CallRecord
from mockexpect.expectation import Mock
from mockexpect.helpers import _is_argument_list
from mockexpect.helpers import _split_argument_sets
from mockexpect.wrap import ClassWrap
from mockexpect.wrap import Wrap


def _assert_times(method_name, message, times, called):
    error = 'Expected %s to be called %s times, but was called %s times' % (
        method_name, times, called)
    if message:
        error = '%s.\n%s' % (message, error)
    if times != called:
        raise CallCountMismatch(error, times, called)


@contextlib.contextmanager
def assert_called(obj, method_name, message=None, times=1, returns=None):
    """Asserts that the method will be called on the object in the block.

    Examples:
        >>> with assert_called(post, 'title'):
        ...     post.title()

        >>> with assert_called(post, 'title', times=2, returns='Draft'):
        ...     post.title()
        ...     post.title()

    Args:
        - obj: object (or class or module) the method is called on
        - method_name: string name of the method
        - message: optional text prepended to the failure message
        - times: number of calls expected, defaults to 1
        - returns: value every intercepted call returns

    Yields:
        CallRecord counting the calls made in the block
    """
    record = CallRecord(method_name, returns)
    try:
        with Wrap(obj, method_name, record):
            yield record
    finally:
        record.freeze()
    _assert_times(method_name, message, times, record.times_called)


@contextlib.contextmanager
def refute_called(obj, method_name, message=None):
    """Asserts that the method will not be called on the object in the block.

    Examples:
        >>> with refute_called(post, 'title'):
        ...     post.body()
    """
    with assert_called(obj, method_name, message, times=0) as record:
        yield record


assert_not_called = refute_called


@contextlib.contextmanager
def assert_called_with(obj, method_name, arguments, returns=None):
    """Asserts that the method will be called with the arguments in the block.

    A list whose elements are all lists or tuples is taken to describe several
    calls, one per element, expected in that order:

        >>> with assert_called_with(post, 'add_comment', [['Nice'], ['Bye']]):
        ...     post.add_comment('Nice')
        ...     post.add_comment('Bye')

    Anything else is the argument list of a single call:

        >>> with assert_called_with(post, 'add_comment', ['Nice'], returns=1):
        ...     post.add_comment('Nice')

    Raises:
        MockExpectationError when the arguments, order or number of calls
        do not match
    """
    if not _is_argument_list(arguments):
        raise InterceptionError(
            'arguments must be a list or tuple, got %r' % (arguments,))
    mock = Mock(method_name)
    for args in _split_argument_sets(arguments):
        mock.expect(returns, args)
    with Wrap(obj, method_name, mock):
        yield mock
    mock.verify()


@contextlib.contextmanager
def assert_called_on_instance_of(klass, method_name, message=None, times=1,
                                 returns=None):
    """Asserts that the method will be called on an instance of the class.

    Every instance, including ones created inside the block, shares the
    replacement and the call count. Different methods can be nested:

        >>> with assert_called_on_instance_of(Post, 'title', times=2):
        ...     with assert_called_on_instance_of(Post, 'body'):
        ...         post.title()
        ...         post.body()
        ...         Post().title()

    Intercepting the same method of the same class twice at once raises
    AlreadyMocked.
    """
    record = CallRecord(method_name, returns)
    try:
        with ClassWrap(klass, method_name, record):
            yield record
    finally:
        record.freeze()
    _assert_times(method_name, message, times, record.times_called)


@contextlib.contextmanager
def refute_called_on_instance_of(klass, method_name, message=None):
    """Asserts that the method will not be called on an instance of the class.
    """
    with assert_called_on_instance_of(
            klass, method_name, message, times=0) as record:
        yield record


assert_not_called_on_instance_of = refute_called_on_instance_of


class MockExpectations(object):
    """Mixin exposing the call assertions as unittest.TestCase methods.

    Examples:
        >>> class PostTest(MockExpectations, unittest.TestCase):
        ...     def test_title(self):
        ...         with self.assert_called(self.post, 'title'):
        ...             self.post.title()
    """

    assert_called = staticmethod(assert_called)
    refute_called = staticmethod(refute_called)
    assert_not_called = refute_called
    assert_called_with = staticmethod(assert_called_with)
    assert_called_on_instance_of = staticmethod(assert_called_on_instance_of)
    refute_called_on_instance_of = staticmethod(refute_called_on_instance_of)
    assert_not_called_on_instance_of = refute_called_on_instance_of
