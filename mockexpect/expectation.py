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


from mockexpect.exceptions import InterceptionError
from mockexpect.exceptions import MockExpectationError
from mockexpect.helpers import _format_args
from mockexpect.helpers import _match_args


class CallRecord(object):
    """Counts calls to an intercepted method and returns a canned value.

    An instance is installed in place of the method itself. It is a plain
    callable rather than a function, so Python never binds it and calls made
    through an instance and through the class look the same.
    """

    def __init__(self, method, returns=None):
        self.method = method
        self.returns = returns
        self.calls = []
        self._times_called = 0
        self._frozen = False

    def __repr__(self):
        return '<CallRecord %s called %s times>' % (
            self.method, self._times_called)

    def __call__(self, *kargs, **kwargs):
        if self._frozen:
            raise InterceptionError(
                '%s is no longer intercepted' %
                _format_args(self.method, {'kargs': kargs, 'kwargs': kwargs}))
        self._times_called += 1
        self.calls.append((kargs, kwargs))
        return self.returns

    @property
    def times_called(self):
        return self._times_called

    def freeze(self):
        self._frozen = True


class ExpectedCall(object):

    def __init__(self, args, return_value=None):
        self.args = args
        self.return_value = return_value

    def __str__(self):
        return '%s => %r' % (_format_args('call', self.args), self.return_value)


class Mock(object):
    """Queue of expected calls, consumed strictly in order.

    Examples:
        >>> mock = Mock('add_comment').expect('Thanks!', ['Nice post.'])
        >>> mock('Nice post.')
        'Thanks!'
        >>> mock.verify()
        True
    """

    def __init__(self, method='call'):
        self.method = method
        self._expected_calls = []
        self._actual_calls = []
        self._failure = None

    def expect(self, return_value, args, kwargs=None):
        """Queues one expected call.

        Args:
            - return_value: value returned when the call is matched
            - args: positional arguments the call must be made with
            - kwargs: optional keyword arguments the call must be made with

        Returns:
            - self, i.e. can be chained with other expect() calls
        """
        arguments = {'kargs': tuple(args), 'kwargs': dict(kwargs or {})}
        self._expected_calls.append(ExpectedCall(arguments, return_value))
        return self

    def __call__(self, *kargs, **kwargs):
        arguments = {'kargs': kargs, 'kwargs': kwargs}
        index = len(self._actual_calls)
        if index >= len(self._expected_calls):
            self._fail('No more expects available for %s' %
                       _format_args(self.method, arguments))
        expected = self._expected_calls[index]
        if not _match_args(arguments, expected.args):
            self._fail('mocked method %s expected, got %s' % (
                _format_args(self.method, expected.args),
                _format_args(self.method, arguments)))
        self._actual_calls.append(arguments)
        return expected.return_value

    def _fail(self, message):
        error = MockExpectationError(message)
        if self._failure is None:
            self._failure = error
        raise error

    def verify(self):
        """Verifies every expected call was made with matching arguments.

        Raises:
            MockExpectationError
        """
        if self._failure is not None:
            raise MockExpectationError(str(self._failure))
        called = len(self._actual_calls)
        if called < len(self._expected_calls):
            expected = self._expected_calls[called]
            raise MockExpectationError(
                'expected %s, got %s of %s expected calls' % (
                    _format_args(self.method, expected.args), called,
                    len(self._expected_calls)))
        return True
