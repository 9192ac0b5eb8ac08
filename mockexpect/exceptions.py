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


class InterceptionError(Exception):
    pass


class AttemptingToMockBuiltin(InterceptionError):
    pass


class MethodDoesNotExist(InterceptionError):
    pass


class AlreadyMocked(InterceptionError):
    pass


class MockExpectationError(InterceptionError):
    """Raised when expected calls are made with the wrong arguments or count."""


class CallCountMismatch(AssertionError):
    """Call count assertion failure.

    Attributes:
        - message: the formatted explanation without the expected/actual diff
        - expected: number of calls the assertion expected
        - actual: number of calls that were recorded
    """

    def __init__(self, message, expected, actual):
        self.message = message
        self.expected = expected
        self.actual = actual
        AssertionError.__init__(self, str(self))

    def __str__(self):
        return '%s.\nExpected: %s\n  Actual: %s' % (
            self.message, self.expected, self.actual)
