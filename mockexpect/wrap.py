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


import logging

from mockexpect.exceptions import AlreadyMocked
from mockexpect.exceptions import AttemptingToMockBuiltin
from mockexpect.exceptions import InterceptionError
from mockexpect.exceptions import MethodDoesNotExist
from mockexpect.helpers import _isclass
from mockexpect.helpers import _mangle_name


log = logging.getLogger(__name__)

# Holds (target, method) pairs that currently have a replacement installed
_intercepted = []

# Marks a method that was inherited rather than defined on the target itself
_ABSENT = object()


def _is_intercepted(target, method):
    return any(obj is target and name == method for obj, name in _intercepted)


def _forget(target, method):
    for i, (obj, name) in enumerate(_intercepted):
        if obj is target and name == method:
            del _intercepted[i]
            return


class Wrap(object):
    """Replaces one method on a single object for the duration of a block.

    Used as a context manager: the replacement is installed on __enter__ and
    the original restored on __exit__, whether or not the block raised.
    """

    def __init__(self, target, method, replacement):
        """Wrap constructor.

        Args:
            - target: object (or class or module) whose method is replaced
            - method: string name of the method to replace
            - replacement: callable invoked instead of the method
        """
        self.target = target
        self.method = _mangle_name(target, method)
        self.replacement = replacement
        self.original_method = _ABSENT
        self._installed = False

    def __enter__(self):
        self._validate()
        if _is_intercepted(self.target, self.method):
            raise AlreadyMocked('%s of %r is already intercepted' %
                                (self.method, self.target))
        self._capture()
        try:
            self._install(self.replacement)
        except TypeError:
            raise AttemptingToMockBuiltin(
                'Python does not allow updating builtin objects. '
                'Consider wrapping it in a class you can mock instead')
        except AttributeError:
            raise AttemptingToMockBuiltin(
                'Python does not allow updating instances of builtins. '
                'Consider wrapping it in a class you can mock instead')
        self._installed = True
        _intercepted.append((self.target, self.method))
        log.debug('intercepted %s on %r', self.method, self.target)
        return self.replacement

    def __exit__(self, exc_type, exc_value, traceback):
        self._restore()
        return False

    def _validate(self):
        if not hasattr(self.target, self.method):
            raise MethodDoesNotExist('%r does not have method %s' %
                                     (self.target, self.method))

    def _capture(self):
        obj = self.target
        if hasattr(obj, '__dict__') and self.method in obj.__dict__:
            self.original_method = obj.__dict__[self.method]
        else:
            self.original_method = _ABSENT

    def _install(self, value):
        obj = self.target
        if hasattr(obj, '__dict__') and type(obj.__dict__) is dict:
            obj.__dict__[self.method] = value
        else:
            setattr(obj, self.method, value)

    def _uninstall(self):
        obj = self.target
        if hasattr(obj, '__dict__') and type(obj.__dict__) is dict:
            del obj.__dict__[self.method]
        else:
            delattr(obj, self.method)

    def _restore(self):
        if not self._installed:
            return
        try:
            if self.original_method is _ABSENT:
                self._uninstall()
            else:
                self._install(self.original_method)
        finally:
            self._installed = False
            _forget(self.target, self.method)
            log.debug('restored %s on %r', self.method, self.target)


class ClassWrap(Wrap):
    """Replaces one method for every instance of a class.

    The class dict is global state, so restoration runs on every exit path
    and puts back exactly what was defined on the class before: the original
    function, or nothing at all when the method was inherited.
    """

    def _validate(self):
        if not _isclass(self.target):
            raise InterceptionError('%r is not a class' % (self.target,))
        Wrap._validate(self)
