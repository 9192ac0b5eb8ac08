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


import inspect
import re


def _arg_to_str(arg):
    if isinstance(arg, re.Pattern):
        return '/%s/' % arg.pattern
    if isinstance(arg, tuple):
        args = ', '.join([_arg_to_str(a) for a in arg])
        return '(' + args + ')'
    if isinstance(arg, str):
        return '"%s"' % arg
    else:
        return '%s' % arg


def _format_args(method, arguments):
    if arguments is None:
        arguments = {'kargs': (), 'kwargs': {}}
    kargs = ', '.join(_arg_to_str(arg) for arg in arguments['kargs'])
    kwargs = ', '.join(
        '%s=%s' %
        (k, _arg_to_str(v)) for k, v in arguments['kwargs'].items())
    if kargs and kwargs:
        args = '%s, %s' % (kargs, kwargs)
    else:
        args = '%s%s' % (kargs, kwargs)
    return '%s(%s)' % (method, args)


def _match_args(given_args, expected_args):
    if given_args == expected_args:
        return True
    if (len(given_args['kargs']) != len(expected_args['kargs']) or
            given_args['kwargs'].keys() != expected_args['kwargs'].keys()):
        return False
    for i, arg in enumerate(given_args['kargs']):
        if not _arguments_match(arg, expected_args['kargs'][i]):
            return False
    for k, v in given_args['kwargs'].items():
        if not _arguments_match(v, expected_args['kwargs'][k]):
            return False
    return True


def _arguments_match(arg, expected_arg):
    if arg == expected_arg:
        return True
    elif _isclass(expected_arg) and isinstance(arg, expected_arg):
        return True
    elif (isinstance(expected_arg, re.Pattern) and isinstance(arg, str) and
            expected_arg.search(arg)):
        return True
    else:
        return False


def _is_argument_list(value):
    return isinstance(value, (list, tuple))


def _split_argument_sets(arguments):
    """Turns assert_called_with() arguments into one list per expected call.

    If every element is itself a list or tuple, each element is the argument
    list of a separate call. Otherwise the whole value is the argument list of
    a single call. An empty value therefore expects no calls at all, and a
    single call taking one list of lists has to be wrapped once more:
    [[[1], [2]]].
    """
    if all(_is_argument_list(argument) for argument in arguments):
        return [tuple(argument) for argument in arguments]
    return [tuple(arguments)]


def _mangle_name(obj, method):
    """Applies private name mangling, so '__secret' finds '_Post__secret'."""
    if (method.startswith('__') and not method.endswith('__') and
            not inspect.ismodule(obj)):
        if _isclass(obj):
            name = obj.__name__
        else:
            name = obj.__class__.__name__
        method = '_%s__%s' % (name.lstrip('_'), method.lstrip('_'))
    return method


def _isclass(obj):
    return inspect.isclass(obj)
