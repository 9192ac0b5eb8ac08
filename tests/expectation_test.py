# -*- coding: utf8 -*-
from mockexpect import expectation
from mockexpect.exceptions import MockExpectationError
from mockexpect.expectation import CallRecord
from mockexpect.expectation import Mock
from mockexpect.helpers import _format_args
from mockexpect.helpers import _mangle_name
from mockexpect.helpers import _split_argument_sets
import doctest
import unittest


def assertRaises(exception, method, *kargs, **kwargs):
    try:
        method(*kargs, **kwargs)
    except exception as e:
        return e
    raise Exception('%s not raised' % exception.__name__)


def assertEqual(expected, received, msg=''):
    if not msg:
        msg = 'expected %s, received %s' % (expected, received)
    if expected != received:
        raise AssertionError('%s != %s : %s' % (expected, received, msg))


class RegularClass(object):

    def test_call_record_counts_and_returns(self):
        record = CallRecord('title', returns='stub')
        assertEqual('stub', record())
        assertEqual('stub', record(1, key='value'))
        assertEqual(2, record.times_called)
        assertEqual([((), {}), ((1,), {'key': 'value'})], record.calls)

    def test_call_record_times_called_is_read_only(self):
        record = CallRecord('title')
        def update():
            record.times_called = 5
        assertRaises(AttributeError, update)

    def test_mock_returns_expected_values_in_order(self):
        mock = Mock('add_comment')
        mock.expect(1, ['a']).expect(2, ['b'], {'notify': True})
        assertEqual(1, mock('a'))
        assertEqual(2, mock('b', notify=True))
        assert mock.verify()

    def test_mock_verify_reports_missing_call(self):
        mock = Mock('add_comment').expect(None, ['a'])
        error = assertRaises(MockExpectationError, mock.verify)
        assertEqual('expected add_comment("a"), got 0 of 1 expected calls',
                    str(error))

    def test_mock_rejects_wrong_arguments(self):
        mock = Mock('add_comment').expect(None, ['a'])
        error = assertRaises(MockExpectationError, mock, 'b')
        assertEqual('mocked method add_comment("a") expected, '
                    'got add_comment("b")', str(error))
        assertRaises(MockExpectationError, mock.verify)

    def test_mock_rejects_wrong_argument_count(self):
        mock = Mock().expect(None, ['a'])
        assertRaises(MockExpectationError, mock, 'a', 'b')

    def test_mock_docstring_examples(self):
        failures, _ = doctest.testmod(expectation)
        assertEqual(0, failures)

    def test_split_single_call(self):
        assertEqual([('x',)], _split_argument_sets(['x']))
        assertEqual([(['a'], 'b')], _split_argument_sets([['a'], 'b']))

    def test_split_multiple_calls(self):
        assertEqual([('x',), ('y', 1)], _split_argument_sets([['x'], ('y', 1)]))
        assertEqual([], _split_argument_sets([]))

    def test_format_args(self):
        assertEqual('title()', _format_args('title', None))
        assertEqual('add("a", 1, (2, 3), flag=True)', _format_args(
            'add', {'kargs': ('a', 1, (2, 3)), 'kwargs': {'flag': True}}))

    def test_mangle_name(self):
        class _Post(object):
            pass
        assertEqual('_Post__secret', _mangle_name(_Post, '__secret'))
        assertEqual('_Post__secret', _mangle_name(_Post(), '__secret'))
        assertEqual('__len__', _mangle_name(_Post, '__len__'))
        assertEqual('title', _mangle_name(_Post, 'title'))


class TestExpectationUnittest(RegularClass, unittest.TestCase):
    pass


if __name__ == '__main__':
    unittest.main()
