"""
Unit tests for functions as values

identity -> deferred_identity -> some_functions -> some_named_functions
"""

import pytest


class TestIdentity:
    """A callable is a value"""

    @pytest.mark.parametrize('value', [0, 10, -3, 2.5, 'text', None, (1, 2), [1, 2]])
    def test_identity_returns_argument(self, value):
        """identity(x) == x"""
        from closure_objects.core.functions import identity

        assert identity(value) == value

    def test_identity_returns_same_object(self):
        """Should hand back the very object it was given"""
        from closure_objects.core.functions import identity

        payload = {'count': 1}
        assert identity(payload) is payload

    def test_identity_is_a_value(self):
        """Functions can be passed around like anything else"""
        from closure_objects.core.functions import identity

        alias = identity
        assert alias(5) == 5


class TestDeferredIdentity:
    """Returning a callable delays evaluation"""

    @pytest.mark.parametrize('value', [0, 10, 'text', None])
    def test_call_later(self, value):
        """deferred_identity(x)() == x"""
        from closure_objects.core.functions import deferred_identity

        assert deferred_identity(value)() == value

    def test_result_is_callable_not_value(self):
        """deferred_identity(x) is a callable, not x"""
        from closure_objects.core.functions import deferred_identity

        later = deferred_identity(10)

        assert callable(later)
        assert later != 10

    def test_each_call_captures_its_own_value(self):
        """Two deferred callables keep their own captured values"""
        from closure_objects.core.functions import deferred_identity

        ten = deferred_identity(10)
        twenty = deferred_identity(20)

        assert ten() == 10
        assert twenty() == 20
        assert ten() == 10


class TestSomeFunctions:
    """Several callables over one argument, by position"""

    def test_positional_results(self):
        """some_functions(10) -> 15, 10, 5"""
        from closure_objects.core.functions import some_functions

        fns = some_functions(10)

        assert len(fns) == 3
        assert fns[0]() == 15
        assert fns[1]() == 10
        assert fns[2](5) == 5

    def test_minus_without_argument_is_missing(self):
        """Calling minus without its argument answers MISSING"""
        from closure_objects.core.functions import MISSING, some_functions

        assert some_functions(10)[2]() is MISSING

    def test_minus_keeps_captured_value(self):
        """minus subtracts from the captured value every time"""
        from closure_objects.core.functions import some_functions

        minus = some_functions(10)[2]

        assert minus(3) == 7
        assert minus(3) == 7
        assert minus(-5) == 15


class TestSomeNamedFunctions:
    """The same callables by name: the first object shape"""

    def test_named_results(self):
        """some_named_functions(10) -> plus_five 15, just 10, minus(5) 5"""
        from closure_objects.core.functions import some_named_functions

        obj = some_named_functions(10)

        assert sorted(obj) == ['just', 'minus', 'plus_five']
        assert obj['plus_five']() == 15
        assert obj['just']() == 10
        assert obj['minus'](5) == 5

    def test_named_matches_positional(self):
        """Named and positional forms agree for the same argument"""
        from closure_objects.core.functions import some_functions, some_named_functions

        fns = some_functions(42)
        obj = some_named_functions(42)

        assert obj['plus_five']() == fns[0]()
        assert obj['just']() == fns[1]()
        assert obj['minus'](2) == fns[2](2)

    def test_minus_without_argument_is_missing(self):
        """Out of contract call answers MISSING, which is falsy"""
        from closure_objects.core.functions import MISSING, some_named_functions

        result = some_named_functions(10)['minus']()

        assert result is MISSING
        assert not result
        assert repr(result) == 'MISSING'
