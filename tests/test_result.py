"""Tests for the Result type (Success and Failure) and its sync combinators."""

from __future__ import annotations

import pytest
from hypothesis import given

from railyard import (
    Failure,
    Result,
    Success,
    UnwrappedFailure,
    is_failure,
    is_success,
    of_failure,
    of_success,
)
from tests.strategies import int_functions, integers, results, texts


class TestConstruction:
    """Tests for Success/Failure instantiation and basic properties."""

    def test_of_success(self):
        """of_success wraps a value."""
        assert of_success(42) == Success(42)
        assert of_success(42).value == 42

    def test_of_failure(self):
        """of_failure wraps an error payload."""
        assert of_failure('bad') == Failure('bad')
        assert of_failure('bad').error == 'bad'

    def test_failure_with_exception_payload(self):
        """Failure can hold exception objects."""
        exc = ValueError('something went wrong')
        assert Failure(exc).error is exc

    def test_success_is_frozen(self):
        """Success instances are immutable."""
        ok = Success(42)
        with pytest.raises(AttributeError):
            ok.value = 100  # type: ignore[misc]

    def test_failure_is_frozen(self):
        """Failure instances are immutable."""
        err = Failure('error')
        with pytest.raises(AttributeError):
            err.error = 'other'  # type: ignore[misc]

    def test_repr(self):
        assert repr(Success(1)) == 'Success(1)'
        assert repr(Failure('x')) == "Failure('x')"

    def test_truthiness_is_forbidden(self):
        """bool() on a Result raises instead of guessing."""
        with pytest.raises(TypeError, match='no truth value'):
            bool(Success(1))
        with pytest.raises(TypeError, match='no truth value'):
            bool(Failure('x'))

    def test_pattern_matching(self):
        """Both variants support structural pattern matching."""

        def describe(r: Result[int, str]) -> str:
            match r:
                case Success(value):
                    return f'ok:{value}'
                case Failure(error):
                    return f'err:{error}'

        assert describe(Success(1)) == 'ok:1'
        assert describe(Failure('x')) == 'err:x'


class TestEquality:
    """Tests for Result equality and hashing."""

    def test_success_equality(self):
        assert Success(42) == Success(42)
        assert Success(42) != Success(43)

    def test_failure_equality(self):
        assert Failure('error') == Failure('error')
        assert Failure('error1') != Failure('error2')

    def test_success_not_equal_to_failure(self):
        """Variants never compare equal, even with equal payloads."""
        assert Success(42) != Failure(42)
        assert Failure(42) != Success(42)

    def test_hashable(self):
        assert hash(Success(42)) == hash(Success(42))
        assert {Failure('e'): 'v'}[Failure('e')] == 'v'


class TestQueries:
    """Tests for is_success/is_failure and the guard accessors."""

    def test_success_discriminant(self):
        assert Success(1).is_success() is True
        assert Success(1).is_failure() is False

    def test_failure_discriminant(self):
        assert Failure('e').is_success() is False
        assert Failure('e').is_failure() is True

    def test_type_guards(self):
        assert is_success(Success(1))
        assert not is_success(Failure('e'))
        assert is_failure(Failure('e'))
        assert not is_failure(Success(1))

    def test_guard_success_on_success(self):
        assert Success(5).guard_success() == (True, 5, None)

    def test_guard_success_on_failure(self):
        assert Failure('e').guard_success() == (False, None, 'e')

    def test_guard_failure_on_failure(self):
        assert Failure('e').guard_failure() == (True, None, 'e')

    def test_guard_failure_on_success(self):
        assert Success(5).guard_failure() == (False, 5, None)

    def test_guard_does_not_infer_from_payload(self):
        """A None payload still reports the correct variant."""
        assert Success(None).guard_success() == (True, None, None)
        assert Failure(None).guard_failure() == (True, None, None)

    @given(results)
    def test_exactly_one_variant(self, r):
        """Exactly one of is_success/is_failure holds."""
        assert r.is_success() != r.is_failure()


class TestMap:
    """Tests for map, map_error and map_try."""

    def test_success_map(self):
        assert of_success(4).map(lambda x: x * 2) == Success(8)

    def test_map_chain_changes_type(self):
        assert Success(5).map(lambda x: x * 2).map(str) == Success('10')

    def test_failure_map_never_calls(self):
        calls = []
        assert Failure('bad').map(calls.append) == Failure('bad')
        assert calls == []

    def test_success_map_error_passes_through(self):
        calls = []
        assert Success(1).map_error(calls.append) == Success(1)
        assert calls == []

    def test_failure_map_error_recovers_to_success(self):
        """map_error derives a success value from the error."""
        assert Failure('bad').map_error(len) == Success(3)

    def test_map_try_success(self):
        assert Success(10).map_try(lambda x: 100 // x, str) == Success(10)

    def test_map_try_intercepts(self):
        result = Success(0).map_try(lambda x: 100 // x, lambda e: type(e).__name__)
        assert result == Failure('ZeroDivisionError')

    def test_map_try_failure_skips_both(self):
        calls = []
        result = Failure('bad').map_try(calls.append, calls.append)
        assert result == Failure('bad')
        assert calls == []

    def test_map_try_recover_exception_propagates(self):
        def broken(e: Exception) -> str:
            raise RuntimeError('recovery broke')

        with pytest.raises(RuntimeError, match='recovery broke'):
            Success(0).map_try(lambda x: 1 // x, broken)

    def test_map_propagates_callback_exception(self):
        """Non-try combinators offer no safety net."""
        with pytest.raises(ZeroDivisionError):
            Success(0).map(lambda x: 1 // x)

    @given(results)
    def test_map_identity(self, r):
        assert r.map(lambda x: x) == r

    @given(results, int_functions, int_functions)
    def test_map_composition(self, r, f, g):
        assert r.map(f).map(g) == r.map(lambda x: g(f(x)))


class TestBind:
    """Tests for bind, bind_error and bind_try."""

    def test_success_bind_flattens(self):
        assert Success(5).bind(lambda x: Success(x * 2)) == Success(10)

    def test_success_bind_to_failure(self):
        assert Success(5).bind(lambda x: Failure('too big')) == Failure('too big')

    def test_failure_bind_short_circuits(self):
        calls = []

        def step(x):
            calls.append(x)
            return of_success(x + 1)

        assert of_failure('bad').bind(step) == Failure('bad')
        assert calls == []

    def test_success_bind_error_passes_through(self):
        calls = []
        assert Success(1).bind_error(calls.append) == Success(1)
        assert calls == []

    def test_failure_bind_error_recovers(self):
        assert Failure('missing').bind_error(lambda e: Success(0)) == Success(0)

    def test_failure_bind_error_remaps_error_type(self):
        assert Failure('404').bind_error(lambda e: Failure(int(e))) == Failure(404)

    def test_bind_try_success(self):
        assert Success(2).bind_try(lambda x: Success(x + 1), lambda e: Failure(str(e))) == Success(3)

    def test_bind_try_intercepts(self):
        def parse(x: str) -> Result[int, str]:
            return Success(int(x))

        result = Success('nope').bind_try(parse, lambda e: Failure(type(e).__name__))
        assert result == Failure('ValueError')

    def test_bind_try_recover_may_succeed(self):
        result = Success('nope').bind_try(lambda x: Success(int(x)), lambda e: Success(-1))
        assert result == Success(-1)

    def test_bind_try_failure_skips_both(self):
        calls = []
        assert Failure('bad').bind_try(calls.append, calls.append) == Failure('bad')
        assert calls == []

    @given(integers)
    def test_bind_left_identity(self, x):
        def f(v):
            return Success(v * 3)

        assert of_success(x).bind(f) == f(x)

    @given(results)
    def test_bind_right_identity(self, r):
        assert r.bind(of_success) == r


class TestHooks:
    """Tests for on_success, on_error and on_success_try."""

    def test_on_success_records_value(self):
        seen = []
        result = of_success(4).map(lambda x: x * 2).on_success(lambda v: seen.append(str(v)))
        assert result == Success(8)
        assert seen == ['8']

    def test_on_success_returns_same_instance(self):
        ok = Success(1)
        assert ok.on_success(lambda v: None) is ok

    def test_failure_on_success_not_called(self):
        calls = []
        assert Failure('e').on_success(calls.append) == Failure('e')
        assert calls == []

    def test_on_error_records_error(self):
        seen = []
        err = Failure('e')
        assert err.on_error(seen.append) is err
        assert seen == ['e']

    def test_success_on_error_not_called(self):
        calls = []
        assert Success(1).on_error(calls.append) == Success(1)
        assert calls == []

    def test_on_success_try_passes_through(self):
        seen = []
        ok = Success(1)
        assert ok.on_success_try(seen.append, str) is ok
        assert seen == [1]

    def test_on_success_try_converts_exception(self):
        def explode(v):
            raise OSError('disk full')

        assert Success(1).on_success_try(explode, str) == Failure('disk full')

    def test_on_success_try_failure_skips(self):
        calls = []
        assert Failure('e').on_success_try(calls.append, calls.append) == Failure('e')
        assert calls == []

    def test_on_success_propagates_exception(self):
        def explode(v):
            raise OSError('disk full')

        with pytest.raises(OSError, match='disk full'):
            Success(1).on_success(explode)

    @given(results)
    def test_hooks_are_identity(self, r):
        assert r.on_success(lambda v: None) == r
        assert r.on_error(lambda e: None) == r


class TestMatch:
    """Tests for match."""

    def test_match_success(self):
        assert Success(2).match(lambda v: v * 10, len) == 20

    def test_match_failure(self):
        assert Failure('abc').match(lambda v: v * 10, len) == 3

    def test_match_calls_exactly_one_branch(self):
        calls = []
        Success(1).match(lambda v: calls.append('ok'), lambda e: calls.append('err'))
        Failure(1).match(lambda v: calls.append('ok'), lambda e: calls.append('err'))
        assert calls == ['ok', 'err']


class TestExpect:
    """Tests for forced extraction."""

    def test_success_expect(self):
        assert Success(42).expect() == 42

    def test_failure_expect_raises(self):
        with pytest.raises(UnwrappedFailure) as excinfo:
            Failure('bad').expect()

        exc = excinfo.value
        assert exc.error_type is str
        assert exc.error == 'bad'
        assert exc.cause is None
        assert exc.__cause__ is None
        assert exc.__suppress_context__ is False
        assert exc.message == "Unsuccessful unwrap of result: expected a success value, got Failure('bad')"

    def test_failure_expect_keeps_handled_exception_as_context(self):
        """Without a cause, an exception being handled stays in the traceback."""
        with pytest.raises(UnwrappedFailure) as excinfo:
            try:
                raise KeyError('original')
            except KeyError:
                Failure('bad').expect()

        exc = excinfo.value
        assert isinstance(exc.__context__, KeyError)
        assert exc.__cause__ is None
        assert exc.__suppress_context__ is False

    def test_failure_expect_names_expected_type(self):
        with pytest.raises(UnwrappedFailure, match='expected a success value of type int') as excinfo:
            Failure('bad').expect(expected=int)
        assert excinfo.value.error_type is str

    def test_success_expect_ignores_expected(self):
        assert Success(3).expect(expected=int) == 3

    def test_failure_expect_with_cause(self):
        cause = KeyError('user')
        with pytest.raises(UnwrappedFailure) as excinfo:
            Failure('missing').expect(cause)

        assert excinfo.value.cause is cause
        assert excinfo.value.__cause__ is cause

    def test_failure_expect_chains_exception_payload(self):
        payload = ValueError('bad input')
        with pytest.raises(UnwrappedFailure) as excinfo:
            Failure(payload).expect()

        assert excinfo.value.error_type is ValueError
        assert excinfo.value.__cause__ is payload

    def test_failure_expect_custom_message(self):
        with pytest.raises(UnwrappedFailure, match='config must load'):
            Failure('x').expect(msg='config must load')

    @given(texts)
    def test_expect_contract(self, e):
        with pytest.raises(UnwrappedFailure):
            of_failure(e).expect()


class TestTryApply:
    """Tests for the scoped try/catch over a whole Result."""

    def test_try_apply_returns_attempt_value(self):
        assert Success(2).try_apply(lambda r: r.expect() + 1, lambda e: -1) == 3

    def test_try_apply_catches(self):
        def attempt(r):
            raise ValueError('nope')

        assert Failure('x').try_apply(attempt, lambda e: str(e)) == 'nope'

    def test_try_apply_respects_exception_types(self):
        with pytest.raises(UnwrappedFailure):
            Failure('x').try_apply(lambda r: r.expect(), lambda e: 'caught', exceptions=(KeyError,))


class TestFixtures:
    """Combinator behaviour on the shared sample values."""

    def test_success_sample_flows_through_chain(self, sample_success):
        result = sample_success.map(lambda x: x + 1).bind(lambda x: Success(str(x))).on_error(print)
        assert result == Success('43')

    def test_failure_sample_skips_success_path(self, sample_failure):
        result = sample_failure.map(lambda x: x + 1).bind(lambda x: Success(str(x)))
        assert result is sample_failure
        assert result.match(lambda v: v, lambda e: e.upper()) == 'TEST ERROR'
