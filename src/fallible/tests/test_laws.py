"""Property tests for the algebraic laws of Result."""

from __future__ import annotations

from hypothesis import given, strategies as st

from fallible import Err, Ok, Result, both, from_optional

values = st.integers()
errors = st.text(max_size=8)
results: st.SearchStrategy[Result[int, str]] = st.one_of(values.map(Ok), errors.map(Err))


@given(results)
def test_exactly_one_side_present(result: Result[int, str]) -> None:
    assert (result.value is not None) != (result.error is not None)
    assert result.is_ok() != result.is_err()


@given(results)
def test_map_identity(result: Result[int, str]) -> None:
    assert result.map(lambda x: x) == result


@given(results)
def test_map_composition(result: Result[int, str]) -> None:
    f, g = (lambda x: x + 1), (lambda x: x * 3)
    assert result.map(f).map(g) == result.map(lambda x: g(f(x)))


@given(values)
def test_flat_map_left_identity(v: int) -> None:
    f = lambda x: Ok(x - 1) if x % 2 else Err(str(x))  # noqa: E731
    assert Ok(v).flat_map(f) == f(v)


@given(results)
def test_flat_map_right_identity(result: Result[int, str]) -> None:
    assert result.flat_map(Ok) == result


@given(results)
def test_map_is_flat_map_of_ok(result: Result[int, str]) -> None:
    assert result.map(str) == result.flat_map(lambda v: Ok(str(v)))


@given(results)
def test_map_err_is_flat_map_err_of_err(result: Result[int, str]) -> None:
    assert result.map_err(len) == result.flat_map_err(lambda e: Err(len(e)))


@given(results, results)
def test_both_matches_nested_flat_map(left: Result[int, str], right: Result[int, str]) -> None:
    expected = left.flat_map(lambda a: right.map(lambda b: (a, b)))
    assert both(left, lambda: right) == expected


@given(errors, results)
def test_both_never_evaluates_right_after_err(e: str, right: Result[int, str]) -> None:
    calls: list[None] = []

    def rhs() -> Result[int, str]:
        calls.append(None)
        return right

    assert Err(e).both(rhs) == Err(e)
    assert calls == []


@given(st.one_of(st.none(), values), errors)
def test_from_optional(value: int | None, e: str) -> None:
    result = from_optional(value, lambda: e)
    assert result == (Err(e) if value is None else Ok(value))
