"""Tests for the Option type."""

import pytest

import optres as opr


class TestSome:
    """Behavior of the `Some` variant."""

    def test_type_tag(self) -> None:
        """Test that the tag is the Some marker."""
        assert opr.Some("test").type is opr.OptionType.SOME

    def test_predicates(self) -> None:
        """Test is_some/is_none on Some."""
        opt: opr.Option[str] = opr.Some("test")
        assert opt.is_some() is True
        assert opt.is_none() is False

    def test_match_calls_some_branch(self) -> None:
        """Test that match runs the some arm with the value."""
        result = opr.Some("test").match(some=lambda v: f"Some {v}", none="None")
        assert result == "Some test"

    def test_match_does_not_call_none_thunk(self) -> None:
        """Test that the none thunk is left alone on Some."""
        calls: list[str] = []

        def _none() -> str:
            calls.append("none")
            return "None"

        assert opr.Some(1).match(some=str, none=_none) == "1"
        assert calls == []

    def test_map(self) -> None:
        """Test map wraps the mapped value in Some."""
        assert opr.Some("test").map(len) == opr.Some(4)

    def test_map_does_not_mutate(self) -> None:
        """Test map returns a new container."""
        original = opr.Some(1)
        mapped = original.map(lambda x: x + 1)
        assert original.unwrap() == 1
        assert mapped is not original

    def test_map_to_none_raises(self) -> None:
        """Test that mapping to Python's None is refused."""
        with pytest.raises(TypeError):
            opr.Some(1).map(lambda _: None)

    def test_and_then(self) -> None:
        """Test and_then returns the callback result."""
        assert opr.Some("test").and_then(lambda v: opr.Some(len(v))).unwrap() == 4
        assert opr.Some("test").and_then(lambda _: opr.NONE) == opr.NONE

    def test_or_returns_self(self) -> None:
        """Test or_ keeps the original Some."""
        opt = opr.Some("test")
        assert opt.or_(opr.Some("other")) is opt

    def test_or_else_skips_callback(self) -> None:
        """Test or_else does not call the fallback on Some."""

        def _fail() -> opr.Option[str]:
            raise AssertionError

        assert opr.Some("test").or_else(_fail).unwrap() == "test"

    def test_and_returns_other(self) -> None:
        """Test and_ returns the passed option."""
        assert opr.Some("test").and_(opr.Some("other")).unwrap() == "other"
        assert opr.Some("test").and_(opr.NONE).is_none()

    def test_unwrap_variants(self) -> None:
        """Test the extraction methods on Some."""
        opt = opr.Some("test")
        assert opt.unwrap() == "test"
        assert opt.unwrap_or("default") == "test"
        assert opt.unwrap_or_else(lambda: "default") == "test"
        assert opt.expect("should be there") == "test"

    def test_inspect(self) -> None:
        """Test inspect runs the callback and returns the same instance."""
        seen: list[str] = []
        opt = opr.Some("test")
        assert opt.inspect(seen.append) is opt
        assert seen == ["test"]

    def test_rejects_python_none(self) -> None:
        """Test that Some cannot wrap Python's None."""
        with pytest.raises(TypeError, match="use NONE instead"):
            opr.Some(None)

    def test_falsy_values_are_valid(self) -> None:
        """Test that falsy values other than None are valid payloads."""
        for value in (0, "", [], False):
            assert opr.Some(value).is_some()

    def test_immutable(self) -> None:
        """Test that the payload cannot be reassigned."""
        opt = opr.Some(1)
        with pytest.raises(AttributeError):
            opt.value = 2  # type: ignore[misc]


class TestNone:
    """Behavior of the `NONE` variant."""

    def test_type_tag(self) -> None:
        """Test that the tag is the None marker."""
        assert opr.NONE.type is opr.OptionType.NONE

    def test_predicates(self) -> None:
        """Test is_some/is_none on NONE."""
        assert opr.NONE.is_some() is False
        assert opr.NONE.is_none() is True

    def test_match_with_thunk(self) -> None:
        """Test that a callable none arm is invoked."""
        assert opr.NONE.match(some=lambda v: f"Some {v}", none=lambda: "None") == "None"

    def test_match_with_literal(self) -> None:
        """Test that a non-callable none arm is returned as is."""
        assert opr.NONE.match(some=lambda v: f"Some {v}", none="None") == "None"
        assert opr.NONE.match(some=lambda v: v, none=0) == 0

    def test_match_does_not_call_some(self) -> None:
        """Test that the some arm is left alone on NONE."""

        def _fail(_: object) -> str:
            raise AssertionError

        assert opr.NONE.match(some=_fail, none="fallback") == "fallback"

    def test_map_short_circuits(self) -> None:
        """Test map returns NONE without calling the function."""
        calls: list[object] = []
        assert opr.NONE.map(calls.append) == opr.NONE
        assert calls == []

    def test_and_then_short_circuits(self) -> None:
        """Test and_then returns NONE without calling the function."""
        calls: list[object] = []

        def _track(v: object) -> opr.Option[object]:
            calls.append(v)
            return opr.Some(v)

        assert opr.NONE.and_then(_track) == opr.NONE
        assert calls == []

    def test_or_returns_other(self) -> None:
        """Test or_ returns the alternative."""
        other = opr.Some("other")
        assert opr.NONE.or_(other) is other
        assert opr.NONE.or_else(lambda: other) is other

    def test_and_returns_none(self) -> None:
        """Test and_ stays NONE."""
        assert opr.NONE.and_(opr.Some("other")) == opr.NONE

    def test_unwrap_or(self) -> None:
        """Test the default is returned."""
        assert opr.NONE.unwrap_or("default") == "default"
        assert opr.NONE.unwrap_or_else(lambda: "computed") == "computed"

    def test_unwrap_raises(self) -> None:
        """Test unwrap raises with the fixed message."""
        with pytest.raises(opr.OptionUnwrapError, match=r"^Trying to unwrap None\.$"):
            opr.NONE.unwrap()

    def test_expect_raises_with_message(self) -> None:
        """Test expect raises with the caller message."""
        with pytest.raises(opr.OptionUnwrapError, match="^missing config$"):
            opr.NONE.expect("missing config")

    def test_unwrap_error_is_runtime_error(self) -> None:
        """Test the error class hierarchy."""
        assert issubclass(opr.OptionUnwrapError, RuntimeError)
        assert not issubclass(opr.OptionUnwrapError, ReferenceError)

    def test_inspect(self) -> None:
        """Test inspect does not call the callback and returns the same instance."""
        calls: list[object] = []
        assert opr.NONE.inspect(calls.append) is opr.NONE
        assert calls == []

    def test_tag_based_equality(self) -> None:
        """Test any NoneOption equals the singleton."""
        assert opr.NoneOption() == opr.NONE
        assert opr.NONE != opr.Some(0)
        assert repr(opr.NONE) == "NONE"


def test_from_nullable() -> None:
    """Test conversion from nullable values."""
    assert opr.Option.from_nullable(None) is opr.NONE
    assert opr.Option.from_nullable(0) == opr.Some(0)


def test_functor_identity() -> None:
    """Test that mapping the identity keeps variant and payload."""
    for opt in (opr.Some(3), opr.NONE):
        assert opt.map(lambda x: x) == opt


@pytest.mark.parametrize("value", [0, 1, "a", (1, 2)])
def test_monad_left_identity(value: object) -> None:
    """Test that Some(v).and_then(f) == f(v)."""

    def f(v: object) -> opr.Option[str]:
        return opr.Some(repr(v))

    assert opr.Some(value).and_then(f) == f(value)


def test_into() -> None:
    """Test piping an option into a function."""
    assert opr.Some(2).into(lambda opt, n: opt.unwrap_or(0) * n, 3) == 6
    assert opr.NONE.into(lambda opt, n: opt.unwrap_or(0) * n, 3) == 0
