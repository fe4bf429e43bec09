"""Tests for argument forwarding in map, flat_map, into and inspect."""

from collections.abc import Callable
from functools import partial

import pytest

import pyfold as pf


class TestMapArguments:
    """Test that extra arguments reach the mapper after the payload."""

    def test_multiple_args(self) -> None:
        """Test map with multiple positional arguments."""

        def add_three(a: int, b: int, c: int) -> int:
            return a + b + c

        assert pf.Optional.of(5).map(add_three, 3, 2).get() == 10
        assert pf.Either.right(5).map(add_three, 3, 2).get() == 10
        assert pf.Result.ok(5).map(add_three, 3, 2).get() == 10

    def test_kwargs(self) -> None:
        """Test map with keyword arguments."""

        def func_with_kwargs(a: int, b: int = 10, c: int = 20) -> int:
            return a + b + c

        assert pf.Optional.of(5).map(func_with_kwargs, b=15, c=25).get() == 45

    def test_map_left_args(self) -> None:
        """Test map_left forwards its arguments too."""
        assert pf.Either.left("a").map_left(str.rjust, 3, "-").get_left() == "--a"

    def test_partial(self) -> None:
        """Test map with functools.partial."""

        def add(a: int, b: int) -> int:
            return a + b

        assert pf.Optional.of(10).map(partial(add, 5)).get() == 15

    def test_args_ignored_when_empty(self) -> None:
        """Test that nothing is called on an empty optional."""

        def boom(_x: int, _y: int) -> int:
            pytest.fail("should not be called")

        assert pf.Optional.empty().map(boom, 1).is_empty()
        assert pf.Either.left(0).map(boom, 1).is_left()

    def test_flat_map_args(self) -> None:
        """Test flat_map forwards its arguments."""

        def safe_div(x: int, y: int) -> pf.Optional[float]:
            return pf.Optional.empty() if y == 0 else pf.Optional.of(x / y)

        assert pf.Optional.of(10).flat_map(safe_div, 4).get() == 2.5
        assert pf.Optional.of(10).flat_map(safe_div, 0).is_empty()
        assert pf.Result.ok(3).flat_map(lambda x, y: pf.Result.ok(x * y), 3).get() == 9

    def test_mapper_exception_propagates(self) -> None:
        """Test that exceptions raised by a mapper are not captured."""

        def failing_func(_x: int) -> int:
            msg = "Test error"
            raise ValueError(msg)

        with pytest.raises(ValueError, match="Test error"):
            pf.Optional.of(5).map(failing_func)
        with pytest.raises(ValueError, match="Test error"):
            pf.Result.ok(5).map(failing_func)


class TestInto:
    """Test into(), which receives the whole container."""

    def test_into_with_kwargs(self) -> None:
        """Test into with keyword arguments."""

        def format_optional(opt: pf.Optional[int], fmt: str = "decimal") -> str:
            x = opt.get()
            if fmt == "hex":
                return hex(x)
            return str(x)

        assert pf.Optional.of(255).into(format_optional) == "255"
        assert pf.Optional.of(255).into(format_optional, fmt="hex") == "0xff"

    def test_into_receives_container(self) -> None:
        """Test into passes the container itself."""
        assert isinstance(pf.Result.ok(5).into(lambda x: x), pf.Result)

    def test_into_closure(self) -> None:
        """Test into with closure."""

        def make_formatter(prefix: str) -> Callable[..., str]:
            def formatter(either: pf.Either[str, int]) -> str:
                return either.fold(lambda err: f"{prefix} error: {err}", lambda v: f"{prefix}: {v}")

            return formatter

        formatter = make_formatter("Number")
        assert pf.Either.right(42).into(formatter) == "Number: 42"
        assert pf.Either.left("nan").into(formatter) == "Number error: nan"


class TestInspect:
    """Test inspect(), which runs side effects and returns the container."""

    def test_inspect_returns_self(self) -> None:
        """Test the same instance comes back."""
        seen: list[str] = []
        opt = pf.Optional.of(1)
        assert opt.inspect(lambda o: seen.append(str(o))) is opt
        assert seen == ["Optional[value: 1]"]

    def test_inspect_args(self) -> None:
        """Test inspect forwards arguments."""
        seen: list[object] = []
        pf.Result.ok(1).inspect(lambda r, tag: seen.append((tag, r.get())), "step")
        assert seen == [("step", 1)]
