from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Concatenate, Never

import cytoolz as cz

from .._core import Pipeable, payload_repr, strict_equals
from .._errors import NoSuchElementError, missing, reraise

if TYPE_CHECKING:
    from typing import TypeIs

    from ._either import Either
    from ._optional import Optional


class Result[T, E: BaseException](ABC, Pipeable):
    """The outcome of a fallible computation: an `Ok` value or an `Err` exception."""

    __slots__ = ()
    _tag: ClassVar[str]

    @staticmethod
    def ok[V](value: V) -> Result[V, Any]:
        """
        Returns a successful `Result`.

        Example:
            ```python
            >>> from pyfold import Result
            >>> Result.ok(3)
            Ok(value=3)

            ```
        """
        return Ok(value)

    @staticmethod
    def error[X: BaseException](error: X) -> Result[Any, X]:
        """
        Returns a failed `Result`.

        Raises:
            TypeError: If `error` is not an exception instance.

        Example:
            ```python
            >>> from pyfold import Result
            >>> Result.error(ValueError("bad input"))
            Err(error=ValueError('bad input'))
            >>> Result.error("bad input")
            Traceback (most recent call last):
                ...
            TypeError: Err expects an exception instance, got str

            ```
        """
        return Err(error)

    @staticmethod
    def attempt[**P, V](
        func: Callable[P, V], *args: P.args, **kwargs: P.kwargs
    ) -> Result[V, Exception]:
        """
        Calls `func` and captures its outcome.

        Args:
            func: The function to call.
            *args: Positional arguments to pass to `func`.
            **kwargs: Keyword arguments to pass to `func`.

        Returns:
            `Ok` of the returned value, or `Err` of any `Exception` raised by `func`.

        Example:
            ```python
            >>> from pyfold import Result
            >>> Result.attempt(int, "42")
            Ok(value=42)
            >>> Result.attempt(int, "forty-two").is_ok()
            False

            ```
        """
        try:
            return Result.ok(func(*args, **kwargs))
        except Exception as exc:  # noqa: BLE001
            return Result.error(exc)

    @abstractmethod
    def fold[U](self, ok_fn: Callable[[T], U], error_fn: Callable[[E], U]) -> U:
        """
        Returns `ok_fn(value)` for an `Ok`, `error_fn(error)` for an `Err`.

        Every other method of `Result` is a specialization of this one.

        Example:
            ```python
            >>> from pyfold import Result
            >>> Result.ok(2).fold(lambda x: x * 2, str)
            4
            >>> Result.error(KeyError("id")).fold(lambda x: x * 2, repr)
            "KeyError('id')"

            ```
        """
        ...

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        """Returns `True` for an `Ok`."""
        return self.fold(lambda _: True, lambda _: False)

    def is_error(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        """Returns `True` for an `Err`."""
        return self.fold(lambda _: False, lambda _: True)

    def get(self) -> T:
        """
        Returns the `Ok` value.

        Raises:
            NoSuchElementError: If the result is an `Err`.
        """
        return self.fold(cz.functoolz.identity, missing("called `get` on an Err Result"))

    def get_error(self) -> E:
        """
        Returns the `Err` exception, without raising it.

        Raises:
            NoSuchElementError: If the result is an `Ok`.
        """
        return self.fold(missing("called `get_error` on an Ok Result"), cz.functoolz.identity)

    def expect(self, msg: str) -> T:
        """
        Returns the `Ok` value, or raises with a provided message if the result is an `Err`.

        Raises:
            NoSuchElementError: If the result is an `Err`, chained to the stored error.
        """
        return self.fold(cz.functoolz.identity, lambda error: _expect_failed(msg, error))

    def raise_for_error(self) -> None:
        """
        Raises the stored exception if the result is an `Err`, otherwise does nothing.

        Example:
            ```python
            >>> from pyfold import Result
            >>> Result.ok(1).raise_for_error()
            >>> Result.error(ZeroDivisionError("division by zero")).raise_for_error()
            Traceback (most recent call last):
                ...
            ZeroDivisionError: division by zero

            ```
        """
        self.fold(lambda _: None, reraise)

    def map[**P, U](
        self,
        fn: Callable[Concatenate[T, P], U],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Result[U, E]:
        """
        Maps the `Ok` value, propagating an `Err` untouched.

        Example:
            ```python
            >>> from pyfold import Result
            >>> Result.ok(2).map(lambda x: x + 1)
            Ok(value=3)
            >>> Result.error(ValueError("x")).map(lambda x: x + 1)
            Err(error=ValueError('x'))

            ```
        """
        return self.fold(lambda value: Result.ok(fn(value, *args, **kwargs)), Result.error)

    def map_error[F: BaseException](self, fn: Callable[[E], F]) -> Result[T, F]:
        """
        Maps the `Err` exception, leaving an `Ok` untouched.

        Example:
            ```python
            >>> from pyfold import Result
            >>> Result.error(KeyError("id")).map_error(lambda e: LookupError(f"missing {e}"))
            Err(error=LookupError("missing 'id'"))

            ```
        """
        return self.fold(Result.ok, cz.functoolz.compose_left(fn, Result.error))

    def flat_map[**P, U](
        self,
        fn: Callable[Concatenate[T, P], Result[U, E]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Result[U, E]:
        """Returns the `Result` produced by `fn` from the `Ok` value, propagating an `Err`."""
        return self.fold(lambda value: fn(value, *args, **kwargs), Result.error)

    def or_else(self, default: T) -> T:
        """Returns the `Ok` value, or `default` if the result is an `Err`."""
        return self.fold(cz.functoolz.identity, lambda _: default)

    def or_else_get(self, fn: Callable[[E], T]) -> T:
        """
        Returns the `Ok` value, or computes one from the `Err` exception.

        Example:
            ```python
            >>> from pyfold import Result
            >>> Result.attempt(int, "n/a").or_else_get(lambda e: -1)
            -1

            ```
        """
        return self.fold(cz.functoolz.identity, fn)

    def to_optional(self) -> Optional[T]:
        """Returns the `Ok` value as an `Optional`, empty for an `Err`."""
        from ._optional import Optional

        return self.fold(Optional.of_nullable, lambda _: Optional.empty())

    def to_either(self) -> Either[E, T]:
        """Returns `Right` of the `Ok` value or `Left` of the `Err` exception."""
        from ._either import Either

        return self.fold(Either.right, Either.left)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self.fold(
            lambda mine: other.fold(lambda theirs: strict_equals(mine, theirs), lambda _: False),
            lambda mine: other.fold(lambda _: False, lambda theirs: strict_equals(mine, theirs)),
        )

    def __hash__(self) -> int:
        return hash((self._tag, self.fold(cz.functoolz.identity, cz.functoolz.identity)))

    def __str__(self) -> str:
        value = self.fold(cz.functoolz.identity, cz.functoolz.identity)
        return f"Result[status: {self._tag}, value: {payload_repr(value)}]"


def _expect_failed(msg: str, error: BaseException) -> Never:
    raise NoSuchElementError(f"{msg} (called `expect` on an Err Result)") from error


@dataclass(slots=True, frozen=True, eq=False)
class Ok[T, E: BaseException](Result[T, E]):
    """Result variant holding a successful value."""

    _tag: ClassVar[str] = "OK"
    value: T

    def fold[U](self, ok_fn: Callable[[T], U], error_fn: Callable[[E], U]) -> U:
        return ok_fn(self.value)


@dataclass(slots=True, frozen=True, eq=False)
class Err[T, E: BaseException](Result[T, E]):
    """Result variant holding the exception that made the computation fail."""

    _tag: ClassVar[str] = "ERROR"
    error: E

    def __post_init__(self) -> None:
        if not isinstance(self.error, BaseException):
            msg = f"Err expects an exception instance, got {type(self.error).__name__}"
            raise TypeError(msg)

    def fold[U](self, ok_fn: Callable[[T], U], error_fn: Callable[[E], U]) -> U:
        return error_fn(self.error)
