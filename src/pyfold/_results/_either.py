from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Concatenate

import cytoolz as cz

from .._core import Pipeable, payload_repr, strict_equals
from .._errors import missing

if TYPE_CHECKING:
    from typing import TypeIs

    from ._optional import Optional


class Either[L, R](ABC, Pipeable):
    """A value of type `L` (left) or of type `R` (right).

    Neither side means success or failure. Operations without a side in their name,
    such as `map` or `get`, act on the right one.
    """

    __slots__ = ()
    _tag: ClassVar[str]

    @staticmethod
    def left[A](value: A) -> Either[A, Any]:
        """
        Returns a left `Either` holding `value`.

        Example:
            ```python
            >>> from pyfold import Either
            >>> Either.left("boom")
            Left(value='boom')

            ```
        """
        return Left(value)

    @staticmethod
    def right[B](value: B) -> Either[Any, B]:
        """
        Returns a right `Either` holding `value`.

        Example:
            ```python
            >>> from pyfold import Either
            >>> Either.right(3)
            Right(value=3)

            ```
        """
        return Right(value)

    @abstractmethod
    def fold[U](self, left_fn: Callable[[L], U], right_fn: Callable[[R], U]) -> U:
        """
        Returns `left_fn(value)` for a left `Either`, `right_fn(value)` for a right one.

        Every other method of `Either` is a specialization of this one.

        Args:
            left_fn: Called with the left value.
            right_fn: Called with the right value.

        Returns:
            The result of whichever function was called.

        Example:
            ```python
            >>> from pyfold import Either
            >>> Either.left(3).fold(lambda x: x + 1, str)
            4
            >>> Either.right(True).fold(lambda x: x + 1, int)
            1

            ```
        """
        ...

    def is_left(self) -> TypeIs[Left[L, R]]:  # type: ignore[misc]
        """Returns `True` for a left `Either`."""
        return self.fold(lambda _: True, lambda _: False)

    def is_right(self) -> TypeIs[Right[L, R]]:  # type: ignore[misc]
        """Returns `True` for a right `Either`."""
        return self.fold(lambda _: False, lambda _: True)

    def get(self) -> R:
        """
        Returns the right value.

        Raises:
            NoSuchElementError: If the `Either` is left.

        Example:
            ```python
            >>> from pyfold import Either
            >>> Either.right(3).get()
            3
            >>> Either.left(3).get()
            Traceback (most recent call last):
                ...
            pyfold._errors.NoSuchElementError: called `get` on a left Either

            ```
        """
        return self.fold(missing("called `get` on a left Either"), cz.functoolz.identity)

    def get_left(self) -> L:
        """
        Returns the left value.

        Raises:
            NoSuchElementError: If the `Either` is right.
        """
        return self.fold(cz.functoolz.identity, missing("called `get_left` on a right Either"))

    def expect(self, msg: str) -> R:
        """
        Returns the right value, or raises with a provided message for a left `Either`.

        Raises:
            NoSuchElementError: If the `Either` is left.
        """
        return self.fold(
            missing(f"{msg} (called `expect` on a left Either)"),
            cz.functoolz.identity,
        )

    def or_else(self, other: R) -> R:
        """
        Returns the right value, or `other` for a left `Either`.

        Example:
            ```python
            >>> from pyfold import Either
            >>> Either.right(3).or_else(5)
            3
            >>> Either.left(3).or_else(5)
            5

            ```
        """
        return self.fold(lambda _: other, cz.functoolz.identity)

    def or_else_get(self, supplier: Callable[[], R]) -> R:
        """Returns the right value, or the result of `supplier` for a left `Either`."""
        return self.fold(lambda _: supplier(), cz.functoolz.identity)

    def bimap[X, Y](self, left_fn: Callable[[L], X], right_fn: Callable[[R], Y]) -> Either[X, Y]:
        """
        Maps whichever side is held, keeping it on the same side.

        Exactly one of the two functions is called.

        Example:
            ```python
            >>> from pyfold import Either
            >>> Either.left(3).bimap(lambda x: x + 1, int)
            Left(value=4)
            >>> Either.right(True).bimap(lambda x: x + 1, int)
            Right(value=1)

            ```
        """
        return self.fold(
            cz.functoolz.compose_left(left_fn, Either.left),
            cz.functoolz.compose_left(right_fn, Either.right),
        )

    def map[**P, U](
        self,
        right_fn: Callable[Concatenate[R, P], U],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Either[L, U]:
        """
        Maps the right value, leaving a left `Either` untouched.

        Args:
            right_fn: The function to apply to the right value.
            *args: Extra positional arguments passed to `right_fn` after the value.
            **kwargs: Extra keyword arguments passed to `right_fn`.

        Returns:
            A new `Either`.

        Example:
            ```python
            >>> from pyfold import Either
            >>> Either.right(3).map(lambda x: x + 1)
            Right(value=4)
            >>> Either.left("boom").map(lambda x: x + 1)
            Left(value='boom')

            ```
        """
        return self.fold(Either.left, lambda value: Either.right(right_fn(value, *args, **kwargs)))

    def map_left[**P, U](
        self,
        left_fn: Callable[Concatenate[L, P], U],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Either[U, R]:
        """
        Maps the left value, leaving a right `Either` untouched.

        Example:
            ```python
            >>> from pyfold import Either
            >>> Either.left("boom").map_left(str.upper)
            Left(value='BOOM')
            >>> Either.right(3).map_left(str.upper)
            Right(value=3)

            ```
        """
        return self.fold(lambda value: Either.left(left_fn(value, *args, **kwargs)), Either.right)

    def flat_map[**P, U](
        self,
        right_fn: Callable[Concatenate[R, P], Either[L, U]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Either[L, U]:
        """
        Returns the `Either` produced by `right_fn` from the right value, without wrapping it again.

        A left `Either` is returned untouched, so both must share the same left type.

        Example:
            ```python
            >>> from pyfold import Either
            >>> def parse(text: str) -> Either[str, int]:
            ...     return Either.right(int(text)) if text.isdigit() else Either.left(f"not a number: {text}")
            >>> Either.right("12").flat_map(parse)
            Right(value=12)
            >>> Either.right("x").flat_map(parse)
            Left(value='not a number: x')

            ```
        """
        return self.fold(Either.left, lambda value: right_fn(value, *args, **kwargs))

    def swap(self) -> Either[R, L]:
        """
        Moves the held value to the other side.

        Example:
            ```python
            >>> from pyfold import Either
            >>> Either.left(1).swap()
            Right(value=1)

            ```
        """
        return self.fold(Either.right, Either.left)

    def to_optional(self) -> Optional[R]:
        """Returns the right value as an `Optional`, empty for a left `Either`."""
        from ._optional import Optional

        return self.fold(lambda _: Optional.empty(), Optional.of_nullable)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Either):
            return NotImplemented
        return self.fold(
            lambda mine: other.fold(lambda theirs: strict_equals(mine, theirs), lambda _: False),
            lambda mine: other.fold(lambda _: False, lambda theirs: strict_equals(mine, theirs)),
        )

    def __hash__(self) -> int:
        return hash((self._tag, self.fold(cz.functoolz.identity, cz.functoolz.identity)))

    def __str__(self) -> str:
        value = self.fold(cz.functoolz.identity, cz.functoolz.identity)
        return f"Either[status: {self._tag}, value: {payload_repr(value)}]"


@dataclass(slots=True, frozen=True, eq=False)
class Left[L, R](Either[L, R]):
    """Either variant holding a left value."""

    _tag: ClassVar[str] = "LEFT"
    value: L

    def fold[U](self, left_fn: Callable[[L], U], right_fn: Callable[[R], U]) -> U:
        return left_fn(self.value)


@dataclass(slots=True, frozen=True, eq=False)
class Right[L, R](Either[L, R]):
    """Either variant holding a right value."""

    _tag: ClassVar[str] = "RIGHT"
    value: R

    def fold[U](self, left_fn: Callable[[L], U], right_fn: Callable[[R], U]) -> U:
        return right_fn(self.value)
