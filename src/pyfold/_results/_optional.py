from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Concatenate

import cytoolz as cz

from .._core import Pipeable, payload_repr, strict_equals
from .._errors import NullPointerError, missing, reraise

if TYPE_CHECKING:
    from typing import TypeIs

    from ._either import Either


class Optional[T](ABC, Pipeable):
    """Zero or one value of type `T`.

    Build instances with `Optional.empty()`, `Optional.of()` or `Optional.of_nullable()`.
    Every operation is derived from `fold`, the only method the variants implement.
    """

    __slots__ = ()
    _tag: ClassVar[str]

    @staticmethod
    def empty() -> Optional[Any]:
        """
        Returns the empty `Optional`.

        Example:
            ```python
            >>> from pyfold import Optional
            >>> Optional.empty()
            Absent()
            >>> Optional.empty().is_empty()
            True

            ```
        """
        return EMPTY

    @staticmethod
    def of[V](value: V) -> Optional[V]:
        """
        Returns an `Optional` holding a value the caller knows is not `None`.

        Args:
            value: The value to hold.

        Returns:
            A present `Optional`.

        Raises:
            NullPointerError: If `value` is `None`.

        Example:
            ```python
            >>> from pyfold import Optional
            >>> Optional.of(3)
            Present(value=3)
            >>> Optional.of(None)
            Traceback (most recent call last):
                ...
            pyfold._errors.NullPointerError: cannot build a present Optional from None

            ```
        """
        return Present(value)

    @staticmethod
    def of_nullable[V](value: V | None) -> Optional[V]:
        """
        Returns a present `Optional` unless `value` is `None`, in which case the empty one.

        Example:
            ```python
            >>> from pyfold import Optional
            >>> Optional.of_nullable("a")
            Present(value='a')
            >>> Optional.of_nullable(None)
            Absent()
            >>> Optional.of_nullable(0).is_present()
            True

            ```
        """
        if value is None:
            return EMPTY
        return Present(value)

    @abstractmethod
    def fold[U](self, empty_fn: Callable[[], U], present_fn: Callable[[T], U]) -> U:
        """
        Returns `empty_fn()` if the `Optional` is empty, otherwise `present_fn(value)`.

        Every other method of `Optional` is a specialization of this one.

        Args:
            empty_fn: Called without arguments when there is no value.
            present_fn: Called with the value when there is one.

        Returns:
            The result of whichever function was called.

        Example:
            ```python
            >>> from pyfold import Optional
            >>> Optional.of(2).fold(lambda: 0, lambda x: x * 10)
            20
            >>> Optional.empty().fold(lambda: 0, lambda x: x * 10)
            0

            ```
        """
        ...

    def is_present(self) -> TypeIs[Present[T]]:  # type: ignore[misc]
        """Returns `True` if a value is present."""
        return self.fold(lambda: False, lambda _: True)

    def is_empty(self) -> TypeIs[Absent]:  # type: ignore[misc]
        """Returns `True` if no value is present."""
        return self.fold(lambda: True, lambda _: False)

    def get(self) -> T:
        """
        Returns the contained value.

        Prefer `fold`, `or_else` or `map` when the `Optional` may be empty.

        Raises:
            NoSuchElementError: If the `Optional` is empty.

        Example:
            ```python
            >>> from pyfold import Optional
            >>> Optional.of("car").get()
            'car'
            >>> Optional.empty().get()
            Traceback (most recent call last):
                ...
            pyfold._errors.NoSuchElementError: called `get` on an empty Optional

            ```
        """
        return self.fold(missing("called `get` on an empty Optional"), cz.functoolz.identity)

    def expect(self, msg: str) -> T:
        """
        Returns the contained value, or raises with a provided message if there is none.

        Args:
            msg: The message to include in the exception if the `Optional` is empty.

        Raises:
            NoSuchElementError: If the `Optional` is empty.

        Example:
            ```python
            >>> from pyfold import Optional
            >>> Optional.of("value").expect("fruits are healthy")
            'value'
            >>> Optional.empty().expect("fruits are healthy")
            Traceback (most recent call last):
                ...
            pyfold._errors.NoSuchElementError: fruits are healthy (called `expect` on an empty Optional)

            ```
        """
        return self.fold(
            missing(f"{msg} (called `expect` on an empty Optional)"),
            cz.functoolz.identity,
        )

    def if_present(self, action: Callable[[T], object]) -> None:
        """
        Calls `action` with the value if there is one, otherwise does nothing.

        Example:
            ```python
            >>> from pyfold import Optional
            >>> Optional.of(5).if_present(print)
            5
            >>> Optional.empty().if_present(print)

            ```
        """
        self.fold(_do_nothing, action)

    def if_present_or_else(
        self, action: Callable[[T], object], empty_action: Callable[[], object]
    ) -> None:
        """
        Calls `action` with the value if there is one, otherwise calls `empty_action`.

        Exactly one of the two callbacks is invoked.

        Example:
            ```python
            >>> from pyfold import Optional
            >>> Optional.empty().if_present_or_else(print, lambda: print("nothing"))
            nothing

            ```
        """
        self.fold(empty_action, action)

    def filter(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """
        Keeps the value only if it matches `predicate`.

        Args:
            predicate: Called with the value, if there is one.

        Returns:
            This `Optional` if the value matches, otherwise the empty `Optional`.

        Example:
            ```python
            >>> from pyfold import Optional
            >>> Optional.of(1).filter(lambda v: v > 0)
            Present(value=1)
            >>> Optional.of(-1).filter(lambda v: v > 0)
            Absent()

            ```
        """
        return self.fold(Optional.empty, lambda value: self if predicate(value) else EMPTY)

    def map[**P, U](
        self,
        mapper: Callable[Concatenate[T, P], U | None],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Optional[U]:
        """
        Applies `mapper` to the value, if there is one, and wraps the result as by `of_nullable`.

        A `mapper` returning `None` gives the empty `Optional`.

        Args:
            mapper: The function to apply to the value.
            *args: Extra positional arguments passed to `mapper` after the value.
            **kwargs: Extra keyword arguments passed to `mapper`.

        Returns:
            A new `Optional`.

        Example:
            ```python
            >>> from pyfold import Optional
            >>> Optional.of("Hello, World!").map(len)
            Present(value=13)
            >>> Optional.of(5).map(pow, 2)
            Present(value=25)
            >>> Optional.of({"a": 1}).map(dict.get, "b")
            Absent()
            >>> Optional.empty().map(len)
            Absent()

            ```
        """
        return self.fold(
            Optional.empty,
            lambda value: Optional.of_nullable(mapper(value, *args, **kwargs)),
        )

    def flat_map[**P, U](
        self,
        mapper: Callable[Concatenate[T, P], Optional[U]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Optional[U]:
        """
        Returns the `Optional` produced by `mapper` from the value, without wrapping it again.

        Args:
            mapper: The function to apply to the value.
            *args: Extra positional arguments passed to `mapper` after the value.
            **kwargs: Extra keyword arguments passed to `mapper`.

        Returns:
            The result of `mapper` if there is a value, otherwise the empty `Optional`.

        Example:
            ```python
            >>> from pyfold import Optional
            >>> def half(x: int) -> Optional[int]:
            ...     return Optional.of(x // 2) if x % 2 == 0 else Optional.empty()
            >>> Optional.of(8).flat_map(half).flat_map(half)
            Present(value=2)
            >>> Optional.of(6).flat_map(half).flat_map(half)
            Absent()

            ```
        """
        return self.fold(Optional.empty, lambda value: mapper(value, *args, **kwargs))

    def or_(self, supplier: Callable[[], Optional[T]]) -> Optional[T]:
        """
        Returns this `Optional` if it holds a value, otherwise the one produced by `supplier`.

        Example:
            ```python
            >>> from pyfold import Optional
            >>> Optional.of("barbarians").or_(lambda: Optional.of("vikings"))
            Present(value='barbarians')
            >>> Optional.empty().or_(lambda: Optional.of("vikings"))
            Present(value='vikings')

            ```
        """
        return self.fold(supplier, lambda _: self)

    def or_else(self, other: T) -> T:
        """
        Returns the value, or `other` if there is none.

        Example:
            ```python
            >>> from pyfold import Optional
            >>> Optional.of("car").or_else("bike")
            'car'
            >>> Optional.empty().or_else("bike")
            'bike'

            ```
        """
        return self.fold(lambda: other, cz.functoolz.identity)

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        """
        Returns the value, or the result of `supplier` if there is none.

        `supplier` is only called when the `Optional` is empty.

        Example:
            ```python
            >>> from pyfold import Optional
            >>> k = 10
            >>> Optional.of(4).or_else_get(lambda: 2 * k)
            4
            >>> Optional.empty().or_else_get(lambda: 2 * k)
            20

            ```
        """
        return self.fold(supplier, cz.functoolz.identity)

    def or_else_raise(self, supplier: Callable[[], BaseException] | None = None) -> T:
        """
        Returns the value, or raises if there is none.

        Args:
            supplier: Builds the exception to raise. Defaults to a `NoSuchElementError`.

        Raises:
            NoSuchElementError: If the `Optional` is empty and no `supplier` is given.

        Example:
            ```python
            >>> from pyfold import Optional
            >>> Optional.of(1).or_else_raise()
            1
            >>> Optional.empty().or_else_raise(lambda: KeyError("user"))
            Traceback (most recent call last):
                ...
            KeyError: 'user'

            ```
        """
        if supplier is None:
            return self.fold(
                missing("called `or_else_raise` on an empty Optional"),
                cz.functoolz.identity,
            )
        return self.fold(lambda: reraise(supplier()), cz.functoolz.identity)

    def to_either[L](self, left: L) -> Either[L, T]:
        """
        Converts to an `Either`: `Right` of the value, or `Left` of `left` if there is none.

        Example:
            ```python
            >>> from pyfold import Optional
            >>> Optional.of(3).to_either("missing")
            Right(value=3)
            >>> Optional.empty().to_either("missing")
            Left(value='missing')

            ```
        """
        from ._either import Either

        return self.fold(lambda: Either.left(left), Either.right)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Optional):
            return NotImplemented
        return self.fold(
            other.is_empty,
            lambda value: other.fold(lambda: False, lambda theirs: strict_equals(value, theirs)),
        )

    def __hash__(self) -> int:
        return hash(self.fold(lambda: (self._tag,), lambda value: (self._tag, value)))

    def __str__(self) -> str:
        return self.fold(lambda: "Optional[]", lambda value: f"Optional[value: {payload_repr(value)}]")


def _do_nothing() -> None:
    return None


@dataclass(slots=True, frozen=True, eq=False)
class Present[T](Optional[T]):
    """Optional variant holding a value.

    Example:
    ```python
    >>> from pyfold import Optional, Present
    >>> match Optional.of(42):
    ...     case Present(value):
    ...         print(value)
    42

    ```
    """

    _tag: ClassVar[str] = "PRESENT"
    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise NullPointerError("cannot build a present Optional from None")

    def fold[U](self, empty_fn: Callable[[], U], present_fn: Callable[[T], U]) -> U:
        return present_fn(self.value)


@dataclass(slots=True, frozen=True, eq=False)
class Absent(Optional[Any]):
    """Optional variant representing the absence of a value."""

    _tag: ClassVar[str] = "ABSENT"

    def fold[U](self, empty_fn: Callable[[], U], present_fn: Callable[[Any], U]) -> U:
        return empty_fn()


EMPTY: Optional[Any] = Absent()
"""Shared instance representing the absence of a value."""
