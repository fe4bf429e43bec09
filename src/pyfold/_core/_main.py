from __future__ import annotations

from collections.abc import Callable
from typing import Concatenate, Self


def strict_equals(left: object, right: object) -> bool:
    """Compare two payloads without cross-type coercion.

    `1`, `1.0` and `True` compare equal under `==`, but are distinct payloads here.
    Payloads of the same type compare by value, not by identity: two equal lists are equal.

    Example:
    ```python
    >>> from pyfold._core import strict_equals
    >>> strict_equals(3, 3)
    True
    >>> strict_equals(1, True)
    False
    >>> strict_equals(3, "3")
    False
    >>> strict_equals([1, 2], [1, 2])
    True

    ```
    """
    return type(left) is type(right) and left == right


class Pipeable:
    __slots__ = ()

    def into[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Convert `Self` to `R`.

        Writing `x.into(f)` instead of `f(x)` keeps a chain of method calls readable.

        Args:
            func (Callable[Concatenate[Self, P], R]): Function for conversion.
            *args (P.args): Positional arguments to pass to the function.
            **kwargs (P.kwargs): Keyword arguments to pass to the function.

        Returns:
            R: The converted value.

        Example:
        ```python
        >>> import pyfold as pf
        >>> def describe(opt: pf.Optional[int], unit: str) -> str:
        ...     return opt.fold(lambda: "nothing", lambda v: f"{v} {unit}")
        >>> pf.Optional.of(3).into(describe, "apples")
        '3 apples'

        ```
        """
        return func(self, *args, **kwargs)

    def inspect[**P](
        self,
        func: Callable[Concatenate[Self, P], object],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Self:
        """Pass the instance to a function to perform side effects without altering it.

        Args:
            func (Callable[Concatenate[Self, P], object]): Function to apply to the instance for side effects.
            *args (P.args): Positional arguments to pass to the function.
            **kwargs (P.kwargs): Keyword arguments to pass to the function.

        Returns:
            Self: The instance itself for chaining.

        Example:
        ```python
        >>> import pyfold as pf
        >>> pf.Either.right(4).inspect(print).map(lambda x: x * 2).get()
        Either[status: RIGHT, value: 4]
        8

        ```
        """
        func(self, *args, **kwargs)
        return self
