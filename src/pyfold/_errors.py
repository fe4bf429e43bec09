from __future__ import annotations

from collections.abc import Callable
from typing import Never


class NoSuchElementError(LookupError):
    """Raised when a container is asked for an alternative it does not hold."""


class NullPointerError(ValueError):
    """Raised when `None` is given where a value is required."""


def missing(message: str) -> Callable[..., Never]:
    """Build a callback that raises `NoSuchElementError` whatever it is called with.

    Unsafe accessors pass it as the branch of `fold` that must not be taken.

    Args:
        message: The message of the raised error.

    Returns:
        A callable accepting any arguments and always raising.

    Example:
    ```python
    >>> from pyfold._errors import missing
    >>> missing("nothing here")(42)
    Traceback (most recent call last):
        ...
    pyfold._errors.NoSuchElementError: nothing here

    ```
    """

    def _raise(*_args: object) -> Never:
        raise NoSuchElementError(message)

    return _raise


def reraise(error: BaseException) -> Never:
    raise error
