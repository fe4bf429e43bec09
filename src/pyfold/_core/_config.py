from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(slots=True, frozen=True)
class Config:
    """Rendering settings used by the `__str__` of every container.

    Args:
        max_repr_chars (int): Payload renderings longer than this are cut and suffixed with `...`.
        repr_depth (int): Nesting depth passed to `pprint.pformat`. Must be positive.
        repr_width (int): Line width passed to `pprint.pformat`. Must be positive.
    """

    max_repr_chars: int = 80
    repr_depth: int = 3
    repr_width: int = 80

    def __post_init__(self) -> None:
        for name in ("max_repr_chars", "repr_depth", "repr_width"):
            value = getattr(self, name)
            if value < 1:
                msg = f"{name} must be positive, got {value}"
                raise ValueError(msg)


_CONFIG = Config()


def get_config() -> Config:
    """Return the active `Config`."""
    return _CONFIG


def set_config(**changes: int) -> Config:
    """Replace fields of the active `Config`.

    Args:
        **changes (int): Fields to change, by name.

    Returns:
        Config: The previous config, so callers can restore it.

    Example:
    ```python
    >>> import pyfold as pf
    >>> previous = pf.set_config(max_repr_chars=5)
    >>> str(pf.Optional.of("a long payload"))
    "Optional[value: 'a lo...]"
    >>> _ = pf.set_config(max_repr_chars=previous.max_repr_chars)

    ```
    """
    global _CONFIG  # noqa: PLW0603
    previous = _CONFIG
    _CONFIG = replace(previous, **changes)
    return previous
