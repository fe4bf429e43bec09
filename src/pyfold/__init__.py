from ._core import Config, Pipeable, get_config, set_config
from ._errors import NoSuchElementError, NullPointerError
from ._results import EMPTY, Absent, Either, Err, Left, Ok, Optional, Present, Result, Right

__all__ = [
    "EMPTY",
    "Absent",
    "Config",
    "Either",
    "Err",
    "Left",
    "NoSuchElementError",
    "NullPointerError",
    "Ok",
    "Optional",
    "Pipeable",
    "Present",
    "Result",
    "Right",
    "get_config",
    "set_config",
]
