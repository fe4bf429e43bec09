from ._either import Either, Left, Right
from ._optional import EMPTY, Absent, Optional, Present
from ._result import Err, Ok, Result

__all__ = [
    "EMPTY",
    "Absent",
    "Either",
    "Err",
    "Left",
    "Ok",
    "Optional",
    "Present",
    "Result",
    "Right",
]
