from ._config import Config, get_config, set_config
from ._format import payload_repr
from ._main import Pipeable, strict_equals

__all__ = [
    "Config",
    "Pipeable",
    "get_config",
    "payload_repr",
    "set_config",
    "strict_equals",
]
