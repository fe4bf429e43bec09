from pprint import pformat

from ._config import get_config


def payload_repr(value: object) -> str:
    config = get_config()
    text = pformat(value, depth=config.repr_depth, width=config.repr_width, compact=True)
    if len(text) > config.max_repr_chars:
        return text[: config.max_repr_chars] + "..."
    return text
