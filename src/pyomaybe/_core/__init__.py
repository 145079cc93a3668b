from ._config import Config, config_context, get_config, set_config
from ._format import dict_repr, to_string
from ._main import PayloadIterable, Pipeable

__all__ = [
    "Config",
    "PayloadIterable",
    "Pipeable",
    "config_context",
    "dict_repr",
    "get_config",
    "set_config",
    "to_string",
]
