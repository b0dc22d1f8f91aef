"""
Multi-source configuration

Sources, highest priority first:
1. Runtime overrides (for testing)
2. Environment variables (CLOSURE_OBJECTS_<KEY>)
3. Values set through set()
4. Declared defaults

Values are validated against the type of the declared default, so
CLOSURE_OBJECTS_LOG_MAX_SIZE=1024 arrives as an int.

Example:
    config = make_config()
    config['get']('DATA_DIR')           # 'data'
    config['override']('DATA_DIR', '/tmp/objects')
    config['source']('DATA_DIR')        # 'override'
"""

import os
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from .core.errors import ConfigError


ENV_PREFIX = 'CLOSURE_OBJECTS_'

DEFAULTS = {
    'DATA_DIR': 'data',
    'LOG_MAX_SIZE': 10 * 1024 * 1024,
    'SELF_LOGGING': True,
    'OVERRIDE_MARKER': 'overriding!',
}


def _validate_value(key: str, value: Any, expected: type) -> Any:
    """Coerce value to expected, raising ConfigError when it doesn't fit"""
    if expected is bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            if value.lower() in ('true', '1', 'yes'):
                return True
            if value.lower() in ('false', '0', 'no'):
                return False
        raise ConfigError(f'Invalid bool for {key}: {value}')

    if expected in (int, float):
        if isinstance(value, bool):
            raise ConfigError(f'Invalid {expected.__name__} for {key}: {value}')
        try:
            return expected(value)
        except (ValueError, TypeError):
            raise ConfigError(f'Invalid {expected.__name__} for {key}: {value}')

    if expected is str:
        return str(value)

    return value


def make_config(
    defaults: Optional[Mapping[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Dict[str, Callable]:
    """
    Create a configuration object.

    Args:
        defaults: Declared keys and default values (default: DEFAULTS)
        environ: Environment mapping (default: os.environ, read on every lookup)
    """
    declared = dict(DEFAULTS if defaults is None else defaults)
    env = os.environ if environ is None else environ
    values: Dict[str, Any] = {}
    overrides: Dict[str, Any] = {}

    def validate(key, value):
        if key in declared and declared[key] is not None:
            return _validate_value(key, value, type(declared[key]))
        return value

    def lookup(key: str, default: Any = None) -> Tuple[Any, str]:
        key = key.upper()

        if key in overrides:
            return overrides[key], 'override'

        env_value = env.get(ENV_PREFIX + key)
        if env_value is not None:
            return validate(key, env_value), 'environment'

        if key in values:
            return values[key], 'config'

        if default is not None:
            return default, 'default'
        return declared.get(key), 'default'

    def get(key: str, default: Any = None) -> Any:
        return lookup(key, default)[0]

    def source(key: str) -> str:
        return lookup(key)[1]

    def set_value(key: str, value: Any) -> Any:
        key = key.upper()
        values[key] = validate(key, value)
        return values[key]

    def override(key: str, value: Any) -> Any:
        key = key.upper()
        overrides[key] = validate(key, value)
        return overrides[key]

    def clear_override(key: str) -> bool:
        key = key.upper()
        if key not in overrides:
            return False
        del overrides[key]
        return True

    def as_dict() -> Dict[str, Any]:
        keys = list(declared) + [k for k in {**values, **overrides} if k not in declared]
        return {key: get(key) for key in keys}

    return {
        'get': get,
        'source': source,
        'set': set_value,
        'override': override,
        'clear_override': clear_override,
        'as_dict': as_dict,
    }
