"""
Core closure object primitives.

- functions: callables as values, positional and named
- counters: constructors with private state, private methods, delegation
- delegation: building derived instances from base instances
- members: invoking instance members by name
- self_logger: per-object TSV logs
"""

from .counters import (
    OVERRIDE_MARKER,
    make_counter,
    make_inherited_shouty_counter,
    make_shouty_counter,
)
from .delegation import extend, forward, inherited, overridden
from .errors import (
    ClosureObjectError,
    ConfigError,
    ConstructorNotFoundError,
    MemberExecutionError,
    MemberNotFoundError,
)
from .functions import (
    MISSING,
    deferred_identity,
    identity,
    some_functions,
    some_named_functions,
)
from .members import get_members, invoke
from .self_logger import make_self_logger

__all__ = [
    'MISSING',
    'OVERRIDE_MARKER',
    'ClosureObjectError',
    'ConfigError',
    'ConstructorNotFoundError',
    'MemberExecutionError',
    'MemberNotFoundError',
    'deferred_identity',
    'extend',
    'forward',
    'get_members',
    'identity',
    'inherited',
    'invoke',
    'make_counter',
    'make_inherited_shouty_counter',
    'make_self_logger',
    'make_shouty_counter',
    'overridden',
    'some_functions',
    'some_named_functions',
]
