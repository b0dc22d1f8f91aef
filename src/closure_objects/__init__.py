"""
Closure Objects: objects without classes.

A constructor is a function. Each call opens a new scope, keeps its
private state there, and returns a mapping of member functions that close
over it. Everything object-oriented falls out of that:

- Constructors: calling the function
- Private data: bindings only the members can reach
- Private methods: helpers that are never put in the mapping
- Inheritance: copy a base instance's members, replace some of them,
  and call the base explicitly where the old behavior is wanted

Example:
    >>> from closure_objects import make_counter
    >>>
    >>> counter = make_counter()
    >>> counter['increment']()
    1
    >>> counter['increment']()
    2
    >>> counter['decrement']()
    1
    >>> counter['count']()
    1

Around the pattern sit the pieces that make objects live:
- Self-logging (objects log to themselves, TSV files)
- Layered configuration (override, environment, set values, defaults)
- A runtime that builds objects by name and executes members
"""

__version__ = "0.1.0"

from .config import make_config
from .core import (
    MISSING,
    OVERRIDE_MARKER,
    ClosureObjectError,
    ConfigError,
    ConstructorNotFoundError,
    MemberExecutionError,
    MemberNotFoundError,
    deferred_identity,
    extend,
    forward,
    identity,
    inherited,
    invoke,
    make_counter,
    make_inherited_shouty_counter,
    make_self_logger,
    make_shouty_counter,
    overridden,
    some_functions,
    some_named_functions,
)
from .runtime import LiveObject, ObjectRuntime

__all__ = [
    "__version__",
    "MISSING",
    "OVERRIDE_MARKER",
    "ClosureObjectError",
    "ConfigError",
    "ConstructorNotFoundError",
    "LiveObject",
    "MemberExecutionError",
    "MemberNotFoundError",
    "ObjectRuntime",
    "deferred_identity",
    "extend",
    "forward",
    "identity",
    "inherited",
    "invoke",
    "make_config",
    "make_counter",
    "make_inherited_shouty_counter",
    "make_self_logger",
    "make_shouty_counter",
    "overridden",
    "some_functions",
    "some_named_functions",
]
