"""
Errors raised at the edges of the closure object system.

The closures themselves raise nothing of their own. Errors only appear
where something outside an instance reaches into it: the runtime looking
up a constructor, a caller invoking a member by name, or configuration.
"""


class ClosureObjectError(Exception):
    """Base exception for closure object errors"""
    pass


class ConstructorNotFoundError(ClosureObjectError):
    """Raised when no constructor is registered under a name"""
    pass


class MemberNotFoundError(ClosureObjectError):
    """Raised when an instance has no member with the requested name"""
    pass


class MemberExecutionError(ClosureObjectError):
    """Raised when a member raises while being invoked"""
    pass


class ConfigError(ClosureObjectError):
    """Raised when a config value can't be validated"""
    pass
