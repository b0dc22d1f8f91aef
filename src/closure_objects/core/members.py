"""
Member lookup and invocation

Instances are plain mappings from member name to callable. This module is
the boundary where code outside an instance reaches into it by name:

- Constructors carry metadata in a __constructor__ dict
- Members are invoked by name, with errors wrapped in context
- Constructor parameters are injected only when the constructor takes them
"""

import inspect
import traceback
from typing import Any, Callable, Dict, List, Mapping, Optional

from .errors import MemberExecutionError, MemberNotFoundError


def constructor(name: str, description: str = '', members: Optional[List[str]] = None):
    """
    Attach metadata to a constructor.

    Args:
        name: Registry name (e.g., 'counter')
        description: One-line description
        members: Public member names of the instances it builds
    """
    def decorate(fn: Callable) -> Callable:
        fn.__constructor__ = {
            'name': name,
            'description': description,
            'members': list(members or []),
        }
        return fn

    return decorate


def get_constructor_metadata(fn: Callable) -> Dict[str, Any]:
    """
    Get metadata from a constructor.

    Returns:
        Metadata dictionary (with defaults if not present)
    """
    if hasattr(fn, '__constructor__'):
        return dict(fn.__constructor__)

    return {
        'name': getattr(fn, '__name__', 'unknown'),
        'description': (inspect.getdoc(fn) or '').split('\n')[0],
        'members': [],
    }


def get_members(instance: Mapping[str, Callable]) -> List[str]:
    """Sorted public member names of an instance"""
    return sorted(instance)


def invoke(instance: Mapping[str, Callable], name: str, *args, **kwargs) -> Any:
    """
    Invoke a member of an instance by name.

    Raises:
        MemberNotFoundError: If the instance has no such member
        MemberExecutionError: If the member raises
    """
    if name not in instance:
        raise MemberNotFoundError(
            f"Member {name} not found. "
            f"Available members: {get_members(instance)}"
        )

    member = instance[name]

    try:
        return member(*args, **kwargs)
    except Exception as e:
        raise MemberExecutionError(
            f"Member {name} failed: {type(e).__name__}: {e}\n"
            f"{traceback.format_exc()}"
        ) from e


def accepted_kwargs(fn: Callable, **candidates) -> Dict[str, Any]:
    """
    Keep only the candidates fn declares as parameters.

    None values are dropped so the constructor's own default applies.
    """
    try:
        parameters = inspect.signature(fn).parameters
    except (TypeError, ValueError):
        return {}

    takes_any = any(p.kind == p.VAR_KEYWORD for p in parameters.values())
    return {
        key: value for key, value in candidates.items()
        if value is not None and (takes_any or key in parameters)
    }


def call_with_accepted(fn: Callable, *args, **candidates) -> Any:
    """Call fn with args plus whichever candidate keywords it accepts"""
    return fn(*args, **accepted_kwargs(fn, **candidates))
