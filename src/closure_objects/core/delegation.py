"""
Delegation: inheritance without classes.

A derived instance is a new mapping built from a base instance:
- Forwarded members are the base's own callables (same object, same state)
- Overridden members are new callables, usually calling the base member
  they replace through a reference the constructor kept

Method resolution is whatever entry the final mapping holds. A "super
call" is an ordinary call on the retained base instance.
"""

from typing import Callable, Dict, Mapping, Set

from .errors import MemberNotFoundError


def extend(base: Mapping[str, Callable], **overrides: Callable) -> Dict[str, Callable]:
    """
    Spread base into a new mapping, then replace the overridden members.

    Args:
        base: Instance to inherit from (not modified)
        **overrides: Members to replace or add

    Returns:
        New instance mapping
    """
    return {**base, **overrides}


def forward(base: Mapping[str, Callable], *names: str) -> Dict[str, Callable]:
    """
    Forward selected members of base, field by field.

    Raises:
        MemberNotFoundError: If base has no member with one of the names
    """
    forwarded = {}
    for name in names:
        if name not in base:
            raise MemberNotFoundError(
                f"Cannot forward {name}: "
                f"available members: {sorted(base)}"
            )
        forwarded[name] = base[name]
    return forwarded


def inherited(base: Mapping[str, Callable], derived: Mapping[str, Callable]) -> Set[str]:
    """Names whose callable in derived is the base's callable"""
    return {
        name for name, member in derived.items()
        if name in base and base[name] is member
    }


def overridden(base: Mapping[str, Callable], derived: Mapping[str, Callable]) -> Set[str]:
    """Names present in both mappings with a different callable"""
    return {
        name for name, member in derived.items()
        if name in base and base[name] is not member
    }
