"""
Counters: constructors with private state

make_counter                   - private data
make_shouty_counter            - private data and a private method
make_inherited_shouty_counter  - a derived instance that overrides one member

Each call to a constructor creates a new scope. The count lives in that
scope and nothing outside the returned members can see it.
"""

from typing import Callable, Dict, Optional

from .delegation import extend
from .members import call_with_accepted, constructor


OVERRIDE_MARKER = 'overriding!'


@constructor(
    name='counter',
    description='Counter with private state',
    members=['count', 'decrement', 'increment'],
)
def make_counter() -> Dict[str, Callable]:
    shared_state = 0

    def increment():
        nonlocal shared_state
        shared_state += 1
        return shared_state

    def decrement():
        nonlocal shared_state
        shared_state -= 1
        return shared_state

    def count():
        return shared_state

    return {
        'increment': increment,
        'decrement': decrement,
        'count': count,
    }


@constructor(
    name='shouty_counter',
    description='Counter that shouts its count after every change',
    members=['decrement', 'increment'],
)
def make_shouty_counter(
    emit: Callable = print,
    logger: Optional[Dict[str, Callable]] = None,
) -> Dict[str, Callable]:
    """
    Counter whose members call a private helper.

    shout() is not part of the returned mapping, but increment and
    decrement reach it because they share its scope.

    Args:
        emit: Where shouts go (default: print)
        logger: Optional self-logger instance
    """
    shared_state = 0

    def shout():
        emit(shared_state)
        if logger:
            logger['info']('Shouted', count=shared_state)

    def increment():
        nonlocal shared_state
        shared_state += 1
        shout()
        return shared_state

    def decrement():
        nonlocal shared_state
        shared_state -= 1
        shout()
        return shared_state

    return {
        'increment': increment,
        'decrement': decrement,
    }


@constructor(
    name='inherited_shouty_counter',
    description='Shouty counter with increment overridden by delegation',
    members=['decrement', 'increment'],
)
def make_inherited_shouty_counter(
    base: Callable = make_shouty_counter,
    emit: Callable = print,
    logger: Optional[Dict[str, Callable]] = None,
    marker: str = OVERRIDE_MARKER,
) -> Dict[str, Callable]:
    """
    Inherit every member of a base instance and override increment.

    Members that are not overridden are the base instance's own callables,
    so they act on the base instance's state.

    Args:
        base: Constructor to inherit from (make_shouty_counter or make_counter)
        emit: Where output goes, shared with the base if it takes emit
        logger: Optional self-logger instance, shared the same way
        marker: Line emitted by the overriding increment
    """
    super_ref = call_with_accepted(base, emit=emit, logger=logger)

    def increment():
        emit(marker)
        if logger:
            logger['debug']('Delegating increment to base')
        return super_ref['increment']()

    return extend(super_ref, increment=increment)
