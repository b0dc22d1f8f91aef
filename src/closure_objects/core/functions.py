"""
Functions as values.

The first four steps from a plain function to an object:

1. identity            - a callable is a value
2. deferred_identity   - returning a callable delays evaluation
3. some_functions      - several callables closing over one argument
4. some_named_functions - the same callables, reached by name

The last one is already object-shaped: a mapping from member name to
callable, all members sharing the captured argument.
"""

from typing import Any, Callable, Dict, Tuple

from .members import constructor


class _Missing:
    """Sentinel for an argument that was never passed"""

    def __repr__(self):
        return 'MISSING'

    def __bool__(self):
        return False


MISSING = _Missing()


def identity(a: Any) -> Any:
    """Return a unchanged."""
    return a


def deferred_identity(a: Any) -> Callable[[], Any]:
    """
    Capture a and hand back a callable that produces it later.

    >>> later = deferred_identity(10)
    >>> later()
    10
    """
    def get():
        return a

    return get


def _make_minus(a):
    # minus() without an argument is out of contract, answer MISSING
    def minus(x=MISSING):
        if x is MISSING:
            return MISSING
        return a - x

    return minus


def some_functions(a: Any) -> Tuple[Callable, Callable, Callable]:
    """
    Three callables over the same a, reached by position.

    Returns:
        (plus five, just a, minus x)
    """
    return (
        lambda: a + 5,
        lambda: a,
        _make_minus(a),
    )


@constructor(
    name='named_functions',
    description='Named callables over one captured argument',
    members=['just', 'minus', 'plus_five'],
)
def some_named_functions(a: Any) -> Dict[str, Callable]:
    """
    Three callables over the same a, reached by name.

    Returns:
        {'plus_five': ..., 'just': ..., 'minus': ...}
    """
    def plus_five():
        return a + 5

    def just():
        return a

    return {
        'plus_five': plus_five,
        'just': just,
        'minus': _make_minus(a),
    }
