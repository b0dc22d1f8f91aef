"""
Constructor registry

Maps registry names to constructors so objects can be built by name
(from the runtime or the command line).
"""

from typing import Callable, Dict, List

from .counters import make_counter, make_inherited_shouty_counter, make_shouty_counter
from .errors import ConstructorNotFoundError
from .functions import some_named_functions
from .members import get_constructor_metadata


CONSTRUCTORS: Dict[str, Callable] = {
    get_constructor_metadata(fn)['name']: fn
    for fn in (
        make_counter,
        make_shouty_counter,
        make_inherited_shouty_counter,
        some_named_functions,
    )
}


def get_constructor(name: str) -> Callable:
    """
    Look up a constructor by registry name.

    Raises:
        ConstructorNotFoundError: If nothing is registered under name
    """
    if name not in CONSTRUCTORS:
        raise ConstructorNotFoundError(
            f"Constructor {name} not found. "
            f"Available constructors: {list_constructors()}"
        )
    return CONSTRUCTORS[name]


def list_constructors() -> List[str]:
    return sorted(CONSTRUCTORS)
