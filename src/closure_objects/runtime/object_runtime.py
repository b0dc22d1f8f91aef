"""
Object Runtime

Hosts live closure objects.

A live object is:
- An instance (mapping of members over private state)
- Logs (self-logging)
- Emitted output (what its members printed)

The runtime:
- Builds instances from registered constructors
- Injects logger, emitter and config values the constructor asks for
- Executes members by name
- Logs all operations
- Provides introspection
"""

import shutil
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from ..config import make_config
from ..core.errors import ClosureObjectError
from ..core.members import call_with_accepted, get_constructor_metadata, get_members, invoke
from ..core.registry import get_constructor
from ..core.self_logger import make_self_logger


class ObjectRuntime:
    """
    Runtime for closure objects.

    Every construct() call builds a new instance with its own state, even
    for the same constructor.
    """

    def __init__(self, base_dir: Optional[Path | str] = None, config: Optional[Dict[str, Callable]] = None):
        """
        Initialize runtime.

        Args:
            base_dir: Base directory for logs (default: config DATA_DIR)
            config: Config object from make_config() (default: a fresh one)
        """
        self.config = config or make_config()
        self.base_dir = Path(base_dir or self.config['get']('DATA_DIR'))
        self.base_dir.mkdir(parents=True, exist_ok=True)

        self._objects: Dict[str, 'LiveObject'] = {}

    def construct(self, name: str, *args, object_id: Optional[str] = None) -> 'LiveObject':
        """
        Build a new live object.

        Args:
            name: Registry name of the constructor (e.g., 'counter')
            *args: Construction arguments
            object_id: ID for the object (default: '<name>-<n>')

        Returns:
            LiveObject wrapping the new instance

        Raises:
            ConstructorNotFoundError: If name is not registered
            ClosureObjectError: If object_id is already in use or the constructor fails
        """
        fn = get_constructor(name)

        if object_id is None:
            object_id = self._next_object_id(name)
        elif object_id in self._objects:
            raise ClosureObjectError(f'Object already exists: {object_id}')

        log_dir = self.base_dir / 'logs' / object_id
        had_log_dir = log_dir.exists()

        try:
            obj = LiveObject(
                object_id=object_id,
                constructor_name=name,
                constructor_fn=fn,
                args=args,
                runtime=self,
            )
        except Exception as e:
            # The object never existed: drop the log directory made for it
            if not had_log_dir:
                shutil.rmtree(log_dir, ignore_errors=True)
            if isinstance(e, ClosureObjectError):
                raise
            raise ClosureObjectError(
                f'Failed to construct {name}: {type(e).__name__}: {e}'
            ) from e

        self._objects[object_id] = obj

        return obj

    def get(self, object_id: str) -> 'LiveObject':
        """Get a live object by ID"""
        if object_id not in self._objects:
            raise ClosureObjectError(f'Object not found: {object_id}')
        return self._objects[object_id]

    def list_objects(self) -> List[str]:
        return list(self._objects)

    def make_logger(self, object_id: str) -> Optional[Dict[str, Callable]]:
        """Self-logger for object_id, or None when self-logging is off"""
        if not self.config['get']('SELF_LOGGING'):
            return None

        return make_self_logger(
            object_id=object_id,
            base_dir=self.base_dir,
            max_log_size=self.config['get']('LOG_MAX_SIZE'),
        )

    def _next_object_id(self, name: str) -> str:
        # Log directories from earlier runs keep their IDs
        n = 1
        while True:
            object_id = f'{name}-{n}'
            taken = object_id in self._objects or (self.base_dir / 'logs' / object_id).exists()
            if not taken:
                return object_id
            n += 1


class LiveObject:
    """
    A closure object hosted by the runtime.

    Combines:
    - Instance (members over private state)
    - Logs (self-logging)
    - Emitted lines
    """

    def __init__(
        self,
        object_id: str,
        constructor_name: str,
        constructor_fn: Callable,
        args: tuple,
        runtime: ObjectRuntime,
    ):
        """
        Initialize live object.

        Args:
            object_id: Unique ID for this object
            constructor_name: Registry name it was built from
            constructor_fn: The constructor itself
            args: Construction arguments
            runtime: Parent runtime
        """
        self.object_id = object_id
        self.constructor_name = constructor_name
        self.constructor_fn = constructor_fn
        self.runtime = runtime

        self.logger = runtime.make_logger(object_id)
        self._emitted: List[str] = []

        self.instance = call_with_accepted(
            constructor_fn,
            *args,
            emit=self._emit,
            logger=self.logger,
            marker=runtime.config['get']('OVERRIDE_MARKER'),
        )

        self._log('info', f'Constructed {constructor_name}', constructor=constructor_name)

    def _emit(self, value: Any) -> None:
        print(value)
        self._emitted.append(str(value))

    def _log(self, level: str, message: str, **fields) -> None:
        if self.logger:
            self.logger[level](message, **fields)

    def execute(self, member: str, *args) -> Any:
        """
        Execute a member of this object.

        Args:
            member: Member name (e.g., 'increment')
            *args: Arguments for the member

        Returns:
            Whatever the member returns
        """
        self._log('info', f'Executing {member}', member=member)

        try:
            result = invoke(self.instance, member, *args)

            self._log(
                'debug',
                f'{member} completed successfully',
                member=member,
                status='success',
                result=result,
            )

            return result

        except ClosureObjectError as e:
            self._log(
                'error',
                f'{member} failed: {str(e).splitlines()[0]}',
                member=member,
                status='error',
                error=type(e).__name__,
            )
            raise

    def emitted(self) -> List[str]:
        """Lines emitted by the object's members so far"""
        return list(self._emitted)

    def get_logs(
        self,
        level: Optional[str] = None,
        limit: Optional[int] = None,
        **filters,
    ) -> List[Dict[str, Any]]:
        """Get object's logs"""
        if not self.logger:
            return []
        return self.logger['get_logs'](level=level, limit=limit, **filters)

    def get_metadata(self) -> Dict[str, Any]:
        """Get object metadata"""
        metadata = get_constructor_metadata(self.constructor_fn)

        metadata['object_id'] = self.object_id
        metadata['constructor'] = self.constructor_name
        metadata['members'] = get_members(self.instance)
        metadata['log_count'] = len(self.get_logs())
        metadata['emitted_count'] = len(self._emitted)

        return metadata
