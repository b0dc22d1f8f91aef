"""
Self-Logger

Each object logs to itself (not to an external logging system).

Design:
- Logs stored in TSV files (human-readable, grep-able)
- Append-only: rows are never changed or dropped (a new field widens
  the header, swapped in from a temporary copy)
- Each object has its own log directory: logs/{object_id}/log.tsv
- Log rotation when file exceeds size limit
- Query logs with filters (level, custom fields)

The logger is built the same way as the objects it serves: a constructor
returning a mapping of members over private bindings (the log directory
and size limit).
"""

import csv
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union



LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
DEFAULT_MAX_LOG_SIZE = 10 * 1024 * 1024  # 10MB
BASE_FIELDS = ['timestamp', 'level', 'message']


def make_self_logger(
    object_id: str,
    base_dir: Path | str,
    max_log_size: Optional[int] = None,
) -> Dict[str, Callable]:
    """
    Create a self-logger for one object.

    Args:
        object_id: ID of the object (e.g., 'counter-1')
        base_dir: Base directory for log storage
        max_log_size: Maximum log file size in bytes before rotation
                     (default: 10MB)
    """
    log_dir = Path(base_dir) / 'logs' / object_id
    log_dir.mkdir(parents=True, exist_ok=True)
    current = log_dir / 'log.tsv'
    limit = max_log_size or DEFAULT_MAX_LOG_SIZE

    def fieldnames() -> List[str]:
        if not current.exists():
            return list(BASE_FIELDS)

        with open(current, 'r', newline='') as f:
            reader = csv.DictReader(f, delimiter='\t')
            return list(reader.fieldnames or BASE_FIELDS)

    def rotate_if_needed() -> None:
        if not current.exists() or current.stat().st_size < limit:
            return

        # Microseconds keep two rotations in the same second apart
        timestamp = datetime.now().strftime('%Y%m%d-%H%M%S-%f')
        current.rename(log_dir / f'log-{timestamp}.tsv')

    def read(path: Path) -> List[Dict[str, Any]]:
        with open(path, 'r', newline='') as f:
            return list(csv.DictReader(f, delimiter='\t'))

    def log(level: str, message: str, **fields) -> None:
        """
        Log an entry.

        Args:
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            message: Log message
            **fields: Additional fields to log (member, count, etc.)
        """
        level = level.upper()
        if level not in LEVELS:
            raise ValueError(f'Unknown log level: {level}')

        rotate_if_needed()

        entry = {
            'timestamp': datetime.now().isoformat(),
            'level': level,
            'message': message,
            **fields,
        }
        entry = {k: v for k, v in entry.items() if v is not None}

        names = fieldnames()
        new_names = [key for key in entry if key not in names]
        is_new_file = not current.exists()

        if new_names and not is_new_file:
            # Header grows: copy the rows under the wider header, then swap files
            rows = read(current)
            names.extend(new_names)
            widened = log_dir / 'log.tsv.tmp'
            with open(widened, 'w', newline='') as f:
                writer = csv.DictWriter(f, fieldnames=names, delimiter='\t')
                writer.writeheader()
                writer.writerows(rows)
            widened.replace(current)
        else:
            names.extend(new_names)

        with open(current, 'a', newline='') as f:
            writer = csv.DictWriter(f, fieldnames=names, delimiter='\t')
            if is_new_file:
                writer.writeheader()
            writer.writerow(entry)

    def get_logs(
        level: Optional[Union[str, List[str]]] = None,
        limit: Optional[int] = None,
        offset: int = 0,
        **filters,
    ) -> List[Dict[str, Any]]:
        """
        Get log entries, oldest first.

        Args:
            level: Filter by level (string or list of strings)
            limit: Maximum number of entries to return
            offset: Number of entries to skip
            **filters: Additional filters (e.g., member='increment')
        """
        entries = []
        for rotated in sorted(log_dir.glob('log-*.tsv')):
            entries.extend(read(rotated))
        if current.exists():
            entries.extend(read(current))

        if level is not None:
            if isinstance(level, str):
                level = [level]
            wanted = {name.upper() for name in level}
            entries = [e for e in entries if e.get('level') in wanted]

        for key, value in filters.items():
            entries = [e for e in entries if e.get(key) == str(value)]

        if offset > 0:
            entries = entries[offset:]

        if limit is not None:
            entries = entries[:limit]

        return entries

    def log_file() -> Path:
        return current

    def at(level):
        def emit(message: str, **fields) -> None:
            log(level, message, **fields)
        emit.__name__ = level.lower()
        return emit

    return {
        'log': log,
        'debug': at('DEBUG'),
        'info': at('INFO'),
        'warning': at('WARNING'),
        'error': at('ERROR'),
        'critical': at('CRITICAL'),
        'get_logs': get_logs,
        'log_file': log_file,
    }
