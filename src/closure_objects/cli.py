"""
closure-objects command line

Usage:
    closure-objects demo [TIER]
    closure-objects run CONSTRUCTOR MEMBER[:ARG,...] [...] [--arg VALUE]
    closure-objects logs OBJECT_ID [--level LEVEL] [--limit N]

Examples:
    closure-objects demo inherited
    closure-objects run counter increment increment decrement count
    closure-objects run named_functions --arg 10 plus_five minus:5
    closure-objects logs counter-1 --level INFO
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from .config import make_config
from .core.counters import make_counter, make_inherited_shouty_counter, make_shouty_counter
from .core.errors import ClosureObjectError
from .core.functions import deferred_identity, identity, some_functions, some_named_functions
from .core.registry import list_constructors
from .core.self_logger import make_self_logger
from .runtime import ObjectRuntime


def _show(expression: str, value: Any) -> None:
    print(f'{expression} // prints: {value}')


def _shout(value: Any) -> None:
    print(f'  > {value}')


def demo_identity() -> None:
    _show('identity(10)', identity(10))


def demo_deferred() -> None:
    later = deferred_identity(10)
    _show('later = deferred_identity(10); callable(later)', callable(later))
    _show('later()', later())


def demo_positional() -> None:
    fns = some_functions(10)
    _show('fns = some_functions(10); fns[0]()', fns[0]())
    _show('fns[1]()', fns[1]())
    _show('fns[2](5)', fns[2](5))


def demo_named() -> None:
    obj = some_named_functions(10)
    _show("obj = some_named_functions(10); obj['plus_five']()", obj['plus_five']())
    _show("obj['just']()", obj['just']())
    _show("obj['minus'](5)", obj['minus'](5))


def demo_counter() -> None:
    counter = make_counter()
    other = make_counter()
    _show("counter['increment']()", counter['increment']())
    _show("counter['increment']()", counter['increment']())
    _show("counter['decrement']()", counter['decrement']())
    _show("counter['count']()", counter['count']())
    _show("make_counter()['count']()", other['count']())


def demo_shouty() -> None:
    counter = make_shouty_counter(emit=_shout)
    _show("counter['increment']()", counter['increment']())
    _show("counter['increment']()", counter['increment']())
    _show("counter['decrement']()", counter['decrement']())
    _show("'shout' in counter", 'shout' in counter)


def demo_inherited() -> None:
    counter = make_inherited_shouty_counter(emit=_shout)
    _show("counter['increment']()", counter['increment']())
    _show("counter['increment']()", counter['increment']())
    _show("counter['decrement']()", counter['decrement']())


DEMOS: Dict[str, Callable[[], None]] = {
    'identity': demo_identity,
    'deferred': demo_deferred,
    'positional': demo_positional,
    'named': demo_named,
    'counter': demo_counter,
    'shouty': demo_shouty,
    'inherited': demo_inherited,
}


def parse_value(raw: str) -> Any:
    """Convert a command line value to int or float when it looks like one"""
    try:
        return int(raw)
    except ValueError:
        try:
            return float(raw)
        except ValueError:
            return raw


def parse_call(text: str) -> tuple[str, List[Any]]:
    """'minus:5' -> ('minus', [5])"""
    name, _, raw_args = text.partition(':')
    args = [parse_value(a) for a in raw_args.split(',')] if raw_args else []
    return name, args


def cmd_demo(args) -> int:
    tiers = [args.tier] if args.tier else list(DEMOS)
    for i, tier in enumerate(tiers):
        if i:
            print()
        print(f'# {tier}')
        DEMOS[tier]()
    return 0


def cmd_run(args) -> int:
    config = make_config()
    runtime = ObjectRuntime(base_dir=args.data_dir, config=config)

    try:
        obj = runtime.construct(args.constructor, *[parse_value(a) for a in args.arg])
        print(f'# {obj.object_id}')
        for call in args.members:
            name, member_args = parse_call(call)
            result = obj.execute(name, *member_args)
            print(f'{call} -> {result}')
    except ClosureObjectError as e:
        print(f'Error: {str(e).splitlines()[0]}', file=sys.stderr)
        return 1

    return 0


def cmd_logs(args) -> int:
    config = make_config()
    base_dir = Path(args.data_dir or config['get']('DATA_DIR'))
    if not (base_dir / 'logs' / args.object_id).exists():
        print(f'Error: no logs for {args.object_id} in {base_dir}', file=sys.stderr)
        return 1

    logger = make_self_logger(args.object_id, base_dir)

    for entry in logger['get_logs'](level=args.level, limit=args.limit):
        extra = {
            k: v for k, v in entry.items()
            if k not in ('timestamp', 'level', 'message') and v
        }
        fields = ' '.join(f'{k}={v}' for k, v in extra.items())
        print('\t'.join(filter(None, [entry['timestamp'], entry['level'], entry['message'], fields])))

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='closure-objects',
        description='Objects built from closures: constructors, private state, delegation',
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    demo = subparsers.add_parser('demo', help='Run the illustrative listings')
    demo.add_argument('tier', nargs='?', choices=list(DEMOS), help='Run one tier only')
    demo.set_defaults(func=cmd_demo)

    run = subparsers.add_parser('run', help='Construct an object and call members on it')
    run.add_argument('constructor', choices=list_constructors())
    run.add_argument('members', nargs='+', help='Members to call, in order (name or name:arg,arg)')
    run.add_argument('--arg', action='append', default=[], help='Construction argument (repeatable)')
    run.add_argument('--data-dir', default=None, help='Data directory (default: config DATA_DIR)')
    run.set_defaults(func=cmd_run)

    logs = subparsers.add_parser('logs', help="Show an object's log")
    logs.add_argument('object_id')
    logs.add_argument('--level', default=None, help='Only entries at this level')
    logs.add_argument('--limit', type=int, default=None, help='Maximum number of entries')
    logs.add_argument('--data-dir', default=None, help='Data directory (default: config DATA_DIR)')
    logs.set_defaults(func=cmd_logs)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
