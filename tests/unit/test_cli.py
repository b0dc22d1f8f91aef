"""
Tests for the closure-objects command line
"""

import pytest


class TestDemo:
    """closure-objects demo"""

    def test_demo_counter(self, capsys):
        from closure_objects.cli import main

        assert main(['demo', 'counter']) == 0

        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            '# counter',
            "counter['increment']() // prints: 1",
            "counter['increment']() // prints: 2",
            "counter['decrement']() // prints: 1",
            "counter['count']() // prints: 1",
            "make_counter()['count']() // prints: 0",
        ]

    def test_demo_positional(self, capsys):
        from closure_objects.cli import main

        main(['demo', 'positional'])

        out = capsys.readouterr().out
        assert 'fns[0]() // prints: 15' in out
        assert 'fns[1]() // prints: 10' in out
        assert 'fns[2](5) // prints: 5' in out

    def test_demo_inherited(self, capsys):
        from closure_objects.cli import main

        main(['demo', 'inherited'])

        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            '# inherited',
            '  > overriding!',
            '  > 1',
            "counter['increment']() // prints: 1",
            '  > overriding!',
            '  > 2',
            "counter['increment']() // prints: 2",
            '  > 1',
            "counter['decrement']() // prints: 1",
        ]

    def test_demo_all(self, capsys):
        from closure_objects.cli import DEMOS, main

        assert main(['demo']) == 0

        out = capsys.readouterr().out
        for tier in DEMOS:
            assert f'# {tier}' in out

    def test_demo_unknown_tier(self):
        from closure_objects.cli import main

        with pytest.raises(SystemExit):
            main(['demo', 'nonsense'])


class TestRun:
    """closure-objects run"""

    def test_run_counter(self, tmp_path, capsys):
        from closure_objects.cli import main

        code = main([
            'run', 'counter', 'increment', 'increment', 'decrement', 'count',
            '--data-dir', str(tmp_path),
        ])

        assert code == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            '# counter-1',
            'increment -> 1',
            'increment -> 2',
            'decrement -> 1',
            'count -> 1',
        ]

    def test_run_with_arguments(self, tmp_path, capsys):
        from closure_objects.cli import main

        code = main([
            'run', 'named_functions', '--arg', '10', 'plus_five', 'minus:5',
            '--data-dir', str(tmp_path),
        ])

        assert code == 0
        out = capsys.readouterr().out
        assert 'plus_five -> 15' in out
        assert 'minus:5 -> 5' in out

    def test_run_unknown_member(self, tmp_path, capsys):
        from closure_objects.cli import main

        code = main(['run', 'counter', 'reset', '--data-dir', str(tmp_path)])

        assert code == 1
        assert 'Member reset not found' in capsys.readouterr().err

    def test_parse_call(self):
        from closure_objects.cli import parse_call

        assert parse_call('count') == ('count', [])
        assert parse_call('minus:5') == ('minus', [5])
        assert parse_call('f:1.5,x') == ('f', [1.5, 'x'])


class TestLogs:
    """closure-objects logs"""

    def test_logs_after_run(self, tmp_path, capsys):
        from closure_objects.cli import main

        main(['run', 'counter', 'increment', '--data-dir', str(tmp_path)])
        capsys.readouterr()

        code = main(['logs', 'counter-1', '--level', 'INFO', '--data-dir', str(tmp_path)])

        assert code == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 2
        assert 'Constructed counter' in lines[0]
        assert 'Executing increment' in lines[1]
        assert 'member=increment' in lines[1]

    def test_logs_unknown_object(self, tmp_path, capsys):
        from closure_objects.cli import main

        code = main(['logs', 'counter-7', '--data-dir', str(tmp_path)])

        assert code == 1
        assert 'no logs for counter-7' in capsys.readouterr().err
        assert not (tmp_path / 'logs' / 'counter-7').exists()
