import pytest
from click.testing import CliRunner

from lazysegtree import logger
from lazysegtree.run import main, run_sample, run_script


@pytest.fixture(autouse=True)
def _restore_level(monkeypatch):
    monkeypatch.delenv('LAZYSEGTREE_STRICT', raising=False)
    monkeypatch.delenv('LAZYSEGTREE_LOG_LEVEL', raising=False)
    level = logger.get_level()
    yield
    logger.set_level(level)


def test_run_sample():
    """
    test the sample walk-through leaves the expected elements
    """
    tree = run_sample()
    assert [tree[i] for i in range(len(tree))] == [1, 12, 13, 9, 10, 1, 2, 8]


def test_run_script():
    sums = run_script([1, 2, 3, 4, 5], [(1, 3, 10), (0, 9, 1)], [(0, 4), (1, 3), (2, 2)])
    assert sums == [45, 39, 13]


def test_sample_command():
    runner = CliRunner()
    result = runner.invoke(main, ['--log-level', 'info', 'sample'])
    assert result.exit_code == 0, result.output
    assert 'Update: add 10 to range [1, 4]' in result.output
    for row in ['| sum [0, 7] | 36 |', '| sum [2, 5] | 18 |',
                '| sum [0, 7] | 76 |', '| sum [2, 5] | 48 |', '| sum [0, 1] | 13 |', '| sum [4, 6] | 28 |',
                '| sum [0, 7] | 56 |', '| sum [2, 5] | 33 |']:
        assert row in result.output


def test_script_command():
    runner = CliRunner()
    result = runner.invoke(main, ['--log-level', 'error', 'script', '1', '2', '3', '4', '5', '6', '7', '8',
                                  '--update', '0', '7', '1', '--update', '2', '5', '-2',
                                  '--query', '2', '5', '--query', '0', '7', '--query', '3', '9'])
    assert result.exit_code == 0, result.output
    assert result.output == 'query [2, 5] = 14\nquery [0, 7] = 36\nquery [3, 9] = 0\n'


def test_script_command_strict():
    """
    test that a strict run exits with a usage error on an invalid range
    """
    runner = CliRunner()
    result = runner.invoke(main, ['--strict', '--log-level', 'error', 'script', '1', '2', '3', '--query', '3', '9'])
    assert result.exit_code == 2
    assert 'invalid range [3, 9] for a tree of size 3' in result.output
