import pytest

from lazysegtree import logger
from lazysegtree.defaults import tree_params, prepare_params, log_params, strict_from_env


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch):
    monkeypatch.delenv('LAZYSEGTREE_STRICT', raising=False)
    monkeypatch.delenv('LAZYSEGTREE_LOG_LEVEL', raising=False)


def test_defaults():
    assert tree_params() == {'strict': False, 'log_level': 'info'}
    assert prepare_params() == {'strict': False, 'log_level': logger.INFO}


def test_environment_overrides(monkeypatch):
    """
    test that environment variables override the defaults, and explicit values override both
    """
    monkeypatch.setenv('LAZYSEGTREE_STRICT', 'On')
    monkeypatch.setenv('LAZYSEGTREE_LOG_LEVEL', 'debug')
    assert prepare_params() == {'strict': True, 'log_level': logger.DEBUG}
    assert prepare_params({'strict': False, 'log_level': None}) == {'strict': False, 'log_level': logger.DEBUG}
    assert prepare_params({'log_level': logger.ERROR})['log_level'] == logger.ERROR


@pytest.mark.parametrize('params', [
    {'strict': 'maybe'},
    {'log_level': 'verbose'},
    {'capacity': 16},
    {'log_level': True},
    {'log_level': 15},
])
def test_invalid_params(params):
    with pytest.raises(ValueError):
        prepare_params(params)


def test_log_params(capsys):
    log_params({'strict': True, 'log_level': 20})
    assert capsys.readouterr().out == 'log_level: 20\nstrict: True\n'


def test_strict_from_env(monkeypatch):
    assert strict_from_env() is False
    monkeypatch.setenv('LAZYSEGTREE_STRICT', 'true')
    monkeypatch.setenv('LAZYSEGTREE_LOG_LEVEL', 'verbose')
    assert strict_from_env() is True
