import os

from lazysegtree import logger

LOG_LEVELS = {
    'debug': logger.DEBUG,
    'info': logger.INFO,
    'warn': logger.WARN,
    'error': logger.ERROR,
    'disabled': logger.DISABLED,
}

_TRUE_STRINGS = ('1', 'true', 'yes', 'on')
_FALSE_STRINGS = ('0', 'false', 'no', 'off')


def tree_params():
    return dict(
        strict=False,
        log_level='info',
    )


def _parse_bool(name, value):
    if isinstance(value, bool):
        return value
    lowered = str(value).strip().lower()
    if lowered in _TRUE_STRINGS:
        return True
    if lowered in _FALSE_STRINGS:
        return False
    raise ValueError('{} must be one of {}, got {!r}'.format(name, _TRUE_STRINGS + _FALSE_STRINGS, value))


def strict_from_env():
    """
    the default range policy: $LAZYSEGTREE_STRICT if set, else tree_params()['strict']

    :return: (bool) whether trees raise on invalid ranges
    """
    env_strict = os.getenv('LAZYSEGTREE_STRICT')
    if env_strict:
        return _parse_bool('LAZYSEGTREE_STRICT', env_strict)
    return tree_params()['strict']


def prepare_params(params=None):
    """
    merge the given parameters over the defaults and the environment

    Precedence, lowest first: tree_params(), $LAZYSEGTREE_STRICT and
    $LAZYSEGTREE_LOG_LEVEL, then the `params` argument.

    :param params: (dict) explicit parameters (None values are ignored)
    :return: (dict) the validated parameters, with 'log_level' as an int level
    """
    merged = tree_params()
    env_strict = os.getenv('LAZYSEGTREE_STRICT')
    if env_strict:
        merged['strict'] = env_strict
    env_level = os.getenv('LAZYSEGTREE_LOG_LEVEL')
    if env_level:
        merged['log_level'] = env_level
    if params is not None:
        merged.update({key: val for key, val in params.items() if val is not None})

    unknown = set(merged) - set(tree_params())
    if unknown:
        raise ValueError('Unknown parameters: {}'.format(', '.join(sorted(unknown))))

    merged['strict'] = _parse_bool('strict', merged['strict'])
    level = merged['log_level']
    if isinstance(level, bool):
        raise ValueError('Unknown log level: {!r}'.format(level))
    if isinstance(level, int):
        if level not in LOG_LEVELS.values():
            raise ValueError('Unknown log level: {!r}'.format(level))
    else:
        level = str(level).strip().lower()
        if level not in LOG_LEVELS:
            raise ValueError('Unknown log level: {!r}'.format(merged['log_level']))
        level = LOG_LEVELS[level]
    merged['log_level'] = level
    return merged


def log_params(params, logger_input=None):
    """
    log the parameters, one per line

    :param params: (dict) the parameters to log
    :param logger_input: (module) the logger to use (default lazysegtree.logger)
    """
    if logger_input is None:
        logger_input = logger
    for key in sorted(params.keys()):
        logger_input.info('{}: {}'.format(key, params[key]))
