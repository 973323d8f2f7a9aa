import click

from lazysegtree import logger
from lazysegtree.defaults import prepare_params, log_params
from lazysegtree.segment_tree import LazySumSegmentTree, InvalidRangeError

SAMPLE_VALUES = [1, 2, 3, 4, 5, 6, 7, 8]


def _log_sums(tree, ranges):
    for left, right in ranges:
        logger.logkv('sum [{}, {}]'.format(left, right), tree.query_range(left, right))
    logger.dumpkvs()


def run_sample(strict=False):
    """
    Walk through a few updates and queries on the tree over SAMPLE_VALUES,
    reporting the sums through the logger.

    :param strict: (bool) whether the tree raises on invalid ranges
    :return: (LazySumSegmentTree) the tree after the updates
    """
    tree = LazySumSegmentTree(SAMPLE_VALUES, strict=strict)
    last = len(tree) - 1

    logger.info('Initial sums')
    _log_sums(tree, [(0, last), (2, 5)])

    logger.info('Update: add 10 to range [1, 4]')
    tree.update_range(1, 4, 10)
    _log_sums(tree, [(0, last), (2, 5), (0, 1), (4, 6)])

    logger.info('Update: add -5 to range [3, 6]')
    tree.update_range(3, 6, -5)
    _log_sums(tree, [(0, last), (2, 5)])
    return tree


def run_script(values, updates, queries, strict=False):
    """
    Build a tree, apply the updates in order, then answer the queries.

    :param values: ([int]) the initial sequence
    :param updates: ([(int, int, int)]) (left, right, delta) updates
    :param queries: ([(int, int)]) (left, right) queries
    :param strict: (bool) whether the tree raises on invalid ranges
    :return: ([int]) the sum for each query
    """
    tree = LazySumSegmentTree(values, strict=strict)
    for left, right, delta in updates:
        logger.debug('update [{}, {}] += {}'.format(left, right, delta))
        tree.update_range(left, right, delta)
    return [tree.query_range(left, right) for left, right in queries]


@click.group()
@click.option('--strict/--no-strict', default=None,
              help='Fail on invalid ranges instead of ignoring them (default $LAZYSEGTREE_STRICT or off).')
@click.option('--log-level', type=click.Choice(['debug', 'info', 'warn', 'error', 'disabled']), default=None,
              help='Logging threshold (default $LAZYSEGTREE_LOG_LEVEL or info).')
@click.pass_context
def main(ctx, strict, log_level):
    """
    Range update / range sum queries on a lazy segment tree.
    """
    params = prepare_params({'strict': strict, 'log_level': log_level})
    logger.set_level(params['log_level'])
    if params['log_level'] <= logger.DEBUG:
        log_params(params, logger_input=logger)
    ctx.obj = params


@main.command()
@click.pass_obj
def sample(params):
    """
    Run the sample walk-through over [1, ..., 8].
    """
    run_sample(strict=params['strict'])


@main.command()
@click.argument('values', nargs=-1, type=int)
@click.option('--update', 'updates', type=(int, int, int), multiple=True, metavar='L R DELTA',
              help='Add DELTA to every element in [L, R], may be repeated.')
@click.option('--query', 'queries', type=(int, int), multiple=True, metavar='L R',
              help='Print the sum over [L, R], may be repeated.')
@click.pass_obj
def script(params, values, updates, queries):
    """
    Build a tree over VALUES, apply every --update, then answer every --query.
    """
    try:
        sums = run_script(list(values), updates, queries, strict=params['strict'])
    except InvalidRangeError as err:
        raise click.UsageError(str(err))
    for (left, right), total in zip(queries, sums):
        click.echo('query [{}, {}] = {}'.format(left, right, total))


if __name__ == '__main__':
    main()
