import operator

import numpy as np

from lazysegtree import logger
from lazysegtree.defaults import strict_from_env


class InvalidRangeError(ValueError):
    def __init__(self, start, end, size):
        """
        Raised by a strict tree when [start, end] is not a valid range

        :param start: (int) first index of the requested range
        :param end: (int) last index of the requested range (inclusive)
        :param size: (int) the number of elements in the tree
        """
        super(InvalidRangeError, self).__init__(
            'invalid range [{}, {}] for a tree of size {}'.format(start, end, size))
        self.start = start
        self.end = end
        self.size = size


class LazySumSegmentTree(object):
    ROOT = 1

    def __init__(self, values, strict=None):
        """
        Build a Segment Tree with lazy propagation over a fixed sequence of integers.

        https://en.wikipedia.org/wiki/Segment_tree

        Supports two operations, both in O(log n):

            a) `update_range` adds a constant to every element of
               an inclusive index range.
            b) `query_range` returns the sum of the elements of
               an inclusive index range.

        Nodes are stored implicitly: the root is at index 1 and the
        children of node k are at 2k and 2k + 1.

        :param values: ([int] or np.ndarray) the initial sequence, may be empty
        :param strict: (bool) raise InvalidRangeError on invalid ranges instead of
            ignoring them (if None, taken from $LAZYSEGTREE_STRICT, default False)
        """
        values = np.asarray(values)
        if values.ndim != 1:
            raise ValueError('expected a one dimensional sequence, got shape {}'.format(values.shape))
        if values.dtype == object:
            # python ints outside the int64 range end up in an object array
            try:
                values = [operator.index(value) for value in values]
            except TypeError:
                raise TypeError('expected integer values, got {!r}'.format(values.tolist()))
        elif values.size > 0 and not np.issubdtype(values.dtype, np.integer):
            raise TypeError('expected integer values, got dtype {}'.format(values.dtype))

        if strict is None:
            strict = strict_from_env()
        self._strict = bool(strict)
        self._size = len(values)
        self._aggregate = [0] * (4 * self._size)
        self._pending = [0] * (4 * self._size)
        if self._size > 0:
            self._build(values, self.ROOT, 0, self._size - 1)
        logger.debug('built tree of size', self._size)

    def _build(self, values, node, start, end):
        if start == end:
            self._aggregate[node] = int(values[start])
            return
        mid = start + (end - start) // 2
        self._build(values, node << 1, start, mid)
        self._build(values, node << 1 | 1, mid + 1, end)
        self._aggregate[node] = self._aggregate[node << 1] + self._aggregate[node << 1 | 1]

    def _push(self, node, start, end):
        """
        Fold the pending delta of `node` into its aggregate and hand it down to its children.

        :param node: (int) index of the node
        :param start: (int) first index covered by the node
        :param end: (int) last index covered by the node
        """
        delta = self._pending[node]
        if delta == 0:
            return
        self._aggregate[node] += delta * (end - start + 1)
        if start != end:
            self._pending[node << 1] += delta
            self._pending[node << 1 | 1] += delta
        self._pending[node] = 0

    def _update_helper(self, left, right, delta, node, start, end):
        self._push(node, start, end)
        if end < left or right < start:
            return
        if left <= start and end <= right:
            self._aggregate[node] += delta * (end - start + 1)
            if start != end:
                self._pending[node << 1] += delta
                self._pending[node << 1 | 1] += delta
            return
        mid = start + (end - start) // 2
        self._update_helper(left, right, delta, node << 1, start, mid)
        self._update_helper(left, right, delta, node << 1 | 1, mid + 1, end)
        self._aggregate[node] = self._aggregate[node << 1] + self._aggregate[node << 1 | 1]

    def _query_helper(self, left, right, node, start, end):
        if end < left or right < start:
            return 0
        self._push(node, start, end)
        if left <= start and end <= right:
            return self._aggregate[node]
        mid = start + (end - start) // 2
        return (self._query_helper(left, right, node << 1, start, mid) +
                self._query_helper(left, right, node << 1 | 1, mid + 1, end))

    def _check_range(self, left, right, operation):
        if 0 <= left <= right < self._size:
            return True
        if self._strict:
            raise InvalidRangeError(left, right, self._size)
        logger.debug('{}: ignoring range [{}, {}] for size {}'.format(operation, left, right, self._size))
        return False

    def update_range(self, left, right, delta):
        """
        Add `delta` to every element arr[left] ... arr[right].

        An invalid range (or any range on an empty tree) is ignored,
        or raises InvalidRangeError if the tree is strict.

        :param left: (int) first index of the range
        :param right: (int) last index of the range (inclusive)
        :param delta: (int) the value to add, any object supporting __index__
        """
        if not self._check_range(left, right, 'update_range'):
            return
        self._update_helper(left, right, operator.index(delta), self.ROOT, 0, self._size - 1)

    def query_range(self, left, right):
        """
        Returns arr[left] + ... + arr[right].

        An invalid range (or any range on an empty tree) sums to 0,
        or raises InvalidRangeError if the tree is strict.

        :param left: (int) first index of the range
        :param right: (int) last index of the range (inclusive)
        :return: (int) the sum over the range
        """
        if not self._check_range(left, right, 'query_range'):
            return 0
        return self._query_helper(left, right, self.ROOT, 0, self._size - 1)

    def sum(self):
        """Returns the sum of all the elements, 0 if the tree is empty."""
        if self._size == 0:
            return 0
        return self.query_range(0, self._size - 1)

    @property
    def strict(self):
        return self._strict

    def __len__(self):
        return self._size

    def __getitem__(self, idx):
        if idx < 0:
            idx += self._size
        if not 0 <= idx < self._size:
            raise IndexError('tree index out of range')
        return self.query_range(idx, idx)

    def __repr__(self):
        return '{}(size={}, strict={})'.format(type(self).__name__, self._size, self._strict)
