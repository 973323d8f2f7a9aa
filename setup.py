import sys
from setuptools import setup, find_packages

if sys.version_info.major != 3:
    print('This Python is only compatible with Python 3, but you are running '
          'Python {}. The installation will likely fail.'.format(sys.version_info.major))


long_description = """
# lazysegtree

A segment tree with lazy propagation over a fixed sequence of integers:
add a constant to every element of a range, and query the sum of a range,
both in O(log n).

## Quick example

```python
from lazysegtree import LazySumSegmentTree

tree = LazySumSegmentTree([1, 2, 3, 4, 5])
tree.update_range(1, 3, 10)
assert tree.query_range(0, 4) == 45
assert tree.query_range(1, 3) == 39
```

Invalid ranges are ignored (queries sum to 0) unless the tree is built with
`strict=True` or `LAZYSEGTREE_STRICT=1` is set, in which case they raise
`InvalidRangeError`.

A small command line is available:

```
python -m lazysegtree.run sample
python -m lazysegtree.run script 1 2 3 4 5 --update 1 3 10 --query 0 4
```
"""

setup(name='lazysegtree',
      packages=[package for package in find_packages()
                if package.startswith('lazysegtree')],
      install_requires=[
          'numpy',
          'click',
      ],
      extras_require={
        'tests': [
            'pytest',
            'pytest-cov'
        ],
      },
      description='Range update and range sum queries on a segment tree with lazy propagation.',
      keywords="segment-tree lazy-propagation range-query data-structures",
      license="MIT",
      long_description=long_description,
      long_description_content_type='text/markdown',
      python_requires='>=3.6',
      version="1.0.0",
      )

# python setup.py sdist
# python setup.py bdist_wheel
