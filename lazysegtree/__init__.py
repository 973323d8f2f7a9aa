from lazysegtree.segment_tree import LazySumSegmentTree, InvalidRangeError

__version__ = "1.0.0"
