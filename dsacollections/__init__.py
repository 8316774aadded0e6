"""Integer containers with cursor iterators: sorted indexed list, bag, bit-array set and sorted map."""

__version__ = "0.1.0"
__all__ = ["bag", "bitset", "relations", "sorted_indexed_list", "sorted_map"]