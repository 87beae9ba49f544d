from nested_pairs.algebra.monoids import Monoid, SUM, PRODUCT, STRING, TUPLE, ALL, ANY, dual, ndarray_sum

__all__ = [
    "Monoid",
    "SUM",
    "PRODUCT",
    "STRING",
    "TUPLE",
    "ALL",
    "ANY",
    "dual",
    "ndarray_sum",
]
