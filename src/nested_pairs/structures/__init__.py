from nested_pairs.structures.pairing import Pair
from nested_pairs.structures.deferred import DeferredPair, deferred_construct

__all__ = [
    "Pair",
    "DeferredPair",
    "deferred_construct",
]
