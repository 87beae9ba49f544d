from nested_pairs.utils.iter_utils import zip_pairs, unzip_pairs

__all__ = [
    "zip_pairs",
    "unzip_pairs",
]
