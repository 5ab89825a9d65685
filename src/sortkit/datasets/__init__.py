"""
Datasets package public API.

Re-export the generators so callers can write:
    from sortkit.datasets import make_dataset, make_tagged_dataset, SUPPORTED_DISTS
"""

from .generators import SUPPORTED_DISTS, make_dataset, make_tagged_dataset

__all__ = ["make_dataset", "make_tagged_dataset", "SUPPORTED_DISTS"]
