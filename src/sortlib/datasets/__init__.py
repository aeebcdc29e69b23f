"""
Datasets package public API.

Re-export the data sources so callers can write:
    from sortlib.datasets import make_dataset, SUPPORTED_DISTS, MWCGenerator
"""

from .generators import SUPPORTED_DISTS, make_dataset
from .mwc import MWCGenerator

__all__ = ["make_dataset", "SUPPORTED_DISTS", "MWCGenerator"]
