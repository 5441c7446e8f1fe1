"""Infrastructure implementations of core interfaces."""

from .loaders import PDBColumnLoader, WhitespaceTableLoader, get_loader

__all__ = [
    "PDBColumnLoader",
    "WhitespaceTableLoader",
    "get_loader",
]
