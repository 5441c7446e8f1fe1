"""Structure loaders and loader lookup."""

from typing import Dict, Type

from ...core.exceptions import ConfigurationError
from ...core.interfaces.structure_loader import StructureLoader
from .pdb_column_loader import PDBColumnLoader
from .whitespace_table_loader import WhitespaceTableLoader

LOADERS: Dict[str, Type[StructureLoader]] = {
    "whitespace": WhitespaceTableLoader,
    "pdb": PDBColumnLoader,
}


def get_loader(name: str = "whitespace") -> StructureLoader:
    """Instantiate a loader by name ("whitespace" or "pdb")."""
    try:
        return LOADERS[name]()
    except KeyError:
        raise ConfigurationError(
            f"Unknown loader '{name}', expected one of {sorted(LOADERS)}"
        )


__all__ = ["LOADERS", "get_loader", "PDBColumnLoader", "WhitespaceTableLoader"]
