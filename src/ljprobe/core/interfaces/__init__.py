from .structure_loader import StructureLoader

__all__ = ["StructureLoader"]
