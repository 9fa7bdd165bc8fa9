from .catalog import ResourceCatalog

__all__ = ["ResourceCatalog"]
