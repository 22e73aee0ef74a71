"""Block-world simulation core: chunks, lighting, liquids, entities, inventories, meshes and saves."""

__version__ = "0.1.0"