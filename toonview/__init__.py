"""Interactive OBJ viewer with toon and cross-hatch shading, plus OBJ mesh and matrix helpers."""

__version__ = "0.1.0"
__all__ = ["app", "camera", "mesh", "shader", "transforms"]