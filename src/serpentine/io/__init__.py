"""Scene file I/O for serpentine.

This module reads the small JSON scene files used by the command line:
circles, traversal order, topology flags and mirror settings.

Key functions:
- read_scene: Load and validate a scene file
"""

from serpentine.io.scene import Scene, SceneDocument, read_scene

__all__ = ["Scene", "SceneDocument", "read_scene"]
