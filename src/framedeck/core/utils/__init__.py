"""Core utilities: scene file loading."""

from .serialization import load_scene, scene_from_dict

__all__ = ["load_scene", "scene_from_dict"]
