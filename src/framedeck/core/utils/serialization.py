"""
Scene Serialization

Reads `.excalidraw` scene files (and already-parsed payloads) into
SceneSnapshot objects so exports and presentations can run against a
saved drawing instead of a live editor.

File shape::

    {
        "type": "excalidraw",
        "version": 2,
        "elements": [...],
        "appState": {...},
        "files": {...}
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..errors import SceneFormatError
from ..models.scene import SceneSnapshot

logger = logging.getLogger(__name__)

SCENE_FILE_TYPE = "excalidraw"
SCENE_FILE_EXTENSION = ".excalidraw"


def scene_from_dict(data: Any) -> SceneSnapshot:
    """
    Build a SceneSnapshot from a parsed scene payload.

    Args:
        data: Parsed JSON payload

    Returns:
        SceneSnapshot instance

    Raises:
        SceneFormatError: If the payload is not a scene
    """
    if not isinstance(data, dict):
        raise SceneFormatError(f"Scene payload must be an object, got {type(data).__name__}")

    file_type = data.get("type")
    if file_type is not None and file_type != SCENE_FILE_TYPE:
        raise SceneFormatError(f"Unsupported scene type: {file_type!r}")

    elements = data.get("elements", [])
    if not isinstance(elements, list):
        raise SceneFormatError("Scene 'elements' must be a list")
    for i, element in enumerate(elements):
        if not isinstance(element, dict):
            raise SceneFormatError(f"Element {i} is not an object")

    app_state = data.get("appState")
    files = data.get("files")
    if app_state is None:
        app_state = {}
    if files is None:
        files = {}
    if not isinstance(app_state, dict) or not isinstance(files, dict):
        raise SceneFormatError("Scene 'appState' and 'files' must be objects")

    return SceneSnapshot(elements=tuple(elements), files=files, app_state=app_state)


def load_scene(path: Path) -> SceneSnapshot:
    """
    Load a scene file from disk.

    Args:
        path: Path to a `.excalidraw` file

    Returns:
        SceneSnapshot instance

    Raises:
        SceneFormatError: If the file is unreadable or malformed
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise SceneFormatError(f"Scene file is corrupted: {path}: {e}") from e
    except OSError as e:
        raise SceneFormatError(f"Failed to read scene file {path}: {e}") from e

    scene = scene_from_dict(data)
    logger.debug(f"Loaded {len(scene.elements)} elements from {path}")
    return scene
