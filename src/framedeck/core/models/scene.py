"""
Module: core.models.scene

Purpose:
    Immutable snapshot of the drawing scene handed to the rasterizer, and
    the accessor protocol the host editor implements.

Key Classes:
    - SceneAccessor: Protocol for reading the live scene
    - SceneSnapshot: Elements + files + app state captured at one instant

Used By:
    - export.pipeline
    - presentation.controller
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Protocol, Tuple, Union

Element = Mapping[str, Any]


class SceneAccessor(Protocol):
    """Read-only view of the host editor's scene."""

    def get_scene_elements(self) -> List[Element]: ...

    def get_files(self) -> Dict[str, Any]: ...

    def get_app_state(self) -> Dict[str, Any]: ...


@dataclass(frozen=True)
class SceneSnapshot:
    """
    Scene captured at the start of an export or presentation.

    Attributes:
        elements: Drawing elements (excalidraw element mappings)
        files: Binary file map referenced by image elements
        app_state: Editor app state passed through to the rasterizer
    """

    elements: Tuple[Element, ...]
    files: Dict[str, Any] = field(default_factory=dict)
    app_state: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def capture(cls, source: Union[SceneAccessor, SceneSnapshot]) -> SceneSnapshot:
        """Snapshot an accessor, or return an existing snapshot unchanged."""
        if isinstance(source, SceneSnapshot):
            return source
        return cls(
            elements=tuple(source.get_scene_elements()),
            files=dict(source.get_files()),
            app_state=dict(source.get_app_state()),
        )

    # SceneAccessor implementation, so a snapshot can stand in for the editor

    def get_scene_elements(self) -> List[Element]:
        return list(self.elements)

    def get_files(self) -> Dict[str, Any]:
        return dict(self.files)

    def get_app_state(self) -> Dict[str, Any]:
        return dict(self.app_state)
