import asyncio
import sys
from pathlib import Path

import pytest
from PIL import Image

# Add src to sys.path so we can import framedeck
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from framedeck.core.models.frames import Frame
from framedeck.core.models.scene import SceneSnapshot


class FakeRasterizer:
    """
    Stand-in for the canvas library's rasterizer.

    Produces a solid PIL image sized from the exporting frame (or the
    scene bounds) times the requested scale, or from the target-dimensions
    callback when one is given. Records every call in order.
    """

    def __init__(self, scene_size=(800, 600)):
        self.scene_size = scene_size
        self.calls = []
        self.completed = []
        self.fail_on = set()  # frame ids (None = full canvas) that raise
        self.delays = {}  # frame id -> seconds to suspend before returning
        self.active = 0
        self.max_active = 0

    async def __call__(self, elements, files, app_state, options):
        frame = options.exporting_frame
        frame_id = frame.id if frame else None
        self.calls.append((frame_id, options))
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        try:
            await asyncio.sleep(self.delays.get(frame_id, 0))
            if frame_id in self.fail_on:
                raise RuntimeError(f"cannot render {frame_id}")

            content_w, content_h = (frame.width, frame.height) if frame else self.scene_size
            if options.target_dimensions is not None:
                dims = options.target_dimensions(content_w, content_h)
                size = (dims.width, dims.height)
            else:
                size = (round(content_w * options.scale), round(content_h * options.scale))
            self.completed.append(frame_id)
            return Image.new("RGB", size, color="white")
        finally:
            self.active -= 1


def frame_element(frame_id, x, y, width=160, height=90, *, type="frame", name=None, deleted=False):
    """Build a scene element mapping for a frame."""
    element = {
        "id": frame_id,
        "type": type,
        "x": x,
        "y": y,
        "width": width,
        "height": height,
        "isDeleted": deleted,
    }
    if name is not None:
        element["name"] = name
    return element


# Common test fixtures
@pytest.fixture
def rasterizer():
    """Return a fresh fake rasterizer."""
    return FakeRasterizer()


@pytest.fixture
def make_frame():
    """Factory for frames with default landscape size."""
    def _create(frame_id, x=0, y=0, width=160, height=90, name=None):
        return Frame(frame_id, x=x, y=y, width=width, height=height, name=name)
    return _create


@pytest.fixture
def make_scene():
    """Factory for scene snapshots from element mappings."""
    def _create(*elements):
        return SceneSnapshot(elements=tuple(elements), files={}, app_state={"viewBackgroundColor": "#ffffff"})
    return _create


@pytest.fixture
def three_slide_scene(make_scene):
    """Scene with three landscape frames in one row plus a non-frame element."""
    return make_scene(
        frame_element("f3", 800, 0),
        frame_element("f1", 0, 0),
        {"id": "r1", "type": "rectangle", "x": 10, "y": 10, "width": 20, "height": 20},
        frame_element("f2", 400, 10),
    )


@pytest.fixture
def frame_el():
    """Return the frame element builder."""
    return frame_element
