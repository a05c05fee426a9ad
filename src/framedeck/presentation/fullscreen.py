"""
Module: presentation.fullscreen

Purpose:
    Interface to the host window's exclusive fullscreen mode.

Key Classes:
    - FullscreenHost: Protocol implemented by the host UI layer

Notes:
    Hosts raise FullscreenUnavailableError (or any error) when fullscreen
    is refused; the controller logs it and keeps presenting windowed. When
    the host leaves fullscreen on its own, it must call
    PresentationController.handle_fullscreen_change(False).
"""

from __future__ import annotations

from typing import Protocol


class FullscreenHost(Protocol):
    """Host container that can enter and leave exclusive fullscreen."""

    @property
    def is_fullscreen(self) -> bool: ...

    async def request_fullscreen(self) -> None: ...

    async def exit_fullscreen(self) -> None: ...
