"""
Module: presentation

Purpose:
    Fullscreen slideshow over the frames of a drawing scene, with
    cancellable per-slide rendering.

Key Classes:
    - PresentationController: Session state machine
    - PresentationConfig: Transition timing
    - Phase, ScreenGeometry, SlideAction: Session value types
    - FullscreenHost: Host fullscreen protocol
"""

from .config import PresentationConfig
from .controller import PresentationController
from .fullscreen import FullscreenHost
from .models import KEY_BINDINGS, Phase, ScreenGeometry, SlideAction, action_for_key

__all__ = [
    "PresentationConfig",
    "PresentationController",
    "FullscreenHost",
    "KEY_BINDINGS",
    "Phase",
    "ScreenGeometry",
    "SlideAction",
    "action_for_key",
]
