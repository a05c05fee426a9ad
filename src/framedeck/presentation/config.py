"""
Module: presentation.config

Purpose:
    Configuration for presentation sessions. Immutable configuration with
    validation on construction.

Key Classes:
    - PresentationConfig: Transition timing and fullscreen behaviour
"""

from __future__ import annotations

from dataclasses import dataclass

from framedeck.common.thresholds import TRANSITION_DURATION


@dataclass(frozen=True)
class PresentationConfig:
    """
    Configuration for a presentation session (immutable).

    Attributes:
        transition_duration: Seconds for each of fade-out and fade-in
        request_fullscreen: Ask the host for exclusive fullscreen on start
        background_enabled: Paint the canvas background behind slides

    Example:
        >>> PresentationConfig(transition_duration=0).transition_duration
        0
    """

    transition_duration: float = TRANSITION_DURATION
    request_fullscreen: bool = True
    background_enabled: bool = True

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.transition_duration < 0:
            raise ValueError(
                f"transition_duration must be non-negative: {self.transition_duration}"
            )
