"""
Module: ordering

Purpose:
    Deterministic slide ordering for frames on the canvas.

Key Functions:
    - order_frames(): Spatial or custom ordering
    - build_deck(): Extract + order frames from scene elements
"""

from .orderer import build_deck, order_frames

__all__ = ["build_deck", "order_frames"]
