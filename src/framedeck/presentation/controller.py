"""
Module: presentation.controller

Purpose:
    Run a fullscreen slideshow over the frames of a drawing scene.
    Start → Order frames → Fullscreen → Render slide ↔ Navigate → Exit

Key Classes:
    - PresentationController: Stateful presentation session

State Machine:
    LOADING → IDLE → TRANSITIONING → IDLE → … → EXITED
    LOADING → EMPTY → EXITED  (no frames; only exit is accepted)

Concurrency:
    Everything runs on one asyncio event loop. Navigation starts at most
    one transition; requests made after a transition has committed its
    slide are dropped. Requests made during the fade-out, before the
    commit, retarget the pending transition so the last request wins.
    Slide renders are tagged with a generation counter that is bumped on
    every navigation request and geometry change; a render whose
    generation no longer matches on completion is discarded. The
    rasterizer itself is never cancelled.

Dependencies:
    - ordering.orderer: Deck ordering
    - presentation.models: Phase, ScreenGeometry, key bindings
    - presentation.fullscreen: FullscreenHost

Used By:
    - Host presentation view
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Coroutine, List, Optional, Set, Union

from PIL import Image

from framedeck.core.models.frames import Frame, collect_frames
from framedeck.core.models.raster import RasterOptions, Rasterizer
from framedeck.core.models.scene import SceneAccessor, SceneSnapshot
from framedeck.ordering.orderer import order_frames

from .config import PresentationConfig
from .fullscreen import FullscreenHost
from .models import Phase, ScreenGeometry, SlideAction, action_for_key

logger = logging.getLogger(__name__)

SlideCallback = Callable[[int, Image.Image], None]
ExitCallback = Callable[[], None]


class PresentationController:
    """
    Presentation session over an ordered deck of frames.

    Must be driven from a running asyncio event loop: navigation methods
    are synchronous but schedule their work as tasks on that loop.

    Example:
        >>> controller = PresentationController(
        ...     api, export_to_canvas, screen=ScreenGeometry(1920, 1080, 2.0),
        ...     fullscreen=window, on_slide_rendered=show, on_exit=back_to_editor,
        ... )
        >>> await controller.start()
        >>> controller.handle_key("ArrowRight")
        True
    """

    def __init__(
        self,
        scene: Union[SceneAccessor, SceneSnapshot],
        rasterize: Rasterizer,
        *,
        screen: ScreenGeometry,
        fullscreen: Optional[FullscreenHost] = None,
        on_slide_rendered: Optional[SlideCallback] = None,
        on_exit: Optional[ExitCallback] = None,
        config: Optional[PresentationConfig] = None,
    ) -> None:
        self._scene = scene
        self._rasterize = rasterize
        self._screen = screen
        self._fullscreen = fullscreen
        self._on_slide_rendered = on_slide_rendered
        self._on_exit = on_exit
        self._config = config or PresentationConfig()

        self._deck: List[Frame] = []
        self._current_index = 0
        self._pending_index: Optional[int] = None
        self._phase = Phase.LOADING
        self._generation = 0

        self._current_image: Optional[Image.Image] = None
        self._displayed_index: Optional[int] = None
        self._displayed_screen: Optional[ScreenGeometry] = None
        self._tasks: Set[asyncio.Task] = set()

    # ─────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def slide_count(self) -> int:
        return len(self._deck)

    @property
    def deck(self) -> tuple[Frame, ...]:
        return tuple(self._deck)

    @property
    def current_frame(self) -> Optional[Frame]:
        if not self._deck:
            return None
        return self._deck[self._current_index]

    @property
    def current_image(self) -> Optional[Image.Image]:
        """Last successfully rendered slide image (what is on screen)."""
        return self._current_image

    @property
    def displayed_index(self) -> Optional[int]:
        """Index of the slide whose image is on screen."""
        return self._displayed_index

    @property
    def screen(self) -> ScreenGeometry:
        return self._screen

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def is_empty(self) -> bool:
        return self._phase is Phase.EMPTY

    @property
    def can_go_prev(self) -> bool:
        """Whether the previous-slide affordance is enabled."""
        return bool(self._deck) and self._current_index > 0

    @property
    def can_go_next(self) -> bool:
        """Whether the next-slide affordance is enabled."""
        return bool(self._deck) and self._current_index < len(self._deck) - 1

    @property
    def counter_label(self) -> str:
        """Slide counter, e.g. "2 / 5"."""
        if not self._deck:
            return "0 / 0"
        return f"{self._current_index + 1} / {len(self._deck)}"

    # ─────────────────────────────────────────────────────────────────────
    # Lifecycle
    # ─────────────────────────────────────────────────────────────────────

    async def start(self) -> None:
        """
        Collect and order frames, enter fullscreen, and render slide 0.

        Fullscreen failures are logged and the session continues windowed.

        Raises:
            RuntimeError: If the session was already started
        """
        if self._phase is not Phase.LOADING:
            raise RuntimeError(f"Presentation already started (phase={self._phase.value})")

        snapshot = SceneSnapshot.capture(self._scene)
        self._deck = order_frames(collect_frames(snapshot.elements))
        self._current_index = 0
        logger.info(f"Starting presentation with {len(self._deck)} slides")

        if self._config.request_fullscreen:
            await self._enter_fullscreen()

        if self._phase is Phase.EXITED:
            # Exited while waiting for fullscreen
            return

        if not self._deck:
            self._phase = Phase.EMPTY
            logger.info("No frames found; presentation is empty")
            return

        self._phase = Phase.IDLE
        self._spawn(self._render_slide())

    async def exit(self) -> None:
        """
        End the session: stop pending work, leave fullscreen, notify caller.

        Safe to call more than once; only the first call has any effect.
        """
        if self._phase is Phase.EXITED:
            return

        logger.info(f"Exiting presentation at slide {self.counter_label}")
        self._phase = Phase.EXITED
        self._pending_index = None
        self._generation += 1
        self._cancel_tasks()

        if self._fullscreen is not None and self._fullscreen.is_fullscreen:
            try:
                await self._fullscreen.exit_fullscreen()
            except Exception as e:
                logger.warning(f"Failed to leave fullscreen: {e}")

        if self._on_exit is not None:
            self._on_exit()

    async def settle(self) -> None:
        """Wait until no transition or render work is in flight."""
        current = asyncio.current_task()
        while True:
            pending = [t for t in self._tasks if not t.done() and t is not current]
            if not pending:
                return
            await asyncio.gather(*pending, return_exceptions=True)

    # ─────────────────────────────────────────────────────────────────────
    # Navigation
    # ─────────────────────────────────────────────────────────────────────

    def go_to_slide(self, index: int) -> bool:
        """
        Navigate to a slide with a fade transition.

        Ignored when the index is out of range, already current, or a
        transition has already committed its slide. During the fade-out of
        a transition the request replaces that transition's target.

        Args:
            index: Zero-based slide index

        Returns:
            True if a transition was started or retargeted
        """
        if not 0 <= index < len(self._deck):
            return False

        if self._phase is Phase.TRANSITIONING:
            if self._pending_index is None or index == self._pending_index:
                return False
            logger.debug(f"Retargeting transition {self._pending_index} -> {index}")
            self._pending_index = index
            self._generation += 1
            return True

        if self._phase is not Phase.IDLE or index == self._current_index:
            return False

        self._phase = Phase.TRANSITIONING
        self._pending_index = index
        self._generation += 1
        self._spawn(self._run_transition())
        return True

    def go_next(self) -> bool:
        return self.go_to_slide(self._current_index + 1)

    def go_prev(self) -> bool:
        return self.go_to_slide(self._current_index - 1)

    def go_first(self) -> bool:
        return self.go_to_slide(0)

    def go_last(self) -> bool:
        return self.go_to_slide(len(self._deck) - 1)

    # ─────────────────────────────────────────────────────────────────────
    # Host events
    # ─────────────────────────────────────────────────────────────────────

    def handle_key(self, key: str) -> bool:
        """
        Dispatch a key press.

        ArrowRight/Space → next, ArrowLeft → previous, Escape → exit,
        Home → first, End → last. Other keys are ignored.

        Args:
            key: DOM-style key name

        Returns:
            True if the key is bound (host should suppress its default)
        """
        action = action_for_key(key)
        if action is None:
            return False

        if action is SlideAction.EXIT:
            self._spawn(self.exit())
        elif action is SlideAction.NEXT:
            self.go_next()
        elif action is SlideAction.PREV:
            self.go_prev()
        elif action is SlideAction.FIRST:
            self.go_first()
        elif action is SlideAction.LAST:
            self.go_last()
        return True

    def resize(self, width: float, height: float, device_pixel_ratio: float = 1.0) -> None:
        """
        Update screen geometry and re-render the current slide to fit it.

        Any render still in flight for the old geometry is discarded.
        """
        geometry = ScreenGeometry(width, height, device_pixel_ratio)
        if geometry == self._screen:
            return

        self._screen = geometry
        self._generation += 1
        logger.debug(f"Screen geometry changed to {width}x{height}@{device_pixel_ratio}")

        if self._phase in (Phase.IDLE, Phase.TRANSITIONING) and self._deck:
            self._spawn(self._render_slide())

    def handle_fullscreen_change(self, active: bool) -> None:
        """
        React to a host fullscreen change.

        Losing fullscreen while the session is running is an implicit exit.
        """
        if active or self._phase is Phase.EXITED:
            return
        logger.info("Fullscreen was exited externally; ending presentation")
        self._spawn(self.exit())

    # ─────────────────────────────────────────────────────────────────────
    # Internals
    # ─────────────────────────────────────────────────────────────────────

    async def _enter_fullscreen(self) -> None:
        if self._fullscreen is None:
            logger.debug("No fullscreen host; presenting windowed")
            return
        try:
            if not self._fullscreen.is_fullscreen:
                await self._fullscreen.request_fullscreen()
        except Exception as e:
            logger.warning(f"Fullscreen unavailable, presenting windowed: {e}")

    async def _run_transition(self) -> None:
        """Fade out, commit the pending slide, render it, fade in."""
        delay = self._config.transition_duration
        try:
            await asyncio.sleep(delay)
            if self._phase is not Phase.TRANSITIONING or self._pending_index is None:
                return

            target = self._pending_index
            self._pending_index = None
            # Retargeting back to the current slide may have discarded its
            # in-flight render, so re-render unless it is already on screen.
            if target != self._current_index or not self._is_displayed(target):
                self._current_index = target
                self._generation += 1
                logger.debug(f"Showing slide {self.counter_label}")
                await self._render_slide()

            await asyncio.sleep(delay)
        finally:
            if self._phase is Phase.TRANSITIONING:
                self._pending_index = None
                self._phase = Phase.IDLE

    def _is_displayed(self, index: int) -> bool:
        """Whether the on-screen image is this slide at the current geometry."""
        return self._displayed_index == index and self._displayed_screen == self._screen

    async def _render_slide(self) -> bool:
        """
        Render the current slide to fill the screen.

        Returns:
            True if the rendered image was applied; False if it failed or
            went stale before completing
        """
        if not self._deck or self._phase is Phase.EXITED:
            return False

        generation = self._generation
        index = self._current_index
        screen = self._screen
        frame = self._deck[index]
        snapshot = SceneSnapshot.capture(self._scene)
        options = RasterOptions(
            exporting_frame=frame,
            target_dimensions=screen.fill_dimensions,
            background_enabled=self._config.background_enabled,
        )

        try:
            image = await self._rasterize(
                list(snapshot.elements),
                dict(snapshot.files),
                dict(snapshot.app_state),
                options,
            )
        except Exception as e:
            logger.error(f"Failed to render presentation slide {index + 1} (frame={frame.id}): {e}")
            return False

        if generation != self._generation or self._phase is Phase.EXITED:
            logger.debug(f"Discarding stale render of slide {index + 1} (generation {generation})")
            return False

        self._current_image = image
        self._displayed_index = index
        self._displayed_screen = screen
        if self._on_slide_rendered is not None:
            self._on_slide_rendered(index, image)
        return True

    def _spawn(self, coro: Coroutine) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def _cancel_tasks(self) -> None:
        current = asyncio.current_task()
        for task in list(self._tasks):
            if task is not current and not task.done():
                task.cancel()
