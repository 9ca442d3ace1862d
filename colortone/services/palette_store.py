from __future__ import annotations

import asyncio
import logging
import threading
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import Callable, List, Optional, Tuple

import numpy as np

from colortone.config import Settings
from colortone.domain.dtos import Color, PaletteSnapshot
from colortone.domain.errors import ColorToneError
from colortone.services.color_analyzer import ColorAnalyzer
from colortone.services.histogram import build_histogram
from colortone.services.image_utils import load_asset, resolve_asset
from colortone.services.pixel_sampler import sample_pixels

log = logging.getLogger(__name__)

Subscriber = Callable[[PaletteSnapshot], None]


class PaletteStore:
    """Owns the current palette and runs the detection pipeline.

    Each successful run replaces the whole ``PaletteSnapshot`` in a single
    assignment, so readers always see one run's slots and vibrant color
    together. Subscribers are called with every new snapshot.
    """

    def __init__(self, settings: Optional[Settings] = None, executor: Optional[Executor] = None) -> None:
        self.settings = settings or Settings()
        self._snapshot = PaletteSnapshot()
        self._publish_lock = threading.Lock()
        # held across publish + delivery so subscribers see runs in publish order
        self._notify_lock = threading.RLock()
        self._executor_lock = threading.Lock()
        self._subscribers: List[Subscriber] = []
        self._executor = executor
        self._owns_executor = executor is None

    # --- read side -------------------------------------------------------

    @property
    def snapshot(self) -> PaletteSnapshot:
        return self._snapshot

    @property
    def dominant_colors(self) -> Tuple[Color, ...]:
        return self._snapshot.dominant_colors

    @property
    def colors(self) -> Tuple[Color, ...]:
        return self._snapshot.colors

    @property
    def most_vibrant_color(self) -> Color:
        return self._snapshot.vibrant

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Call ``callback`` with every published snapshot, in publish order.

        Returns a function that removes the subscription.
        """
        with self._publish_lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._publish_lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    # --- pipeline --------------------------------------------------------

    def detect_colors(
        self,
        image: np.ndarray,
        target_size: Optional[Tuple[int, int]] = None,
        max_colors: Optional[int] = None,
    ) -> PaletteSnapshot:
        """Extract the palette of ``image`` and publish it.

        ``target_size`` is ``(width, height)`` of the analysis canvas.
        Raises InvalidImageSize / ImageProcessingFailed; the stored palette
        is left untouched when it does.
        """
        width, height = target_size or (self.settings.target_width, self.settings.target_height)
        k = self.settings.max_colors if max_colors is None else max_colors
        if k < 0:
            raise ValueError(f"max_colors must be >= 0, got {k}")

        try:
            return self._run(image, width, height, k)
        except ColorToneError as e:
            log.error("Color detection failed [%s]: %s", e.code, e)
            raise

    def _run(self, image: np.ndarray, width: int, height: int, k: int) -> PaletteSnapshot:
        buffer = sample_pixels(image, width, height)
        histogram = build_histogram(buffer)
        analyzer = ColorAnalyzer(k=k, strategy=self.settings.merge_strategy)
        clusters = analyzer.cluster(histogram)
        vibrant = analyzer.most_vibrant(clusters)
        snapshot = PaletteSnapshot.from_clusters(clusters, vibrant)
        self._publish(snapshot)
        log.debug("Detected %d dominant colors, vibrant %s", len(clusters), vibrant.hex)
        return snapshot

    async def detect_colors_async(
        self,
        image: np.ndarray,
        target_size: Optional[Tuple[int, int]] = None,
        max_colors: Optional[int] = None,
    ) -> PaletteSnapshot:
        # Run the pipeline off the event loop
        return await asyncio.get_running_loop().run_in_executor(
            self._get_executor(), self.detect_colors, image, target_size, max_colors
        )

    def get_color_from_asset(self, name: str) -> Optional[PaletteSnapshot]:
        """Best-effort variant: look ``name`` up in the assets dir, log failures."""
        path = resolve_asset(self.settings.assets_dir, name)
        if path is None:
            log.warning("Asset %r not found in %s", name, self.settings.assets_dir)
            return None
        try:
            image = load_asset(path)
            return self._run(image, self.settings.target_width, self.settings.target_height, self.settings.max_colors)
        except (ColorToneError, OSError) as e:
            log.error("Color detection for asset %r failed: %s", name, e)
            return None

    def close(self) -> None:
        if not self._owns_executor:
            return
        with self._executor_lock:
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=True)

    # --- internals -------------------------------------------------------

    def _get_executor(self) -> Executor:
        with self._executor_lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(max_workers=self.settings.max_workers)
            return self._executor

    def _publish(self, snapshot: PaletteSnapshot) -> None:
        with self._notify_lock:
            with self._publish_lock:
                self._snapshot = snapshot
                subscribers = list(self._subscribers)
            for callback in subscribers:
                try:
                    callback(snapshot)
                except Exception:
                    log.exception("Palette subscriber %r failed", callback)
