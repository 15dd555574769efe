"""Builds render buffers from the viewport's actors on a background thread."""

from __future__ import annotations

import threading
import time
from contextlib import contextmanager
from typing import Any, Iterator

from .types import RenderData


class Renderer:
    """Copies visible render targets into the viewport's double buffer.

    The viewport is expected to expose ``actors``, ``actors_lock``,
    ``target_lock``, ``render_buffer`` and ``next_buffer``.
    """

    def __init__(
        self,
        viewport: Any,
        wait_time: float = 1.0,
        frame_interval: float = 0.001,
    ) -> None:
        self.viewport = viewport
        self.wait_time = wait_time
        self.frame_interval = frame_interval
        self._buffer_lock = threading.Lock()
        self._state = threading.Condition()
        self._update_render = False
        self._stopped = False
        self._thread: threading.Thread | None = None

    @property
    def update_render(self) -> bool:
        return self._update_render

    @update_render.setter
    def update_render(self, value: bool) -> None:
        with self._state:
            self._update_render = bool(value)
            self._state.notify_all()

    def start_parallel(self) -> None:
        """Start rebuilding buffers on a background thread."""
        if self._thread is not None and self._thread.is_alive():
            raise RuntimeError("the render thread is already running")
        with self._state:
            self._stopped = False
        self._thread = threading.Thread(target=self._run, name="render", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop the background thread and wait for it to finish."""
        with self._state:
            self._update_render = False
            self._stopped = True
            self._state.notify_all()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()
        self._thread = None

    def _run(self) -> None:
        while True:
            with self._state:
                while not self._update_render and not self._stopped:
                    self._state.wait(self.wait_time)
                if self._stopped:
                    return
            self.build_frame()
            time.sleep(self.frame_interval)

    def build_frame(self) -> RenderData | None:
        """Capture the visible targets of every actor and swap them in.

        Returns the new front buffer, or ``None`` when there is no viewport.
        """
        viewport = self.viewport
        if viewport is None:
            return None

        worker = RenderData()
        with viewport.actors_lock:
            actors = list(viewport.actors)

        for actor in actors:
            if actor is None:
                continue
            with viewport.target_lock:
                if actor.render_target.visible:
                    worker.add_target(actor.render_target)
                if actor.render_text.visible:
                    worker.add_target(actor.render_text)

        with self._buffer_lock:
            viewport.next_buffer = worker
            viewport.render_buffer, viewport.next_buffer = (
                viewport.next_buffer,
                viewport.render_buffer,
            )
            return viewport.render_buffer

    def clear_cache(self) -> None:
        """Empty both buffers."""
        with self._buffer_lock:
            self.viewport.render_buffer.clear()
            self.viewport.next_buffer.clear()

    @contextmanager
    def lock_buffer(self) -> Iterator[None]:
        """Hold the buffer lock so the buffers are not swapped meanwhile."""
        with self._buffer_lock:
            yield