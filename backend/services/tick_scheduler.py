"""
Host-owned tick driver for the game engine.

The engine holds no timer of its own. This service runs `engine.tick()` on
a fixed cadence with the `schedule` job scheduler on a background thread,
cancels the job as soon as the game is over, and reports the final
snapshot once through `on_game_over`.
"""

import logging
import os
import threading
from typing import Callable, Optional

import schedule
from dotenv import load_dotenv

from domain.constants import TICK_INTERVAL_MS
from domain.engine import GameEngine
from domain.game_state import GameState

load_dotenv()

logger = logging.getLogger(__name__)

MIN_POLL_SECONDS = 0.005
MAX_POLL_SECONDS = 0.05


def get_tick_interval_ms() -> int:
    """Tick cadence from SNAKE_TICK_INTERVAL_MS, falling back to the game default."""
    raw = os.getenv("SNAKE_TICK_INTERVAL_MS", "").strip()
    if not raw:
        return TICK_INTERVAL_MS
    try:
        value = int(raw)
    except ValueError:
        logger.warning("SNAKE_TICK_INTERVAL_MS=%r is not an integer; using %s.", raw, TICK_INTERVAL_MS)
        return TICK_INTERVAL_MS
    if value <= 0:
        logger.warning("SNAKE_TICK_INTERVAL_MS=%s is invalid; using %s.", value, TICK_INTERVAL_MS)
        return TICK_INTERVAL_MS
    return value


class TickScheduler:
    """
    Drives one GameEngine at a fixed interval.

    Only one cadence may drive an engine at a time: `restart()` stops the
    current cadence before resetting the engine and starting a new one.
    """

    def __init__(
        self,
        engine: GameEngine,
        interval_ms: Optional[int] = None,
        on_tick: Optional[Callable[[GameState], None]] = None,
        on_game_over: Optional[Callable[[GameState], None]] = None,
    ) -> None:
        if interval_ms is None:
            interval_ms = get_tick_interval_ms()
        if interval_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval_ms} ms.")

        self.engine = engine
        self.interval_ms = interval_ms
        self.on_tick = on_tick
        self.on_game_over = on_game_over

        self._scheduler = schedule.Scheduler()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._game_over_reported = False

    @property
    def interval_seconds(self) -> float:
        return self.interval_ms / 1000.0

    @property
    def is_running(self) -> bool:
        return bool(self._scheduler.get_jobs())

    def start(self, background: bool = True) -> None:
        """
        Register the tick job.

        With background=True a worker thread pumps the scheduler; otherwise
        the host calls `run_pending()` from its own loop.
        """
        if self.is_running:
            raise RuntimeError("Tick scheduler is already running; stop it first.")

        # A worker that stopped itself from a callback may still be finishing.
        previous = self._thread
        if previous is not None and previous is not threading.current_thread():
            previous.join()
        self._thread = None

        # Each run gets its own event so a finishing worker never sees it cleared.
        self._stop_event = threading.Event()
        self._game_over_reported = False
        self._scheduler.every(self.interval_seconds).seconds.do(self.tick_once)
        logger.info("Tick scheduler started (every %d ms).", self.interval_ms)

        if background:
            self._thread = threading.Thread(
                target=self._run, args=(self._stop_event,), name="tick-scheduler", daemon=True
            )
            self._thread.start()

    def stop(self) -> None:
        """Cancel the cadence and wait for the worker thread to exit."""
        self._scheduler.clear()
        self._stop_event.set()

        thread = self._thread
        if thread is None or thread is threading.current_thread():
            # Called from a callback on the worker; start() joins it later.
            return
        thread.join()
        self._thread = None

    def restart(self) -> GameState:
        """Stop any running cadence, reset the engine, then start ticking again."""
        self.stop()
        state = self.engine.start()
        self.start()
        return state

    def run_pending(self) -> None:
        self._scheduler.run_pending()

    def tick_once(self):
        """
        Advance the engine one tick and notify the callbacks.

        Returns schedule.CancelJob once the game is over so the job is
        removed from the scheduler.
        """
        try:
            state = self.engine.tick()
            if self.on_tick is not None:
                self.on_tick(state)
        except Exception:
            logger.exception("Tick failed; stopping the scheduler")
            self._scheduler.clear()
            self._stop_event.set()
            return schedule.CancelJob

        if not state.is_game_over:
            return None

        self._scheduler.clear()
        self._stop_event.set()
        if not self._game_over_reported:
            self._game_over_reported = True
            logger.info("Game over detected; tick scheduler stopping. Score: %d", state.score)
            if self.on_game_over is not None:
                try:
                    self.on_game_over(state)
                except Exception:
                    logger.exception("on_game_over callback failed")
        return schedule.CancelJob

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the cadence has stopped. Returns False on timeout."""
        return self._stop_event.wait(timeout)

    def _run(self, stop_event: threading.Event) -> None:
        poll = min(max(self.interval_seconds / 4, MIN_POLL_SECONDS), MAX_POLL_SECONDS)
        while not stop_event.is_set():
            self._scheduler.run_pending()
            stop_event.wait(poll)
