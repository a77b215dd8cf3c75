"""Process-wide debug logging with caller locations and simple timers."""

from __future__ import annotations

import inspect
import os
import threading
import time
from dataclasses import dataclass
from datetime import datetime
from types import FrameType
from typing import Callable, Optional

LogCallback = Callable[[str], None]


@dataclass
class _Timer:
    operation_name: str
    start: float


def _frame_location(frame: Optional[FrameType]) -> tuple[str, int, str]:
    if frame is None:
        return "<unknown>", 0, "<unknown>"
    return frame.f_code.co_filename, frame.f_lineno, frame.f_code.co_name


def _timestamp() -> str:
    now = datetime.now()
    return now.strftime("%Y-%m-%d %H:%M:%S") + f".{now.microsecond // 1000:03d}"


class Debug:
    """Debug logger that is silent until enabled."""

    def __init__(self) -> None:
        self._enabled = False
        self._lock = threading.RLock()
        self._callback: Optional[LogCallback] = None
        self._timers: list[_Timer] = []

    def init(self, enable_debug: bool = True) -> None:
        """Enable or disable debug output."""
        with self._lock:
            self._enabled = enable_debug
            if enable_debug:
                frame = inspect.currentframe()
                file, line, function = _frame_location(frame)
                del frame
                self.log("Debug mode initialized", file, line, function)

    def log(
        self,
        message: str,
        file: Optional[str] = None,
        line: Optional[int] = None,
        function: Optional[str] = None,
    ) -> None:
        """Print a debug line; missing location parts come from the caller."""
        if not self._enabled:
            return
        if file is None or line is None or function is None:
            frame = inspect.currentframe()
            caller = frame.f_back if frame is not None else None
            c_file, c_line, c_function = _frame_location(caller)
            del frame, caller
            file = c_file if file is None else file
            line = c_line if line is None else line
            function = c_function if function is None else function

        with self._lock:
            formatted = (
                f"{_timestamp()} [{threading.get_ident()}] "
                f"{os.path.basename(file)}:{line} ({function}) {message}"
            )
            print(f"[DEBUG] {formatted}", flush=True)
            if self._callback is not None:
                self._callback(formatted)

    def start_timer(self, operation_name: str) -> int:
        """Start timing an operation; returns its id, or -1 when disabled."""
        if not self._enabled:
            return -1
        with self._lock:
            self._timers.append(_Timer(operation_name, time.perf_counter()))
            return len(self._timers) - 1

    def stop_timer(self, timer_id: int) -> None:
        """Log the time elapsed since the timer with this id was started."""
        if not self._enabled or not 0 <= timer_id < len(self._timers):
            return
        frame = inspect.currentframe()
        caller = frame.f_back if frame is not None else None
        file, line, function = _frame_location(caller)
        del frame, caller
        with self._lock:
            timer = self._timers[timer_id]
            elapsed_us = int((time.perf_counter() - timer.start) * 1_000_000)
            message = (
                f"Operation '{timer.operation_name}' completed in {elapsed_us} "
                f"\u03bcs ({elapsed_us / 1000.0:g} ms)"
            )
            self.log(message, file, line, function)

    def set_log_callback(self, callback: Optional[LogCallback]) -> None:
        """Set a function that receives every formatted debug line."""
        with self._lock:
            self._callback = callback

    def is_debug_enabled(self) -> bool:
        return self._enabled


_instance = Debug()


def get_debug() -> Debug:
    """Return the shared Debug instance."""
    return _instance


def debug_log(message: str) -> None:
    """Log a message through the shared instance, tagged with the caller's location."""
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    file, line, function = _frame_location(caller)
    del frame, caller
    _instance.log(message, file, line, function)