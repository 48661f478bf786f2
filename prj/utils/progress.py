"""Progress display utilities."""

import sys
import threading
from typing import Optional, TextIO

FRAMES = "⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏"


class Spinner:
    """Animated spinner written to stderr while a batch runs.

    Does nothing when the stream is not a terminal, so piped output stays
    clean.
    """

    def __init__(self, message: str, interval: float = 0.1, stream: Optional[TextIO] = None):
        """Initialize spinner.

        Args:
            message: Text shown next to the spinner
            interval: Seconds between frames
            stream: Output stream (default: stderr)
        """
        self.message = message
        self.interval = interval
        self.stream = stream or sys.stderr
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def enabled(self) -> bool:
        """Check if the stream is an interactive terminal."""
        isatty = getattr(self.stream, 'isatty', None)
        return bool(isatty and isatty())

    def start(self) -> None:
        """Start animating in a background thread."""
        if not self.enabled or self._thread is not None:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._spin, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop animating and clear the spinner line."""
        if self._thread is None:
            return
        self._stop.set()
        self._thread.join()
        self._thread = None
        self.stream.write("\r" + " " * (len(self.message) + 2) + "\r")
        self.stream.flush()

    def _spin(self) -> None:
        frame = 0
        while not self._stop.is_set():
            self.stream.write(f"\r{FRAMES[frame % len(FRAMES)]} {self.message}")
            self.stream.flush()
            frame += 1
            self._stop.wait(self.interval)

    def __enter__(self) -> 'Spinner':
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
