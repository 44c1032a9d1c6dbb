# src/game/store.py
"""
High-score persistence.

Both stores expose `load() -> int` and `save(value)`. Neither ever raises into the
game loop: a missing or broken file reads as 0 and a failed write is logged and dropped.
"""
from __future__ import annotations
import json
import logging
import math
import threading
from pathlib import Path
from typing import List, Optional, Protocol, Union

logger = logging.getLogger(__name__)


class HighScoreStore(Protocol):
    def load(self) -> int: ...
    def save(self, value: int) -> None: ...


class MemoryStore:
    """Process-local store (tests, headless env)."""

    def __init__(self, value: int = 0):
        self.value = int(value)
        self.saves = 0

    def load(self) -> int:
        return self.value

    def save(self, value: int) -> None:
        self.value = int(value)
        self.saves += 1


class JsonFileStore:
    """
    Stores {"high_score": n} in a JSON file.
    save() hands the write to a daemon thread so a slow disk never stalls a tick.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._lock = threading.Lock()
        self._latest: Optional[int] = None
        self._writers: List[threading.Thread] = []

    def load(self) -> int:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            value = data.get("high_score", 0)
            # json accepts 1e999 / Infinity / NaN
            if isinstance(value, float) and not math.isfinite(value):
                raise ValueError(f"non-finite high score {value!r}")
            return max(0, int(value))
        except FileNotFoundError:
            return 0
        except (OSError, ValueError, TypeError, AttributeError, OverflowError) as e:
            logger.warning("Could not read high score from %s (%s); starting at 0", self.path, e)
            return 0

    def save(self, value: int) -> None:
        with self._lock:
            self._latest = int(value)
            self._writers = [t for t in self._writers if t.is_alive()]
        writer = threading.Thread(target=self._write, name="highscore-save", daemon=True)
        self._writers.append(writer)
        writer.start()

    def flush(self, timeout: Optional[float] = None) -> None:
        """Wait for every pending write (used on shutdown and in tests)."""
        for writer in list(self._writers):
            writer.join(timeout)
        self._writers = [t for t in self._writers if t.is_alive()]

    def _write(self):
        # Whichever thread gets the lock writes the newest value.
        with self._lock:
            value = self._latest
            if value is None:
                return
            tmp = self.path.with_suffix(self.path.suffix + ".tmp")
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                tmp.write_text(json.dumps({"high_score": value}), encoding="utf-8")
                tmp.replace(self.path)
            except OSError as e:
                logger.warning("Dropping high score save to %s: %s", self.path, e)
