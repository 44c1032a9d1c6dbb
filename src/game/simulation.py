# src/game/simulation.py
from __future__ import annotations
from enum import Enum
import logging
import random
from typing import List, Optional, Tuple
from .bird import Bird
from .pipe import Pipe
from .store import HighScoreStore, MemoryStore
from .config import WIDTH, SPAWN_INTERVAL

logger = logging.getLogger(__name__)


class Phase(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    OVER = "over"


class Simulation:
    """
    Tick-by-tick game state: one bird, the live pipes, score and phase.

    A driver calls tick() once per frame and reads state to draw; input events
    go through handle_input() between ticks. The pipe list is private, consumers
    get a tuple copy from `pipes`.
    """
    def __init__(self, seed: int | None = None, store: Optional[HighScoreStore] = None):
        if seed is None:
            seed = random.randrange(0, 2**32 - 1)
        self.seed = seed
        self.rng = random.Random(seed)
        self.store: HighScoreStore = store if store is not None else MemoryStore()
        self.high_score: int = self.store.load()
        self._start_fresh()

    def _start_fresh(self):
        self.bird = Bird.spawn()
        self._pipes: List[Pipe] = []
        self.score = 0
        self.tick_count = 0
        self.phase = Phase.NOT_STARTED

    @property
    def pipes(self) -> Tuple[Pipe, ...]:
        return tuple(self._pipes)

    def reset(self):
        """New bird, no pipes, score 0. High score survives."""
        self._start_fresh()
        logger.debug("reset (high score %d)", self.high_score)

    def handle_input(self) -> Phase:
        """One 'activate' event: start, flap, or restart depending on phase."""
        if self.phase is Phase.NOT_STARTED:
            self.phase = Phase.RUNNING
            logger.debug("started (seed %s)", self.seed)
        elif self.phase is Phase.OVER:
            self.reset()
        else:
            self.bird.flap()
        return self.phase

    def tick(self):
        if self.phase is not Phase.RUNNING:
            return

        self.tick_count += 1
        if self.tick_count % SPAWN_INTERVAL == 0:
            self._pipes.append(Pipe.spawn(self.rng, WIDTH))

        self.bird.integrate()

        # Every pipe gets its full update, then the offscreen ones are dropped.
        survivors: List[Pipe] = []
        for pipe in self._pipes:
            pipe.integrate()

            if not pipe.scored and pipe.trailing_edge < self.bird.x:
                pipe.scored = True
                self._add_point()

            if pipe.overlaps(self.bird) and self.phase is Phase.RUNNING:
                self.phase = Phase.OVER
                logger.debug("game over at tick %d, score %d", self.tick_count, self.score)

            if not pipe.is_offscreen():
                survivors.append(pipe)
        self._pipes = survivors

    def _add_point(self):
        self.score += 1
        if self.score > self.high_score:
            self.high_score = self.score
            logger.debug("new high score %d", self.high_score)
            self.store.save(self.high_score)
