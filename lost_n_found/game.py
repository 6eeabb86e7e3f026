import logging

from .round import Outcome, Round

logger = logging.getLogger(__name__)


class Game:
    """A run of rounds: each win moves up a level, the first loss ends it."""

    def __init__(self, rng, clock, surface_cols=0, surface_rows=0, level=1):
        self.rng = rng
        self.clock = clock
        self.surface_cols = surface_cols
        self.surface_rows = surface_rows
        self.rounds_won = 0
        self.finished = False
        self.final_level = None
        self.round = None
        self._start(level)

    @property
    def level(self):
        return self.round.level

    def _start(self, level):
        self.round = Round.new(level, self.rng, self.clock, self.surface_cols, self.surface_rows)

    def tick(self, sample=None):
        """Feeds one sample to the current round.

        Returns the Outcome of a round on the tick it ends, otherwise None.
        """
        if self.finished:
            return None

        outcome = self.round.tick(sample)
        if outcome is Outcome.WIN:
            self.rounds_won += 1
            logger.info("level %d cleared, moving on", self.level)
            self._start(self.level + 1)
        elif outcome is Outcome.LOSE:
            self.finished = True
            self.final_level = self.level
            logger.info("run over at level %d after %d rounds won", self.level, self.rounds_won)
        return outcome

    def snapshot(self):
        return self.round.snapshot()
