import logging
import random

from typedrill.config import DEFAULT_LENGTH, N_WEAKEST, WORLD_AVERAGE_WPM, WPM_IN_CPS
from typedrill.errors import InsufficientDataError
from typedrill.generators import markov_sequence, weakest_sequence
from typedrill.stats import validate_session
from typedrill.storage import LogEntry, format_start

logger = logging.getLogger(__name__)


class Trainer:
    """Loaded statistics plus the storage they came from.

    Load once with `Trainer.open`, then every finished session goes through
    `save_session`, which mutates the statistics in place and writes them back.
    """

    def __init__(self, storage, statistics = None, rng = None):
        self.storage = storage
        self.statistics = statistics if statistics is not None else storage.load_statistics()
        self.rng = rng if rng is not None else random.Random()

    @classmethod
    def open(cls, storage, rng = None):
        return cls(storage, storage.load_statistics(), rng = rng)

    def save_session(self, start, text, timeline, training = False):
        if not validate_session(text, timeline):
            return False
        self.storage.append_log_line(LogEntry(
            start = format_start(start),
            text = text,
            timeline = list(timeline),
        ))
        self.statistics.add_session(text, timeline, training)
        self.storage.save_statistics(self.statistics)
        logger.info(f"Saved session of {len(text)} characters ({'training' if training else 'practice'})")
        return True

    def trigrams_to_train(self):
        return self.statistics.trigrams_to_train()

    def _trigrams(self):
        trigrams = self.trigrams_to_train()
        positive = sum(1 for ts in trigrams if ts.score > 0)
        if positive < N_WEAKEST:
            raise InsufficientDataError(
                f"Not enough stats yet to generate a good exercise: "
                f"{positive} trigrams to train, need {N_WEAKEST}. Train longer first."
            )
        logger.debug("Loaded stats, generating training sequence")
        return trigrams

    def weakest_training(self, length = 0):
        if length == 0:
            length = DEFAULT_LENGTH
        return weakest_sequence(self._trigrams(), length)

    def random_training(self, length = 0):
        if length == 0:
            length = DEFAULT_LENGTH
        return markov_sequence(self._trigrams(), length, self.rng)

    def average_wpm(self):
        if self.statistics.total_chars_typed == 0 or self.statistics.total_sessions_duration <= 0:
            return WORLD_AVERAGE_WPM
        return WPM_IN_CPS / self.statistics.average_char_duration()
