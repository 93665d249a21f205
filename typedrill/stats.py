import logging
import math
from dataclasses import dataclass, field

from typedrill.config import MIN_SESSION_LENGTH
from typedrill.errors import ValidationError
from typedrill.scoring import trigram_score
from typedrill.window import WindowedAverage

logger = logging.getLogger(__name__)


def head_tail(trigram):
    return trigram[:2], trigram[1:]


def validate_session(text, timeline):
    if len(text) != len(timeline):
        raise ValidationError(
            f"Length of text ({len(text)}) does not match length of timeline "
            f"({len(timeline)})! Stats not saved."
        )
    if len(text) < MIN_SESSION_LENGTH:
        logger.warning(f"Not updating stats for session only {len(text)} characters long")
        return False
    return True


@dataclass
class TrigramStat:
    count: int = 0
    duration: WindowedAverage = field(default_factory=WindowedAverage)

    def to_dict(self):
        return {"c": self.count, "d": self.duration.to_dict()}

    @classmethod
    def from_dict(cls, data):
        return cls(
            count = int(data.get("c", 0)),
            duration = WindowedAverage.from_dict(data.get("d", {})),
        )


@dataclass
class TrigramScore:
    trigram: str
    score: float


class Statistics:
    def __init__(self):
        self.total_chars_typed = 0
        self.total_sessions_duration = 0.0
        self.sessions_count = 0
        self.trigrams = {}

    def average_char_duration(self):
        if self.total_chars_typed == 0:
            return math.nan
        return self.total_sessions_duration / self.total_chars_typed

    def record_session(self, text, timeline, training = False):
        if not validate_session(text, timeline):
            return False
        self.add_session(text, timeline, training)
        return True

    def add_session(self, text, timeline, training = False):
        self.sessions_count += 1
        self.total_chars_typed += len(text)
        self.total_sessions_duration += timeline[-1]
        for i in range(len(text) - 3):
            trigram = text[i:i + 3]
            stat = self.trigrams.get(trigram)
            if stat is None:
                stat = self.trigrams[trigram] = TrigramStat()
            # drilling a trigram should not keep it stuck at the top
            if not training:
                stat.count += 1
            stat.duration.append(timeline[i + 3] - timeline[i])

    def trigrams_to_train(self):
        default_duration = self.average_char_duration() * 3
        scored = [
            TrigramScore(trigram, trigram_score(stat, default_duration))
            for trigram, stat in self.trigrams.items()
        ]
        scored.sort(key=lambda ts: ts.score, reverse=True)
        return scored

    def to_dict(self):
        return {
            "TotalCharsTyped": self.total_chars_typed,
            "TotalSessionsDuration": self.total_sessions_duration,
            "SessionsCount": self.sessions_count,
            "Trigrams": {t: s.to_dict() for t, s in self.trigrams.items()},
        }

    @classmethod
    def from_dict(cls, data):
        stats = cls()
        stats.total_chars_typed = int(data.get("TotalCharsTyped", 0))
        stats.total_sessions_duration = float(data.get("TotalSessionsDuration", 0.0))
        stats.sessions_count = int(data.get("SessionsCount", 0))
        stats.trigrams = {
            t: TrigramStat.from_dict(s)
            for t, s in (data.get("Trigrams") or {}).items()
        }
        return stats
