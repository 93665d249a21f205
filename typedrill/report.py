from dataclasses import dataclass, field

from typedrill.config import MIN_PROGRESS_SECONDS, REPORT_TOP
from typedrill.scoring import calc_wpm, time_to_wpm

# stats report


@dataclass
class TrigramRow:
    trigram: str
    score: float
    frequency: int
    duration: float

    @property
    def wpm(self):
        return time_to_wpm(self.duration) if self.duration > 0 else 0.0


@dataclass
class Report:
    total_chars: int
    total_duration: float
    sessions: int
    average_wpm: float
    slowest: tuple = None
    fastest: tuple = None
    top: list = field(default_factory=list)
    progress_interval: float = 0.0
    progress: list = field(default_factory=list)

    def lines(self):
        res = [
            f"Total characters typed: {self.total_chars}",
            f"Total time in training: {human_duration(self.total_duration)}",
            f"Average typing speed: {self.average_wpm:.1f} wpm",
            f"Training sessions: {self.sessions}",
        ]
        if self.slowest is not None:
            res += ["", "Trigram stats:"]
            for title, (trigram, dur) in (("Slowest", self.slowest), ("Fastest", self.fastest)):
                res.append(f"{title}: {trigram!r} {dur:4.2f}s ({time_to_wpm(dur):.1f} wpm)")
        if self.top:
            res += ["", "Need to be trained most:", "Trigram |   Score | Frequency | Typing time"]
            for row in self.top:
                res.append(
                    f"{row.trigram!r:>7} | {row.score:7.2f} | {row.frequency:9d} | "
                    f"{row.duration:4.2f}s ({row.wpm:.1f} wpm)"
                )
        if not self.progress:
            res += ["", "Train more to get some progress!"]
            return res
        res += ["", "Training progress:", "   Time | WPM"]
        for i, wpm in enumerate(self.progress):
            res.append(f"{format_duration(i * self.progress_interval):>7} | {wpm:.1f}")
        return res


def human_duration(seconds):
    seconds = int(seconds)
    h, rest = divmod(seconds, 3600)
    m, s = divmod(rest, 60)
    if h:
        return f"{h}h{m}m{s}s"
    if m:
        return f"{m}m{s}s"
    return f"{s}s"


def format_duration(seconds):
    minutes = int(seconds // 60)
    h, m = divmod(minutes, 60)
    if h == 0:
        return f"{m}m"
    if m == 0:
        return f"{h}h"
    return f"{h}h{m}m"


def progress_interval(total_seconds):
    if total_seconds > 10 * 3600:
        return 60 * 60
    if total_seconds > 2 * 3600:
        return 30 * 60
    return 10 * 60


def wpm_progress(entries, interval):
    """WPM for each `interval` seconds of typing time across the session log.

    Counters are relative to the current entry's timeline; whatever was not
    counted at the end of a session is carried over as negative offsets.
    """
    counted_seconds = 0.0
    counted_chars = 0
    res = []
    for entry in entries:
        timeline = entry.timeline
        if not timeline:
            continue
        for i, t in enumerate(timeline):
            if t - counted_seconds >= interval:
                res.append(calc_wpm(i - counted_chars, t - counted_seconds))
                counted_seconds = t
                counted_chars = i
        counted_seconds -= timeline[-1]
        counted_chars -= len(timeline)
    if -counted_seconds > 0:
        res.append(calc_wpm(-counted_chars, -counted_seconds))
    return res


def slowest_fastest(trigrams):
    slowest = fastest = None
    for trigram, stat in trigrams.items():
        if stat.duration.length == 0:
            continue
        dur = stat.duration.average(0)
        if fastest is None or dur < fastest[1]:
            fastest = (trigram, dur)
        if slowest is None or dur > slowest[1]:
            slowest = (trigram, dur)
    return slowest, fastest


def get_report(trainer):
    stats = trainer.statistics
    slowest, fastest = slowest_fastest(stats.trigrams)
    report = Report(
        total_chars = stats.total_chars_typed,
        total_duration = stats.total_sessions_duration,
        sessions = stats.sessions_count,
        average_wpm = trainer.average_wpm(),
        slowest = slowest,
        fastest = fastest,
    )
    for ts in trainer.trigrams_to_train()[:REPORT_TOP]:
        stat = stats.trigrams[ts.trigram]
        # promille of total training time: a trigram typed alone at the
        # average speed would score 1000
        score = ts.score / stats.total_sessions_duration * 1000.0 if stats.total_sessions_duration else 0.0
        report.top.append(TrigramRow(ts.trigram, score, stat.count, stat.duration.average(0)))

    if stats.total_sessions_duration < MIN_PROGRESS_SECONDS:
        return report
    report.progress_interval = progress_interval(stats.total_sessions_duration)
    with trainer.storage.open_log() as entries:
        report.progress = wpm_progress(entries, report.progress_interval)
    return report
