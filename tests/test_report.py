import pytest

from helpers import uniform_timeline
from typedrill.report import (
    format_duration,
    get_report,
    human_duration,
    progress_interval,
    wpm_progress,
)
from typedrill.storage import LogEntry

TEXT = "abcdefghij" * 30


def entry(chars):
    return LogEntry("2024-05-01T12:00:00Z", "x" * chars, [float(i + 1) for i in range(chars)])


def test_format_duration():
    assert format_duration(0) == "0m"
    assert format_duration(600) == "10m"
    assert format_duration(3600) == "1h"
    assert format_duration(5400) == "1h30m"


def test_human_duration():
    assert human_duration(42.7) == "42s"
    assert human_duration(125) == "2m5s"
    assert human_duration(3723) == "1h2m3s"


def test_progress_interval():
    assert progress_interval(1200) == 600
    assert progress_interval(3 * 3600) == 1800
    assert progress_interval(11 * 3600) == 3600


def test_progress_single_session():
    progress = wpm_progress([entry(1200)], 600)
    assert progress == pytest.approx([599 / 600 * 12, 12.0])


def test_progress_carries_over_sessions():
    progress = wpm_progress([entry(400), entry(400)], 600)
    assert progress == pytest.approx([599 / 600 * 12, 201 / 200 * 12])


def test_progress_empty_log():
    assert wpm_progress([], 600) == []


def test_report_without_data(trainer):
    report = get_report(trainer)
    lines = report.lines()
    assert "Total characters typed: 0" in lines
    assert "Average typing speed: 50.0 wpm" in lines
    assert lines[-1] == "Train more to get some progress!"
    assert report.slowest is None
    assert report.top == []


def test_report_trigram_stats(trainer):
    trainer.save_session("2024-05-01T12:00:00Z", "the quick brown fox", uniform_timeline("the quick brown fox", 0.3))
    trainer.save_session("2024-05-01T12:01:00Z", "the slow dog", [0.3, 0.6, 2.9, 3.2, 3.5, 3.8, 4.1, 4.4, 4.7, 5.0, 5.3, 5.6])
    report = get_report(trainer)
    assert report.slowest[0] in {"the", "he ", "e s"}
    assert report.slowest[1] > report.fastest[1]
    assert report.top[0].trigram in {"the", "he "}
    assert report.top[0].frequency == 2
    scores = [row.score for row in report.top]
    assert scores == sorted(scores, reverse=True)
    assert "Need to be trained most:" in report.lines()


def test_report_top_is_limited(trainer):
    text = "abcdefghijklmnopqrstuvwxyz"
    trainer.save_session("2024-05-01T12:00:00Z", text, uniform_timeline(text, 0.3))
    assert len(get_report(trainer).top) == 20


def test_report_progress(trainer):
    for _ in range(3):
        trainer.save_session("2024-05-01T12:00:00Z", TEXT, uniform_timeline(TEXT, 1.0))
    report = get_report(trainer)
    assert report.progress_interval == 600
    assert report.progress == pytest.approx([599 / 600 * 12, 301 / 300 * 12])
    lines = report.lines()
    assert "Training progress:" in lines
    assert "    10m | 12.0" in lines
