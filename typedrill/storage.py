import json
import logging
from contextlib import contextmanager
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from typedrill import config
from typedrill.errors import StorageError
from typedrill.stats import Statistics

logger = logging.getLogger(__name__)


def now_ts():
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


def format_start(start):
    if isinstance(start, datetime):
        if start.tzinfo is None:
            start = start.astimezone()
        return start.isoformat(timespec="seconds")
    return start


@dataclass
class LogEntry:
    start: str
    text: str
    timeline: list = field(default_factory=list)

    @classmethod
    def from_dict(cls, data):
        text = data.get("text", "")
        if not isinstance(text, str):
            raise TypeError(f"text should be a string, not {type(text).__name__}")
        return cls(
            start = data.get("start", ""),
            text = text,
            timeline = [float(t) for t in data.get("timeline", [])],
        )


class Storage:
    def __init__(self, data_dir = None):
        self.data_dir = Path(data_dir) if data_dir is not None else config.DATA_DIR
        self.stats_path = self.data_dir / config.STATS_FILE
        self.log_path = self.data_dir / config.LOG_STATS_FILE

    def _mkdir(self):
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Cannot create data directory {self.data_dir}: {e}") from e

    def load_statistics(self):
        if not self.stats_path.exists():
            logger.warning(f"File {self.stats_path} does not exist! It will be created.")
            return Statistics()
        try:
            with open(self.stats_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            stats = Statistics.from_dict(data)
        except (json.JSONDecodeError, OSError, ValueError, TypeError, AttributeError) as e:
            raise StorageError(f"Failed to load stats file {self.stats_path}: {e}") from e
        logger.debug(f"Loaded stats for {len(stats.trigrams)} trigrams from {self.stats_path}")
        return stats

    def save_statistics(self, stats):
        self._mkdir()
        try:
            with open(self.stats_path, "w", encoding="utf-8") as f:
                json.dump(stats.to_dict(), f, indent=1, ensure_ascii=False)
        except OSError as e:
            raise StorageError(f"Failed to save stats file {self.stats_path}: {e}") from e
        logger.debug(f"Saved stats to {self.stats_path}")

    def append_log_line(self, entry):
        self._mkdir()
        if isinstance(entry, LogEntry):
            entry = asdict(entry)
        try:
            with open(self.log_path, "a", encoding="utf-8") as f:
                f.write(json.dumps(entry, ensure_ascii=False) + "\n")
        except OSError as e:
            raise StorageError(f"Failed to append to {self.log_path}: {e}") from e

    @contextmanager
    def open_log(self):
        if not self.log_path.exists():
            logger.debug(f"No session log at {self.log_path}")
            yield iter(())
            return
        try:
            f = open(self.log_path, "r", encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Failed to open {self.log_path}: {e}") from e
        with f:
            yield self._read_entries(f)

    def _read_entries(self, f):
        for lineno, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            try:
                yield LogEntry.from_dict(json.loads(line))
            except (json.JSONDecodeError, ValueError, TypeError, AttributeError) as e:
                raise StorageError(f"{self.log_path}:{lineno}: bad log entry: {e}") from e
