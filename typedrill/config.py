import os
from pathlib import Path

#config

DATA_DIR = Path(os.environ.get("TYPEDRILL_HOME", Path.home() / ".typedrill"))
STATS_FILE = "stats.json"
LOG_STATS_FILE = "sessions_log.jsonl"

# stats

WINDOW_CAPACITY = 10
MIN_SESSION_LENGTH = 5

# typing speed we think is unreachable, in wpm
SPEED_OF_LIGHT = 150.0
# 3 / 5 * 60: wpm when a trigram takes one second
WPM_PER_1SEC_TRIGRAM_TIME = 36.0
# 60 / 5: wpm when one character takes one second
WPM_IN_CPS = 12.0
WORLD_AVERAGE_WPM = 50.0

# generators

N_WEAKEST = 10
DEFAULT_LENGTH = 100
WEAKEST_LENGTH = 50
ZERO_SCORE_FLOOR = 0.00000001

# report

REPORT_TOP = 20
MIN_PROGRESS_SECONDS = 10 * 60

# words

WORD_COUNT = 15000
WORDS_NUMBER = 10
TARGET_PATTERNS = 3
