from typedrill.errors import (
    TypedrillError,
    ValidationError,
    InsufficientDataError,
    StorageError,
)
from typedrill.stats import Statistics, TrigramStat, TrigramScore
from typedrill.storage import Storage
from typedrill.trainer import Trainer

__version__ = "0.1.0"
