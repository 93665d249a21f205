import random

import pytest

from typedrill.storage import Storage
from typedrill.trainer import Trainer


@pytest.fixture
def storage(tmp_path):
    return Storage(tmp_path / "data")


@pytest.fixture
def trainer(storage):
    return Trainer.open(storage, rng = random.Random(1))
