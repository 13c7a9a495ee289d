"""Test helpers shared across modules."""

import random


class FixedRandom(random.Random):
    """Random source that always returns the same value from random()."""

    def __init__(self, value: float) -> None:
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


# random() > 0.5 → first villager wins
FIRST_WINS = 0.9
SECOND_WINS = 0.1
