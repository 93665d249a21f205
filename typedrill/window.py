from typedrill.config import WINDOW_CAPACITY

MS_IN_SECOND = 1000.0


class WindowedAverage:
    """Ring buffer of the last WINDOW_CAPACITY durations, kept in milliseconds."""

    def __init__(self, values = None, length = 0, index = 0):
        self.values = list(values) if values is not None else [0] * WINDOW_CAPACITY
        self.length = length
        self.index = index

    def append(self, value):
        self.values[self.index] = int(round(value * MS_IN_SECOND))
        self.index = (self.index + 1) % WINDOW_CAPACITY
        if self.length < WINDOW_CAPACITY:
            self.length += 1

    def average(self, default):
        if self.length == 0:
            return default
        # slots past length are still unwritten while the window fills up
        total = sum(v / MS_IN_SECOND for v in self.values[:self.length])
        return total / self.length

    def to_dict(self):
        return {"l": self.length, "i": self.index, "v": list(self.values)}

    @classmethod
    def from_dict(cls, data):
        values = [int(v) for v in data.get("v", [])][:WINDOW_CAPACITY]
        values += [0] * (WINDOW_CAPACITY - len(values))
        return cls(
            values = values,
            length = min(int(data.get("l", 0)), WINDOW_CAPACITY),
            index = int(data.get("i", 0)) % WINDOW_CAPACITY,
        )

    def __eq__(self, other):
        if not isinstance(other, WindowedAverage):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return f"WindowedAverage(length={self.length}, index={self.index}, values={self.values})"
