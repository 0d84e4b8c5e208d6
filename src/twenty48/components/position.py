from dataclasses import dataclass

@dataclass(frozen=True, slots=True)
class Position:
    row: int
    col: int

    @classmethod
    def from_index(cls, index: int, size: int) -> "Position":
        return cls(index // size, index % size)

    def to_index(self, size: int) -> int:
        return self.row * size + self.col

    def is_valid(self, size: int) -> bool:
        return 0 <= self.row < size and 0 <= self.col < size
