"""Screen rectangles for panels."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A panel's frame on screen, corners inclusive (terminal cells)."""

    left: int
    top: int
    right: int
    bottom: int

    def __post_init__(self) -> None:
        if self.left >= self.right or self.top >= self.bottom:
            raise ValueError(f"Degenerate position {self!r}")

    @property
    def width(self) -> int:
        return self.right - self.left + 1

    @property
    def height(self) -> int:
        return self.bottom - self.top + 1

    def contains(self, x: int, y: int) -> bool:
        return self.left <= x <= self.right and self.top <= y <= self.bottom

    def centered(self, width: int, height: int) -> "Position":
        """A rectangle of at most width x height centered inside this one."""
        width = max(2, min(width, self.width))
        height = max(2, min(height, self.height))
        left = self.left + (self.width - width) // 2
        top = self.top + (self.height - height) // 2
        return Position(left, top, left + width - 1, top + height - 1)
