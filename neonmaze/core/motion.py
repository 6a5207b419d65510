from __future__ import annotations

from typing import Tuple

SMOOTHING = 0.2


class SmoothedPosition:
    """Display position that eases toward the committed player cell.

    Each :meth:`step` closes ``factor`` of the remaining distance, so the
    token glides instead of jumping. Only the render tick touches this.
    """

    def __init__(self, x: float = 0.0, y: float = 0.0, factor: float = SMOOTHING) -> None:
        if not 0.0 < factor <= 1.0:
            raise ValueError(f"factor must be in (0, 1], got {factor}")
        self.x = float(x)
        self.y = float(y)
        self._factor = factor

    @property
    def factor(self) -> float:
        return self._factor

    def snap(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)

    def step(self, target_x: float, target_y: float) -> Tuple[float, float]:
        self.x += (target_x - self.x) * self._factor
        self.y += (target_y - self.y) * self._factor
        return self.x, self.y

    def is_settled(self, target_x: float, target_y: float, tolerance: float = 0.5) -> bool:
        return abs(target_x - self.x) <= tolerance and abs(target_y - self.y) <= tolerance
