"""Sigmoid model of how a machine's performance grows with operating hours."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass
class PerformancePoint:
    """One sample of the curve: operating hours and performance in percent."""

    x: float = 0.0
    y: float = 0.0

    def __str__(self) -> str:
        return f"(x: {self.x:.2f}, y: {self.y:.2f}%)"


@dataclass
class SigmoidPerformance:
    """Performance curve y = 100 / (1 + exp(-k * (x - x0))) and its sampled points."""

    k: float = 0.1
    x0: float = 50.0
    points: list[PerformancePoint] = field(default_factory=list)

    def compute_y(self, x: float) -> float:
        """Return the performance, in percent, after ``x`` operating hours."""
        exponent = -self.k * (x - self.x0)
        try:
            denominator = 1.0 + math.exp(exponent)
        except OverflowError:
            return 0.0
        return 100.0 / denominator

    def generate_points(self, x_start: float, x_end: float, count: int) -> None:
        """Replace the points with ``count`` evenly spaced samples (at least two)."""
        self.points.clear()
        count = max(count, 2)
        step = (x_end - x_start) / (count - 1)
        for i in range(count):
            x = x_start + i * step
            self.points.append(PerformancePoint(x, self.compute_y(x)))

    def generate_points_by_step(self, x_start: float, x_end: float, step: float) -> None:
        """Replace the points with samples every ``step`` hours; a step <= 0 means 1."""
        self.points.clear()
        if step <= 0:
            step = 1.0
        x = x_start
        while x <= x_end:
            self.points.append(PerformancePoint(x, self.compute_y(x)))
            x += step

    def max_performance(self) -> float:
        """Highest sampled performance, or 0.0 when there are no points."""
        return max((p.y for p in self.points), default=0.0)

    def min_performance(self) -> float:
        """Lowest sampled performance, or 0.0 when there are no points."""
        return min((p.y for p in self.points), default=0.0)

    def inflection_point(self) -> PerformancePoint:
        """The point of the curve at x0, where performance is 50%."""
        return PerformancePoint(self.x0, self.compute_y(self.x0))

    def points_above(self, percentage: float) -> list[PerformancePoint]:
        """Sampled points whose performance is at least ``percentage``."""
        return [p for p in self.points if p.y >= percentage]

    def clear_points(self) -> None:
        """Drop every sampled point."""
        self.points.clear()

    def __len__(self) -> int:
        return len(self.points)

    def summary(self) -> str:
        """One-line description of the parameters and the sampled range."""
        return (
            f"Sigmoide - k: {self.k:.3f}, x0: {self.x0:.1f}, Puntos: {len(self.points)}, "
            f"Rango Y: [{self.min_performance():.1f}% - {self.max_performance():.1f}%]"
        )