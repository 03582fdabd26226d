"""Chart data: a line series and the axis bounds that frame it."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Optional

Point = tuple[float, float]


@dataclass
class LineSeries:
    """Points drawn as one line on the chart."""

    points: list[Point] = field(default_factory=list)
    use_opengl: bool = False

    def replace(self, points: Iterable[Point]) -> None:
        """Replace all points of the series."""
        self.points = list(points)


@dataclass(frozen=True)
class Bounds:
    """Smallest and largest values on each axis."""

    min_x: float = 0.0
    max_x: float = 0.0
    min_y: float = 0.0
    max_y: float = 0.0


def _extent(values: Sequence[float]) -> tuple[float, float]:
    if not values:
        return 0.0, 0.0
    return min(values), max(values)


def calculate_bounds(x_axis: Iterable[float], y_axis: Iterable[float]) -> Bounds:
    """Return the bounds of both axes; an empty axis spans 0 to 0."""
    min_x, max_x = _extent(list(x_axis))
    min_y, max_y = _extent(list(y_axis))
    return Bounds(min_x, max_x, min_y, max_y)


class GraphData:
    """Feeds x/y data to a series and tracks the chart bounds."""

    def __init__(self, series: Optional[LineSeries] = None) -> None:
        self.series = series
        self.bounds = Bounds()
        self.bounds_changed: list[Callable[[Bounds], None]] = []

    @property
    def min_x(self) -> float:
        return self.bounds.min_x

    @property
    def max_x(self) -> float:
        return self.bounds.max_x

    @property
    def min_y(self) -> float:
        return self.bounds.min_y

    @property
    def max_y(self) -> float:
        return self.bounds.max_y

    def set_series(self, series: Optional[LineSeries]) -> None:
        """Choose the series that ``set_data`` fills."""
        self.series = series

    def set_data(self, x_axis: Iterable[float], y_axis: Iterable[float]) -> None:
        """Show new data on the current series, or only update the bounds."""
        if self.series is not None:
            self.update_series(self.series, x_axis, y_axis)
        else:
            self._refresh_bounds(list(x_axis), list(y_axis))

    def update_series(
        self,
        series: Optional[LineSeries],
        x_axis: Iterable[float],
        y_axis: Iterable[float],
    ) -> None:
        """Fill ``series`` with the points and update the bounds."""
        if series is None:
            return
        xs = list(x_axis)
        ys = list(y_axis)
        if len(xs) != len(ys):
            raise ValueError(
                f"axis lengths differ: {len(xs)} x values, {len(ys)} y values"
            )
        series.use_opengl = True
        series.replace(zip(xs, ys))
        self._refresh_bounds(xs, ys)

    def _refresh_bounds(self, xs: Sequence[float], ys: Sequence[float]) -> None:
        self.bounds = calculate_bounds(xs, ys)
        for listener in self.bounds_changed:
            listener(self.bounds)