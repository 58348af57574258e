"""
Distance metrics for the nearest-seed scan.

Scores only need to grow monotonically with true distance; the partition
compares them and never does arithmetic on them, so Euclidean distance is
kept squared.
"""

from enum import Enum


class DistanceMetric(str, Enum):
    """Runtime-selectable distance function."""

    EUCLIDEAN = "euclidean"
    MANHATTAN = "manhattan"

    @classmethod
    def parse(cls, name) -> "DistanceMetric":
        """Look up a metric by name, case-insensitive.

        The misspelt ``euclidian`` is accepted for compatibility with the
        older command line.
        """
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower()
        if key == "euclidian":
            key = cls.EUCLIDEAN.value
        try:
            return cls(key)
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown distance metric: {name!r} (choose from {choices})") from None

    def distance(self, x1, y1, x2, y2):
        """Score between ``(x1, y1)`` and ``(x2, y2)``.

        Accepts Python ints or numpy integer arrays (broadcast). Arrays must be
        signed; unsigned subtraction would wrap.
        """
        dx = x1 - x2
        dy = y1 - y2
        if self is DistanceMetric.EUCLIDEAN:
            return dx * dx + dy * dy
        elif self is DistanceMetric.MANHATTAN:
            return abs(dx) + abs(dy)
        raise ValueError(f"Unhandled metric: {self}")
