from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple


@dataclass(frozen=True)
class StandardSize:
    width_mm: int
    thickness_mm: int

    @property
    def area_mm2(self) -> float:
        return float(self.width_mm * self.thickness_mm)

    @property
    def label(self) -> str:
        return f"{self.width_mm}mm x {self.thickness_mm}mm"


class StandardSizeCatalog:
    """
    Ordered table of manufactured busbar cross-sections.

    Catalog order is the recommendation order: entries are listed by
    ascending area, and on equal area the thinner bar comes first.
    """

    def __init__(self, sizes: Sequence[Tuple[int, int]], fallback: Tuple[int, int]):
        self._sizes = tuple(StandardSize(w, t) for w, t in sizes)
        self._fallback = StandardSize(*fallback)
        areas = [s.area_mm2 for s in self._sizes]
        if areas != sorted(areas):
            raise ValueError("standard size catalog must be ordered by ascending area")

    def __iter__(self) -> Iterator[StandardSize]:
        return iter(self._sizes)

    def __len__(self) -> int:
        return len(self._sizes)

    @property
    def fallback(self) -> StandardSize:
        return self._fallback

    def qualifying(self, required_area_mm2: float) -> List[StandardSize]:
        """All sizes whose area covers the requirement, in catalog order."""
        return [s for s in self._sizes if s.area_mm2 >= required_area_mm2]

    def recommend(self, required_area_mm2: float, limit: int = 3) -> List[str]:
        """
        Labels of the first ``limit`` qualifying sizes.

        When nothing in the catalog is large enough the single fallback size is
        returned, so the result is never empty.
        """
        picks = self.qualifying(required_area_mm2)[:limit]
        if not picks:
            return [self._fallback.label]
        return [s.label for s in picks]


# (width, thickness) in mm
STANDARD_SIZES = StandardSizeCatalog(
    sizes=[
        (20, 5), (25, 5), (30, 5),
        (40, 5), (20, 10),
        (50, 5), (25, 10),
        (60, 5), (30, 10),
        (80, 5), (40, 10),
        (100, 5), (50, 10),
        (120, 5), (60, 10),
        (80, 10), (60, 15), (100, 10),
        (120, 10), (100, 15), (80, 20),
        (120, 15), (100, 20), (120, 20),
        (100, 30), (160, 20), (120, 30),
        (160, 30), (200, 30),
    ],
    fallback=(60, 10),
)
