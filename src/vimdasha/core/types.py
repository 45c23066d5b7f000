from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

@dataclass(frozen=True)
class Nakshatra:
    index: int  # 0..26
    name: str
    lord: str
    years: int

@dataclass(frozen=True)
class DashaLord:
    lord: str
    years: int

@dataclass(frozen=True)
class NakshatraPosition:
    """Where a sidereal longitude falls inside the 27-fold division."""
    longitude: float
    index: int
    name: str
    lord: str
    years: int
    elapsed_fraction: float
    remaining_fraction: float
    pada: int  # 1..4

    def to_dict(self) -> Dict[str, Any]:
        return {
            "longitude": self.longitude,
            "index": self.index,
            "name": self.name,
            "lord": self.lord,
            "years": self.years,
            "elapsed_fraction": self.elapsed_fraction,
            "remaining_fraction": self.remaining_fraction,
            "pada": self.pada,
        }

@dataclass(frozen=True)
class PeriodNode:
    """
    One period of the dasha tree, [start, end) in Julian Days.

    A node with children always has 9 of them, contiguous, covering the node
    exactly, one level deeper. Children never point back at their parent.
    """
    level: int
    lord: str
    start: float
    end: float
    children: Tuple["PeriodNode", ...] = ()

    @property
    def duration(self) -> float:
        return self.end - self.start

    def contains(self, jd: float) -> bool:
        return self.start <= jd < self.end

    def to_dict(self) -> Dict[str, Any]:
        return {
            "level": self.level,
            "lord": self.lord,
            "start": self.start,
            "end": self.end,
            "duration": self.duration,
            "children": [c.to_dict() for c in self.children],
        }

@dataclass(frozen=True)
class ActivePeriod:
    level: int
    lord: str
    start: float
    end: float

    def to_dict(self) -> Dict[str, Any]:
        return {"level": self.level, "lord": self.lord, "start": self.start, "end": self.end}

@dataclass(frozen=True)
class Timeline:
    """Birth context plus the 9 top-level periods (each carrying its subtree)."""
    birth_jd: float
    nakshatra: NakshatraPosition
    year_days: float
    depth: int
    periods: Tuple[PeriodNode, ...] = field(default_factory=tuple)

    @property
    def start(self) -> float:
        return self.periods[0].start

    @property
    def end(self) -> float:
        return self.periods[-1].end

    def to_dict(self) -> Dict[str, Any]:
        return {
            "birth_jd": self.birth_jd,
            "nakshatra": self.nakshatra.to_dict(),
            "year_days": self.year_days,
            "depth": self.depth,
            "timeline": [p.to_dict() for p in self.periods],
        }
