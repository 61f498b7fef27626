"""Known Vietnamese Lunar New Year (Tet) dates.

Entries are authoritative: when a year is present, the resolver returns the
table date instead of the astronomical estimate. Extend coverage by adding
entries (or by building a new table with ``NewYearTable.extend``), never by
touching the new-moon formulas.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Iterator, List, Mapping, Optional


@dataclass(frozen=True)
class NewYearTable:
    version: str
    entries: Mapping[int, date] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for year, d in self.entries.items():
            if d.year != year:
                raise ValueError(f"Entry for {year} falls in {d.year}: {d.isoformat()}")
        # read-only private copy
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def __contains__(self, year: object) -> bool:
        return year in self.entries

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self.entries))

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, year: int) -> Optional[date]:
        return self.entries.get(year)

    def years(self) -> List[int]:
        return sorted(self.entries)

    def extend(self, more: Mapping[int, date], *, version: str) -> "NewYearTable":
        merged = dict(self.entries)
        merged.update(more)
        return NewYearTable(version=version, entries=merged)


EMPTY_TABLE = NewYearTable(version="empty")

VN_TET_TABLE = NewYearTable(
    version="2020-2035",
    entries={
        2020: date(2020, 1, 25),
        2021: date(2021, 2, 12),
        2022: date(2022, 2, 1),
        2023: date(2023, 1, 22),
        2024: date(2024, 2, 10),
        2025: date(2025, 1, 29),
        2026: date(2026, 2, 17),
        2027: date(2027, 2, 6),
        2028: date(2028, 1, 26),
        2029: date(2029, 2, 13),
        2030: date(2030, 2, 3),
        2031: date(2031, 1, 23),
        2032: date(2032, 2, 11),
        2033: date(2033, 1, 31),
        2034: date(2034, 2, 19),
        2035: date(2035, 2, 8),
    },
)
