"""
Highlight queries over injected reference tables.

Static highlights match by exact (calendar, month, day). Dynamic rules are
evaluated per Gregorian year; for an Ethiopic query they are evaluated over
neighbouring Gregorian years, converted, and kept only on an exact match,
since a fixed date in one calendar drifts in the other.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from ..arithmetic import add_days, today
from ..core.time import gregorian_to_jdn, jdn_to_gregorian, weekday_from_jdn
from ..core.types import (
    Calendar,
    DynamicRule,
    EthiopicDate,
    GregorianDate,
    Highlight,
    HighlightOnDate,
    ResolvedHighlight,
)
from ..engines.ethiopic import (
    PAGUME,
    ethiopic_days_in_month,
    jdn_to_ethiopic,
    to_ethiopic,
    to_gregorian,
)
from ..engines.gregorian import gregorian_days_in_month
from .rules import rule_occurrences

logger = logging.getLogger(__name__)

DateT = Union[GregorianDate, EthiopicDate]
_Source = Union[Highlight, DynamicRule]

_WEEKEND = (0, 6)  # Sunday, Saturday


def _as_highlight(rule: DynamicRule, calendar: Calendar, month: int, day: int) -> Highlight:
    return Highlight(
        id=rule.id,
        name=rule.name,
        amharic_name=rule.amharic_name,
        calendar=calendar,
        month=month,
        day=day,
        category=rule.category,
        tags=rule.tags,
    )


def _gregorian_of(d: DateT, calendar: Calendar) -> GregorianDate:
    if calendar == "gregorian":
        if not isinstance(d, GregorianDate):
            raise TypeError(f"{type(d).__name__} is not a gregorian date")
        return d
    if calendar == "ethiopic":
        if not isinstance(d, EthiopicDate):
            raise TypeError(f"{type(d).__name__} is not an ethiopic date")
        return to_gregorian(d)
    raise ValueError(f"calendar must be 'gregorian' or 'ethiopic', got {calendar!r}")


def _window(*years: int) -> List[int]:
    """Sorted distinct candidate years."""
    return sorted(set(years))


class HighlightCatalog:
    """Read-only highlight tables plus the queries over them."""

    def __init__(
        self,
        ethiopic: Sequence[Highlight],
        gregorian: Sequence[Highlight],
        rules: Sequence[DynamicRule],
        canonical_ids: Optional[Mapping[str, str]] = None,
    ):
        self.ethiopic = tuple(ethiopic)
        self.gregorian = tuple(gregorian)
        self.rules = tuple(rules)
        self.canonical_ids = dict(canonical_ids or {})
        logger.debug(
            "Highlight catalog: %d ethiopic, %d gregorian, %d dynamic",
            len(self.ethiopic), len(self.gregorian), len(self.rules),
        )

    def canonical_id(self, id: str) -> str:
        return self.canonical_ids.get(id, id)

    # ---------------------------------------------------------
    # Dynamic occurrences
    # ---------------------------------------------------------

    def dynamic_occurrences(self, gy: int) -> List[Tuple[DynamicRule, GregorianDate]]:
        """Every dynamic rule occurrence in Gregorian year gy."""
        return [
            (rule, GregorianDate(gy, md.month, md.day))
            for rule in self.rules
            for md in rule_occurrences(rule, gy)
        ]

    def _dynamic_in_window(self, years: Iterable[int]) -> List[Tuple[DynamicRule, GregorianDate, EthiopicDate]]:
        return [
            (rule, g, to_ethiopic(g))
            for gy in _window(*years)
            for rule, g in self.dynamic_occurrences(gy)
        ]

    # ---------------------------------------------------------
    # Day
    # ---------------------------------------------------------

    def for_day(self, d: DateT, calendar: Calendar) -> List[Highlight]:
        _gregorian_of(d, calendar)  # checks the tag against the date type
        if calendar == "gregorian":
            return self.for_gregorian_day(d)  # type: ignore[arg-type]
        return self.for_ethiopic_day(d)  # type: ignore[arg-type]

    def for_gregorian_day(self, d: GregorianDate) -> List[Highlight]:
        fixed = [h for h in self.gregorian if h.month == d.month and h.day == d.day]
        dynamic = [
            _as_highlight(rule, "gregorian", g.month, g.day)
            for rule, g in self.dynamic_occurrences(d.year)
            if g.month == d.month and g.day == d.day
        ]
        return fixed + dynamic

    def for_ethiopic_day(self, d: EthiopicDate) -> List[Highlight]:
        fixed = [h for h in self.ethiopic if h.month == d.month and h.day == d.day]
        g = to_gregorian(d)
        target = to_ethiopic(g)  # AM, normalized
        dynamic = [
            _as_highlight(rule, "ethiopic", d.month, d.day)
            for rule, _, e in self._dynamic_in_window((g.year - 1, g.year, g.year + 1))
            if e == target
        ]
        return fixed + dynamic

    # ---------------------------------------------------------
    # Week / range
    # ---------------------------------------------------------

    def _pin(self, d: DateT, calendar: Calendar) -> List[HighlightOnDate]:
        g = _gregorian_of(d, calendar)
        e = to_ethiopic(g)
        return [HighlightOnDate(h, g, e) for h in self.for_day(d, calendar)]

    def for_week(self, start: DateT, calendar: Calendar, include_weekends: bool = True) -> List[HighlightOnDate]:
        """Highlights on the 7 days starting at `start`, optionally skipping Saturday/Sunday."""
        out: List[HighlightOnDate] = []
        for i in range(7):
            cur = add_days(start, i, calendar)
            if not include_weekends:
                g = _gregorian_of(cur, calendar)
                if weekday_from_jdn(gregorian_to_jdn(g.year, g.month, g.day)) in _WEEKEND:
                    continue
            out.extend(self._pin(cur, calendar))
        return out

    def in_range(self, start: DateT, end: DateT, calendar: Calendar) -> List[HighlightOnDate]:
        """Highlights on every day from `start` to `end` inclusive, in the query calendar."""
        gs, ge = _gregorian_of(start, calendar), _gregorian_of(end, calendar)
        j0 = gregorian_to_jdn(gs.year, gs.month, gs.day)
        j1 = gregorian_to_jdn(ge.year, ge.month, ge.day)
        out: List[HighlightOnDate] = []
        for j in range(j0, j1 + 1):
            cur = jdn_to_gregorian(j) if calendar == "gregorian" else jdn_to_ethiopic(j)
            out.extend(self._pin(cur, calendar))
        return out

    # ---------------------------------------------------------
    # Month / year
    # ---------------------------------------------------------

    def for_month(self, year: int, month: int, calendar: Calendar) -> List[Highlight]:
        if calendar == "gregorian":
            gregorian_days_in_month(year, month)  # validates month
            fixed = [h for h in self.gregorian if h.month == month]
            dynamic = [
                _as_highlight(rule, "gregorian", g.month, g.day)
                for rule, g in self.dynamic_occurrences(year)
                if g.month == month
            ]
            return fixed + dynamic

        ethiopic_days_in_month(year, month)  # validates month
        fixed = [h for h in self.ethiopic if h.month == month]
        g0 = to_gregorian(EthiopicDate(year, month, 1))
        dynamic = [
            _as_highlight(rule, "ethiopic", e.month, e.day)
            for rule, _, e in self._dynamic_in_window((g0.year - 1, g0.year, g0.year + 1))
            if e.year == year and e.month == month
        ]
        return fixed + dynamic

    def _ethiopic_year_gregorian_years(self, year: int) -> List[int]:
        g_start = to_gregorian(EthiopicDate(year, 1, 1))
        g_end = to_gregorian(EthiopicDate(year, PAGUME, ethiopic_days_in_month(year, PAGUME)))
        return _window(g_start.year - 1, g_start.year, g_end.year, g_start.year + 1)

    def _gregorian_year_ethiopic_years(self, year: int) -> List[int]:
        e_start = to_ethiopic(GregorianDate(year, 1, 1))
        e_end = to_ethiopic(GregorianDate(year, 12, 31))
        return _window(e_start.year - 1, e_start.year, e_end.year, e_start.year + 1)

    def for_year(self, year: int, calendar: Calendar) -> List[Highlight]:
        if calendar == "gregorian":
            dynamic = [_as_highlight(rule, "gregorian", g.month, g.day) for rule, g in self.dynamic_occurrences(year)]
            return list(self.gregorian) + dynamic

        dynamic = [
            _as_highlight(rule, "ethiopic", e.month, e.day)
            for rule, _, e in self._dynamic_in_window(self._ethiopic_year_gregorian_years(year))
            if e.year == year
        ]
        return list(self.ethiopic) + dynamic

    # ---------------------------------------------------------
    # Search / filter
    # ---------------------------------------------------------

    def _everything(self, year: Optional[int]) -> List[Highlight]:
        """Static tables plus the dynamic rules pinned to `year` (default: current UTC year)."""
        if year is None:
            year = today("gregorian").year
        dynamic = [_as_highlight(rule, "gregorian", g.month, g.day) for rule, g in self.dynamic_occurrences(year)]
        return list(self.ethiopic) + list(self.gregorian) + dynamic

    def search(self, query: str, year: Optional[int] = None) -> List[Highlight]:
        """Substring match on the English name (case-insensitive) or the Amharic name."""
        q = query.lower()
        return [h for h in self._everything(year) if q in h.name.lower() or query in h.amharic_name]

    def by_category(self, category: str, year: Optional[int] = None) -> List[Highlight]:
        return [h for h in self._everything(year) if h.category == category]

    def for_today(self) -> List[HighlightOnDate]:
        return self._pin(today("gregorian"), "gregorian")

    # ---------------------------------------------------------
    # Annual listing
    # ---------------------------------------------------------

    def list_all(self, year: int, calendar: Calendar) -> List[ResolvedHighlight]:
        """
        Every highlight of `year` (Gregorian or Ethiopic year boundary) with
        both calendar counterparts, deduplicated by canonical id + exact
        Gregorian date, sorted chronologically.
        """
        items: List[Tuple[_Source, GregorianDate]] = []

        if calendar == "gregorian":
            items += [(h, GregorianDate(year, h.month, h.day)) for h in self.gregorian]
            items += self.dynamic_occurrences(year)
            for ey in self._gregorian_year_ethiopic_years(year):
                for h in self.ethiopic:
                    g = to_gregorian(EthiopicDate(ey, h.month, h.day))
                    if g.year == year:
                        items.append((h, g))
        else:
            items += [(h, to_gregorian(EthiopicDate(year, h.month, h.day))) for h in self.ethiopic]
            gyears = self._ethiopic_year_gregorian_years(year)
            for gy in gyears:
                for h in self.gregorian:
                    g = GregorianDate(gy, h.month, h.day)
                    if to_ethiopic(g).year == year:
                        items.append((h, g))
            items += [(rule, g) for rule, g, e in self._dynamic_in_window(gyears) if e.year == year]

        merged: Dict[Tuple[str, GregorianDate], Tuple[_Source, List[str], Optional[str]]] = {}
        for src, g in items:
            key = (self.canonical_id(src.id), g)
            if key not in merged:
                merged[key] = (src, list(src.tags), src.category)
                continue
            first, tags, category = merged[key]
            tags += [t for t in src.tags if t not in tags]
            merged[key] = (first, tags, category or src.category)

        out = [
            ResolvedHighlight(
                id=cid,
                name=src.name,
                amharic_name=src.amharic_name,
                gregorian=g,
                ethiopic=to_ethiopic(g),
                category=category,
                tags=tuple(tags),
            )
            for (cid, g), (src, tags, category) in merged.items()
        ]
        out.sort(key=lambda r: gregorian_to_jdn(r.gregorian.year, r.gregorian.month, r.gregorian.day))
        logger.debug("list_all(%d, %s): %d entries from %d candidates", year, calendar, len(out), len(items))
        return out
