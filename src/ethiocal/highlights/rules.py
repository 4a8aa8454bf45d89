"""
Occurrence functions for dynamic (movable) highlights.

A DynamicRule is plain data; its `kind` selects one of the functions
registered here and its `params` tuple is passed through. Every function
maps (rule, gregorian_year) to the Gregorian (month, day) pairs on which the
rule falls in that year: usually one, sometimes two (Islamic drift) or
none (windowed rules that miss the year).
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Tuple

from ..core.errors import UnknownRuleKindError
from ..core.time import gregorian_to_jdn, jdn_to_gregorian
from ..core.types import DynamicRule, MonthDay
from ..engines.ethiopic import ethiopic_to_jdn
from ..engines.islamic import islamic_occurrences_in_gregorian_year
from ..engines.paschal import paschal_feast_gregorian
from ..engines.weekday import first_weekday_jdn

logger = logging.getLogger(__name__)

OccurrenceFunc = Callable[[DynamicRule, int], List[MonthDay]]
_KINDS: Dict[str, OccurrenceFunc] = {}

# Ethiopic years whose months can touch Gregorian year gy: gy-9 .. gy-6
ETHIOPIC_YEAR_WINDOW = (-9, -6)


def register_rule_kind(kind: str, fn: OccurrenceFunc) -> None:
    _KINDS[kind] = fn


def rule_kinds() -> Tuple[str, ...]:
    return tuple(sorted(_KINDS))


def rule_occurrences(rule: DynamicRule, gy: int) -> List[MonthDay]:
    if rule.kind not in _KINDS:
        raise UnknownRuleKindError(f"Unknown rule kind '{rule.kind}' for '{rule.id}'. Available: {sorted(_KINDS)}")
    return _KINDS[rule.kind](rule, gy)


# ============================================================
# Standard kinds
# ============================================================

def paschal(rule: DynamicRule, gy: int) -> List[MonthDay]:
    """params = (offset_days_from_easter,)"""
    (offset,) = rule.params
    g = paschal_feast_gregorian(gy, offset)
    return [MonthDay(g.month, g.day)] if g.year == gy else []


def islamic(rule: DynamicRule, gy: int) -> List[MonthDay]:
    """params = (islamic_month, islamic_day)"""
    im, id = rule.params
    return islamic_occurrences_in_gregorian_year(gy, im, id)


def gregorian_weekday(rule: DynamicRule, gy: int) -> List[MonthDay]:
    """params = (month, weekday, offset_days): first weekday of a Gregorian month, shifted."""
    month, weekday, offset = rule.params
    g = jdn_to_gregorian(first_weekday_jdn(gregorian_to_jdn(gy, month, 1), weekday) + offset)
    return [MonthDay(g.month, g.day)] if g.year == gy else []


def ethiopic_weekday(rule: DynamicRule, gy: int) -> List[MonthDay]:
    """params = (ethiopic_month, weekday): first weekday of an Ethiopic month."""
    month, weekday = rule.params
    lo, hi = ETHIOPIC_YEAR_WINDOW
    hits: List[MonthDay] = []
    for ey in range(gy + lo, gy + hi + 1):
        g = jdn_to_gregorian(first_weekday_jdn(ethiopic_to_jdn(ey, month, 1), weekday))
        if g.year == gy:
            hits.append(MonthDay(g.month, g.day))
    if not hits:
        logger.debug("Rule %s has no occurrence in Gregorian %d", rule.id, gy)
    return hits


register_rule_kind("paschal", paschal)
register_rule_kind("islamic", islamic)
register_rule_kind("gregorian_weekday", gregorian_weekday)
register_rule_kind("ethiopic_weekday", ethiopic_weekday)
