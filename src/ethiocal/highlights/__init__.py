"""Highlight tables, rule kinds and the catalog that queries them."""

from .data import CANONICAL_IDS, DYNAMIC_RULES, ETHIOPIAN_HIGHLIGHTS, GREGORIAN_HIGHLIGHTS
from .resolve import HighlightCatalog
from .rules import register_rule_kind, rule_kinds, rule_occurrences

__all__ = [
    "CANONICAL_IDS",
    "DYNAMIC_RULES",
    "ETHIOPIAN_HIGHLIGHTS",
    "GREGORIAN_HIGHLIGHTS",
    "HighlightCatalog",
    "register_rule_kind",
    "rule_kinds",
    "rule_occurrences",
]
