"""Diagnostics package.

- pretty_month, feast_table, round_trip: always available, stdlib only
- feast_scatter: optional (requires the diagnostics extras: numpy + matplotlib)
"""

__all__ = ["pretty_month", "feast_table", "round_trip", "feast_scatter"]
