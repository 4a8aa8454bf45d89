"""ethiocal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry and highlight catalog on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_calendars,
    engine_info,
    register_engine,
    get_engine,
    get_catalog,
    set_catalog,
    get_highlights_for_day,
    get_highlights_for_gregorian_day,
    get_highlights_for_ethiopic_day,
    get_highlights_for_week,
    get_highlights_for_month,
    get_highlights_for_year,
    get_highlights_in_range,
    search_highlights,
    get_highlights_by_category,
    get_todays_highlights,
    list_all_highlights,
)
from .arithmetic import (
    today,
    add_days,
    add_months,
    add_years,
    previous_day,
    next_day,
    last_week,
    next_week,
    last_month,
    next_month,
    last_year,
    next_year,
    last_century,
    next_century,
    year_progress,
)
from .core.errors import EthiocalError, InvalidMonthError, UnknownCalendarError, UnknownRuleKindError
from .core.time import gregorian_to_jdn, jdn_to_gregorian, weekday_from_jdn
from .core.types import (
    EthiopicDate,
    GregorianDate,
    YearProgress,
    Highlight,
    DynamicRule,
    HighlightOnDate,
    ResolvedHighlight,
)
from .engines.ethiopic import (
    ETH_EPOCH,
    AMETE_MIHRET_DELTA,
    to_gregorian,
    to_ethiopic,
    is_ethiopic_leap_year,
    ethiopic_days_in_month,
    ethiopic_to_jdn,
    jdn_to_ethiopic,
    normalize_am_year,
)
from .engines.gregorian import is_gregorian_leap_year, gregorian_days_in_month
from .engines.islamic import islamic_to_jdn, jdn_to_islamic
from .engines.paschal import orthodox_easter_gregorian, good_friday_gregorian, hosanna_gregorian
from .engines.weekday import first_weekday_of_month

__all__ = [
    "list_calendars",
    "engine_info",
    "register_engine",
    "get_engine",
    "get_catalog",
    "set_catalog",
    "get_highlights_for_day",
    "get_highlights_for_gregorian_day",
    "get_highlights_for_ethiopic_day",
    "get_highlights_for_week",
    "get_highlights_for_month",
    "get_highlights_for_year",
    "get_highlights_in_range",
    "search_highlights",
    "get_highlights_by_category",
    "get_todays_highlights",
    "list_all_highlights",
    "today",
    "add_days",
    "add_months",
    "add_years",
    "previous_day",
    "next_day",
    "last_week",
    "next_week",
    "last_month",
    "next_month",
    "last_year",
    "next_year",
    "last_century",
    "next_century",
    "year_progress",
    "EthiocalError",
    "InvalidMonthError",
    "UnknownCalendarError",
    "UnknownRuleKindError",
    "gregorian_to_jdn",
    "jdn_to_gregorian",
    "weekday_from_jdn",
    "EthiopicDate",
    "GregorianDate",
    "YearProgress",
    "Highlight",
    "DynamicRule",
    "HighlightOnDate",
    "ResolvedHighlight",
    "ETH_EPOCH",
    "AMETE_MIHRET_DELTA",
    "to_gregorian",
    "to_ethiopic",
    "is_ethiopic_leap_year",
    "ethiopic_days_in_month",
    "ethiopic_to_jdn",
    "jdn_to_ethiopic",
    "normalize_am_year",
    "is_gregorian_leap_year",
    "gregorian_days_in_month",
    "islamic_to_jdn",
    "jdn_to_islamic",
    "orthodox_easter_gregorian",
    "good_friday_gregorian",
    "hosanna_gregorian",
    "first_weekday_of_month",
]
