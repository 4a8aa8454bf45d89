"""Bundled highlight tables (English and Amharic labels)."""

from __future__ import annotations

from typing import Dict, Tuple

from ..core.types import DynamicRule, Highlight
from ..engines.paschal import GOOD_FRIDAY_OFFSET, HOSANNA_OFFSET
from ..engines.weekday import MONDAY, SUNDAY

# ============================================================
# Fixed Ethiopic dates (month/day hold in every era)
# ============================================================

ETHIOPIAN_HIGHLIGHTS: Tuple[Highlight, ...] = (
    Highlight("enkutatash", "Ethiopian New Year (Enkutatash)", "እንቁጣጣሽ (ኢትዮጵያ አዲስ ዓመት)", "ethiopic", 1, 1,
              "national", ("ethiopia", "new-year", "public-holiday")),
    Highlight("demera", "Demera (Meskel Eve)", "ደመራ (መስቀል ዋዜማ)", "ethiopic", 1, 16,
              "religious", ("christian", "orthodox")),
    Highlight("meskel", "Meskel (Finding of the True Cross)", "መስቀል (የእውነተኛው መስቀል ማግኘት)", "ethiopic", 1, 17,
              "religious", ("christian", "orthodox", "ethiopia", "public-holiday")),
    Highlight("ketera", "Ketera (Timkat Eve)", "ቀጤራ (የጥምቀት ዋዜማ)", "ethiopic", 5, 10,
              "religious", ("christian", "orthodox")),
    Highlight("timkat", "Timkat (Epiphany)", "ጥምቀት (ብርሃነ ጥምቀት)", "ethiopic", 5, 11,
              "religious", ("christian", "orthodox", "public-holiday")),
    Highlight("genna", "Genna (Ethiopian Christmas)", "ገና (ኢትዮጵያ የገና በዓል)", "ethiopic", 4, 29,
              "religious", ("christian", "orthodox", "ethiopia", "public-holiday")),
    Highlight("adwa_e", "Adwa Victory Day", "የአድዋ ድል ቀን", "ethiopic", 6, 23,
              "national", ("ethiopia", "history", "public-holiday")),
    Highlight("patriots_e", "Patriots' Victory Day", "የአርበኞች ድል ቀን", "ethiopic", 8, 27,
              "national", ("ethiopia", "history", "public-holiday")),
    Highlight("derg_e", "Derg Downfall Day (National Day)", "የደርግ ውድቀት ቀን", "ethiopic", 9, 20,
              "national", ("ethiopia", "history", "national-day", "public-holiday")),
    Highlight("nnpd_e", "Nations, Nationalities and Peoples' Day", "የብሄር ብሄረሰቦች ቀን", "ethiopic", 3, 29,
              "national", ("ethiopia", "unity", "public-holiday")),
)

# ============================================================
# Fixed Gregorian dates
# ============================================================

GREGORIAN_HIGHLIGHTS: Tuple[Highlight, ...] = (
    Highlight("g_new_year", "New Year's Day", "አዲስ ዓመት ቀን", "gregorian", 1, 1,
              "observance", ("international",)),
    Highlight("genna_g", "Ethiopian Christmas (Genna)", "ገና (ኢትዮጵያ)", "gregorian", 1, 7,
              "religious", ("christian", "orthodox", "ethiopia", "public-holiday")),
    Highlight("timkat_g", "Ethiopian Epiphany (Timkat)", "ጥምቀት (ቲምቃት)", "gregorian", 1, 19,
              "religious", ("christian", "orthodox", "ethiopia", "public-holiday")),
    Highlight("adwa", "Adwa Victory Day (ET)", "የአድዋ ድል ቀን", "gregorian", 3, 2,
              "national", ("ethiopia", "history", "public-holiday")),
    Highlight("labour", "International Labor Day", "ዓለም አቀፍ የሠራተኞች ቀን", "gregorian", 5, 1,
              "observance", ("international", "labor", "public-holiday")),
    Highlight("patriots", "Patriots' Victory Day (ET)", "የአርበኞች ድል ቀን", "gregorian", 5, 5,
              "national", ("ethiopia", "history", "public-holiday")),
    Highlight("derg", "Derg Downfall Day (ET)", "የደርግ ውድቀት ቀን", "gregorian", 5, 28,
              "national", ("ethiopia", "history", "national-day", "public-holiday")),
    Highlight("enkutatash_g", "Ethiopian New Year (Enkutatash)", "እንቁጣጣሽ (ኢትዮጵያ አዲስ ዓመት)", "gregorian", 9, 11,
              "national", ("ethiopia", "new-year", "public-holiday")),
    Highlight("meskel_g", "Meskel (ET) – Gregorian observance", "መስቀል (ኢትዮጵያ) – ግሪጎሪያን አከባበር", "gregorian", 9, 27,
              "religious", ("christian", "orthodox", "ethiopia", "public-holiday")),
    Highlight("nnpd", "Nations, Nationalities and Peoples' Day (ET)", "የሕዝቦች ብሔሮችና ብሄራዊ ቀን", "gregorian", 12, 8,
              "national", ("ethiopia", "unity", "public-holiday")),
    Highlight("christmas", "Christmas Day", "የገና ቀን", "gregorian", 12, 25,
              "religious", ("christian",)),
)

# ============================================================
# Movable highlights, evaluated per Gregorian year
# ============================================================

DYNAMIC_RULES: Tuple[DynamicRule, ...] = (
    DynamicRule("fasika", "Ethiopian Easter (Fasika)", "ፋሲካ", "paschal", (0,),
                "religious", ("christian", "orthodox", "ethiopia", "public-holiday")),
    DynamicRule("good_friday", "Good Friday (Orthodox/Ethiopian)", "ስቅለት ዓርብ", "paschal", (GOOD_FRIDAY_OFFSET,),
                "religious", ("christian", "orthodox", "public-holiday")),
    DynamicRule("hosanna", "Hosanna (Palm Sunday)", "ሆሳና", "paschal", (HOSANNA_OFFSET,),
                "religious", ("christian", "orthodox")),
    DynamicRule("eid_al_fitr", "Eid al-Fitr", "ኢድ አል-ፊትር", "islamic", (10, 1),  # 1 Shawwal
                "religious", ("muslim", "islamic", "public-holiday")),
    DynamicRule("eid_al_adha", "Eid al-Adha", "ኢድ አል-አድሐ", "islamic", (12, 10),  # 10 Dhu al-Hijjah
                "religious", ("muslim", "islamic", "public-holiday")),
    DynamicRule("mawlid", "Mawlid (Prophet's Birthday)", "መውሊድ", "islamic", (3, 12),  # 12 Rabi' al-awwal
                "religious", ("muslim", "islamic", "public-holiday")),
    # Irreechaa: Hora Finfinne on the Saturday, Hora Harsadi (Bishoftu) on the first Sunday of October
    DynamicRule("irreechaa_finfinne", "Irreechaa Finfinne (Hora Finfinne)", "ኢሬቻ ሆረ ፊንፊኔ", "gregorian_weekday",
                (10, SUNDAY, -1), "national", ("oromo", "thanksgiving", "ethiopia")),
    DynamicRule("irreechaa_bishoftu", "Irreechaa Bishoftu (Hora Harsadi)", "ኢሬቻ ሆረ ሀርሰዲ (ቢሾፍቱ)", "gregorian_weekday",
                (10, SUNDAY, 0), "national", ("oromo", "thanksgiving", "ethiopia")),
    DynamicRule("flag_day", "National Flag Day", "የሰንደቅ ዓላማ ቀን", "ethiopic_weekday", (2, MONDAY),
                "observance", ("ethiopia", "national-symbol")),
)

# Same event defined under both calendars: synonym id -> canonical id
CANONICAL_IDS: Dict[str, str] = {
    "meskel_g": "meskel",
    "genna_g": "genna",
    "timkat_g": "timkat",
    "enkutatash_g": "enkutatash",
    "adwa_e": "adwa",
    "patriots_e": "patriots",
    "derg_e": "derg",
    "nnpd_e": "nnpd",
}
