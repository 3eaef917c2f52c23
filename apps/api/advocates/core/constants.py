"""Shared API constants."""

DEFAULT_PAGE = 1

# Inclusive (lo, hi) bounds per experience bucket; hi=None is open-ended
EXPERIENCE_BUCKETS: dict[str, tuple[int, int | None]] = {
    "0-2": (0, 2),
    "3-5": (3, 5),
    "6-10": (6, 10),
    "11-15": (11, 15),
    "16-20": (16, 20),
    "20+": (20, None),
}

EXPERIENCE_OPTIONS: list[dict[str, str]] = [
    {"value": code, "label": f"{code} years"} for code in EXPERIENCE_BUCKETS
]

FETCH_FAILED_MESSAGE = "Failed to fetch advocates"

SEARCH_HISTORY_LIMIT = 10

# Largest OFFSET a 64-bit signed SQL integer can hold
MAX_SQL_OFFSET = 2**63 - 1
