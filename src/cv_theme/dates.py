# Copyright 2026 Justin Cook
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Partial-date helpers: month/year extraction, date-range display fields and
"X years Y months" durations.

Dates are JSON Resume strings such as "2019-03-01" or "2019-03". Anything
that does not look like that degrades to missing fields, never to an error.
"""

import re
import logging
from datetime import date
from types import MappingProxyType
from typing import Any, Dict, Optional, Tuple

logger = logging.getLogger(__name__)

MONTH_NAMES = MappingProxyType({
    "01": "January ",
    "02": "February ",
    "03": "March ",
    "04": "April ",
    "05": "May ",
    "06": "June ",
    "07": "July ",
    "08": "August ",
    "09": "September ",
    "10": "October ",
    "11": "November ",
    "12": "December ",
})

PRESENT = "Present"
EXPECTED_SUFFIX = " (expected)"

_YEAR_MONTH_RE = re.compile(r"^(\d{4})(?:-(\d{2}))?")


def month_name(date_str: Optional[str]) -> Optional[str]:
    """Returns "January " .. "December " for a YYYY-MM... string, else None."""
    if not isinstance(date_str, str):
        return None
    return MONTH_NAMES.get(date_str[5:7])


def year_prefix(date_str: Optional[str]) -> str:
    if not isinstance(date_str, str):
        return ""
    return date_str[:4]


def split_date(entry: Dict[str, Any], date_str: Optional[str]) -> None:
    """Decomposes a single date into the year/day/month fields of an entry."""
    value = date_str if isinstance(date_str, str) else ""
    entry["year"] = value[:4]
    entry["day"] = value[8:10]
    month = month_name(value)
    if month is not None:
        entry["month"] = month


def normalize_range(entry: Dict[str, Any], start_date: Optional[str],
                    end_date: Optional[str], today: Optional[date] = None) -> None:
    """
    Adds startDateYear/startDateMonth/endDateYear/endDateMonth to an entry.

    A missing end date means the entry is ongoing ("Present"). An end year
    after the current one is marked " (expected)", e.g. a degree in progress.
    """
    today = today or date.today()

    if start_date:
        entry["startDateYear"] = year_prefix(start_date)
        month = month_name(start_date)
        if month is not None:
            entry["startDateMonth"] = month

    if end_date:
        end_year = year_prefix(end_date)
        month = month_name(end_date)
        if month is not None:
            entry["endDateMonth"] = month
        if end_year.isdigit() and int(end_year) > today.year:
            end_year += EXPECTED_SUFFIX
        entry["endDateYear"] = end_year
    else:
        entry["endDateYear"] = PRESENT


def _parse_year_month(date_str: str) -> Optional[Tuple[int, int]]:
    """Reads the same fixed YYYY-MM layout as month_name; a bare "YYYY" means January."""
    match = _YEAR_MONTH_RE.match(date_str)
    if not match:
        return None
    if match.group(2) is None and len(date_str) > 4:
        return None
    year = int(match.group(1))
    month = int(match.group(2)) if match.group(2) else 1
    if not 1 <= month <= 12:
        return None
    return year, month


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def format_duration(years: int, months: int) -> str:
    """Formats the non-zero parts, largest first: "1 year 2 months"."""
    parts = []
    if years:
        parts.append(_plural(years, "year"))
    if months:
        parts.append(_plural(months, "month"))
    return " ".join(parts)


def months_between(start_date: str, end_date: Optional[str] = None,
                   today: Optional[date] = None) -> Optional[int]:
    """
    Whole months from the first day of the start month to the first day of
    the month after the end month, i.e. the end month counts in full.
    Returns None when either date cannot be read.
    """
    start = _parse_year_month(start_date)
    if start is None:
        logger.debug(f"Unreadable start date {start_date!r}; skipping duration")
        return None

    if end_date:
        end = _parse_year_month(end_date)
        if end is None:
            logger.debug(f"Unreadable end date {end_date!r}; skipping duration")
            return None
    else:
        today = today or date.today()
        end = (today.year, today.month)

    return (end[0] - start[0]) * 12 + (end[1] - start[1]) + 1


def compute_experience(start_date: Optional[str], end_date: Optional[str] = None,
                       today: Optional[date] = None) -> Optional[str]:
    """
    Returns the elapsed time of a dated entry as text, or None when there is
    no usable start date. An ongoing entry is measured up to today.
    """
    if not start_date or not isinstance(start_date, str):
        return None
    if end_date is not None and not isinstance(end_date, str):
        return None

    total = months_between(start_date, end_date, today)
    if total is None:
        return None
    if total <= 0:
        return ""
    return format_duration(total // 12, total % 12)
