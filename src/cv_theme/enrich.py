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
Builds the template view model from a resume document.

Every derived field is computed from the raw fields only, so enriching an
already enriched document gives the same result.
"""

import copy
import logging
from datetime import date
from typing import Any, Dict, Iterator, Optional

from cv_theme.dates import compute_experience, normalize_range, split_date
from cv_theme.icons import classify
from cv_theme.models import PRESENCE_SECTIONS, ResumeDocument
from cv_theme.photo import PhotoTypeClient, resolve_photo
from cv_theme.presence import apply_presence_flags, mark_string_list
from cv_theme.settings import ThemeSettings

logger = logging.getLogger(__name__)


def _entries(doc: ResumeDocument, section: str) -> Iterator[Dict[str, Any]]:
    """Yields the dict entries of a section, skipping anything else."""
    entries = doc.get(section)
    if not isinstance(entries, list):
        return
    for index, entry in enumerate(entries):
        if isinstance(entry, dict):
            yield entry
        else:
            logger.debug(f"Skipping {section}[{index}]: not an object")


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def handle_workplace(entry: Dict[str, Any], today: Optional[date] = None) -> None:
    """Date range, highlight/keyword flags and duration of a work or volunteer entry."""
    start_date, end_date = entry.get("startDate"), entry.get("endDate")
    normalize_range(entry, start_date, end_date, today)
    mark_string_list(entry, "highlights")
    mark_string_list(entry, "keywords")
    experience = compute_experience(start_date, end_date, today)
    if experience is not None:
        entry["experience"] = experience


def handle_education(entry: Dict[str, Any], today: Optional[date] = None) -> None:
    normalize_range(entry, entry.get("startDate"), entry.get("endDate"), today)
    mark_string_list(entry, "keywords")
    mark_string_list(entry, "courses")

    area, study_type = entry.get("area"), entry.get("studyType")
    if area and study_type:
        entry["educationDetail"] = f"{area}, {study_type}"
    else:
        entry["educationDetail"] = _text(area) + _text(study_type)


def handle_profile(profile: Dict[str, Any]) -> None:
    if not profile.get("iconClass") and profile.get("network"):
        profile["iconClass"] = classify(profile["network"])

    if profile.get("url"):
        profile["text"] = profile["url"]
    else:
        profile["text"] = f"{_text(profile.get('network'))}: {_text(profile.get('username'))}"


def enrich(doc: ResumeDocument, photo_client: Optional[PhotoTypeClient] = None,
           settings: Optional[ThemeSettings] = None, today: Optional[date] = None) -> ResumeDocument:
    """
    Adds every derived field to doc in place and returns it.

    Args:
        doc: The decoded resume (a JSON Resume shaped dict).
        photo_client: Used to classify the photo URL; None skips the photo.
        settings: Avatar options and the photo failure policy.
        today: Reference date for "Present", "(expected)" and durations.
    """
    settings = settings or ThemeSettings()
    today = today or date.today()

    basics = doc.get("basics")
    if not isinstance(basics, dict):
        basics = {}

    name = basics.get("name")
    if name:
        basics["capitalName"] = _text(name).upper()

    photo = resolve_photo(basics, photo_client, settings)
    if photo is not None:
        doc["photo"] = photo.url
        doc["photoBool"] = True
        doc["photoType"] = photo.type

    for profile in _entries(basics, "profiles"):
        handle_profile(profile)

    apply_presence_flags(doc, PRESENCE_SECTIONS)

    for section in ("work", "volunteer"):
        if doc[section + "Bool"]:
            for entry in _entries(doc, section):
                handle_workplace(entry, today)

    if doc["educationBool"]:
        for entry in _entries(doc, "education"):
            handle_education(entry, today)

    if doc["awardsBool"]:
        for entry in _entries(doc, "awards"):
            split_date(entry, entry.get("date"))

    if doc["publicationsBool"]:
        for entry in _entries(doc, "publications"):
            split_date(entry, entry.get("releaseDate"))

    return doc


def build_view_model(resume: ResumeDocument, photo_client: Optional[PhotoTypeClient] = None,
                     settings: Optional[ThemeSettings] = None,
                     today: Optional[date] = None) -> ResumeDocument:
    """Enriches a private copy of resume; the caller's object is left untouched."""
    return enrich(copy.deepcopy(resume), photo_client, settings, today)
