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
Presence flags: decides which optional sections the template should show.
"""

from typing import Any, Dict, Iterable, Optional, Tuple


def has_items(value: Any, field: Optional[str] = None) -> bool:
    """
    True if value is a non-empty list and, when a field is given, at least
    one element has a non-null, non-empty value for it.
    """
    if not isinstance(value, list) or not value:
        return False
    if field is None:
        return True
    return any(
        isinstance(item, dict) and item.get(field) is not None and item.get(field) != ""
        for item in value
    )


def apply_presence_flags(doc: Dict[str, Any],
                         specs: Iterable[Tuple[str, Optional[str]]]) -> None:
    """Sets doc["<section>Bool"] for every (section, discriminator) pair."""
    for section, field in specs:
        doc[section + "Bool"] = has_items(doc.get(section), field)


def mark_string_list(entry: Dict[str, Any], field: str) -> None:
    # "highlights" -> "boolHighlights"
    value = entry.get(field)
    if isinstance(value, list) and value and value[0] and value[0] != "":
        entry["bool" + field[:1].upper() + field[1:]] = True
