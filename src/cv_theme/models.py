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
Data models for the CV theme renderer.

The resume itself stays a plain ``dict`` (JSON Resume layout) because every
field is optional and the template reads derived keys straight off it. The
dataclasses here describe the fixed configuration around a render.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

# A resume document / view model: decoded JSON, extended in place.
ResumeDocument = Dict[str, Any]

# (section, discriminator field) pairs used to compute the <section>Bool flags.
# A discriminator of None means "any element counts".
PRESENCE_SECTIONS: Tuple[Tuple[str, Optional[str]], ...] = (
    ("skills", "name"),
    ("interests", "name"),
    ("languages", "language"),
    ("references", "name"),
    ("publications", "name"),
    ("awards", "title"),
    ("education", "institution"),
    ("projects", "name"),
    ("work", None),
    ("volunteer", None),
)


@dataclass(frozen=True)
class PageMargin:
    """Page margins, in CSS pixels when handed to the PDF printer."""
    top: int = 15
    bottom: int = 15


@dataclass(frozen=True)
class PdfRenderOptions:
    """Options consumed by the PDF printer (see cv_theme.pdf)."""
    media_type: str = "print"
    format: str = "A4"
    margin: PageMargin = field(default_factory=PageMargin)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "mediaType": self.media_type,
            "format": self.format,
            "margin": {"top": self.margin.top, "bottom": self.margin.bottom},
        }


PDF_RENDER_OPTIONS = PdfRenderOptions()


@dataclass
class Photo:
    """A resolved profile photo and its coarse content type."""
    url: str
    type: str
