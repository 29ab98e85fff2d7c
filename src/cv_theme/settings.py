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
Runtime settings for the renderer.

Values come from CV_THEME_* environment variables (the CLI loads a .env file
first) and can then be overridden by CLI flags.
"""

import os
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

PHOTO_FAILURE_SUPPRESS = "suppress"
PHOTO_FAILURE_RAISE = "raise"


@dataclass
class ThemeSettings:
    """Knobs for asset lookup, the avatar service and the photo lookup (timeout, failure policy, CA bundle)."""
    assets_dir: Optional[Path] = None
    photo_timeout: float = 10.0
    photo_failure: str = PHOTO_FAILURE_SUPPRESS
    gravatar_size: int = 200
    gravatar_rating: str = "pg"
    gravatar_default: str = "mm"
    ca_bundle: Optional[str] = None

    @property
    def strict_photo(self) -> bool:
        return self.photo_failure == PHOTO_FAILURE_RAISE

    @classmethod
    def from_env(cls) -> "ThemeSettings":
        settings = cls()

        assets_dir = os.environ.get("CV_THEME_ASSETS_DIR")
        if assets_dir:
            settings.assets_dir = Path(assets_dir)

        timeout = os.environ.get("CV_THEME_PHOTO_TIMEOUT")
        if timeout:
            try:
                settings.photo_timeout = float(timeout)
            except ValueError:
                logger.warning(f"Ignoring invalid CV_THEME_PHOTO_TIMEOUT: {timeout!r}")

        failure = os.environ.get("CV_THEME_PHOTO_FAILURE")
        if failure:
            failure = failure.strip().lower()
            if failure in (PHOTO_FAILURE_SUPPRESS, PHOTO_FAILURE_RAISE):
                settings.photo_failure = failure
            else:
                logger.warning(f"Ignoring unknown CV_THEME_PHOTO_FAILURE: {failure!r}")

        size = os.environ.get("CV_THEME_GRAVATAR_SIZE")
        if size:
            if size.isdigit():
                settings.gravatar_size = int(size)
            else:
                logger.warning(f"Ignoring invalid CV_THEME_GRAVATAR_SIZE: {size!r}")

        settings.gravatar_rating = os.environ.get("CV_THEME_GRAVATAR_RATING", settings.gravatar_rating)
        settings.gravatar_default = os.environ.get("CV_THEME_GRAVATAR_DEFAULT", settings.gravatar_default)
        settings.ca_bundle = os.environ.get("CV_THEME_CA_BUNDLE") or None
        return settings
