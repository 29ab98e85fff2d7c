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
Loads the theme's static files (template and stylesheets) by logical name.
"""

import logging
from pathlib import Path
from typing import Dict, Optional

from cv_theme.errors import AssetNotFoundError

logger = logging.getLogger(__name__)

PACKAGE_ASSETS_DIR = Path(__file__).resolve().parent / "theme"

TEMPLATE = "template"

# logical name -> file name. Bundled assets must exist in the package.
BUNDLED_ASSETS = {
    TEMPLATE: "resume.html.j2",
    "normalize": "normalize.css",
    "stylecss": "style.css",
    "printcss": "print.css",
}

# Third-party stylesheets we do not redistribute. They are inlined only when
# found in the override directory; otherwise the template links the CDN.
OPTIONAL_ASSETS = {
    "bootstrap": "bootstrap.min.css",
    "fontawesome": "fontawesome.min.css",
}

# View model fields filled with stylesheet text.
STYLESHEET_FIELDS = ("bootstrap", "fontawesome", "normalize", "stylecss", "printcss")


class AssetLoader:
    """
    Reads assets from an optional override directory, then from the package.

    Args:
        override_dir: Directory whose files replace the bundled ones by name.
    """
    def __init__(self, override_dir: Optional[Path] = None):
        self.override_dir = Path(override_dir) if override_dir else None
        if self.override_dir and not self.override_dir.is_dir():
            logger.warning(f"Assets directory not found: {self.override_dir}")

    def _override_path(self, file_name: str) -> Optional[Path]:
        if self.override_dir is None:
            return None
        path = self.override_dir / file_name
        return path if path.is_file() else None

    def load(self, name: str) -> str:
        if name in OPTIONAL_ASSETS:
            path = self._override_path(OPTIONAL_ASSETS[name])
            if path is None:
                logger.debug(f"Optional asset '{name}' not provided; template will link the CDN")
                return ""
            return path.read_text(encoding="utf-8")

        if name not in BUNDLED_ASSETS:
            raise AssetNotFoundError(f"Unknown asset: {name}")

        file_name = BUNDLED_ASSETS[name]
        path = self._override_path(file_name) or PACKAGE_ASSETS_DIR / file_name
        if not path.is_file():
            raise AssetNotFoundError(f"Theme asset missing: {path}")
        logger.debug(f"Loading asset '{name}' from {path}")
        return path.read_text(encoding="utf-8")

    def stylesheets(self) -> Dict[str, str]:
        return {name: self.load(name) for name in STYLESHEET_FIELDS}

    def template(self) -> str:
        return self.load(TEMPLATE)
