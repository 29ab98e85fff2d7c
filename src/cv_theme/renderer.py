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
Renders a resume document to a single self-contained HTML page.
"""

import json
import logging
from datetime import date
from pathlib import Path
from typing import Any, Optional, Union

from jinja2 import ChainableUndefined, Environment

from cv_theme.assets import AssetLoader
from cv_theme.enrich import build_view_model
from cv_theme.errors import InvalidResumeError
from cv_theme.models import ResumeDocument
from cv_theme.photo import PhotoTypeClient
from cv_theme.settings import ThemeSettings
from cv_theme.ssl_helpers import build_session

logger = logging.getLogger(__name__)


def load_resume(source: Union[ResumeDocument, str, bytes, Path]) -> ResumeDocument:
    """
    Decodes a resume from a dict, JSON text or a path to a JSON file.

    Raises:
        InvalidResumeError: the input is not a JSON object.
    """
    if isinstance(source, Path):
        try:
            source = source.read_text(encoding="utf-8")
        except OSError as e:
            raise InvalidResumeError(f"Cannot read resume file {source}: {e}") from e

    if isinstance(source, (str, bytes)):
        try:
            source = json.loads(source)
        except ValueError as e:
            raise InvalidResumeError(f"Resume is not valid JSON: {e}") from e

    if not isinstance(source, dict):
        raise InvalidResumeError(
            f"Resume must be a JSON object, got {type(source).__name__}"
        )
    return source


class JinjaTemplateEngine:
    """Substitutes a view model into template text with Jinja2 (autoescaped)."""
    def __init__(self):
        # Missing sections and fields render as empty text, even when chained.
        self.env = Environment(autoescape=True, trim_blocks=True, lstrip_blocks=True,
                               undefined=ChainableUndefined)

    def render(self, template_source: str, view_model: ResumeDocument) -> str:
        return self.env.from_string(template_source).render(view_model)


class ThemeRenderer:
    """
    Turns a resume into HTML: enrich, inject stylesheets, substitute.

    Args:
        settings: Runtime settings; defaults to ThemeSettings.from_env().
        photo_client: Photo classifier. Built from settings when omitted;
            pass photo_lookup=False to render without any photo.
        assets: Asset loader; defaults to the bundled theme.
        engine: Template engine with a render(source, view_model) method.
    """
    def __init__(self, settings: Optional[ThemeSettings] = None,
                 photo_client: Optional[PhotoTypeClient] = None,
                 assets: Optional[AssetLoader] = None,
                 engine: Any = None,
                 photo_lookup: bool = True):
        self.settings = settings or ThemeSettings.from_env()
        if photo_lookup:
            self.photo_client = photo_client or PhotoTypeClient(
                session=build_session(self.settings.ca_bundle),
                timeout=self.settings.photo_timeout,
            )
        else:
            self.photo_client = None
        self.assets = assets or AssetLoader(self.settings.assets_dir)
        self.engine = engine or JinjaTemplateEngine()

    def view_model(self, resume: Union[ResumeDocument, str, bytes, Path],
                   today: Optional[date] = None) -> ResumeDocument:
        document = load_resume(resume)
        model = build_view_model(document, self.photo_client, self.settings, today)
        model.update(self.assets.stylesheets())
        return model

    def render(self, resume: Union[ResumeDocument, str, bytes, Path],
               today: Optional[date] = None) -> str:
        model = self.view_model(resume, today)
        html = self.engine.render(self.assets.template(), model)
        logger.info(f"Rendered resume ({len(html)} characters)")
        return html


def render(resume: Union[ResumeDocument, str, bytes, Path]) -> str:
    """Renders with default settings; see ThemeRenderer."""
    return ThemeRenderer().render(resume)
