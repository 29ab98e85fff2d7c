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
Prints rendered HTML to PDF with headless Chromium (Playwright).
"""

import logging
from pathlib import Path
from typing import Union

from cv_theme.errors import CVThemeError
from cv_theme.models import PDF_RENDER_OPTIONS, PdfRenderOptions

logger = logging.getLogger(__name__)


def export_pdf(html: str, output_path: Union[str, Path],
               options: PdfRenderOptions = PDF_RENDER_OPTIONS) -> Path:
    """
    Writes html to output_path as a paged document.

    Uses the print media type, page format and margins from options.
    Playwright (and its Chromium build) is only needed for this step.
    """
    try:
        from playwright.sync_api import sync_playwright
    except ImportError as e:
        raise CVThemeError(
            "Playwright is not installed. Install it with:\n"
            "  pip install 'cv-theme[pdf]' && python -m playwright install chromium"
        ) from e

    output_path = Path(output_path)
    logger.info(f"Printing PDF to: {output_path}")
    with sync_playwright() as p:
        browser = p.chromium.launch(headless=True)
        try:
            page = browser.new_page()
            page.set_content(html, wait_until="networkidle")
            page.emulate_media(media=options.media_type)
            page.pdf(
                path=str(output_path),
                format=options.format,
                print_background=True,
                margin={
                    "top": f"{options.margin.top}px",
                    "bottom": f"{options.margin.bottom}px",
                },
            )
        finally:
            browser.close()

    return output_path
