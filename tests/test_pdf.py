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

import sys
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

from cv_theme import pdf
from cv_theme.errors import CVThemeError


class TestExportPdf(unittest.TestCase):
    def setUp(self):
        # Stand-in for playwright so no browser is needed
        self.sync_api = MagicMock()
        self.modules = patch.dict(sys.modules, {
            "playwright": MagicMock(sync_api=self.sync_api),
            "playwright.sync_api": self.sync_api,
        })
        self.modules.start()
        playwright = self.sync_api.sync_playwright.return_value.__enter__.return_value
        self.browser = playwright.chromium.launch.return_value
        self.page = self.browser.new_page.return_value

    def tearDown(self):
        self.modules.stop()

    def test_prints_with_render_options(self):
        result = pdf.export_pdf("<html></html>", "out.pdf")

        self.assertEqual(result, Path("out.pdf"))
        self.page.set_content.assert_called_once_with("<html></html>", wait_until="networkidle")
        self.page.emulate_media.assert_called_once_with(media="print")
        self.page.pdf.assert_called_once_with(
            path="out.pdf",
            format="A4",
            print_background=True,
            margin={"top": "15px", "bottom": "15px"},
        )
        self.browser.close.assert_called_once()

    def test_browser_closed_on_failure(self):
        self.page.pdf.side_effect = RuntimeError("crash")
        with self.assertRaises(RuntimeError):
            pdf.export_pdf("<html></html>", "out.pdf")
        self.browser.close.assert_called_once()


class TestExportPdfWithoutPlaywright(unittest.TestCase):
    def test_missing_playwright(self):
        with patch.dict(sys.modules, {"playwright": None, "playwright.sync_api": None}):
            with self.assertRaises(CVThemeError):
                pdf.export_pdf("<html></html>", "out.pdf")


if __name__ == '__main__':
    unittest.main()
