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

import hashlib
import unittest
from unittest.mock import MagicMock

import requests

from cv_theme import photo
from cv_theme.errors import PhotoLookupError
from cv_theme.settings import PHOTO_FAILURE_RAISE, ThemeSettings


def _response(status_code=200, content_type="image/jpeg"):
    response = MagicMock()
    response.status_code = status_code
    response.headers = {"Content-Type": content_type} if content_type else {}
    return response


class TestGravatarUrl(unittest.TestCase):
    def test_normalises_email(self):
        digest = hashlib.md5(b"jane@example.com").hexdigest()
        self.assertEqual(
            photo.gravatar_url("  Jane@Example.com "),
            f"https://www.gravatar.com/avatar/{digest}?s=200&r=pg&d=mm",
        )

    def test_options(self):
        url = photo.gravatar_url("jane@example.com", size=80, rating="g", default="identicon")
        self.assertTrue(url.endswith("?s=80&r=g&d=identicon"))


class TestPhotoTypeClient(unittest.TestCase):
    def setUp(self):
        self.session = MagicMock()
        self.client = photo.PhotoTypeClient(session=self.session, timeout=3)

    def test_head_content_type(self):
        self.session.head.return_value = _response(content_type="image/png; charset=binary")
        self.assertEqual(self.client.get_type("https://example.com/me"), "image")
        self.session.head.assert_called_once_with("https://example.com/me", allow_redirects=True, timeout=3)
        self.session.get.assert_not_called()

    def test_falls_back_to_get_when_head_rejected(self):
        self.session.head.return_value = _response(status_code=405, content_type=None)
        self.session.get.return_value = _response(content_type="video/mp4")
        self.assertEqual(self.client.get_type("https://example.com/me.mp4"), "video")
        self.session.get.assert_called_once()
        self.session.get.return_value.close.assert_called_once()

    def test_guesses_from_extension_without_header(self):
        self.session.head.return_value = _response(content_type=None)
        self.assertEqual(self.client.get_type("https://example.com/me.png?x=1"), "image")

    def test_unknown_without_header_or_extension(self):
        self.session.head.return_value = _response(content_type=None)
        self.assertEqual(self.client.get_type("https://example.com/me"), "unknown")

    def test_data_url_needs_no_request(self):
        self.assertEqual(self.client.get_type("data:image/svg+xml;base64,PHN2Zz4="), "image")
        self.session.head.assert_not_called()

    def test_network_errors_propagate(self):
        self.session.head.side_effect = requests.ConnectionError("unreachable")
        with self.assertRaises(requests.RequestException):
            self.client.get_type("https://example.com/me.jpg")

    def test_http_errors_propagate(self):
        response = _response(status_code=404)
        response.raise_for_status.side_effect = requests.HTTPError("404 Not Found")
        self.session.head.return_value = response
        with self.assertRaises(requests.HTTPError):
            self.client.get_type("https://example.com/missing.jpg")


class TestResolvePhoto(unittest.TestCase):
    def setUp(self):
        self.client = MagicMock()
        self.client.get_type.return_value = "image"
        self.settings = ThemeSettings()

    def test_image_wins_over_gravatar(self):
        basics = {"email": "jane@example.com", "image": "https://example.com/jane.jpg"}
        result = photo.resolve_photo(basics, self.client, self.settings)
        self.assertEqual(result.url, "https://example.com/jane.jpg")
        self.assertEqual(result.type, "image")
        self.assertTrue(basics["gravatar"].startswith(photo.GRAVATAR_BASE))

    def test_gravatar_used_without_image(self):
        basics = {"email": "jane@example.com"}
        result = photo.resolve_photo(basics, self.client, self.settings)
        self.assertEqual(result.url, basics["gravatar"])
        self.client.get_type.assert_called_once_with(basics["gravatar"])

    def test_gravatar_honours_settings(self):
        basics = {"email": "jane@example.com"}
        settings = ThemeSettings(gravatar_size=64, gravatar_rating="g", gravatar_default="retro")
        photo.resolve_photo(basics, self.client, settings)
        self.assertTrue(basics["gravatar"].endswith("?s=64&r=g&d=retro"))

    def test_no_candidate(self):
        self.assertIsNone(photo.resolve_photo({"name": "Jane"}, self.client, self.settings))
        self.client.get_type.assert_not_called()

    def test_no_client_skips_avatar_and_lookup(self):
        basics = {"email": "jane@example.com"}
        self.assertIsNone(photo.resolve_photo(basics, None, self.settings))
        self.assertNotIn("gravatar", basics)

    def test_failure_suppressed_by_default(self):
        self.client.get_type.side_effect = requests.ConnectionError("unreachable")
        with self.assertLogs("cv_theme.photo", level="WARNING") as logs:
            result = photo.resolve_photo({"image": "https://example.com/jane.jpg"}, self.client, self.settings)
        self.assertIsNone(result)
        self.assertIn("rendering without photo", logs.output[0])

    def test_failure_raises_when_strict(self):
        self.client.get_type.side_effect = requests.ConnectionError("unreachable")
        settings = ThemeSettings(photo_failure=PHOTO_FAILURE_RAISE)
        with self.assertRaises(PhotoLookupError) as ctx:
            photo.resolve_photo({"image": "https://example.com/jane.jpg"}, self.client, settings)
        self.assertEqual(ctx.exception.url, "https://example.com/jane.jpg")

    def test_missing_ca_bundle_suppressed_by_default(self):
        self.client.get_type.side_effect = OSError("Could not find a suitable TLS CA certificate bundle")
        with self.assertLogs("cv_theme.photo", level="WARNING") as logs:
            result = photo.resolve_photo({"image": "https://example.com/jane.jpg"}, self.client, self.settings)
        self.assertIsNone(result)
        self.assertIn("CA certificate bundle", logs.output[0])

    def test_missing_ca_bundle_raises_when_strict(self):
        self.client.get_type.side_effect = OSError("Could not find a suitable TLS CA certificate bundle")
        settings = ThemeSettings(photo_failure=PHOTO_FAILURE_RAISE)
        with self.assertRaises(PhotoLookupError) as ctx:
            photo.resolve_photo({"image": "https://example.com/jane.jpg"}, self.client, settings)
        self.assertIsInstance(ctx.exception.__cause__, OSError)


if __name__ == '__main__':
    unittest.main()
