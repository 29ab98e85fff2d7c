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
Profile photo resolution: Gravatar fallback and content-type probing.
"""

import hashlib
import logging
import mimetypes
from typing import Optional
from urllib.parse import urlencode, urlparse

import requests

from cv_theme.errors import PhotoLookupError
from cv_theme.models import Photo
from cv_theme.settings import ThemeSettings
from cv_theme.ssl_helpers import build_session

logger = logging.getLogger(__name__)

GRAVATAR_BASE = "https://www.gravatar.com/avatar/"
UNKNOWN_TYPE = "unknown"


def gravatar_url(email: str, size: int = 200, rating: str = "pg", default: str = "mm") -> str:
    """Builds the Gravatar avatar URL for an e-mail address."""
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
    query = urlencode({"s": str(size), "r": rating, "d": default})
    return f"{GRAVATAR_BASE}{digest}?{query}"


def _major_type(content_type: Optional[str]) -> Optional[str]:
    # "image/png; charset=binary" -> "image"
    if not content_type:
        return None
    major = content_type.split(";", 1)[0].split("/", 1)[0].strip().lower()
    return major or None


class PhotoTypeClient:
    """
    Classifies a URL as image/video/audio/... from its Content-Type.

    The session is passed in explicitly so callers (and tests) control TLS,
    proxies and connection reuse. No retries are made.
    """
    def __init__(self, session: Optional[requests.Session] = None, timeout: float = 10.0):
        self.session = session or build_session()
        self.timeout = timeout

    def _fetch_content_type(self, url: str) -> Optional[str]:
        response = self.session.head(url, allow_redirects=True, timeout=self.timeout)
        if response.status_code in (403, 405, 501):
            # Some hosts refuse HEAD; ask for the body but do not read it.
            logger.debug(f"HEAD {url} returned {response.status_code}; retrying with GET")
            response = self.session.get(url, allow_redirects=True, timeout=self.timeout, stream=True)
            response.close()
        response.raise_for_status()
        return response.headers.get("Content-Type")

    def get_type(self, url: str) -> str:
        """
        Returns the coarse type of the resource behind url.

        Raises:
            requests.RequestException: the resource could not be reached.
        """
        if url.startswith("data:"):
            return _major_type(url[5:].split(",", 1)[0]) or UNKNOWN_TYPE

        major = _major_type(self._fetch_content_type(url))
        if major:
            return major

        guessed, _ = mimetypes.guess_type(urlparse(url).path)
        return _major_type(guessed) or UNKNOWN_TYPE


def resolve_photo(basics: dict, client: Optional[PhotoTypeClient],
                  settings: ThemeSettings) -> Optional[Photo]:
    """
    Picks basics.image, else the Gravatar of basics.email, and classifies it.

    Adds basics["gravatar"] when an e-mail is present. With no client the
    photo is skipped entirely: no avatar is derived and no photo is returned.
    A failed lookup (network, TLS or CA bundle error) yields None, or raises
    PhotoLookupError under the strict policy.
    """
    if client is None:
        logger.debug("Photo lookup disabled; rendering without photo")
        return None

    email = basics.get("email")
    if email and isinstance(email, str):
        basics["gravatar"] = gravatar_url(
            email,
            size=settings.gravatar_size,
            rating=settings.gravatar_rating,
            default=settings.gravatar_default,
        )

    candidate = basics.get("image") or basics.get("gravatar")
    if not candidate or not isinstance(candidate, str):
        return None

    try:
        photo_type = client.get_type(candidate)
    except (requests.RequestException, OSError) as e:
        if settings.strict_photo:
            raise PhotoLookupError(candidate, str(e)) from e
        logger.warning(f"Could not classify photo {candidate} ({e}); rendering without photo")
        return None

    logger.debug(f"Photo {candidate} classified as {photo_type}")
    return Photo(url=candidate, type=photo_type)
