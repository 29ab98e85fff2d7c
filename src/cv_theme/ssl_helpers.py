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
CA bundle resolution and HTTP session setup for the photo lookup.

Checks (in priority order):
  1. Explicit path (ThemeSettings.ca_bundle, set by --ca-bundle)
  2. REQUESTS_CA_BUNDLE environment variable
  3. CURL_CA_BUNDLE environment variable
  4. SSL_CERT_FILE environment variable
  5. System defaults (True, i.e. certifi / OS trust store)
"""

import os
import logging

import requests

logger = logging.getLogger(__name__)

USER_AGENT = "cv-theme/0.1 (+https://jsonresume.org)"


def get_ca_bundle(override: str | None = None) -> str | bool:
    """
    Resolve the CA bundle to use for outbound HTTPS requests.

    Args:
        override: Explicit bundle path (ThemeSettings.ca_bundle, --ca-bundle).

    Returns:
        str: Path to a CA bundle file, or
        bool: True to use the default system/certifi trust store.
    """
    if override:
        return override

    for var in ("REQUESTS_CA_BUNDLE", "CURL_CA_BUNDLE", "SSL_CERT_FILE"):
        value = os.environ.get(var)
        if value:
            logger.debug(f"Using CA bundle from {var}: {value}")
            return value

    return True


def build_session(ca_bundle: str | None = None) -> requests.Session:
    """A requests session with the resolved trust store and our User-Agent."""
    session = requests.Session()
    session.verify = get_ca_bundle(ca_bundle)
    session.headers["User-Agent"] = USER_AGENT
    return session
