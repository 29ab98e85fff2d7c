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
Exceptions raised by the CV theme renderer.
"""


class CVThemeError(Exception):
    """Base class for every error the renderer reports to its caller."""


class InvalidResumeError(CVThemeError):
    """The input could not be decoded as a resume document (a JSON object)."""


class PhotoLookupError(CVThemeError):
    """The photo content-type lookup failed and the strict policy is active."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Could not classify photo {url}: {reason}")
        self.url = url
        self.reason = reason


class AssetNotFoundError(CVThemeError):
    """A bundled theme asset is missing from the installation."""
