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
Maps profile network names (basics.profiles[].network) to Font Awesome classes.
"""

from types import MappingProxyType

# Canonical icon -> spellings seen in the wild.
_ICON_ALIASES = {
    "fab fa-google-plus": ("google-plus", "googleplus"),
    "fab fa-flickr": ("flickr", "flicker"),
    "fab fa-dribbble": ("dribbble", "dribble"),
    "fab fa-codepen": ("codepen",),
    "fab fa-soundcloud": ("soundcloud",),
    "fab fa-reddit": ("reddit",),
    "fab fa-tumblr": ("tumblr", "tumbler"),
    "fab fa-stack-overflow": ("stack-overflow", "stackoverflow"),
    "fas fa-rss": ("blog", "rss"),
    "fab fa-gitlab": ("gitlab",),
    # No brand icon for Keybase
    "fas fa-key": ("keybase",),
}

NETWORK_ICONS = MappingProxyType({
    alias: icon
    for icon, aliases in _ICON_ALIASES.items()
    for alias in aliases
})

FALLBACK_PREFIX = "fab fa-"


def classify(network: str) -> str:
    """
    Returns the icon class for a network, case-insensitively.

    Unknown networks get "fab fa-<network>", which works for most brands
    (github, linkedin, twitter...). Whether the icon exists is not checked.
    """
    key = str(network).lower()
    return NETWORK_ICONS.get(key, FALLBACK_PREFIX + key)
