"""Player version lookup used as the cache key for parsed scripts."""

from __future__ import annotations

import re

from .exceptions import PlayerVersionNotFound

_PLAYER_VERSION_RE = re.compile(r"""<script\s*src=["']/yts/jsbin/player-(.*?)/base\.js""", re.MULTILINE)


def parse_player_version(html: str) -> str:
    """Return the player script version referenced by a watch page."""

    if not html or not html.strip():
        raise ValueError("watch page html is empty")
    match = _PLAYER_VERSION_RE.search(html)
    if not match or not match.group(1).strip():
        raise PlayerVersionNotFound("Could not parse player version")
    return match.group(1)


def player_script_path(version: str) -> str:
    """Return the site-relative path of the script for ``version``."""

    return f"/yts/jsbin/player-{version}/base.js"


__all__ = ["parse_player_version", "player_script_path"]
