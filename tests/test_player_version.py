from __future__ import annotations

import pytest

from descrambler.exceptions import PlayerVersionNotFound
from descrambler.player_version import parse_player_version, player_script_path


def test_parse_player_version(watch_html: str) -> None:
    assert parse_player_version(watch_html) == "vflppxuSE"


def test_player_script_path() -> None:
    assert player_script_path("vflppxuSE") == "/yts/jsbin/player-vflppxuSE/base.js"


def test_missing_player_version() -> None:
    with pytest.raises(PlayerVersionNotFound):
        parse_player_version("<html><script src='/s/other.js'></script></html>")


def test_blank_html_is_rejected() -> None:
    with pytest.raises(ValueError):
        parse_player_version("  \n")
