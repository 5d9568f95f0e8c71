"""Test configuration ensuring the project source tree is importable."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Sequence

import pytest

ROOT = Path(__file__).resolve().parent.parent
FIXTURES = Path(__file__).resolve().parent / "fixtures" / "player"

root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

tests_str = str(Path(__file__).resolve().parent)
if tests_str not in sys.path:
    sys.path.insert(1, tests_str)

HELPERS = {
    "rv": "rv:function(a){a.reverse()}",
    "sl": "sl:function(a,b){a.splice(0,b)}",
    "sw": "sw:function(a,b){var c=a[0];a[0]=a[b%a.length];a[b%a.length]=c}",
}


def build_script(
    calls: Sequence[str],
    helpers: Sequence[str] = tuple(HELPERS.values()),
    *,
    entry: str = "xy",
) -> str:
    """Assemble a minimal player script around ``calls`` made on object ``Ob``."""

    body = ";".join(['a=a.split("")', *calls, 'return a.join("")'])
    return (
        "var Ob={" + ",\n".join(helpers) + "};\n"
        f"{entry}=function(a){{{body}}};\n"
        f'g.Tz=function(a,b){{b.set("signature",{entry}(a.s));return b}};\n'
    )


@pytest.fixture
def make_script() -> Callable[..., str]:
    return build_script


@pytest.fixture(scope="session")
def player_script() -> str:
    return (FIXTURES / "base.js").read_text(encoding="utf-8")


@pytest.fixture(scope="session")
def long_player_script() -> str:
    return (FIXTURES / "base_long.js").read_text(encoding="utf-8")


@pytest.fixture(scope="session")
def watch_html() -> str:
    return (FIXTURES / "watch.html").read_text(encoding="utf-8")
