"""Locate the top-level signature descrambling function."""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, TYPE_CHECKING

from ..exceptions import EntryFunctionNotFound

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..pipeline import Context

LOG = logging.getLogger(__name__)

DEFAULT_SIGNATURE_KEY = "signature"


def _entry_pattern(signature_key: str) -> re.Pattern[str]:
    key = re.escape(signature_key)
    return re.compile(rf"""(["']){key}\1,\s?([a-zA-Z0-9$]+)\(""")


def locate_entry_point(script: str, signature_key: str = DEFAULT_SIGNATURE_KEY) -> str:
    """Return the identifier called right after the quoted ``signature_key``.

    The player script hands the deciphered value over with a call shaped like
    ``"signature",Xy(...)``; ``Xy`` is the entry function.
    """

    match = _entry_pattern(signature_key).search(script)
    if not match:
        raise EntryFunctionNotFound(
            f"Could not find the entry function for {signature_key!r} deciphering"
        )
    name = match.group(2)
    LOG.debug("entry function %s found at offset %d", name, match.start())
    return name


def run(ctx: "Context") -> Dict[str, Any]:
    name = locate_entry_point(ctx.script, ctx.config.signature_key)
    ctx.entry_function = name
    return {"entry_function": name}


__all__ = ["DEFAULT_SIGNATURE_KEY", "locate_entry_point", "run"]
