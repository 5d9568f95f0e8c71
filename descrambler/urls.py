"""Substitution of deciphered signatures into stream URLs."""

from __future__ import annotations

from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from .player_source import PlayerSource

DEFAULT_SIGNATURE_PARAM = "signature"


def set_query_param(url: str, name: str, value: str) -> str:
    """Return ``url`` with query parameter ``name`` set to ``value``."""

    parts = urlsplit(url)
    query = [(key, val) for key, val in parse_qsl(parts.query, keep_blank_values=True) if key != name]
    query.append((name, value))
    return urlunsplit(parts._replace(query=urlencode(query)))


def decipher_stream_url(
    url: str,
    signature: str,
    source: PlayerSource,
    *,
    param: str = DEFAULT_SIGNATURE_PARAM,
) -> str:
    """Decipher ``signature`` with ``source`` and attach it to ``url``."""

    return set_query_param(url, param, source.decipher(signature))


__all__ = ["DEFAULT_SIGNATURE_PARAM", "decipher_stream_url", "set_query_param"]
