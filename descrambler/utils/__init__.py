"""Utility helpers shared by the CLI and tests."""

from __future__ import annotations

from .io_utils import read_text, write_json

__all__ = ["read_text", "write_json"]
