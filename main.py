#!/usr/bin/env python3
"""Compat shim that forwards to :mod:`descrambler.cli`.

Lets a checkout be used without installing the package
(``python main.py decipher base.js SIGNATURE``).
"""

from __future__ import annotations

import sys

from descrambler import cli as _cli


def main(argv: list[str] | None = None) -> int:
    """Entry point for ``python main.py``.

    Parameters
    ----------
    argv:
        Optional argument vector.  When ``None`` the wrapper forwards the
        current ``sys.argv[1:]`` to :func:`descrambler.cli.main`.
    """

    return _cli.main(sys.argv[1:] if argv is None else argv)


if __name__ == "__main__":  # pragma: no cover - thin CLI shim
    raise SystemExit(main())
