"""Player script signature descrambler.

Typical use::

    source = parse_player_source(script_text)
    plain = source.decipher(scrambled_signature)
"""

from __future__ import annotations

from .cache import PlayerSourceCache
from .config import DEFAULT_CONFIG, DescramblerConfig, load_config
from .exceptions import (
    ApplyError,
    ConfigError,
    DescrambleError,
    EntryFunctionNotFound,
    FunctionBodyNotFound,
    ParseError,
    PlayerVersionNotFound,
    SwapIndexOutOfRange,
    UnknownOperation,
)
from .operations import Operation, OperationKind, Reverse, Slice, Swap
from .passes.function_body import BalancedBraceExtractor, FirstBraceExtractor
from .passes.sequence import UnknownCallPolicy
from .pipeline import parse_player_source, run_pipeline
from .player_source import PlayerSource
from .player_version import parse_player_version
from .urls import decipher_stream_url
from .vm import Interpreter, decipher

__version__ = "0.1.0"

__all__ = [
    "ApplyError",
    "BalancedBraceExtractor",
    "ConfigError",
    "DEFAULT_CONFIG",
    "DescrambleError",
    "DescramblerConfig",
    "EntryFunctionNotFound",
    "FirstBraceExtractor",
    "FunctionBodyNotFound",
    "Interpreter",
    "Operation",
    "OperationKind",
    "ParseError",
    "PlayerSource",
    "PlayerSourceCache",
    "PlayerVersionNotFound",
    "Reverse",
    "Slice",
    "Swap",
    "SwapIndexOutOfRange",
    "UnknownCallPolicy",
    "UnknownOperation",
    "decipher",
    "decipher_stream_url",
    "load_config",
    "parse_player_source",
    "parse_player_version",
    "run_pipeline",
]
