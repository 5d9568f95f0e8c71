"""Version-keyed cache of parsed player sources."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, Optional

from .config import DescramblerConfig
from .pipeline import parse_player_source
from .player_source import PlayerSource

LOG = logging.getLogger(__name__)


class PlayerSourceCache:
    """Parse each player script version at most once.

    Lookups of an already parsed version only read the dictionary.  Parsing
    happens under a lock so two threads asking for the same new version do not
    both run the pipeline.
    """

    def __init__(self, config: DescramblerConfig | None = None) -> None:
        self.config = config
        self._sources: Dict[str, PlayerSource] = {}
        self._lock = threading.Lock()

    def __contains__(self, version: object) -> bool:
        return version in self._sources

    def __len__(self) -> int:
        return len(self._sources)

    def get(self, version: str) -> Optional[PlayerSource]:
        return self._sources.get(version)

    def get_or_parse(self, version: str, load_script: Callable[[], str]) -> PlayerSource:
        """Return the source for ``version``, calling ``load_script`` on a miss.

        ``load_script`` is the caller's fetch of the script text; it is only
        invoked when the version has not been parsed yet.  Parse failures are
        not cached.
        """

        source = self._sources.get(version)
        if source is not None:
            return source
        with self._lock:
            source = self._sources.get(version)
            if source is None:
                LOG.info("parsing player script version %s", version)
                source = parse_player_source(load_script(), config=self.config)
                self._sources[version] = source
        return source

    def invalidate(self, version: str | None = None) -> None:
        with self._lock:
            if version is None:
                self._sources.clear()
            else:
                self._sources.pop(version, None)


__all__ = ["PlayerSourceCache"]
