import logging
import threading
from typing import Optional, Tuple

from .records import PokemonRecord

logger = logging.getLogger(__name__)


class Watchlist:
    """Ordered, duplicate-free (by id) list of looked-up Pokémon.
    Entries are only ever appended or cleared all at once.
    """

    def __init__(self):
        self._entries = []

    def try_add(self, record: PokemonRecord) -> bool:
        for existing in self._entries:
            if existing.id == record.id:
                return False
        self._entries.append(record)
        return True

    def clear(self):
        self._entries.clear()

    def all(self) -> Tuple[PokemonRecord, ...]:
        return tuple(self._entries)

    def get(self, position: int) -> PokemonRecord:
        if position < 0:
            raise IndexError(position)
        return self._entries[position]

    def __len__(self):
        return len(self._entries)


class WatchlistState:
    """Everything the page shows: the watchlist and the profile on display.

    One instance is owned by the Flask app (app.extensions['watchlist']).
    Lookups finish on the worker pool, but their results are applied here by
    the request that awaited them, one at a time under the lock.
    """

    def __init__(self):
        self.watchlist = Watchlist()
        self.profile: Optional[PokemonRecord] = None
        self._lock = threading.Lock()

    def apply_lookup(self, record: PokemonRecord) -> bool:
        """Add a fetched record. The profile only switches to it when it was new."""
        with self._lock:
            added = self.watchlist.try_add(record)
            if added:
                self.profile = record
        if added:
            logger.info("Added %s to watchlist (%d entries)", record.label, len(self.watchlist))
        else:
            logger.info("%s already in watchlist", record.label)
        return added

    def select(self, position: int) -> PokemonRecord:
        with self._lock:
            record = self.watchlist.get(position)
            self.profile = record
        return record

    def clear_profile(self):
        with self._lock:
            self.profile = None

    def clear_all(self):
        with self._lock:
            self.watchlist.clear()
            self.profile = None
        logger.info("Watchlist cleared")

    def snapshot(self):
        with self._lock:
            return self.watchlist.all(), self.profile
