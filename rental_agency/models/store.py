import logging
import threading
from contextlib import contextmanager
from typing import Iterable, Iterator, Optional

from rental_agency.models.agency import Agency, LoadResult
from rental_agency.models.vehicle import VehicleBase
from rental_agency.utils.constants import DEFAULT_AGENCY_NAME

logger = logging.getLogger(__name__)


class Store:
    """
    Process-wide holder of the running agency. The Agency itself has no
    locking; every access from the web layer goes through this lock.
    """
    _inst = None
    _inst_lock = threading.Lock()

    def __init__(self, name: Optional[str] = None, strict_tags: bool = False):
        self.agency = Agency(name or DEFAULT_AGENCY_NAME, strict_tags=strict_tags)
        self._rw = threading.RLock()
        logger.info("[Store] Agency %r ready (strict_tags=%s)", self.agency.name, strict_tags)

    # ---------- Singleton ----------
    @classmethod
    def instance(cls, name: Optional[str] = None, strict_tags: Optional[bool] = None):
        """
        Return the global singleton instance of Store. Arguments only apply when
        the instance is first built; differing ones later are logged and ignored.
        """
        with cls._inst_lock:
            if cls._inst is None:
                cls._inst = Store(name, strict_tags=bool(strict_tags))
            else:
                agency = cls._inst.agency
                if (name and name != agency.name) or (
                        strict_tags is not None and strict_tags != agency.strict_tags):
                    logger.warning(
                        "[Store] Already built for %r (strict_tags=%s); ignoring name=%r, strict_tags=%s",
                        agency.name, agency.strict_tags, name, strict_tags)
        return cls._inst

    @classmethod
    def reset(cls):
        """Drop the singleton; the next instance() call builds a fresh, empty agency."""
        with cls._inst_lock:
            cls._inst = None

    # ---------- Fleet ----------
    def load(self, lines: Iterable[str]) -> LoadResult:
        """Thread-safe batch load."""
        with self._rw:
            return self.agency.load_fleet(lines)

    def add(self, vehicle: VehicleBase) -> bool:
        """Thread-safe insert; False when an equal vehicle is already present."""
        with self._rw:
            return self.agency.insert(vehicle)

    @contextmanager
    def read(self) -> Iterator[Agency]:
        """Hold the lock while the caller queries the agency."""
        with self._rw:
            yield self.agency