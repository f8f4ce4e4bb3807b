"""
Location update delivery.

A location producer (the device location service) pushes readings to a
single observer through the LocationUpdateNotifier contract, so it never
needs to know the observer's concrete type.
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Callable, Iterable, Optional

from compass.models.location import LocationReading

logger = logging.getLogger(__name__)


class LocationUpdateNotifier(ABC):
    """Receives location readings one at a time.

    ``update`` may be called any number of times, at any frequency, for
    as long as the producer runs. Handling bad readings is up to the
    implementation.
    """

    @abstractmethod
    def update(self, location: LocationReading) -> None:
        """Receive one location reading."""


class CallbackNotifier(LocationUpdateNotifier):
    """Adapts a plain function to the notifier contract."""

    def __init__(self, callback: Callable[[LocationReading], None]):
        self.callback = callback

    def update(self, location: LocationReading) -> None:
        self.callback(location)


class LatestLocation(LocationUpdateNotifier):
    """Observer that keeps the most recent reading."""

    def __init__(self):
        self.reading: Optional[LocationReading] = None
        self.count = 0

    def update(self, location: LocationReading) -> None:
        self.reading = location
        self.count += 1


class LocationFeed:
    """Producer side of the notifier contract.

    Holds at most one observer. Delivery is serialized with a lock, so
    readings pushed from several threads reach the observer one at a
    time, and readings pushed from one thread arrive in push order. The
    lock is reentrant so an observer may attach, detach or push from
    inside its own update.
    """

    def __init__(self, observer: Optional[LocationUpdateNotifier] = None):
        self._observer = observer
        self._lock = threading.RLock()

        # Track statistics
        self.delivered = 0
        self.dropped = 0

    @property
    def observer(self) -> Optional[LocationUpdateNotifier]:
        return self._observer

    def attach(self, observer: LocationUpdateNotifier) -> None:
        """Attach an observer, replacing the current one if any."""
        with self._lock:
            if self._observer is not None and self._observer is not observer:
                logger.info(f"Replacing location observer {type(self._observer).__name__} "
                            f"with {type(observer).__name__}")
            else:
                logger.info(f"Attached location observer {type(observer).__name__}")
            self._observer = observer

    def detach(self) -> Optional[LocationUpdateNotifier]:
        """Remove and return the current observer."""
        with self._lock:
            observer, self._observer = self._observer, None
        if observer is not None:
            logger.info(f"Detached location observer {type(observer).__name__}")
        return observer

    def push(self, reading: LocationReading) -> bool:
        """
        Deliver one reading to the observer.

        Returns:
            True if the reading was delivered, False if no observer was attached

        Raises:
            Whatever the observer raises; the feed stays usable afterwards.
        """
        with self._lock:
            if self._observer is None:
                self.dropped += 1
                logger.debug("No location observer attached, dropping reading")
                return False

            observer = self._observer
            try:
                observer.update(reading)
            except Exception as e:
                logger.error(f"Location observer {type(observer).__name__} failed: {e}")
                raise

            self.delivered += 1
            return True

    def push_many(self, readings: Iterable[LocationReading]) -> int:
        """Push readings in order and return how many were delivered."""
        return sum(1 for reading in readings if self.push(reading))
