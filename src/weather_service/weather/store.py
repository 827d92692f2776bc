"""Thread-safe in-memory store of the latest temperature observation per city."""

from __future__ import annotations

import logging
import math
import re
import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator, Protocol

from ..exceptions import CityNotFoundError, InvalidTemperatureError
from .units import Unit, convert_temperature, from_kelvin

logger = logging.getLogger(__name__)

_NON_LETTERS = re.compile(r"[^a-zA-Z]+")


def normalize_city(name: str) -> str:
    """Reduce a city name to lower-case ASCII letters only ("Ber lin" -> "berlin")."""
    return _NON_LETTERS.sub("", name).lower()


@dataclass(frozen=True)
class Observation:
    """A temperature reading and the unix time it was reported at."""

    temperature: float
    timestamp: int


class WeatherService(Protocol):
    """Operations the HTTP layer needs from a weather backend."""

    def report(self, city: str, temperature: float, unit: Unit) -> int: ...

    def temperature_in(self, city: str, unit: Unit) -> Observation: ...

    def cities(self) -> list[str]: ...


class _ReadWriteLock:
    """Many concurrent readers or one exclusive writer.

    A waiting writer blocks new readers so it cannot be starved.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writers_waiting = 0
        self._writing = False

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writing or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writing or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writing = True
        try:
            yield
        finally:
            with self._cond:
                self._writing = False
                self._cond.notify_all()


class WeatherStore:
    """In-memory weather store keyed by normalized city name.

    Temperatures are kept in Kelvin and converted on the way in and out.
    Each city holds only its most recent observation; a new report
    replaces the previous one.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._lock = _ReadWriteLock()
        self._data: dict[str, Observation] = {}

    def report(self, city: str, temperature: float, unit: Unit) -> int:
        """
        Store the current temperature for a city.

        Args:
            city: Free-form city name, normalized before use
            temperature: Reported value in ``unit``
            unit: Unit of ``temperature``

        Returns:
            Unix timestamp (seconds) recorded with the observation

        Raises:
            InvalidTemperatureError: If the value is below absolute zero, or is not
                finite in every unit
        """
        key = normalize_city(city)
        kelvin = convert_temperature(temperature, unit, Unit.KELVIN)
        if kelvin < 0.0 or not all(math.isfinite(from_kelvin(kelvin, u)) for u in Unit):
            logger.warning("Rejected report for %r: %s %s", key, temperature, Unit(unit).value)
            raise InvalidTemperatureError(temperature, Unit(unit).value)

        with self._lock.write():
            timestamp = int(self._clock())
            self._data[key] = Observation(temperature=kelvin, timestamp=timestamp)

        logger.debug("Stored report for %r: %.2f K at %d", key, kelvin, timestamp)
        return timestamp

    def temperature_in(self, city: str, unit: Unit) -> Observation:
        """Return the latest observation for a city, converted to ``unit``."""
        key = normalize_city(city)
        with self._lock.read():
            observation = self._data.get(key)
        if observation is None:
            raise CityNotFoundError(key)
        return Observation(
            temperature=convert_temperature(observation.temperature, Unit.KELVIN, unit),
            timestamp=observation.timestamp,
        )

    def cities(self) -> list[str]:
        """Return every stored city key, in no particular order."""
        with self._lock.read():
            return list(self._data)

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._data)

    def __contains__(self, city: object) -> bool:
        if not isinstance(city, str):
            return False
        key = normalize_city(city)
        with self._lock.read():
            return key in self._data
