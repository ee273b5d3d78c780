# backend/geotrack/utils/geofencing.py
"""Geofence definitions and the registry transitions are delivered for."""
import threading
from dataclasses import asdict, dataclass
from enum import IntEnum
from typing import Dict, List, Optional, Union

NEVER_EXPIRE = -1

class GeofenceTransition(IntEnum):
    """Transition codes as delivered by the platform location API."""
    ENTER = 1
    EXIT = 2
    DWELL = 4

    @classmethod
    def parse(cls, value: Union[int, str, None]) -> Optional['GeofenceTransition']:
        """Resolve an integer code or a name; unknown values give None."""
        if isinstance(value, bool) or value is None:
            return None
        if isinstance(value, str):
            name = value.strip().upper()
            if name.isdigit():
                value = int(name)
            else:
                return cls.__members__.get(name)
        try:
            return cls(value)
        except (ValueError, TypeError):
            return None

@dataclass(frozen=True)
class Geofence:
    """A circular region monitored for transitions."""
    request_id: str
    latitude: float
    longitude: float
    radius_meters: float
    expiration_ms: int = NEVER_EXPIRE
    transition_types: int = GeofenceTransition.ENTER | GeofenceTransition.EXIT
    initial_trigger: int = GeofenceTransition.ENTER

    def monitors(self, transition: GeofenceTransition) -> bool:
        return bool(self.transition_types & transition)

    def to_dict(self) -> Dict:
        data = asdict(self)
        data['transition_types'] = [t.name for t in GeofenceTransition if self.monitors(t)]
        data['initial_trigger'] = GeofenceTransition(self.initial_trigger).name
        return data

class GeofencingClient:
    """Holds the geofences currently registered for transition delivery."""

    def __init__(self, app=None):
        self._registered: Dict[str, Geofence] = {}
        self._lock = threading.Lock()
        if app is not None:
            self.init_app(app)

    def init_app(self, app) -> None:
        with self._lock:
            self._registered = {}
        app.extensions['geofencing'] = self

    def add_geofences(self, geofences: List[Geofence]) -> List[str]:
        """Register geofences; an existing request id is replaced."""
        with self._lock:
            for geofence in geofences:
                self._registered[geofence.request_id] = geofence
            return [g.request_id for g in geofences]

    def remove_geofences(self, request_ids: List[str]) -> int:
        with self._lock:
            removed = 0
            for request_id in request_ids:
                if self._registered.pop(request_id, None) is not None:
                    removed += 1
            return removed

    def get(self, request_id: str) -> Optional[Geofence]:
        return self._registered.get(request_id)

    def registered(self) -> List[Geofence]:
        with self._lock:
            return list(self._registered.values())
