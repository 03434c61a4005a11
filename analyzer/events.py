import logging
import threading
from collections import deque
from datetime import datetime

logger = logging.getLogger(__name__)


class Event:
    def __init__(self, event_type, severity, description, metadata=None):
        now = datetime.now()
        self.timestamp = now.isoformat()
        self.unix_ts = now.timestamp()
        self.event_type = event_type
        self.severity = severity
        self.description = description
        self.metadata = metadata or {}

    def to_dict(self):
        return {
            "timestamp": self.timestamp,
            "unix_ts": self.unix_ts,
            "type": self.event_type,
            "severity": self.severity,
            "description": self.description,
            "metadata": self.metadata,
        }


class EventStore:
    def __init__(self, max_events=2000):
        self.events = deque(maxlen=max_events)
        self._lock = threading.Lock()

    def add_event(self, event_type, severity, description, metadata=None):
        event = Event(event_type, severity, description, metadata)
        with self._lock:
            self.events.append(event)
        return event

    def get_all(self):
        with self._lock:
            return {
                "events": [e.to_dict() for e in self.events],
                "count": len(self.events),
            }

    def get_recent(self, count=50):
        with self._lock:
            recent = list(self.events)[-count:]
            return [e.to_dict() for e in recent]

    def get_events_since(self, unix_ts):
        with self._lock:
            return [e.to_dict() for e in self.events if e.unix_ts > unix_ts]

    def get_by_type(self, event_type):
        with self._lock:
            return [e.to_dict() for e in self.events if e.event_type == event_type]

    def reset(self):
        with self._lock:
            self.events.clear()
        logger.info("Event store reset")
