from analyzer.events import EventStore


class TestEventStore:
    def test_add_event_returns_event(self, event_store):
        event = event_store.add_event("SCAN_START", "info", "starting", {"file": "a.bin"})
        data = event.to_dict()
        assert data["type"] == "SCAN_START"
        assert data["severity"] == "info"
        assert data["metadata"] == {"file": "a.bin"}

    def test_metadata_defaults_to_empty(self, event_store):
        event = event_store.add_event("SCAN_START", "info", "starting")
        assert event.metadata == {}

    def test_get_recent_limits_count(self, event_store):
        for i in range(10):
            event_store.add_event("EDGE_RISING", "high", f"edge {i}")
        recent = event_store.get_recent(3)
        assert [e["description"] for e in recent] == ["edge 7", "edge 8", "edge 9"]

    def test_max_events(self):
        store = EventStore(max_events=5)
        for i in range(8):
            store.add_event("EDGE_FALLING", "medium", f"edge {i}")
        assert store.get_all()["count"] == 5

    def test_get_by_type(self, event_store):
        event_store.add_event("EDGE_RISING", "high", "up")
        event_store.add_event("EDGE_FALLING", "medium", "down")
        event_store.add_event("EDGE_RISING", "high", "up again")
        assert len(event_store.get_by_type("EDGE_RISING")) == 2
        assert event_store.get_by_type("ERROR") == []

    def test_get_events_since(self, event_store):
        first = event_store.add_event("SCAN_START", "info", "first")
        later = event_store.get_events_since(first.unix_ts - 1)
        assert len(later) == 1
        assert event_store.get_events_since(first.unix_ts + 1) == []

    def test_reset(self, event_store):
        event_store.add_event("SCAN_START", "info", "first")
        event_store.reset()
        assert event_store.get_all() == {"events": [], "count": 0}
