import logging

import pytest

from careermap.agents.workflow import RoadmapGenerator
from careermap.errors import GenerationInProgressError, MissingCredentialError
from careermap.logging_config import SensitiveDataFilter
from careermap.sessions import InFlightGuard, SessionStore, hash_token


class TestInFlightGuard:
    def test_rejects_second_acquire(self):
        guard = InFlightGuard()
        guard.acquire()
        assert guard.busy
        with pytest.raises(GenerationInProgressError):
            guard.acquire()
        guard.release()
        assert not guard.busy

    def test_context_manager_releases_on_error(self):
        guard = InFlightGuard()
        with pytest.raises(RuntimeError):
            with guard:
                raise RuntimeError("boom")
        assert not guard.busy


class TestBrowserSession:
    def test_generate_requires_credential(self, store):
        _, session = store.create()
        with pytest.raises(MissingCredentialError):
            session.generate("Pilot", "none", "fly")

    def test_configure_builds_generator_with_key(self, store, api_keys):
        _, session = store.create()
        session.configure("my-key")
        assert session.configured
        assert isinstance(session.generator, RoadmapGenerator)
        assert api_keys == ["my-key"]

    def test_generate_stores_roadmap_and_releases_guard(self, store):
        _, session = store.create()
        session.configure("k")
        roadmap = session.generate("Data Scientist", "junior", "ML")
        assert session.roadmap is roadmap
        assert not session.guard.busy
        session.reset()
        assert session.roadmap is None

    def test_concurrent_generate_rejected(self, store, llm):
        _, session = store.create()
        session.configure("k")
        session.guard.acquire()
        try:
            with pytest.raises(GenerationInProgressError):
                session.generate("Data Scientist", "junior", "ML")
        finally:
            session.guard.release()
        assert llm.calls == []


class TestSessionStore:
    def test_tokens_are_stored_hashed(self, store):
        raw, session = store.create()
        assert store.get(raw) is session
        assert raw not in store._sessions
        assert hash_token(raw) in store._sessions

    def test_unknown_or_missing_token(self, store):
        assert store.get(None) is None
        assert store.get("not-a-token") is None

    def test_idle_sessions_pruned(self):
        store = SessionStore(generator_factory=lambda key: None, idle_minutes=0)
        raw, _ = store.create()
        assert store.get(raw) is None
        assert len(store) == 0

    def test_create_prunes_idle_sessions(self):
        store = SessionStore(generator_factory=lambda key: None, idle_minutes=0)
        for _ in range(20):
            store.create()
            assert len(store) <= 1

    def test_busy_sessions_survive_pruning(self):
        store = SessionStore(generator_factory=lambda key: None, idle_minutes=0)
        raw, session = store.create()
        session.guard.acquire()
        assert store.get(raw) is session
        session.guard.release()


class TestSensitiveDataFilter:
    @pytest.mark.parametrize("msg, secret", [
        ("calling with api_key=abc123", "abc123"),
        ('{"apiKey": "abc123"}', "abc123"),
        ("GET /v1/models?key=abc123&alt=json", "abc123"),
        ("Authorization: Bearer abc123", "abc123"),
    ])
    def test_masks_secrets(self, msg, secret):
        record = logging.LogRecord("t", logging.INFO, __file__, 1, msg, None, None)
        SensitiveDataFilter().filter(record)
        assert secret not in record.getMessage()

    def test_masks_args(self):
        record = logging.LogRecord("t", logging.INFO, __file__, 1, "url: %s", ("https://x?key=abc123",), None)
        SensitiveDataFilter().filter(record)
        assert "abc123" not in record.getMessage()
