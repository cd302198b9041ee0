## In-memory browser sessions
#
# Each browser gets a random cookie token; the store keys sessions by the
# token's hash. API keys and roadmaps live here only, for the life of the
# process (or until the session goes idle).

import hashlib
import secrets
import threading
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Callable

from careermap.agents.schemas import CareerRoadmap
from careermap.agents.workflow import RoadmapGenerator, build_generator
from careermap.errors import GenerationInProgressError, MissingCredentialError

SESSION_COOKIE_NAME = "cm_session"

def new_raw_token() -> str:
    return secrets.token_urlsafe(32)

def hash_token(raw: str) -> str:
    return hashlib.sha256(raw.encode("utf-8")).hexdigest()


class InFlightGuard:
    """Single-slot marker: at most one generation per session at a time."""

    def __init__(self):
        self._lock = threading.Lock()

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    def acquire(self) -> None:
        if not self._lock.acquire(blocking=False):
            raise GenerationInProgressError("A roadmap is already being generated")

    def release(self) -> None:
        self._lock.release()

    def __enter__(self):
        self.acquire()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False


@dataclass(eq=False)
class BrowserSession:
    generator_factory: Callable[[str], RoadmapGenerator]
    generator: RoadmapGenerator | None = None
    roadmap: CareerRoadmap | None = None
    guard: InFlightGuard = field(default_factory=InFlightGuard)
    last_seen_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def configured(self) -> bool:
        return self.generator is not None

    def configure(self, api_key: str) -> None:
        # The key itself is not kept; the generator's client holds it.
        self.generator = self.generator_factory(api_key)

    def require_generator(self) -> RoadmapGenerator:
        if self.generator is None:
            raise MissingCredentialError("Please configure your API key first")
        return self.generator

    def generate(self, career: str, experience: str, goals: str) -> CareerRoadmap:
        generator = self.require_generator()
        with self.guard:
            self.roadmap = generator.generate(career, experience, goals)
        return self.roadmap

    def reset(self) -> None:
        self.roadmap = None


class SessionStore:
    def __init__(self, generator_factory: Callable[[str], RoadmapGenerator] = build_generator,
    idle_minutes: int = 60):
        self.generator_factory = generator_factory
        self.idle = timedelta(minutes=idle_minutes)
        self._sessions: dict[str, BrowserSession] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._sessions)

    def get(self, raw: str | None) -> BrowserSession | None:
        if not raw:
            return None
        now = datetime.now(timezone.utc)
        with self._lock:
            self._prune(now)
            session = self._sessions.get(hash_token(raw))
            if session is not None:
                session.last_seen_at = now
            return session

    def create(self) -> tuple[str, BrowserSession]:
        raw = new_raw_token()
        session = BrowserSession(generator_factory=self.generator_factory)
        with self._lock:
            self._prune(session.last_seen_at)
            self._sessions[hash_token(raw)] = session
        return raw, session

    def _prune(self, now: datetime) -> None:
        # Idle timeout; a session with a request in flight is never dropped
        expired = [
            h for h, s in self._sessions.items()
            if s.last_seen_at + self.idle <= now and not s.guard.busy
        ]
        for h in expired:
            del self._sessions[h]
