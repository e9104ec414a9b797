import threading
from typing import List, Optional

import pytest


class FakeSession:
    """In-memory stand-in for a RavenDB client session."""

    def __init__(self, names: Optional[List[str]] = None, error: Optional[BaseException] = None,
                 block: Optional[threading.Event] = None):
        self.names = names or []
        self.error = error
        self.block = block
        self.calls = []
        self.close_count = 0

    def get_database_names(self, start: int, page_size: int) -> List[str]:
        self.calls.append((start, page_size))
        if self.block is not None:
            self.block.wait(timeout=5)
        if self.error is not None:
            raise self.error
        return list(self.names)[start:start + page_size]

    def close(self) -> None:
        # Like DocumentStore.close(), waits for the in-flight request
        if self.block is not None:
            self.block.wait(timeout=5)
        self.close_count += 1

    def __enter__(self) -> "FakeSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class RecordingFactory:
    """Session factory that hands out a fresh FakeSession per call."""

    def __init__(self, **session_kwargs):
        self.session_kwargs = session_kwargs
        self.sessions: List[FakeSession] = []
        self.configs = []

    def __call__(self, config) -> FakeSession:
        self.configs.append(config)
        session = FakeSession(**self.session_kwargs)
        self.sessions.append(session)
        return session


@pytest.fixture(autouse=True)
def clean_ravendb_env(monkeypatch):
    for key in ("RAVENDB_URLS", "RAVENDB_DATABASE", "RAVENDB_CERTIFICATE_PEM_PATH", "RAVENDB_TRUST_STORE_PATH"):
        monkeypatch.delenv(key, raising=False)
