from types import SimpleNamespace

import pytest

from ravencheck.config import ProbeConfig
from ravencheck.connectors import ravendb as ravendb_connector
from ravencheck.connectors.factory import get_session
from ravencheck.connectors.ravendb import RavenDBSession
from ravencheck.exceptions import ConfigurationError, SessionError


class FakeDocumentStore:
    """Mimics the parts of ravendb.DocumentStore the session touches."""
    instances = []
    names = ["orders"]
    init_error = None

    def __init__(self, urls=None, database=None):
        self.urls = urls
        self.database = database
        self.certificate_pem_path = None
        self.trust_store_path = None
        self.initialized = False
        self.close_count = 0
        self.sent = []
        self.maintenance = SimpleNamespace(server=SimpleNamespace(send=self._send))
        FakeDocumentStore.instances.append(self)

    def initialize(self):
        if self.init_error is not None:
            raise self.init_error
        self.initialized = True
        return self

    def close(self):
        self.close_count += 1

    def _send(self, operation):
        self.sent.append(operation)
        return list(self.names)


class FakeGetDatabaseNamesOperation:
    def __init__(self, start, page_size):
        self.start = start
        self.page_size = page_size


@pytest.fixture
def fake_store(monkeypatch):
    FakeDocumentStore.instances = []
    FakeDocumentStore.names = ["orders"]
    FakeDocumentStore.init_error = None
    monkeypatch.setattr(ravendb_connector, "DocumentStore", FakeDocumentStore)
    monkeypatch.setattr(ravendb_connector, "GetDatabaseNamesOperation", FakeGetDatabaseNamesOperation)
    return FakeDocumentStore


def test_session_lists_database_names(fake_store):
    config = ProbeConfig.create(urls=["http://a:8080", "http://b:8080"])

    with RavenDBSession(config) as session:
        names = session.get_database_names(0, 1)

    store = fake_store.instances[0]
    assert names == ["orders"]
    assert store.urls == ["http://a:8080", "http://b:8080"]
    assert store.initialized
    assert (store.sent[0].start, store.sent[0].page_size) == (0, 1)
    assert store.close_count == 1


def test_session_applies_certificate_settings(fake_store):
    config = ProbeConfig.create(
        urls="https://raven.local",
        certificate_pem_path="/etc/raven/client.pem",
        trust_store_path="/etc/raven/ca.pem",
    )

    with RavenDBSession(config):
        pass

    store = fake_store.instances[0]
    assert store.certificate_pem_path == "/etc/raven/client.pem"
    assert store.trust_store_path == "/etc/raven/ca.pem"


def test_close_is_idempotent(fake_store):
    session = RavenDBSession(ProbeConfig.create(urls="http://raven.local:8080"))
    session.connect()
    session.close()
    session.close()

    assert fake_store.instances[0].close_count == 1


def test_initialization_failure_raises_session_error(fake_store):
    fake_store.init_error = ValueError("invalid url")

    with pytest.raises(SessionError, match="invalid url"):
        RavenDBSession(ProbeConfig.create(urls="not a url")).connect()


def test_empty_listing_returns_empty_list(fake_store):
    fake_store.names = []

    with RavenDBSession(ProbeConfig.create(urls="http://raven.local:8080")) as session:
        assert session.get_database_names(0, 1) == []


def test_factory_accepts_connection_string(fake_store):
    session = get_session("http://raven.local:8080")
    try:
        assert isinstance(session, RavenDBSession)
        assert fake_store.instances[0].initialized
    finally:
        session.close()


def test_factory_rejects_empty_connection_string(fake_store):
    with pytest.raises(ConfigurationError):
        get_session("")
    assert fake_store.instances == []


def test_listing_on_closed_session_does_not_reconnect(fake_store):
    session = RavenDBSession(ProbeConfig.create(urls="http://raven.local:8080"))
    with session:
        pass

    with pytest.raises(SessionError, match="not connected"):
        session.get_database_names(0, 1)
    assert len(fake_store.instances) == 1
