import logging
from typing import List, Optional
from ravendb import DocumentStore
from ravendb.serverwide.operations.common import GetDatabaseNamesOperation
from ..config import ProbeConfig
from ..exceptions import SessionError

logger = logging.getLogger(__name__)

class RavenDBSession:
    """
    Short-lived client session backed by a ravendb DocumentStore.
    The wire protocol, topology and request pooling all live in the client;
    this class only scopes the store's lifetime to a single check.
    """
    def __init__(self, config: ProbeConfig):
        self.config = config
        self._store: Optional[DocumentStore] = None

    def connect(self) -> None:
        if self._store is not None:
            return

        try:
            store = DocumentStore(urls=list(self.config.urls))
            if self.config.certificate_pem_path:
                store.certificate_pem_path = self.config.certificate_pem_path
            if self.config.trust_store_path:
                store.trust_store_path = self.config.trust_store_path
            store.initialize()
        except Exception as e:
            raise SessionError(f"Failed to initialize document store: {e}") from e

        logger.debug("Opened RavenDB session for %s", ", ".join(self.config.urls))
        self._store = store

    def close(self) -> None:
        if self._store is not None:
            self._store.close()
            self._store = None
            logger.debug("Closed RavenDB session")

    def get_database_names(self, start: int, page_size: int) -> List[str]:
        """
        Administrative call listing database names, one page at a time.
        Raises whatever the client raises (connection, auth, timeout).
        """
        if self._store is None:
            raise SessionError("Session is not connected")
        names = self._store.maintenance.server.send(GetDatabaseNamesOperation(start, page_size))
        return list(names or [])

    def __enter__(self) -> "RavenDBSession":
        self.connect()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
