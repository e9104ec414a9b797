import asyncio
import logging
from typing import Callable, List
from ..config import ProbeConfig
from ..domain.interfaces import ClientSession
from ..domain.models import Faulted, Healthy, ProbeResult, Unhealthy
from ..connectors.factory import get_session

logger = logging.getLogger(__name__)

# Liveness probe, not an inventory: only the first page is ever inspected.
# A present database that the server does not list first will be reported
# as missing.
FIRST_PAGE_START = 0
FIRST_PAGE_SIZE = 1

SessionFactory = Callable[[ProbeConfig], ClientSession]

class ProbeExecutor:
    """
    SRP: Responsible only for one round-trip to the cluster and classifying it.
    Every exception from session setup or the administrative call becomes
    a Faulted result here; nothing escapes check().
    """
    def __init__(self, config: ProbeConfig, session_factory: SessionFactory = get_session):
        self.config = config
        self._session_factory = session_factory

    async def check(self) -> ProbeResult:
        logger.debug("Probing RavenDB at %s", ", ".join(self.config.urls))
        try:
            names = await asyncio.to_thread(self._list_first_page)
        except (Exception, asyncio.CancelledError) as e:
            # On cancellation the worker thread still releases its own session
            logger.warning("RavenDB probe faulted: %s: %s", type(e).__name__, e)
            return Faulted(cause=e)

        return self._classify(names)

    def _list_first_page(self) -> List[str]:
        # Acquire, list and release on one worker thread; closing a store
        # waits for its in-flight request and must never run on the loop.
        with self._session_factory(self.config) as session:
            return session.get_database_names(FIRST_PAGE_START, FIRST_PAGE_SIZE)

    def _classify(self, names: List[str]) -> ProbeResult:
        database = self.config.database
        if database is None:
            return Healthy()

        wanted = database.casefold()
        if any(name.casefold() == wanted for name in names):
            return Healthy()

        logger.info("RavenDB cluster does not contain database '%s'", database)
        return Unhealthy(reason=f"cluster does not contain database '{database}'")
