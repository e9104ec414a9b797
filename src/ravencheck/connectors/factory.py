from typing import Union
from ..domain.interfaces import ClientSession
from ..config import ProbeConfig
from .ravendb import RavenDBSession

def get_session(config: Union[str, ProbeConfig]) -> ClientSession:
    """
    Factory function to open a client session.
    Accepts either a connection string (str) or a ProbeConfig object.
    """
    if not isinstance(config, ProbeConfig):
        config = ProbeConfig.create(urls=config)

    session = RavenDBSession(config)
    session.connect()
    return session
