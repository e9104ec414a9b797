class RavenCheckException(Exception):
    """Base Exception Class"""
    pass

class ConfigurationError(RavenCheckException):
    """Configuration Error (missing endpoint, malformed settings file, etc.)"""
    pass

class SessionError(RavenCheckException):
    """Client Session Initialization Failure"""
    pass
