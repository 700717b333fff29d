"""
Error types for the static file server.

Fatal errors abort startup; request errors are turned into an HTTP
response by the dispatcher and never reach the accept loop.
"""

from typing import Optional


class StaticServerError(Exception):
    """Base class for every error raised by this package"""


class ConfigError(StaticServerError):
    """Configuration could not be loaded or failed validation"""


class FatalError(StaticServerError):
    """An error that stops the server from starting"""


class MissingRoot(FatalError):
    """Static root is absent and generating it is disabled"""

    def __init__(self, path):
        super().__init__(f"Could not find server root folder at: {path}")
        self.path = path


class BindFailure(FatalError):
    """The listening socket could not be bound"""

    def __init__(self, address: str, reason: str):
        super().__init__(f"Could not listen at {address}: {reason}")
        self.address = address
        self.reason = reason


class BootstrapFailure(FatalError):
    """The placeholder pages could not be written"""


class RequestError(StaticServerError):
    """Request-scoped failure surfaced as an HTTP status"""

    status_code: int = 500

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class NotFound(RequestError):
    status_code = 404


class IOFailure(RequestError):
    status_code = 500
