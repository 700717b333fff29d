"""
Minimal static file server.

Serves HTML files from a directory over HTTP, generating placeholder pages
when the directory does not exist yet.
"""

from .app import create_app
from .config import ServerConfig, load_config
from .errors import (
    BindFailure,
    BootstrapFailure,
    ConfigError,
    FatalError,
    IOFailure,
    MissingRoot,
    NotFound,
    RequestError,
    StaticServerError,
)
from .handler import IncomingRequest, OutgoingResponse, RequestHandler
from .pages import generate_server_files
from .server import HttpServer

__all__ = [
    "BindFailure",
    "BootstrapFailure",
    "ConfigError",
    "FatalError",
    "HttpServer",
    "IncomingRequest",
    "IOFailure",
    "MissingRoot",
    "NotFound",
    "OutgoingResponse",
    "RequestError",
    "RequestHandler",
    "ServerConfig",
    "StaticServerError",
    "create_app",
    "generate_server_files",
    "load_config",
]
