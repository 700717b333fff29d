"""
Lifecycle of the listening socket: initialize, serve until cancelled, shut down.

The socket is bound here and handed to uvicorn, so a bind error surfaces as
BindFailure instead of uvicorn exiting the process. Connections are served
one at a time on a single event loop.
"""

import asyncio
import logging
import socket
from pathlib import Path
from typing import Optional, Union

import uvicorn

from .app import create_app
from .config import ServerConfig
from .errors import BindFailure, FatalError, MissingRoot
from .pages import generate_server_files

logger = logging.getLogger(__name__)


class HttpServer:
    """Owns the listener handle; nothing else may close or share it"""

    def __init__(
        self,
        config: ServerConfig,
        content_root: Union[str, Path, None] = None,
        log_level: str = "info",
    ):
        self.config = config
        self.static_files_path = config.static_files_path(content_root)
        self.log_level = log_level
        self.listener: Optional[socket.socket] = None
        self._server: Optional[uvicorn.Server] = None

    @property
    def started(self) -> bool:
        return self._server is not None and self._server.started

    @property
    def port(self) -> Optional[int]:
        """Port actually bound, None before initialize()"""
        if self.listener is None:
            return None
        return self.listener.getsockname()[1]

    def initialize(self) -> None:
        """Bootstrap the static root if needed and start listening"""
        if self.listener is not None:
            raise RuntimeError("Server is already listening")

        if not self.static_files_path.is_dir():
            if not self.config.bootstrap_if_missing:
                logger.critical("Could not find server root folder at: %s, stopping...", self.static_files_path)
                raise MissingRoot(self.static_files_path)
            generate_server_files(self.static_files_path)

        address = self.config.listener_address
        try:
            self.listener = socket.create_server(
                (self.config.listen_host, self.config.listen_port),
                family=socket.AF_INET,
            )
        except OSError as e:
            logger.critical("A fatal error occurred while starting the server. Exception: %s", e)
            raise BindFailure(address, str(e)) from e

        app = create_app(self.static_files_path)
        uvicorn_config = uvicorn.Config(
            app,
            log_level=self.log_level,
            lifespan="off",
            # Stop waiting for in-flight requests on shutdown after this many seconds
            timeout_graceful_shutdown=5,
        )
        self._server = uvicorn.Server(uvicorn_config)

        logger.info("Starting listener at %s", address)

    async def run(self, cancel_event: asyncio.Event) -> None:
        """Serve connections until cancel_event is set"""
        if self.listener is None or self._server is None:
            return

        serve_task = asyncio.create_task(self._server.serve(sockets=[self.listener]))
        cancel_task = asyncio.create_task(cancel_event.wait())
        try:
            await asyncio.wait({serve_task, cancel_task}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            # uvicorn finishes the request in progress before returning
            self._server.should_exit = True
            cancel_task.cancel()
            await serve_task

    def shutdown(self) -> None:
        """Close the listener; safe to call more than once"""
        logger.info("Stopping server...")
        listener, self.listener = self.listener, None
        if listener is not None:
            listener.close()
        self._server = None

    async def start(self, cancel_event: Optional[asyncio.Event] = None) -> None:
        """Hosted-service entry point: initialize, run, then shut down"""
        if cancel_event is None:
            cancel_event = asyncio.Event()

        try:
            self.initialize()
        except FatalError:
            self.shutdown()
            raise

        try:
            await self.run(cancel_event)
        finally:
            self.shutdown()
