"""
Request dispatcher: turns one incoming request into exactly one response.
"""

import errno
import logging
from http import HTTPStatus
from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .errors import IOFailure, NotFound, RequestError

logger = logging.getLogger(__name__)

DEFAULT_DOCUMENT = "index.html"
MIME_TYPE = "text/html"
ENCODING = "utf-8"

NOT_FOUND_ERRNOS = {errno.ENOENT, errno.ENOTDIR, errno.ENAMETOOLONG, errno.ELOOP}


class IncomingRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    method: str
    raw_path: str


class OutgoingResponse(BaseModel):
    status_code: int
    status_text: str
    content_type: Optional[str] = None
    encoding: Optional[str] = None
    body: Optional[bytes] = None
    headers: Dict[str, str] = Field(default_factory=dict)

    @classmethod
    def empty(cls, status: HTTPStatus, **kwargs) -> "OutgoingResponse":
        return cls(status_code=status.value, status_text=status.phrase, **kwargs)

    def http_headers(self) -> Dict[str, str]:
        """Headers to put on the wire, Content-Length included"""
        headers = dict(self.headers)
        if self.content_type:
            headers["Content-Type"] = self.content_type
        if self.encoding:
            headers["Content-Encoding"] = self.encoding
        headers["Content-Length"] = str(len(self.body or b""))
        # No persistent connections
        headers["Connection"] = "close"
        return headers


class RequestHandler:
    """Maps request paths onto files below the static root"""

    def __init__(self, static_root: Path):
        self.static_root = Path(static_root)

    def handle_request(self, request: IncomingRequest) -> OutgoingResponse:
        if request.method.upper() != "GET":
            logger.info("Rejected %s %s", request.method, request.raw_path)
            return OutgoingResponse.empty(HTTPStatus.METHOD_NOT_ALLOWED, headers={"Allow": "GET"})

        try:
            return self.handle_get_request(request)
        except RequestError as e:
            logger.error("%s", e)
            return OutgoingResponse.empty(HTTPStatus(e.status_code))

    def handle_get_request(self, request: IncomingRequest) -> OutgoingResponse:
        try:
            target = self.resolve_path(request.raw_path)
            found = target.is_file()
        except ValueError as e:
            # e.g. an embedded null byte
            raise NotFound(f"Invalid path '{request.raw_path}': {e}", path=request.raw_path) from e
        except OSError as e:
            if e.errno in NOT_FOUND_ERRNOS:
                raise NotFound(f"Could not find the file '{request.raw_path}': {e}", path=request.raw_path) from e
            logger.critical("A fatal error occurred while looking up '%s'. Exception: %s", request.raw_path, e)
            raise IOFailure(f"Exception caught: {e}", path=request.raw_path) from e

        if not found:
            raise NotFound(f"Could not find the file '{target}'", path=str(target))
        return self.serve_file_content(target)

    def resolve_path(self, raw_path: str) -> Path:
        """File path for a request path; raises NotFound outside the static root"""
        path = raw_path.split("?", 1)[0]

        # Handle a request to the default resource
        if path == "/":
            return self.static_root / DEFAULT_DOCUMENT

        # Drop the leading '/', joining an absolute path would replace the root
        target = self.static_root / path.lstrip("/")

        root = self.static_root.resolve()
        resolved = target.resolve()
        if resolved != root and root not in resolved.parents:
            raise NotFound(f"Refusing path outside the static root '{raw_path}'", path=raw_path)
        return target

    def serve_file_content(self, path: Path) -> OutgoingResponse:
        try:
            # utf-8-sig drops a leading BOM
            text = path.read_text(encoding="utf-8-sig", errors="replace")
            data = text.encode(ENCODING)
        except OSError as e:
            logger.critical("A fatal error occurred while serving '%s'. Exception: %s", path, e)
            raise IOFailure(f"Exception caught: {e}", path=str(path)) from e

        return OutgoingResponse(
            status_code=HTTPStatus.OK.value,
            status_text=HTTPStatus.OK.phrase,
            content_type=MIME_TYPE,
            encoding=ENCODING,
            body=data,
        )
