from pathlib import Path

from fastapi import FastAPI, Request, Response

from .handler import IncomingRequest, RequestHandler

METHODS = ["GET", "HEAD", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"]


def create_app(static_root: Path) -> FastAPI:
    """FastAPI app that dispatches every path to the static file handler"""
    # No docs routes, every path belongs to the static root
    app = FastAPI(
        title="Static file server",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    handler = RequestHandler(static_root)

    @app.api_route("/{path:path}", methods=METHODS)
    async def dispatch(path: str, request: Request):
        raw_path = request.url.path
        if request.url.query:
            raw_path = f"{raw_path}?{request.url.query}"

        response = handler.handle_request(IncomingRequest(method=request.method, raw_path=raw_path))
        return Response(
            content=response.body or b"",
            status_code=response.status_code,
            headers=response.http_headers(),
        )

    return app
