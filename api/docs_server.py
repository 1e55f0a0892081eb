from __future__ import annotations

import os
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import HTMLResponse, RedirectResponse

from verdocs import __version__
from verdocs.config import HandlerConfig, load_config
from verdocs.handler import Handler


def create_app(config: Optional[HandlerConfig] = None) -> FastAPI:
    config = config or load_config()
    handler = Handler(config)
    prefix = config.prefix_uri.strip("/")
    mount = f"/{prefix}" if prefix else ""

    # No OpenAPI/Swagger pages: they would shadow documents under the mount
    app = FastAPI(
        title="verdocs Docs Server",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.handler = handler

    @app.get("/healthz")
    def healthz():
        return {"ok": True}

    if mount:
        @app.get("/")
        def root():
            # Serve the docs under the prefix to keep API routes at root clean
            return RedirectResponse(url=f"{mount}/")

    @app.get(mount + "/{name:path}", response_class=HTMLResponse)
    def page(name: str):
        rendered = handler.render(name)
        # The placeholder page is still sent, with a 404 status
        status = 200 if rendered.found else 404
        return HTMLResponse(content=rendered.body, status_code=status)

    return app


app = create_app()


def main():
    # Allow: python -m api.docs_server
    import uvicorn

    host = os.environ.get("DOCS_HOST", "127.0.0.1")
    port = int(os.environ.get("DOCS_PORT", "8808"))
    uvicorn.run("api.docs_server:app", host=host, port=port, reload=False)


if __name__ == "__main__":
    main()
