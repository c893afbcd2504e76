"""FastAPI application serving the exported portfolio and its content."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException

from portfolio.profile import PORTFOLIO, Portfolio

logger = logging.getLogger("portfolio.api")

BASE_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = BASE_DIR.parent

FRONTEND_BUILD_DIR = PROJECT_ROOT / ".web"


def _find_frontend_index() -> Optional[Path]:
    """Return the exported Reflex index page if one is available."""

    if not FRONTEND_BUILD_DIR.exists():
        return None

    candidates = [
        FRONTEND_BUILD_DIR / "build" / "client" / "index.html",
        FRONTEND_BUILD_DIR / "_static" / "index.html",
        FRONTEND_BUILD_DIR / "index.html",
    ]
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return None


def _frontend_fallback_html() -> str:
    """Return a short HTML page used when the static export is missing."""

    name = PORTFOLIO.profile.name
    return f"""
    <!DOCTYPE html>
    <html lang=\"en\">
      <head>
        <meta charset=\"utf-8\" />
        <title>{name} Portfolio</title>
        <style>
          body {{ font-family: system-ui, sans-serif; margin: 3rem auto; max-width: 640px; line-height: 1.6; color: #1f2933; }}
          h1 {{ font-size: 2rem; margin-bottom: 1rem; }}
          code {{ background: #f1f5f9; padding: 0.2rem 0.4rem; border-radius: 0.25rem; }}
          a {{ color: #2563eb; }}
        </style>
      </head>
      <body>
        <h1>{name}</h1>
        <p>{PORTFOLIO.profile.tagline}</p>
        <p>The portfolio page has not been exported yet. Run <code>reflex export --frontend-only --no-zip</code> and restart the server, or start the live app with <code>reflex run</code>.</p>
        <p>The page content is also available as JSON at <a href=\"/api/profile\">/api/profile</a>.</p>
      </body>
    </html>
    """


def _serve_frontend_index() -> HTMLResponse | FileResponse:
    frontend_index = _find_frontend_index()
    if frontend_index is not None:
        return FileResponse(frontend_index)

    logger.debug("No exported frontend under %s, serving fallback page", FRONTEND_BUILD_DIR)
    return HTMLResponse(content=_frontend_fallback_html(), status_code=200)


app = FastAPI(title="Portfolio Backend", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)

_STATIC_MOUNT_CANDIDATES: list[tuple[str, Path]] = [
    ("/assets", FRONTEND_BUILD_DIR / "build" / "client" / "assets"),
    ("/_next", FRONTEND_BUILD_DIR / "_static" / "_next"),
    ("/public", FRONTEND_BUILD_DIR / "public"),
]

for mount_path, directory in _STATIC_MOUNT_CANDIDATES:
    if directory.is_dir():
        app.mount(mount_path, StaticFiles(directory=str(directory)), name=f"frontend-{mount_path.strip('/')}")


@app.get("/api/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/api/profile", response_model=Portfolio)
def get_profile() -> Portfolio:
    """Return the full portfolio content in render order."""

    return PORTFOLIO


@app.get("/", include_in_schema=False, response_model=None)
def serve_frontend_root() -> HTMLResponse | FileResponse:
    """Serve the exported portfolio page or a fallback landing page."""

    return _serve_frontend_index()


@app.exception_handler(HTTPException)
async def _http_exception_handler(request: Request, exc: HTTPException):
    """Re-serve the landing page when the root path is not matched."""

    if (
        exc.status_code == status.HTTP_404_NOT_FOUND
        and request.method in {"GET", "HEAD"}
        and request.url.path in {"", "/", "/index.html"}
    ):
        return _serve_frontend_index()

    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})
