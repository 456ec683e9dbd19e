"""
Routes serving the browser shell.

Any GET that is not an API route falls back to ``index.html`` so the page can
handle the OAuth redirect on whatever path LinkedIn sends the user back to.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse, Response

from app.dependencies import get_static_dir

router = APIRouter(include_in_schema=False)

INDEX_FILE = "index.html"


def _resolve_asset(static_dir: Path, path: str) -> Path | None:
    candidate = (static_dir / path).resolve()
    if not candidate.is_relative_to(static_dir) or not candidate.is_file():
        return None
    return candidate


@router.get("/")
async def index(static_dir: Annotated[Path, Depends(get_static_dir)]) -> FileResponse:
    return FileResponse(static_dir / INDEX_FILE)


@router.get("/{path:path}")
async def static_or_index(
    path: str,
    static_dir: Annotated[Path, Depends(get_static_dir)],
) -> Response:
    asset = _resolve_asset(static_dir, path) if path else None
    if asset is not None:
        return FileResponse(asset)

    # Quietly swallow missing favicon
    if path == "favicon.ico":
        return Response(status_code=204)

    return FileResponse(static_dir / INDEX_FILE)


__all__ = ["router"]
