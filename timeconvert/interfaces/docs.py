"""
Static documentation page.

Serves the hand-written HTML reference for the conversion endpoint
and its error codes at the site root.
"""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

DOCS_PAGE = Path(__file__).resolve().parents[1] / "resources" / "docs.html"

router = APIRouter(tags=["docs"])


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
def documentation_page() -> HTMLResponse:
    """Return the static API documentation page."""
    return HTMLResponse(DOCS_PAGE.read_text(encoding="utf-8"))
