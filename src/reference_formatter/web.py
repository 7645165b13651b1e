"""FastAPI interface for the reference formatter.

Run with:
    uvicorn reference_formatter.web:app --reload
"""
from __future__ import annotations

import json
import logging
from html import escape
from typing import Any, Dict, List

from fastapi import FastAPI, Form, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field, field_validator

from .errors import EntryLoadError
from .formatter import ReferenceFormatter
from .loaders import entries_from_mapping
from .report import format_library, render_listing

logger = logging.getLogger(__name__)

app = FastAPI(title="Reference Formatter", description="Render bibliographic records as APA references")

formatter = ReferenceFormatter()


class FormatRequest(BaseModel):
    entries: Dict[str, Dict[str, Any]] = Field(..., description="Library records keyed by citation key")

    @field_validator("entries")
    @classmethod
    def require_entries(cls, value: Dict[str, Dict[str, Any]]) -> Dict[str, Dict[str, Any]]:
        if not value:
            raise ValueError("Provide at least one entry")
        return value


class FormattedItem(BaseModel):
    key: str
    source_type: str
    reference: str


class FormatResponse(BaseModel):
    references: List[FormattedItem] = Field(default_factory=list)


def _layout(content: str) -> str:
    return f"""<!doctype html>
<html lang="en">
<head>
    <meta charset="utf-8" />
    <title>Reference Formatter</title>
    <link href="https://cdn.jsdelivr.net/npm/tailwindcss@3.4.4/dist/tailwind.min.css" rel="stylesheet" />
</head>
<body class="max-w-4xl mx-auto p-6">
    <h1 class="text-2xl font-semibold">Reference Formatter</h1>
    {content}
</body>
</html>
"""


def _form_page(listing: str | None = None, error: str | None = None, library: str = "") -> str:
    parts = [
        f"""
    <form action="/format-form" method="post" class="mt-4">
        <label for="library" class="block text-sm">JSON library (key -> record)</label>
        <textarea id="library" name="library" required class="w-full h-44 border p-2 font-mono text-sm">{escape(library)}</textarea>
        <button type="submit" class="mt-2 px-4 py-2 bg-indigo-600 text-white rounded">Format references</button>
    </form>"""
    ]
    if error:
        parts.append(f'<p class="mt-4 text-red-700">{escape(error)}</p>')
    if listing:
        parts.append(f'<pre class="mt-4 whitespace-pre-wrap text-sm">{escape(listing)}</pre>')
    return _layout("\n".join(parts))


@app.get("/", response_class=HTMLResponse)
async def home() -> HTMLResponse:
    """Serve the library submission form."""

    return HTMLResponse(_form_page())


@app.post("/format", response_model=FormatResponse)
async def format_entries(request: FormatRequest) -> FormatResponse:
    """Format a JSON library and return one reference per entry."""

    try:
        entries = entries_from_mapping(request.entries)
    except EntryLoadError as exc:
        logger.warning("Rejected library: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    results = format_library(entries, formatter)
    return FormatResponse(references=[FormattedItem(**result.as_dict()) for result in results])


@app.post("/format-form", response_class=HTMLResponse)
async def format_form(library: str = Form(...)) -> HTMLResponse:
    """Format a pasted library and render the listing as HTML."""

    try:
        entries = entries_from_mapping(json.loads(library))
    except json.JSONDecodeError as exc:
        return HTMLResponse(_form_page(error=f"Invalid JSON: {exc}", library=library), status_code=422)
    except EntryLoadError as exc:
        logger.warning("Rejected library: %s", exc)
        return HTMLResponse(_form_page(error=str(exc), library=library), status_code=422)

    listing = render_listing(format_library(entries, formatter), show_types=True)
    return HTMLResponse(_form_page(listing, library=library))


def main() -> None:
    """Run the FastAPI app using uvicorn."""

    import uvicorn

    from .config import load_settings, setup_logging

    settings = load_settings()
    setup_logging(settings.log_level)
    uvicorn.run("reference_formatter.web:app", host=settings.host, port=settings.port, reload=False)


__all__ = ["app", "main"]
