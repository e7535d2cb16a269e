"""FastAPI application for previewing search records."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from docsindex.config import AppConfig
from docsindex.index.builder import build_records
from docsindex.index.storage import SQLiteRecordStore
from docsindex.models import ContentNode, Page

LOGGER = logging.getLogger(__name__)

app = FastAPI(title="docsindex preview", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


class PagePayload(BaseModel):
    path: str
    title: str = ""
    body: Dict[str, Any] = Field(default_factory=lambda: {"type": "root", "children": []})
    url_prefix: str | None = None
    lvl0: str | None = None
    version: str | None = None


def _resolve_db_path(db: Path | None) -> Path:
    config = AppConfig(db_path=db if db is not None else AppConfig().db_path)
    return config.resolve_db_path(Path.cwd())


@app.on_event("startup")
async def startup_event() -> None:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")


@app.post("/records")
async def preview_records(payload: PagePayload) -> dict[str, List[Dict[str, Any]]]:
    path = payload.path.strip()
    if not path:
        raise HTTPException(status_code=400, detail="Empty page path")

    page = Page(path=path, title=payload.title, body=ContentNode.from_dict(payload.body))
    defaults = AppConfig()
    url_prefix = payload.url_prefix if payload.url_prefix is not None else defaults.url_prefix
    lvl0 = payload.lvl0 if payload.lvl0 is not None else defaults.lvl0
    records = await asyncio.to_thread(
        build_records, page, url_prefix=url_prefix, lvl0=lvl0, version=payload.version
    )
    return {"records": [record.to_wire() for record in records]}


@app.get("/records")
async def list_records(db: Path | None = None, path: str | None = None) -> dict[str, Any]:
    """List records stored in the local index."""
    resolved_db = _resolve_db_path(db)
    if not resolved_db.exists():
        return {"records": [], "count": 0}

    store = SQLiteRecordStore(resolved_db)
    try:
        records = store.list_records(path)
    finally:
        store.close()

    return {"records": records, "count": len(records)}
