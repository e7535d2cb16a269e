"""Command line interface for docsindex."""

from __future__ import annotations

import json
import logging
from collections import Counter
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from docsindex.config import AppConfig
from docsindex.errors import ConfigError, ContentFetchError, PublishError
from docsindex.index.algolia import AlgoliaIndexStore
from docsindex.index.indexer import Indexer, IndexStats
from docsindex.index.storage import SQLiteRecordStore
from docsindex.ingestion.content_loader import ContentStore
from docsindex.web.app import app as web_app


console = Console()
app = typer.Typer(help="docsindex - hierarchical search records for documentation sites")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _ensure_db_parent(db_path: Path) -> None:
    db_path.parent.mkdir(parents=True, exist_ok=True)


def _make_config(
    content_dir: Path,
    collection: str,
    path_prefix: str,
    url_prefix: str,
    version: Optional[str],
    version_file: Optional[Path],
    *,
    db_path: Optional[Path] = None,
    algolia_app_id: Optional[str] = None,
    algolia_index: Optional[str] = None,
) -> AppConfig:
    defaults = AppConfig()
    return AppConfig(
        content_dir=content_dir,
        collection=collection,
        path_prefix=path_prefix,
        url_prefix=url_prefix,
        version=version,
        version_file=version_file,
        db_path=db_path if db_path is not None else defaults.db_path,
        algolia_app_id=algolia_app_id,
        algolia_index=algolia_index or defaults.algolia_index,
    )


@app.command()
def build(
    content_dir: Path = typer.Argument(..., help="Directory with parsed page collections.", resolve_path=True),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Write records as JSON to this file"),
    collection: str = typer.Option(AppConfig().collection, help="Collection to index"),
    path_prefix: str = typer.Option(AppConfig().path_prefix, help="Internal path prefix to strip"),
    url_prefix: str = typer.Option(AppConfig().url_prefix, help="Public URL prefix for records"),
    version: Optional[str] = typer.Option(None, help="Version stamped into page text"),
    version_file: Optional[Path] = typer.Option(None, help="File holding the version stamp"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Build search records without publishing them."""
    _setup_logging(verbose)
    config = _make_config(content_dir, collection, path_prefix, url_prefix, version, version_file)

    indexer = Indexer(ContentStore(config.content_dir), config=config)
    stats = IndexStats()
    try:
        records = indexer.build(stats)
    except (ConfigError, ContentFetchError) as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)

    if out is not None:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(
            json.dumps([record.to_wire() for record in records], indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
        console.print(f"Wrote {stats.records} records from {stats.pages} pages to [bold]{out}[/bold]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Type")
    table.add_column("Records")
    for record_type, count in sorted(Counter(r.wire_type for r in records).items()):
        table.add_row(record_type, str(count))
    console.print(table)
    console.print(f"Pages: {stats.pages}, records: {stats.records}")


@app.command()
def publish(
    content_dir: Path = typer.Argument(..., help="Directory with parsed page collections.", resolve_path=True),
    target: str = typer.Option("sqlite", help="Index store: sqlite or algolia"),
    db: Path = typer.Option(None, "--db", help="SQLite database path"),
    collection: str = typer.Option(AppConfig().collection, help="Collection to index"),
    path_prefix: str = typer.Option(AppConfig().path_prefix, help="Internal path prefix to strip"),
    url_prefix: str = typer.Option(AppConfig().url_prefix, help="Public URL prefix for records"),
    version: Optional[str] = typer.Option(None, help="Version stamped into page text"),
    version_file: Optional[Path] = typer.Option(None, help="File holding the version stamp"),
    app_id: Optional[str] = typer.Option(None, "--app-id", help="Algolia application id"),
    index_name: str = typer.Option(AppConfig().algolia_index, "--index", help="Algolia index name"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Build search records and replace the index contents with them."""
    _setup_logging(verbose)
    config = _make_config(
        content_dir,
        collection,
        path_prefix,
        url_prefix,
        version,
        version_file,
        db_path=db,
        algolia_app_id=app_id,
        algolia_index=index_name,
    )

    if target == "sqlite":
        resolved_db = config.resolve_db_path(Path.cwd())
        _ensure_db_parent(resolved_db)
        store = SQLiteRecordStore(resolved_db)
        console.print(f"Publishing into [bold]{resolved_db}[/bold]...")
    elif target == "algolia":
        try:
            store = AlgoliaIndexStore(
                config.algolia_app_id or "", config.algolia_api_key or "", config.algolia_index
            )
        except PublishError as exc:
            raise typer.BadParameter(str(exc)) from exc
        console.print(f"Publishing into Algolia index [bold]{config.algolia_index}[/bold]...")
    else:
        raise typer.BadParameter(f"Unknown target: {target}")

    indexer = Indexer(ContentStore(config.content_dir), store, config=config)
    try:
        stats = indexer.run()
    except (ConfigError, ContentFetchError) as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)
    finally:
        store.close()

    console.print(f"Pages: {stats.pages}, records: {stats.records}")
    if stats.published:
        console.print("[green]Index updated.[/green]")
    else:
        console.print("[yellow]Publishing failed, the index was left as it was.[/yellow]")


@app.command()
def show(
    db: Path = typer.Option(None, "--db", help="SQLite database path"),
    path: Optional[str] = typer.Option(None, "--path", help="Only records of pages under this path"),
) -> None:
    """List the records stored in the local index."""
    config = AppConfig(db_path=db if db is not None else AppConfig().db_path)
    resolved_db = config.resolve_db_path(Path.cwd())

    if not resolved_db.exists():
        raise typer.BadParameter(f"Database not found: {resolved_db}")

    store = SQLiteRecordStore(resolved_db)
    try:
        records = store.list_records(path)
    finally:
        store.close()

    if not records:
        console.print("[yellow]No records found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Object ID")
    table.add_column("Type")
    table.add_column("URL")
    table.add_column("Content")

    for record in records:
        snippet = (record.get("content") or "").replace("\n", " ")
        table.add_row(record["objectID"], record["type"], record["url"], snippet[:120])

    console.print(table)


@app.command()
def web(
    host: str = typer.Option("127.0.0.1", help="Host interface"),
    port: int = typer.Option(8000, help="Server port"),
    db: Path = typer.Option(None, "--db", help="SQLite database path"),
) -> None:
    """Start the preview web app."""
    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - defensive
        raise typer.BadParameter(
            "uvicorn is not installed. Install the web extras with \"python -m pip install '.[web]'\""
        ) from exc

    config = AppConfig(db_path=db if db is not None else AppConfig().db_path)
    resolved_db = config.resolve_db_path(Path.cwd())
    if not resolved_db.exists():
        console.print("[yellow]Warning: database not found, stored records will be empty.[/yellow]")

    console.print(f"Starting preview on http://{host}:{port} (database: {resolved_db})")
    uvicorn.run(
        web_app,
        host=host,
        port=port,
        reload=False,
        log_level="info",
    )
