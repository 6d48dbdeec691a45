"""
CLI Main - Typer command-line interface.
========================================

Commands:
- init: Create the articles table and its indexes
- index: Re-index a content directory
- search: Semantic search over indexed articles
- list: List articles, optionally for one folder
- show: Show a single article by slug
- folders: List distinct folders
- info: Show configuration
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn

from libsql_search.shared.logging import get_logger

logger = get_logger(__name__)

app = typer.Typer(
    name="libsql-search",
    help="""🔎 libsql-search - Semantic search for Markdown content on libSQL

Indexes a directory of Markdown files (with optional YAML front-matter)
into a libSQL table with a vector index, and searches it by meaning.

Embedding Providers:
  • local  - sentence-transformers all-MiniLM-L6-v2 (no API key, 384 dims padded)
  • gemini - Google text-embedding-004 (GEMINI_API_KEY, 768 dims)
  • openai - text-embedding-3-small/large (OPENAI_API_KEY)

━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

QUICK START:

  libsql-search init                       # Step 1: Create the table
  libsql-search index content/             # Step 2: Index Markdown files
  libsql-search search "vector databases"  # Step 3: Search by meaning

Use 'libsql-search <command> --help' for detailed command options.
""",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Enable debug logging.",
    ),
):
    """Configure logging from settings before any command runs."""
    from libsql_search.shared.config import get_settings
    from libsql_search.shared.logging import setup_logging

    settings = get_settings()
    setup_logging(
        level="DEBUG" if verbose else settings.get_effective_log_level(),
        use_rich=settings.logging.rich_console,
        log_file=settings.logging.file or None,
        log_format=settings.logging.format,
        force=True,
    )


def _open_store():
    """Open the configured store, exiting cleanly on failure."""
    from libsql_search.indexing.store import connect_store

    try:
        return connect_store()
    except Exception as e:
        console.print(f"[red]Could not open libSQL database: {e}[/red]")
        raise typer.Exit(1)


def _resolve_table(table: Optional[str]) -> str:
    from libsql_search.shared.config import get_settings

    return table or get_settings().indexing.table_name


# ─────────────────────────────────────────────────────────────────────────────
# Init Command
# ─────────────────────────────────────────────────────────────────────────────


@app.command()
def init(
    table: Optional[str] = typer.Option(
        None,
        "--table", "-t",
        help="Table name. Default: from config/settings.yaml.",
    ),
    dimensions: Optional[int] = typer.Option(
        None,
        "--dimensions", "-n",
        help="Embedding vector length. Default: EMBEDDING_DIMENSIONS or config.",
    ),
):
    """
    🗄️ Create the articles table and its indexes.

    Safe to run repeatedly: every statement is CREATE ... IF NOT EXISTS.

    Examples:
        libsql-search init
        libsql-search init -t notes -n 1536
    """
    from libsql_search.shared.config import get_settings
    from libsql_search.shared.errors import ConfigurationError
    from libsql_search.indexing.schema import create_table

    settings = get_settings()
    table = _resolve_table(table)
    dimensions = dimensions or settings.get_effective_dimensions()

    conn = _open_store()
    try:
        create_table(conn, table_name=table, dimensions=dimensions)
    except (ConfigurationError, ValueError) as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    console.print(
        f"[green]✓ Table '{table}' ready ({dimensions} dimensions) "
        f"in {settings.get_effective_database()}[/green]"
    )


# ─────────────────────────────────────────────────────────────────────────────
# Index Command
# ─────────────────────────────────────────────────────────────────────────────


@app.command()
def index(
    content_path: Optional[Path] = typer.Argument(
        None,
        help="Content directory. Default: indexing.content_path from config.",
    ),
    provider: Optional[str] = typer.Option(
        None,
        "--provider", "-p",
        help="Embedding provider: local, gemini or openai. Default: from config.",
    ),
    dimensions: Optional[int] = typer.Option(
        None,
        "--dimensions", "-n",
        help="Embedding vector length. Must match the table column.",
    ),
    table: Optional[str] = typer.Option(
        None,
        "--table", "-t",
        help="Table name. Default: from config/settings.yaml.",
    ),
    extensions: Optional[list[str]] = typer.Option(
        None,
        "--ext", "-e",
        help="File extension to index (repeatable). Default: .md and .markdown.",
    ),
    exclude: Optional[list[str]] = typer.Option(
        None,
        "--exclude", "-x",
        help="Directory name to skip (repeatable).",
    ),
):
    """
    📊 Re-index a content directory.

    Every run replaces the table contents. Documents that fail to parse
    or embed are skipped and reported; the command exits with status 1
    when any document failed.

    Examples:
        libsql-search index                    # Index the configured content path
        libsql-search index docs/ -p openai    # Use OpenAI embeddings
        libsql-search index -x drafts          # Skip 'drafts' directories
    """
    from libsql_search.shared.config import get_settings
    from libsql_search.shared.errors import ConfigurationError
    from libsql_search.indexing.indexer import index_content

    settings = get_settings()
    table = _resolve_table(table)

    if content_path is None:
        content_path = Path(settings.indexing.content_path)

    if not content_path.is_dir():
        console.print(f"[red]Content directory not found: {content_path}[/red]")
        raise typer.Exit(1)

    options = settings.get_embedding_options(provider=provider, dimensions=dimensions)

    console.print(Panel(
        f"[bold]Indexing Configuration[/bold]\n"
        f"Content: {content_path}\n"
        f"Provider: {options.provider}\n"
        f"Dimensions: {options.dimensions}\n"
        f"Table: {table}",
        title="📊 Index",
    ))

    conn = _open_store()

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TextColumn("{task.completed}/{task.total}"),
        console=console,
    ) as progress:
        task = progress.add_task("Discovering files...", total=None)

        def callback(current: int, total: int, relative_path: str) -> None:
            progress.update(
                task,
                completed=current - 1,
                total=total,
                description=f"Indexing {escape(relative_path)}",
            )

        try:
            summary = index_content(
                conn,
                content_path,
                embedding_options=options,
                file_extensions=extensions or settings.indexing.file_extensions,
                exclude=exclude or settings.indexing.exclude,
                table_name=table,
                on_progress=callback,
            )
        except ConfigurationError as e:
            progress.stop()
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)

        progress.update(task, completed=summary.total, total=summary.total or 1)

    if summary.total == 0:
        console.print(f"[yellow]No content files found in {content_path}[/yellow]")
        return

    console.print(
        f"\n[bold green]✓ Indexed {summary.success}/{summary.total} files "
        f"into '{table}'[/bold green]"
    )

    if summary.failed:
        console.print(f"[red]✗ {summary.failed} file(s) failed; see log for details[/red]")
        raise typer.Exit(1)


# ─────────────────────────────────────────────────────────────────────────────
# Search Command
# ─────────────────────────────────────────────────────────────────────────────


@app.command()
def search(
    query: str = typer.Argument(
        ...,
        help="Search query (wrap in quotes).",
    ),
    limit: Optional[int] = typer.Option(
        None,
        "--limit", "-k",
        help="Maximum number of results. Default: from config.",
    ),
    provider: Optional[str] = typer.Option(
        None,
        "--provider", "-p",
        help="Embedding provider. Must match the one used for indexing.",
    ),
    dimensions: Optional[int] = typer.Option(
        None,
        "--dimensions", "-n",
        help="Embedding vector length. Must match the table column.",
    ),
    table: Optional[str] = typer.Option(
        None,
        "--table", "-t",
        help="Table name. Default: from config/settings.yaml.",
    ),
):
    """
    🔎 Search indexed articles by meaning.

    Results are ordered by cosine distance (lower is more similar).

    Examples:
        libsql-search search "how do embeddings work"
        libsql-search search "deployment" -k 3
    """
    from libsql_search.shared.config import get_settings
    from libsql_search.shared.errors import LibSQLSearchError
    from libsql_search.retrieval.engine import search as run_search
    from libsql_search.shared.utils import truncate_text

    settings = get_settings()
    table = _resolve_table(table)
    options = settings.get_embedding_options(provider=provider, dimensions=dimensions)

    conn = _open_store()

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        progress.add_task("Searching...", total=None)
        try:
            results = run_search(
                conn,
                query,
                limit=limit or settings.search.limit,
                table_name=table,
                embedding_options=options,
            )
        except LibSQLSearchError as e:
            progress.stop()
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)

    if not results:
        console.print("[yellow]No results.[/yellow]")
        raise typer.Exit(0)

    result_table = Table(show_header=True, title=f"Results for: {escape(query)}")
    result_table.add_column("#", justify="right", style="dim")
    result_table.add_column("Title", style="cyan")
    result_table.add_column("Slug")
    result_table.add_column("Folder")
    result_table.add_column("Distance", justify="right")

    for i, result in enumerate(results, start=1):
        result_table.add_row(
            str(i),
            escape(truncate_text(result.title, 60)),
            escape(result.slug),
            escape(result.folder),
            f"{result.distance:.4f}",
        )

    console.print(result_table)


# ─────────────────────────────────────────────────────────────────────────────
# Reader Commands
# ─────────────────────────────────────────────────────────────────────────────


@app.command("list")
def list_articles(
    folder: Optional[str] = typer.Option(
        None,
        "--folder", "-f",
        help="Only list articles in this folder ('root' for top level).",
    ),
    table: Optional[str] = typer.Option(
        None,
        "--table", "-t",
        help="Table name. Default: from config/settings.yaml.",
    ),
):
    """📚 List indexed articles, ordered by title."""
    from libsql_search.retrieval.reader import get_all_articles, get_articles_by_folder

    table = _resolve_table(table)
    conn = _open_store()

    if folder:
        articles = get_articles_by_folder(conn, folder, table_name=table)
    else:
        articles = get_all_articles(conn, table_name=table)

    if not articles:
        console.print("[yellow]No articles found.[/yellow]")
        return

    article_table = Table(show_header=True)
    article_table.add_column("Title", style="cyan")
    article_table.add_column("Slug")
    article_table.add_column("Folder")
    article_table.add_column("Tags", style="dim")

    for article in articles:
        article_table.add_row(
            escape(article.title),
            escape(article.slug),
            escape(article.folder),
            escape(", ".join(article.tags)),
        )

    console.print(article_table)
    console.print(f"[dim]{len(articles)} article(s)[/dim]")


@app.command()
def show(
    slug: str = typer.Argument(..., help="Article slug, e.g. 'guides/setup'."),
    table: Optional[str] = typer.Option(
        None,
        "--table", "-t",
        help="Table name. Default: from config/settings.yaml.",
    ),
):
    """📄 Show a single article by slug."""
    from libsql_search.retrieval.reader import get_article_by_slug

    conn = _open_store()
    article = get_article_by_slug(conn, slug, table_name=_resolve_table(table))

    if article is None:
        console.print(f"[red]No article with slug '{escape(slug)}'[/red]")
        raise typer.Exit(1)

    tags = escape(", ".join(article.tags)) or "-"
    console.print(Panel(
        f"[bold]{escape(article.title)}[/bold]\n"
        f"Folder: {escape(article.folder)}\n"
        f"Tags: {tags}\n"
        f"Updated: {article.updated_at}",
        title=f"📄 {escape(article.slug)}",
    ))
    console.print(article.content or "", markup=False)


@app.command()
def folders(
    table: Optional[str] = typer.Option(
        None,
        "--table", "-t",
        help="Table name. Default: from config/settings.yaml.",
    ),
):
    """📁 List the distinct folders in the index."""
    from libsql_search.retrieval.reader import get_folders

    conn = _open_store()
    names = get_folders(conn, table_name=_resolve_table(table))

    if not names:
        console.print("[yellow]No folders found.[/yellow]")
        return

    for name in names:
        console.print(f"  • {escape(name)}")


# ─────────────────────────────────────────────────────────────────────────────
# Info Command
# ─────────────────────────────────────────────────────────────────────────────


@app.command()
def info():
    """
    ℹ️ Show configuration.

    Displays the version, store location, embedding settings and
    which API keys are present. Useful for verifying setup.
    """
    from libsql_search.shared.config import get_settings
    from libsql_search import __version__

    settings = get_settings()

    console.print(Panel(
        f"[bold]libsql-search[/bold]\n"
        f"Version: {__version__}\n"
        f"Config: config/settings.yaml",
        title="ℹ️ Info",
    ))

    table = Table(show_header=True)
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("Database", settings.get_effective_database())
    table.add_row("Sync URL", settings.get_effective_sync_url() or "-")
    table.add_row("Table", settings.indexing.table_name)
    table.add_row("Content path", settings.indexing.content_path)
    table.add_row("Extensions", ", ".join(settings.indexing.file_extensions))
    table.add_row("Exclude", ", ".join(settings.indexing.exclude))
    table.add_row("Provider", settings.get_effective_embedding_provider())
    table.add_row("Dimensions", str(settings.get_effective_dimensions()))
    table.add_row("Max length", str(settings.embeddings.max_length))
    table.add_row("Search limit", str(settings.search.limit))

    console.print(table)

    console.print("\n[bold]API Keys:[/bold]")
    keys = {
        "GEMINI_API_KEY": settings.gemini_api_key,
        "OPENAI_API_KEY": settings.openai_api_key,
        "LIBSQL_AUTH_TOKEN": settings.libsql_auth_token,
    }
    for name, value in keys.items():
        status = "✓" if value else "✗"
        console.print(f"  {name}: [{status}]")


# ─────────────────────────────────────────────────────────────────────────────
# Entry Point
# ─────────────────────────────────────────────────────────────────────────────


def cli():
    """CLI entry point."""
    app()


if __name__ == "__main__":
    cli()
