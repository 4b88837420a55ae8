from __future__ import annotations
import argparse
import logging
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from .config import PAGE_SIZE
from .container import Container
from .exceptions import DocumentImportError, InvalidArgumentError
from .error_handler import log_error
from .hashing import fingerprint
from .logging_config import set_console_level
from .pagination import paginate

console = Console()

# Wide enough that titles never wrap mid-phrase
TABLE_MIN_WIDTH = 60


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="docindex", description="Index, fingerprint and search text documents.")
    sub = parser.add_subparsers(dest="command", required=True)

    p_hash = sub.add_parser("hash", help="Print the content fingerprint of a file")
    p_hash.add_argument("file")

    p_pages = sub.add_parser("pages", help="Show how a file splits into pages")
    p_pages.add_argument("file")
    p_pages.add_argument("--page-size", type=int, default=PAGE_SIZE)

    p_search = sub.add_parser("search", help="Find a keyword as a whole word")
    p_search.add_argument("keyword")
    p_search.add_argument("files", nargs="+")

    p_score = sub.add_parser("score", help="TF-IDF score of each file against all given files")
    p_score.add_argument("files", nargs="+")
    return parser


def _import_all(container: Container, paths: List[str]) -> list:
    editor = container.editor_use_case()
    documents = []
    for path in paths:
        document = editor.import_text_file(path)
        if document is None:
            raise DocumentImportError(message=f"Could not import {path}", details={"path": path})
        documents.append(document)
    return documents


def _cmd_hash(container: Container, args: argparse.Namespace) -> None:
    content = container.file_reader().read(args.file)
    console.print(f"{fingerprint(content)}  {args.file}")


def _cmd_pages(container: Container, args: argparse.Namespace) -> None:
    content = container.file_reader().read(args.file)
    pages = paginate(content, args.page_size)

    table = Table(title=f"{args.file}: {len(pages)} pages", box=box.ROUNDED, min_width=TABLE_MIN_WIDTH)
    table.add_column("#", justify="right")
    table.add_column("Length", justify="right")
    table.add_column("Preview")
    for page in pages:
        table.add_row(str(page.page_number), str(page.length), page.content[:60].replace("\n", " "))
    console.print(table)


def _cmd_search(container: Container, args: argparse.Namespace) -> None:
    _import_all(container, args.files)
    results = container.editor_use_case().search_keyword(args.keyword)
    if not results:
        console.print(f"[yellow]No matches for[/yellow] [bold]{args.keyword}[/bold]")
        return

    table = Table(title=f"{len(results)} matches for \"{args.keyword}\"", box=box.ROUNDED, min_width=TABLE_MIN_WIDTH)
    table.add_column("Document", style="bold")
    table.add_column("Page", justify="right")
    table.add_column("Match")
    for result in results:
        table.add_row(result.document_name, str(result.page_number), f"{result.context} [green]{result.keyword}[/green]")
    console.print(table)


def _cmd_score(container: Container, args: argparse.Namespace) -> None:
    documents = _import_all(container, args.files)
    editor = container.editor_use_case()

    table = Table(title=f"TF-IDF over {len(documents)} documents", box=box.ROUNDED, min_width=TABLE_MIN_WIDTH)
    table.add_column("Document", style="bold")
    table.add_column("Score", justify="right")
    for document in documents:
        table.add_row(document.name, f"{editor.calculate_tfidf(document.id):.4f}")
    console.print(table)


_COMMANDS = {
    "hash": _cmd_hash,
    "pages": _cmd_pages,
    "search": _cmd_search,
    "score": _cmd_score,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    # Tables own stdout; only errors from the log reach the console
    set_console_level(logging.ERROR)
    container = Container()
    try:
        _COMMANDS[args.command](container, args)
    except InvalidArgumentError as e:
        log_error(e, f"docindex {args.command}", level=logging.WARNING)
        console.print(f"[bold red]Invalid argument:[/bold red] {e.message}")
        return 2
    except DocumentImportError as e:
        log_error(e, f"docindex {args.command}", level=logging.WARNING)
        console.print(f"[bold red]Import failed:[/bold red] {e.message}")
        return 1
    return 0
