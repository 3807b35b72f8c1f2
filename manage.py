#!/usr/bin/env python3
"""
Cotação management CLI.

Usage:
    python manage.py init-db                      Apply database migrations
    python manage.py import FILE [--name NAME]    Import a product sheet (.xlsx/.csv)
    python manage.py lists [--status S] [--open]  Show quotation lists
    python manage.py link LIST_ID SUPPLIER        Issue a supplier response link
    python manage.py links LIST_ID                Show the links of a list
    python manage.py finalize LIST_ID             Finalize a list
    python manage.py reuse LIST_ID [--name NAME]  New open list with the same products
    python manage.py analyze LIST_ID              Lowest price per product
    python manage.py export LIST_ID [--out DIR]   Write one file per winning supplier
    python manage.py serve                        Start the API server
"""

import argparse
import asyncio
import sys
from collections.abc import Awaitable, Callable
from pathlib import Path

from cotacao.application.use_cases import (
    AnalyzeQuotationUseCase,
    ExportResultsUseCase,
    FinalizeQuotationListUseCase,
    ImportQuotationListUseCase,
    IssueResponseLinkUseCase,
    ListQuotationListsUseCase,
    ReuseQuotationListUseCase,
)
from cotacao.config import configure_logging, get_settings
from cotacao.core.entities import ListStatus, QuotationList
from cotacao.core.exceptions import QuotationError


def _run(coro_factory: Callable[[], Awaitable[None]]) -> None:
    """Run a command against a migrated database and close the pool afterwards."""
    from cotacao.infrastructure.storage.sqlite import close_pool
    from cotacao.infrastructure.storage.sqlite.migrations import run_migrations

    async def runner() -> None:
        try:
            await run_migrations()
            await coro_factory()
        finally:
            await close_pool()

    try:
        asyncio.run(runner())
    except QuotationError as e:
        print(f"Error [{e.code}]: {e.message}")
        sys.exit(1)


def _print_list(quotation_list: QuotationList) -> None:
    suppliers = ", ".join(quotation_list.supplier_names) or "-"
    print(
        f"{quotation_list.id}  {quotation_list.status.value:<9}  "
        f"{len(quotation_list.products):>4} products  "
        f"{quotation_list.name}  [{suppliers}]"
    )


def cmd_init_db(args: argparse.Namespace) -> None:
    """Apply pending migrations."""
    from cotacao.infrastructure.storage.sqlite.migrations import (
        get_migration_status,
        run_migrations,
    )

    results = asyncio.run(run_migrations())
    if not results:
        print("Database is up to date.")
    for result in results:
        state = "ok" if result.success else f"FAILED: {result.error}"
        print(f"  {result.version}  {result.name}  {state}")

    status = asyncio.run(get_migration_status())
    print(f"Database: {get_settings().storage.db_path}")
    print(f"Schema version: {status['current_version'] or '-'}")
    if status["pending"]:
        print(f"Pending: {', '.join(status['pending'])}")


def cmd_import(args: argparse.Namespace) -> None:
    """Import a product sheet into a new open list."""
    path = Path(args.file)
    if not path.is_file():
        print(f"Error: file not found: {path}")
        sys.exit(1)

    async def run() -> None:
        quotation_list = await ImportQuotationListUseCase().execute_file(
            path.read_bytes(), path.name, name=args.name
        )
        print(f"Imported {len(quotation_list.products)} products.")
        _print_list(quotation_list)

    _run(run)


def cmd_lists(args: argparse.Namespace) -> None:
    """Show lists, newest first."""

    async def run() -> None:
        use_case = ListQuotationListsUseCase()
        if args.open:
            lists = await use_case.open_quotes()
        else:
            status = ListStatus(args.status) if args.status else None
            lists = await use_case.execute(status=status, limit=args.limit)
        if not lists:
            print("No quotation lists.")
        for quotation_list in lists:
            _print_list(quotation_list)

    _run(run)


def cmd_link(args: argparse.Namespace) -> None:
    """Issue a response link for a supplier."""

    async def run() -> None:
        use_case = IssueResponseLinkUseCase()
        link = await use_case.execute(args.list_id, args.supplier)
        print(f"Link for {link.supplier_name}:")
        print(f"  {use_case.url_for(link)}")

    _run(run)


def cmd_links(args: argparse.Namespace) -> None:
    """Show links issued for a list."""

    async def run() -> None:
        base = IssueResponseLinkUseCase()
        links = await ListQuotationListsUseCase().links(args.list_id)
        if not links:
            print("No links issued.")
        for link in links:
            print(f"{link.status.value:<9}  {link.supplier_name:<30}  {base.url_for(link)}")

    _run(run)


def cmd_finalize(args: argparse.Namespace) -> None:
    """Finalize a list."""

    async def run() -> None:
        quotation_list = await FinalizeQuotationListUseCase().execute(args.list_id)
        print("List finalized.")
        _print_list(quotation_list)

    _run(run)


def cmd_reuse(args: argparse.Namespace) -> None:
    """Start a new open list with the products of an existing one."""

    async def run() -> None:
        quotation_list = await ReuseQuotationListUseCase().execute(args.list_id, name=args.name)
        print("New list created.")
        _print_list(quotation_list)

    _run(run)


def cmd_analyze(args: argparse.Namespace) -> None:
    """Print the lowest price and winners for each product."""

    async def run() -> None:
        result = await AnalyzeQuotationUseCase().execute(args.list_id)
        for product in result.quotation_list.products:
            outcome = result.lowest_prices[product.internal_code]
            if outcome.has_winner:
                winners = ", ".join(sorted(outcome.winners))
                print(f"{product.internal_code:<12} {outcome.min_value:>12.2f}  {winners}")
            else:
                print(f"{product.internal_code:<12} {'-':>12}  no valid price")

    _run(run)


def cmd_export(args: argparse.Namespace) -> None:
    """Write one purchase-order file per winning supplier."""

    async def run() -> None:
        out_dir = Path(args.out) if args.out else None
        paths = await ExportResultsUseCase().write(args.list_id, out_dir=out_dir)
        if not paths:
            print("Nothing to export.")
        for path in paths:
            print(f"  {path}")

    _run(run)


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the API server."""
    import uvicorn

    settings = get_settings()
    host = args.host or settings.api.host
    port = args.port or settings.api.port
    print(f"Starting server on {host}:{port}...")
    uvicorn.run(
        "cotacao.api.main:app",
        host=host,
        port=port,
        reload=args.reload,
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Cotação management CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # init-db
    p_init = sub.add_parser("init-db", help="Apply database migrations")
    p_init.set_defaults(func=cmd_init_db)

    # import
    p_import = sub.add_parser("import", help="Import a product sheet")
    p_import.add_argument("file", help="Path to .xlsx or .csv file")
    p_import.add_argument("--name", default=None, help="List name (default: 'Lista <date> - <time>')")
    p_import.set_defaults(func=cmd_import)

    # lists
    p_lists = sub.add_parser("lists", help="Show quotation lists")
    p_lists.add_argument("--status", choices=[s.value for s in ListStatus], default=None)
    p_lists.add_argument("--open", action="store_true", help="Only open lists with links or responses")
    p_lists.add_argument("--limit", type=int, default=100)
    p_lists.set_defaults(func=cmd_lists)

    # link
    p_link = sub.add_parser("link", help="Issue a supplier response link")
    p_link.add_argument("list_id")
    p_link.add_argument("supplier", help="Supplier name")
    p_link.set_defaults(func=cmd_link)

    # links
    p_links = sub.add_parser("links", help="Show the links of a list")
    p_links.add_argument("list_id")
    p_links.set_defaults(func=cmd_links)

    # finalize
    p_finalize = sub.add_parser("finalize", help="Finalize a list")
    p_finalize.add_argument("list_id")
    p_finalize.set_defaults(func=cmd_finalize)

    # reuse
    p_reuse = sub.add_parser("reuse", help="New open list with the same products")
    p_reuse.add_argument("list_id")
    p_reuse.add_argument("--name", default=None)
    p_reuse.set_defaults(func=cmd_reuse)

    # analyze
    p_analyze = sub.add_parser("analyze", help="Lowest price per product")
    p_analyze.add_argument("list_id")
    p_analyze.set_defaults(func=cmd_analyze)

    # export
    p_export = sub.add_parser("export", help="Write winner files")
    p_export.add_argument("list_id")
    p_export.add_argument("--out", default=None, help="Output directory (default: EXPORT_OUTPUT_DIR)")
    p_export.set_defaults(func=cmd_export)

    # serve
    p_serve = sub.add_parser("serve", help="Start the API server")
    p_serve.add_argument("--host", default=None, help="Bind host (default: API_HOST)")
    p_serve.add_argument("--port", type=int, default=None, help="Bind port (default: API_PORT)")
    p_serve.add_argument("--reload", action="store_true", help="Reload on code changes")
    p_serve.set_defaults(func=cmd_serve)

    args = parser.parse_args(argv)
    configure_logging()
    args.func(args)


if __name__ == "__main__":
    main()
