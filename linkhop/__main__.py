"""linkhop command line.

Usage:
    python -m linkhop serve --port 8000
    python -m linkhop resolve gh facebook/react
    python -m linkhop list
    python -m linkhop history --limit 20
"""

import argparse
import asyncio
import sys

from linkhop.commands.catalog import build_registry, build_router
from linkhop.config import Settings, get_settings
from linkhop.infrastructure.database import DatabaseSessionManager
from linkhop.infrastructure.observability import setup_logging
from linkhop.services.history import HistoryRecorder


def _serve(args: argparse.Namespace, settings: Settings) -> int:
    import uvicorn

    uvicorn.run(
        "linkhop.main:app",
        host=args.host or settings.server.address,
        port=args.port or settings.server.port,
        log_level=settings.server.log_level.lower(),
    )
    return 0


def _resolve(args: argparse.Namespace, settings: Settings) -> int:
    resolved = build_router().route(" ".join(args.words), settings)
    print(resolved.destination_url)
    return 0


def _list(args: argparse.Namespace, settings: Settings) -> int:
    for descriptor in build_registry().list_descriptors():
        bindings = ", ".join(descriptor.bindings)
        print(f"{bindings:<28} {descriptor.description}  (e.g. {descriptor.example})")
    for name, expansion in sorted(settings.aliases.items()):
        print(f"{name:<28} alias for: {expansion}")
    return 0


async def _print_history(settings: Settings, limit: int) -> None:
    manager = DatabaseSessionManager(settings.history.database_url)
    try:
        await manager.create_all()
        entries = await HistoryRecorder(manager).recent(limit)
    finally:
        await manager.dispose()
    for entry in entries:
        print(f"{entry.created_at:%Y-%m-%d %H:%M:%S}  {entry.client_identifier:<15}  {entry.raw_command}")


def _history(args: argparse.Namespace, settings: Settings) -> int:
    if not settings.history.enabled:
        print("History is disabled (set LINKHOP_HISTORY__ENABLED=true)", file=sys.stderr)
        return 1
    asyncio.run(_print_history(settings, args.limit))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="linkhop", description="Personal command router")
    sub = parser.add_subparsers(dest="action", required=True)

    serve = sub.add_parser("serve", help="Run the redirect server")
    serve.add_argument("--host", default=None, help="Bind address (default: config)")
    serve.add_argument("--port", type=int, default=None, help="Port (default: config)")
    serve.set_defaults(handler=_serve)

    resolve = sub.add_parser("resolve", help="Print the URL a command resolves to")
    resolve.add_argument("words", nargs="*", help="Command text, e.g. gh facebook/react")
    resolve.set_defaults(handler=_resolve)

    listing = sub.add_parser("list", help="List command bindings and aliases")
    listing.set_defaults(handler=_list)

    history = sub.add_parser("history", help="Show recently recorded commands")
    history.add_argument("--limit", type=int, default=20)
    history.set_defaults(handler=_history)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(settings.server.log_level, "text")
    return args.handler(args, settings)


if __name__ == "__main__":
    sys.exit(main())
