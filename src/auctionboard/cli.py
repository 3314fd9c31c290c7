"""Command-line interface for serving and rendering the auction board."""

from __future__ import annotations

import argparse
import asyncio
import logging
from dataclasses import replace
from pathlib import Path
from typing import Sequence

from auctionboard.board import ALL_TEAMS, Board, HtmlFileWriter, PAGE_SIZE
from auctionboard.config import Settings


logger = logging.getLogger(__name__)


def _add_source_args(parser: argparse.ArgumentParser, settings: Settings) -> None:
    parser.add_argument("--static", default=settings.static_path, help="Static roster JSON (path or URL)")
    parser.add_argument("--dynamic", default=settings.dynamic_path, help="Dynamic stats JSON (path or URL)")


def _add_view_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--team", default=ALL_TEAMS, help="Team to show (default: all)")
    parser.add_argument(
        "--sort",
        action="append",
        default=[],
        metavar="KEY",
        help="Sort key; repeat a key to flip its direction (e.g. --sort runs --sort runs)",
    )
    parser.add_argument("--pages", type=int, default=1, help=f"Number of {PAGE_SIZE}-card pages to show")
    parser.add_argument("--output", type=Path, default=Path("board.html"), help="Output HTML path")


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    settings = Settings.from_env()
    parser = argparse.ArgumentParser(description="Auction player board")
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the /api/players backend")
    _add_source_args(serve, settings)
    serve.add_argument("--host", default=settings.host, help="Bind address")
    serve.add_argument("--port", type=int, default=settings.port, help="Bind port")
    serve.add_argument(
        "--refresh",
        type=int,
        default=settings.refresh_seconds,
        help="Seconds between data reloads",
    )

    render = subparsers.add_parser("render", help="Load once and write the board as HTML")
    _add_source_args(render, settings)
    _add_view_args(render)

    watch = subparsers.add_parser("watch", help="Keep the HTML board refreshed")
    _add_source_args(watch, settings)
    _add_view_args(watch)
    watch.add_argument(
        "--interval",
        type=float,
        default=float(settings.client_refresh_seconds),
        help="Seconds between refreshes",
    )

    args = parser.parse_args(argv)
    args.settings = settings
    return args


def _build_board(args: argparse.Namespace) -> Board:
    board = Board(args.static, args.dynamic, timeout=args.settings.fetch_timeout)
    board.select_team(args.team)
    for key in args.sort:
        board.select_sort(key)
    for _ in range(max(args.pages, 1) - 1):
        board.load_more()
    board.subscribe(HtmlFileWriter(args.output))
    return board


def _serve(args: argparse.Namespace) -> int:
    import uvicorn

    from auctionboard.api import create_app

    settings = replace(
        args.settings,
        static_path=args.static,
        dynamic_path=args.dynamic,
        host=args.host,
        port=args.port,
        refresh_seconds=max(args.refresh, 1),
    )
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)
    return 0


def _render(args: argparse.Namespace) -> int:
    board = _build_board(args)
    ok = asyncio.run(board.refresh())
    view = board.view
    if not ok:
        print(f"Could not load player data; wrote {args.output} with the error message")
        return 1
    print(f"Wrote {len(view.visible)} of {view.total} players to {args.output}")
    return 0


def _watch(args: argparse.Namespace) -> int:
    board = _build_board(args)
    logger.info("Refreshing %s every %.0f seconds (Ctrl+C to stop)", args.output, args.interval)
    try:
        asyncio.run(board.run(args.interval))
    except KeyboardInterrupt:
        logger.info("Stopped")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        if args.command == "serve":
            return _serve(args)
        if args.command == "render":
            return _render(args)
        return _watch(args)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    raise SystemExit(main())
