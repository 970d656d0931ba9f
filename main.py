"""Main CLI entry-point."""
from __future__ import annotations

import argparse
import asyncio
import shutil
import sys

from core.logging.config import bootstrap_logging, shutdown_logging
from config import settings

_BRIGHT_GREEN = "\033[1;92m"
_CYAN = "\033[96m"
_RESET = "\033[0m"


def _g(s: str) -> str:
    return f"{_BRIGHT_GREEN}{s}{_RESET}"


def _c(s: str) -> str:
    return f"{_CYAN}{s}{_RESET}"


def _print_banner() -> None:
    cols = shutil.get_terminal_size(fallback=(100, 20)).columns
    div = "═" * min(cols, 96)
    print(_g(div))
    print(_c("  League of Legends Solo Queue Leaderboard"))
    print(f"  Player: {settings.PLAYER_GAME_NAME}#{settings.PLAYER_TAG} ({settings.PLAYER_REGION})")
    print(f"  Serving on http://{settings.HOST}:{settings.PORT}")
    print(_g(div))


def _serve() -> int:
    # Lazy imports: watch and fetch never load the web stack
    import uvicorn
    from presentation.web import create_app

    _print_banner()
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT, log_config=None)
    return 0


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lol-leaderboard")
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("serve", help="run the leaderboard web app")
    watch = sub.add_parser("watch", help="poll the endpoint and draw the board in the terminal")
    watch.add_argument("--url", default=None, help="base URL of a running server")
    watch.add_argument("--once", action="store_true", help="draw one refresh and exit")
    sub.add_parser("fetch", help="run one aggregation cycle and print its JSON")
    return parser


def main(argv: list[str]) -> int:
    args = _parser().parse_args(argv)
    command = args.command or "serve"
    bootstrap_logging(
        service=command,
        level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        log_file_name="leaderboard.jsonl",
        console=True if command == "serve" else None,
    )
    try:
        if command == "watch":
            from presentation.cli import WatchCommand
            return asyncio.run(WatchCommand(args.url).run(once=args.once))
        if command == "fetch":
            from presentation.cli import FetchCommand
            return asyncio.run(FetchCommand().run())
        return _serve()
    except KeyboardInterrupt:
        return 130
    finally:
        shutdown_logging()


def cli() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
