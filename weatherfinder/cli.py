"""CLI entry point for the weather finder."""

import argparse
import asyncio
import logging
from collections.abc import Callable

from weatherfinder.config.loader import ConfigError, load_config, masked_config_json
from weatherfinder.config.schema import FinderConfig
from weatherfinder.reporting.formatters import (
    TITLE,
    format_view_json,
    format_view_text,
)
from weatherfinder.reporting.view import render
from weatherfinder.widget import ForecastWidget, build_widget

PROMPT = "What city do you want to search? "
QUIT_COMMANDS = (":q", ":quit")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherfinder",
        description="Multi-day weather forecast lookup",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )

    sub = parser.add_subparsers(dest="command")

    search_p = sub.add_parser("search", help="Look up one city and print it")
    search_p.add_argument("city", nargs="+", help="City name")
    search_p.add_argument("--json", action="store_true", help="JSON output")

    sub.add_parser("interactive", help="Search cities from a prompt")

    serve_p = sub.add_parser("serve", help="Run the web widget")
    serve_p.add_argument("--host", default=None)
    serve_p.add_argument("--port", type=int, default=None)

    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
        if args.command == "search":
            return _cmd_search(config, args)
        elif args.command == "interactive":
            return _cmd_interactive(config)
        elif args.command == "serve":
            return _cmd_serve(config, args)
        elif args.command == "config":
            return _cmd_config(config, args)
    except ConfigError as e:
        print(f"Error: {e}")
        return 1
    parser.print_help()
    return 1


def _cmd_search(config: FinderConfig, args) -> int:
    widget = build_widget(config)
    asyncio.run(search_once(widget, " ".join(args.city)))
    view = render(widget.state)
    print(format_view_json(view) if args.json else format_view_text(view))
    return 1 if widget.state.error_message else 0


def _cmd_interactive(config: FinderConfig) -> int:
    widget = build_widget(config)
    print(TITLE)
    print(f"Type a city and press Enter ({' or '.join(QUIT_COMMANDS)} to exit)")
    asyncio.run(run_interactive(widget))
    return 0


def _cmd_serve(config: FinderConfig, args) -> int:
    import uvicorn

    from weatherfinder.dashboard import create_app

    app = create_app(build_widget(config))
    uvicorn.run(
        app,
        host=args.host or config.dashboard.host,
        port=args.port or config.dashboard.port,
    )
    return 0


def _cmd_config(config: FinderConfig, args) -> int:
    if args.config_command == "show":
        print(masked_config_json(config))
        return 0
    print("Use: config show")
    return 1


async def search_once(widget: ForecastWidget, city: str) -> None:
    widget.set_input(city)
    widget.search()
    await widget.wait_idle()


async def run_interactive(
    widget: ForecastWidget,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """Prompt loop; each entered line is committed as a search.

    Lines are read off the event loop so lookups finish while the user types.
    Pending lookups are awaited on exit.
    """
    loop = asyncio.get_running_loop()
    last_text: str | None = None

    def show(state) -> None:
        nonlocal last_text
        text = format_view_text(render(state))
        if text != last_text:
            last_text = text
            write(text)

    widget.subscribe(show)
    while True:
        try:
            line = await loop.run_in_executor(None, read, PROMPT)
        except EOFError:
            break
        if line.strip() in QUIT_COMMANDS:
            break
        widget.set_input(line)
        widget.search()
    await widget.wait_idle()
