"""Command-line interface for mdbrowse."""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Optional

# Verify core dependencies
try:
    import aiohttp  # noqa: F401
    import bs4  # noqa: F401
    import html2text  # noqa: F401
    import markdown  # noqa: F401
    import rich  # noqa: F401
except ImportError as e:
    print(f"\nERROR: Missing required dependency: {e.name}", file=sys.stderr)
    print("\nmdbrowse requires all core dependencies to be installed.", file=sys.stderr)
    print("\nRecommended fixes:", file=sys.stderr)
    print("  1. For pip users: pip install --upgrade --force-reinstall mdbrowse", file=sys.stderr)
    print("  2. For development: pip install -e .[dev]", file=sys.stderr)
    sys.exit(1)

import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markdown import Markdown

from . import __version__
from .conversion.render import render_markdown
from .core.fetcher import PageFetcher
from .logging_config import setup_logging
from .models.config import MdbrowseConfig
from .models.events import EventType, FetchEvent
from .models.page import PageContent

OUTPUT_FORMATS = ("markdown", "html", "json", "raw")


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog="mdbrowse",
        description="Fetch a URL and print it as clean Markdown",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print a page as Markdown
  mdbrowse https://example.com

  # Render in the terminal
  mdbrowse https://example.com/README.md --pretty

  # Ask for HTML only and keep it unconverted
  mdbrowse https://example.com --no-accept-md --no-convert

  # Render a sitemap to an HTML file
  mdbrowse https://example.com/sitemap.xml --format html -o sitemap.html

  # Run the JSON API
  mdbrowse --serve --port 9000
        """,
    )

    parser.add_argument(
        "url",
        nargs="?",
        help="URL to fetch",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        metavar="FILE",
        help="YAML configuration file",
    )

    # Request options
    request_group = parser.add_argument_group("request options")
    request_group.add_argument(
        "--no-accept-md",
        action="store_true",
        help="Send 'Accept: text/html, */*' instead of advertising Markdown",
    )
    request_group.add_argument(
        "--no-convert",
        action="store_true",
        help="Return HTML responses unconverted",
    )

    # Network settings
    network_group = parser.add_argument_group("network settings")
    network_group.add_argument(
        "--user-agent",
        type=str,
        help="Custom User-Agent string",
    )
    network_group.add_argument(
        "--timeout",
        type=float,
        default=None,
        metavar="SECONDS",
        help="Request timeout (default: 30)",
    )
    network_group.add_argument(
        "--proxy",
        type=str,
        metavar="URL",
        help="Proxy URL",
    )

    # Server
    server_group = parser.add_argument_group("server")
    server_group.add_argument(
        "--serve",
        action="store_true",
        help="Run the JSON API instead of fetching a URL",
    )
    server_group.add_argument(
        "--host",
        type=str,
        default=None,
        help="Interface to bind (default: 127.0.0.1)",
    )
    server_group.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (default: 8080)",
    )

    # Output control
    output_group = parser.add_argument_group("output control")
    output_group.add_argument(
        "--format",
        "-f",
        choices=OUTPUT_FORMATS,
        default="markdown",
        help="Output format (default: markdown)",
    )
    output_group.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        metavar="FILE",
        help="Write output to FILE instead of stdout",
    )
    output_group.add_argument(
        "--pretty",
        action="store_true",
        help="Render Markdown output in the terminal",
    )
    output_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output",
    )
    output_group.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Suppress progress and log output",
    )

    return parser


def build_config(args: argparse.Namespace) -> MdbrowseConfig:
    """
    Build configuration from an optional YAML file plus CLI overrides.

    Raises:
        pydantic.ValidationError: On invalid settings
        OSError: If the config file cannot be read
    """
    base = MdbrowseConfig.from_yaml_file(args.config) if args.config else MdbrowseConfig()
    data: dict[str, Any] = base.model_dump(exclude_none=True)

    network = data["network"]
    if args.user_agent:
        network["user_agent"] = args.user_agent
    if args.timeout is not None:
        network["timeout"] = args.timeout
    if args.proxy:
        network["proxy"] = args.proxy

    conversion = data["conversion"]
    if args.no_accept_md:
        conversion["send_accept_md"] = False
    if args.no_convert:
        conversion["auto_convert"] = False

    server = data["server"]
    if args.host:
        server["host"] = args.host
    if args.port is not None:
        server["port"] = args.port

    # Log level
    if args.verbose:
        data["log_level"] = "DEBUG"
    elif args.quiet:
        data["log_level"] = "ERROR"

    return MdbrowseConfig.model_validate(data)


def format_page(page: PageContent, output_format: str) -> str:
    """Serialize a page document in the requested output format."""
    if output_format == "json":
        return json.dumps(page.to_wire(), indent=2, ensure_ascii=False)
    if output_format == "html":
        return render_markdown(page.markdown, page.url)
    if output_format == "raw":
        return page.raw_html or page.markdown
    return page.markdown


def run_fetch(args: argparse.Namespace, config: MdbrowseConfig) -> int:
    """Fetch one URL and write it out."""
    console = Console()
    err_console = Console(stderr=True)

    def on_event(event: FetchEvent) -> None:
        if not args.verbose:
            return
        if event.type == EventType.FETCH_STARTED:
            err_console.print(f"[cyan]{event.message}[/cyan]")
        elif event.type == EventType.FETCH_COMPLETED:
            err_console.print(f"  HTTP {event.status_code}, {event.content_type or 'no content type'}")
        elif event.type == EventType.DOCUMENT_CLASSIFIED:
            err_console.print(f"  Detected [bold]{event.kind}[/bold] document")
        elif event.type in (EventType.PAGE_CONVERTED, EventType.SITEMAP_RENDERED):
            err_console.print(f"  {event.message}")

    async def run() -> PageContent:
        async with PageFetcher(config) as fetcher:
            return await fetcher.fetch(args.url, emit=on_event)

    try:
        page = asyncio.run(run())
    except ValidationError:
        err_console.print("[red]Error:[/red] URL is required")
        return 1

    if page.is_error:
        if not args.quiet:
            err_console.print(f"[red]Error:[/red] {page.error}")
        return 1

    if not args.quiet:
        kind = "Markdown" if page.was_markdown else "HTML"
        err_console.print(f"[green]{page.title}[/green] ({kind}) {page.url}")

    output = format_page(page, args.format)

    if args.output:
        args.output.write_text(output, encoding="utf-8")
        if not args.quiet:
            err_console.print(f"Saved to {args.output}")
    elif args.pretty and args.format == "markdown":
        console.print(Markdown(output))
    else:
        sys.stdout.write(output)
        if not output.endswith("\n"):
            sys.stdout.write("\n")

    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    err_console = Console(stderr=True)

    try:
        config = build_config(args)
    except (ValidationError, OSError, yaml.YAMLError) as e:
        err_console.print(f"[red]Configuration error:[/red] {e}")
        return 1

    setup_logging(
        level=config.log_level,
        log_file=str(config.log_file) if config.log_file else None,
    )

    if args.serve:
        from .server import run_server

        run_server(config)
        return 0

    if not args.url:
        err_console.print("[red]Error:[/red] Please provide a URL to fetch")
        return 1

    return run_fetch(args, config)


if __name__ == "__main__":
    sys.exit(main())
