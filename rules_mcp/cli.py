#!/usr/bin/env python3
"""
Rules MCP Server CLI Entry Point

Server modes (stdio, http) and content directory selection.
"""

import argparse
import asyncio
import sys

from rules_mcp import __version__, __package_name__


def print_version():
    """Print version info."""
    print(f"{__package_name__} v{__version__}")


async def main_async(args):
    if args.http:
        from rules_mcp.server_http import main as http_main
        await http_main(port=args.port, content_path=args.content_path)
    else:
        # Default to stdio
        from rules_mcp.server import run_stdio
        await run_stdio(content_path=args.content_path)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=__package_name__,
        description="MCP server for microfrontend and microservice development rules",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  rules-mcp-server                              Run in stdio mode (default)
  rules-mcp-server --content-path ./content     Serve a custom content directory
  rules-mcp-server --http --port 3000           Run HTTP server on port 3000

Environment:
  MCP_CONTENT_PATH        Content directory (overridden by --content-path)
  MCP_CONTENT_RECURSIVE   Load resources/prompts/tools from subdirectories too
  LOG_LEVEL               DEBUG, INFO, WARNING or ERROR
"""
    )

    parser.add_argument(
        "--version", "-v",
        action="store_true",
        help="Show version and exit"
    )
    parser.add_argument(
        "--stdio",
        action="store_true",
        help="Run in stdio mode (default)"
    )
    parser.add_argument(
        "--http",
        action="store_true",
        help="Run in HTTP mode"
    )
    parser.add_argument(
        "--port", "-p",
        type=int,
        default=8000,
        help="HTTP port (default: 8000)"
    )
    parser.add_argument(
        "--content-path", "-c",
        default=None,
        help="Content directory with rules/, resources/, prompts/ and tools/"
    )
    return parser


def main(argv=None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    if args.version:
        print_version()
        sys.exit(0)

    asyncio.run(main_async(args))


if __name__ == "__main__":
    main()
