"""
Imposter CLI - Command-line interface for the game server.

Usage:
    imposter serve [--host HOST] [--port PORT] [--reload]   Run the API server
    imposter categories                                     List built-in categories
"""

import argparse
import sys


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Imposter - Word game session backend",
        prog="imposter",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the API server")
    serve_parser.add_argument("--host", help="Bind address (default: HOST or 0.0.0.0)")
    serve_parser.add_argument("--port", type=int, help="Port (default: PORT or 8080)")
    serve_parser.add_argument("--reload", action="store_true", help="Reload on code changes")

    # Categories command
    subparsers.add_parser("categories", help="List built-in categories")

    args = parser.parse_args(argv)

    if args.command == "serve":
        cmd_serve(args)
    elif args.command == "categories":
        cmd_categories(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_serve(args):
    """Run the API server with uvicorn."""
    import uvicorn

    from .config import Settings
    from .logging_config import setup_logging

    settings = Settings.from_env()
    setup_logging(level=settings.LOG_LEVEL, environment=settings.ENVIRONMENT)

    uvicorn.run(
        "imposter.api.app:app",
        host=args.host or settings.HOST,
        port=args.port or settings.PORT,
        reload=args.reload,
        log_level=settings.LOG_LEVEL.lower(),
    )


def cmd_categories(args):
    """Print the built-in categories."""
    from .catalog import list_categories

    for category in list_categories():
        print(f"{category.id:12} {category.name} ({len(category.words)} words)")


if __name__ == "__main__":
    main()
