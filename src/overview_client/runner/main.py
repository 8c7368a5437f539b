"""
CLI main entry point.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import requests

from ..api_client import APIClient, APIClientError, OverviewError
from ..config import ConfigValidationError, OverviewConfig, create_default_config, load_config

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_cli() -> argparse.ArgumentParser:
    """Create CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="overview-client",
        description="Query documents and the plugin store of an Overview server",
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=Path("config.yaml"),
        help="Path to config file (default: config.yaml)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # ids command
    ids_parser = subparsers.add_parser("ids", help="List the document ids of a document set")
    ids_parser.add_argument("--document-set", required=True, help="Document set id")

    # documents command
    documents_parser = subparsers.add_parser(
        "documents", help="Stream all documents of a document set"
    )
    documents_parser.add_argument("--document-set", required=True, help="Document set id")
    documents_parser.add_argument(
        "--fields",
        type=str,
        default="id,text",
        help="Comma-separated fields to return (default: id,text)",
    )
    documents_parser.add_argument("--sort", type=str, help="Sort string")

    # document command
    document_parser = subparsers.add_parser("document", help="Fetch a single document")
    document_parser.add_argument("--document-set", required=True, help="Document set id")
    document_parser.add_argument("--document", required=True, help="Document id")

    # store commands
    subparsers.add_parser("state", help="Show the store state")

    set_state_parser = subparsers.add_parser("set-state", help="Replace the store state")
    set_state_parser.add_argument("state", help="New state as JSON")

    subparsers.add_parser("objects", help="List all store objects")

    object_parser = subparsers.add_parser("object", help="Fetch a single store object")
    object_parser.add_argument("object_id", help="Store object id")

    create_parser = subparsers.add_parser("create-object", help="Create a store object")
    create_parser.add_argument("state", help="Object as JSON")

    update_parser = subparsers.add_parser("update-object", help="Replace a store object")
    update_parser.add_argument("object_id", help="Store object id")
    update_parser.add_argument("state", help="Object as JSON")

    # init-config command
    subparsers.add_parser("init-config", help="Write a default config file")

    return parser


def print_result(result: Any) -> None:
    """Print an executor result: streamed responses line by line, JSON otherwise."""
    if isinstance(result, requests.Response):
        try:
            for line in result.iter_lines(decode_unicode=True):
                if line:
                    print(line)
        finally:
            result.close()
        return

    print(json.dumps(result, indent=2, ensure_ascii=False))


def run_command(client: APIClient, parsed: argparse.Namespace) -> Any:
    """Run one parsed command against the client and return the executor's result."""
    command = parsed.command

    if command == "ids":
        return client.select_document_set(parsed.document_set).get_document_ids()
    elif command == "documents":
        fields = [f.strip() for f in parsed.fields.split(",") if f.strip()]
        return client.select_document_set(parsed.document_set).get_documents(
            fields=fields or None,
            sort=parsed.sort,
        )
    elif command == "document":
        return client.select_document_set(parsed.document_set).select_document(
            parsed.document
        ).get()
    elif command == "state":
        return client.select_store().get_state()
    elif command == "set-state":
        return client.select_store().set_state(json.loads(parsed.state))
    elif command == "objects":
        return client.select_store().get_objects()
    elif command == "object":
        return client.select_store_object(parsed.object_id).get()
    elif command == "create-object":
        return client.create_object(json.loads(parsed.state))
    elif command == "update-object":
        return client.select_store_object(parsed.object_id).update_store_object(
            json.loads(parsed.state)
        )

    raise ValueError(f"Unknown command: {command}")


def cmd_init_config(config_path: Path) -> int:
    """Write a default config file unless one exists."""
    if config_path.exists():
        print(f"❌ Config file already exists: {config_path}")
        return 1

    create_default_config(config_path)
    print(f"✓ Wrote default config to {config_path}")
    return 0


def main(args: list[str] | None = None, client: APIClient | None = None) -> int:
    """Main entry point."""
    parser = create_cli()
    parsed = parser.parse_args(args)

    setup_logging(parsed.verbose)

    if not parsed.command:
        parser.print_help()
        return 1

    if parsed.command == "init-config":
        return cmd_init_config(parsed.config)

    if client is None:
        try:
            config: OverviewConfig = load_config(parsed.config)
        except (ConfigValidationError, OSError, ValueError) as e:
            print(f"❌ Failed to load config: {e}")
            return 1

        errors = config.validate()
        if errors:
            for error in errors:
                print(f"❌ Invalid config: {error}")
            return 1

        client = APIClient.from_config(config)

    try:
        result = run_command(client, parsed)
    except json.JSONDecodeError as e:
        print(f"❌ Invalid JSON argument: {e}")
        return 1
    except APIClientError as e:
        print(f"❌ {e}")
        return 1
    except OverviewError as e:
        logger.debug("Request failed", exc_info=True)
        print(f"❌ {e}")
        return 1

    print_result(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
