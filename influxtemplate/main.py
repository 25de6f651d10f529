"""Command line entry point: ping, query and write against the configured database."""

import argparse
import json
import logging
import sys
from typing import Any, Optional

from .batch import make_point
from .config import InfluxDBProperties, load_config
from .connection import InfluxDBConnectionFactory
from .converters import PointConverterRegistry
from .logging_config import configure_logging
from .template import InfluxDBTemplate


def json_point_registry() -> PointConverterRegistry:
    """Registry turning a JSON point object into a single validated point."""
    registry = PointConverterRegistry()

    @registry.converter(dict)
    def _dict_to_points(payload: dict[str, Any]) -> list[dict[str, Any]]:
        return [
            make_point(
                payload.get("measurement", ""),
                payload.get("fields") or {},
                tags=payload.get("tags"),
                time=payload.get("time"),
            )
        ]

    return registry


def build_template(config_path: Optional[str] = None) -> InfluxDBTemplate:
    """Load configuration and build a template wired for JSON point payloads."""
    config = load_config(config_path)
    factory = InfluxDBConnectionFactory(InfluxDBProperties.from_config(config))
    return InfluxDBTemplate(factory, json_point_registry())


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Write and query InfluxDB points")
    parser.add_argument("--config", default=None, help="Path to config.yaml")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--log-level", default="INFO", help="Log level name (DEBUG, INFO, WARNING, ERROR)"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("ping", help="Check the server is reachable")
    sub.add_parser("version", help="Print the server version")
    sub.add_parser("create-database", help="Create the configured database")

    query = sub.add_parser("query", help="Run an InfluxQL query and print the raw result")
    query.add_argument("query", help="InfluxQL statement")
    query.add_argument(
        "--epoch", default=None, choices=["h", "m", "s", "ms", "u", "ns"], help="Timestamp precision"
    )

    write = sub.add_parser("write", help="Write points from a JSON file ('-' for stdin)")
    write.add_argument("file", help="JSON object or list of objects with measurement/tags/fields/time")
    return parser


def _read_payloads(path: str) -> Any:
    if path == "-":
        return json.load(sys.stdin)
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def run(args: argparse.Namespace) -> int:
    """Execute one CLI command, returning the process exit code."""
    template = build_template(args.config)
    try:
        if args.command == "ping":
            print(f"pong: InfluxDB {template.ping()}")
        elif args.command == "version":
            print(template.version())
        elif args.command == "create-database":
            template.create_database()
        elif args.command == "query":
            result = template.query(args.query, args.epoch)
            print(json.dumps(result.raw, indent=2, default=str))
        elif args.command == "write":
            payloads = _read_payloads(args.file)
            if isinstance(payloads, list):
                template.write_all(payloads)
                logging.info(f"Wrote {len(payloads)} points")
            else:
                template.write(payloads)
                logging.info("Wrote 1 point")
    finally:
        template.connection_factory.close()
    return 0


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the influxtemplate CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        configure_logging(level=logging.DEBUG)
        logging.debug("Debug mode enabled")
    else:
        try:
            configure_logging(level=args.log_level)
        except ValueError as e:
            parser.error(str(e))

    try:
        code = run(args)
    except Exception as e:
        logging.error(f"{args.command} failed: {e}")
        if args.debug:
            logging.exception("Traceback")
        code = 1
    sys.exit(code)


if __name__ == "__main__":
    main()
