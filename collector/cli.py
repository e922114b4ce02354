"""CLI entry point for the data collectors."""

import argparse
import logging
import os
from datetime import date

from collector.config.loader import get_config_value, load_config, set_config_value
from collector.config.schema import CollectorConfig
from collector.ingest.places_client import PlacesClient
from collector.pipeline.beef_noodle_pipeline import BeefNoodlePipeline
from collector.pipeline.calendar_pipeline import CalendarPipeline
from collector.pipeline.copywriting_pipeline import CopywritingPipeline
from collector.pipeline.horoscope_pipeline import HoroscopePipeline
from collector.reporting.formatters import (
    format_beef_noodle_text,
    format_copywriting_text,
    format_horoscope_text,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = "configs/default.yaml"


def _iso_date(value: str) -> str:
    try:
        return date.fromisoformat(value).isoformat()
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid date {value!r}, expected YYYY-MM-DD"
        ) from None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="collector",
        description="Run-once JSON data collectors",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override a config value, e.g. http.max_retries=5",
    )

    sub = parser.add_subparsers(dest="command")

    horoscope_p = sub.add_parser("horoscope", help="Fetch daily horoscopes")
    horoscope_p.add_argument(
        "--date",
        type=_iso_date,
        help="Reference date YYYY-MM-DD (default: today)",
    )
    sub.add_parser("copywriting", help="Collect copywriting snippets")
    sub.add_parser("calendar", help="Convert raw Taiwan calendar files")
    sub.add_parser("beef-noodles", help="Search Taipei beef noodle shops")

    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display effective config")
    get_p = config_sub.add_parser("get", help="Display one config value")
    get_p.add_argument("key", help="Dotted key, e.g. http.timeout_seconds")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        config = load_config(args.config)
        config = _apply_overrides(config, args.overrides)
    except (KeyError, ValueError, IndexError) as e:
        print(f"Error: {e}")
        return 1

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "horoscope":
        return _cmd_horoscope(config, args)
    elif args.command == "copywriting":
        return _cmd_copywriting(config)
    elif args.command == "calendar":
        return _cmd_calendar(config)
    elif args.command == "beef-noodles":
        return _cmd_beef_noodles(config)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _apply_overrides(config: CollectorConfig, overrides: list[str]) -> CollectorConfig:
    for kv in overrides:
        if "=" not in kv:
            raise ValueError(f"use key=value format, got {kv!r}")
        key, value = kv.split("=", 1)
        config = set_config_value(config, key.strip(), value.strip())
    return config


def _cmd_horoscope(config: CollectorConfig, args) -> int:
    output = HoroscopePipeline(config).run(reference_date=args.date)
    print(format_horoscope_text(output))
    return 0 if output.success_count > 0 else 1


def _cmd_copywriting(config: CollectorConfig) -> int:
    results = CopywritingPipeline(config).run()
    print(format_copywriting_text(results, config.copywriting.target_count))
    total = sum(r.count for r in results.values() if r.success)
    return 0 if total > 0 else 1


def _cmd_calendar(config: CollectorConfig) -> int:
    converted = CalendarPipeline(config).run()
    print(f"Converted {len(converted)} calendar files")
    return 0 if converted else 1


def _cmd_beef_noodles(config: CollectorConfig) -> int:
    api_key = os.environ.get(config.places.api_key_env, "")
    if not api_key:
        logger.error("%s is not set", config.places.api_key_env)
        print(f"Error: set the {config.places.api_key_env} environment variable")
        return 1
    client = PlacesClient(
        api_key,
        base_url=config.places.base_url,
        timeout=config.http.timeout_seconds,
        max_result_count=config.places.max_result_count,
        language_code=config.places.language_code,
    )
    output = BeefNoodlePipeline(config, client).run()
    print(format_beef_noodle_text(output))
    return 0 if output.shops else 1


def _cmd_config(config: CollectorConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            value = get_config_value(config, args.key)
        except (KeyError, IndexError, ValueError) as e:
            print(f"Error: {e}")
            return 1
        print(value.model_dump_json(indent=2) if hasattr(value, "model_dump_json") else value)
        return 0
    else:
        print("Use: config show | config get KEY")
        return 1
