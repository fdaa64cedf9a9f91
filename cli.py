"""Lightweight CLI for the facade demo.

Usage:
    facade demo              # borrowed subsystems, then facade-owned ones
    facade run               # facade-owned subsystems only
    facade run --borrowed    # client-supplied subsystems only
    facade demo -v           # also show logs on stderr at the configured level
    facade log-level DEBUG   # set log level in settings.toml
"""

import argparse
import logging
import re
import sys

from settings_service import SETTINGS_PATH, SettingsService, _load_settings, clear_settings_cache

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
APP_LOGGERS = ("client", "facades.facade", "subsystems.subsystem1", "subsystems.subsystem2")


def _configure_logging(verbose: bool) -> None:
    """Silence INFO and below unless verbose; otherwise apply settings.toml's level."""
    if not verbose:
        logging.disable(logging.INFO)
        return

    # Importing the app modules sets up their handlers first
    import client  # noqa: F401
    from logging_config import set_log_level

    set_log_level(SettingsService().log_level, *APP_LOGGERS)


def cmd_demo(args: argparse.Namespace) -> int:
    """Run both facade configurations one after the other."""
    _configure_logging(args.verbose)
    from client import run_demo

    return run_demo()


def cmd_run(args: argparse.Namespace) -> int:
    """Run a single facade configuration."""
    _configure_logging(args.verbose)
    from client import run_borrowed, run_owned

    if args.borrowed:
        run_borrowed()
    else:
        run_owned()
    return 0


def cmd_log_level(args: argparse.Namespace) -> int:
    """Get or set the log level in settings.toml."""
    settings = _load_settings(SETTINGS_PATH)
    current = settings["env"]["log_level"]

    if args.level is None:
        print(current)
        return 0

    level = args.level.upper()
    if level not in VALID_LOG_LEVELS:
        print(f"invalid level: {args.level} (expected one of {', '.join(VALID_LOG_LEVELS)})")
        return 1

    if level == current:
        print(f"already {level}")
        return 0

    content = SETTINGS_PATH.read_text()
    updated, count = re.subn(
        r'(log_level\s*=\s*)"[^"]*"',
        rf'\1"{level}"',
        content,
    )
    if count == 0:
        print(f"no double-quoted log_level found in {SETTINGS_PATH}")
        return 1
    SETTINGS_PATH.write_text(updated)
    clear_settings_cache()
    print(f"{current} → {level}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="facade", description="Facade pattern demo")
    sub = parser.add_subparsers(dest="command")

    demo_parser = sub.add_parser("demo", help="Run borrowed and facade-owned configurations")
    demo_parser.add_argument("-v", "--verbose", action="store_true", help="Show logs on stderr")

    run_parser = sub.add_parser("run", help="Run one configuration")
    run_parser.add_argument("--borrowed", action="store_true", help="Client supplies the subsystems")
    run_parser.add_argument("-v", "--verbose", action="store_true", help="Show logs on stderr")

    ll_parser = sub.add_parser("log-level", help="Get or set the log level in settings.toml")
    ll_parser.add_argument("level", nargs="?", default=None, help="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "demo":
        return cmd_demo(args)
    if args.command == "run":
        return cmd_run(args)
    if args.command == "log-level":
        return cmd_log_level(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
