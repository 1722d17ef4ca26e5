#!/usr/bin/env python3
"""
Gesture Configuration CLI

Command-line interface for checking and inspecting gesture configuration.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from .config.loader import read_records
from .daemon import configure_logging, run
from .errors import ConfigError
from .paths import ConfigPaths


class GestureConfigCLI:
    """CLI for gesture configuration files."""

    def __init__(self, paths: Optional[ConfigPaths] = None):
        self.paths = paths

    def _config_paths(self, args) -> ConfigPaths:
        if self.paths is None:
            self.paths = ConfigPaths.from_env(
                home=args.home,
                system_config_dir=args.system_config_dir
            )
        return self.paths

    def _target_file(self, args) -> Path:
        if args.file:
            return Path(args.file)
        return self._config_paths(args).user_config_file

    def cmd_check(self, args):
        """Parse a configuration file and report its gesture count."""
        config_file = self._target_file(args)
        records = read_records(config_file)
        applications = {record.application for record in records}

        print(f"✅ {config_file} is valid")
        print(f"  {len(records)} gesture configs for {len(applications)} applications")
        return 0

    def cmd_show(self, args):
        """Show resolved gesture records."""
        records = read_records(self._target_file(args))

        if args.json:
            print(json.dumps([record.model_dump() for record in records], indent=2))
            return 0

        for record in records:
            gesture = f"{record.gesture_type} {record.fingers}"
            if record.direction:
                gesture += f" {record.direction}"
            print(f"{record.application}: {gesture} -> {record.action_type}")
            for name, value in record.settings.items():
                print(f"    {name} = {value}")

        return 0

    def cmd_daemon(self, args):
        """Run the loader and watcher until interrupted."""
        return run(self._config_paths(args))

    def run(self, argv: Optional[List[str]] = None):
        """Run CLI."""
        parser = argparse.ArgumentParser(
            description="Gesture configuration CLI",
            prog="gesture-config"
        )
        parser.add_argument("--home", type=Path, help="Home directory (defaults to $HOME)")
        parser.add_argument("--system-config-dir", type=Path, help="Directory holding the default config")
        parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

        subparsers = parser.add_subparsers(dest="command", help="Command to execute")

        check_parser = subparsers.add_parser("check", help="Validate a configuration file")
        check_parser.add_argument("file", nargs="?", help="Configuration file (defaults to the user config)")

        show_parser = subparsers.add_parser("show", help="Show resolved gesture configs")
        show_parser.add_argument("file", nargs="?", help="Configuration file (defaults to the user config)")
        show_parser.add_argument("--json", action="store_true", help="Output as JSON")

        subparsers.add_parser("daemon", help="Load the configuration and hot-reload it")

        args = parser.parse_args(argv)

        if not args.command:
            parser.print_help()
            return 1

        configure_logging(args.verbose)

        cmd_map = {
            "check": self.cmd_check,
            "show": self.cmd_show,
            "daemon": self.cmd_daemon,
        }

        try:
            return cmd_map[args.command](args)
        except ConfigError as e:
            print(f"❌ {e.user_message()}", file=sys.stderr)
            return 1
        except KeyboardInterrupt:
            print("\nInterrupted")
            return 130


def main():
    """Main entry point."""
    cli = GestureConfigCLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
