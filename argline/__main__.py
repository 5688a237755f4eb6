"""
Argline CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import asyncio
import logging
import os
import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import Any

from argline.config import read_config
from argline.console import console
from argline.shell import Shell
from argline.themes import OneColors
from argline.utils import setup_logging


def find_argline_config() -> Path | None:
    candidates = [
        Path.cwd() / "argline.yaml",
        Path.cwd() / "argline.toml",
        Path.cwd() / ".argline.yaml",
        Path.cwd() / ".argline.toml",
        Path(os.environ.get("ARGLINE_CONFIG", "argline.yaml")),
        Path.home() / ".config" / "argline" / "argline.yaml",
        Path.home() / ".config" / "argline" / "argline.toml",
    ]
    return next((p for p in candidates if p.exists()), None)


def bootstrap(config: str | None = None) -> Path | None:
    config_path = Path(config) if config else find_argline_config()
    if config_path and str(config_path.parent) not in sys.path:
        sys.path.insert(0, str(config_path.parent))
    return config_path


def get_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="argline",
        description="Interactive shell for commands declared in an Argline config file.",
    )
    parser.add_argument("-c", "--config", help="Path to an argline.yaml or argline.toml")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output to the console"
    )
    parser.add_argument(
        "--log-mode", choices=["cli", "json"], help="Console log format"
    )
    parser.add_argument(
        "line",
        nargs="*",
        help="Run this command line once instead of starting the shell",
    )
    return parser


async def run(args: Namespace, config_path: Path) -> int:
    config = read_config(config_path)
    shell = Shell(
        config.to_registry(),
        prompt=[(OneColors.BLUE_b, config.prompt)],
    )
    if args.line:
        await shell.run_line(" ".join(args.line))
        request = shell.last_request
        return 1 if request is None or request.error else 0
    await shell.run()
    return 0


def main() -> Any:
    args = get_parser().parse_args()
    setup_logging(
        mode=args.log_mode,
        console_log_level=logging.DEBUG if args.verbose else logging.WARNING,
    )
    config_path = bootstrap(args.config)
    if not config_path:
        console.print(
            f"[{OneColors.DARK_RED}]❌ No config found.[/] "
            f"[{OneColors.COMMENT_GREY}]Create argline.yaml or set ARGLINE_CONFIG."
        )
        sys.exit(1)
    try:
        sys.exit(asyncio.run(run(args, config_path)))
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
