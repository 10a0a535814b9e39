"""
authdef-convert: convert the authentication part of an API definition file.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

Usage:
  authdef-convert to-oas legacy.json
  authdef-convert to-legacy oas.yaml -o legacy.json
"""

import argparse
import logging
import sys
from typing import List, Optional

import yaml

from ..convert import Direction, convert_document
from ..core.config import Config, OUTPUT_FORMATS
from ..errors import AuthDefError
from ..util.config import dump_config, load_config_file, save_config_file

logger = logging.getLogger(__name__)

COMMANDS = {
    "to-oas": Direction.TO_OAS,
    "to-legacy": Direction.TO_LEGACY,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="authdef-convert",
        description="Convert API authentication definitions between the legacy and modern schemas.",
    )
    parser.add_argument("command", choices=sorted(COMMANDS), help="conversion direction")
    parser.add_argument("input", help="JSON or YAML document to convert")
    parser.add_argument("-o", "--output", help="write to this file instead of stdout")
    parser.add_argument(
        "--format", choices=OUTPUT_FORMATS,
        help="output format; with -o it overrides the one implied by the file extension",
    )
    parser.add_argument("--log-level", help="logging level (default from AUTHDEF_LOG_LEVEL)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point of the authdef-convert console script."""
    args = build_parser().parse_args(argv)

    config = Config.from_env()
    if args.format:
        config.output_format = args.format
    if args.log_level:
        config.log_level = args.log_level

    try:
        config.validate()
    except AuthDefError as e:
        print(f"✗ Invalid configuration: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        document = load_config_file(args.input)
        result = convert_document(document, COMMANDS[args.command])

        if args.output:
            save_config_file(result, args.output, format_type=args.format, indent=config.indent)
            logger.info(f"Wrote {args.command} result to {args.output}")
        else:
            sys.stdout.write(dump_config(result, config.output_format, config.indent))
            sys.stdout.write("\n")

    except (OSError, ValueError, yaml.YAMLError, AuthDefError) as e:
        logger.error(f"Conversion of {args.input} failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
