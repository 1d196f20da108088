# webpart_scaffold/cli.py
"""
Command line entry point.

Usage:
    webpart-scaffold Wiki
    webpart-scaffold Wiki --dir-name wiki --year 2024 --output test
    webpart-scaffold Wiki --dry-run
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from webpart_scaffold.config import get_settings
from webpart_scaffold.errors import SubstitutionError
from webpart_scaffold.generator import DEFAULT_TEMPLATE, WebPartGenerator

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_EXISTS = 1
EXIT_INVALID = 2

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="webpart-scaffold",
        description="Generate a web part page component for an application module",
    )
    parser.add_argument("module_name", help="Module name, used as the class name prefix")
    parser.add_argument("--dir-name", help="Directory under components/ (default: lowercase module name)")
    parser.add_argument("--year", help="Copyright year (default: current year)")
    parser.add_argument("--output", help="Output root (default: WEBPART_OUTPUT_DIR or 'test')")
    parser.add_argument("--template", default=DEFAULT_TEMPLATE, help="Template name or path")
    parser.add_argument("--lenient", action="store_true", help="Ignore tokens the template does not use")
    parser.add_argument("--force", action="store_true", help="Overwrite an existing component")
    parser.add_argument("--dry-run", action="store_true", help="Print the rendered source only")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: WEBPART_LOG_LEVEL or INFO)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    settings = get_settings()

    level = (args.log_level or settings.log_level).upper()
    if level not in LOG_LEVELS:
        print(f"❌ Invalid log level: {level}", file=sys.stderr)
        return EXIT_INVALID

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    generator = WebPartGenerator(settings)
    try:
        result = generator.generate(
            args.module_name,
            dir_name=args.dir_name,
            year=args.year,
            output_dir=args.output,
            template_name=args.template,
            strict=False if args.lenient else None,
            overwrite=args.force,
            dry_run=args.dry_run,
        )
    except SubstitutionError as e:
        logger.error(f"❌ Generation aborted: {e}")
        return EXIT_INVALID
    except FileNotFoundError as e:
        logger.error(f"❌ {e}")
        return EXIT_INVALID
    except FileExistsError as e:
        logger.error(f"❌ {e} (use --force to replace it)")
        return EXIT_EXISTS

    if result.dry_run:
        print(result.source, end="")
    else:
        print(f"✅ {result.path}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
