"""Command line entry point: generate a file of synthetic personnel records."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .errors import ConfigError
from .synthetic.models import RecordKind
from .synthetic.pipeline import GenerationPipeline
from .utils.config import GeneratorConfig, load_config

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate synthetic employee, teacher or professor records as Avro."
    )
    parser.add_argument(
        "--count", "-n",
        type=int,
        required=True,
        help="Number of records to generate",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=42,
        help="Random seed for reproducibility (default: 42)",
    )
    parser.add_argument(
        "--output", "-o",
        type=Path,
        required=True,
        help="Output file (a .csv suffix inserts a ';' separator after the first record)",
    )
    parser.add_argument(
        "--kind", "-k",
        default="Employee",
        help="Record kind: Employee, Teacher or Professor (or E/T/P)",
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Optional YAML file with generator settings",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s: %(message)s")

    try:
        config = load_config(args.config) if args.config else GeneratorConfig()
        pipeline = GenerationPipeline(
            count=args.count,
            seed=args.seed,
            output_path=args.output,
            kind=RecordKind.parse(args.kind),
            config=config,
        )
    except ConfigError as e:
        logger.error("%s", e)
        return 1

    logger.info(
        "Generating %d %s records (seed %d) into %s",
        args.count,
        pipeline.kind.value.lower(),
        args.seed,
        args.output,
    )
    return 0 if pipeline.run() else 1


if __name__ == "__main__":
    sys.exit(main())
