"""Command-line interface for the probe-point potential."""

import argparse
import json
import logging
import sys
from typing import List, Optional

from ...core.config import DEFAULT_EPSILON_H, DEFAULT_SIGMA
from ...core.exceptions import LJProbeError
from ...core.services.potential_service import PotentialService
from ...infrastructure.loaders import LOADERS, get_loader
from ...utils.helpers import setup_logging, validate_positive_float
from ..report import ReportWriter

logger = logging.getLogger(__name__)


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Lennard-Jones potential of a point against protein alpha carbons (BLN model)"
    )
    parser.add_argument("inputfile", help="Structure file (PDB-style ATOM records)")
    parser.add_argument("x", type=float, help="Query point x coordinate (Angstroms)")
    parser.add_argument("y", type=float, help="Query point y coordinate (Angstroms)")
    parser.add_argument("z", type=float, help="Query point z coordinate (Angstroms)")
    parser.add_argument(
        "--epsilon-h",
        type=float,
        default=DEFAULT_EPSILON_H,
        help="Hydrophobic well depth (kcal/mol)",
    )
    parser.add_argument(
        "--sigma",
        type=validate_positive_float,
        default=DEFAULT_SIGMA,
        help="Characteristic interaction distance (Angstroms)",
    )
    parser.add_argument(
        "--parser",
        choices=sorted(LOADERS),
        default="whitespace",
        help="Whitespace-split fields or fixed-width PDB columns",
    )
    parser.add_argument("--report", help="Write a per-residue CSV report to this path")
    parser.add_argument(
        "--json", action="store_true", help="Print the result summary as JSON"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Show detailed processing information"
    )
    parser.add_argument("--log-file", help="Also write log messages to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the potential CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose, log_file=args.log_file)

    try:
        service = PotentialService(loader=get_loader(args.parser))
        result = service.compute(
            args.inputfile,
            args.x,
            args.y,
            args.z,
            epsilon_h=args.epsilon_h,
            sigma=args.sigma,
        )
    except LJProbeError as e:
        logger.error(str(e))
        return 1

    writer = ReportWriter()
    if args.report:
        writer.write_csv(result, args.report)

    if args.json:
        print(json.dumps(result.summary(), indent=2))
    else:
        if args.verbose:
            print(writer.format_summary(result))
        print(result.total)
    return 0


if __name__ == "__main__":
    sys.exit(main())
