"""Print Legendre and shifted Legendre polynomials for a range of degrees.

Run with --help for options.
"""

import argparse
import logging
import sys
from typing import Callable, Optional, Sequence

from rodrigues import __version__
from rodrigues.polynomial import (
    MAXIMUM_EXPONENT,
    RodriguesCoefficients,
    legendre_polynomial_p_coefficients,
    render_rodrigues_coefficients,
    shifted_legendre_polynomial_p_coefficients,
)

logger = logging.getLogger(__name__)

# Published values, for checking the last line of each section by eye.
LEGENDRE_REFERENCE = (
    "P(13,x) = 1/1024 ( 1300075 x^13 - 4056234 x^11 + 4849845 x^9 "
    "- 2771340 x^7 + 765765 x^5 - 90090 x^3 + 3003 x )"
)
SHIFTED_LEGENDRE_REFERENCE = (
    "/P(5,x) = 252 x^5 - 630 x^4 + 560 x^3 - 210 x^2 + 30 x - 1"
)


def _degree(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid degree: {text!r}")

    if not 0 <= value <= MAXIMUM_EXPONENT:
        raise argparse.ArgumentTypeError(
            f"degree must be between 0 and {MAXIMUM_EXPONENT}, got {value}"
        )

    return value


def _print_section(
    title: str,
    generate: Callable[[int], RodriguesCoefficients],
    max_degree: int,
    reference: Optional[str],
) -> None:
    print(title)
    for n in range(max_degree + 1):
        logger.info("generating %s for degree %d", generate.__name__, n)
        print(render_rodrigues_coefficients(generate(n)))

    if reference is not None:
        print("Reference:")
        print(reference)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the rodrigues executable."""
    parser = argparse.ArgumentParser(
        prog="rodrigues",
        description="Exact Legendre polynomial coefficients via the Rodrigues formula.",
    )
    parser.add_argument(
        "--kind",
        choices=["ordinary", "shifted", "both"],
        default="both",
        help="Which polynomials to print; default=both",
    )
    parser.add_argument(
        "--max-degree",
        metavar="N",
        type=_degree,
        default=13,
        help="Highest degree of the ordinary polynomials; default=13",
    )
    parser.add_argument(
        "--max-shifted-degree",
        metavar="N",
        type=_degree,
        default=5,
        help="Highest degree of the shifted polynomials; default=5",
    )
    parser.add_argument(
        "--no-reference",
        action="store_true",
        help="Do not print the published reference lines",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v info, -vv debug)",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=max(logging.WARNING - 10 * args.verbose, logging.DEBUG),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.kind in ("ordinary", "both"):
        _print_section(
            "Legendre polynomials of the first kind.",
            legendre_polynomial_p_coefficients,
            args.max_degree,
            None if args.no_reference else LEGENDRE_REFERENCE,
        )

    if args.kind == "both":
        print()

    if args.kind in ("shifted", "both"):
        _print_section(
            "Shifted Legendre polynomials.",
            shifted_legendre_polynomial_p_coefficients,
            args.max_shifted_degree,
            None if args.no_reference else SHIFTED_LEGENDRE_REFERENCE,
        )

    return 0
