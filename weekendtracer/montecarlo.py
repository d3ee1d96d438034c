"""Monte Carlo integration experiments."""

from __future__ import annotations

import argparse
import math
import sys
from typing import Optional, Sequence

from weekendtracer.util import PI, random_double


def _check_count(n: int) -> None:
    if n < 1:
        raise ValueError("the sample count must be at least 1")


def estimate_cos_cubed(n: int = 1_000_000) -> float:
    """Estimate the integral of cos^3(theta) over the hemisphere (pi/2) with uniform samples."""
    _check_count(n)
    pdf = 1.0 / (2.0 * PI)
    total = 0.0
    for _ in range(n):
        cos_theta = 1 - random_double()
        total += cos_theta ** 3 / pdf
    return total / n


def estimate_halfway(n: int = 10_000) -> tuple[float, float, float]:
    """Sample exp(-x/2pi) sin^2(x) on [0, 2pi).

    Returns the average sample, the estimated area under the curve and the x at
    which half of the area has been accumulated.
    """
    _check_count(n)
    samples = []
    total = 0.0
    for _ in range(n):
        x = random_double(0, 2 * PI)
        sin_x = math.sin(x)
        p_x = math.exp(-x / (2 * PI)) * sin_x * sin_x
        total += p_x
        samples.append((x, p_x))

    samples.sort(key=lambda s: s[0])

    half_sum = total / 2.0
    halfway_point = 0.0
    accum = 0.0
    for x, p_x in samples:
        accum += p_x
        if accum >= half_sum:
            halfway_point = x
            break

    return total / n, 2 * PI * total / n, halfway_point


def integrate_x_sq(n: int = 1) -> float:
    """Integrate x^2 over [0, 2] by importance sampling with the matching density."""
    _check_count(n)
    total = 0.0
    for _ in range(n):
        x = 8.0 * random_double() ** (1.0 / 3.0)
        total += x * x / ((3.0 / 8.0) * x * x)
    return total / n


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="montecarlo", description=__doc__)
    sub = parser.add_subparsers(dest="experiment", required=True)
    for name, default in (("cos-cubed", 1_000_000), ("halfway", 10_000), ("x-sq", 1)):
        cmd = sub.add_parser(name)
        cmd.add_argument("-n", type=int, default=default, help="number of samples")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parser().parse_args(argv)
    if args.experiment == "cos-cubed":
        print(f"PI/2 = {PI / 2.0:.12f}")
        print(f"Estimate = {estimate_cos_cubed(args.n):.12f}")
    elif args.experiment == "halfway":
        average, area, halfway = estimate_halfway(args.n)
        print(f"Average = {average:.12f}")
        print(f"Area under curve = {area:.12f}")
        print(f"Halfway = {halfway:.12f}")
    else:
        print(f"I = {integrate_x_sq(args.n):.12f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())