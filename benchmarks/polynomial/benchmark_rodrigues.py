"""Benchmark exact Legendre coefficient generation.

Times the Rodrigues pipeline (power, derivative, GCD reduction) across
degrees to check the expected polynomial growth in cost.
"""

import time

from rodrigues.polynomial import (
    integer_polynomial,
    integer_polynomial_derivative,
    integer_polynomial_pow,
    legendre_polynomial_p_coefficients,
    shifted_legendre_polynomial_p_coefficients,
)


def benchmark_rodrigues(
    degree: int,
    n_iterations: int = 10,
    method: str = "ordinary",
) -> float:
    """Benchmark one stage of coefficient generation at a given degree.

    Parameters
    ----------
    degree : int
        Polynomial degree.
    n_iterations : int
        Number of iterations for timing.
    method : str
        'ordinary', 'shifted', 'power' or 'derivative'.

    Returns
    -------
    float
        Average time per call in milliseconds.
    """
    base = integer_polynomial([-1, 0, 1])
    power = integer_polynomial_pow(base, degree)

    if method == "ordinary":
        fn = lambda: legendre_polynomial_p_coefficients(degree)  # noqa: E731
    elif method == "shifted":
        fn = lambda: shifted_legendre_polynomial_p_coefficients(degree)  # noqa: E731
    elif method == "power":
        fn = lambda: integer_polynomial_pow(base, degree)  # noqa: E731
    elif method == "derivative":
        fn = lambda: integer_polynomial_derivative(power, degree)  # noqa: E731
    else:
        raise ValueError(f"Unknown method: {method}")

    # Warmup
    fn()

    start = time.perf_counter()
    for _ in range(n_iterations):
        fn()

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def main():
    """Run generation benchmarks across degrees."""
    degrees = [4, 8, 13, 16, 32, 64, 128]

    print("Rodrigues Coefficient Benchmark")
    print("=" * 70)
    print(
        f"{'Degree':>8} {'Power (ms)':>14} {'Deriv (ms)':>14} "
        f"{'P_n (ms)':>14} {'P~_n (ms)':>14}"
    )
    print("-" * 70)

    for degree in degrees:
        ms_power = benchmark_rodrigues(degree, method="power")
        ms_derivative = benchmark_rodrigues(degree, method="derivative")
        ms_ordinary = benchmark_rodrigues(degree, method="ordinary")
        ms_shifted = benchmark_rodrigues(degree, method="shifted")

        print(
            f"{degree:>8} {ms_power:>14.4f} {ms_derivative:>14.4f} "
            f"{ms_ordinary:>14.4f} {ms_shifted:>14.4f}"
        )

    print()
    print("Notes:")
    print("- Power uses n - 1 schoolbook convolutions of growing length")
    print("- Derivative scales each surviving term by a falling factorial")
    print("- P_n and P~_n include the GCD reduction against 2^n n! and n!")


if __name__ == "__main__":
    main()
