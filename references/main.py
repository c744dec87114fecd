#!/usr/bin/env python3
"""
Command-line test driver for the DFT implementation.

This script checks, for a transform size N:
1. Forward DFT against the naive O(N^2) DFT (log10 RMS error below -10)
2. Round trip inverse_dft(forward_dft(x)) == x
3. fftshift / ifftshift round trip

Sizes 0, 1, 2 and powers of two use the radix-2 FFT directly, every other
size goes through the Bluestein chirp-z transform.

Examples:
  main.py forward 12 -v                 # Forward DFT vs naive, verbose
  main.py roundtrip 1000 --num-tests 10 # Round trip with 10 random vectors
  main.py all 64 --benchmark            # All checks plus a benchmark
  main.py forward --all                 # Forward check on all sizes in ALL_SIZES
  main.py benchmark --min-N 2 --max-N 4096 --num-runs 20
"""

import sys
import argparse

from sympy import factorint

from fft_radix2 import is_power_of_two
from dft_harness import (
    benchmark_dft,
    test_forward_dft,
    test_roundtrip,
    test_shift_roundtrip,
)

ALL_SIZES = [1, 2, 3, 4, 5, 7, 8, 12, 16, 17, 31, 64, 100, 127, 128, 1000, 1024]


def transform_path(N: int) -> str:
    """Which algorithm handles size N."""
    if N <= 2 or is_power_of_two(N):
        return "radix-2 FFT"
    return "Bluestein chirp-z"


def describe_size(N: int) -> str:
    if N <= 1:
        return f"N={N}"
    factors = " * ".join(f"{p}^{e}" if e > 1 else f"{p}" for p, e in sorted(factorint(N).items()))
    return f"N={N} = {factors}"


def run_checks(mode: str, N: int, num_tests: int, verbose: bool = False) -> dict:
    """Run the checks selected by mode for one size; returns name -> passed."""
    results = {}

    print(f"\n🔢 {describe_size(N)} ({transform_path(N)})")
    print("-" * 40)

    if mode in ['forward', 'all']:
        passed = test_forward_dft(N, num_tests, verbose=verbose)
        results['forward'] = passed
        print(f"Forward DFT vs naive: {'✓ PASS' if passed else '✗ FAIL'}")

    if mode in ['roundtrip', 'all']:
        passed = test_roundtrip(N, num_tests, verbose=verbose)
        results['roundtrip'] = passed
        print(f"Inverse(forward(x)) == x: {'✓ PASS' if passed else '✗ FAIL'}")

    if mode in ['shift', 'all']:
        passed = test_shift_roundtrip(N, verbose=verbose)
        results['shift'] = passed
        print(f"ifftshift(fftshift(x)) == x: {'✓ PASS' if passed else '✗ FAIL'}")

    return results


def benchmark_sizes(min_N: int, max_N: int, num_runs: int = 20, verbose: bool = False) -> dict:
    """
    Time forward + inverse transforms on powers of two and on the sizes just
    above them (the worst case for the chirp-z transform).

    Returns:
        Dictionary mapping N to the average time in milliseconds.
    """
    sizes = []
    p = 1
    while p <= max_N:
        for N in (p, p + 1):
            if min_N <= N <= max_N and N not in sizes:
                sizes.append(N)
        p <<= 1

    if not sizes:
        print(f"No sizes found in range [{min_N}, {max_N}]")
        return {}

    print(f"{'N':<8} {'Path':<20} {'Time (ms)':<12}")
    print("-" * 40)

    timings = {}
    for N in sizes:
        avg = benchmark_dft(N, num_runs, verbose=verbose)
        timings[N] = avg * 1000
        print(f"{N:<8} {transform_path(N):<20} {timings[N]:<12.3f}")
    return timings


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Test driver for the radix-2 / Bluestein DFT implementation',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s forward 12 -v                 # Forward DFT vs naive, verbose
  %(prog)s roundtrip 1000 --num-tests 10 # Round trip with 10 random vectors
  %(prog)s all 64 --benchmark            # All checks plus a benchmark
  %(prog)s forward --all                 # Forward check on all built-in sizes
  %(prog)s benchmark --min-N 2 --max-N 4096 --num-runs 20
        """)

    parser.add_argument('mode', choices=['forward', 'roundtrip', 'shift', 'all', 'benchmark'],
                        help='Which check to run: forward DFT, round trip, shift, all of them, or benchmark')
    parser.add_argument('N', type=int, nargs='?',
                        help='Transform size N. Optional if --all is used or for benchmark mode.')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable verbose output')
    parser.add_argument('--benchmark', action='store_true',
                        help='Also time the transform for N')
    parser.add_argument('--all', action='store_true',
                        help=f'Check all built-in sizes ({", ".join(map(str, ALL_SIZES))})')
    parser.add_argument('--num-tests', type=int, default=3,
                        help='Number of random test vectors (default: 3)')
    parser.add_argument('--min-N', type=int, default=1,
                        help='Minimum N for benchmark mode (default: 1)')
    parser.add_argument('--max-N', type=int, default=4096,
                        help='Maximum N for benchmark mode (default: 4096)')
    parser.add_argument('--num-runs', type=int, default=20,
                        help='Number of timing runs per size (default: 20)')

    args = parser.parse_args(argv)

    if args.mode == 'benchmark':
        print("🚀 DFT BENCHMARK")
        print("=" * 60)
        timings = benchmark_sizes(args.min_N, args.max_N, args.num_runs, verbose=args.verbose)
        return 0 if timings else 1

    if not args.all and args.N is None:
        parser.error("Either specify N, use --all flag, or use benchmark mode")

    if args.all and args.N is not None:
        parser.error("Cannot specify both N and --all flag")

    if args.N is not None and args.N < 0:
        print(f"Error: N={args.N} must be non-negative")
        return 1

    sizes = ALL_SIZES if args.all else [args.N]

    print(f"Testing DFT implementation ({args.mode}) for N in {sizes}")
    print("=" * 60)

    success = True
    for N in sizes:
        results = run_checks(args.mode, N, args.num_tests, verbose=args.verbose)
        if not all(results.values()):
            success = False
        if args.benchmark:
            print("\n📊 Benchmark:")
            benchmark_dft(N, args.num_runs, verbose=True)

    print(f"\n{'='*60}")
    print("SUMMARY")
    print("=" * 60)
    status = "✅ PASS" if success else "❌ FAIL"
    print(f"DFT ({args.mode}): {status}")

    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
