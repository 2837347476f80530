"""Compare sorting approaches and rank them by average run time.

Times each job repeatedly, then summarizes the run times and prints the
jobs fastest first.

Usage:
    python examples/compare_sorting.py
"""

import logging
import random
import time

from benchstats import JobSuite, sort, statistics

ITERATIONS = 200


def measure(func, data: list[int]) -> list[float]:
    """Run func on a fresh copy of data ITERATIONS times, in microseconds."""
    run_times = []
    for _ in range(ITERATIONS):
        values = data.copy()
        start = time.perf_counter()
        func(values)
        run_times.append((time.perf_counter() - start) * 1_000_000)
    return run_times


def insertion_sort(values: list[int]) -> None:
    for i in range(1, len(values)):
        current = values[i]
        j = i - 1
        while j >= 0 and values[j] > current:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = current


def main():
    logging.basicConfig(level=logging.DEBUG)

    data = [random.randint(0, 10_000) for _ in range(500)]

    suite = JobSuite.from_mapping(
        {
            "list.sort": measure(list.sort, data),
            "sorted": measure(sorted, data),
            "insertion sort": measure(insertion_sort, data),
        }
    )

    print(f"\n{'Job':<16}{'ips':>12}{'average':>14}{'deviation':>12}{'median':>14}")
    print("-" * 68)
    for name, stats in sort(statistics(suite)):
        print(
            f"{name:<16}{stats.ips:>12.1f}{stats.average:>12.2f}μs"
            f"{stats.std_dev_ratio:>11.1%}{stats.median:>12.2f}μs"
        )


if __name__ == "__main__":
    main()
