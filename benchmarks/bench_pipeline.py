"""
seqpipe Benchmarks
==================

Compares lazy pipelines against the eager list-based code they replace.
The interesting cases are the short-circuiting ones: a lazy ``take`` or
``find`` touches a handful of elements where the eager version builds
every intermediate list in full.

Run with:
    python benchmarks/bench_pipeline.py
"""

from itertools import count

from seqpipe import Sequence
from seqpipe.utils.helpers import time_calls

N = 200_000


def ms(ns):
    return f"{ns / 1_000_000:.2f} ms"


def eager_take():
    squares = [x * x for x in range(N)]
    evens = [x for x in squares if x % 2 == 0]
    return evens[:10]


def lazy_take():
    return Sequence(range(N)).map(lambda x: x * x).filter(lambda x: x % 2 == 0).take(10).collect()


def eager_sum():
    return sum([x + 1 for x in [x * 3 for x in range(N)]])


def lazy_sum():
    return Sequence(range(N)).map(lambda x: x * 3).map(lambda x: x + 1).sum()


def lazy_find_infinite():
    return Sequence(count()).map(lambda x: x * 7).find(lambda x: x > 10_000)


CASES = [
    ("take(10) after map/filter", eager_take, lazy_take),
    ("sum over chained maps", eager_sum, lazy_sum),
]


def main():
    for name, eager, lazy in CASES:
        assert eager() == lazy(), name
        baseline = time_calls(eager, iterations=5)['median_ns']
        chained = time_calls(lazy, iterations=5)['median_ns']
        print(f"{name:<30} eager {ms(baseline):>10}  lazy {ms(chained):>10}"
              f"  (ratio {baseline / max(chained, 1):.2f})")

    found = time_calls(lazy_find_infinite, iterations=5)['median_ns']
    print(f"{'find on count()':<30} lazy {ms(found):>10}")


if __name__ == "__main__":
    main()
