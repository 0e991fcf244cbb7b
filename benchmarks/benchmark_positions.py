"""Benchmark incremental position tracking vs from-scratch recounting.

Both strategies produce identical tokens; the incremental tracker only
scans the text between consecutive tokens.

Run with:
    pytest benchmarks/benchmark_positions.py -v --benchmark-only
"""

import pytest

from matchlex import ScanConfig, scan_config_context, tokenize


@pytest.mark.benchmark(group="positions")
def test_benchmark_incremental_positions(benchmark, large_document, code_spec):
    """Default scan: running line/column state."""

    def scan():
        with scan_config_context(ScanConfig(incremental_positions=True)):
            tokenize(large_document, code_spec)

    benchmark(scan)


@pytest.mark.benchmark(group="positions")
def test_benchmark_from_scratch_positions(benchmark, large_document, code_spec):
    """Baseline: recount newlines from offset 0 for every token."""

    def scan():
        with scan_config_context(ScanConfig(incremental_positions=False)):
            tokenize(large_document, code_spec)

    benchmark(scan)


@pytest.mark.benchmark(group="first-token")
def test_benchmark_first_token_latency(benchmark, large_document, code_spec):
    """Laziness: the first token costs the same regardless of text size."""
    from matchlex import token_iterator

    def first():
        next(token_iterator(large_document, code_spec))

    benchmark(first)
