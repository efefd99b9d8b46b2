"""Benchmark modeline scanning.

Compares top-only scanning (bounded by max_lines) with scans that must
read the whole source to find the bottom window.

Run with:
    pytest benchmarks/benchmark_scan.py -v --benchmark-only
"""

try:
    import pytest

    from modeline import ScanConfig, Scanner, parse_line, scan_text

    @pytest.mark.benchmark(group="scan-fixture")
    def test_benchmark_scan_fixture(benchmark, fixture_text):
        """Default settings on the 100-line fixture."""
        results = benchmark(scan_text, fixture_text)
        assert len(results) == 10

    @pytest.mark.benchmark(group="scan-large")
    def test_benchmark_top_only(benchmark, large_document):
        """Top-only scan stops after max_lines, independent of size."""
        scanner = Scanner(ScanConfig(scan_top=True, scan_bottom=False))
        results = benchmark(scanner.scan, large_document)
        assert len(results) == 1

    @pytest.mark.benchmark(group="scan-large")
    def test_benchmark_both_edges(benchmark, large_document):
        """Both edges: whole source passes through the ring buffer."""
        scanner = Scanner()
        results = benchmark(scanner.scan, large_document)
        assert len(results) == 2

    @pytest.mark.benchmark(group="parse-line")
    def test_benchmark_parse_line(benchmark):
        """Single second-form line."""
        benchmark(parse_line, "/* vim:set sw=3 foldmethod=marker: */ random text")

except ImportError:
    pass  # pytest not available
