"""Benchmark incremental re-tokenization vs full rescan.

Compares a one-line edit in a large document (stops at the fixed point)
against re-tokenizing the whole document, and against the worst case of
an unclosed comment typed near the top.

Run with:
    pytest benchmarks/benchmark_incremental.py -v --benchmark-only
"""

import pytest

from dtslex import TokenizedDocument, tokenize


@pytest.mark.benchmark(group="retokenize")
def test_benchmark_single_line_edit(benchmark, large_document):
    """Benchmark a property edit that keeps the line's exit state."""
    doc = TokenizedDocument(large_document)
    index = len(doc) // 2
    original = doc.line(index)

    def edit():
        doc.set_line(index, original + " ")
        doc.set_line(index, original)

    benchmark(edit)


@pytest.mark.benchmark(group="retokenize")
def test_benchmark_full_rescan(benchmark, large_document):
    """Benchmark tokenizing the whole document (baseline for ratio)."""
    benchmark(tokenize, large_document)


@pytest.mark.benchmark(group="retokenize")
def test_benchmark_unclosed_comment_cascade(benchmark, large_document):
    """Benchmark opening and closing a comment near the top (O(document))."""
    doc = TokenizedDocument(large_document)
    original = doc.line(2)

    def cascade():
        doc.set_line(2, "/* " + original)
        doc.set_line(2, original)

    benchmark(cascade)
