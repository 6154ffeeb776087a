"""Benchmark tokenizing and parsing throughput.

Run with:
    pytest benchmarks/benchmark_parse.py -v --benchmark-only
"""

import pytest

from fresa import Parser, parse, render, tokenize


@pytest.mark.benchmark(group="tokenize")
def test_benchmark_tokenize(benchmark, large_program):
    """Benchmark the lexer alone."""
    tokens = benchmark(tokenize, large_program)
    assert tokens


@pytest.mark.benchmark(group="parse")
def test_benchmark_parse(benchmark, large_program):
    """Benchmark lexing plus parsing to a list of lines."""
    lines = benchmark(parse, large_program)
    assert len(lines) == 10_008


@pytest.mark.benchmark(group="parse")
def test_benchmark_parse_chunked(benchmark, large_program):
    """Benchmark parsing from line-sized chunks, as when reading a file."""
    chunks = large_program.splitlines(keepends=True)

    def parse_chunks():
        return list(Parser.from_source(chunks))

    lines = benchmark(parse_chunks)
    assert len(lines) == 10_008


@pytest.mark.benchmark(group="parse")
def test_benchmark_parse_dense_arguments(benchmark, dense_arcs):
    """Benchmark commands that carry the full argument set."""
    lines = benchmark(parse, dense_arcs)
    assert len(lines) == 2_000


@pytest.mark.benchmark(group="render")
def test_benchmark_render(benchmark, large_program):
    """Benchmark canonical rendering of a parsed program."""
    lines = parse(large_program)
    text = benchmark(render, lines)
    assert text.count("\n") == len(lines)
