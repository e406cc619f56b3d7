"""Inline tokenizer scaling.

The tokenizer re-searches both span patterns from every cursor position.
Each search that finds nothing scans the rest of the line, so a long line
holding many spans of one kind and none of the other is the quadratic case.

Run with:
    python benchmarks/benchmark_inline.py
"""

import timeit

from briefdown import SAMPLE_BRIEFING, parse, render, tokenize


def bench(label: str, func, number: int = 20) -> None:
    seconds = timeit.timeit(func, number=number) / number
    print(f"{label:<40} {seconds * 1000:8.3f} ms")


def main() -> None:
    briefing = "\n\n".join([SAMPLE_BRIEFING] * 20)
    bench("parse + render sample x20", lambda: render(parse(briefing)))

    for size in (1_000, 2_000, 4_000):
        line = "**b** `c` " * (size // 10)
        bench(f"tokenize balanced ({size} chars)", lambda line=line: tokenize(line))

    for size in (1_000, 2_000, 4_000):
        line = "`a` " * (size // 4)
        bench(f"tokenize code only ({size} chars)", lambda line=line: tokenize(line), number=3)


if __name__ == "__main__":
    main()
