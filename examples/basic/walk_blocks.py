"""Walk the block tree with match statements and decorate each block."""

from briefdown import SAMPLE_BRIEFING, Blank, Divider, Heading, List, Paragraph, inline_runs, parse

doc = parse(SAMPLE_BRIEFING)

for block in doc:
    match block:
        case Heading(level=level):
            print(f"H{level}:", inline_runs(block)[0])
        case Paragraph():
            print("P:", len(inline_runs(block)[0]), "runs")
        case List(ordered=ordered, items=items):
            print("OL" if ordered else "UL", f"{len(items)} items")
        case Divider():
            print("---")
        case Blank():
            pass
