"""Parse and render a briefing in 3 lines — zero config, zero deps."""

from briefdown import parse, render

doc = parse("### AAPL\n- **Current Price:** $174.58\n- **P/E Ratio:** `29.5`")
print(render(doc))
