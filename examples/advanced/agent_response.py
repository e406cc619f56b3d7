"""From an agent call result to an e-mail body and an HTML fragment."""

from briefdown import (
    AgentResponseError,
    Briefdown,
    RenderConfig,
    SAMPLE_BRIEFING,
    build_briefing_prompt,
    extract_report_text,
)

print(build_briefing_prompt(["AAPL", "MSFT", "GOOGL"], email="me@example.com"))

# Shape returned by the agent service; the report may sit in several places.
result = {"success": True, "response": {"result": {"text": SAMPLE_BRIEFING}}}

bd = Briefdown(config=RenderConfig(render_blank=False))
doc = bd.parse(extract_report_text(result))
print(bd.render_text(doc))
print(bd.render(doc)[:200])

try:
    extract_report_text({"success": False, "error": "rate limited"})
except AgentResponseError as exc:
    print("Agent failed:", exc.message)
