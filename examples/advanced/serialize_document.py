"""Hand a parsed briefing to a front end as JSON — round-trip included."""

from briefdown import SAMPLE_BRIEFING, parse
from briefdown.serialization import from_json, to_json

doc = parse(SAMPLE_BRIEFING)

json_str = to_json(doc)
restored = from_json(json_str)

print("Original == restored:", doc == restored)
print("JSON length:", len(json_str), "chars")
