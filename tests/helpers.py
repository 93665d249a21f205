import json
from itertools import accumulate


def uniform_timeline(text, per_char):
    return [per_char * (i + 1) for i in range(len(text))]


def timeline_from_deltas(first, deltas):
    return list(accumulate([first] + list(deltas)))


def session_line(text, timeline, start = "2024-05-01T12:00:00+00:00"):
    return json.dumps({"start": start, "text": text, "timeline": timeline})
