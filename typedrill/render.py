import sys

from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.styles import Style

from typedrill.scoring import calc_wpm

style = Style.from_dict({
    "target": "",
    "target.weak": "underline bold",
    "header": "bold",
    "row": "",
    "stats": "reverse",
    "error": "#ff0000",
})


def weak_positions(text, highlight):
    marked = set()
    for trigram in highlight:
        start = text.find(trigram)
        while start != -1:
            marked.update(range(start, start + len(trigram)))
            start = text.find(trigram, start + 1)
    return marked


def render_exercise(text, highlight = ()):
    marked = weak_positions(text, highlight)
    fragments = []
    for i, ch in enumerate(text):
        if i in marked:
            fragments.append(("class:target.weak", ch))
        else:
            fragments.append(("class:target", ch))
    return FormattedText(fragments)


def render_report(report):
    fragments = []
    for line in report.lines():
        if line.endswith(":") or line.startswith("Trigram |") or line.startswith("   Time |"):
            fragments.append(("class:header", line + "\n"))
        else:
            fragments.append(("class:row", line + "\n"))
    return FormattedText(fragments)


def render_summary(text, timeline):
    seconds = timeline[-1] if timeline else 0.0
    wpm = calc_wpm(len(text), seconds) if seconds > 0 else 0.0
    return FormattedText([
        ("class:stats", f" {len(text)} chars in {seconds:.1f}s, {wpm:.1f} WPM "),
        ("", "\n"),
    ])


def render_error(message):
    return FormattedText([("class:error", message)])


def show(fragments, file = None):
    if file is None:
        file = sys.stdout
    print_formatted_text(fragments, style = style, file = file)
