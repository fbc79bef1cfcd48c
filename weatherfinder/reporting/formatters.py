"""Output formatters for rendered views."""

import json
from html import escape

from weatherfinder.reporting.view import (
    EmptyView,
    ErrorView,
    ForecastView,
    LoadingView,
    View,
)

TITLE = "Weather Finder"


def format_view_text(view: View) -> str:
    """Plain text rendering for the terminal."""
    if isinstance(view, LoadingView):
        return view.text
    if isinstance(view, ErrorView):
        return f"Error: {view.message}"
    if isinstance(view, EmptyView):
        return view.hint
    lines = [f"=== {view.header} ==="]
    for card in view.cards:
        label = card.label or "-"
        lines.append(
            f"{label:<10} {card.temperature:>7}  {card.description}"
        )
    return "\n".join(lines)


def format_view_dict(view: View) -> dict:
    """JSON-ready dict for programmatic consumption."""
    if isinstance(view, LoadingView):
        return {"kind": "loading", "text": view.text}
    if isinstance(view, ErrorView):
        return {"kind": "error", "message": view.message}
    if isinstance(view, EmptyView):
        return {"kind": "empty", "hint": view.hint}
    return {
        "kind": "forecast",
        "header": view.header,
        "cards": [
            {
                "key": c.key,
                "icon_url": c.icon_url,
                "temperature": c.temperature,
                "description": c.description,
                "label": c.label,
            }
            for c in view.cards
        ],
    }


def format_view_json(view: View) -> str:
    return json.dumps(format_view_dict(view), indent=2, ensure_ascii=False)


def format_view_html(view: View) -> str:
    """HTML fragment for the web widget body."""
    if isinstance(view, LoadingView):
        return f'<p class="loading">{escape(view.text)}</p>'
    if isinstance(view, ErrorView):
        return f'<p class="error">{escape(view.message)}</p>'
    if isinstance(view, EmptyView):
        return f'<p class="hint">{escape(view.hint)}</p>'
    cards = "".join(
        '<div class="card">'
        f'<img src="{escape(c.icon_url)}" alt="{escape(c.description)}">'
        f'<p class="temp">{escape(c.temperature)}</p>'
        f'<p class="desc">{escape(c.description)}</p>'
        f'<p class="label">{escape(c.label)}</p>'
        "</div>"
        for c in view.cards
    )
    return (
        f'<h2 class="header">{escape(view.header)}</h2>'
        f'<div class="cards">{cards}</div>'
    )
