"""Weather Finder web widget: FastAPI single page backed by one ForecastWidget."""

import asyncio

from fastapi import FastAPI
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from weatherfinder.reporting.formatters import (
    TITLE,
    format_view_dict,
    format_view_html,
)
from weatherfinder.reporting.view import LoadingView, render
from weatherfinder.widget import ForecastWidget

PAGE = """<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
{refresh}<title>{title}</title>
<style>
body {{ font-family: sans-serif; max-width: 60rem; margin: 2rem auto; }}
.cards {{ display: flex; flex-wrap: wrap; gap: 1rem; }}
.card {{ border: 1px solid #ccc; border-radius: .75rem; padding: 1rem; text-align: center; }}
.temp {{ font-size: 1.5rem; }}
.error {{ color: #b00; }}
</style>
</head>
<body>
<h1>{title}</h1>
<form id="search">
<input name="city" placeholder="What city do you want to search?" autofocus>
<button type="submit">Search</button>
</form>
<main>{body}</main>
<script>
document.getElementById("search").addEventListener("submit", async (e) => {{
  e.preventDefault();
  const city = e.target.city.value;
  e.target.city.value = "";
  await fetch("/api/search", {{
    method: "POST",
    headers: {{"Content-Type": "application/json"}},
    body: JSON.stringify({{city}}),
  }});
  location.reload();
}});
</script>
</body>
</html>
"""


class SearchRequest(BaseModel):
    city: str


def create_app(widget: ForecastWidget) -> FastAPI:
    app = FastAPI(title=TITLE, version="0.1.0")

    @app.get("/", response_class=HTMLResponse)
    def serve_page():
        view = render(widget.state)
        # Poll until the pending lookup settles
        refresh = (
            '<meta http-equiv="refresh" content="1">\n'
            if isinstance(view, LoadingView) else ""
        )
        return PAGE.format(
            title=TITLE, refresh=refresh, body=format_view_html(view)
        )

    @app.get("/api/view")
    def get_view():
        return format_view_dict(render(widget.state))

    @app.post("/api/search")
    async def search(req: SearchRequest, wait: bool = False):
        widget.set_input(req.city)
        task = widget.search()
        if task is None:
            return {"committed": False}
        if wait:
            await asyncio.shield(task)
        return {"committed": True, "city": widget.state.active_city}

    return app
