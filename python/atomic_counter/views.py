"""HTML pages for the setup form and the counter."""

from __future__ import annotations

from html import escape

from .service import CounterView, SetupView

_STYLE = """
<style>
    * { margin: 0; padding: 0; box-sizing: border-box; }
    body {
        font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
        background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
        min-height: 100vh;
        padding: 20px;
        display: flex;
        flex-direction: column;
        align-items: center;
    }
    .container {
        background: white;
        border-radius: 20px;
        padding: 30px;
        box-shadow: 0 20px 40px rgba(0,0,0,0.1);
        width: 100%;
        max-width: 400px;
        text-align: center;
    }
    .counter { font-size: 80px; font-weight: bold; color: #333; margin: 20px 0; }
    .button {
        background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
        color: white;
        border: none;
        padding: 20px 40px;
        font-size: 24px;
        font-weight: bold;
        border-radius: 50px;
        cursor: pointer;
        margin: 20px 0;
        width: 100%;
    }
    .form-group { margin: 15px 0; width: 100%; }
    input[type="text"], select {
        width: 100%;
        padding: 15px;
        font-size: 18px;
        border: 2px solid #ddd;
        border-radius: 10px;
    }
    input[type="submit"] {
        background: #667eea;
        color: white;
        border: none;
        padding: 15px;
        font-size: 18px;
        border-radius: 10px;
        width: 100%;
        margin-top: 10px;
    }
    .events-table { width: 100%; border-collapse: collapse; margin-top: 20px; font-size: 14px; }
    .events-table th, .events-table td { padding: 10px; text-align: left; border-bottom: 1px solid #eee; }
    .events-table th { background-color: #f8f9fa; color: #666; }
    h1 { color: #333; margin-bottom: 20px; font-size: 28px; }
</style>
"""

_ACTION_LABELS = {
    "increment": "➕",
    "decrement": "➖",
}


def _page(body: str, *, refresh_seconds: int | None = None) -> str:
    refresh = (
        f"<meta http-equiv='refresh' content='{refresh_seconds}'>"
        if refresh_seconds
        else ""
    )
    return (
        "<!DOCTYPE html><html lang='en'><head>"
        "<meta charset='UTF-8'>"
        "<meta name='viewport' content='width=device-width, initial-scale=1.0'>"
        f"{refresh}"
        "<title>Counter</title>"
        f"{_STYLE}"
        "</head><body><div class='container'>"
        f"{body}"
        "</div></body></html>"
    )


def render_setup() -> str:
    return _page(
        "<h1>Welcome!</h1>"
        "<form class='setup-form' method='POST'>"
        "<div class='form-group'>"
        "<input type='text' name='name' placeholder='Your name' required>"
        "</div>"
        "<div class='form-group'>"
        "<select name='team' required>"
        "<option value=''>Pick a team</option>"
        "<option value='plus'>➕ Plus</option>"
        "<option value='minus'>➖ Minus</option>"
        "</select>"
        "</div>"
        "<input type='submit' value='Start'>"
        "</form>"
    )


def render_counter(view: CounterView, *, refresh_seconds: int | None = 2) -> str:
    """Counter page. Event timestamps are deliberately left out of the table."""
    button = "➕ Increment" if view.increments else "➖ Decrement"

    rows = "".join(
        "<tr>"
        f"<td>{escape(event.name)}</td>"
        f"<td>{_ACTION_LABELS.get(event.action.value, escape(event.action.value))}</td>"
        f"<td>{event.value}</td>"
        "</tr>"
        for event in view.events
    )

    return _page(
        f"<h1>Counter: {escape(view.name)}</h1>"
        f"<div class='counter'>{view.value}</div>"
        "<form class='action-form' method='POST'>"
        "<input type='hidden' name='perform_action' value='true'>"
        f"<button type='submit' class='button'>{button}</button>"
        "</form>"
        "<h2>Recent events</h2>"
        "<table class='events-table'>"
        "<tr><th>Name</th><th>Action</th><th>Value</th></tr>"
        f"{rows}"
        "</table>",
        refresh_seconds=refresh_seconds,
    )


def render(view: SetupView | CounterView, *, refresh_seconds: int | None = 2) -> str:
    if isinstance(view, CounterView):
        return render_counter(view, refresh_seconds=refresh_seconds)
    return render_setup()
