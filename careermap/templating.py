## Jinja2 templates shared by the routers
from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates

from careermap.sessions import BrowserSession

BASE_DIR = Path(__file__).resolve().parent

templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))

LEVEL_BADGES = {
    "beginner": "badge-beginner",
    "intermediate": "badge-intermediate",
    "advanced": "badge-advanced",
}

RESOURCE_ICONS = {
    "course": "\U0001F393",
    "book": "\U0001F4D6",
    "documentation": "\U0001F4C4",
    "project": "\U0001F4BB",
    "tutorial": "▶",
}

templates.env.globals["level_badge"] = lambda level: LEVEL_BADGES.get(level, "badge-default")
templates.env.globals["resource_icon"] = lambda kind: RESOURCE_ICONS.get(kind, "\U0001F310")


def render_form(request: Request, session: BrowserSession, *, status_code: int = 200,
error: str | None = None, values: dict | None = None, missing: list[str] | None = None,
show_api_key: bool = False):
    return templates.TemplateResponse(
        request,
        "form.html",
        {
            "configured": session.configured,
            "show_api_key": show_api_key,
            "error": error,
            "values": values or {},
            "missing": missing or [],
            "loading": session.guard.busy,
        },
        status_code=status_code,
    )
