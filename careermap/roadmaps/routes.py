# Roadmap pages
from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse

from careermap.agents.fallback import demo_roadmap
from careermap.deps import get_browser_session
from careermap.sessions import BrowserSession
from careermap.templating import render_form, templates

router = APIRouter()

@router.get("/", response_class=HTMLResponse)
def home(request: Request, configure: bool = False,
session: BrowserSession = Depends(get_browser_session)):
    if session.roadmap is None:
        return render_form(request, session, show_api_key=configure)
    return templates.TemplateResponse(request, "roadmap.html", {"roadmap": session.roadmap})

@router.post("/demo")
def try_demo(career: str = Form(""), session: BrowserSession = Depends(get_browser_session)):
    # Demo data never goes through the generator, so no API key is needed
    session.roadmap = demo_roadmap(career)
    return RedirectResponse(url="/", status_code=303)

@router.post("/reset")
def reset_roadmap(session: BrowserSession = Depends(get_browser_session)):
    session.reset()
    return RedirectResponse(url="/", status_code=303)

@router.get("/roadmap.json")
def roadmap_json(session: BrowserSession = Depends(get_browser_session)):
    if session.roadmap is None:
        return JSONResponse({"detail": "No roadmap generated yet"}, status_code=404)
    return JSONResponse(session.roadmap.to_wire())
