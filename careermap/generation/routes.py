# careermap/generation/routes.py
import logging

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse

from careermap.deps import get_browser_session
from careermap.errors import FormValidationError, MissingCredentialError
from careermap.generation.forms import validate_roadmap_form
from careermap.sessions import BrowserSession
from careermap.templating import render_form

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/api-key")
def configure_api_key(
    request: Request,
    api_key: str = Form(""),
    career: str = Form(""),
    experience: str = Form(""),
    goals: str = Form(""),
    session: BrowserSession = Depends(get_browser_session),
):
    # Form values typed before the key panel was shown ride along as hidden fields
    values = {"career": career, "experience": experience, "goals": goals}
    api_key = api_key.strip()
    if not api_key:
        return render_form(request, session, status_code=400,
        error="Please enter your API key", values=values, show_api_key=True)

    session.configure(api_key)
    logger.info("API key configured for browser session")
    if any(values.values()):
        return render_form(request, session, values=values)
    return RedirectResponse(url="/", status_code=303)


@router.post("/generate")
def generate_roadmap(
    request: Request,
    career: str = Form(""),
    experience: str = Form(""),
    goals: str = Form(""),
    session: BrowserSession = Depends(get_browser_session),
):
    values = {"career": career, "experience": experience, "goals": goals}

    # Credential check comes first: show the key panel, keep what was typed
    try:
        session.require_generator()
    except MissingCredentialError as e:
        return render_form(request, session, status_code=400,
        error=str(e), values=values, show_api_key=True)

    try:
        validate_roadmap_form(career, experience, goals)
    except FormValidationError as e:
        return render_form(request, session, status_code=400,
        error=str(e), values=values, missing=e.missing)

    session.generate(career, experience, goals)
    return RedirectResponse(url="/", status_code=303)
