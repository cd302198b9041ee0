## Main application entry point

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles

from careermap.errors import GenerationInProgressError
from careermap.generation.routes import router as generation_router
from careermap.logging_config import configure_logging
from careermap.roadmaps.routes import router as roadmaps_router
from careermap.sessions import SESSION_COOKIE_NAME, SessionStore
from careermap.settings import settings
from careermap.templating import BASE_DIR, render_form


def create_app(store: SessionStore | None = None) -> FastAPI:
    configure_logging(settings.log_level)

    app = FastAPI(title="Career Roadmap Generator")
    if store is None:
        store = SessionStore(idle_minutes=settings.session_idle_minutes)
    app.state.sessions = store

    app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")

    @app.middleware("http")
    async def attach_browser_session(request: Request, call_next):
        if request.url.path.startswith("/static"):
            return await call_next(request)

        sessions: SessionStore = request.app.state.sessions
        new_raw = None
        session = sessions.get(request.cookies.get(SESSION_COOKIE_NAME))
        if session is None:
            new_raw, session = sessions.create()
        request.state.browser_session = session

        response = await call_next(request)
        if new_raw:
            # No max_age: the session ends with the browser session
            response.set_cookie(
                key=SESSION_COOKIE_NAME,
                value=new_raw,
                httponly=True,
                secure=(settings.env == "prod"),
                samesite="lax",
                path="/",
            )
        return response

    @app.exception_handler(GenerationInProgressError)
    async def in_progress_handler(request: Request, exc: GenerationInProgressError):
        return render_form(request, request.state.browser_session, status_code=409,
        error="Your roadmap is still being generated. Please wait.")

    app.include_router(roadmaps_router)
    app.include_router(generation_router)
    return app


app = create_app()
