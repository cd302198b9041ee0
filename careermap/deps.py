## Request dependencies
from fastapi import Request

from careermap.sessions import BrowserSession

def get_browser_session(request: Request) -> BrowserSession:
    # Attached by the session middleware in careermap.main
    return request.state.browser_session
