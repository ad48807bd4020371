"""
Admin session endpoints.
"""

from fastapi import APIRouter, Depends, Response

from modules.session.models import AdminSession
from ..dependencies import ServiceContainer, get_container, require_session

router = APIRouter()


@router.get("", response_model=AdminSession)
async def get_session(session: AdminSession = Depends(require_session)) -> AdminSession:
    """
    Get the admitted admin session.

    Returns 401 if the session is missing, invalid or expired.
    """
    return session


@router.post("/sign-out", status_code=204)
async def sign_out(container: ServiceContainer = Depends(get_container)) -> Response:
    """
    End the admin session and close the console.
    """
    await container.sign_out()
    return Response(status_code=204)
