"""
Dashboard endpoints: headline stats, manual refresh and notifications.
"""

from fastapi import APIRouter, Depends

from modules.console.console import AdminConsole
from modules.console.models import DashboardStats
from modules.notifications.models import Notification
from ..dependencies import ServiceContainer, get_console, get_container, require_session

router = APIRouter()


@router.get("/stats", response_model=DashboardStats)
async def get_stats(console: AdminConsole = Depends(get_console)) -> DashboardStats:
    """
    Totals and display revenue computed from the cached lists.
    """
    return console.stats()


@router.post("/refresh", response_model=DashboardStats)
async def refresh(console: AdminConsole = Depends(get_console)) -> DashboardStats:
    """
    Re-fetch both collections.
    """
    await console.refresh()
    return console.stats()


@router.get("/notifications", response_model=list[Notification])
async def get_notifications(
    _session=Depends(require_session),
    container: ServiceContainer = Depends(get_container),
) -> list[Notification]:
    """
    Return and clear pending toasts.
    """
    return container.notifier.drain()
