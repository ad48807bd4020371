"""
Console module.

The admin console page: keeps local copies of both collections in sync with
the remote store and drives the create/edit/delete dialogs.

Public API:
- AdminConsole: Page object wiring the pieces together
- SyncController: Fetching, change listeners and local cache reconciliation
- AccountForms, PostForms: Mutation dialogs per resource
- FormDialog, DialogState: Dialog state machine
- DashboardStats: Headline numbers
"""

from .console import AdminConsole
from .controller import SyncController
from .dialogs import FormDialog
from .forms import AccountForms, PostForms
from .models import DashboardStats, DialogState
from .exceptions import DialogStateError

__all__ = [
    "AdminConsole",
    "SyncController",
    "AccountForms",
    "PostForms",
    "FormDialog",
    "DialogState",
    "DashboardStats",
    "DialogStateError",
]
