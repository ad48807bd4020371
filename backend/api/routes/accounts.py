"""
Account endpoints.

Each mutation drives the console's account dialogs, so the same rules and
cache reconciliation apply as for any other console client.
"""

from fastapi import APIRouter, Depends, Query, Response

from shared.exceptions import ConsoleError
from modules.accounts.models import Account, CreateAccountRequest
from modules.console.console import AdminConsole
from ..dependencies import get_console
from ..models.requests import AccountPatch
from .errors import DeleteNotConfirmedError

router = APIRouter()


def _failure(console: AdminConsole) -> ConsoleError:
    return console.accounts.last_error or ConsoleError("Account operation failed")


@router.get("", response_model=list[Account])
async def list_accounts(console: AdminConsole = Depends(get_console)) -> list[Account]:
    """
    List cached accounts, newest first.
    """
    return console.controller.accounts


@router.post("", status_code=202)
async def create_account(
    request: CreateAccountRequest,
    console: AdminConsole = Depends(get_console),
) -> dict:
    """
    Create an account.

    Returns once the identity exists (202); the profile row, premium tier
    and refreshed list follow in the background.
    """
    forms = console.accounts
    forms.open_create()
    forms.create_dialog.update(**request.model_dump())
    account_id = await forms.submit_create()
    if account_id is None:
        forms.create_dialog.close()
        raise _failure(console)
    return {"id": account_id}


@router.patch("/{account_id}", response_model=Account)
async def update_account(
    account_id: str,
    patch: AccountPatch,
    console: AdminConsole = Depends(get_console),
) -> Account:
    """
    Update an account's display name and tier.
    """
    forms = console.accounts
    forms.open_edit(account_id)
    forms.edit_dialog.update(**patch.model_dump(exclude_unset=True, exclude_none=True))
    updated = await forms.submit_edit()
    if updated is None:
        forms.edit_dialog.close()
        raise _failure(console)
    return updated


@router.delete("/{account_id}", status_code=204)
async def delete_account(
    account_id: str,
    confirm: bool = Query(default=False, description="Must be true to delete"),
    console: AdminConsole = Depends(get_console),
) -> Response:
    """
    Delete an account and, best effort, its login identity.
    """
    if not confirm:
        raise DeleteNotConfirmedError("account", account_id)
    if not await console.accounts.delete(account_id, confirm=True):
        raise _failure(console)
    return Response(status_code=204)
