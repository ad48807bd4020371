"""
Post endpoints.
"""

from fastapi import APIRouter, Depends, Query, Response

from shared.exceptions import ConsoleError
from modules.posts.models import Post, PostDraft
from modules.console.console import AdminConsole
from ..dependencies import get_console
from ..models.requests import PostPatch
from .errors import DeleteNotConfirmedError

router = APIRouter()


def _failure(console: AdminConsole) -> ConsoleError:
    return console.posts.last_error or ConsoleError("Post operation failed")


@router.get("", response_model=list[Post])
async def list_posts(console: AdminConsole = Depends(get_console)) -> list[Post]:
    """
    List cached posts, newest first.
    """
    return console.controller.posts


@router.post("", response_model=list[Post], status_code=201)
async def create_post(
    draft: PostDraft,
    console: AdminConsole = Depends(get_console),
) -> list[Post]:
    """
    Create a post. Returns the re-fetched post list.
    """
    forms = console.posts
    forms.open_create()
    forms.create_dialog.update(**draft.model_dump())
    if not await forms.submit_create():
        forms.create_dialog.close()
        raise _failure(console)
    return console.controller.posts


@router.patch("/{post_id}", response_model=Post)
async def update_post(
    post_id: str,
    patch: PostPatch,
    console: AdminConsole = Depends(get_console),
) -> Post:
    """
    Update a post. Returns the stored row.
    """
    forms = console.posts
    forms.open_edit(post_id)
    forms.edit_dialog.update(**patch.model_dump(exclude_unset=True, exclude_none=True))
    if not await forms.submit_edit():
        forms.edit_dialog.close()
        raise _failure(console)
    return console.controller.get_post(post_id)


@router.delete("/{post_id}", status_code=204)
async def delete_post(
    post_id: str,
    confirm: bool = Query(default=False, description="Must be true to delete"),
    console: AdminConsole = Depends(get_console),
) -> Response:
    """
    Delete a post.
    """
    if not confirm:
        raise DeleteNotConfirmedError("post", post_id)
    if not await console.posts.delete(post_id, confirm=True):
        raise _failure(console)
    return Response(status_code=204)
