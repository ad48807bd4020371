"""
Create/edit dialog state machine.

    closed -> open(empty | prefilled) -> submitting -> closed     (success)
                                                    -> open+error (failure)
"""

import logging
from typing import Awaitable, Callable, Generic, Optional, TypeVar

from pydantic import BaseModel

from shared.exceptions import ConsoleError

from .models import DialogState
from .exceptions import DialogStateError

logger = logging.getLogger(__name__)

D = TypeVar("D", bound=BaseModel)
R = TypeVar("R")


class FormDialog(Generic[D]):
    """
    Holds the transient, editable copy of a record for one dialog.

    Re-opening an open dialog replaces its draft, so there is never more
    than one draft per dialog.
    """

    def __init__(self, name: str, empty: Callable[[], D]):
        self.name = name
        self._empty = empty
        self.state = DialogState.CLOSED
        self.draft: Optional[D] = None
        self.target_id: Optional[str] = None
        self.error: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.state != DialogState.CLOSED

    def _require(self, state: DialogState, action: str) -> None:
        if self.state != state:
            raise DialogStateError(self.name, self.state.value, action)

    def open(self, draft: Optional[D] = None, target_id: Optional[str] = None) -> D:
        """Open empty, or prefilled with `draft` for the record `target_id`."""
        if self.state == DialogState.SUBMITTING:
            raise DialogStateError(self.name, self.state.value, "open")
        self.draft = draft if draft is not None else self._empty()
        self.target_id = target_id
        self.error = None
        self.state = DialogState.OPEN
        return self.draft

    def update(self, **fields) -> D:
        """Edit fields of the draft."""
        self._require(DialogState.OPEN, "edit")
        self.draft = self.draft.model_copy(update=fields)
        return self.draft

    def close(self) -> None:
        if self.state == DialogState.SUBMITTING:
            raise DialogStateError(self.name, self.state.value, "close")
        self.state = DialogState.CLOSED
        self.draft = None
        self.target_id = None
        self.error = None

    async def submit(self, action: Callable[[D], Awaitable[R]]) -> R:
        """
        Run `action` on the draft.

        Closes the dialog on success. On a ConsoleError the dialog goes back
        to open with `error` set and the error is re-raised.
        """
        self._require(DialogState.OPEN, "submit")
        self.state = DialogState.SUBMITTING
        self.error = None
        try:
            result = await action(self.draft)
        except ConsoleError as e:
            self.state = DialogState.OPEN
            self.error = e.message
            raise
        except BaseException:
            self.state = DialogState.OPEN
            raise
        self.state = DialogState.OPEN
        self.close()
        return result
