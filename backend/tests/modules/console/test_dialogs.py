"""Tests for the create/edit dialog state machine."""

import pytest

from shared.exceptions import ValidationError
from modules.console.dialogs import FormDialog
from modules.console.models import DialogState
from modules.console.exceptions import DialogStateError
from modules.posts.models import PostDraft


@pytest.fixture
def dialog() -> FormDialog[PostDraft]:
    return FormDialog("create-post", PostDraft)


class TestOpenClose:
    def test_starts_closed(self, dialog):
        assert dialog.state == DialogState.CLOSED
        assert dialog.draft is None
        assert not dialog.is_open

    def test_open_empty(self, dialog):
        draft = dialog.open()

        assert dialog.state == DialogState.OPEN
        assert draft == PostDraft()

    def test_open_prefilled(self, dialog):
        dialog.open(PostDraft(title="Existing"), target_id="post-1")

        assert dialog.draft.title == "Existing"
        assert dialog.target_id == "post-1"

    def test_reopen_replaces_draft(self, dialog):
        """Only one draft per dialog."""
        dialog.open(PostDraft(title="First"))
        dialog.open()

        assert dialog.draft.title == ""

    def test_close_discards_draft(self, dialog):
        dialog.open(PostDraft(title="Unsaved"), target_id="post-1")
        dialog.close()

        assert dialog.state == DialogState.CLOSED
        assert dialog.draft is None
        assert dialog.target_id is None


class TestUpdate:
    def test_update_fields(self, dialog):
        dialog.open()
        dialog.update(title="T", published=True)

        assert dialog.draft.title == "T"
        assert dialog.draft.published is True

    def test_update_closed_dialog(self, dialog):
        with pytest.raises(DialogStateError) as exc_info:
            dialog.update(title="T")

        assert exc_info.value.code == "INVALID_DIALOG_STATE"
        assert exc_info.value.details["action"] == "edit"


class TestSubmit:
    @pytest.mark.asyncio
    async def test_success_closes(self, dialog):
        dialog.open(PostDraft(title="T"))
        seen = []

        async def action(draft):
            seen.append(dialog.state)
            return draft.title

        assert await dialog.submit(action) == "T"
        assert seen == [DialogState.SUBMITTING]
        assert dialog.state == DialogState.CLOSED

    @pytest.mark.asyncio
    async def test_failure_keeps_draft_open(self, dialog):
        dialog.open(PostDraft(title="Keep me"))

        async def action(draft):
            raise ValidationError("Please fill in title and content")

        with pytest.raises(ValidationError):
            await dialog.submit(action)

        assert dialog.state == DialogState.OPEN
        assert dialog.draft.title == "Keep me"
        assert dialog.error == "Please fill in title and content"

    @pytest.mark.asyncio
    async def test_unexpected_error_reopens(self, dialog):
        dialog.open()

        async def action(draft):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            await dialog.submit(action)

        assert dialog.state == DialogState.OPEN

    @pytest.mark.asyncio
    async def test_submit_closed_dialog(self, dialog):
        async def action(draft):
            return None

        with pytest.raises(DialogStateError):
            await dialog.submit(action)

    @pytest.mark.asyncio
    async def test_cannot_close_or_reopen_while_submitting(self, dialog):
        dialog.open()
        errors = []

        async def action(draft):
            for attempt in (dialog.close, dialog.open):
                try:
                    attempt()
                except DialogStateError as e:
                    errors.append(e.details["action"])

        await dialog.submit(action)

        assert errors == ["close", "open"]
