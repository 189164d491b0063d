"""
Test suite for SessionService and NoteService.

System role: Verification of session and note use case orchestration
"""

import uuid
from datetime import datetime, timezone

import pytest

from coachdesk.application.services.note_service import NoteService
from coachdesk.application.services.session_service import SessionService
from coachdesk.core.exceptions import NotFoundError, ValidationError

SESSION_DATE = datetime(2026, 4, 2, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def session_service(test_async_db) -> SessionService:
    """Provide SessionService bound to the test database."""
    return SessionService(db=test_async_db)


@pytest.fixture
def note_service(test_async_db) -> NoteService:
    """Provide NoteService bound to the test database."""
    return NoteService(db=test_async_db)


class TestCreateSession:
    """Test suite for SessionService.create_session()."""

    @pytest.mark.asyncio
    async def test_create_should_return_detail(self, session_service, sample_user, make_client) -> None:
        client = await make_client(sample_user.id, "Jordan", company="Globex")

        session = await session_service.create_session(
            sample_user.id,
            title="  Kickoff  ",
            client_id=client.id,
            date=SESSION_DATE,
            transcript="Coach: What do you want from this?",
        )

        assert session["title"] == "Kickoff"
        assert session["client"] == {"id": client.id, "name": "Jordan", "company": "Globex"}
        assert session["tags"] == []
        assert session["resources"] == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "title, has_client, date, message",
        [
            ("", True, SESSION_DATE, "Title is required"),
            ("Kickoff", False, SESSION_DATE, "Client is required"),
            ("Kickoff", True, None, "Session date is required"),
        ],
    )
    async def test_create_should_validate_required_fields(
        self, session_service, sample_user, make_client, title, has_client, date, message
    ) -> None:
        client = await make_client(sample_user.id)

        with pytest.raises(ValidationError) as exc_info:
            await session_service.create_session(
                sample_user.id,
                title=title,
                client_id=client.id if has_client else None,
                date=date,
            )

        assert exc_info.value.message == message

    @pytest.mark.asyncio
    async def test_create_should_reject_foreign_client(
        self, session_service, sample_user, other_user, make_client
    ) -> None:
        foreign = await make_client(other_user.id)

        with pytest.raises(NotFoundError) as exc_info:
            await session_service.create_session(
                sample_user.id, title="Kickoff", client_id=foreign.id, date=SESSION_DATE
            )

        assert exc_info.value.message == "Client not found"


class TestUpdateSession:
    """Test suite for SessionService.update_session()."""

    @pytest.mark.asyncio
    async def test_update_should_only_touch_given_fields(
        self, session_service, sample_user, make_client, make_session
    ) -> None:
        client = await make_client(sample_user.id)
        session = await make_session(sample_user.id, client.id, transcript="original")

        updated = await session_service.update_session(
            sample_user.id, session.id, {"summary": "Edited summary"}
        )

        assert updated["summary"] == "Edited summary"
        assert updated["transcript"] == "original"
        assert updated["title"] == "Quarterly check-in"

    @pytest.mark.asyncio
    async def test_update_should_reject_blank_title(
        self, session_service, sample_user, make_client, make_session
    ) -> None:
        client = await make_client(sample_user.id)
        session = await make_session(sample_user.id, client.id)

        with pytest.raises(ValidationError):
            await session_service.update_session(sample_user.id, session.id, {"title": " "})

    @pytest.mark.asyncio
    async def test_update_should_raise_for_unknown_session(self, session_service, sample_user) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            await session_service.update_session(sample_user.id, uuid.uuid4(), {"summary": "x"})

        assert exc_info.value.message == "Session not found"


class TestSessionTags:
    """Test suite for tag assignment."""

    @pytest.mark.asyncio
    async def test_update_tags_should_keep_only_known_session_tags(
        self, session_service, sample_user, make_client, make_session, seeded_tags
    ) -> None:
        # Arrange
        client = await make_client(sample_user.id)
        session = await make_session(sample_user.id, client.id)

        # Act
        updated = await session_service.update_session_tags(
            sample_user.id, session.id, ["Leadership", "framework", "made-up", "delegation"]
        )

        # Assert
        assert [t["name"] for t in updated["tags"]] == ["delegation", "leadership"]
        assert all(t["category"] == "session" for t in updated["tags"])

    @pytest.mark.asyncio
    async def test_list_session_tags_should_return_vocabulary(self, session_service, seeded_tags) -> None:
        tags = await session_service.list_session_tags()

        assert len(tags) == 23
        assert [t["name"] for t in tags] == sorted(t["name"] for t in tags)


class TestListSessions:
    """Test suite for session listings."""

    @pytest.mark.asyncio
    async def test_list_client_sessions_should_order_by_date_desc(
        self, session_service, sample_user, make_client, make_session
    ) -> None:
        client = await make_client(sample_user.id)
        await make_session(sample_user.id, client.id, "Older", datetime(2026, 1, 5, tzinfo=timezone.utc))
        await make_session(sample_user.id, client.id, "Newer", datetime(2026, 2, 5, tzinfo=timezone.utc))

        sessions = await session_service.list_client_sessions(sample_user.id, client.id)

        assert [s["title"] for s in sessions] == ["Newer", "Older"]
        assert sessions[0]["resource_count"] == 0

    @pytest.mark.asyncio
    async def test_list_should_scope_to_user(
        self, session_service, sample_user, other_user, make_client, make_session
    ) -> None:
        mine = await make_client(sample_user.id)
        theirs = await make_client(other_user.id)
        await make_session(sample_user.id, mine.id, "Mine")
        await make_session(other_user.id, theirs.id, "Theirs")

        sessions = await session_service.list_sessions(sample_user.id)

        assert [s["title"] for s in sessions] == ["Mine"]

    @pytest.mark.asyncio
    async def test_delete_should_remove_session(
        self, session_service, sample_user, make_client, make_session
    ) -> None:
        client = await make_client(sample_user.id)
        session = await make_session(sample_user.id, client.id)

        await session_service.delete_session(sample_user.id, session.id)

        with pytest.raises(NotFoundError):
            await session_service.get_session(sample_user.id, session.id)


class TestNoteService:
    """Test suite for NoteService."""

    @pytest.mark.asyncio
    async def test_create_and_list_notes(self, note_service, sample_user, make_client) -> None:
        client = await make_client(sample_user.id)

        note = await note_service.create_note(sample_user.id, client.id, "  Wants board exposure ")
        notes = await note_service.list_notes(sample_user.id, client.id)

        assert note["content"] == "Wants board exposure"
        assert [n["id"] for n in notes] == [note["id"]]

    @pytest.mark.asyncio
    async def test_create_should_reject_blank_content(self, note_service, sample_user, make_client) -> None:
        client = await make_client(sample_user.id)

        with pytest.raises(ValidationError) as exc_info:
            await note_service.create_note(sample_user.id, client.id, "   ")

        assert exc_info.value.message == "Note content is required"

    @pytest.mark.asyncio
    async def test_update_should_hide_other_users_notes(
        self, note_service, sample_user, other_user, make_client
    ) -> None:
        foreign_client = await make_client(other_user.id)
        note = await note_service.create_note(other_user.id, foreign_client.id, "Private")

        with pytest.raises(NotFoundError) as exc_info:
            await note_service.update_note(sample_user.id, note["id"], "Mine now")

        assert exc_info.value.message == "Note not found"

    @pytest.mark.asyncio
    async def test_delete_should_remove_note(self, note_service, sample_user, make_client) -> None:
        client = await make_client(sample_user.id)
        note = await note_service.create_note(sample_user.id, client.id, "Temporary")

        await note_service.delete_note(sample_user.id, note["id"])

        assert await note_service.list_notes(sample_user.id, client.id) == []
