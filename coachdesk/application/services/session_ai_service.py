"""
Session AI service orchestrator.

Runs the session analysis pipeline: five Claude calls in parallel
(summary, follow-up email, resource discovery, custom analysis, tags),
best-effort parsing, and write-back to the session. Also builds
preparation notes from a client's recent sessions.

Tag and resource persistence is best-effort: the analysis text is
committed first, and a failure while linking tags or resources is logged
without failing the request.

Dependencies: coachdesk.core.ai, coachdesk.core.encryption, coachdesk.boundary.db.CRUD
System role: AI use case orchestration
"""

import asyncio
import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from coachdesk.application.services.context_document_service import ContextDocumentService
from coachdesk.boundary.db.CRUD.client_crud import client_crud
from coachdesk.boundary.db.CRUD.resource_crud import resource_crud
from coachdesk.boundary.db.CRUD.session_crud import session_crud
from coachdesk.boundary.db.CRUD.tag_crud import tag_crud
from coachdesk.boundary.db.CRUD.template_crud import template_crud
from coachdesk.boundary.db.CRUD.user_crud import user_crud
from coachdesk.boundary.db.models import CoachingSessionModel, PromptType, TagCategory, UserModel
from coachdesk.configs import get_settings
from coachdesk.core.ai.claude_client import ClaudeClient, build_prompt
from coachdesk.core.ai.prompts import (
    FOLLOWUP_EMAIL_PROMPT,
    NO_PREVIOUS_SESSIONS_NOTE,
    PREPARATION_FALLBACK_PROMPT,
    RESOURCE_DISCOVERY_PROMPT,
    SESSION_TAGS_PROMPT,
    SUMMARY_PROMPT,
)
from coachdesk.core.ai.response_parsers import parse_resources, parse_tags
from coachdesk.core.ai.schemas import ParsedResource
from coachdesk.core.encryption import SecretCipher, get_cipher
from coachdesk.core.exceptions import APIKeyNotConfiguredError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

API_KEY_MISSING_MESSAGE = "Please configure your Claude API key in settings to use AI analysis"
API_KEY_NOT_CONFIGURED_MESSAGE = "No API key configured. Please add your Claude API key in settings."
API_KEY_UNREADABLE_MESSAGE = (
    "Failed to decrypt API key. Please reconfigure your Claude API key in settings."
)
NO_TRANSCRIPT_MESSAGE = "No transcript available for analysis"
HISTORY_EXCERPT_CHARS = 500


def format_session_history(sessions: list[CoachingSessionModel]) -> str:
    """Render past sessions for the preparation prompt."""
    blocks = []
    for s in sessions:
        date = s.date.strftime("%Y-%m-%d") if s.date else "No date"
        body = s.summary or (s.transcript or "")[:HISTORY_EXCERPT_CHARS]
        blocks.append(f"\nSession: {s.title} ({date})\n{body}\n")
    return "\n---\n".join(blocks)


class SessionAIService:
    """AI analysis and preparation orchestrator."""

    def __init__(
        self,
        db: AsyncSession,
        claude: ClaudeClient,
        cipher: SecretCipher | None = None,
    ) -> None:
        """
        Initialize session AI service.

        Args:
            db: Async SQLAlchemy session
            claude: Claude client used for all completions
            cipher: Secret cipher (built from settings on first use if omitted)
        """
        self.db = db
        self.claude = claude
        self._cipher = cipher

    @property
    def cipher(self) -> SecretCipher:
        if self._cipher is None:
            self._cipher = get_cipher()
        return self._cipher

    async def _get_user(self, user_id: str) -> UserModel:
        user = await user_crud.get_by_id(self.db, user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    async def _get_session_with_transcript(self, user_id: str, session_id: UUID) -> CoachingSessionModel:
        session = await session_crud.get_owned(self.db, session_id, user_id)
        if session is None:
            raise NotFoundError("Session", session_id)
        if not session.transcript:
            raise ValidationError(NO_TRANSCRIPT_MESSAGE, field="transcript")
        return session

    def _credentials(
        self,
        user: UserModel,
        missing_message: str = API_KEY_NOT_CONFIGURED_MESSAGE,
    ) -> tuple[str, str]:
        """
        Return (api_key, model) for the user.

        Raises:
            APIKeyNotConfiguredError: If no key is stored or it cannot be decrypted
        """
        if not user.claude_api_key:
            raise APIKeyNotConfiguredError(missing_message)
        api_key = self.cipher.safe_decrypt(user.claude_api_key)
        if not api_key:
            raise APIKeyNotConfiguredError(API_KEY_UNREADABLE_MESSAGE)
        return api_key, user.claude_model or get_settings().llm.default_model

    async def _context(self, user_id: str) -> str:
        return await ContextDocumentService(self.db).get_combined_content(user_id)

    async def analyze_session(self, user_id: str, session_id: UUID) -> dict:
        """
        Analyze a session transcript and store the results.

        The summary, follow-up email and custom analysis are written to the
        session (empty answers become NULL). Known session tags replace the
        session's tags when at least one matches. Suggested resources are
        added to the library and linked to the client and session.

        Args:
            user_id: Current user id
            session_id: Session UUID

        Returns:
            dict: summary, follow_up_email, analysis, tags, resources

        Raises:
            NotFoundError: If the session is not owned by the user
            ValidationError: If the session has no transcript
            APIKeyNotConfiguredError: If the user has no usable API key
            AIServiceError: If any Claude call fails
        """
        session = await self._get_session_with_transcript(user_id, session_id)
        user = await self._get_user(user_id)
        api_key, model = self._credentials(user, API_KEY_MISSING_MESSAGE)
        context = await self._context(user_id)
        transcript = session.transcript
        client_id = session.client_id
        custom_prompt = user.analysis_prompt

        logger.info(
            "Starting session analysis",
            extra={
                "session_id": str(session_id),
                "model": model,
                "has_context": bool(context),
                "has_custom_prompt": bool(custom_prompt),
            },
        )

        async def skipped() -> str:
            return ""

        results = await asyncio.gather(
            self.claude.complete(build_prompt(SUMMARY_PROMPT, transcript, context), api_key, model),
            self.claude.complete(build_prompt(FOLLOWUP_EMAIL_PROMPT, transcript, context), api_key, model),
            self.claude.complete(build_prompt(RESOURCE_DISCOVERY_PROMPT, transcript), api_key, model),
            self.claude.complete(build_prompt(custom_prompt, transcript, context), api_key, model)
            if custom_prompt
            else skipped(),
            self.claude.complete(build_prompt(SESSION_TAGS_PROMPT, transcript), api_key, model),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, BaseException):
                raise result
        summary, follow_up_email, resources_text, analysis, tags_text = results

        resources = parse_resources(resources_text, limit=get_settings().llm.max_resources)
        tag_names = parse_tags(tags_text)

        await session_crud.update(
            self.db,
            session,
            summary=summary or None,
            follow_up_email=follow_up_email or None,
            analysis=analysis or None,
        )
        await self.db.commit()

        await self._assign_session_tags(user_id, session_id, tag_names)
        await self._save_session_resources(client_id, session_id, resources)

        logger.info(
            "Session analysis complete",
            extra={
                "session_id": str(session_id),
                "tag_count": len(tag_names),
                "resource_count": len(resources),
            },
        )
        return {
            "summary": summary or None,
            "follow_up_email": follow_up_email or None,
            "analysis": analysis or None,
            "tags": tag_names,
            "resources": resources,
        }

    async def _assign_session_tags(self, user_id: str, session_id: UUID, tag_names: list[str]) -> None:
        try:
            tags = await tag_crud.get_by_names(self.db, tag_names, TagCategory.SESSION)
            if not tags:
                return
            session = await session_crud.get_with_tags(self.db, session_id, user_id)
            if session is None:
                return
            session.tags = list(tags)
            await self.db.commit()
        except SQLAlchemyError:
            logger.exception("Failed to assign session tags", extra={"session_id": str(session_id)})
            await self.db.rollback()

    async def _save_session_resources(
        self,
        client_id: UUID,
        session_id: UUID,
        resources: list[ParsedResource],
    ) -> None:
        for parsed in resources:
            try:
                resource = await resource_crud.find_by_title_and_type(self.db, parsed.title, parsed.type)
                if resource is None:
                    tags = await tag_crud.get_by_names(
                        self.db,
                        [t.strip().lower() for t in parsed.tags if t.strip()],
                        TagCategory.RESOURCE,
                    )
                    resource = await resource_crud.create(
                        self.db,
                        title=parsed.title,
                        type=parsed.type,
                        url=parsed.url,
                        description=parsed.description or None,
                        tags=list(tags),
                    )
                await resource_crud.link_to_client(
                    self.db,
                    client_id=client_id,
                    resource_id=resource.id,
                    session_id=session_id,
                    suggested_by="ai",
                )
                await self.db.commit()
            except SQLAlchemyError:
                logger.exception(
                    "Failed to save suggested resource",
                    extra={"session_id": str(session_id), "resource_title": parsed.title},
                )
                await self.db.rollback()

    async def reanalyze_session(self, user_id: str, session_id: UUID) -> dict:
        """
        Clear previous AI output and tags, then analyze again.

        Raises:
            NotFoundError: If the session is not owned by the user
        """
        session = await session_crud.get_with_tags(self.db, session_id, user_id)
        if session is None:
            raise NotFoundError("Session", session_id)
        session.summary = None
        session.follow_up_email = None
        session.analysis = None
        session.tags = []
        await self.db.flush()
        logger.info("Cleared previous analysis", extra={"session_id": str(session_id)})
        return await self.analyze_session(user_id, session_id)

    async def prepare_for_session(self, user_id: str, client_id: UUID) -> dict:
        """
        Generate preparation notes for a client's next session.

        Uses the most recent sessions that have a transcript. Instructions
        come from the user's preparation prompt, else their default
        preparation template, else a built-in fallback.

        Returns:
            dict: preparation_notes

        Raises:
            NotFoundError: If the client is not owned by the user
            APIKeyNotConfiguredError: If the user has no usable API key
            AIServiceError: If the Claude call fails
        """
        if await client_crud.get_owned(self.db, client_id, user_id) is None:
            raise NotFoundError("Client", client_id)
        user = await self._get_user(user_id)
        api_key, model = self._credentials(user)

        sessions = await session_crud.recent_for_client(
            self.db,
            client_id,
            limit=get_settings().llm.preparation_history_size,
            with_transcript=True,
        )
        if not sessions:
            return {"preparation_notes": NO_PREVIOUS_SESSIONS_NOTE}

        instructions = user.preparation_prompt
        if not instructions:
            template = await template_crud.get_default_for_type(self.db, user_id, PromptType.PREPARATION)
            instructions = template.content if template else PREPARATION_FALLBACK_PROMPT

        context = await self._context(user_id)
        prompt = build_prompt(instructions, format_session_history(list(sessions)), context)
        notes = await self.claude.complete(prompt, api_key, model)
        logger.info(
            "Preparation notes generated",
            extra={"client_id": str(client_id), "history_sessions": len(sessions)},
        )
        return {"preparation_notes": notes}

    async def discover_session_resources(self, user_id: str, session_id: UUID) -> dict:
        """
        Suggest resources for a session without saving them.

        Returns:
            dict: resources
        """
        session = await self._get_session_with_transcript(user_id, session_id)
        user = await self._get_user(user_id)
        api_key, model = self._credentials(user)

        text = await self.claude.complete(
            build_prompt(RESOURCE_DISCOVERY_PROMPT, session.transcript), api_key, model
        )
        resources = parse_resources(text, limit=get_settings().llm.max_resources)
        logger.info(
            "Resources discovered",
            extra={"session_id": str(session_id), "resource_count": len(resources)},
        )
        return {"resources": resources}
