import asyncio
import logging
import uuid
from collections.abc import Awaitable, Callable
from typing import TypeVar

from app.core.exceptions import NotFoundError, UpstreamReadError
from app.schemas.cv import CVSource
from app.storage.skill_store import SkillStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def _read(query: str, call: Callable[[], Awaitable[T]]) -> T:
    """Run one store read, turning any failure into an UpstreamReadError."""
    try:
        return await call()
    except UpstreamReadError:
        raise
    except Exception as e:
        logger.error("CV source read '%s' failed: %s", query, e)
        raise UpstreamReadError(query, str(e)) from e


async def _fetch(store: SkillStore, user_id: uuid.UUID, progress: list[str]) -> CVSource:
    progress.append("user")
    user = await _read("user", lambda: store.get_user(user_id))
    if user is None:
        raise NotFoundError("User", str(user_id))

    progress.append("experiences")
    experiences = await _read("experiences", lambda: store.list_experiences(user_id))

    progress.append("user_skills")
    user_skills = await _read("user_skills", lambda: store.list_user_skills(user_id))

    # An empty id set would make an invalid "IN ()" query.
    user_skill_ids = [us.id for us in user_skills if us.id is not None]
    certifications = []
    if user_skill_ids:
        progress.append("certifications")
        certifications = await _read(
            "certifications", lambda: store.list_certifications(user_skill_ids)
        )

    logger.debug(
        "Fetched CV source for user %s: %d experiences, %d user skills, %d certifications",
        user_id,
        len(experiences),
        len(user_skills),
        len(certifications),
    )
    return CVSource(
        user=user,
        experiences=experiences,
        user_skills=user_skills,
        certifications=certifications,
    )


async def fetch_cv_source(
    store: SkillStore,
    user_id: uuid.UUID,
    timeout: float | None = None,
) -> CVSource:
    """Read the user, experiences, user-skills and certifications for one CV.

    Reads run in sequence on one store; certifications depend on the
    user-skill ids. Exceeding ``timeout`` raises UpstreamReadError naming the
    read that was in flight.
    """
    progress: list[str] = []
    try:
        async with asyncio.timeout(timeout):
            return await _fetch(store, user_id, progress)
    except TimeoutError as e:
        query = progress[-1] if progress else "user"
        logger.error("CV source read '%s' timed out after %ss", query, timeout)
        raise UpstreamReadError(query, f"timed out after {timeout}s") from e
