import uuid
from collections.abc import AsyncGenerator
from datetime import UTC, date, datetime
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.api.deps import (
    get_document_renderer,
    get_llm_client,
    get_skill_store,
    get_template_storage,
)
from app.core.config import Settings
from app.main import create_app
from app.schemas.records import (
    CertificationRecord,
    ExperienceRecord,
    SkillReference,
    TrainingRecord,
    UserRecord,
    UserSkillRecord,
)
from app.services.locale import FRENCH
from app.storage.local import LocalFileStorage
from tests.mocks.echo_renderer import EchoRenderer
from tests.mocks.mock_skill_store import InMemorySkillStore

# Fixed clock so ongoing experiences have a stable tenure.
TODAY = date(2024, 6, 15)

TEMPLATE_NAME = "CV_Template.docx"


def make_user(**overrides) -> UserRecord:
    data = {
        "id": uuid.uuid4(),
        "email": "jane.doe@example.com",
        "fullname": "Jane Doe",
        "role": "developer",
        "created_at": datetime(2023, 1, 1, tzinfo=UTC),
        "updated_at": datetime(2024, 5, 2, 9, 30, tzinfo=UTC),
    }
    data.update(overrides)
    return UserRecord(**data)


def make_skill(name: str, kind: str = "hard", family: str | None = "Backend") -> SkillReference:
    return SkillReference(id=uuid.uuid4(), name=name, kind=kind, family=family)


def make_experience(user_id: uuid.UUID, **overrides) -> ExperienceRecord:
    data = {
        "id": uuid.uuid4(),
        "user_id": user_id,
        "company": "Acme",
        "title": "Software Engineer",
        "description": "- Built APIs\n- Reviewed code",
        "start_date": date(2020, 1, 1),
        "end_date": date(2022, 7, 1),
        "skills": [],
    }
    data.update(overrides)
    return ExperienceRecord(**data)


def make_user_skill(user_id: uuid.UUID, **overrides) -> UserSkillRecord:
    data = {
        "id": uuid.uuid4(),
        "user_id": user_id,
        "skill": make_skill("Python"),
        "level": 4,
        "has_certification": False,
        "has_trainings": False,
        "trainings": [],
    }
    data.update(overrides)
    return UserSkillRecord(**data)


def populate_store(store: InMemorySkillStore) -> UserRecord:
    """Add a user with two experiences, a certified skill and a training."""
    user = make_user()
    store.users[user.id] = user

    python = make_skill("Python", family="Backend")
    postgres = make_skill("PostgreSQL", family="Data")
    teamwork = make_skill("Teamwork", kind="soft", family="Soft Skills")

    store.experiences.append(
        make_experience(
            user.id,
            company="DXC Technology",
            title="Senior Developer",
            start_date=date(2022, 9, 1),
            end_date=None,
            skills=[python, teamwork],
        )
    )
    store.experiences.append(
        make_experience(
            user.id,
            company="Acme",
            title="Developer",
            start_date=date(2019, 3, 1),
            end_date=date(2022, 8, 1),
            skills=[python, postgres],
        )
    )

    certified = make_user_skill(user.id, skill=python, has_certification=True)
    trained = make_user_skill(
        user.id,
        skill=postgres,
        has_trainings=True,
        trainings=[
            TrainingRecord(name="PostgreSQL Tuning", date=date(2021, 4, 1), provider="EDB")
        ],
    )
    store.user_skills.extend([certified, trained])
    store.certifications.append(
        CertificationRecord(
            name="Python Professional", date=date(2023, 2, 1), user_skill_id=certified.id
        )
    )
    return user


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def locale():
    return FRENCH


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def skill_store() -> InMemorySkillStore:
    return InMemorySkillStore()


@pytest.fixture
def populated_store() -> tuple[InMemorySkillStore, UserRecord]:
    store = InMemorySkillStore()
    user = populate_store(store)
    return store, user


@pytest.fixture
def echo_renderer() -> EchoRenderer:
    return EchoRenderer()


@pytest.fixture
def template_storage(tmp_path: Path) -> LocalFileStorage:
    """Template storage holding a placeholder template file."""
    template_dir = tmp_path / "templates"
    template_dir.mkdir()
    (template_dir / TEMPLATE_NAME).write_bytes(b"template-bytes")
    return LocalFileStorage(str(template_dir))


@pytest_asyncio.fixture
async def make_client(template_storage):
    """Build an API client wired to the given store and renderer."""
    clients: list[AsyncClient] = []

    async def _make(store, renderer, storage=None) -> AsyncClient:
        app = create_app()
        app.dependency_overrides[get_skill_store] = lambda: store
        app.dependency_overrides[get_document_renderer] = lambda: renderer
        app.dependency_overrides[get_template_storage] = lambda: storage or template_storage
        app.dependency_overrides[get_llm_client] = lambda: None

        ac = AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
        clients.append(ac)
        return ac

    yield _make

    for ac in clients:
        await ac.aclose()


@pytest_asyncio.fixture
async def client(
    make_client, populated_store, echo_renderer
) -> AsyncGenerator[AsyncClient]:
    store, _ = populated_store
    yield await make_client(store, echo_renderer)
