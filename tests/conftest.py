import os

# The module-level engine is never used by the tests; keep it off disk
os.environ.setdefault("DB_URL", "sqlite+aiosqlite:///:memory:")

from types import SimpleNamespace

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from gallery.core.db.engine import build_engine, build_sessionmaker, get_db_util
from gallery.core.db.registry import Base
from gallery.main import app
from gallery.modules.authors.auth import AuthService, TokenData
from gallery.modules.categories.schemas import CategoryDto
from gallery.modules.categories.service import CategoryService
from gallery.modules.dashboards.schemas import DashboardDto
from gallery.modules.dashboards.service import DashboardService
from gallery.modules.elements.models import ElementType
from gallery.modules.elements.schemas import CreateElementDto
from gallery.modules.elements.service import ElementService
from gallery.modules.templates.schemas import CreateTemplateDto
from gallery.modules.templates.service import TemplateService

ALICE = "alice@example.com"


@pytest_asyncio.fixture
async def engine(tmp_path):
    """Fresh SQLite file per test, with the app's pragmas (foreign keys on)."""
    test_engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'gallery_test.db'}")
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_sessionmaker(engine)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_util] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def alice():
    return TokenData(email=ALICE, nickname="Alice")


@pytest.fixture
def auth_headers():
    token = AuthService.create_access_token(ALICE, "Alice")
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def seeded(session_factory):
    """
    One category holding one dashboard, with a template and a line chart element.
    """
    async with session_factory() as session:
        await CategoryService.save_category(
            session, CategoryDto(name="Finance", description="Money matters")
        )
        dashboard = await DashboardService.save_dashboard(
            session, DashboardDto(name="Revenue", category_name="Finance")
        )
        template = await TemplateService.save_template(
            session, CreateTemplateDto(name="Overview", dashboard_id=dashboard.id)
        )
        element = await ElementService.save_element(
            session,
            CreateElementDto(name="Monthly", type=ElementType.Line, template_id=template.id),
        )
        await session.commit()

    return SimpleNamespace(
        category="Finance",
        dashboard_id=dashboard.id,
        template_id=template.id,
        element_id=element.id,
    )
