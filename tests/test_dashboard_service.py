"""
Tests for DashboardService against a real SQLite database.
"""
import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from gallery.core.exceptions import ValidationError
from gallery.modules.authors.models import author_dashboards
from gallery.modules.authors.service import AuthorService
from gallery.modules.categories.schemas import CategoryDto
from gallery.modules.categories.service import CategoryService
from gallery.modules.contents.models import Content
from gallery.modules.contents.schemas import CreateContentDto
from gallery.modules.contents.service import ContentService
from gallery.modules.dashboards.schemas import DashboardDto, ModifyDashboardDto
from gallery.modules.dashboards.service import DashboardService
from gallery.modules.elements.models import Element
from gallery.modules.records.models import Record
from gallery.modules.records.schemas import CreateRecordDto
from gallery.modules.records.service import RecordService
from gallery.modules.templates.models import Template

ALICE = "alice@example.com"


async def _count(session, model) -> int:
    return (await session.execute(select(func.count()).select_from(model))).scalar()


@pytest.mark.asyncio
async def test_save_dashboard_requires_category(db):
    with pytest.raises(ValidationError):
        await DashboardService.save_dashboard(db, DashboardDto(name="Orphan"))


@pytest.mark.asyncio
async def test_save_dashboard_assigns_id(db):
    await CategoryService.save_category(db, CategoryDto(name="Ops"))

    dashboard = await DashboardService.save_dashboard(
        db, DashboardDto(name="Latency", category_name="Ops")
    )

    assert dashboard.id
    assert dashboard.category_name == "Ops"
    assert dashboard.description is None


@pytest.mark.asyncio
async def test_save_dashboard_with_id_updates_only_given_fields(session_factory, seeded):
    async with session_factory() as session:
        await DashboardService.save_dashboard(
            session, DashboardDto(id=seeded.dashboard_id, name="Revenue 2026")
        )
        await session.commit()

    async with session_factory() as session:
        dashboard = await DashboardService.get_dashboard_by_id(session, seeded.dashboard_id)
        assert dashboard.name == "Revenue 2026"
        assert dashboard.category_name == "Finance"


@pytest.mark.asyncio
async def test_existing_dashboard_cannot_drop_its_category(db, seeded):
    with pytest.raises(ValidationError):
        await DashboardService.save_dashboard(
            db, DashboardDto(id=seeded.dashboard_id, name="Revenue", category_name=None)
        )


@pytest.mark.asyncio
async def test_duplicate_name_in_category_violates_unique_constraint(db, seeded):
    with pytest.raises(IntegrityError):
        await DashboardService.save_dashboard(
            db, DashboardDto(name="Revenue", category_name="Finance")
        )


@pytest.mark.asyncio
async def test_get_all_dashboards_loads_full_tree(session_factory, seeded):
    async with session_factory() as session:
        await ContentService.save_content(
            session,
            CreateContentDto(
                element_id=seeded.element_id,
                date="2026-01-31T00:00:00",
                title="January",
                data={"values": [1, 2, 3]},
            ),
        )
        await session.commit()

    async with session_factory() as session:
        dashboards = await DashboardService.get_all_dashboards(session)

    assert len(dashboards) == 1
    dashboard = dashboards[0]
    # every relation is eagerly loaded, so this works on a closed session
    assert dashboard.category.name == "Finance"
    assert dashboard.templates[0].name == "Overview"
    assert dashboard.templates[0].elements[0].name == "Monthly"
    assert dashboard.templates[0].elements[0].contents[0].title == "January"


@pytest.mark.asyncio
async def test_get_dashboard_by_id_missing(db):
    assert await DashboardService.get_dashboard_by_id(db, "nope") is None


@pytest.mark.asyncio
async def test_get_all_dashboards_template_and_category_and_template(db, seeded):
    dashboards = await DashboardService.get_all_dashboards_template(db)
    assert [t.name for t in dashboards[0].templates] == ["Overview"]

    dashboard = await DashboardService.get_dashboard_category_and_template(
        db, seeded.dashboard_id
    )
    assert dashboard.category.description == "Money matters"
    assert len(dashboard.templates) == 1


@pytest.mark.asyncio
async def test_modify_dashboard(session_factory, seeded):
    async with session_factory() as session:
        dto = ModifyDashboardDto(name="Income", description="Renamed")
        assert await DashboardService.modify_dashboard(session, None, dto) is False
        assert await DashboardService.modify_dashboard(session, "missing", dto) is False
        assert await DashboardService.modify_dashboard(session, seeded.dashboard_id, dto) is True
        await session.commit()

    async with session_factory() as session:
        dashboard = await DashboardService.get_dashboard_by_id(session, seeded.dashboard_id)
        assert (dashboard.name, dashboard.description) == ("Income", "Renamed")
        # untouched relations survive
        assert len(dashboard.templates) == 1


@pytest.mark.asyncio
async def test_new_dashboard_attach_to_category(session_factory, seeded):
    async with session_factory() as session:
        assert await DashboardService.new_dashboard_attach_to_category(
            session, "Unknown", DashboardDto(name="Costs")
        ) is False
        assert await DashboardService.new_dashboard_attach_to_category(
            session, "Finance", DashboardDto(name="Costs", category_name="Elsewhere")
        ) is True
        await session.commit()

    async with session_factory() as session:
        category = await CategoryService.get_category_by_name(session, "Finance")
        assert sorted(d.name for d in category.dashboards) == ["Costs", "Revenue"]


@pytest.mark.asyncio
async def test_delete_dashboard_in_category(session_factory, seeded):
    async with session_factory() as session:
        assert await DashboardService.delete_dashboard_in_category(session, "Finance", "Nope") == 0
        assert await DashboardService.delete_dashboard_in_category(session, "Finance", "Revenue") == 1
        await session.commit()

    async with session_factory() as session:
        assert await DashboardService.get_dashboard_by_id(session, seeded.dashboard_id) is None


@pytest.mark.asyncio
async def test_save_dashboards_forces_category(db):
    await CategoryService.save_category(db, CategoryDto(name="Ops"))

    dashboards = await DashboardService.save_dashboards(
        db,
        [DashboardDto(name="CPU"), DashboardDto(name="Memory", category_name="Other")],
        category_name="Ops",
    )

    assert [d.name for d in dashboards] == ["CPU", "Memory"]
    assert all(d.id for d in dashboards)
    assert {d.category_name for d in dashboards} == {"Ops"}


@pytest.mark.asyncio
async def test_delete_dashboards(session_factory, seeded):
    async with session_factory() as session:
        assert await DashboardService.delete_dashboards(session, []) == 0
        assert await DashboardService.delete_dashboards(
            session, [seeded.dashboard_id, "missing"]
        ) == 1
        await session.commit()


@pytest.mark.asyncio
async def test_delete_dashboard_cascades_to_children(session_factory, seeded, alice):
    async with session_factory() as session:
        await ContentService.save_content(
            session,
            CreateContentDto(
                element_id=seeded.element_id,
                date="2026-02-28T00:00:00",
                title="February",
                data=[],
            ),
        )
        await RecordService.save_record(
            session,
            alice,
            CreateRecordDto(
                dashboard_id=seeded.dashboard_id,
                template_id=seeded.template_id,
                element_id=seeded.element_id,
                note="checked",
            ),
        )
        await AuthorService.bind_dashboards_to_author(session, ALICE, [seeded.dashboard_id])
        await session.commit()

    async with session_factory() as session:
        assert await DashboardService.delete_dashboard(session, seeded.dashboard_id) == 1
        await session.commit()

    async with session_factory() as session:
        for model in (Template, Element, Content, Record, author_dashboards):
            assert await _count(session, model) == 0
        # the author and the category are not owned by the dashboard
        assert await AuthorService.get_author_by_email(session, ALICE) is not None
        assert await CategoryService.get_category_by_name(session, "Finance") is not None


@pytest.mark.asyncio
async def test_update_dashboards_in_category_missing_category(db, alice):
    assert await DashboardService.update_dashboards_in_category(
        db, alice, "Unknown", [DashboardDto(name="X")]
    ) is False


@pytest.mark.asyncio
async def test_update_dashboards_in_category_replaces_and_binds(session_factory, seeded, alice):
    async with session_factory() as session:
        stale = await DashboardService.save_dashboard(
            session, DashboardDto(name="Stale", category_name="Finance")
        )
        await session.commit()

    async with session_factory() as session:
        updated = await DashboardService.update_dashboards_in_category(
            session,
            alice,
            "Finance",
            [
                DashboardDto(id=seeded.dashboard_id, name="Revenue (net)"),
                DashboardDto(name="Cash flow"),
            ],
        )
        await session.commit()
    assert updated is True

    async with session_factory() as session:
        category = await CategoryService.get_category_by_name(session, "Finance")
        names = sorted(d.name for d in category.dashboards)
        assert names == ["Cash flow", "Revenue (net)"]
        assert await DashboardService.get_dashboard_by_id(session, stale.id) is None

        # the kept dashboard keeps its templates
        kept = await DashboardService.get_dashboard_by_id(session, seeded.dashboard_id)
        assert [t.name for t in kept.templates] == ["Overview"]

        author = await AuthorService.get_author_by_email(session, ALICE)
        assert author.nickname == "Alice"
        assert sorted(d.name for d in author.dashboards) == names


@pytest.mark.asyncio
async def test_update_dashboards_in_category_rejects_duplicate_names(session_factory, seeded, alice):
    async with session_factory() as session:
        with pytest.raises(ValidationError):
            await DashboardService.update_dashboards_in_category(
                session, alice, "Finance", [DashboardDto(name="A"), DashboardDto(name="A")]
            )
        await session.commit()

    # nothing was removed before the list was rejected
    async with session_factory() as session:
        assert await DashboardService.get_dashboard_by_id(session, seeded.dashboard_id) is not None


@pytest.mark.asyncio
async def test_update_dashboards_in_category_empty_list_clears_category(session_factory, seeded, alice):
    async with session_factory() as session:
        assert await DashboardService.update_dashboards_in_category(
            session, alice, "Finance", []
        ) is True
        await session.commit()

    async with session_factory() as session:
        category = await CategoryService.get_category_by_name(session, "Finance")
        assert category.dashboards == []


@pytest.mark.asyncio
async def test_search_dashboards(db, seeded):
    await DashboardService.save_dashboard(
        db, DashboardDto(name="Gross_margin", category_name="Finance")
    )

    assert [d.name for d in await DashboardService.search_dashboards(db, "REV")] == ["Revenue"]
    assert [d.name for d in await DashboardService.search_dashboards(db, "s_m")] == ["Gross_margin"]
    # wildcards are matched literally
    assert await DashboardService.search_dashboards(db, "%") == []

    found = await DashboardService.search_dashboards(db, "r")
    assert [d.name for d in found] == ["Gross_margin", "Revenue"]
    assert found[0].category.name == "Finance"
