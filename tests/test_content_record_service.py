"""
Tests for ContentService and RecordService.
"""
from datetime import datetime

import pytest

from gallery.core.exceptions import NotFoundError, ValidationError
from gallery.modules.authors.auth import TokenData
from gallery.modules.contents.schemas import CreateContentDto, UpdateContentDto
from gallery.modules.contents.service import ContentService
from gallery.modules.dashboards.schemas import DashboardDto
from gallery.modules.dashboards.service import DashboardService
from gallery.modules.elements.models import ElementType
from gallery.modules.elements.schemas import CreateElementDto
from gallery.modules.elements.service import ElementService
from gallery.modules.records.schemas import CreateRecordDto, FilterRecordsDto
from gallery.modules.records.service import RecordService
from gallery.modules.templates.schemas import CreateTemplateDto
from gallery.modules.templates.service import TemplateService


def _content(element_id: str, day: int, **kwargs) -> CreateContentDto:
    return CreateContentDto(
        element_id=element_id,
        date=datetime(2026, 3, day),
        title=kwargs.pop("title", f"Day {day}"),
        data=kwargs.pop("data", {"day": day}),
        **kwargs,
    )


def _record(seeded, **kwargs) -> CreateRecordDto:
    return CreateRecordDto(
        dashboard_id=seeded.dashboard_id,
        template_id=seeded.template_id,
        element_id=seeded.element_id,
        **kwargs,
    )


class TestContentService:

    @pytest.mark.asyncio
    async def test_contents_are_paginated_newest_first(self, db, seeded):
        for day in (3, 1, 7, 5):
            await ContentService.save_content(db, _content(seeded.element_id, day))

        first, total = await ContentService.get_contents_in_element(
            db, seeded.element_id, page=1, page_size=3
        )
        second, _ = await ContentService.get_contents_in_element(
            db, seeded.element_id, page=2, page_size=3
        )

        assert total == 4
        assert [c.title for c in first] == ["Day 7", "Day 5", "Day 3"]
        assert [c.title for c in second] == ["Day 1"]

    @pytest.mark.asyncio
    async def test_contents_of_other_elements_are_excluded(self, db, seeded):
        other = await ElementService.save_element(
            db, CreateElementDto(name="Other", type=ElementType.Table, template_id=seeded.template_id)
        )
        await ContentService.save_content(db, _content(other.id, 1))

        items, total = await ContentService.get_contents_in_element(db, seeded.element_id)

        assert (items, total) == ([], 0)

    @pytest.mark.asyncio
    async def test_save_content_keeps_json_payloads(self, db, seeded):
        content = await ContentService.save_content(
            db,
            _content(
                seeded.element_id,
                2,
                data=[{"x": 1, "y": 2.5}, {"x": 2, "y": None}],
                config={"color": "#336699", "stacked": True},
            ),
        )

        fetched = await ContentService.get_content_by_id(db, content.id)

        assert fetched.data == [{"x": 1, "y": 2.5}, {"x": 2, "y": None}]
        assert fetched.config == {"color": "#336699", "stacked": True}

    @pytest.mark.asyncio
    async def test_get_content_by_id_missing(self, db):
        with pytest.raises(NotFoundError):
            await ContentService.get_content_by_id(db, "missing")

    @pytest.mark.asyncio
    async def test_modify_content_updates_given_fields(self, db, seeded):
        content = await ContentService.save_content(db, _content(seeded.element_id, 4))

        modified = await ContentService.modify_content(
            db, content.id, UpdateContentDto(title="Renamed", data={"day": 40})
        )

        assert modified.title == "Renamed"
        assert modified.data == {"day": 40}
        assert modified.date == datetime(2026, 3, 4)

    @pytest.mark.asyncio
    async def test_modify_content_missing(self, db):
        with pytest.raises(NotFoundError):
            await ContentService.modify_content(db, "missing", UpdateContentDto(title="x"))

    @pytest.mark.asyncio
    async def test_delete_content(self, db, seeded):
        content = await ContentService.save_content(db, _content(seeded.element_id, 9))

        await ContentService.delete_content(db, content.id)

        with pytest.raises(NotFoundError):
            await ContentService.delete_content(db, content.id)


class TestRecordService:

    @pytest.mark.asyncio
    async def test_save_record_registers_author(self, db, seeded, alice):
        record = await RecordService.save_record(db, alice, _record(seeded, note="looks off"))

        assert record.author_email == "alice@example.com"
        assert record.note == "looks off"
        assert record.created_at is not None

    @pytest.mark.asyncio
    async def test_save_record_unknown_element(self, db, seeded, alice):
        dto = CreateRecordDto(
            dashboard_id=seeded.dashboard_id,
            template_id=seeded.template_id,
            element_id="missing",
        )
        with pytest.raises(NotFoundError):
            await RecordService.save_record(db, alice, dto)

    @pytest.mark.asyncio
    async def test_save_record_unknown_template(self, db, seeded, alice):
        dto = CreateRecordDto(
            dashboard_id=seeded.dashboard_id,
            template_id="missing",
            element_id=seeded.element_id,
        )
        with pytest.raises(NotFoundError):
            await RecordService.save_record(db, alice, dto)

    @pytest.mark.asyncio
    async def test_save_record_rejects_mismatched_hierarchy(self, db, seeded, alice):
        other_dashboard = await DashboardService.save_dashboard(
            db, DashboardDto(name="Costs", category_name="Finance")
        )
        other_template = await TemplateService.save_template(
            db, CreateTemplateDto(name="Overview", dashboard_id=other_dashboard.id)
        )

        with pytest.raises(ValidationError):
            await RecordService.save_record(
                db,
                alice,
                CreateRecordDto(
                    dashboard_id=other_dashboard.id,
                    template_id=seeded.template_id,
                    element_id=seeded.element_id,
                ),
            )
        with pytest.raises(ValidationError):
            await RecordService.save_record(
                db,
                alice,
                CreateRecordDto(
                    dashboard_id=other_dashboard.id,
                    template_id=other_template.id,
                    element_id=seeded.element_id,
                ),
            )

    @pytest.mark.asyncio
    async def test_get_records_filters(self, db, seeded, alice):
        bob = TokenData(email="bob@example.com")
        await RecordService.save_record(db, alice, _record(seeded, note="a"))
        await RecordService.save_record(db, bob, _record(seeded, note="b"))
        await RecordService.save_record(db, bob, _record(seeded, note="c"))

        everything, total = await RecordService.get_records(db)
        bobs, bob_total = await RecordService.get_records(
            db, FilterRecordsDto(author_email="bob@example.com")
        )
        nothing, none_total = await RecordService.get_records(
            db, FilterRecordsDto(dashboard_id="missing")
        )

        assert total == 3 and len(everything) == 3
        assert bob_total == 2
        assert {r.note for r in bobs} == {"b", "c"}
        assert (nothing, none_total) == ([], 0)

    @pytest.mark.asyncio
    async def test_get_records_newest_first(self, db, seeded, alice):
        for note in ("0", "1", "2", "3", "4", "5"):
            await RecordService.save_record(db, alice, _record(seeded, note=note))

        records, _ = await RecordService.get_records(db)

        assert [r.note for r in records] == ["5", "4", "3", "2", "1", "0"]

    @pytest.mark.asyncio
    async def test_get_records_pages(self, db, seeded, alice):
        for note in ("1", "2", "3"):
            await RecordService.save_record(db, alice, _record(seeded, note=note))

        page, total = await RecordService.get_records(
            db, FilterRecordsDto(element_id=seeded.element_id), page=2, page_size=2
        )

        assert total == 3
        assert len(page) == 1

    @pytest.mark.asyncio
    async def test_delete_record(self, db, seeded, alice):
        record = await RecordService.save_record(db, alice, _record(seeded))

        await RecordService.delete_record(db, record.id)

        with pytest.raises(NotFoundError):
            await RecordService.delete_record(db, record.id)
