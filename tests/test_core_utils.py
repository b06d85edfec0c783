"""
Unit tests for the pure helpers in gallery.core.
"""
from types import SimpleNamespace

from gallery.core.pagination import build_paginated_response
from gallery.core.response_interceptor import wrap_payload
from gallery.core.utils import difference_by_id, like_pattern
from gallery.modules.dashboards.schemas import DashboardDto


class TestDifferenceById:

    def test_returns_rows_missing_from_current(self):
        previous = [SimpleNamespace(id="a"), SimpleNamespace(id="b"), SimpleNamespace(id="c")]
        current = [DashboardDto(id="b", name="B"), DashboardDto(id="c", name="C")]

        removed = difference_by_id(previous, current)

        assert [row.id for row in removed] == ["a"]

    def test_new_items_without_id_match_nothing(self):
        previous = [SimpleNamespace(id="a")]
        current = [DashboardDto(name="fresh"), {"name": "also fresh"}]

        assert [row.id for row in difference_by_id(previous, current)] == ["a"]

    def test_works_with_dicts_and_keeps_order(self):
        previous = [{"id": "x"}, {"id": "y"}, {"id": "z"}]
        current = [{"id": "y"}]

        assert difference_by_id(previous, current) == [{"id": "x"}, {"id": "z"}]

    def test_empty_previous(self):
        assert difference_by_id([], [{"id": "a"}]) == []


class TestLikePattern:

    def test_wraps_keyword(self):
        assert like_pattern("rev") == "%rev%"

    def test_escapes_wildcards(self):
        assert like_pattern("50%_off") == "%50\\%\\_off%"

    def test_escapes_backslash_first(self):
        assert like_pattern("a\\b") == "%a\\\\b%"


class TestPaginatedResponse:

    def test_middle_page(self):
        response = build_paginated_response(["a", "b"], total=5, page=2, page_size=2)
        assert response["total_pages"] == 3
        assert response["has_more"] is True
        assert response["items"] == ["a", "b"]

    def test_last_page(self):
        response = build_paginated_response(["e"], total=5, page=3, page_size=2)
        assert response["has_more"] is False

    def test_empty(self):
        response = build_paginated_response([], total=0, page=1, page_size=25)
        assert response["total_pages"] == 0
        assert response["has_more"] is False


class TestWrapPayload:

    def test_list_payload_gets_count(self):
        assert wrap_payload([1, 2]) == {"success": True, "data": [1, 2], "count": 2}

    def test_object_payload_has_no_count(self):
        assert wrap_payload({"name": "x"}) == {"success": True, "data": {"name": "x"}}

    def test_scalar_payload(self):
        assert wrap_payload(True) == {"success": True, "data": True}
