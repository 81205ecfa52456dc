"""Unit tests for Page and PageRequest."""

import pytest
from pydantic import ValidationError

from board.domain.model import Page
from board.domain.value import PageRequest


class TestPageRequest:
    def test_defaults(self):
        request = PageRequest()

        assert request.page_number == 0
        assert request.page_size == 20
        assert request.offset == 0

    def test_offset(self):
        assert PageRequest(page_number=3, page_size=10).offset == 30

    @pytest.mark.parametrize(
        "kwargs",
        [{"page_number": -1}, {"page_size": 0}, {"page_size": 101}],
    )
    def test_invalid_values_are_rejected(self, kwargs):
        with pytest.raises(ValidationError):
            PageRequest(**kwargs)


class TestPage:
    def test_derived_fields(self):
        page = Page[int](items=[1, 2], page_number=0, page_size=2, total_elements=5)

        assert page.total_pages == 3
        assert page.is_first
        assert page.has_next
        assert not page.is_last

    def test_last_page(self):
        page = Page[int](items=[5], page_number=2, page_size=2, total_elements=5)

        assert page.is_last
        assert not page.has_next

    def test_empty_result(self):
        page = Page[int](items=[], page_number=0, page_size=20, total_elements=0)

        assert page.total_pages == 0
        assert page.is_first
        assert page.is_last

    def test_map_keeps_metadata(self):
        page = Page[int](items=[1, 2], page_number=1, page_size=2, total_elements=6)

        mapped = page.map(str)

        assert mapped.items == ["1", "2"]
        assert mapped.page_number == 1
        assert mapped.page_size == 2
        assert mapped.total_elements == 6
