"""Unit tests for PageRequest and Page."""

import pytest

from domain.shared.errors import ErrorKind, ValidationError
from domain.shared.pagination import MAX_PAGE_SIZE, Page, PageRequest


class TestPageRequest:
    """Test page window validation."""

    def test_defaults(self):
        """Test first page of 20 by default."""
        request = PageRequest()

        assert request.page == 0
        assert request.size == 20
        assert request.offset == 0

    def test_offset(self):
        """Test offset is page times size."""
        assert PageRequest(page=3, size=10).offset == 30

    def test_negative_page_rejected(self):
        """Test page < 0 raises INVALID_PAGE."""
        with pytest.raises(ValidationError) as exc_info:
            PageRequest(page=-1)

        assert exc_info.value.kind == ErrorKind.INVALID_PAGE

    @pytest.mark.parametrize("size", [0, -5, MAX_PAGE_SIZE + 1])
    def test_size_out_of_bounds_rejected(self, size):
        """Test size outside [1, 100] raises INVALID_PAGE_SIZE."""
        with pytest.raises(ValidationError) as exc_info:
            PageRequest(size=size)

        assert exc_info.value.kind == ErrorKind.INVALID_PAGE_SIZE

    @pytest.mark.parametrize("size", [1, MAX_PAGE_SIZE])
    def test_size_bounds_accepted(self, size):
        """Test both ends of the size range are valid."""
        assert PageRequest(size=size).size == size


class TestPage:
    """Test page metadata."""

    def test_empty_result_has_one_page(self):
        """Test zero elements still report one page, first and last."""
        page = Page.from_items([], PageRequest(page=0, size=10))

        assert page.content == []
        assert page.total_elements == 0
        assert page.total_pages == 1
        assert page.first is True
        assert page.last is True

    def test_middle_page(self):
        """Test 25 items, size 10, page 1."""
        page = Page.from_items(list(range(25)), PageRequest(page=1, size=10))

        assert page.content == list(range(10, 20))
        assert page.total_elements == 25
        assert page.total_pages == 3
        assert page.first is False
        assert page.last is False

    def test_last_partial_page(self):
        """Test the last page holds the remainder."""
        page = Page.from_items(list(range(25)), PageRequest(page=2, size=10))

        assert page.content == [20, 21, 22, 23, 24]
        assert page.last is True

    def test_exact_multiple(self):
        """Test total pages when the count divides evenly."""
        page = Page.from_items(list(range(20)), PageRequest(page=0, size=10))

        assert page.total_pages == 2

    def test_out_of_range_page_is_empty_not_error(self):
        """Test pages past the end return no content."""
        page = Page.from_items(list(range(5)), PageRequest(page=4, size=10))

        assert page.content == []
        assert page.total_elements == 5
        assert page.total_pages == 1
        assert page.last is True
