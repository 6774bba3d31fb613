"""Tests for pagination helpers."""

import pytest

from dualtransfer.core.paginator import PaginationConfig, clamp_page, max_page, page_slice


class TestMaxPage:
    """Tests for max_page()."""

    @pytest.mark.parametrize(
        "total, page_size, expected",
        [(0, 10, 1), (1, 10, 1), (10, 10, 1), (11, 10, 2), (5, 2, 3)],
    )
    def test_values(self, total, page_size, expected):
        """max_page is ceil(total / size), at least 1."""
        assert max_page(total, page_size) == expected


class TestClampPage:
    """Tests for clamp_page()."""

    def test_clamps_down_when_list_shrinks(self):
        """A page past the end is pulled back to the last page."""
        assert clamp_page(3, 2, 2) == 1

    def test_clamps_up_to_first_page(self):
        """Pages below 1 become 1."""
        assert clamp_page(0, 10, 2) == 1
        assert clamp_page(-4, 10, 2) == 1

    def test_in_range_unchanged(self):
        """Valid pages are kept."""
        assert clamp_page(2, 5, 2) == 2


class TestPageSlice:
    """Tests for page_slice()."""

    def test_slices_window(self):
        """Each page is a page_size window."""
        items = list("abcde")
        assert page_slice(items, 1, 2) == ["a", "b"]
        assert page_slice(items, 3, 2) == ["e"]

    def test_empty_list(self):
        """Slicing an empty list gives an empty page."""
        assert page_slice([], 1, 10) == []


class TestPaginationConfig:
    """Tests for PaginationConfig."""

    def test_defaults(self):
        """Pagination is on with ten items per page by default."""
        config = PaginationConfig()
        assert config.enabled is True
        assert config.page_size == 10

    def test_rejects_non_positive_page_size(self):
        """page_size must be positive."""
        with pytest.raises(ValueError):
            PaginationConfig(page_size=0)

    def test_parse_forms(self):
        """parse accepts bools, mappings and configs."""
        assert PaginationConfig.parse(None).enabled is False
        assert PaginationConfig.parse(False).enabled is False
        assert PaginationConfig.parse(True) == PaginationConfig()
        assert PaginationConfig.parse({"page_size": 3}) == PaginationConfig(page_size=3)
        config = PaginationConfig(page_size=4)
        assert PaginationConfig.parse(config) is config
