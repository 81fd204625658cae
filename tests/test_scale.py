"""
Tests for cloud/scale.py - linear font scaling.
"""

import pytest

from tag_cloud.cloud.scale import scale_size


class TestScaleSize:
    """Tests for scale_size()."""

    def test_min_count_gets_min_font(self):
        """Given: count == count_min, Then: font_min"""
        assert scale_size(48, 11, 5, 5, 10) == 11

    def test_max_count_gets_max_font(self):
        """Given: count == count_max, Then: font_max"""
        assert scale_size(48, 11, 10, 5, 10) == 48

    def test_intermediate_count_truncates(self):
        """Given: count in between, Then: 11 + 37*2//5 == 25"""
        result = scale_size(48, 11, 7, 5, 10)
        assert 11 < result < 48
        assert result == 25

    @pytest.mark.parametrize("count", [1, 7, 100])
    def test_degenerate_range(self, count):
        """Given: count_min == count_max, Then: every word gets font_min"""
        assert scale_size(48, 11, count, 7, 7) == 11

    def test_monotone_non_decreasing(self):
        """Given: increasing counts, Then: sizes never decrease and stay in range"""
        sizes = [scale_size(48, 11, c, 3, 40) for c in range(3, 41)]
        assert sizes == sorted(sizes)
        assert sizes[0] == 11 and sizes[-1] == 48
        assert all(11 <= s <= 48 for s in sizes)

    def test_equal_fonts(self):
        """Given: font_min == font_max, Then: always that size"""
        assert scale_size(20, 20, 4, 1, 9) == 20

    def test_inverted_count_range_rejected(self):
        """Given: count_min > count_max, Then: raises ValueError"""
        with pytest.raises(ValueError):
            scale_size(48, 11, 5, 10, 5)

    def test_inverted_font_range_rejected(self):
        """Given: font_min > font_max, Then: raises ValueError"""
        with pytest.raises(ValueError):
            scale_size(11, 48, 5, 1, 10)

    @pytest.mark.parametrize("count", [4, 11, 20])
    def test_count_outside_range_rejected(self, count):
        """Given: count outside [count_min, count_max], Then: raises ValueError"""
        with pytest.raises(ValueError, match="must lie within"):
            scale_size(48, 11, count, 5, 10)

    def test_every_in_range_count_stays_in_font_range(self):
        """Given: all counts of a range, Then: every size is within [font_min, font_max]"""
        for count in range(5, 11):
            assert 11 <= scale_size(48, 11, count, 5, 10) <= 48
