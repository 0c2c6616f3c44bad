"""Tests for the standard size catalog."""

import pytest

from busbar_sizing.sizing.catalog import STANDARD_SIZES, StandardSizeCatalog


def _area(label: str) -> int:
    width, thickness = label.replace("mm", "").split(" x ")
    return int(width) * int(thickness)


def test_catalog_is_ordered_by_area():
    areas = [s.area_mm2 for s in STANDARD_SIZES]
    assert areas == sorted(areas)
    assert len(STANDARD_SIZES) == 29


def test_recommend_first_three_qualifying():
    assert STANDARD_SIZES.recommend(625) == ["80mm x 10mm", "60mm x 15mm", "100mm x 10mm"]


def test_recommend_equal_area_prefers_thinner_bar():
    assert STANDARD_SIZES.recommend(450) == ["100mm x 5mm", "50mm x 10mm", "120mm x 5mm"]


def test_recommend_exact_area_qualifies():
    assert STANDARD_SIZES.recommend(100)[0] == "20mm x 5mm"


@pytest.mark.parametrize("required", [1, 99.5, 210, 333, 1000, 2500, 4000, 5999])
def test_recommendations_non_decreasing_and_at_most_three(required):
    labels = STANDARD_SIZES.recommend(required)
    areas = [_area(label) for label in labels]
    assert 1 <= len(labels) <= 3
    assert areas == sorted(areas)
    assert all(a >= required for a in areas)


def test_fewer_than_three_near_top_of_catalog():
    assert STANDARD_SIZES.recommend(4000) == ["160mm x 30mm", "200mm x 30mm"]


def test_fallback_when_nothing_qualifies():
    assert STANDARD_SIZES.recommend(6000.5) == ["60mm x 10mm"]
    assert STANDARD_SIZES.fallback.label == "60mm x 10mm"


def test_unordered_catalog_rejected():
    with pytest.raises(ValueError, match="ascending area"):
        StandardSizeCatalog(sizes=[(60, 10), (20, 5)], fallback=(60, 10))


def test_qualifying_returns_new_list_each_call():
    first = STANDARD_SIZES.qualifying(500)
    first.clear()
    assert STANDARD_SIZES.qualifying(500)
