"""
Tests for stop marker detection and windowing.
"""

from ratecon.models import StopType
from ratecon.segmenter import (
    TIER_GENERIC,
    TIER_NUMBERED,
    StopMarker,
    find_fallback_markers,
    find_stop_markers,
    slice_windows,
)


def _types(markers):
    return [m.type for m in markers]


def test_numbered_stop_markers():
    text = "Stop #1: Pickup\nChicago, IL 60601\nStop #2: Delivery\nDallas, TX 75201"
    markers = find_stop_markers(text)
    assert _types(markers) == [StopType.PICKUP, StopType.DELIVERY]
    assert [m.label for m in markers] == ["Stop 1 - Pickup", "Stop 2 - Delivery"]
    assert all(m.tier == TIER_NUMBERED for m in markers)


def test_n_of_m_markers(numbered_doc):
    markers = find_stop_markers(numbered_doc)
    assert [m.label for m in markers] == [
        "Pickup 1 of 2", "Pickup 2 of 2", "Delivery 1 of 2", "Delivery 2 of 2",
    ]
    assert markers[0].position == 0


def test_numbered_markers_discard_generic():
    text = (
        "Shipper: see notes\n"
        "Stop #1: Pickup\nChicago, IL 60601\n"
        "Stop #2: Delivery\nDallas, TX 75201\n"
        "Consignee: notes only\n"
    )
    markers = find_stop_markers(text)
    assert len(markers) == 2
    assert all(m.tier == TIER_NUMBERED for m in markers)
    assert markers[0].position == text.index("Stop #1")


def test_overlapping_markers_collapse():
    markers = find_stop_markers("Stop #1: Pickup 1 of 2\nChicago, IL 60601")
    assert len(markers) == 1
    assert markers[0].label == "Stop 1 - Pickup"


def test_bare_stop_type_inferred():
    markers = find_stop_markers("Stop #1\nACME Foods Warehouse\nStop #2\nXYZ Retail")
    assert _types(markers) == [StopType.PICKUP, StopType.DELIVERY]


def test_generic_markers(generic_doc):
    markers = find_stop_markers(generic_doc)
    assert _types(markers) == [StopType.PICKUP, StopType.DELIVERY]
    assert all(m.tier == TIER_GENERIC for m in markers)
    assert [m.label for m in markers] == ["Pickup 1", "Delivery 1"]
    assert markers[1].position == generic_doc.index("Consignee")


def test_fallback_keyword_sweep():
    text = "Please pickup at Chicago, IL 60601 and drop at Dallas, TX 75201"
    markers = find_stop_markers(text)
    assert _types(markers) == [StopType.PICKUP, StopType.DELIVERY]
    assert markers[0].position == text.index("pickup")
    assert markers[1].position == text.index("drop")


def test_fallback_delivery_only():
    markers = find_fallback_markers("drop at dock 5 in Reno, NV")
    assert _types(markers) == [StopType.DELIVERY]


def test_no_markers():
    assert find_stop_markers("") == []
    assert find_stop_markers("invoice for services rendered") == []


def test_slice_windows():
    text = "AAAA BBBB CCCC"
    markers = [
        StopMarker(0, StopType.PICKUP, TIER_NUMBERED, "a"),
        StopMarker(5, StopType.DELIVERY, TIER_NUMBERED, "b"),
    ]
    windows = slice_windows(text, markers)
    assert [w for _, w in windows] == ["AAAA ", "BBBB CCCC"]


def test_generic_header_folds_into_block(generic_doc):
    markers = find_stop_markers(generic_doc)
    assert generic_doc.index("Pickup Date") not in [m.position for m in markers]


def test_repeated_shipper_blocks_stay_separate(two_shipper_doc):
    markers = find_stop_markers(two_shipper_doc)
    assert [m.label for m in markers] == ["Pickup 1", "Pickup 2", "Delivery 1"]
    assert markers[1].position == two_shipper_doc.index("Shipper: Beta")
