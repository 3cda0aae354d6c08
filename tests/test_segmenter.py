import pytest

from owner_resolution.models import EMPTY_AFTER_CLEAN, LAST_FIRST, PLACEHOLDER_ENTRY
from owner_resolution.segmenter import empty_reason, segment


def texts(raw):
    return [seg.text for seg in segment(raw)]


def test_comma_after_single_surname_is_not_a_split_point():
    segs = segment("SMITH, JOHN & MARY")

    assert [s.text for s in segs] == ["SMITH, JOHN", "MARY"]
    assert segs[0].hints.has_comma is True
    assert segs[0].hints.preferred_order == LAST_FIRST
    assert segs[1].hints.preferred_order is None


def test_comma_between_full_names_splits():
    assert texts("JOHN SMITH, MARY JONES") == ["JOHN SMITH", "MARY JONES"]


def test_comma_after_suffix_is_not_a_split_point():
    assert texts("SMITH JR, JOHN") == ["SMITH JR, JOHN"]


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("DOE JOHN TRUSTEE / ABC HOLDINGS LLC", ["DOE JOHN", "ABC HOLDINGS LLC"]),
        ("SMITH JOHN ET AL", ["SMITH JOHN"]),
        ("SMITH JOHN H/W", ["SMITH JOHN"]),
        ("SMITH JOHN & WIFE", ["SMITH JOHN"]),
        ("SMITH JOHN AND/OR MARY", ["SMITH JOHN", "MARY"]),
        ("SMITH JOHN AND MARY", ["SMITH JOHN", "MARY"]),
        ("SMITH JOHN + MARY", ["SMITH JOHN", "MARY"]),
        ("SMITH JOHN AKA SMITH JACK & MARY", ["SMITH JOHN", "MARY"]),
        ("SMITH JOHN AKA JOHNNY / MARY", ["SMITH JOHN", "MARY"]),
        ("SMITH JOHN A/K/A JOHNNY + MARY", ["SMITH JOHN", "MARY"]),
    ],
)
def test_noise_and_connectors(raw, expected):
    assert texts(raw) == expected


def test_company_ampersand_stays_together():
    assert texts("SMITH & SONS LLC") == ["SMITH & SONS LLC"]
    assert texts("AT&T MOBILITY LLC") == ["AT&T MOBILITY LLC"]


def test_fraction_is_not_a_connector():
    assert texts("SMITH JOHN 1/2 INT") == ["SMITH JOHN 1/2 INT"]


@pytest.mark.parametrize("raw", ["N/A", "*** MULTIPLE OWNERS ***", "UNKNOWN", "NONE", "-- SEE ATTACHED --"])
def test_placeholders_yield_no_segments(raw):
    assert segment(raw) == []
    assert empty_reason(raw) == PLACEHOLDER_ENTRY


@pytest.mark.parametrize("raw", ["", "   ", "C/O JOHN SMITH", "CARE OF ABC LLC", "ET AL"])
def test_empty_and_care_of_input(raw):
    assert segment(raw) == []
    assert empty_reason(raw) == EMPTY_AFTER_CLEAN


def test_all_caps_hint():
    assert segment("SMITH JOHN")[0].hints.is_all_caps is True
    assert segment("Smith John")[0].hints.is_all_caps is False


def test_html_entities_and_whitespace_are_cleaned():
    assert texts("SMITH   JOHN &amp; MARY") == ["SMITH JOHN", "MARY"]


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("SMITH JOHN C/O JANE DOE", ["SMITH JOHN"]),
        ("ABC HOLDINGS LLC CARE OF SMITH JOHN & MARY", ["ABC HOLDINGS LLC"]),
        ("DOE JANE & SMITH JOHN ATTN: LEGAL DEPT", ["DOE JANE", "SMITH JOHN"]),
    ],
)
def test_care_of_tail_is_cut(raw, expected):
    assert texts(raw) == expected


@pytest.mark.parametrize("raw", ["MR & MRS JOHN SMITH", "MR AND MRS JOHN SMITH", "MR. & MRS. JOHN SMITH"])
def test_couple_prefix_names_one_owner(raw):
    assert texts(raw) == ["JOHN SMITH"]
