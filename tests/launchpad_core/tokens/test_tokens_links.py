import pytest

from launchpad_core.tokens.links import normalize_intuition_link, validate_intuition_link

ATOM_HASH = "0x" + "ab12" * 16
ATOM_URL = f"https://portal.intuition.systems/explore/atom/{ATOM_HASH}"


@pytest.mark.parametrize(
    "link, expected",
    [
        (ATOM_URL, ATOM_URL),
        (f"  {ATOM_URL}  ", ATOM_URL),
        (f"{ATOM_URL}/claims?tab=positions#top", ATOM_URL),
        ("https://portal.intuition.systems/explore/atom/0xabc/extra", "https://portal.intuition.systems/explore/atom/0xabc"),
        ("", ""),
        ("   ", ""),
        ("not a url", ""),
        ("https://portal.intuition.systems/explore/triple/0xabc", ""),
    ]
)
def test_normalize_intuition_link(link, expected):
    assert normalize_intuition_link(link) == expected


@pytest.mark.parametrize("link", ["", "  "])
def test_validate_empty_link_is_valid(link):
    result = validate_intuition_link(link)
    assert result.valid is True
    assert result.normalized == ""
    assert result.error is None


def test_validate_valid_link():
    result = validate_intuition_link(ATOM_URL)
    assert result.valid is True
    assert result.normalized == ATOM_URL


def test_validate_valid_link_with_query_is_normalized():
    result = validate_intuition_link(f"{ATOM_URL}?ref=launch")
    assert result.valid is True
    assert result.normalized == ATOM_URL


@pytest.mark.parametrize(
    "link, error",
    [
        (f"http://portal.intuition.systems/explore/atom/{ATOM_HASH}", 'Link must start with "https://"'),
        ("https://", "Invalid URL format"),
        (f"https://example.com/explore/atom/{ATOM_HASH}", "Link must be from portal.intuition.systems"),
        (
            "https://portal.intuition.systems/explore/atom/0x1234",
            "Link must be in format: https://portal.intuition.systems/explore/atom/0x...",
        ),
        (
            f"{ATOM_URL}/claims",
            "Link must be in format: https://portal.intuition.systems/explore/atom/0x...",
        ),
    ]
)
def test_validate_invalid_links(link, error):
    result = validate_intuition_link(link)
    assert result.valid is False
    assert result.error == error
    assert result.normalized is None
