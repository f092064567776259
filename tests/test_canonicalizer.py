import pytest

from hawker_menu.services.menu_analysis import canonicalize_name


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Chicken Rice", "chicken rice"),
        ("Mee Goreng", "noodle goreng"),
        ("NASI LEMAK", "rice lemak"),
        ("Fried Bee Hoon", "fried rice vermicelli"),
        ("  fishball   mee  ", "fishball noodle"),
        ("bee\thoon soup", "rice vermicelli soup"),
    ],
)
def test_canonicalize_known_words(raw, expected):
    assert canonicalize_name(raw) == expected


def test_substitution_is_whole_word_only():
    # 'meesua' and 'nasik' contain the keywords but are different words
    assert canonicalize_name("Meesua") == "meesua"
    assert canonicalize_name("nasik kandar") == "nasik kandar"
    assert canonicalize_name("beehoon") == "beehoon"


@pytest.mark.parametrize(
    "raw",
    ["Mee Siam", "Nasi  Padang", "BEE   HOON goreng", "mee mee", "Char Kway Teow", "", "   "],
)
def test_canonicalize_is_idempotent(raw):
    once = canonicalize_name(raw)
    assert canonicalize_name(once) == once
