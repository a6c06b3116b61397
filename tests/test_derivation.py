from jotter.derivation import derive_excerpt, derive_title


def test_derive_title_uses_first_line() -> None:
    assert derive_title("Line one\nLine two") == "Line one"


def test_derive_title_trims_whitespace() -> None:
    assert derive_title("   \n  Heading with padding   \nBody") == "Heading with padding"


def test_derive_title_truncates_long_first_line() -> None:
    title = derive_title("a" * 60)

    assert title == "a" * 50 + "..."


def test_derive_title_keeps_line_of_exactly_max_length() -> None:
    assert derive_title("b" * 50) == "b" * 50


def test_derive_title_untitled_for_empty_content() -> None:
    assert derive_title("") == "Untitled"
    assert derive_title(None) == "Untitled"
    assert derive_title("   \n\t  ") == "Untitled"


def test_derive_title_custom_limits() -> None:
    assert derive_title("abcdefgh", max_length=3) == "abc..."
    assert derive_title("", untitled="(none)") == "(none)"


def test_derive_excerpt_short_content_unchanged() -> None:
    assert derive_excerpt("  A short note  ") == "A short note"


def test_derive_excerpt_boundary() -> None:
    exact = "x" * 100
    longer = "y" * 101

    assert derive_excerpt(exact) == exact, "Content at the limit should not be truncated"
    assert derive_excerpt(longer) == "y" * 100 + "...", "Content past the limit gets a marker"


def test_derive_excerpt_empty_content() -> None:
    assert derive_excerpt("") == ""
    assert derive_excerpt(None) == ""


def test_derive_excerpt_custom_length() -> None:
    assert derive_excerpt("Hello world", max_length=5) == "Hello..."
