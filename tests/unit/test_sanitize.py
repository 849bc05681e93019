from burnread.domain.sanitize import (
    MAX_MESSAGE_LENGTH,
    escape_markup,
    is_acceptable,
    sanitize_input,
)


def test_script_tag_is_neutralised():
    out = sanitize_input("<script>alert(1)</script>")
    assert "<" not in out and ">" not in out
    assert out == "&lt;script&gt;alert(1)&lt;&#x2F;script&gt;"


def test_every_markup_character_is_escaped():
    assert escape_markup("&\"'<>/\\`") == (
        "&amp;&quot;&#x27;&lt;&gt;&#x2F;&#x5C;&#96;"
    )


def test_plain_text_is_unchanged_apart_from_trim():
    assert sanitize_input("  hello world \n") == "hello world"


def test_escaping_is_not_idempotent():
    once = sanitize_input("<b>")
    assert sanitize_input(once) == "&amp;lt;b&amp;gt;"


def test_sanitize_truncates_to_max_length():
    out = sanitize_input("a" * 20, max_length=5)
    assert out == "aaaaa"


def test_sanitize_truncates_after_escaping():
    out = sanitize_input("<" * MAX_MESSAGE_LENGTH)
    assert len(out) == MAX_MESSAGE_LENGTH


def test_length_bounds():
    assert is_acceptable("x" * MAX_MESSAGE_LENGTH) is True
    assert is_acceptable("x" * (MAX_MESSAGE_LENGTH + 1)) is False


def test_custom_length_bound():
    assert is_acceptable("abc", max_length=3) is True
    assert is_acceptable("abcd", max_length=3) is False


def test_rejects_empty_blank_and_non_text():
    assert is_acceptable("") is False
    assert is_acceptable("   \t\n") is False
    assert is_acceptable(None) is False
    assert is_acceptable(42) is False
    assert is_acceptable(["hi"]) is False
    assert is_acceptable(b"hi") is False


def test_accepts_ordinary_text():
    assert is_acceptable(" hello ") is True


def test_rejects_text_that_is_not_valid_utf8():
    assert is_acceptable("hi \ud800") is False
    assert is_acceptable("\udfff") is False


def test_accepts_non_ascii_text():
    assert is_acceptable("héllo wörld ✓ 🔥") is True
