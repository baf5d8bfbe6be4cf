from nacossdk.util.content import SHOW_CONTENT_SIZE, truncate_content


def test_empty_content():
    assert truncate_content("") == ""


def test_short_content_is_unchanged():
    text = "hello world!"
    assert truncate_content(text) == text


def test_content_at_limit_is_unchanged():
    text = "x" * SHOW_CONTENT_SIZE
    assert truncate_content(text) == text


def test_long_content_is_cut_to_prefix():
    text = "ab" * SHOW_CONTENT_SIZE
    result = truncate_content(text)
    assert len(result) == SHOW_CONTENT_SIZE
    assert text.startswith(result)