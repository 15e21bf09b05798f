from csterms.services.crawl.text import clean_text, comparison_key, is_valid_term


def test_clean_text_collapses_whitespace_and_trims():
    assert clean_text("  Binary \n\t  search\r\n tree  ") == "Binary search tree"
    assert clean_text("") == ""
    assert clean_text(None) == ""


def test_clean_text_drops_non_printable_characters():
    assert clean_text("Hash\x00ing\u200b table") == "Hashing table"
    # Non-breaking spaces count as whitespace, not as garbage
    assert clean_text("Linked\u00a0list") == "Linked list"


def test_clean_text_is_idempotent():
    samples = [
        "  Stack \n frame ",
        "\u200b leading format char",
        "Queue\t\tFIFO\x07 structure ",
        "already clean",
    ]
    for raw in samples:
        once = clean_text(raw)
        assert clean_text(once) == once
        assert once == once.strip()
        assert "  " not in once


def test_comparison_key_strips_parenthetical_qualifier():
    assert comparison_key("API (application programming interface)") == "API"
    assert comparison_key("Compiler") == "Compiler"
    assert comparison_key("Hash(map)") == "Hash(map)"


def test_is_valid_term_rejects_short_values():
    assert not is_valid_term("A", "A perfectly reasonable definition.")
    assert not is_valid_term("Bit", "Too short")
    assert is_valid_term("Bit", "Binary digit")


def test_is_valid_term_rejects_restatements():
    assert not is_valid_term("Cache", "Cache memory")
    assert not is_valid_term("API (application programming interface)", "The API layer")


def test_is_valid_term_restatement_boundary():
    # key "Cache" is 5 chars; a containing definition needs at least 25 chars
    assert not is_valid_term("Cache", "cache" + "." * 19)
    assert is_valid_term("Cache", "cache" + "." * 20)


def test_is_valid_term_accepts_definition_containing_term_with_substance():
    definition = "A cache stores copies of data so future requests are served faster."
    assert is_valid_term("Cache", definition)


def test_is_valid_term_accepts_definition_without_term():
    assert is_valid_term(
        "Algorithm",
        "A finite sequence of well-defined steps for solving a problem or class of problems.",
    )
