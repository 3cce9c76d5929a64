"""
Tests for the comment processing orchestrator on hand-built sources.
"""

from uac.core import CaseMode, Comment, ContainerKind, ContainerSpan, ParsedSource, process_comments


def make_source(*comments):
    """Build a source with a single container over [100, 200]."""
    built = [
        Comment(text=text, start_byte=pos, end_byte=pos + len(text), start_char=pos, end_char=pos + len(text))
        for pos, text in comments
    ]
    return ParsedSource(text="", comments=built, containers=[ContainerSpan(ContainerKind.FUNCTION, 100, 200)])


def test_counts_and_mutates_in_scope_comments():
    source = make_source(
        (10, "// OUTSIDE Stays"),
        (110, "// INSIDE Changes"),
        (120, "// TODO Stays TOO"),
        (130, "// already lower"),
        (150, "/* BLOCK Inside */"),
    )

    stats = process_comments(source, CaseMode.FULL_LOWERCASE)

    assert stats == (2, True)
    assert stats.changed == 2
    assert stats.modified
    texts = [c.text for c in source.comments]
    assert texts == [
        "// OUTSIDE Stays",
        "// inside changes",
        "// TODO Stays TOO",
        "// already lower",
        "/* block inside */",
    ]


def test_original_text_is_kept():
    source = make_source((110, "// LOUD"))
    process_comments(source, CaseMode.FULL_LOWERCASE)

    comment = source.comments[0]
    assert comment.original == "// LOUD"
    assert comment.modified
    assert source.modified_comments() == [comment]


def test_second_run_is_a_no_op():
    source = make_source((110, "// THIS Should BE Converted"), (120, "// Another ONE"))

    assert process_comments(source, CaseMode.TITLE_CASE) == (2, True)
    assert process_comments(source, CaseMode.TITLE_CASE) == (0, False)
    assert [c.text for c in source.comments] == ["// tHIS Should BE Converted", "// another ONE"]


def test_nothing_in_scope():
    source = make_source((10, "// OUTSIDE"), (250, "// AFTER"))
    assert process_comments(source, CaseMode.FULL_LOWERCASE) == (0, False)
    assert not source.modified_comments()
