"""
Tests for the container index and scope classification on hand-built spans.
"""

import pytest

from uac.core import Comment, ContainerIndex, ContainerKind, ContainerSpan, ParsedSource, classify_comment, is_in_scope


def span(open_, close, kind=ContainerKind.FUNCTION):
    return ContainerSpan(kind, open_, close)


def comment_at(position: int, text: str = "// X") -> Comment:
    return Comment(text=text, start_byte=position, end_byte=position + len(text),
                   start_char=position, end_char=position + len(text))


class TestContainerIndex:

    def test_boundaries_are_inclusive(self):
        index = ContainerIndex([span(10, 20)])
        assert index.contains(10)
        assert index.contains(20)
        assert index.contains(15)
        assert not index.contains(9)
        assert not index.contains(21)

    def test_empty_index(self):
        index = ContainerIndex([])
        assert len(index) == 0
        assert index.find(0) is None

    def test_nested_spans_collapse_to_outermost(self):
        index = ContainerIndex([
            span(30, 40, ContainerKind.FUNCTION),
            span(0, 100, ContainerKind.STRUCT),
            span(50, 60, ContainerKind.VAR_BLOCK),
        ])
        assert len(index) == 1
        assert index.find(35).kind is ContainerKind.STRUCT

    def test_disjoint_spans(self):
        index = ContainerIndex([span(50, 60, ContainerKind.CONST_BLOCK), span(0, 10)])
        assert index.find(5).kind is ContainerKind.FUNCTION
        assert index.find(55).kind is ContainerKind.CONST_BLOCK
        assert index.find(30) is None
        assert index.find(61) is None

    def test_partial_overlap_is_merged(self):
        index = ContainerIndex([span(0, 10), span(5, 20)])
        assert len(index) == 1
        assert index.contains(15)

    def test_invalid_span(self):
        with pytest.raises(ValueError):
            ContainerSpan(ContainerKind.FUNCTION, 10, 5)


class TestClassification:

    def test_in_and_out_of_scope(self):
        source = ParsedSource(text="", containers=[span(10, 20), span(40, 50, ContainerKind.STRUCT)])
        assert classify_comment(source, comment_at(12))
        assert classify_comment(source, comment_at(40))
        assert not classify_comment(source, comment_at(0))
        assert not classify_comment(source, comment_at(25))
        assert not classify_comment(source, comment_at(51))

    def test_comment_before_open_boundary_is_out(self):
        # doc comment right before the container's own declaration
        source = ParsedSource(text="", containers=[span(30, 60)])
        assert not is_in_scope(source, 29)
        assert is_in_scope(source, 30)

    def test_index_is_built_once(self):
        source = ParsedSource(text="", containers=[span(0, 5)])
        assert isinstance(source.index, ContainerIndex)
        assert source.index is source.index

    def test_debug_log_names_comment_range(self, caplog):
        caplog.set_level("DEBUG", logger="uac")
        source = ParsedSource(text="", containers=[span(10, 20, ContainerKind.VAR_BLOCK)])

        classify_comment(source, comment_at(12, "// X"))
        classify_comment(source, comment_at(30, "// Y"))

        assert "Comment [12, 16) is inside var_block [10, 20]" in caplog.text
        assert "Comment [30, 34) is outside every container" in caplog.text
