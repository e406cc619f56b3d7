"""Property-based tests for parser invariants using Hypothesis.

These hold for every input: the parser is total, inline runs partition their
text, and lists are always maximal.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from briefdown.classifier import classify
from briefdown.inline import tokenize
from briefdown.nodes import Blank, Bold, Code, Divider, Heading, List, Paragraph, Plain

# Characters that exercise every marker
MARKUP_ALPHABET = "#-*`123. \t\nab"


class TestTotality:
    @given(st.text(max_size=1000))
    @settings(max_examples=200)
    def test_classify_never_raises(self, source: str) -> None:
        blocks = classify(source)
        assert isinstance(blocks, tuple)

    @given(st.text(alphabet=MARKUP_ALPHABET, max_size=300))
    @settings(max_examples=200)
    def test_classify_markup_never_raises(self, source: str) -> None:
        for block in classify(source):
            assert isinstance(block, (Heading, Paragraph, List, Divider, Blank))

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_tokenize_never_raises(self, text: str) -> None:
        for run in tokenize(text):
            assert isinstance(run, (Plain, Bold, Code))

    @given(st.text(alphabet="*` ", max_size=200))
    @settings(max_examples=100)
    def test_tokenize_delimiters_only(self, text: str) -> None:
        tokenize(text)


class TestReconstruction:
    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_runs_rebuild_text(self, text: str) -> None:
        assert "".join(run.source for run in tokenize(text)) == text

    @given(st.text(alphabet="*`ab \n", max_size=200))
    @settings(max_examples=200)
    def test_runs_rebuild_delimiter_dense_text(self, text: str) -> None:
        assert "".join(run.source for run in tokenize(text)) == text

    @given(st.text(alphabet="*`ab", max_size=200))
    @settings(max_examples=100)
    def test_no_empty_runs(self, text: str) -> None:
        for run in tokenize(text):
            assert run.text != ""

    @given(st.text(alphabet="*`ab", max_size=200))
    @settings(max_examples=100)
    def test_no_adjacent_plain_runs(self, text: str) -> None:
        runs = tokenize(text)
        for prev, cur in zip(runs, runs[1:]):
            assert not (isinstance(prev, Plain) and isinstance(cur, Plain))


class TestBlockInvariants:
    @given(st.text(alphabet=MARKUP_ALPHABET, max_size=300))
    @settings(max_examples=200)
    def test_lists_are_maximal(self, source: str) -> None:
        blocks = classify(source)
        for prev, cur in zip(blocks, blocks[1:]):
            if isinstance(prev, List) and isinstance(cur, List):
                assert prev.ordered != cur.ordered

    @given(st.text(alphabet=MARKUP_ALPHABET, max_size=300))
    @settings(max_examples=200)
    def test_lists_are_never_empty(self, source: str) -> None:
        for block in classify(source):
            if isinstance(block, List):
                assert block.items

    @given(st.text(alphabet=MARKUP_ALPHABET, max_size=300))
    @settings(max_examples=200)
    def test_every_line_is_accounted_for(self, source: str) -> None:
        """Each line yields exactly one block or one list item."""
        if not source:
            return
        blocks = classify(source)
        count = sum(len(b.items) if isinstance(b, List) else 1 for b in blocks)
        assert count == len(source.split("\n"))

    @given(st.lists(st.sampled_from(["- x", "* y", "1. z", "22. w"]), min_size=1, max_size=30))
    @settings(max_examples=100)
    def test_item_order_is_preserved(self, lines: list[str]) -> None:
        blocks = classify("\n".join(lines))
        items = [item for b in blocks for item in b.items]
        assert items == [line.split(" ", 1)[1] for line in lines]

    @given(st.text(max_size=300))
    @settings(max_examples=100)
    def test_deterministic(self, source: str) -> None:
        assert classify(source) == classify(source)
