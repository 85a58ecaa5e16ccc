"""Property-based tests for scanner invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from wordscan.lexer import Scanner
from wordscan.tokens import TokenKind

# Surrogates cannot appear in a valid str produced by decoding
any_text = st.text(alphabet=st.characters(exclude_categories=("Cs",)), max_size=500)


class TestBasicInvariants:
    """Test basic invariants that should always hold."""

    @given(any_text)
    @settings(max_examples=200)
    def test_always_ends_with_eof(self, source: str) -> None:
        """Every tokenization must end with exactly one EOF token."""
        tokens = list(Scanner(source).tokenize())

        assert len(tokens) >= 1, "Must have at least EOF token"
        assert tokens[-1].kind == TokenKind.EOF, "Last token must be EOF"
        eof_count = sum(1 for t in tokens if t.kind == TokenKind.EOF)
        assert eof_count == 1, "Must have exactly one EOF token"

    @given(any_text)
    @settings(max_examples=200)
    def test_eof_at_source_length(self, source: str) -> None:
        """EOF is empty and sits at the end of the source."""
        eof = list(Scanner(source).tokenize())[-1]

        assert eof.text == ""
        assert eof.offset == len(source)

    @given(any_text)
    @settings(max_examples=100)
    def test_run_tokens_never_empty(self, source: str) -> None:
        """Only EOF may have an empty text."""
        tokens = list(Scanner(source).tokenize())

        for token in tokens[:-1]:
            assert token.text, f"Empty {token.kind.name} token at {token.offset}"

    @given(any_text)
    @settings(max_examples=100)
    def test_token_count_bounded(self, source: str) -> None:
        """At most one token per character, plus EOF."""
        tokens = list(Scanner(source).tokenize())
        assert len(tokens) <= len(source) + 1


class TestContentPreservation:
    """Test that content is not lost or reordered during tokenization."""

    @given(any_text)
    @settings(max_examples=200)
    def test_reconstruction(self, source: str) -> None:
        """Concatenated token texts reproduce the source exactly."""
        tokens = list(Scanner(source).tokenize())
        combined = "".join(t.text for t in tokens if t.kind != TokenKind.EOF)

        assert combined == source

    @given(any_text)
    @settings(max_examples=200)
    def test_offsets_chain(self, source: str) -> None:
        """Each token starts where the previous one ended."""
        tokens = list(Scanner(source).tokenize())

        assert tokens[0].offset == 0
        for prev, token in zip(tokens, tokens[1:]):
            assert token.offset == prev.offset + len(prev.text)

    @given(any_text)
    @settings(max_examples=100)
    def test_text_matches_source_slice(self, source: str) -> None:
        """Token text is exactly the source slice at its offset."""
        for token in Scanner(source).tokenize():
            assert source[token.offset : token.end] == token.text


class TestMaximalRuns:
    """Runs are maximal and never cross a class boundary."""

    @given(any_text)
    @settings(max_examples=200)
    def test_adjacent_tokens_differ_in_kind(self, source: str) -> None:
        """No two consecutive run tokens share a kind."""
        runs = list(Scanner(source).tokenize())[:-1]

        for prev, token in zip(runs, runs[1:]):
            assert prev.kind != token.kind, f"Split run at offset {token.offset}"

    @given(st.text(alphabet="ab12 \t\n,.;!$+", max_size=200))
    @settings(max_examples=100)
    def test_run_is_homogeneous(self, source: str) -> None:
        """Every character of a run classifies to the run's kind."""
        from wordscan.charsets import classify

        for token in list(Scanner(source).tokenize())[:-1]:
            assert all(classify(c) is token.kind for c in token.text)


class TestDeterminism:
    """Test that tokenization is deterministic."""

    @given(st.integers(min_value=2, max_value=10), st.text(max_size=100))
    @settings(max_examples=30)
    def test_n_times_tokenization(self, n: int, source: str) -> None:
        """Tokenizing N times should always produce identical results."""
        first_result = list(Scanner(source).tokenize())

        for _ in range(n - 1):
            assert list(Scanner(source).tokenize()) == first_result


class TestBoundaryConditions:
    """Test boundary conditions and edge cases."""

    @pytest.mark.parametrize("length", [0, 1, 2, 10, 100, 1000])
    def test_single_run_of_various_lengths(self, length: int) -> None:
        """A homogeneous source is one token plus EOF."""
        source = "a" * length
        tokens = list(Scanner(source).tokenize())

        assert tokens[-1].kind == TokenKind.EOF
        assert len(tokens) == (2 if length else 1)

    @pytest.mark.parametrize("count", [1, 10, 500])
    def test_alternating_classes(self, count: int) -> None:
        """Alternating word/space characters produce one token each."""
        source = "a " * count
        tokens = list(Scanner(source).tokenize())

        assert len(tokens) == 2 * count + 1
