"""Property-based tests for scanner invariants using Hypothesis."""

from hypothesis import given, settings
from hypothesis import strategies as st

from loxscan import KEYWORDS, TokenType, scan

# Characters the scanner accepts outside of strings and comments.
LOX_ALPHABET = "abcXYZ019(){},.-+;*/!=<> \t\r\n"

lexemes = st.one_of(
    st.sampled_from("(){},.-+;*/!=<>"),
    st.sampled_from(["!=", "==", "<=", ">="]),
    st.sampled_from(sorted(KEYWORDS)),
    st.from_regex(r"[A-Za-z][A-Za-z0-9]{0,8}", fullmatch=True),
    st.from_regex(r"[0-9]{1,6}(\.[0-9]{1,6})?", fullmatch=True),
    st.from_regex(r'"[^"]{0,12}"', fullmatch=True),
)


class TestTermination:
    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_always_ends_with_eof(self, source: str) -> None:
        """Every scan ends with exactly one EOF Token, for any input."""
        tokens = scan(source).tokens

        assert tokens[-1].type is TokenType.EOF
        assert tokens[-1].lexeme == ""
        assert sum(1 for t in tokens if t.type is TokenType.EOF) == 1

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_eof_line_counts_every_newline(self, source: str) -> None:
        """Newlines are counted once, inside strings and comments too."""
        tokens = scan(source).tokens
        assert tokens[-1].line == source.count("\n") + 1

    @given(st.text(max_size=500))
    @settings(max_examples=100)
    def test_lines_never_decrease(self, source: str) -> None:
        lines = [t.line for t in scan(source).tokens]
        assert lines == sorted(lines)
        assert lines[0] >= 1


class TestDiagnostics:
    @given(st.text(alphabet=LOX_ALPHABET, max_size=300))
    @settings(max_examples=200)
    def test_clean_alphabet_has_no_diagnostics(self, source: str) -> None:
        """Without quotes or unknown characters the scan is error free."""
        assert scan(source).diagnostics == []

    @given(st.text(alphabet=LOX_ALPHABET + "@#", max_size=300))
    @settings(max_examples=100)
    def test_one_diagnostic_per_unknown_character(self, source: str) -> None:
        # Unknown characters can't hide inside a string here, but a comment
        # swallows the rest of its line.
        visible = "\n".join(line.split("//")[0] for line in source.split("\n"))
        diagnostics = scan(source).diagnostics
        assert len(diagnostics) == visible.count("@") + visible.count("#")


class TestRescanning:
    @given(lexemes)
    @settings(max_examples=300)
    def test_lexeme_rescans_to_same_type(self, text: str) -> None:
        """A single Token's source text scans back to a single Token."""
        tokens, diagnostics = scan(text)
        assert diagnostics == []
        assert len(tokens) == 2

        token = tokens[0]
        source = f'"{token.lexeme}"' if token.type is TokenType.STRING else token.lexeme
        again = scan(source).tokens
        assert len(again) == 2
        assert again[0].type is token.type
        assert again[0].literal == token.literal

    @given(st.lists(lexemes, max_size=30))
    @settings(max_examples=100)
    def test_space_separated_lexemes(self, parts: list) -> None:
        """Space separated lexemes scan to one Token each."""
        tokens, diagnostics = scan(" ".join(parts))
        assert diagnostics == []
        assert len(tokens) == len(parts) + 1
