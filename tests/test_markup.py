"""Tests for summary emphasis markup and exports."""

from lease_intake.sinks.markup import (
    TextRun,
    parse_summary,
    split_emphasis,
    strip_emphasis,
    to_html_fragment,
    to_print_html,
)

SUMMARY = "**RESUMO LOCAÇÃO**\n\n**Aluguel**: R$ 2.500,00"


class TestSplitEmphasis:
    """Tests for split_emphasis."""

    def test_plain_line(self) -> None:
        assert split_emphasis("texto simples") == [TextRun("texto simples")]

    def test_bold_runs(self) -> None:
        assert split_emphasis("**Locador**: Ana e **Locatário**: João") == [
            TextRun("Locador", bold=True),
            TextRun(": Ana e "),
            TextRun("Locatário", bold=True),
            TextRun(": João"),
        ]

    def test_unmatched_delimiter_kept(self) -> None:
        assert split_emphasis("a ** b") == [TextRun("a ** b")]

    def test_empty_line(self) -> None:
        assert split_emphasis("") == []

    def test_empty_bold_run_dropped(self) -> None:
        assert split_emphasis("a****b") == [TextRun("a"), TextRun("b")]
        assert "<strong></strong>" not in to_print_html("a****b")


class TestExports:
    """Tests for the plain-text and print exports."""

    def test_parse_summary_lines(self) -> None:
        lines = parse_summary(SUMMARY)

        assert len(lines) == 3
        assert lines[0] == [TextRun("RESUMO LOCAÇÃO", bold=True)]
        assert lines[1] == []

    def test_strip_emphasis(self) -> None:
        assert strip_emphasis(SUMMARY) == "RESUMO LOCAÇÃO\n\nAluguel: R$ 2.500,00"

    def test_html_fragment_escapes(self) -> None:
        fragment = to_html_fragment("**A & B** <x>")
        assert fragment == "<strong>A &amp; B</strong> &lt;x&gt;"

    def test_html_fragment_line_breaks(self) -> None:
        assert to_html_fragment("a\nb") == "a<br>b"

    def test_print_html(self) -> None:
        document = to_print_html(SUMMARY)

        assert "<title>Resumo Locação</title>" in document
        assert "<strong>RESUMO LOCAÇÃO</strong>" in document
        assert "**" not in document

    def test_print_html_custom_title(self) -> None:
        assert "<h1>Contrato &lt;1&gt;</h1>" in to_print_html("x", title="Contrato <1>")
