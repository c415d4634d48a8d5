"""Tests for command prefix matching and prompt construction."""

import pytest

from groq_bridge.domain.commands import parse_command
from groq_bridge.domain.models import Command, CommandRequest


class TestPrompts:
    def test_summarize(self):
        req = parse_command("/summarize hello world")
        assert req.command is Command.SUMMARIZE
        assert req.prompt == "Summarize this:\nhello world"

    def test_explain(self):
        req = parse_command("/explain foo")
        assert req.command is Command.EXPLAIN
        assert req.prompt == "Explain this:\nfoo"

    def test_translate(self):
        req = parse_command("/translate bonjour")
        assert req.command is Command.TRANSLATE
        assert req.prompt == "Translate this to English:\nbonjour"


class TestArgument:
    def test_strips_only_one_space(self):
        req = parse_command("/explain   indented")
        assert req.argument == "  indented"

    def test_trailing_whitespace_kept(self):
        req = parse_command("/summarize text \n")
        assert req.argument == "text \n"

    def test_bare_prefix_gives_empty_argument(self):
        req = parse_command("/summarize")
        assert req.argument == ""
        assert req.prompt == "Summarize this:\n"

    def test_multiline_argument(self):
        req = parse_command("/summarize line one\nline two")
        assert req.prompt == "Summarize this:\nline one\nline two"

    def test_no_separating_space(self):
        req = parse_command("/explainfoo")
        assert req.command is Command.EXPLAIN
        assert req.argument == "foo"


class TestNoMatch:
    @pytest.mark.parametrize("content", [
        "",
        "hello there",
        "summarize this please",
        " /summarize leading space",
        "please /explain this",
        "/SUMMARIZE shouting",
        "!summarize wrong sigil",
    ])
    def test_ordinary_text_ignored(self, content):
        assert parse_command(content) is None


class TestPriority:
    def test_first_prefix_wins(self):
        req = parse_command("/summarize /translate bonjour")
        assert req.command is Command.SUMMARIZE
        assert req.argument == "/translate bonjour"

    def test_declaration_order(self):
        assert [c.prefix for c in Command] == ["/summarize", "/explain", "/translate"]


class TestCommandRequest:
    def test_frozen(self):
        req = CommandRequest(command=Command.EXPLAIN, argument="x")
        with pytest.raises(Exception):
            req.argument = "y"

    def test_directives(self):
        assert Command.SUMMARIZE.directive == "Summarize this:"
        assert Command.EXPLAIN.directive == "Explain this:"
        assert Command.TRANSLATE.directive == "Translate this to English:"
