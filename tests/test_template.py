"""Tests for line template rendering."""

from etiqueta import render_template
from etiqueta.template import DEFAULT_TEMPLATE

TOKENS = {"{prefix}": "P", "{tag}": "<b>x</b>", "{suffix}": "S"}


class TestRenderTemplate:
    def test_default_template(self) -> None:
        assert render_template(DEFAULT_TEMPLATE, TOKENS) == "P\n<b>x</b>\nS"

    def test_empty_lines_dropped(self) -> None:
        tokens = {**TOKENS, "{prefix}": "", "{suffix}": ""}
        assert render_template(DEFAULT_TEMPLATE, tokens) == "<b>x</b>"

    def test_real_and_literal_newlines(self) -> None:
        assert render_template("{prefix}\n{tag}\\n{suffix}", TOKENS) == "P\n<b>x</b>\nS"

    def test_tokens_on_one_line(self) -> None:
        assert render_template("{prefix}{tag}{suffix}", TOKENS) == "P<b>x</b>S"

    def test_unknown_tokens_left_in_place(self) -> None:
        assert render_template("{tag} {other}", TOKENS) == "<b>x</b> {other}"

    def test_custom_tokens(self) -> None:
        tokens = {**TOKENS, "{icon}": "<i></i>"}
        assert render_template("{icon}\\n{tag}", tokens) == "<i></i>\n<b>x</b>"

    def test_whitespace_only_lines_dropped(self) -> None:
        assert render_template("  \\n{tag}", TOKENS) == "<b>x</b>"
