"""Unit tests for ATS keyword highlighting."""

import pytest

from yamlresume.contexts.compiling.document_nodes import TextNode, TextRun
from yamlresume.contexts.compiling.highlighter import build_keyword_pattern, highlight


@pytest.mark.unit
def test_no_keywords_returns_plain_text():
    node = highlight("React developer", [])
    assert node == TextNode(text="React developer")
    assert node.to_dict() == {"text": "React developer"}


@pytest.mark.unit
def test_blank_keywords_are_ignored():
    assert highlight("React developer", ["", ""]) == TextNode(text="React developer")


@pytest.mark.unit
def test_case_insensitive_match():
    node = highlight("React developer", ["react"])
    assert node.text == ("", TextRun(text="React", bold=True), " developer")


@pytest.mark.unit
def test_fragment_order_preserved():
    node = highlight("Built APIs in Python and python tooling", ["python", "api"])
    parts = [part if isinstance(part, str) else f"*{part.text}*" for part in node.text]
    assert "".join(parts) == "Built *API*s in *Python* and *python* tooling"
    assert node.plain_text == "Built APIs in Python and python tooling"


@pytest.mark.unit
def test_substring_inside_word_matches():
    node = highlight("Reactive systems", ["react"])
    assert TextRun(text="React", bold=True) in node.text
    assert "ive systems" in node.text


@pytest.mark.unit
def test_keywords_are_literal():
    node = highlight("C++ and C#", ["C++"])
    assert node.text == ("", TextRun(text="C++", bold=True), " and C#")


@pytest.mark.unit
def test_first_listed_keyword_wins_at_same_position():
    node = highlight("JavaScript", ["Java", "JavaScript"])
    assert node.text == ("", TextRun(text="Java", bold=True), "Script")

    node = highlight("JavaScript", ["JavaScript", "Java"])
    assert node.text == ("", TextRun(text="JavaScript", bold=True), "")


@pytest.mark.unit
def test_style_is_carried():
    assert highlight("text", [], style="body").style == "body"
    assert highlight("text", ["x"], style="body").style == "body"


@pytest.mark.unit
def test_wire_format_of_highlighted_node():
    node = highlight("Node.js expert", ["node.js"])
    assert node.to_dict() == {"text": ["", {"text": "Node.js", "bold": True}, " expert"]}


@pytest.mark.unit
def test_pattern_is_case_insensitive_alternation():
    pattern = build_keyword_pattern(["a.b", "c"])
    assert pattern.split("xA.By") == ["x", "A.B", "y"]
    assert pattern.split("axb") == ["axb"]
