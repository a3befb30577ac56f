from __future__ import annotations

from typing import Dict

import pytest

from templater.errors import TemplateSyntaxError
from templater.templates.parser import (
    ConditionalBlock,
    ExpressionElement,
    Template,
    TextElement,
    is_truthy,
    parse_template,
    referenced_variables,
    render,
)


def test_duplicates_collapse() -> None:
    names = referenced_variables("{{a}} {{b}} {{a}}")
    assert names == ["a", "b"]
    assert set(names) == {"a", "b"}


def test_condition_names_are_referenced_in_document_order() -> None:
    body = "{{#if flag}}{{x}}{{else}}{{y}}{{/if}} {{ z }} {{x}}"
    assert referenced_variables(body) == ["flag", "x", "y", "z"]


def test_parse_tree() -> None:
    elements = parse_template("a{{#if f}}b{{name}}{{else}}c{{/if}}")
    assert elements == (
        TextElement("a"),
        ConditionalBlock(
            name="f",
            line=1,
            then=(TextElement("b"), ExpressionElement("name", 1)),
            otherwise=(TextElement("c"),),
        ),
    )


def test_plain_text_renders_unchanged() -> None:
    body = "no expressions here\n{ single } braces } {\n"
    assert render(body, {}) == body
    assert render(body, {"anything": "value"}) == body


def test_interpolation() -> None:
    assert render("Hello, {{ name }}!\n", {"name": "World"}) == "Hello, World!\n"


def test_missing_variable_renders_empty() -> None:
    assert render("[{{missing}}]", {}) == "[]"


def test_values_are_not_html_escaped() -> None:
    assert render("{{a}} {{{b}}}", {"a": "<x>", "b": "&'\""}) == "<x> &'\""


@pytest.mark.parametrize(
    "variables, expected",
    [
        ({"flag": "false"}, "B"),
        ({"flag": "FALSE"}, "B"),
        ({"flag": ""}, "B"),
        ({"flag": "x"}, "A"),
        ({"flag": "true"}, "A"),
        ({"flag": "0"}, "A"),
        ({}, "B"),
    ],
)
def test_truthiness(variables: Dict[str, str], expected: str) -> None:
    assert render("{{#if flag}}A{{else}}B{{/if}}", variables) == expected


def test_if_without_else() -> None:
    assert render("x{{#if flag}}y{{/if}}z", {}) == "xz"
    assert render("x{{#if flag}}y{{/if}}z", {"flag": "yes"}) == "xyz"


def test_nested_blocks() -> None:
    body = "{{#if a}}{{#if b}}ab{{else}}a{{/if}}{{else}}{{#if b}}b{{else}}none{{/if}}{{/if}}"
    assert render(body, {"a": "1", "b": "1"}) == "ab"
    assert render(body, {"a": "1"}) == "a"
    assert render(body, {"b": "1"}) == "b"
    assert render(body, {}) == "none"
    assert referenced_variables(body) == ["a", "b"]


def test_escaped_braces_render_literally() -> None:
    body = r"{{#if windows}}on windows{{else}}not windows{{/if}} \{{ foo }} "
    assert render(body, {"linux": "true", "foo": "x"}) == "not windows {{ foo }} "
    assert referenced_variables(body) == ["windows"]


def test_comments_render_nothing() -> None:
    body = "a{{! a note }}b{{!-- {{ignored}} --}}c"
    assert render(body, {}) == "abc"
    assert referenced_variables(body) == []


def test_is_truthy() -> None:
    assert not is_truthy(None)
    assert not is_truthy("")
    assert not is_truthy("False")
    assert is_truthy("no")


def test_compiled_template_renders_with_all_variables() -> None:
    template = Template.compile("{{greeting}}, {{#if loud}}{{NAME}}{{else}}{{name}}{{/if}}\n")
    variables = {name: name.upper() for name in template.variables()}
    assert template.render(variables) == "GREETING, NAME\n"


@pytest.mark.parametrize(
    "body",
    [
        "{{}}",
        "{{   }}",
        "{{ a b }}",
        "{{#if a}}never closed",
        "stray {{/if}}",
        "{{else}}",
        "{{#each items}}{{/each}}",
        "{{#if a}}{{else}}{{else}}{{/if}}",
        "{{#if}}{{/if}}",
        "{{#if a b}}{{/if}}",
        "{{#if a}}{{/unless}}",
        "{{#}}",
        "{{name",
        "{{{name}}",
    ],
)
def test_malformed_templates_raise(body: str) -> None:
    with pytest.raises(TemplateSyntaxError):
        referenced_variables(body)
    with pytest.raises(TemplateSyntaxError):
        render(body, {})


def test_syntax_error_reports_line() -> None:
    with pytest.raises(TemplateSyntaxError) as excinfo:
        Template.compile("line one\n{{#if a}}\nline three\n")
    assert excinfo.value.line == 2
    assert str(excinfo.value).startswith("<template>:2:")

    located = excinfo.value.with_source("foo.txt", line_offset=3)
    assert str(located) == "foo.txt:5: '{{#if a}}' is never closed"
