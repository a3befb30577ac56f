"""The small Handlebars-style language templates are written in.

Supported tags:

- ``{{name}}`` / ``{{{name}}}``: insert the value of ``name``
- ``{{#if name}}``, ``{{else}}``, ``{{/if}}``: conditional blocks, nestable
- ``{{! comment }}`` / ``{{!-- comment --}}``: render nothing
- ``\\{{``: a literal ``{{``

Values are inserted as-is (no HTML escaping). The same parse step backs
both variable scanning and rendering, so both raise TemplateSyntaxError on
malformed input.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator, List, Mapping, Optional, Tuple, Union

from ..errors import TemplateSyntaxError

FALSE_LITERAL = "false"

_NAME_RE = re.compile(r"^[A-Za-z0-9_.\-]+$")


@dataclass(frozen=True)
class TextElement:
    text: str


@dataclass(frozen=True)
class ExpressionElement:
    name: str
    line: int


@dataclass(frozen=True)
class ConditionalBlock:
    name: str
    line: int
    then: Tuple["Element", ...]
    otherwise: Tuple["Element", ...] = ()


Element = Union[TextElement, ExpressionElement, ConditionalBlock]


@dataclass(frozen=True)
class _Tag:
    content: str
    line: int
    raw: bool = False


_Token = Union[str, _Tag]


def _line_at(source: str, offset: int) -> int:
    return source.count("\n", 0, offset) + 1


def _tokenize(source: str) -> Iterator[_Token]:
    """Yield plain-text chunks (str) and tags (_Tag); comments are dropped."""
    pos = 0
    while True:
        start = source.find("{{", pos)
        if start == -1:
            if pos < len(source):
                yield source[pos:]
            return

        if start > 0 and source[start - 1] == "\\":
            yield source[pos : start - 1] + "{{"
            pos = start + 2
            continue

        if start > pos:
            yield source[pos:start]

        line = _line_at(source, start)
        if source.startswith("{{!--", start):
            opener, closer = "{{!--", "--}}"
        elif source.startswith("{{{", start):
            opener, closer = "{{{", "}}}"
        else:
            opener, closer = "{{", "}}"

        end = source.find(closer, start + len(opener))
        if end == -1:
            raise TemplateSyntaxError(f"unclosed '{opener}'", line=line)
        pos = end + len(closer)

        content = source[start + len(opener) : end].strip()
        if opener == "{{!--" or content.startswith("!"):
            continue
        yield _Tag(content=content, line=line, raw=opener == "{{{")


def _check_name(name: str, line: int) -> str:
    if not name:
        raise TemplateSyntaxError("empty expression", line=line)
    if not _NAME_RE.match(name):
        raise TemplateSyntaxError(f"invalid expression '{name}'", line=line)
    return name


@dataclass
class _OpenBlock:
    name: str
    line: int
    then: List[Element] = field(default_factory=list)
    otherwise: Optional[List[Element]] = None

    @property
    def current(self) -> List[Element]:
        return self.then if self.otherwise is None else self.otherwise


def parse_template(source: str) -> Tuple[Element, ...]:
    """Parse ``source`` into a tree of elements."""
    root: List[Element] = []
    stack: List[_OpenBlock] = []

    def current() -> List[Element]:
        return stack[-1].current if stack else root

    for token in _tokenize(source):
        if isinstance(token, str):
            current().append(TextElement(token))
            continue

        content, line = token.content, token.line
        if token.raw or not content or content[0] not in "#/" and content != "else":
            current().append(ExpressionElement(_check_name(content, line), line))
        elif content[0] == "#":
            parts = content[1:].split()
            if not parts:
                raise TemplateSyntaxError("empty block expression", line=line)
            if parts[0] != "if":
                raise TemplateSyntaxError(
                    f"unsupported block helper '{parts[0]}'", line=line
                )
            if len(parts) != 2:
                raise TemplateSyntaxError(
                    "'#if' expects exactly one variable name", line=line
                )
            stack.append(_OpenBlock(_check_name(parts[1], line), line))
        elif content[0] == "/":
            closing = content[1:].strip()
            if not stack:
                raise TemplateSyntaxError(
                    f"'{{{{/{closing}}}}}' without a matching '{{{{#if}}}}'", line=line
                )
            if closing != "if":
                raise TemplateSyntaxError(
                    f"expected '{{{{/if}}}}' to close the block opened on line "
                    f"{stack[-1].line}, found '{{{{/{closing}}}}}'",
                    line=line,
                )
            block = stack.pop()
            current().append(
                ConditionalBlock(
                    name=block.name,
                    line=block.line,
                    then=tuple(block.then),
                    otherwise=tuple(block.otherwise or ()),
                )
            )
        else:
            if not stack:
                raise TemplateSyntaxError(
                    "'{{else}}' outside of an '{{#if}}' block", line=line
                )
            if stack[-1].otherwise is not None:
                raise TemplateSyntaxError(
                    "more than one '{{else}}' in the same block", line=line
                )
            stack[-1].otherwise = []

    if stack:
        block = stack[-1]
        raise TemplateSyntaxError(
            f"'{{{{#if {block.name}}}}}' is never closed", line=block.line
        )
    return tuple(root)


def is_truthy(value: Optional[str]) -> bool:
    """A variable is true unless it is missing, empty or ``false`` (any case)."""
    if value is None:
        return False
    return value != "" and value.lower() != FALSE_LITERAL


def _collect_names(elements: Tuple[Element, ...], names: List[str]) -> None:
    for element in elements:
        if isinstance(element, ExpressionElement):
            if element.name not in names:
                names.append(element.name)
        elif isinstance(element, ConditionalBlock):
            if element.name not in names:
                names.append(element.name)
            _collect_names(element.then, names)
            _collect_names(element.otherwise, names)


def _render_elements(
    elements: Tuple[Element, ...], variables: Mapping[str, str], out: List[str]
) -> None:
    for element in elements:
        if isinstance(element, TextElement):
            out.append(element.text)
        elif isinstance(element, ExpressionElement):
            out.append(variables.get(element.name, ""))
        else:
            branch = (
                element.then if is_truthy(variables.get(element.name)) else element.otherwise
            )
            _render_elements(branch, variables, out)


@dataclass(frozen=True)
class Template:
    """A parsed template body."""

    elements: Tuple[Element, ...]

    @classmethod
    def compile(cls, source: str) -> "Template":
        return cls(parse_template(source))

    def variables(self) -> List[str]:
        """Unique referenced names, in order of first appearance."""
        names: List[str] = []
        _collect_names(self.elements, names)
        return names

    def render(self, variables: Mapping[str, str]) -> str:
        out: List[str] = []
        _render_elements(self.elements, variables, out)
        return "".join(out)


def referenced_variables(body: str) -> List[str]:
    return Template.compile(body).variables()


def render(body: str, variables: Mapping[str, str]) -> str:
    return Template.compile(body).render(variables)
