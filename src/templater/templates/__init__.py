"""Template parsing, variable resolution and rendering."""

from .header import Header, extract_header, get_header, split_header, without_header
from .items import (
    FileCollection,
    Snippet,
    TemplateFile,
    TemplateItem,
    enumerate_templates,
    item_label,
    item_path,
    load_snippets,
)
from .parser import Template, is_truthy, parse_template, referenced_variables, render
from .resolver import (
    CLIPBOARD_VARIABLE,
    VariableMap,
    build_default_variables,
    resolve_names,
    resolve_variables,
)
from .writer import WriteResult, write_template_file

__all__ = [
    "CLIPBOARD_VARIABLE",
    "FileCollection",
    "Header",
    "Snippet",
    "Template",
    "TemplateFile",
    "TemplateItem",
    "VariableMap",
    "WriteResult",
    "build_default_variables",
    "enumerate_templates",
    "extract_header",
    "get_header",
    "is_truthy",
    "item_label",
    "item_path",
    "load_snippets",
    "parse_template",
    "referenced_variables",
    "render",
    "resolve_names",
    "resolve_variables",
    "split_header",
    "without_header",
    "write_template_file",
]
