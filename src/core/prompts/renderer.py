"""Prompt rendering over an explicit render tree.

Why a render tree instead of a template language:
- A template is data (immutable nodes), so caller-supplied values are only
  ever substituted as text and never interpreted as template syntax.
- Rendering is a pure function: identical input yields identical text.

Nodes:
- `Text`: literal text.
- `Value`: the value at a dotted path (`"job_details.title"`, `"."` for the
  current element inside `Each`).
- `Join`: a list of scalars joined inline (`"a, b, c"`).
- `Each`: one rendered block per element of a list.
- `IfPresent`: `then` when the value at a path is not None, else `otherwise`.
  With `falsy_is_absent`, zero and empty values also take `otherwise`.

Paths are looked up in the innermost scope first and then outwards, so a
block inside `Each` can still reach top-level context values.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Union

from pydantic import BaseModel

from core.errors import TemplateError


@dataclass(frozen=True)
class Text:
    text: str


@dataclass(frozen=True)
class Value:
    path: str


@dataclass(frozen=True)
class Join:
    path: str
    separator: str = ", "


@dataclass(frozen=True)
class Each:
    path: str
    body: tuple["Node", ...]
    separator: str = ""


@dataclass(frozen=True)
class IfPresent:
    path: str
    then: tuple["Node", ...]
    otherwise: tuple["Node", ...] = ()
    falsy_is_absent: bool = False


Node = Union[Text, Value, Join, Each, IfPresent]
Template = tuple[Node, ...]

_MISSING = object()


def seq(*parts: Node | str) -> Template:
    """Build a template; plain strings become `Text` nodes."""

    return tuple(Text(p) if isinstance(p, str) else p for p in parts)


def format_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return format_value(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _lookup(scopes: list[Any], path: str) -> Any:
    if path == ".":
        return scopes[-1]

    head, *rest = path.split(".")
    for scope in reversed(scopes):
        if isinstance(scope, Mapping) and head in scope:
            current = scope[head]
            break
    else:
        return _MISSING

    for key in rest:
        if not isinstance(current, Mapping) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _resolve(scopes: list[Any], path: str) -> Any:
    value = _lookup(scopes, path)
    if value is _MISSING:
        raise TemplateError(f"Template path not found: {path!r}")
    return value


def _render_nodes(nodes: tuple[Node, ...], scopes: list[Any], out: list[str]) -> None:
    for node in nodes:
        if isinstance(node, Text):
            out.append(node.text)
        elif isinstance(node, Value):
            out.append(format_value(_resolve(scopes, node.path)))
        elif isinstance(node, Join):
            items = _resolve(scopes, node.path) or []
            out.append(node.separator.join(format_value(item) for item in items))
        elif isinstance(node, Each):
            items = _resolve(scopes, node.path) or []
            for index, item in enumerate(items):
                if index and node.separator:
                    out.append(node.separator)
                _render_nodes(node.body, [*scopes, item], out)
        elif isinstance(node, IfPresent):
            value = _lookup(scopes, node.path)
            absent = value is _MISSING or value is None or (node.falsy_is_absent and not value)
            branch = node.otherwise if absent else node.then
            _render_nodes(branch, scopes, out)
        else:
            raise TemplateError(f"Unknown template node: {node!r}")


def render(template: Template, data: BaseModel | Mapping[str, Any], context: Mapping[str, Any] | None = None) -> str:
    """Expand `template` with `data` (plus optional outer `context` values)."""

    root = data.model_dump() if isinstance(data, BaseModel) else dict(data)
    scopes: list[Any] = [dict(context or {}), root]
    out: list[str] = []
    _render_nodes(template, scopes, out)
    return "".join(out)
