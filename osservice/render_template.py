"""Thin wrapper around Jinja2 for rendering service descriptors."""

from __future__ import annotations

import shlex
from typing import Any, Dict, Iterable

from jinja2 import BaseLoader, Environment, StrictUndefined, TemplateError as JinjaTemplateError

from .ServiceError import TemplateError


def _bool(value: bool) -> str:
    return "true" if value else "false"


def _yesno(value: bool) -> str:
    return "yes" if value else "no"


def _cmd(value: str) -> str:
    return shlex.quote(str(value))


def _cmdline(values: Iterable[str]) -> str:
    return " ".join(shlex.quote(str(v)) for v in values)


_ENV = Environment(
    loader=BaseLoader(),
    undefined=StrictUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    autoescape=False,
)
_ENV.filters.update({"bool": _bool, "yesno": _yesno, "cmd": _cmd, "cmdline": _cmdline})


def render_template(template: str, context: Dict[str, Any]) -> str:
    """Render a descriptor template.

    Raises:
        TemplateError: If the template does not parse or references a missing field
    """
    try:
        tmpl = _ENV.from_string(template)
        return tmpl.render(**context)
    except JinjaTemplateError as exc:
        raise TemplateError(f"Failed to render service descriptor: {exc}") from exc
