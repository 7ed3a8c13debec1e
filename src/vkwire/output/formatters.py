"""Human/JSON output helpers.

The CLI renders ServiceResult for humans (key-value text) or machines
(--json). Quiet mode prints only the essential line.
"""

from __future__ import annotations

import json as _json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from vkwire.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def _format_data_human(data: dict[str, Any]) -> str:
    """Format result data as indented key-value pairs."""
    lines: list[str] = []
    for key, value in data.items():
        if isinstance(value, (dict, list)):
            rendered = _json.dumps(value, ensure_ascii=False, indent=2)
            lines.append(f"  {key}: " + rendered.replace("\n", "\n  "))
        else:
            lines.append(f"  {key}: {value}")
    return "\n".join(lines)


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if result.ok:
        if settings.quiet:
            return f"OK: {result.op}"
        parts = [f"OK: {result.op}"]
        if settings.verbose and result.meta:
            parts.append(_format_data_human(result.meta))
        if result.data:
            parts.append(_format_data_human(result.data))
        return "\n".join(parts)
    if result.error is None:
        return f"ERROR: {result.op} - Unknown error"
    line = f"ERROR: {result.op} - [{result.error.code}] {result.error.message}"
    if settings.quiet or not result.error.detail:
        return line
    return "\n".join([line, _format_data_human(result.error.detail)])
