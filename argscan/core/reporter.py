"""Report rendering for scan results."""

from __future__ import annotations

import datetime as dt
import json
import pathlib
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Sequence

from .outcome import ScanOutcome
from .text import xml_chars_to_entities


@dataclass
class ReportPaths:
    json_path: pathlib.Path | None
    markdown_path: pathlib.Path | None
    html_path: pathlib.Path | None


def build_summary(outcomes: Iterable[ScanOutcome], remaining: Sequence[str], spec: str) -> Dict[str, Any]:
    options: List[Dict[str, Any]] = []
    errors: List[Dict[str, Any]] = []
    for outcome in outcomes:
        if outcome.is_illegal:
            errors.append({"option": outcome.option, "error": outcome.error.value if outcome.error else None})
        elif not outcome.is_end:
            options.append({"option": outcome.option, "value": outcome.value})
    return {
        "generated_at": dt.datetime.now(dt.UTC).isoformat(),
        "spec": spec,
        "options": options,
        "errors": errors,
        "remaining": list(remaining),
        "total": len(options) + len(errors),
        "illegal": len(errors),
    }


def write_reports(
    summary: Dict[str, Any],
    output_dir: pathlib.Path,
    json_path: pathlib.Path | None = None,
    formats: Sequence[str] | None = None,
) -> ReportPaths:
    output_dir.mkdir(parents=True, exist_ok=True)
    formats = [fmt.lower() for fmt in (formats or ["json"])]

    resolved_json = json_path or (output_dir / "scan.json")
    resolved_markdown = output_dir / "scan.md" if "md" in formats else None
    resolved_html = output_dir / "scan.html" if "html" in formats else None

    if "json" in formats:
        resolved_json.parent.mkdir(parents=True, exist_ok=True)
        resolved_json.write_text(json.dumps(summary, indent=2, sort_keys=True), encoding="utf-8")
    else:
        resolved_json = None

    if resolved_markdown:
        resolved_markdown.write_text(render_markdown(summary), encoding="utf-8")

    if resolved_html:
        resolved_html.write_text(render_html(summary), encoding="utf-8")

    return ReportPaths(json_path=resolved_json, markdown_path=resolved_markdown, html_path=resolved_html)


def render_markdown(summary: Dict[str, Any]) -> str:
    lines: List[str] = ["# Argument Scan", ""]
    lines.append(f"Generated: {summary['generated_at']}")
    lines.append(f"Spec: `{summary['spec']}`")
    lines.append("")
    lines.append("## Options")
    for entry in summary["options"]:
        lines.append(f"- -{entry['option']}" + (f" = {entry['value']}" if entry["value"] is not None else ""))
    if not summary["options"]:
        lines.append("- (none)")
    lines.append("")
    if summary["errors"]:
        lines.append("## Errors")
        for entry in summary["errors"]:
            lines.append(f"- -{entry['option']}: {entry['error']}")
        lines.append("")
    lines.append("## Remaining Arguments")
    for argument in summary["remaining"]:
        lines.append(f"- {argument}")
    if not summary["remaining"]:
        lines.append("- (none)")
    return "\n".join(lines)


def render_html(summary: Dict[str, Any]) -> str:
    rows = []
    for entry in summary["options"]:
        value = entry["value"] if entry["value"] is not None else ""
        rows.append(f"<tr><td>-{_escape(entry['option'])}</td><td>{_escape(value)}</td><td>ok</td></tr>")
    for entry in summary["errors"]:
        rows.append(f"<tr><td>-{_escape(entry['option'])}</td><td></td><td>{_escape(entry['error'])}</td></tr>")
    remaining = "".join(f"<li>{_escape(argument)}</li>" for argument in summary["remaining"])
    return (
        "<html><head><title>Argument Scan</title></head><body>"
        "<h1>Argument Scan</h1>"
        f"<p>Generated: {summary['generated_at']}</p>"
        f"<p>Spec: <code>{_escape(summary['spec'])}</code></p>"
        "<table border='1' cellpadding='4' cellspacing='0'>"
        "<thead><tr><th>Option</th><th>Value</th><th>Status</th></tr></thead>"
        f"<tbody>{''.join(rows)}</tbody>"
        "</table>"
        "<h2>Remaining Arguments</h2>"
        f"<ul>{remaining}</ul>"
        "</body></html>"
    )


def _escape(value: Any) -> str:
    return xml_chars_to_entities(str(value)) or ""
