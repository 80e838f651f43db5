import json
from pathlib import Path

from argscan.core import reporter
from argscan.core.outcome import ScanError, ScanOutcome


def _outcomes():
    return [
        ScanOutcome.recognised("x"),
        ScanOutcome.recognised("a", "<blurp>"),
        ScanOutcome.illegal("y"),
        ScanOutcome.illegal("b", ScanError.MISSING_ARGUMENT),
        ScanOutcome.end(),
    ]


def test_build_summary_counts_options_and_errors():
    summary = reporter.build_summary(_outcomes(), ["file3"], "a:b:hx")
    assert summary["spec"] == "a:b:hx"
    assert summary["options"] == [
        {"option": "x", "value": None},
        {"option": "a", "value": "<blurp>"},
    ]
    assert summary["errors"] == [
        {"option": "y", "error": "illegal-option"},
        {"option": "b", "error": "missing-argument"},
    ]
    assert summary["remaining"] == ["file3"]
    assert summary["total"] == 4
    assert summary["illegal"] == 2


def test_reporter_writes_files(tmp_path: Path):
    summary = reporter.build_summary(_outcomes(), ["file3"], "a:hx")
    paths = reporter.write_reports(
        summary,
        output_dir=tmp_path,
        json_path=tmp_path / "scan.json",
        formats=["json", "md", "html"],
    )
    assert paths.json_path and paths.json_path.exists()
    assert paths.markdown_path and paths.markdown_path.exists()
    assert paths.html_path and paths.html_path.exists()
    assert json.loads(paths.json_path.read_text())["remaining"] == ["file3"]

    markdown = paths.markdown_path.read_text()
    assert "- -a = <blurp>" in markdown
    assert "- -y: illegal-option" in markdown

    html = paths.html_path.read_text()
    assert "&lt;blurp&gt;" in html
    assert "<blurp>" not in html


def test_write_reports_skips_unrequested_formats(tmp_path: Path):
    summary = reporter.build_summary([], [], "h")
    paths = reporter.write_reports(summary, output_dir=tmp_path, formats=["md"])
    assert paths.json_path is None
    assert paths.html_path is None
    assert paths.markdown_path == tmp_path / "scan.md"
    assert "(none)" in paths.markdown_path.read_text()
