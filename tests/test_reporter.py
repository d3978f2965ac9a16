import io
from pathlib import Path

from forg.logs import AnsiColor
from forg.models import RunStatistics
from forg.organizer_config import OrganizerConfig
from forg.reporter import Reporter


def lines(output: io.StringIO) -> list[str]:
    return output.getvalue().splitlines()


def test_banner():
    output = io.StringIO()
    reporter = Reporter(output, color=False)

    reporter.banner(Path("/data"), OrganizerConfig())
    assert lines(output) == ["Organizing files in: /data", ""]

    output = io.StringIO()
    reporter = Reporter(output, color=False)
    config = OrganizerConfig(
        prefix="x_", dry_run=True, recursive=True, max_depth=3
    )

    reporter.banner(Path("/data"), config)
    assert lines(output) == [
        "Organizing files in: /data",
        "Recursive mode enabled (max depth: 3)",
        "Using prefix: x_",
        "[DRY RUN MODE - No changes will be made]",
        "",
    ]


def test_summary_orders_categories_and_totals():
    output = io.StringIO()
    stats = RunStatistics()
    for category in ("Others", "Archives", "Images", "Documents", "Images"):
        stats.record_move(category)

    Reporter(output, color=False).summary(stats)

    text = lines(output)
    rows = text[text.index("-" * 30) + 1 : -2]
    assert rows == [
        f"{'Images':<20}2",
        f"{'Documents':<20}1",
        f"{'Archives':<20}1",
        f"{'Others':<20}1",
    ]
    assert text[-1] == f"{'Total':<20}5"
    assert "Organization Complete!" in text
    assert not any(line.startswith(("Skipped", "Errors")) for line in text)


def test_summary_reports_skips_and_errors():
    output = io.StringIO()
    stats = RunStatistics(skipped=3, errors=2)

    Reporter(output, color=False).summary(stats)

    text = lines(output)
    assert f"{'Total':<20}0" in text
    assert "Skipped: 3 files/directories" in text
    assert text[-1] == "Errors: 2"


def test_file_moved_indicators():
    output = io.StringIO()
    reporter = Reporter(output, color=False)

    reporter.file_moved("a.txt", "Documents", dry_run=False)
    reporter.file_moved("b.txt", "Documents", dry_run=True)
    reporter.no_files()

    assert lines(output) == [
        "  ✓ a.txt -> Documents",
        "  → b.txt -> Documents",
        "No files to organize.",
    ]


def test_color_output():
    output = io.StringIO()
    Reporter(output, color=True).file_moved("a.txt", "X", dry_run=False)

    assert output.getvalue() == (
        f"{AnsiColor.GREEN}  ✓ a.txt -> X{AnsiColor.RESET}\n"
    )

    # StringIO is not a terminal
    assert Reporter(io.StringIO()).color is False
