"""Tests for the Rich human and quiet renderers."""

from fme.output.renderers import render_quiet, render_result
from fme.services.result import ServiceResult


def _edit(**data: object) -> ServiceResult:
    base: dict[str, object] = {
        "dir": "notes",
        "recursive": False,
        "dry_run": False,
        "scanned": 3,
        "updated": [],
        "unchanged": 0,
        "errors": [],
    }
    base.update(data)
    return ServiceResult(ok=True, op="add", data=base)


class TestRenderResult:
    def test_updated_lines(self) -> None:
        output = render_result(_edit(updated=["notes/a.md", "notes/b.md"]))
        assert output.splitlines() == ["Updated: notes/a.md", "Updated: notes/b.md"]

    def test_error_lines_after_updates(self) -> None:
        result = _edit(
            updated=["notes/a.md"],
            errors=[{"path": "notes/bad.md", "error": "invalid YAML in frontmatter"}],
        )
        assert render_result(result).splitlines() == [
            "Updated: notes/a.md",
            "Error processing notes/bad.md: invalid YAML in frontmatter",
        ]

    def test_dry_run_label(self) -> None:
        output = render_result(_edit(dry_run=True, updated=["notes/a.md"]))
        assert output == "Would update: notes/a.md"

    def test_nothing_changed_renders_empty(self) -> None:
        assert render_result(_edit(unchanged=3)) == ""

    def test_brackets_in_paths_are_not_markup(self) -> None:
        output = render_result(_edit(updated=["notes/[draft] idea.md"]))
        assert output == "Updated: notes/[draft] idea.md"

    def test_long_paths_do_not_wrap(self) -> None:
        path = "notes/" + "x" * 200 + ".md"
        assert render_result(_edit(updated=[path])) == f"Updated: {path}"

    def test_verbose_summary(self) -> None:
        output = render_result(_edit(updated=["notes/a.md"], unchanged=2), verbose=True)
        assert "Updated: notes/a.md" in output
        assert "OK  add" in output
        assert "scanned: 3" in output
        assert "unchanged: 2" in output
        assert "errors: 0" in output

    def test_failure(self) -> None:
        result = ServiceResult.failure("clear", "DIR_NOT_FOUND", "Not a directory: x", dir="x")
        output = render_result(result)
        assert output == "ERROR  clear — Not a directory: x"

    def test_failure_detail_in_verbose(self) -> None:
        result = ServiceResult.failure("clear", "DIR_NOT_FOUND", "Not a directory: x", dir="x")
        output = render_result(result, verbose=True)
        assert "detail:" in output
        assert "dir: x" in output


class TestRenderQuiet:
    def test_paths_and_errors_only(self) -> None:
        result = _edit(
            updated=["notes/a.md"],
            errors=[{"path": "notes/bad.md", "error": "boom"}],
        )
        assert render_quiet(result) == "notes/a.md\nError processing notes/bad.md: boom"

    def test_nothing_changed(self) -> None:
        assert render_quiet(_edit()) == ""

    def test_failure(self) -> None:
        result = ServiceResult.failure("clear", "DIR_NOT_FOUND", "Not a directory: x")
        assert render_quiet(result) == "ERROR: clear — Not a directory: x"
