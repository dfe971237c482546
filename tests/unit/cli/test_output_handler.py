"""Unit tests for cli.output module."""

import io

import pytest
from unittest.mock import patch
from rich.console import Console

from outline_import.cli.output import OutputHandler
from outline_import.folder_mapper.models import ImportFailure, ImportResult
from outline_import.outline_client.models import Collection


@pytest.fixture
def buffer_handler():
    """OutputHandler whose console writes plain text into a buffer."""
    def _make(verbose=False):
        handler = OutputHandler(verbose=verbose, no_color=True)
        handler.console = Console(file=io.StringIO(), width=200, no_color=True, highlight=False)
        return handler
    return _make


def output_of(handler):
    return handler.console.file.getvalue()


class TestOutputHandlerInit:
    """Test cases for OutputHandler initialization."""

    def test_defaults(self):
        handler = OutputHandler()

        assert handler.verbose is False
        assert handler.console.no_color is False

    def test_no_color(self):
        assert OutputHandler(no_color=True).console.no_color is True


class TestMessages:
    """Test cases for the status message methods."""

    def test_error_escapes_markup(self, buffer_handler):
        handler = buffer_handler()

        handler.error("bad [bold]input[/bold]")

        assert "bad [bold]input[/bold]" in output_of(handler)

    def test_warning(self, buffer_handler):
        handler = buffer_handler()

        handler.warning("careful")

        assert "careful" in output_of(handler)

    def test_info_hidden_unless_verbose(self, buffer_handler):
        quiet = buffer_handler()
        loud = buffer_handler(verbose=True)

        quiet.info("details")
        loud.info("details")

        assert output_of(quiet) == ""
        assert "details" in output_of(loud)

    def test_progress_hidden_unless_verbose(self):
        handler = OutputHandler(verbose=False)
        with patch.object(handler.console, "print") as mock_print:
            handler.print_progress(1, "/docs/a.md")
        mock_print.assert_not_called()

    def test_progress_shows_index_and_path(self, buffer_handler):
        handler = buffer_handler(verbose=True)

        handler.print_progress(3, "/docs/sub/[draft].md")

        text = output_of(handler)
        assert "[3]" in text
        assert "/docs/sub/[draft].md" in text


class TestPrintCollections:
    """Test cases for the collections table."""

    def test_table_lists_every_collection(self, buffer_handler):
        handler = buffer_handler()

        handler.print_collections([
            Collection(id="c-1", name="Engineering", description="Team docs"),
            Collection(id="c-2", name="[Archive]"),
        ])

        text = output_of(handler)
        assert "Collections" in text
        assert "c-1" in text and "Engineering" in text and "Team docs" in text
        assert "c-2" in text and "[Archive]" in text

    def test_empty_list(self, buffer_handler):
        handler = buffer_handler()

        handler.print_collections([])

        assert "No collections found" in output_of(handler)


class TestPrintImportSummary:
    """Test cases for the end-of-run summary."""

    def test_clean_run(self, buffer_handler):
        handler = buffer_handler()

        handler.print_import_summary(ImportResult(succeeded=3, folders_created=1))

        text = output_of(handler)
        assert "Imported: 3 file(s)" in text
        assert "Folders created: 1" in text
        assert "Import completed successfully" in text
        assert "Failed" not in text

    def test_run_with_failures(self, buffer_handler):
        handler = buffer_handler()
        result = ImportResult(
            succeeded=2,
            failures=[
                ImportFailure(path="a/b", stage="folder", message="Creating folder 'a/b' failed"),
                ImportFailure(path="/docs/x.md", stage="import", message="Importing /docs/x.md failed"),
            ],
        )

        handler.print_import_summary(result)

        text = output_of(handler)
        assert "Folder errors: 1" in text
        assert "a/b: Creating folder 'a/b' failed" in text
        assert "Failed: 1 file(s)" in text
        assert "/docs/x.md: Importing /docs/x.md failed" in text
        assert "Import completed with errors" in text

    def test_nothing_found(self, buffer_handler):
        handler = buffer_handler()

        handler.print_import_summary(ImportResult())

        assert "No Markdown files found" in output_of(handler)

    def test_final_line_uses_status_methods(self):
        handler = OutputHandler()
        with patch.object(handler, "success") as mock_success, \
                patch.object(handler, "warning") as mock_warning, \
                patch.object(handler.console, "print"):
            handler.print_import_summary(ImportResult(succeeded=1))
            handler.print_import_summary(ImportResult(
                failures=[ImportFailure(path="/x.md", stage="import", message="m")],
            ))

        mock_success.assert_called_once_with("Import completed successfully")
        mock_warning.assert_called_once_with("Import completed with errors")
