"""
Tests for the command line interface.
"""

import json

import pytest
from typer.testing import CliRunner

from paver import __version__
from paver.cli.app import app


runner = CliRunner()

VERIFIED_DOC = """# Cache

## Verification
```bash
cargo build
cargo test
```
"""

MISSING_DOC = "# Notes\n\nNothing to verify.\n"


@pytest.fixture
def docs(tmp_path):
    (tmp_path / "cache.md").write_text(VERIFIED_DOC, encoding="utf-8")
    (tmp_path / "notes.md").write_text(MISSING_DOC, encoding="utf-8")
    return tmp_path


class TestCheck:
    def test_passes(self, docs):
        result = runner.invoke(app, ["check", str(docs)])

        assert result.exit_code == 0
        assert "Passed" in result.output

    def test_require_verification_fails(self, docs):
        result = runner.invoke(app, ["check", str(docs), "--require-verification"])

        assert result.exit_code == 1
        assert "Failed" in result.output

    def test_json_output(self, docs):
        result = runner.invoke(app, ["check", str(docs), "--format", "json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["stats"]["documents"] == 2
        assert data["stats"]["commands"] == 2
        assert data["summary"]["passed"] is True
        statuses = {doc["path"].rsplit("/", 1)[-1]: doc["status"] for doc in data["documents"]}
        assert statuses == {"cache.md": "verified", "notes.md": "missing"}

    def test_docs_root_from_environment(self, docs):
        result = runner.invoke(
            app,
            ["check", "--format", "json"],
            env={"PAVER_DOCS_ROOT": str(docs)},
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout)["stats"]["documents"] == 2

    def test_pattern_option(self, docs):
        (docs / "extra.markdown").write_text(VERIFIED_DOC, encoding="utf-8")
        result = runner.invoke(
            app,
            ["check", str(docs), "--format", "json", "--pattern", "*.markdown"],
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout)["stats"]["documents"] == 1

    def test_verbose_lists_commands(self, docs):
        result = runner.invoke(app, ["check", str(docs), "--verbose"])

        assert result.exit_code == 0
        assert "cargo build" in result.output
        assert "cargo test" in result.output

    def test_missing_target(self, tmp_path):
        result = runner.invoke(app, ["check", str(tmp_path / "nope")])

        assert result.exit_code == 1
        assert "does not exist" in result.output

    def test_unknown_format(self, docs):
        result = runner.invoke(app, ["check", str(docs), "--format", "xml"])

        assert result.exit_code == 1
        assert "Unknown output format: xml" in result.output


class TestShow:
    def test_json(self, docs):
        result = runner.invoke(app, ["show", str(docs / "cache.md"), "--format", "json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [s["name"] for s in data["sections"]] == ["Cache", "Verification"]
        assert data["sections"][1]["code_blocks"][0]["is_executable"] is True
        assert data["spec"]["section_line"] == 3

    def test_rich(self, docs):
        result = runner.invoke(app, ["show", str(docs / "cache.md")])

        assert result.exit_code == 0
        assert "Verification" in result.output
        assert "cargo test" in result.output

    def test_document_without_spec(self, docs):
        result = runner.invoke(app, ["show", str(docs / "notes.md"), "--format", "json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["spec"] is None

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["show", str(tmp_path / "nope.md")])

        assert result.exit_code == 1
        assert "Failed to read" in result.output

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "bad.md"
        path.write_bytes(b"# Bad\n\xff\n")
        result = runner.invoke(app, ["show", str(path)])

        assert result.exit_code == 1
        assert "UTF-8" in result.output

    def test_unknown_format(self, docs):
        result = runner.invoke(app, ["show", str(docs / "cache.md"), "--format", "xml"])

        assert result.exit_code == 1
        assert "Unknown output format: xml" in result.output


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_version_option():
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output
