"""
Tests for the markdown section model.
"""

import dataclasses
from pathlib import Path

import pytest

from paver.core.parser import (
    CodeBlock,
    DocumentDecodeError,
    ParsedDoc,
    load_document,
    parse_document,
)


SAMPLE_DOC = """# Title

## Purpose
Some content.

## Verification
```bash
cargo test
```
"""


class TestSections:
    """Headings split the document into sections."""

    def test_section_names_in_order(self):
        doc = parse_document("test.md", SAMPLE_DOC)
        assert doc.section_names == ["Title", "Purpose", "Verification"]

    def test_start_lines_are_one_indexed(self):
        doc = parse_document("test.md", SAMPLE_DOC)
        assert [s.start_line for s in doc.sections] == [1, 3, 6]

    def test_levels(self):
        doc = parse_document("test.md", SAMPLE_DOC)
        assert [s.level for s in doc.sections] == [1, 2, 2]

    def test_section_body_content(self):
        doc = parse_document("test.md", SAMPLE_DOC)
        assert doc.get_section("Purpose").content.strip() == "Some content."

    def test_path_is_kept(self):
        doc = parse_document("docs/test.md", SAMPLE_DOC)
        assert doc.path == Path("docs/test.md")

    def test_preamble_is_not_a_section(self):
        doc = parse_document("test.md", "intro text\n\n# First\nbody\n")
        assert doc.section_names == ["First"]

    def test_no_headings_yields_no_sections(self):
        doc = parse_document("test.md", "just text\n```bash\nls\n```\n")
        assert doc.sections == ()

    def test_empty_document(self):
        doc = parse_document("test.md", "")
        assert doc.sections == ()

    def test_setext_heading(self):
        doc = parse_document("test.md", "Title\n=====\n\nbody\n")
        assert doc.section_names == ["Title"]
        assert doc.sections[0].start_line == 1

    def test_heading_inside_fence_is_not_a_section(self):
        content = "## A\n```markdown\n## Not a heading\n```\n"
        doc = parse_document("test.md", content)
        assert doc.section_names == ["A"]
        assert len(doc.sections[0].code_blocks) == 1

    def test_crlf_line_endings(self):
        content = "# A\r\n\r\n## Verification\r\n```bash\r\ncargo test\r\n```\r\n"
        doc = parse_document("test.md", content)
        section = doc.get_section("Verification")
        assert section.start_line == 3
        assert section.code_blocks[0].content == "cargo test\n"


class TestGetSection:
    """Lookup by exact heading text."""

    def test_returns_matching_section(self):
        doc = parse_document("test.md", SAMPLE_DOC)
        assert doc.get_section("Verification").start_line == 6

    def test_is_case_sensitive(self):
        doc = parse_document("test.md", SAMPLE_DOC)
        assert doc.get_section("verification") is None

    def test_missing_section(self):
        doc = parse_document("test.md", SAMPLE_DOC)
        assert doc.get_section("Interface") is None

    def test_first_match_wins(self):
        content = "## Notes\nfirst\n\n## Notes\nsecond\n"
        doc = parse_document("test.md", content)
        assert doc.get_section("Notes").start_line == 1


class TestCodeBlocks:
    """Fenced code blocks are collected per section."""

    def test_block_belongs_to_its_section(self):
        doc = parse_document("test.md", SAMPLE_DOC)
        assert doc.get_section("Purpose").code_blocks == ()
        blocks = doc.get_section("Verification").code_blocks
        assert len(blocks) == 1
        assert blocks[0].language == "bash"
        assert blocks[0].content == "cargo test\n"
        assert blocks[0].line_number == 7

    def test_blocks_keep_document_order(self):
        content = "## V\n```json\n{}\n```\ntext\n```sh\nmake\n```\n"
        blocks = parse_document("test.md", content).sections[0].code_blocks
        assert [b.language for b in blocks] == ["json", "sh"]

    def test_untagged_block_has_no_language(self):
        content = "## V\n```\n$ ls\n```\n"
        block = parse_document("test.md", content).sections[0].code_blocks[0]
        assert block.language is None

    def test_info_string_uses_first_word(self):
        content = "## V\n```bash title=build\nmake\n```\n"
        block = parse_document("test.md", content).sections[0].code_blocks[0]
        assert block.language == "bash"

    def test_tilde_fence(self):
        content = "## V\n~~~sh\nmake\n~~~\n"
        block = parse_document("test.md", content).sections[0].code_blocks[0]
        assert block.language == "sh"
        assert block.content == "make\n"

    def test_unclosed_fence_runs_to_end(self):
        content = "## V\n```bash\ncargo test\n"
        blocks = parse_document("test.md", content).sections[0].code_blocks
        assert len(blocks) == 1
        assert "cargo test" in blocks[0].content

    def test_executability_is_classified_at_parse(self):
        content = "## V\n```json\n{}\n```\n```bash\nls\n```\n"
        blocks = parse_document("test.md", content).sections[0].code_blocks
        assert [b.is_executable for b in blocks] == [False, True]

    def test_is_executable_is_not_an_init_argument(self):
        with pytest.raises(TypeError):
            CodeBlock(language="bash", content="ls", is_executable=False)

    def test_code_block_is_frozen(self):
        block = CodeBlock(language="bash", content="ls\n")
        with pytest.raises(dataclasses.FrozenInstanceError):
            block.is_executable = False


class TestDecoding:
    """Only undecodable input is a hard failure."""

    def test_bytes_are_decoded(self):
        doc = parse_document("test.md", SAMPLE_DOC.encode("utf-8"))
        assert doc == parse_document("test.md", SAMPLE_DOC)

    def test_bom_is_dropped(self):
        doc = parse_document("test.md", "\ufeff# Title\n".encode("utf-8"))
        assert doc.section_names == ["Title"]

    def test_invalid_utf8_raises(self):
        with pytest.raises(DocumentDecodeError) as exc_info:
            parse_document("bad.md", b"# Title\n\xff\xfe\n")
        assert exc_info.value.path == Path("bad.md")
        assert isinstance(exc_info.value, ValueError)

    def test_load_document(self, tmp_path):
        path = tmp_path / "doc.md"
        path.write_text(SAMPLE_DOC, encoding="utf-8")
        doc = load_document(path)
        assert doc.path == path
        assert doc.get_section("Verification") is not None

    def test_load_missing_document_raises_oserror(self, tmp_path):
        with pytest.raises(OSError):
            load_document(tmp_path / "missing.md")


class TestIdempotence:
    """Parsing the same text twice yields equal documents."""

    def test_reparse_is_equal(self):
        assert parse_document("a.md", SAMPLE_DOC) == parse_document("a.md", SAMPLE_DOC)

    def test_parsed_doc_is_hashable_value(self):
        doc = parse_document("a.md", SAMPLE_DOC)
        assert isinstance(doc, ParsedDoc)
        assert hash(doc) == hash(parse_document("a.md", SAMPLE_DOC))
