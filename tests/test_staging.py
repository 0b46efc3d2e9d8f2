"""Tests for staging directory assembly"""

import pytest

from pasteup_deploy.api.exceptions import StagingError
from pasteup_deploy.core.staging import StagingAssembler


def make_assembler(site):
    return StagingAssembler(
        site / "docs" / "static" / "css",
        site / "docs" / "static" / "js",
        site / "docs",
    )


def test_assemble_layout(site, tmp_path):
    dest = make_assembler(site).assemble(tmp_path / "staging")

    assert (dest / "css" / "pasteup.css").is_file()
    assert (dest / "js" / "pasteup.js").is_file()
    assert (dest / "js" / "lib" / "bonzo.js").is_file()
    assert (dest / "docs" / "index.html").is_file()
    assert (dest / "docs" / "guide" / "typography.html").is_file()


def test_build_and_static_are_dropped_from_docs(site, tmp_path):
    dest = make_assembler(site).assemble(tmp_path / "staging")

    assert not (dest / "docs" / "build").exists()
    assert not (dest / "docs" / "static").exists()
    assert (dest / "docs" / "guide").is_dir()


def test_sources_are_untouched(site, tmp_path):
    make_assembler(site).assemble(tmp_path / "staging")

    assert (site / "docs" / "build" / "deploy.py").is_file()
    assert (site / "docs" / "static" / "css" / "pasteup.css").is_file()


def test_existing_destination_is_not_overwritten(site, tmp_path):
    dest = tmp_path / "staging"
    dest.mkdir()
    (dest / "keep.txt").write_text("mine")

    with pytest.raises(StagingError):
        make_assembler(site).assemble(dest)

    assert (dest / "keep.txt").read_text() == "mine"
    assert not (dest / "css").exists()


def test_missing_source_raises(site, tmp_path):
    assembler = StagingAssembler(site / "nope", site / "docs" / "static" / "js", site / "docs")

    with pytest.raises(StagingError):
        assembler.assemble(tmp_path / "staging")


def test_docs_without_build_or_static(tmp_path, site):
    docs = tmp_path / "plain-docs"
    docs.mkdir()
    (docs / "index.html").write_text("hi")
    assembler = StagingAssembler(site / "docs" / "static" / "css", site / "docs" / "static" / "js", docs)

    dest = assembler.assemble(tmp_path / "staging")
    assert (dest / "docs" / "index.html").is_file()


def test_staging_inside_docs_is_not_copied_into_itself(site):
    dest = make_assembler(site).assemble(site / "docs" / "deploy_tmp")

    assert (dest / "docs" / "index.html").is_file()
    assert not (dest / "docs" / "deploy_tmp").exists()


def test_remove(site, tmp_path):
    dest = make_assembler(site).assemble(tmp_path / "staging")

    StagingAssembler.remove(dest)
    assert not dest.exists()
    # Already gone is fine
    StagingAssembler.remove(dest)
