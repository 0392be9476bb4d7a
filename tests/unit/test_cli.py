"""Tests for feedforge.cli."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from lxml import etree
from typer.testing import CliRunner

from feedforge import __version__
from feedforge.cli import app

runner = CliRunner()


@pytest.fixture
def feeds_file(tmp_path: Path) -> Path:
    path = tmp_path / "feeds.json"
    path.write_text(
        json.dumps(
            {
                "feeds": {
                    "article": {
                        "title": "Articles",
                        "description": "Latest",
                        "link": "http://example.org",
                        "author": "Jane Doe",
                    }
                }
            }
        )
    )
    return path


@pytest.fixture
def items_file(tmp_path: Path) -> Path:
    path = tmp_path / "items.json"
    path.write_text(
        json.dumps(
            [
                {
                    "title": f"Post {n}",
                    "description": "Body",
                    "link": f"http://example.org/{n}",
                    "pub_date": "2024-01-15T09:30:00+00:00",
                }
                for n in range(3)
            ]
        )
    )
    return path


class TestCli:
    """Tests for CLI commands."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_formats(self) -> None:
        """Built-in formats are listed."""
        result = runner.invoke(app, ["formats"])

        assert result.exit_code == 0
        assert "rss" in result.output
        assert "atom" in result.output

    def test_feeds(self, feeds_file: Path) -> None:
        """Configured feeds are listed."""
        result = runner.invoke(app, ["feeds", "--feeds-file", str(feeds_file)])

        assert result.exit_code == 0
        assert "article" in result.output

    def test_feeds_missing_file(self, tmp_path: Path) -> None:
        """A missing feeds file is reported with exit code 1."""
        result = runner.invoke(app, ["feeds", "-f", str(tmp_path / "none.json")])

        assert result.exit_code == 1

    def test_dump(self, feeds_file: Path, items_file: Path, tmp_path: Path) -> None:
        """The feed is rendered from the items file."""
        output = tmp_path / "out" / "article.xml"

        result = runner.invoke(
            app,
            [
                "dump",
                "article",
                "--items",
                str(items_file),
                "--output",
                str(output),
                "--format",
                "atom",
                "--feeds-file",
                str(feeds_file),
                "--limit",
                "2",
            ],
        )

        assert result.exit_code == 0
        root = etree.parse(str(output)).getroot()
        entries = root.findall("{http://www.w3.org/2005/Atom}entry")
        assert len(entries) == 2

    def test_dump_unknown_feed(self, feeds_file: Path, items_file: Path, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                "dump",
                "missing",
                "-i",
                str(items_file),
                "-o",
                str(tmp_path / "out.xml"),
                "-f",
                str(feeds_file),
            ],
        )

        assert result.exit_code == 1
        assert not (tmp_path / "out.xml").exists()

    def test_dump_invalid_items(self, feeds_file: Path, tmp_path: Path) -> None:
        """Items must be a JSON list."""
        items = tmp_path / "items.json"
        items.write_text(json.dumps({"title": "not a list"}))

        result = runner.invoke(
            app,
            ["dump", "article", "-i", str(items), "-o", str(tmp_path / "o.xml"), "-f", str(feeds_file)],
        )

        assert result.exit_code == 1
