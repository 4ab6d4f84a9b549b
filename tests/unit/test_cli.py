"""
Unit tests for the suggestion CLI.
"""

import io
import json

import pytest
from unittest.mock import patch

from text_illustrator.cli.suggest import (
    CLIInputError,
    build_parser,
    load_config_file,
    main,
    read_text,
    write_output,
)
from tests.fixtures.texts import NATURE_TEXT


@pytest.fixture
def article_file(tmp_path):
    path = tmp_path / "article.txt"
    path.write_text(NATURE_TEXT, encoding="utf-8")
    return path


@pytest.mark.unit
class TestReadText:
    """Tests for input reading."""

    def test_reads_file(self, article_file):
        assert read_text(str(article_file)) == NATURE_TEXT

    def test_reads_stdin(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("from stdin"))
        assert read_text("-") == "from stdin"

    def test_missing_file(self, tmp_path):
        with pytest.raises(CLIInputError):
            read_text(str(tmp_path / "missing.txt"))


@pytest.mark.unit
class TestLoadConfigFile:
    """Tests for config file loading."""

    def test_no_path(self):
        assert load_config_file(None) is None

    def test_loads_json(self, tmp_path):
        path = tmp_path / "queries.json"
        path.write_text('{"thresholds": {"maxQueries": 4}}', encoding="utf-8")

        assert load_config_file(str(path)) == {"thresholds": {"maxQueries": 4}}

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "queries.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(CLIInputError):
            load_config_file(str(path))


@pytest.mark.unit
class TestParser:
    """Tests for argument parsing."""

    def test_defaults(self):
        args = build_parser().parse_args(["article.txt"])

        assert args.inputs == ["article.txt"]
        assert args.format == "json"
        assert args.seed is None
        assert args.config is None

    def test_requires_input(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


@pytest.mark.unit
class TestMain:
    """Tests for the CLI entry point."""

    def test_json_output(self, article_file, capsys):
        main([str(article_file), "--seed", "3"])

        results = json.loads(capsys.readouterr().out)
        assert len(results) == 1
        assert results[0]["source"] == str(article_file)
        assert results[0]["title"] == "The quiet forest stood beneath a golden sunset"
        assert results[0]["themes"] == ["nature"]
        assert results[0]["content_type"]["type"] == "mixed"
        assert 6 <= len(results[0]["queries"]) <= 10

    def test_seed_is_reproducible(self, article_file, capsys):
        main([str(article_file), "--seed", "11"])
        first = json.loads(capsys.readouterr().out)[0]["queries"]
        main([str(article_file), "--seed", "11"])
        second = json.loads(capsys.readouterr().out)[0]["queries"]

        assert first == second

    def test_jsonl_multiple_inputs(self, article_file, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("The server software handles data."))
        main([str(article_file), "-", "--format", "jsonl"])

        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 2
        assert json.loads(lines[1])["source"] == "-"

    def test_output_file(self, article_file, tmp_path):
        output = tmp_path / "out" / "plans.json"
        main([str(article_file), "--output", str(output)])

        assert len(json.loads(output.read_text(encoding="utf-8"))) == 1

    def test_config_applied(self, article_file, tmp_path, capsys):
        config = tmp_path / "queries.json"
        config.write_text('{"thresholds": {"minRelevanceScore": 1.0}}', encoding="utf-8")
        main([str(article_file), "--config", str(config)])

        queries = json.loads(capsys.readouterr().out)[0]["queries"]
        assert queries == ["forest", "beneath", "golden", "sunset", "mountain", "welcomed"]

    @patch("text_illustrator.cli.suggest.settings")
    def test_config_path_from_settings(self, mock_settings, article_file, tmp_path, capsys):
        config = tmp_path / "queries.json"
        config.write_text('{"thresholds": {"minRelevanceScore": 1.0}}', encoding="utf-8")
        mock_settings.query_config_path = str(config)

        main([str(article_file)])

        queries = json.loads(capsys.readouterr().out)[0]["queries"]
        assert queries[0] == "forest"
        assert len(queries) == 6

    def test_missing_input_exits(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path / "missing.txt")])
        assert exc_info.value.code == 1

    def test_unreadable_config_exits(self, article_file, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main([str(article_file), "--config", str(tmp_path / "missing.json")])
        assert exc_info.value.code == 1


@pytest.mark.unit
class TestWriteOutput:
    """Tests for write_output."""

    def test_jsonl_file(self, tmp_path):
        output = tmp_path / "plans.jsonl"
        write_output([{"a": 1}, {"b": 2}], output, "jsonl")

        assert output.read_text(encoding="utf-8").splitlines() == ['{"a": 1}', '{"b": 2}']
