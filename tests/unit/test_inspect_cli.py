"""Unit tests for the inspect_cedict CLI."""

import json
import logging

import pytest

from cccedict.cli.inspect_cedict import format_entry, main, summarize
from cccedict.loader import load_string
from cccedict.models.entry import CedictEntry

VALID = """\
# sample
你好嗎 你好吗 [ni3 hao3 ma5] {nei5 hou2 maa1} /how are you?/
以身作則 以身作则 [yi3 shen1 zuo4 ze2] /to set an example (idiom); to serve as a model/
"""

MALFORMED = VALID + "你好 你好 [ni3 hao3\n"


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def cedict_file(tmp_path):
    path = tmp_path / "cedict.u8"
    path.write_text(VALID, encoding="utf-8")
    return path


class TestFormatting:
    """Tests for preview and summary helpers."""

    def test_format_entry(self):
        entry = CedictEntry.from_line("你好嗎 你好吗 [ni3 hao3 ma5] {nei5 hou2 maa1} /how are you?/")
        assert format_entry(entry) == (
            "你好嗎 | 你好吗 | pinyin: ni3 hao3 ma5 | jyutping: nei5 hou2 maa1 | how are you?"
        )

    def test_format_entry_absent_sections(self):
        assert format_entry(CedictEntry.from_line("你好 你好")) == (
            "你好 | 你好 | pinyin: - | jyutping: - | -"
        )

    def test_summarize(self):
        stats = summarize(load_string(VALID))
        assert stats == {
            "entries": 2,
            "with_pinyin": 2,
            "with_jyutping": 1,
            "with_definitions": 2,
        }


class TestMain:
    """Tests for CLI exit codes and output."""

    def test_success(self, cedict_file, capsys):
        exit_code = main(["--input", str(cedict_file), "--no-progress", "--max-entries", "1"])

        assert exit_code == 0
        out = capsys.readouterr().out
        assert "你好嗎 | 你好吗" in out
        assert "以身作則" not in out

    def test_json_output(self, cedict_file, tmp_path):
        output = tmp_path / "out" / "cedict.json"
        exit_code = main(["--input", str(cedict_file), "--no-progress", "--output", str(output)])

        assert exit_code == 0
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["stats"]["entries"] == 2
        assert data["entries"][0]["jyutping"][0] == {"sound": "nei", "tone": "5"}
        assert data["entries"][1]["jyutping"] is None

    def test_malformed_line_fails(self, tmp_path):
        path = tmp_path / "bad.u8"
        path.write_text(MALFORMED, encoding="utf-8")

        assert main(["--input", str(path), "--no-progress"]) == 1

    def test_lenient_skips_malformed_line(self, tmp_path, capsys):
        path = tmp_path / "bad.u8"
        path.write_text(MALFORMED, encoding="utf-8")

        exit_code = main(["--input", str(path), "--no-progress", "--lenient", "--max-entries", "5"])

        assert exit_code == 0
        assert capsys.readouterr().out.count("\n") == 2

    def test_missing_input(self, tmp_path):
        assert main(["--input", str(tmp_path / "missing.u8"), "--no-progress"]) == 1

    def test_loguru_logging(self, cedict_file):
        assert main(["--input", str(cedict_file), "--no-progress", "--loguru"]) == 0
