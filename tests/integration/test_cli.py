"""
Integration tests for the command-line interface.
"""

import sys

import pytest

from imageset.__main__ import main

HEADER = "FileLocation\tSeries\tFrame\tFileName\tPathName"
URLS = ["file:///a/b.tif", "file:///c/b.tif"]


def run_cli(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["imageset", *args])
    main()


class TestCommandLineInterface:
    """Test the command-line interface."""

    def test_cli_help(self, monkeypatch, capsys):
        """Test the help output."""
        with pytest.raises(SystemExit) as e:
            run_cli(monkeypatch, "--help")

        assert e.value.code == 0
        out = capsys.readouterr().out
        assert "Select image files or planes" in out
        for option in ("--url-list", "--candidate", "--series-count", "--frame-count"):
            assert option in out

    def test_cli_select_planes(self, monkeypatch, capsys):
        run_cli(
            monkeypatch,
            'url does contain "/a/"',
            *URLS,
            "--series-count", "2",
            "--no-progress",
        )

        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            HEADER,
            "file:///a/b.tif\t0\t0\tb.tif\t/a",
            "file:///a/b.tif\t1\t0\tb.tif\t/a",
        ]

    def test_cli_logs_to_stderr(self, monkeypatch, capsys):
        run_cli(monkeypatch, 'series does eq "0"', *URLS, "--no-progress")

        captured = capsys.readouterr()
        assert len(captured.out.splitlines()) == 3
        assert "Selected 2 of 2 candidates" in captured.err

    def test_cli_file_candidates(self, monkeypatch, capsys, tmp_path):
        image = tmp_path / "well_A01.tif"
        run_cli(
            monkeypatch,
            'file does startwith "well_"',
            str(image),
            "file:///c/b.tif",
            "--candidate", "file",
            "--no-progress",
        )

        lines = capsys.readouterr().out.splitlines()
        assert lines == ["FileName\tPathName", f"well_A01.tif\t{tmp_path}"]

    def test_cli_url_list_and_output(self, monkeypatch, capsys, tmp_path):
        url_list = tmp_path / "urls.txt"
        url_list.write_text(
            "# plate 1\n" "file:///a/b.tif\n" "\n" "file:///c/b.tif\n",
            encoding="utf-8",
        )
        output = tmp_path / "selected.tsv"

        run_cli(
            monkeypatch,
            'frame does eq "2"',
            "--url-list", str(url_list),
            "--frame-count", "3",
            "--output", str(output),
            "--no-progress",
        )

        assert capsys.readouterr().out == ""
        rows = output.read_text(encoding="utf-8").splitlines()
        assert rows == [
            HEADER,
            "file:///a/b.tif\t0\t2\tb.tif\t/a",
            "file:///c/b.tif\t0\t2\tb.tif\t/c",
        ]

    def test_cli_non_ascii_url_list(self, monkeypatch, capsys, tmp_path):
        url_list = tmp_path / "urls.txt"
        url_list.write_text("file:///data/échantillon.tif\n", encoding="utf-8")

        run_cli(
            monkeypatch,
            'file does startwith "é"',
            "--url-list", str(url_list),
            "--no-progress",
        )

        lines = capsys.readouterr().out.splitlines()
        assert lines[1] == "file:///data/échantillon.tif\t0\t0\téchantillon.tif\t/data"

    @pytest.mark.parametrize(
        "args, message",
        [
            (['file does contain "x', URLS[0]], "Invalid filter expression"),
            (["and", URLS[0]], "Invalid filter expression"),
            (['series does eq "0"', URLS[0], "--candidate", "file"], "cannot be applied"),
            (['file does eq "b.tif"'], "at least one input"),
            (['file does eq "b.tif"', URLS[0], "--series-count", "0"], "Series count"),
            (['file does eq "b.tif"', "--url-list", "missing.txt"], "does not exist"),
            (["  ", URLS[0]], "cannot be empty"),
        ],
    )
    def test_cli_errors(self, monkeypatch, capsys, args, message):
        """Test CLI behavior with invalid arguments."""
        with pytest.raises(SystemExit) as e:
            run_cli(monkeypatch, *args)

        assert e.value.code == 2
        assert message in capsys.readouterr().err
