#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for the pylhef command-line interface
"""

from __future__ import annotations

import gzip

import pytest

from conftest import MADGRAPH_DOCUMENT
from pylhef.cli import build_parser, main


class TestParser:
    """Tests for argument parsing"""

    def test_summary_arguments(self) -> None:
        args = build_parser().parse_args(["summary", "a.lhe", "b.lhe", "--max-events", "10"])
        assert args.command == "summary"
        assert args.files == ["a.lhe", "b.lhe"]
        assert args.max_events == 10

    def test_events_default_limit(self) -> None:
        args = build_parser().parse_args(["events", "a.lhe"])
        assert args.limit is None

    def test_chunk_size(self) -> None:
        args = build_parser().parse_args(["--chunk-size", "16", "events", "a.lhe"])
        assert args.chunk_size == 16

    @pytest.mark.parametrize("value", ["0", "-4", "big"])
    def test_chunk_size_rejects_non_positive(self, value: str, capsys) -> None:
        with pytest.raises(SystemExit) as excinfo:
            build_parser().parse_args(["--chunk-size", value, "summary", "a.lhe"])
        assert excinfo.value.code == 2
        assert "--chunk-size" in capsys.readouterr().err


class TestMain:
    """Tests for the CLI entry point"""

    def test_no_command_prints_help(self, capsys) -> None:
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out

    def test_summary(self, lhef_file, capsys) -> None:
        assert main(["summary", str(lhef_file)]) == 0
        out = capsys.readouterr().out
        assert "Version:      3.0" in out
        assert "Processes:    2" in out
        assert "Events read:  2" in out
        assert "Weight sum:   7.500000e+02" in out

    def test_summary_max_events(self, lhef_file, capsys) -> None:
        assert main(["summary", str(lhef_file), "--max-events", "1"]) == 0
        assert "Events read:  1" in capsys.readouterr().out

    def test_summary_missing_file(self, tmp_path, capsys) -> None:
        assert main(["summary", str(tmp_path / "missing.lhe")]) == 1
        assert "FAIL" in capsys.readouterr().out

    def test_summary_out_of_range_integer(self, tmp_path, capsys) -> None:
        path = tmp_path / "overflow.lhe"
        path.write_text(
            "<init>1 -1 7000.0 7000.0 0 0 1 1 3 1 1.0 0.1 2.0 99999999999999999999</init>\n"
        )
        assert main(["summary", str(path)]) == 1
        assert "FAIL: Field LPRUP(1)" in capsys.readouterr().out

    def test_summary_truncated_gzip(self, tmp_path, capsys) -> None:
        path = tmp_path / "truncated.lhe.gz"
        path.write_bytes(gzip.compress(MADGRAPH_DOCUMENT.encode("utf-8"))[:-30])
        assert main(["--chunk-size", "64", "summary", str(path)]) == 1
        assert "FAIL" in capsys.readouterr().out

    def test_continue_on_error(self, tmp_path, lhef_file, capsys) -> None:
        missing = tmp_path / "missing.lhe"
        rc = main(["--continue-on-error", "summary", str(missing), str(lhef_file)])
        assert rc == 1
        assert "Events read:  2" in capsys.readouterr().out

    def test_events_limit(self, lhef_file, capsys) -> None:
        assert main(["events", str(lhef_file), "--limit", "1"]) == 0
        lines = capsys.readouterr().out.splitlines()
        rows = [ln for ln in lines if not ln.startswith("#")]
        assert len(rows) == 1
        assert rows[0].split()[:3] == ["1", "4", "1"]

    def test_events_all(self, lhef_file, capsys) -> None:
        assert main(["events", str(lhef_file)]) == 0
        rows = [ln for ln in capsys.readouterr().out.splitlines() if not ln.startswith("#")]
        assert len(rows) == 2
