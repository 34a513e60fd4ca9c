import json
from pathlib import Path

import pytest

from main import build_arg_parser, main


def test_arg_parser_defaults():
    args = build_arg_parser().parse_args([])

    assert args.config == Path("config/run.json")
    assert args.log_level == "INFO"
    assert (args.project_root / "main.py").is_file()


def test_arg_parser_options(tmp_path):
    args = build_arg_parser().parse_args(
        ["--config", "other.json", "--project-root", str(tmp_path), "--log-level", "DEBUG"]
    )

    assert args.config == Path("other.json")
    assert args.project_root == tmp_path
    assert args.log_level == "DEBUG"


def test_arg_parser_rejects_unknown_log_level():
    with pytest.raises(SystemExit):
        build_arg_parser().parse_args(["--log-level", "VERBOSE"])


def test_help_describes_config_keys():
    text = build_arg_parser().format_help()

    for key in ("source.csv", "source.url", "csv.terminator", "paths.summary_csv", "--project-root"):
        assert key in text


def test_main_runs_relative_config(tmp_path):
    (tmp_path / "input.csv").write_text("A,B\n1,x\n3,y\n", encoding="utf-8")
    (tmp_path / "run.json").write_text(
        json.dumps({"source": {"csv": "input.csv"}, "paths": {"summary_csv": "out/summary.csv"}}),
        encoding="utf-8",
    )

    summary_csv = main(["--config", "run.json", "--project-root", str(tmp_path)])

    assert summary_csv == tmp_path.resolve() / "out/summary.csv"
    assert summary_csv.read_text(encoding="utf-8").splitlines()[0].startswith("column,")
