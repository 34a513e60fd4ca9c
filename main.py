import argparse
import logging
from pathlib import Path

from tabset.core.runner import run_pipeline

CONFIG_HELP = """\
configuration keys:
  source.csv | source.url   local CSV file or HTTP(S) URL (exactly one)
  csv.skip_lines            leading lines dropped before the first record
  csv.quote, csv.delimiter  single characters (default '"' and ',')
  csv.terminator            single character; null accepts \\r\\n, \\n or \\r
  csv.headers               first record holds the column labels
  trim                      strip whitespace from every cell before describing
  http.timeout              seconds to wait for a URL source
  paths.summary_csv         per-column summary report written by the run
"""


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Load a delimited text source into a tabset Dataset and write per-column statistics.",
        epilog=CONFIG_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("config/run.json"),
        help="Runtime configuration (JSON); relative paths inside it resolve against --project-root.",
    )
    parser.add_argument(
        "--project-root",
        type=Path,
        default=Path(__file__).resolve().parent,
        help="Directory that relative config, source and summary paths are resolved against.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console logging level; DEBUG adds converter and loader detail.",
    )
    return parser


def main(argv: list[str] | None = None) -> Path:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(message)s")
    project_root = args.project_root.resolve()
    config_path = args.config if args.config.is_absolute() else project_root / args.config
    return run_pipeline(config_path, project_root)


if __name__ == "__main__":
    main()
