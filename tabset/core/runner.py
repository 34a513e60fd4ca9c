import csv
import logging
import time
from functools import partial
from pathlib import Path

from tabset.core.config.runtime import RuntimeConfig, load_runtime_config
from tabset.core.data.dataset import Dataset
from tabset.core.evaluation.summary import SUMMARY_FIELDS, describe_dataset
from tabset.core.io.csv_reader import read_csv_dataset
from tabset.core.io.http_loader import load_http
from tabset.interfaces import DatasetLoader

logger = logging.getLogger(__name__)


def _load_dataset(runtime: RuntimeConfig) -> Dataset:
    if runtime.source.url is not None:
        logger.info("[source] url=%s", runtime.source.url)
        loader: DatasetLoader = partial(load_http, timeout=runtime.http_timeout)
        return loader(runtime.source.url, runtime.csv_options)
    if runtime.source.csv_path is None:
        raise ValueError("source is not configured")
    logger.info("[source] csv=%s", runtime.source.csv_path)
    return read_csv_dataset(runtime.source.csv_path, runtime.csv_options)


def _format_stat(value: float) -> str:
    return f"{value:.6f}"


def run_pipeline(config_path: Path, project_root: Path) -> Path:
    timings: dict[str, float] = {}
    pipeline_start = time.perf_counter()
    stage_start = pipeline_start

    runtime = load_runtime_config(config_path, project_root)
    timings["config_ms"] = (time.perf_counter() - stage_start) * 1000.0
    logger.info("[config] file=%s", config_path)
    logger.info(
        "[config] skip_lines=%s delimiter=%r quote=%r terminator=%r headers=%s trim=%s",
        runtime.csv_options.skip_lines,
        runtime.csv_options.delimiter,
        runtime.csv_options.quote,
        runtime.csv_options.terminator if runtime.csv_options.terminator is not None else "CRLF",
        runtime.csv_options.headers,
        runtime.trim,
    )

    stage_start = time.perf_counter()
    dataset = _load_dataset(runtime)
    timings["load_ms"] = (time.perf_counter() - stage_start) * 1000.0
    logger.info("[dataset] columns=%s", dataset.column_count())
    logger.info("[dataset] rows=%s", dataset.row_count())

    stage_start = time.perf_counter()
    summaries = describe_dataset(dataset, trim=runtime.trim)
    timings["describe_ms"] = (time.perf_counter() - stage_start) * 1000.0
    for label, summary in summaries:
        logger.info(
            "[column:%s] numeric=%d/%d mean=%.6f stddev_p=%.6f",
            label,
            int(summary["numeric"]),
            int(summary["length"]),
            summary["mean"],
            summary["stddev_p"],
        )

    stage_start = time.perf_counter()
    summary_csv = runtime.paths.summary_csv
    summary_csv.parent.mkdir(parents=True, exist_ok=True)
    with summary_csv.open("w", encoding="utf-8", newline="") as out_file:
        writer = csv.DictWriter(out_file, fieldnames=["column", *SUMMARY_FIELDS])
        writer.writeheader()
        for label, summary in summaries:
            row: dict[str, str] = {"column": label}
            for key in SUMMARY_FIELDS:
                if key in ("length", "non_blank", "numeric"):
                    row[key] = str(int(summary[key]))
                else:
                    row[key] = _format_stat(summary[key])
            writer.writerow(row)
    timings["report_ms"] = (time.perf_counter() - stage_start) * 1000.0
    logger.info("[report] summary_file=%s", summary_csv)

    timings["total_ms"] = (time.perf_counter() - pipeline_start) * 1000.0
    logger.info(
        "[timing] config_ms=%.2f load_ms=%.2f describe_ms=%.2f report_ms=%.2f total_ms=%.2f",
        timings["config_ms"],
        timings["load_ms"],
        timings["describe_ms"],
        timings["report_ms"],
        timings["total_ms"],
    )
    return summary_csv
