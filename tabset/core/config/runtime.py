import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from tabset.core.io.csv_reader import CsvOptions


@dataclass(frozen=True)
class SourceConfig:
    csv_path: Path | None
    url: str | None


@dataclass(frozen=True)
class PathConfig:
    summary_csv: Path


@dataclass(frozen=True)
class RuntimeConfig:
    source: SourceConfig
    csv_options: CsvOptions
    trim: bool
    http_timeout: float
    paths: PathConfig


def _resolve_path(project_root: Path, raw_path: str) -> Path:
    path = Path(raw_path)
    if path.is_absolute():
        return path
    return project_root / path


def _parse_single_char(payload: dict[str, Any], key: str, default: str) -> str:
    raw_value = payload.get(key, default)
    if not isinstance(raw_value, str) or len(raw_value) != 1:
        raise ValueError(f"csv.{key} must be a single character")
    return raw_value


def _parse_csv_options(payload: dict[str, Any]) -> CsvOptions:
    csv_payload = payload.get("csv", {})
    if not isinstance(csv_payload, dict):
        raise ValueError("csv must be an object")

    raw_skip_lines = csv_payload.get("skip_lines", 0)
    if isinstance(raw_skip_lines, bool) or not isinstance(raw_skip_lines, int):
        raise ValueError("csv.skip_lines must be an integer")
    if raw_skip_lines < 0:
        raise ValueError("csv.skip_lines must be >= 0")

    quote = _parse_single_char(csv_payload, "quote", '"')
    delimiter = _parse_single_char(csv_payload, "delimiter", ",")

    raw_terminator = csv_payload.get("terminator")
    if raw_terminator is None:
        terminator = None
    else:
        terminator = _parse_single_char(csv_payload, "terminator", "")

    raw_headers = csv_payload.get("headers", True)
    if not isinstance(raw_headers, bool):
        raise ValueError("csv.headers must be a boolean")

    return CsvOptions(
        skip_lines=raw_skip_lines,
        quote=quote,
        delimiter=delimiter,
        terminator=terminator,
        headers=raw_headers,
    )


def _parse_source_config(payload: dict[str, Any], project_root: Path) -> SourceConfig:
    source_payload = payload.get("source")
    if not isinstance(source_payload, dict):
        raise ValueError("source must be an object")

    raw_csv = source_payload.get("csv")
    raw_url = source_payload.get("url")
    if (raw_csv is None) == (raw_url is None):
        raise ValueError("source must provide exactly one of 'csv' or 'url'")

    if raw_url is not None:
        url = str(raw_url).strip()
        if not url.lower().startswith(("http://", "https://")):
            raise ValueError("source.url must be an http(s) URL")
        return SourceConfig(csv_path=None, url=url)

    return SourceConfig(csv_path=_resolve_path(project_root, str(raw_csv)), url=None)


def load_runtime_config(config_path: Path, project_root: Path) -> RuntimeConfig:
    with config_path.open("r", encoding="utf-8") as file:
        payload = json.load(file)

    if not isinstance(payload, dict):
        raise ValueError("config must be a JSON object")

    source = _parse_source_config(payload, project_root)
    csv_options = _parse_csv_options(payload)

    raw_trim = payload.get("trim", False)
    if not isinstance(raw_trim, bool):
        raise ValueError("trim must be a boolean")

    http_payload = payload.get("http", {})
    if not isinstance(http_payload, dict):
        raise ValueError("http must be an object")
    http_timeout = float(http_payload.get("timeout", 60.0))
    if http_timeout <= 0:
        raise ValueError("http.timeout must be > 0")

    paths_payload = payload.get("paths", {})
    if not isinstance(paths_payload, dict):
        raise ValueError("paths must be an object")
    raw_summary_csv = paths_payload.get("summary_csv")
    if raw_summary_csv is None:
        raise ValueError("paths.summary_csv is required")

    return RuntimeConfig(
        source=source,
        csv_options=csv_options,
        trim=raw_trim,
        http_timeout=http_timeout,
        paths=PathConfig(summary_csv=_resolve_path(project_root, str(raw_summary_csv))),
    )
