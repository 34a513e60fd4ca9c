import logging
from typing import Optional
from urllib.request import Request, urlopen

from tabset.core.data.dataset import Dataset
from tabset.core.io.csv_reader import CsvFormatError, CsvOptions, text_to_dataset

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 60.0


def fetch_text(url: str, timeout: float = DEFAULT_TIMEOUT_SECONDS) -> str:
    if timeout <= 0:
        raise ValueError("timeout must be > 0")

    request = Request(url=url, headers={"Accept": "text/csv, text/plain"}, method="GET")
    with urlopen(request, timeout=timeout) as response:
        status = getattr(response, "status", 200)
        if status != 200:
            raise RuntimeError(f"GET {url} returned HTTP {status}")
        charset = response.headers.get_content_charset() or "utf-8"
        payload = response.read()

    logger.debug("[http] url=%s bytes=%s charset=%s", url, len(payload), charset)
    try:
        return payload.decode(charset)
    except (LookupError, UnicodeDecodeError) as exc:
        raise CsvFormatError(0, f"response from {url} is not valid {charset}") from exc


def load_http(
    url: str,
    options: Optional[CsvOptions] = None,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> Dataset:
    """Fetch CSV text over HTTP(S) and convert it with ``text_to_dataset``.

    Network failures (``urllib.error.URLError``, timeouts) propagate as raised
    by ``urlopen``; a successful response that is not HTTP 200 raises
    ``RuntimeError``.
    """
    return text_to_dataset(fetch_text(url, timeout=timeout), options)
