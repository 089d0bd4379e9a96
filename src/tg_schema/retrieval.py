# src/tg_schema/retrieval.py

import logging
from pathlib import Path
from time import monotonic

import httpx

logger = logging.getLogger(__name__)


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def load_source(
    source: str | Path,
    *,
    client: httpx.Client | None = None,
    timeout: float = 30.0,
) -> bytes:
    """Read the documentation page from a URL or a local file.

    One blocking attempt. No retries: HTTP and filesystem errors
    propagate to the caller.

    Raises:
        httpx.HTTPError: If the request fails or returns an error status.
        OSError: If the file cannot be read.
    """
    if isinstance(source, str) and is_url(source):
        return _fetch(source, client=client, timeout=timeout)

    path = Path(source)
    logger.info("Reading documentation from file: %s", path)
    return path.read_bytes()


def _fetch(url: str, *, client: httpx.Client | None, timeout: float) -> bytes:
    start = monotonic()
    logger.info("Fetching documentation: %s", url)

    if client is None:
        with httpx.Client(timeout=timeout, follow_redirects=True) as owned:
            response = owned.get(url)
    else:
        response = client.get(url)
    response.raise_for_status()

    elapsed_ms = 1000 * (monotonic() - start)
    logger.info(
        "Fetched %d bytes, status=%d, latency=%.0fms",
        len(response.content),
        response.status_code,
        elapsed_ms,
    )
    return response.content
