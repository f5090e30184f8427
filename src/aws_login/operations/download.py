"""Remote template document download."""

import logging

import requests

from aws_login.lib.errors import DownloadError
from aws_login.lib.result import Err, Ok, Result

logger = logging.getLogger(__name__)

TIMEOUT_SECONDS = 30


def fetch(url: str) -> Result[str, DownloadError]:
    """Download a document and return its text."""
    logger.debug("Downloading %s", url)
    try:
        response = requests.get(url, timeout=TIMEOUT_SECONDS)
        response.raise_for_status()
    except requests.RequestException as e:
        return Err(DownloadError(url, str(e)))
    return Ok(response.text)
