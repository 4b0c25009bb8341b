"""Remote installer script retrieval."""

from urllib.parse import urlparse

import requests

from hyperlanesetup.errors import SetupError
from hyperlanesetup.errors_catalog import actionable_error


class ScriptFetcher:
    """Downloads installer scripts that are then piped into ``bash``."""

    def __init__(self, logger, timeout: float = 60.0, requests_module=requests):
        self.logger = logger
        self.timeout = timeout
        self.requests = requests_module

    def fetch(self, url: str, label: str) -> str:
        if urlparse(url).scheme.lower() != "https":
            raise SetupError(actionable_error("insecure_url", label=label, url=url))

        self.logger.info("Downloading %s from %s", label, url)
        try:
            response = self.requests.get(url, timeout=self.timeout, allow_redirects=True)
            response.raise_for_status()
        except self.requests.RequestException as exc:
            raise SetupError(f"Failed to download {label} from {url}: {exc}") from exc

        script = response.text
        if not script.strip():
            raise SetupError(f"Downloaded {label} is empty: {url}")
        return script
