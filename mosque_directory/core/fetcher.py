"""
HTTP fetch for index and detail pages. Returns page text or None; never raises on network errors.
"""
import logging
from typing import Any, Dict, Optional

import requests


class PageFetcher:
    def __init__(self, config: Dict[str, Any]):
        """config: the "http" config section (timeout_seconds, user_agent)."""
        self.config = config
        self.logger = logging.getLogger(self.__class__.__name__)
        self.timeout = float(config.get('timeout_seconds', 30))
        self.session = requests.Session()
        user_agent = config.get('user_agent')
        if user_agent:
            self.session.headers.update({'User-Agent': user_agent})

    def fetch(self, url: str) -> Optional[str]:
        try:
            self.logger.info(f"Fetching {url}")
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.Timeout:
            self.logger.error(f"Timed out after {self.timeout}s fetching {url}")
            return None
        except requests.RequestException as e:
            self.logger.error(f"Error fetching {url}: {e}")
            return None
        return response.text

    def close(self) -> None:
        self.session.close()
