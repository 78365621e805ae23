"""
Index page -> detail links -> one MosqueRecord per link, in discovery order.
An index failure ends the run with no records; a detail failure keeps a url-only record.
"""
import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import date
from typing import Any, Dict, List, Optional

from .document import PageDocument
from .extractor import RecordExtractor
from .links import discover_links
from .models import MosqueRecord
from .selectors import DEFAULT_SELECTORS, Selectors, selectors_from_config
from .time_parser import TIMEZONE_OFFSETS


class MosqueDirectoryScraper:
    def __init__(
        self,
        fetcher: Any,
        base_url: str,
        index_url: str,
        selectors: Selectors = DEFAULT_SELECTORS,
        extractor: Optional[RecordExtractor] = None,
        deduplicate_links: bool = False,
        max_workers: int = 1,
    ):
        """
        fetcher: anything with fetch(url) -> Optional[str].
        base_url: prefix joined to relative detail hrefs.
        """
        self.fetcher = fetcher
        self.base_url = base_url
        self.index_url = index_url
        self.selectors = selectors
        self.extractor = extractor or RecordExtractor(selectors)
        self.deduplicate_links = deduplicate_links
        self.max_workers = max(1, int(max_workers))
        self.logger = logging.getLogger(self.__class__.__name__)

    def run(self, reference_date: Optional[date] = None) -> List[MosqueRecord]:
        urls = self._discover()
        if urls is None:
            return []

        if self.max_workers == 1:
            records = [self._scrape_detail(url, reference_date) for url in urls]
        else:
            # map() yields in input order, so discovery order is kept
            with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
                records = list(pool.map(lambda u: self._scrape_detail(u, reference_date), urls))

        failed = sum(1 for r in records if r == MosqueRecord.stub(r.url))
        self.logger.info(f"Scraped {len(records)} mosque(s), {failed} without details")
        return records

    def _discover(self) -> Optional[List[str]]:
        """Detail URLs from the index page, or None when the index cannot be loaded."""
        try:
            content = self.fetcher.fetch(self.index_url)
            if content is None:
                self.logger.error(f"Error fetching the index page {self.index_url}")
                return None
            document = PageDocument.parse(content)
            return discover_links(
                document, self.base_url, self.selectors, deduplicate=self.deduplicate_links
            )
        except Exception as e:
            self.logger.error(f"Error processing the index page {self.index_url}: {e}", exc_info=True)
            return None

    def _scrape_detail(self, url: str, reference_date: Optional[date]) -> MosqueRecord:
        record = MosqueRecord.stub(url)
        try:
            content = self.fetcher.fetch(url)
            if content is None:
                self.logger.error(f"Error fetching URL {url}, keeping url only")
                return record
            document = PageDocument.parse(content)
            record = self.extractor.extract(document, url, reference_date)
        except Exception as e:
            self.logger.error(f"Error scraping URL {url}: {e}", exc_info=True)
        return record


def build_scraper(config_data: Dict[str, Any], fetcher: Any) -> MosqueDirectoryScraper:
    """Wire a scraper from the loaded config dict (see core.config.DEFAULT_CONFIG)."""
    site = config_data.get("site") or {}
    scraper_config = config_data.get("scraper") or {}
    text_config = config_data.get("text") or {}

    selectors = selectors_from_config(config_data.get("selectors"))
    offsets = dict(TIMEZONE_OFFSETS)
    for abbreviation, hours in (config_data.get("timezone_offsets") or {}).items():
        offsets[str(abbreviation)] = int(hours)
    extractor = RecordExtractor(
        selectors,
        offsets=offsets,
        collapse_to=text_config.get("collapse_runs_to", "") or "",
    )
    domain = site["domain"]
    return MosqueDirectoryScraper(
        fetcher,
        base_url=domain,
        index_url=f"{domain}{site['index_path']}",
        selectors=selectors,
        extractor=extractor,
        deduplicate_links=bool(scraper_config.get("deduplicate_links", False)),
        max_workers=int(scraper_config.get("max_workers") or 1),
    )
