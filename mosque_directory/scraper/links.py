import logging
from typing import List

from .document import PageDocument
from .selectors import DEFAULT_SELECTORS, Selectors

logger = logging.getLogger(__name__)


def discover_links(
    document: PageDocument,
    base_url: str,
    selectors: Selectors = DEFAULT_SELECTORS,
    deduplicate: bool = False,
) -> List[str]:
    """Return detail page URLs linked from every title block, in document order.

    Hrefs are site-relative ("/view/...") and joined to base_url by plain concatenation.
    Duplicates are kept unless deduplicate is True.
    """
    urls: List[str] = []
    seen = set()
    for block in document.by_class(selectors.title_block_class):
        for link in document.descendants(block, selectors.link_tag):
            href = document.attribute(link, "href")
            if not href:
                logger.debug(f"Skipping anchor without href in {selectors.title_block_class} block")
                continue
            url = f"{base_url}{href}"
            if deduplicate:
                if url in seen:
                    continue
                seen.add(url)
            urls.append(url)

    logger.info(f"Discovered {len(urls)} detail link(s)")
    return urls
