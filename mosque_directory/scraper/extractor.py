"""
Build a MosqueRecord from a salatomatic detail page.

Each field is extracted independently: a failure is logged with url and field name and
leaves that field absent (or empty for lists) without stopping the other fields.
"""
import logging
from datetime import date
from typing import Any, Callable, Dict, List, Mapping, Optional

from .document import PageDocument
from .models import PRAYER_SLOTS, MosqueRecord, PrayerTimings
from .selectors import DEFAULT_SELECTORS, Selectors
from .text import clean_text
from .time_parser import TimeParserError, parse_time

logger = logging.getLogger(__name__)


class RecordExtractor:
    def __init__(
        self,
        selectors: Selectors = DEFAULT_SELECTORS,
        offsets: Optional[Mapping[str, int]] = None,
        collapse_to: str = "",
    ):
        self.selectors = selectors
        self.offsets = offsets
        self.collapse_to = collapse_to

    def extract(
        self, document: PageDocument, url: str, reference_date: Optional[date] = None
    ) -> MosqueRecord:
        fields: Dict[str, Any] = {"url": url}

        body_texts = self._guard(url, "body_text", lambda: self._body_texts(document), [])
        if len(body_texts) > 0:
            fields["address"] = body_texts[0]
        if len(body_texts) > 1:
            fields["description"] = body_texts[1]

        fields["quick_facts"] = self._guard(
            url, "quick_facts",
            lambda: self._tag_list(document, self.selectors.quick_facts_index, url, "quick_facts"),
            [],
        )
        fields["governance"] = self._guard(
            url, "governance",
            lambda: self._tag_list(document, self.selectors.governance_index, url, "governance"),
            [],
        )
        fields["prayer_timings"] = self._prayer_timings(document, url, reference_date)

        return MosqueRecord(**fields)

    def _guard(self, url: str, field: str, step: Callable[[], Any], default: Any) -> Any:
        try:
            return step()
        except Exception as e:
            logger.warning(f"Failed to extract {field} from {url}: {e}")
            return default

    def _clean(self, text: str) -> str:
        return clean_text(text, self.collapse_to)

    def _body_texts(self, document: PageDocument) -> List[str]:
        """Normalized text of the first two body-text elements (address, description)."""
        elements = document.by_class(self.selectors.body_text_class)[:2]
        return [self._clean(document.text(element)) for element in elements]

    def _tag_list(self, document: PageDocument, index: int, url: str, field: str) -> List[str]:
        """Normalized text of every tag item inside the table body at a fixed ordinal."""
        table_bodies = document.by_tag(self.selectors.table_body_tag)
        table_body = document.nth(table_bodies, index)
        if table_body is None:
            logger.warning(
                f"{url}: {field} expects {self.selectors.table_body_tag} #{index} "
                f"but page has {len(table_bodies)}"
            )
            return []
        return [
            self._clean(document.text(item))
            for item in document.descendants(table_body, self.selectors.tag_item_tag)
        ]

    def _prayer_timings(
        self, document: PageDocument, url: str, reference_date: Optional[date]
    ) -> PrayerTimings:
        markers = self._guard(
            url, "prayer_timings",
            lambda: document.by_class(self.selectors.micro_link_class),
            [],
        )
        slots: Dict[str, Any] = {}
        for index, slot in enumerate(PRAYER_SLOTS):
            marker = document.nth(markers, index)
            if marker is None:
                logger.debug(f"{url}: no time marker for {slot}")
                continue
            raw = self._clean(document.text(marker))
            try:
                slots[slot] = parse_time(raw, reference_date, self.offsets)
            except TimeParserError as e:
                logger.warning(f"Failed to parse {slot} time from {url}: {e}")
        return PrayerTimings(**slots)


def extract_record(
    document: PageDocument,
    url: str,
    selectors: Selectors = DEFAULT_SELECTORS,
    reference_date: Optional[date] = None,
    offsets: Optional[Mapping[str, int]] = None,
    collapse_to: str = "",
) -> MosqueRecord:
    """Extract one record from a parsed detail page with field-level failure isolation."""
    return RecordExtractor(selectors, offsets, collapse_to).extract(document, url, reference_date)
