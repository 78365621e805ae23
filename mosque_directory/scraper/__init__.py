from .extractor import RecordExtractor, extract_record
from .links import discover_links
from .models import MosqueRecord, PrayerTimings
from .pipeline import MosqueDirectoryScraper, build_scraper
from .text import clean_text
from .time_parser import TimeParseError, TimeParserError, UnknownTimezoneError, parse_time
