import logging
import sys
from typing import Dict, List, Optional

from mosque_directory.core.config import Config
from mosque_directory.core.fetcher import PageFetcher
from mosque_directory.scraper.models import MosqueRecord
from mosque_directory.scraper.pipeline import build_scraper
from mosque_directory.scraper.service import save_records

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'


class ScraperApp:
    def __init__(
        self,
        config_path: Optional[str] = None,
        output_dir: Optional[str] = None,
        index_url: Optional[str] = None,
    ):
        self.logger = logging.getLogger(self.__class__.__name__)

        self.config = Config(config_path=config_path)
        if output_dir:
            self.config.data["output"]["directory"] = output_dir
        self.index_url_override = index_url

        self._setup_logging()

    def _setup_logging(self) -> None:
        """Configure logging to write to stdout and, when configured, a log file"""
        root_logger = logging.getLogger()
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)

        level_name = str(self.config.data["logging"].get("level", "INFO")).upper()
        root_logger.setLevel(getattr(logging, level_name, logging.INFO))

        formatter = logging.Formatter(LOG_FORMAT)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

        log_file = self.config.data["logging"].get("file")
        if log_file:
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

        self.logger.info(f"Logging configured - Level: {level_name}, File: {log_file or '-'}")

    def scrape(self) -> List[MosqueRecord]:
        """Run the pipeline once and return records in discovery order"""
        fetcher = PageFetcher(self.config.get_section("http"))
        try:
            scraper = build_scraper(self.config.data, fetcher)
            if self.index_url_override:
                scraper.index_url = self.index_url_override
            self.logger.info(f"Scraping index {scraper.index_url}")
            return scraper.run()
        finally:
            fetcher.close()

    def run(self) -> Dict[str, bool]:
        records = self.scrape()
        output = self.config.get_section("output")
        return save_records(
            records,
            output.get("directory", "."),
            json_file=output.get("json_file", "mosques.json"),
            csv_file=output.get("csv_file", "mosques.csv"),
        )
