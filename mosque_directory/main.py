import argparse
import logging
import sys
from mosque_directory.core.app import LOG_FORMAT, ScraperApp


def setup_basic_logging():
    """Setup basic stdout logging before config is loaded"""
    root_logger = logging.getLogger()
    if not root_logger.handlers:  # Only add handler if none exists
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(handler)
        root_logger.setLevel(logging.DEBUG)
        logging.debug("Basic logging initialized")


def main(argv=None) -> int:
    setup_basic_logging()

    parser = argparse.ArgumentParser(description='Scrape mosque listings into mosques.json and mosques.csv')
    parser.add_argument('--config',
                        help='Path to YAML config file (default: built-in settings)')
    parser.add_argument('--output-dir',
                        help='Directory for mosques.json and mosques.csv (overrides output.directory)')
    parser.add_argument('--index-url',
                        help='Index page to scrape (overrides site.domain + site.index_path)')

    args = parser.parse_args(argv)

    app = ScraperApp(
        config_path=args.config,
        output_dir=args.output_dir,
        index_url=args.index_url,
    )
    written = app.run()
    return 0 if all(written.values()) else 1


if __name__ == "__main__":
    sys.exit(main())
