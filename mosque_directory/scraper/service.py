"""
Service layer: write scraped records to mosques.json and mosques.csv.
Each writer logs and returns False on failure so one file failing does not block the other.
"""
import csv
import json
import logging
from pathlib import Path
from typing import Dict, List, Sequence, Union

from .models import PRAYER_SLOTS, MosqueRecord

logger = logging.getLogger(__name__)

CSV_HEADER = [
    ("url", "URL"),
    ("description", "Description"),
    ("address", "Address"),
    ("quick_facts", "Quick Facts"),
    ("governance", "Governance"),
    ("fajr", "Fajr"),
    ("sunrise", "Sunrise"),
    ("dhur", "Dhur"),
    ("asr", "Asr"),
    ("maghrib", "Maghrib"),
    ("isha", "Isha"),
]
LIST_SEPARATOR = ", "


def record_to_row(record: MosqueRecord) -> Dict[str, str]:
    """Flatten one record into CSV cells keyed by column title."""
    values = {
        "url": record.url,
        "description": record.description or "",
        "address": record.address or "",
        "quick_facts": LIST_SEPARATOR.join(record.quick_facts),
        "governance": LIST_SEPARATOR.join(record.governance),
    }
    # same timestamp strings as mosques.json
    timings = record.to_json_dict().get("prayerTimings", {})
    for slot in PRAYER_SLOTS:
        values[slot] = timings.get(slot, "")
    return {title: values[key] for key, title in CSV_HEADER}


def save_records_json(records: Sequence[MosqueRecord], path: Union[str, Path]) -> bool:
    """Write all records as an indented JSON array."""
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump([r.to_json_dict() for r in records], f, indent=2, ensure_ascii=False)
        logger.info(f"Mosques data written to {path}")
        return True
    except (OSError, TypeError, ValueError) as e:
        logger.error(f"Error writing to file {path}: {e}")
        return False


def save_records_csv(records: Sequence[MosqueRecord], path: Union[str, Path]) -> bool:
    """Write one CSV row per record, header row first."""
    try:
        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=[title for _, title in CSV_HEADER])
            writer.writeheader()
            for record in records:
                writer.writerow(record_to_row(record))
        logger.info(f"Mosques data written to {path}")
        return True
    except (OSError, csv.Error) as e:
        logger.error(f"Error writing to CSV file {path}: {e}")
        return False


def save_records(
    records: List[MosqueRecord],
    output_dir: Union[str, Path],
    json_file: str = "mosques.json",
    csv_file: str = "mosques.csv",
) -> Dict[str, bool]:
    """Write both outputs into output_dir; returns {"json": ok, "csv": ok}."""
    directory = Path(output_dir)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Cannot create output directory {directory}: {e}")
        return {"json": False, "csv": False}
    return {
        "json": save_records_json(records, directory / json_file),
        "csv": save_records_csv(records, directory / csv_file),
    }
