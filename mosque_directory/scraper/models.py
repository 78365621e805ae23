"""
Pydantic models for one scraped mosque listing. Serialized with camelCase keys
(quickFacts, prayerTimings) and absent fields omitted.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Slot order matches the order of the time markers on a detail page.
PRAYER_SLOTS = ("fajr", "sunrise", "dhur", "asr", "maghrib", "isha")


class PrayerTimings(BaseModel):
    """Six optional UTC timestamps; only the time of day is meaningful."""

    model_config = ConfigDict(frozen=True)

    fajr: Optional[datetime] = None
    sunrise: Optional[datetime] = None
    dhur: Optional[datetime] = None
    asr: Optional[datetime] = None
    maghrib: Optional[datetime] = None
    isha: Optional[datetime] = None


class MosqueRecord(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    url: str = Field(min_length=1)
    address: Optional[str] = None
    description: Optional[str] = None
    quick_facts: List[str] = Field(default_factory=list)
    governance: List[str] = Field(default_factory=list)
    prayer_timings: PrayerTimings = Field(default_factory=PrayerTimings)

    @classmethod
    def stub(cls, url: str) -> "MosqueRecord":
        """Record with only url set; kept when extraction fails."""
        return cls(url=url)

    def to_json_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
