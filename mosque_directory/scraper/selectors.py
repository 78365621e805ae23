"""
Named structural lookups for salatomatic.com pages.
The tbody ordinals are page-specific: they count every <tbody> on a detail page (0-based)
and break silently if the site layout changes. Change them here, nowhere else.
"""
from collections import namedtuple
from typing import Any, Dict, Optional

Selectors = namedtuple(
    "Selectors",
    [
        "title_block_class",       # index page: container of each listing's link
        "link_tag",                # anchor tag under a title block
        "body_text_class",         # detail page: 1st match = address, 2nd = description
        "table_body_tag",          # tag counted for the ordinal lookups below
        "quick_facts_index",       # ordinal of the quick facts tbody
        "governance_index",        # ordinal of the governance tbody
        "tag_item_tag",            # tag of each fact inside those tbodies
        "micro_link_class",        # detail page: prayer time markers, in slot order
    ],
    defaults=("titleBS", "a", "bodyLink", "tbody", 212, 214, "div", "microLink"),
)

DEFAULT_SELECTORS = Selectors()

_INT_FIELDS = ("quick_facts_index", "governance_index")


def selectors_from_config(config: Optional[Dict[str, Any]]) -> Selectors:
    """Build Selectors from the "selectors" config section; unknown keys are rejected."""
    if not config:
        return DEFAULT_SELECTORS
    unknown = set(config) - set(Selectors._fields)
    if unknown:
        raise ValueError(f"Unknown selector keys: {', '.join(sorted(unknown))}")
    values = dict(config)
    for name in _INT_FIELDS:
        if name in values:
            values[name] = int(values[name])
    return DEFAULT_SELECTORS._replace(**values)
