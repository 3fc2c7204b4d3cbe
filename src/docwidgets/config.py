"""Static configuration for widget rendering."""

from __future__ import annotations

ICON_CDN_BASE = "https://d3gk2c5xim1je2.cloudfront.net/v6.6.0"

DEFAULT_ICON_NAME = "bars-staggered"
DEFAULT_ICON_LABEL = "Menu"

DEFAULT_TRAIL_JOINER = "›"
DEFAULT_KEY_JOINER = " + "
DEFAULT_STEP_JOINER = ", then "
