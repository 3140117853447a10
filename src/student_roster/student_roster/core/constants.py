"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Canonical attendance date format (ISO, e.g. 2024-03-01).
DATE_FORMAT = "%Y-%m-%d"
DATE_PATTERN = r"\d{4}-\d{2}-\d{2}"

STORE_FORMAT_VERSION = 1

PERCENT_FORMAT = "{:.1f}%"
