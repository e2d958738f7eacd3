"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

VISITS_LIMIT = 50
NOT_AVAILABLE = "N/A"

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
