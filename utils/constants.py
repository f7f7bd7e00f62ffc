"""
Naming conventions and layout constants shared by the reader and the writer.
"""

# A block whose name ends with this suffix (case-insensitive) is a list.
LIST_SUFFIX = "list"

# A header label or item key containing this marker holds epoch milliseconds.
# The check is case-sensitive.
EPOCH_MARKER = "epoch"

# Blank rows written after every block.
BLOCK_SPACING = 2

# Excel refuses worksheet titles longer than this.
MAX_SHEET_TITLE = 31

# List items are written as [key, value] pairs below this wire version.
LEGACY_ITEMS_VERSION = 6

# Java-style date patterns, see utils/dates.py.
TABLE_DATE_PATTERN = "MM/dd/yyyy"
TABLE_EPOCH_PATTERN = "yyyy-MM-dd'T'HH:mm:ssXXX"
DEFAULT_PRINT_PATTERN = "yyyy-MM-dd HH:mm:ss"
