"""
Application-wide constants for Travelbook.

This module contains file format details, user-facing status lines and
the default dataset that are used throughout the application.
"""

# Data file constants
DEFAULT_DATA_FILE = "db.csv"
DEFAULT_FILE_ENCODING = "utf-8"
FIELD_DELIMITER = ";"
FIELDS_PER_RECORD = 6

# Date and number formats
DATE_FORMAT = "%d/%m/%Y"
PRICE_QUANTUM = "0.01"

# Largest number of digits before the decimal point of a price
MAX_PRICE_INTEGER_DIGITS = 12

# Record constraints
ID_DIGITS = 3
MIN_DAY_COUNT = 1

# Command argument counts
EDIT_MIN_ARGUMENTS = 2
EDIT_MAX_ARGUMENTS = 7

# Status lines printed after a successful command
MSG_ADDED = "added"
MSG_DELETED = "deleted"
MSG_CHANGED = "changed"
MSG_SORTED = "sorted"
MSG_AVERAGE = "average={}"
MSG_NO_TRAVELS = "No travels found."

# Generic I/O failure lines
MSG_UPDATE_FAILED = "Error updating file."
MSG_CREATE_FAILED = "Error creating file."
MSG_READ_FAILED = "Error reading file."
MSG_INVALID_LINE = "Invalid data format: {}"

# Logging constants
DEFAULT_LOG_FILE = "logs/travelbook.log"
DEFAULT_LOG_FILE_SIZE_BYTES = 10 * 1024 * 1024
MIN_LOG_FILE_SIZE_BYTES = 1024
DEFAULT_LOG_BACKUP_COUNT = 5

# Canonical dataset written when the data file does not exist
DEFAULT_TRAVEL_LINES = (
    "101;Daugavpils;03/07/2021;5;150.50;TRAIN",
    "102;Rome;15/05/2021;7;300.00;BUS",
    "103;Hamburg;15/09/2021;10;500.50;PLANE",
    "104;Helsinki;10/06/2021;3;250.00;BOAT",
    "105;New York;16/08/2021;5;1000.00;PLANE",
)
