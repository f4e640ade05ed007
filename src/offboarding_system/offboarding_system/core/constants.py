"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import date

EARLIEST_JOINING_DATE = date(1970, 1, 1)
LAST_DAY_WINDOW_DAYS = 30
MIN_NOTICE_DAYS = 90

DEFAULT_PORT = 3601
DEFAULT_POOL_SIZE = 5

# Column sizes in database/schema.sql
SHORT_TEXT_MAX = 100
NAME_MAX = 255
EMPLOYEE_ID_MAX = 50
# TEXT holds 65535 bytes; utf8mb4 needs up to 4 bytes per character
LONG_TEXT_MAX = 16000

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
