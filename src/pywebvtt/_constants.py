"""Field limits and unit constants for WebVTT timestamps and cue settings."""

MIN_TIMESTAMP_LENGTH = 9
"""Length of the shortest accepted timestamp, ``MM:SS.mmm``."""

MAX_MINUTES = 59
MAX_SECONDS = 59
MAX_MILLISECONDS = 999

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE

# Cue setting keywords, in output order
SETTING_REGION = "region"
SETTING_LINE = "line"
SETTING_POSITION = "position"
SETTING_SIZE = "size"
SETTING_DIRECTION = "direction"
SETTING_ALIGN = "align"
