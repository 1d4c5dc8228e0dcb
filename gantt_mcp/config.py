"""Runtime configuration, read from the environment (and an optional .env)."""

import os

from dotenv import load_dotenv

load_dotenv()

# JSON project document the server loads on start and saves after each edit.
# Empty keeps everything in memory.
DATA_FILE = os.getenv("GANTT_DATA_FILE", "")

# Reference timezone used to turn datetimes into calendar dates
TIMEZONE = os.getenv("GANTT_TIMEZONE", "UTC")

# Timeline geometry (pixels)
DAY_WIDTH = int(os.getenv("GANTT_DAY_WIDTH", "40"))
ROW_HEIGHT = int(os.getenv("GANTT_ROW_HEIGHT", "48"))

# Safety bound on rollup passes
ROLLUP_MAX_PASSES = int(os.getenv("GANTT_ROLLUP_MAX_PASSES", "10"))

# Days of slack shown after the latest due date
TIMELINE_LEAD_DAYS = int(os.getenv("GANTT_TIMELINE_LEAD_DAYS", "90"))

LOG_LEVEL = os.getenv("GANTT_LOG_LEVEL", "INFO")
