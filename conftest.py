"""Global pytest configuration."""

import os

# Pin policy settings for tests before any imports read them
os.environ["DEFAULT_VISIT_DAYS"] = "3"
os.environ["DEFAULT_ACTIVITY_MINUTES"] = "120"
os.environ["DAY_WINDOW_START"] = "06:00"
os.environ["DAY_WINDOW_END"] = "23:00"
os.environ["MIN_FREE_SLOT_MINUTES"] = "30"
