"""Process-wide switches read once at import."""
import os

CHECKED = os.environ.get("LIBINTEGRATE_CHECKED", "0") != "0"
