# ABOUTME: Debug logging helper gated on the DEBUG environment flag
# ABOUTME: Prints tagged trace lines to stdout only when debug mode is on

from datetime import datetime

from surf_alert.config import Config


def debug_log(message: str, tag: str = "DEBUG") -> None:
    """Print a tagged, timestamped message when Config.DEBUG is enabled"""
    if not Config.DEBUG:
        return
    print(f"[{datetime.now():%H:%M:%S}] [{tag}] {message}")
