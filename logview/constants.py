"""Shared constants for the log viewer."""

# Render loop
FRAME_INTERVAL = 0.05  # 50ms between key/size polls

# Payload pretty-printing
PAYLOAD_INDENT = 2
UNRENDERABLE_PAYLOAD = "<payload too deeply nested to display>"

# Block shown once when reading the input stream fails
ERROR_NOTICE = "error reading stdin"

# Priority label (lowercased) -> blessed color name
PRIORITY_COLORS: dict[str, str] = {
    "debug": "bright_black",  # ANSI 8
    "info": "bright_green",  # ANSI 10
    "warn": "bright_yellow",  # ANSI 11
    "error": "bright_red",  # ANSI 9
}
DEFAULT_COLOR = "white"  # ANSI 7

# Environment variable supplying the default for --log
LOG_FILE_ENV = "LOGVIEW_LOG"
