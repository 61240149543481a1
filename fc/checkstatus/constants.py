from pathlib import Path

DEFAULT_CONFIG_FILE = Path("/etc/local/fc-check-status.conf")
SHOW_LOCALS_ENV = "FC_CHECKSTATUS_SHOW_LOCALS"
