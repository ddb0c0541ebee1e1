"""Calculator version, stamped on every calculated item."""

VERSION = "2024.1.0"
