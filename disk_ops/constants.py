"""Disk operation constants."""

from __future__ import annotations

import os

# Native separator, fixed at import time.
SEP = os.sep
ALT_SEPARATORS = ("\\", "/")

DEFAULT_CHUNK_SIZE = 1_000_000  # 1MB

MSG_NOT_A_STRING = "Path should be a string"
MSG_PATH_NOT_FOUND = "Path does not exist"
MSG_DEST_INVALID = "Destination path not valid."
MSG_SOURCE_UNREADABLE = "Cannot open source file"
MSG_FILE_EXISTS = "File Exists"
MSG_WRITE_FAILED = "Error writing file"
MSG_READ_FAILED = "Error reading file"
