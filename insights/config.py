"""Runtime settings for the dashboard, read from the environment."""

from __future__ import annotations

import os
from typing import Optional

from .utils.coerce import to_float

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8080/api").rstrip("/")

# Unset means requests waits forever, matching the browser client it replaces.
API_TIMEOUT: Optional[float] = to_float(os.getenv("API_TIMEOUT"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

FILTER_ALL = "All"
PROPERTY_TYPES = ("Apartment", "House", "Studio")
SORT_KEYS = ("address", "rent", "occupancy", "score")

__all__ = ["API_BASE_URL", "API_TIMEOUT", "LOG_LEVEL", "FILTER_ALL", "PROPERTY_TYPES", "SORT_KEYS"]
