"""Type aliases used across cmadash."""

from __future__ import annotations

from typing import Any

JsonDict = dict[str, Any]
Row = list[str]
