"""Per-call logging context.

One :class:`LogContext` is created for each client operation and threaded
through the request, decode and stream paths. ``request_id`` is filled in
once response headers arrive.
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Fields shared by every event of one operation."""

    operation: Optional[str] = None
    deployment: Optional[str] = None
    model: Optional[str] = None
    request_id: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Flatten into a payload; ``extra`` merges last and ``None`` values drop out."""
        data: Dict[str, Any] = {}
        for f in fields(self):
            if f.name == "extra":
                continue
            value = getattr(self, f.name)
            if value is not None:
                data[f.name] = value
        data.update({k: v for k, v in (self.extra or {}).items() if v is not None})
        return data


__all__ = ["LogContext"]
