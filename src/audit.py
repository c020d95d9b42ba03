"""Simple in-memory audit log for purchase events."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional


@dataclass
class AuditEntry:
    event: str
    customer_id: Optional[int]
    product_code: Optional[str]
    details: str
    at: datetime


class AuditLogger:
    def __init__(self) -> None:
        self._entries: List[AuditEntry] = []

    def log(
        self,
        event: str,
        customer_id: Optional[int],
        product_code: Optional[str],
        details: str,
    ) -> None:
        self._entries.append(
            AuditEntry(
                event=event,
                customer_id=customer_id,
                product_code=product_code,
                details=details,
                at=datetime.now(timezone.utc),
            )
        )

    def entries(self) -> List[AuditEntry]:
        return list(self._entries)

    def events(self) -> List[str]:
        return [entry.event for entry in self._entries]
