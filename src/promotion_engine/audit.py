"""Simple in-memory audit log for promotion evaluations."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional


@dataclass
class AuditEntry:
    event: str
    rule: Optional[str]
    amount: float
    details: str
    at: datetime


class AuditLogger:
    def __init__(self) -> None:
        self._entries: List[AuditEntry] = []

    def log(self, event: str, rule: Optional[str], amount: float, details: str) -> None:
        self._entries.append(
            AuditEntry(
                event=event,
                rule=rule,
                amount=amount,
                details=details,
                at=datetime.now(timezone.utc),
            )
        )

    def entries(self) -> List[AuditEntry]:
        return list(self._entries)

    def for_event(self, event: str) -> List[AuditEntry]:
        return [entry for entry in self._entries if entry.event == event]
