"""
Historique undo/redo par snapshots du template.
"""
from collections import deque
from datetime import datetime, timezone
from typing import Deque, List, Optional

from pydantic import BaseModel, Field

from ..core.schemas import Template


class HistoryEntry(BaseModel):
    action: str
    snapshot: Template
    at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class History:
    """
    Pile bornée : on empile l'état *avant* chaque mutation.
    Toute nouvelle mutation efface la branche redo.
    """

    def __init__(self, limit: int = 50):
        self.limit = limit
        self._past: Deque[HistoryEntry] = deque(maxlen=limit)
        self._future: List[HistoryEntry] = []

    def record(self, action: str, before: Template) -> None:
        self._past.append(HistoryEntry(action=action, snapshot=before.model_copy(deep=True)))
        self._future.clear()

    def undo(self, current: Template) -> Optional[Template]:
        if not self._past:
            return None
        entry = self._past.pop()
        self._future.append(HistoryEntry(action=entry.action, snapshot=current.model_copy(deep=True)))
        return entry.snapshot

    def redo(self, current: Template) -> Optional[Template]:
        if not self._future:
            return None
        entry = self._future.pop()
        self._past.append(HistoryEntry(action=entry.action, snapshot=current.model_copy(deep=True)))
        return entry.snapshot

    def clear(self) -> None:
        self._past.clear()
        self._future.clear()

    @property
    def can_undo(self) -> bool:
        return bool(self._past)

    @property
    def can_redo(self) -> bool:
        return bool(self._future)

    def actions(self) -> list[str]:
        return [e.action for e in self._past]
