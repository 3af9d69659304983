"""
Store de transfert de session — clé/valeur chaîne.

L'écran d'édition d'une page dépose le template et l'id de page, puis le
builder les reprend au démarrage (consommation unique).
"""
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional, Protocol, Tuple

import sqlalchemy as sa
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, sessionmaker

from ..config import DB_PATH
from ..core.schemas import Template
from ..errors import BridgeError
from .serializer import dumps_template, loads_template

log = logging.getLogger(__name__)

TEMPLATE_KEY = "builder_template"
PAGE_ID_KEY  = "builder_page_id"


class SessionStore(Protocol):
    def save(self, key: str, value: str) -> None: ...
    def load(self, key: str) -> Optional[str]: ...
    def delete(self, key: str) -> None: ...


class MemorySessionStore:
    """Store en mémoire (tests, session unique)."""

    def __init__(self):
        self._data: Dict[str, str] = {}

    def save(self, key: str, value: str) -> None:
        self._data[key] = value

    def load(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


# ── SQLite ───────────────────────────────────────────────────────────────────

class Base(DeclarativeBase):
    pass


class SessionEntryDB(Base):
    __tablename__ = "builder_kv"

    key:        Mapped[str]      = mapped_column(sa.String(128), primary_key=True)
    value:      Mapped[str]      = mapped_column(sa.Text)
    updated_at: Mapped[datetime] = mapped_column(sa.DateTime, default=lambda: datetime.now(timezone.utc))


class SqlSessionStore:
    """
    Store persistant SQLite (SQLAlchemy).

    Args:
        url: URL SQLAlchemy (défaut : fichier BUILDER_DB_PATH)
    """

    def __init__(self, url: Optional[str] = None):
        if url is None:
            Path(DB_PATH).parent.mkdir(parents=True, exist_ok=True)
        self.engine = create_engine(url or f"sqlite:///{DB_PATH}", connect_args={"check_same_thread": False})
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        Base.metadata.create_all(bind=self.engine)

    def save(self, key: str, value: str) -> None:
        try:
            with self.SessionLocal() as db:
                row = db.get(SessionEntryDB, key)
                if row is None:
                    db.add(SessionEntryDB(key=key, value=value))
                else:
                    row.value = value
                    row.updated_at = datetime.now(timezone.utc)
                db.commit()
        except SQLAlchemyError as e:
            log.error("SessionStore.save(%s) : %s", key, e)
            raise BridgeError(f"Écriture impossible ({key})") from e

    def load(self, key: str) -> Optional[str]:
        try:
            with self.SessionLocal() as db:
                row = db.get(SessionEntryDB, key)
                return row.value if row else None
        except SQLAlchemyError as e:
            log.error("SessionStore.load(%s) : %s", key, e)
            raise BridgeError(f"Lecture impossible ({key})") from e

    def delete(self, key: str) -> None:
        try:
            with self.SessionLocal() as db:
                row = db.get(SessionEntryDB, key)
                if row is not None:
                    db.delete(row)
                    db.commit()
        except SQLAlchemyError as e:
            log.error("SessionStore.delete(%s) : %s", key, e)
            raise BridgeError(f"Suppression impossible ({key})") from e


# ── Transfert ────────────────────────────────────────────────────────────────

def hand_off(store: SessionStore, template: Template, page_id: Optional[str] = None) -> None:
    """Dépose un template (et la page cible) pour la prochaine ouverture du builder."""
    store.save(TEMPLATE_KEY, dumps_template(template))
    if page_id:
        store.save(PAGE_ID_KEY, page_id)
    else:
        store.delete(PAGE_ID_KEY)
    log.info("Template %s déposé pour le builder (page=%s)", template.id, page_id or "—")


def take_over(store: SessionStore, template_id: Optional[str] = None) -> Tuple[Optional[Template], Optional[str]]:
    """
    Reprend le template déposé.

    Le dépôt (template et page) est consommé s'il est accepté ; une charge
    illisible est aussi effacée. Si `template_id` est donné, un dépôt d'un autre
    template est ignoré et laissé en place.

    Returns:
        (template ou None, page_id ou None)
    """
    raw = store.load(TEMPLATE_KEY)
    if raw is None:
        return None, None
    template = loads_template(raw)
    if template is None:
        store.delete(TEMPLATE_KEY)
        store.delete(PAGE_ID_KEY)
        return None, None
    if template_id and template.id != template_id:
        log.info("Dépôt %s ignoré (attendu : %s)", template.id, template_id)
        return None, None
    page_id = store.load(PAGE_ID_KEY)
    store.delete(TEMPLATE_KEY)
    store.delete(PAGE_ID_KEY)
    return template, page_id
