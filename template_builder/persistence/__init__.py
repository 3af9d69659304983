"""Persistance — sérialisation, store de session, API admin."""
from .pages_api import HandoffStore, PageContentStore, PagesApiClient, TemplateStore
from .serializer import dumps_template, from_payload, loads_template, to_payload
from .session_store import (
    PAGE_ID_KEY,
    TEMPLATE_KEY,
    MemorySessionStore,
    SessionStore,
    SqlSessionStore,
    hand_off,
    take_over,
)

__all__ = [
    "dumps_template", "loads_template", "to_payload", "from_payload",
    "SessionStore", "MemorySessionStore", "SqlSessionStore",
    "TEMPLATE_KEY", "PAGE_ID_KEY", "hand_off", "take_over",
    "PagesApiClient", "TemplateStore", "PageContentStore", "HandoffStore",
]
