"""
Client de l'API admin (pages / articles) + stores de template.

Le template d'une page est stocké sous forme de chaîne JSON dans le champ
`content` de l'entité.
"""
import logging
from typing import Optional, Protocol

import requests

from ..config import API_TIMEOUT, API_URL
from ..core.schemas import Template
from ..errors import BridgeError
from .serializer import dumps_template, loads_template
from .session_store import SessionStore, hand_off, take_over

log = logging.getLogger(__name__)

_ENTITIES = ("pages", "articles")


class PagesApiClient:
    """
    Args:
        base_url: Racine de l'API (défaut NEWSCORE_API_URL)
        token: Jeton Bearer optionnel
        entity: "pages" ou "articles"
        session: requests.Session injectable (tests)
    """

    def __init__(
        self,
        base_url: str = API_URL,
        token: Optional[str] = None,
        entity: str = "pages",
        timeout: float = API_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        if entity not in _ENTITIES:
            raise ValueError(f"Entité inconnue : {entity!r}. Attendu : {list(_ENTITIES)}")
        self.base_url = base_url.rstrip("/")
        self.entity = entity
        self.timeout = timeout
        self.http = session or requests.Session()
        self.http.headers["Content-Type"] = "application/json"
        if token:
            self.http.headers["Authorization"] = f"Bearer {token}"

    def _url(self, entity_id: str) -> str:
        return f"{self.base_url}/{self.entity}/{entity_id}"

    def _request(self, method: str, entity_id: str, **kwargs) -> dict:
        url = self._url(entity_id)
        try:
            resp = self.http.request(method, url, timeout=self.timeout, **kwargs)
            resp.raise_for_status()
            body = resp.json() if resp.content else {}
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            message = _error_message(e.response) or str(e)
            log.error("%s %s → %s %s", method, url, status, message)
            raise BridgeError(message, status_code=status) from e
        except (requests.RequestException, ValueError) as e:
            log.error("%s %s : %s", method, url, e)
            raise BridgeError(str(e)) from e
        # Réponses enveloppées {"data": {...}}
        if isinstance(body, dict) and isinstance(body.get("data"), dict):
            return body["data"]
        return body if isinstance(body, dict) else {}

    def get_page(self, entity_id: str) -> dict:
        return self._request("GET", entity_id)

    def load_template(self, entity_id: str) -> Optional[Template]:
        """Template stocké dans `content`, ou None si vide / illisible."""
        page = self.get_page(entity_id)
        return loads_template(page.get("content"))

    def update_content(self, entity_id: str, template: Template) -> dict:
        """PATCH {content: <json>} — écrase la version précédente."""
        result = self._request("PATCH", entity_id, json={"content": dumps_template(template)})
        log.info("Template %s sauvegardé dans %s/%s", template.id, self.entity, entity_id)
        return result


def _error_message(resp) -> Optional[str]:
    if resp is None:
        return None
    try:
        body = resp.json()
    except ValueError:
        return None
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict):
        return error.get("message")
    return body.get("message") if isinstance(body, dict) else None


# ── Stores de template ───────────────────────────────────────────────────────

class TemplateStore(Protocol):
    def load(self) -> Optional[Template]: ...
    def save(self, template: Template) -> None: ...


class PageContentStore:
    """Template lié à une page (ou un article) de l'API admin."""

    def __init__(self, client: PagesApiClient, entity_id: str):
        self.client = client
        self.entity_id = entity_id

    def load(self) -> Optional[Template]:
        return self.client.load_template(self.entity_id)

    def save(self, template: Template) -> None:
        self.client.update_content(self.entity_id, template)


class HandoffStore:
    """Template transmis via le store de session (hors page)."""

    def __init__(self, store: SessionStore, template_id: Optional[str] = None):
        self.store = store
        self.template_id = template_id
        self.page_id: Optional[str] = None

    def load(self) -> Optional[Template]:
        template, self.page_id = take_over(self.store, self.template_id)
        return template

    def save(self, template: Template) -> None:
        hand_off(self.store, template, self.page_id)
