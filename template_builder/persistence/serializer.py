"""
Sérialisation JSON du template (format camelCase stocké par l'API admin).

Le chargement ne lève jamais : une charge illisible donne « aucun template ».
"""
import json
import logging
from typing import Optional

from pydantic import ValidationError

from ..core.schemas import Template

log = logging.getLogger(__name__)


def to_payload(template: Template) -> dict:
    """Template → dict JSON (clés camelCase, champs absents omis)."""
    return template.model_dump(mode="json", by_alias=True, exclude_none=True)


def dumps_template(template: Template) -> str:
    return json.dumps(to_payload(template), ensure_ascii=False)


def from_payload(data) -> Optional[Template]:
    """dict → Template, ou None si la structure n'est pas un template."""
    if not isinstance(data, dict) or not isinstance(data.get("sections"), list):
        log.warning("Charge sans liste 'sections' — ignorée")
        return None
    try:
        return Template.model_validate(data)
    except ValidationError as e:
        log.warning("Template invalide : %d erreur(s) — %s", e.error_count(), e.errors()[0]["msg"])
        return None


def loads_template(raw: Optional[str]) -> Optional[Template]:
    """
    Désérialise un template stocké.

    Args:
        raw: Chaîne JSON (ou None / vide)

    Returns:
        Template, ou None pour une chaîne vide, du JSON invalide ou une
        structure non conforme

    Usage:
        >>> loads_template("{not json") is None
        True
    """
    if not raw:
        return None
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as e:
        log.warning("JSON de template illisible : %s", e)
        return None
    return from_payload(data)
