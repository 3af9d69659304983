"""
Résolution de configuration : défaut du variant ⊕ surcharges du bloc.

C'est le seul endroit où la priorité des configurations est décidée ; les
renderers ne voient jamais les surcharges brutes.
"""
import copy
import logging
from typing import Any, Mapping, Optional

from .schemas import Block, BlockType, Breakpoint

log = logging.getLogger(__name__)


def resolve(
    block_type: BlockType | str,
    variant: str,
    overrides: Optional[Mapping[str, Any]] = None,
    registry=None,
) -> dict:
    """
    Calcule la configuration effective d'un bloc.

    Fusion superficielle clé par clé : la surcharge gagne toujours, les clés
    présentes d'un seul côté sont conservées. Sans entrée registry pour
    (type, variant), retourne une copie des surcharges seules ({} si vide) :
    l'appelant affiche alors un placeholder générique.
    """
    if registry is None:
        from ..blocks.registry import default_registry
        registry = default_registry()

    overrides = overrides or {}
    entry = registry.get_variant(block_type, variant)
    if entry is None:
        log.debug("Variant inconnu %s/%s — surcharges seules", _type_value(block_type), variant)
        return copy.deepcopy(dict(overrides))

    resolved = copy.deepcopy(dict(entry.default_config))
    resolved.update(copy.deepcopy(dict(overrides)))
    return resolved


def resolve_block(block: Block, registry=None) -> dict:
    """Raccourci : configuration effective d'un bloc du document."""
    return resolve(block.type, block.variant, block.config, registry=registry)


def deep_merge(base: Mapping[str, Any], patch: Mapping[str, Any]) -> dict:
    """
    Fusion récursive utilisée pour l'édition des surcharges d'un bloc.
    Dicts fusionnés, listes et scalaires remplacés, None ignoré.
    """
    result = copy.deepcopy(dict(base))
    for key, value in patch.items():
        if value is None:
            continue
        current = result.get(key)
        if isinstance(value, Mapping) and isinstance(current, Mapping):
            result[key] = deep_merge(current, value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def responsive_value(value: Any, breakpoint: Breakpoint = "desktop") -> Any:
    """{"desktop": …, "tablet": …, "mobile": …} → valeur du breakpoint (repli desktop)."""
    if not isinstance(value, Mapping) or "desktop" not in value:
        return value
    if breakpoint != "desktop" and value.get(breakpoint) is not None:
        return value[breakpoint]
    return value["desktop"]


def _type_value(block_type: BlockType | str) -> str:
    return block_type.value if isinstance(block_type, BlockType) else str(block_type)
