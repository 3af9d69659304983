"""
Registry des blocs — table (type, variant) → métadonnées + config par défaut.
Lecture seule ; les entrées manquantes sont tolérées (retour None).
"""
from functools import lru_cache
from typing import Iterable, Mapping, Optional

from ..core.schemas import BlockCategory, BlockType
from ..errors import UnknownBlockType
from .base import BlockMeta, BlockVariant
from .catalog import BLOCK_CATALOG, BLOCK_CATEGORIES, VARIANT_PRESETS


def _coerce(block_type: BlockType | str) -> Optional[BlockType]:
    if isinstance(block_type, BlockType):
        return block_type
    try:
        return BlockType(block_type)
    except ValueError:
        return None


class BlockRegistry:
    """
    Registry en mémoire.

    Usage:
        >>> registry = BlockRegistry()
        >>> registry.get_default_variant("article-grid").id
        'grid-1'
    """

    def __init__(
        self,
        catalog: Iterable[BlockMeta] = BLOCK_CATALOG,
        presets: Mapping[BlockType, Iterable[BlockVariant]] = VARIANT_PRESETS,
    ):
        self._meta = {m.type: m for m in catalog}
        self._variants = {t: {v.id: v for v in variants} for t, variants in presets.items()}

    def get_block_meta(self, block_type: BlockType | str) -> Optional[BlockMeta]:
        bt = _coerce(block_type)
        return self._meta.get(bt) if bt else None

    def require_block_meta(self, block_type: BlockType | str) -> BlockMeta:
        meta = self.get_block_meta(block_type)
        if meta is None:
            raise UnknownBlockType(f"Bloc inconnu : {block_type!r}. Registry : {[t.value for t in self._meta]}")
        return meta

    def get_block_variants(self, block_type: BlockType | str) -> list[BlockVariant]:
        bt = _coerce(block_type)
        return list(self._variants.get(bt, {}).values()) if bt else []

    def get_variant(self, block_type: BlockType | str, variant: str) -> Optional[BlockVariant]:
        bt = _coerce(block_type)
        if bt is None:
            return None
        return self._variants.get(bt, {}).get(variant)

    def get_default_variant(self, block_type: BlockType | str) -> Optional[BlockVariant]:
        meta = self.get_block_meta(block_type)
        if meta is None:
            return None
        return self.get_variant(meta.type, meta.default_variant)

    def default_variant_name(self, block_type: BlockType | str) -> Optional[str]:
        meta = self.get_block_meta(block_type)
        return meta.default_variant if meta else None

    def has_data_source(self, block_type: BlockType | str) -> bool:
        meta = self.get_block_meta(block_type)
        return bool(meta and meta.has_data_source)

    def blocks_by_category(self, category: BlockCategory) -> list[BlockMeta]:
        return [m for m in self._meta.values() if m.category == category]

    def all_blocks(self) -> list[BlockMeta]:
        return list(self._meta.values())

    @staticmethod
    def categories() -> list[dict]:
        return [dict(c) for c in BLOCK_CATEGORIES]


@lru_cache(maxsize=1)
def default_registry() -> BlockRegistry:
    """Registry partagé construit sur le catalogue intégré."""
    return BlockRegistry()
