"""
Blocs — contrat du registry, catalogue et presets de variants.
"""
from .base import BlockMeta, BlockVariant, Registry
from .catalog import BLOCK_CATALOG, BLOCK_CATEGORIES, VARIANT_PRESETS
from .registry import BlockRegistry, default_registry
from .article_grid import ARTICLE_GRID_VARIANTS
from .article_list import ARTICLE_LIST_VARIANTS
from .article_slider import ARTICLE_SLIDER_VARIANTS
from .big_hero import BIG_HERO_VARIANTS

__all__ = [
    # Contrat
    "BlockMeta", "BlockVariant", "Registry",
    # Registry
    "BlockRegistry", "default_registry",
    # Catalogue
    "BLOCK_CATALOG", "BLOCK_CATEGORIES", "VARIANT_PRESETS",
    # Presets
    "ARTICLE_GRID_VARIANTS", "ARTICLE_LIST_VARIANTS",
    "ARTICLE_SLIDER_VARIANTS", "BIG_HERO_VARIANTS",
]
