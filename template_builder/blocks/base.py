"""
Contrat du registry de blocs + métadonnées catalogue.
Le registry est en lecture seule : l'éditeur ne fait que des lookups.
"""
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from pydantic import BaseModel, Field

from ..core.schemas import BlockCategory, BlockType


class BlockVariant(BaseModel):
    """Preset nommé d'un type de bloc + sa configuration par défaut."""
    id: str
    name: str
    name_ar: str = ""
    description: Optional[str] = None
    description_ar: Optional[str] = None
    preview: Optional[str] = None
    default_config: Dict[str, Any] = Field(default_factory=dict)


class BlockMeta(BaseModel):
    """Entrée catalogue d'un type de bloc."""
    type: BlockType
    name: str
    name_ar: str = ""
    description: str = ""
    description_ar: str = ""
    category: BlockCategory
    icon: Optional[str] = None
    has_data_source: bool = False
    default_variant: str
    variants: List[str] = Field(default_factory=list)

    def display_name(self, lang: str = "en") -> str:
        return self.name_ar if lang == "ar" and self.name_ar else self.name


@runtime_checkable
class Registry(Protocol):
    def get_block_meta(self, block_type: BlockType | str) -> Optional[BlockMeta]: ...
    def get_variant(self, block_type: BlockType | str, variant: str) -> Optional[BlockVariant]: ...
