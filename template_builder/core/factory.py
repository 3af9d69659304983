"""
Constructeurs du modèle de document.

Seul point de création des sections et des blocs : chaque appel génère un
id neuf et ne remplit que les champs structurels obligatoires, les champs
cosmétiques restent vides pour que les défauts du variant s'appliquent.
"""
import uuid
from datetime import datetime, timezone
from typing import Optional

from .schemas import Block, BlockType, DataSource, GridArea, Section, Template, TemplateType


def generate_id(prefix: str = "") -> str:
    """Id unique, jamais réutilisé : `<prefix>_<hex>`."""
    suffix = uuid.uuid4().hex[:16]
    return f"{prefix}_{suffix}" if prefix else suffix


def new_section(name: str = "New Section", name_ar: str = "قسم جديد") -> Section:
    return Section(id=generate_id("section"), name=name, name_ar=name_ar, blocks=[])


def new_block_from_type(
    block_type: BlockType | str,
    variant: str,
    with_data_source: bool = False,
) -> Block:
    """
    Crée un bloc pleine largeur avec une configuration de surcharge vide.

    Args:
        block_type: Type de bloc (enum ou valeur chaîne)
        variant: Variant retenu (en général le variant par défaut du registry)
        with_data_source: Ajoute la requête d'articles par défaut
    """
    return Block(
        id=generate_id("block"),
        type=BlockType(block_type),
        variant=variant,
        grid_area=GridArea(),
        config={},
        data_source=DataSource() if with_data_source else None,
    )


def blank_template(
    name: str = "",
    name_ar: str = "",
    template_type: TemplateType = "page",
    with_main_section: bool = True,
    template_id: Optional[str] = None,
) -> Template:
    """Template vierge — repli quand aucun document n'a pu être chargé."""
    now = datetime.now(timezone.utc).isoformat()
    sections = [new_section("Main Content", "المحتوى الرئيسي")] if with_main_section else []
    return Template(
        id=template_id or generate_id("template"),
        name=name,
        name_ar=name_ar,
        type=template_type,
        sections=sections,
        created_at=now,
        updated_at=now,
    )
