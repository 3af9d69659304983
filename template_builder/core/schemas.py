"""
Schémas Pydantic du template builder.
Structure : Template → Section → Block (3 niveaux, pas plus).

Le JSON stocké utilise des clés camelCase (nameAr, gridArea, sidebarWidth…) ;
les attributs Python restent en snake_case et les deux formes sont acceptées
en entrée.

L'ordre des sections et des blocs est celui des listes. Le champ `order`
d'une section n'est qu'un indice pour les consommateurs externes.
"""
from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class DocumentModel(BaseModel):
    """Base commune : alias camelCase + population par nom."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Types de base ────────────────────────────────────────────────────────────

Breakpoint    = Literal["desktop", "tablet", "mobile"]
SpacingSize   = Literal["none", "xs", "sm", "md", "lg", "xl", "2xl"]
Alignment     = Literal["start", "center", "end"]
ContainerType = Literal["full", "wide", "normal", "narrow", "custom"]

TemplateType = Literal[
    "home", "category", "tag", "author", "search",
    "article", "page", "error", "archive", "custom",
]
LayoutType = Literal["full-width", "sidebar-right", "sidebar-left", "sidebar-both", "centered"]

BlockCategory = Literal[
    "articles", "hero", "breaking", "navigation", "ads",
    "media", "authors", "engagement", "widgets", "layout",
]


class BlockType(str, Enum):
    """Ensemble fermé des types de blocs."""
    # articles
    ARTICLE_GRID     = "article-grid"
    ARTICLE_LIST     = "article-list"
    ARTICLE_SLIDER   = "article-slider"
    ARTICLE_TABS     = "article-tabs"
    ARTICLE_CAROUSEL = "article-carousel"
    ARTICLE_MASONRY  = "article-masonry"
    # hero
    BIG_HERO       = "big-hero"
    FEATURED_STORY = "featured-story"
    SPOTLIGHT      = "spotlight"
    # breaking news
    BREAKING_TICKER = "breaking-ticker"
    BREAKING_BANNER = "breaking-banner"
    # navigation
    CATEGORY_NAV = "category-nav"
    TAG_CLOUD    = "tag-cloud"
    BREADCRUMB   = "breadcrumb"
    # publicité
    AD_UNIT   = "ad-unit"
    AD_BANNER = "ad-banner"
    AD_NATIVE = "ad-native"
    # médias
    HTML_EMBED     = "html-embed"
    VIDEO_PLAYER   = "video-player"
    VIDEO_PLAYLIST = "video-playlist"
    PHOTO_GALLERY  = "photo-gallery"
    PODCAST_PLAYER = "podcast-player"
    LIVE_STREAM    = "live-stream"
    # auteurs
    OPINION_CARDS    = "opinion-cards"
    AUTHOR_SPOTLIGHT = "author-spotlight"
    AUTHOR_LIST      = "author-list"
    # engagement
    NEWSLETTER_FORM  = "newsletter-form"
    SOCIAL_FEED      = "social-feed"
    COMMENTS_SECTION = "comments-section"
    POLL_WIDGET      = "poll-widget"
    # widgets
    WEATHER_WIDGET  = "weather-widget"
    CURRENCY_TICKER = "currency-ticker"
    STOCKS_TICKER   = "stocks-ticker"
    SPORTS_SCORES   = "sports-scores"
    # layout
    SPACER     = "spacer"
    DIVIDER    = "divider"
    HEADING    = "heading"
    TEXT_BLOCK = "text-block"


# ── Block ────────────────────────────────────────────────────────────────────

class GridSpan(DocumentModel):
    start: int = Field(default=1, ge=1)
    span: int = Field(default=12, ge=1, le=12, description="Largeur (1-12) sur une grille de 12")


class GridArea(DocumentModel):
    """Position du bloc dans la grille de sa section (pleine largeur par défaut)."""
    column: GridSpan = Field(default_factory=GridSpan)
    row: Optional[GridSpan] = None


DataSourceMode = Literal[
    "latest", "category", "categories", "tag", "tags", "author", "authors",
    "manual", "trending", "featured", "breaking", "related", "mixed",
]
SortBy = Literal["publishedAt", "updatedAt", "views", "comments", "shares", "manual", "random"]


class DataSource(DocumentModel):
    """Requête d'articles d'un bloc (résolue par le backend, pas par l'éditeur)."""
    mode: DataSourceMode = "latest"
    limit: int = Field(default=6, ge=1)
    offset: Optional[int] = None
    sort_by: SortBy = "publishedAt"
    sort_order: Literal["asc", "desc"] = "desc"
    category_ids: Optional[List[str]] = None
    tag_ids: Optional[List[str]] = None
    author_ids: Optional[List[str]] = None
    article_ids: Optional[List[str]] = None
    exclude_ids: Optional[List[str]] = None
    exclude_from_other: Optional[bool] = None


class Block(DocumentModel):
    """Unité de contenu : type + variant + surcharges de configuration."""
    id: str
    type: BlockType
    variant: str
    name: Optional[str] = None
    name_ar: Optional[str] = None
    grid_area: GridArea = Field(default_factory=GridArea)
    config: Dict[str, Any] = Field(default_factory=dict, description="Surcharges (opaques pour l'éditeur)")
    data_source: Optional[DataSource] = None
    is_locked: Optional[bool] = None


# ── Section ──────────────────────────────────────────────────────────────────

HeaderStyle = Literal["simple", "bordered", "decorated", "gradient", "badge", "underlined", "boxed"]


class SectionHeader(DocumentModel):
    enabled: bool = True
    title: str = ""
    title_ar: str = ""
    subtitle: Optional[str] = None
    subtitle_ar: Optional[str] = None
    style: HeaderStyle = "simple"
    alignment: Alignment = "start"
    icon: Optional[str] = None
    show_more: bool = False
    more_text: Optional[str] = None
    more_text_ar: Optional[str] = None
    more_link: Optional[str] = None
    accent_color: Optional[str] = None


class Gradient(DocumentModel):
    type: Literal["linear", "radial"] = "linear"
    colors: List[str] = Field(default_factory=list)
    direction: Optional[str] = None


class BackgroundImage(DocumentModel):
    url: str
    position: Optional[str] = None
    size: Optional[Literal["cover", "contain", "auto"]] = None
    repeat: Optional[bool] = None
    fixed: Optional[bool] = None


class Overlay(DocumentModel):
    color: str
    opacity: float = Field(ge=0, le=1)


class SectionBackground(DocumentModel):
    type: Literal["none", "color", "gradient", "image", "pattern", "video"] = "none"
    color: Optional[str] = None
    gradient: Optional[Gradient] = None
    image: Optional[BackgroundImage] = None
    overlay: Optional[Overlay] = None


class SectionGrid(DocumentModel):
    columns: Optional[Dict[Breakpoint, int]] = None
    gap: Optional[Dict[Breakpoint, SpacingSize]] = None
    rows: Optional[Union[int, Literal["auto"]]] = None
    template: Optional[str] = None


class SpacingBox(DocumentModel):
    top: SpacingSize = "none"
    bottom: SpacingSize = "none"
    left: Optional[SpacingSize] = None
    right: Optional[SpacingSize] = None


class SectionLayout(DocumentModel):
    type: Literal["full-width", "sidebar-right", "sidebar-left", "two-columns", "three-columns"] = "full-width"
    sidebar_width: Optional[str] = None
    main_width: Optional[str] = None
    columns_ratio: Optional[str] = None


class Section(DocumentModel):
    """Conteneur ordonné de blocs."""
    id: str
    name: str = ""
    name_ar: str = ""
    order: int = 0
    container: ContainerType = "normal"
    custom_width: Optional[str] = None
    header: Optional[SectionHeader] = None
    background: Optional[SectionBackground] = None
    grid: Optional[SectionGrid] = None
    padding: Optional[Dict[Breakpoint, SpacingBox]] = None
    margin: Optional[Dict[Breakpoint, SpacingBox]] = None
    layout: Optional[SectionLayout] = None
    blocks: List[Block] = Field(default_factory=list)


# ── Template ─────────────────────────────────────────────────────────────────

class TemplateLayout(DocumentModel):
    type: LayoutType = "full-width"
    sidebar_width: Optional[str] = None
    max_width: Optional[str] = None


class RegionConfig(DocumentModel):
    enabled: bool = True
    sticky: Optional[bool] = None
    sticky_offset: Optional[int] = None
    class_name: Optional[str] = None


def _default_regions() -> Dict[str, RegionConfig]:
    return {
        "header": RegionConfig(enabled=True),
        "breakingNews": RegionConfig(enabled=True),
        "sidebar": RegionConfig(enabled=False),
        "footer": RegionConfig(enabled=True),
    }


class TemplateSettings(DocumentModel):
    show_breaking_news: bool = True
    show_breadcrumb: bool = True
    show_last_updated: bool = False
    infinite_scroll: bool = False
    load_more_button: bool = True
    sticky_header: bool = True
    sticky_sidebar: bool = True
    back_to_top: bool = True
    reading_progress: bool = False


class Template(DocumentModel):
    """Document racine du builder."""
    id: str
    name: str = ""
    name_ar: str = ""
    description: str = ""
    description_ar: str = ""
    type: TemplateType = "page"
    version: str = "1.0.0"
    layout: TemplateLayout = Field(default_factory=TemplateLayout)
    regions: Dict[str, RegionConfig] = Field(default_factory=_default_regions)
    settings: TemplateSettings = Field(default_factory=TemplateSettings)
    sections: List[Section] = Field(default_factory=list)
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    is_default: bool = False
    is_active: bool = True


# ── État transitoire de l'éditeur (jamais persisté) ─────────────────────────

class SectionRef(DocumentModel):
    kind: Literal["section"] = "section"
    id: str


class BlockRef(DocumentModel):
    kind: Literal["block"] = "block"
    id: str
    section_id: str


# Référence discriminée par `kind`
ElementRef = Annotated[Union[SectionRef, BlockRef], Field(discriminator="kind")]


class DropTarget(DocumentModel):
    section_id: str
    index: int = Field(default=0, ge=0)


class DragItem(DocumentModel):
    """Payload de drag : un type de bloc (palette) ou l'id d'un bloc existant."""
    payload: str
    source_section_id: Optional[str] = None
