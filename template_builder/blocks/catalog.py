"""
Catalogue des types de blocs (métadonnées d'affichage + variants disponibles).
Les types avec presets détaillés tirent leur liste de variants des modules dédiés.
"""
from ..core.schemas import BlockType
from .article_grid import ARTICLE_GRID_VARIANTS
from .article_list import ARTICLE_LIST_VARIANTS
from .article_slider import ARTICLE_SLIDER_VARIANTS
from .base import BlockMeta
from .big_hero import BIG_HERO_VARIANTS

T = BlockType


def _meta(block_type, name, name_ar, category, icon, default_variant, variants, data=False, description=""):
    return BlockMeta(
        type=block_type, name=name, name_ar=name_ar, category=category, icon=icon,
        default_variant=default_variant, variants=list(variants),
        has_data_source=data, description=description,
    )


def _ids(variants):
    return [v.id for v in variants]


BLOCK_CATALOG: list[BlockMeta] = [
    # ── Articles ─────────────────────────────────────────────────────────────
    _meta(T.ARTICLE_GRID,     "Article Grid",     "شبكة المقالات",    "articles", "LayoutGrid",        "grid-1",     _ids(ARTICLE_GRID_VARIANTS), True,
          "Display articles in a responsive grid layout"),
    _meta(T.ARTICLE_LIST,     "Article List",     "قائمة المقالات",   "articles", "List",              "list-1",     _ids(ARTICLE_LIST_VARIANTS), True,
          "Display articles in a vertical list"),
    _meta(T.ARTICLE_SLIDER,   "Article Slider",   "سلايدر المقالات",  "articles", "GalleryHorizontal", "slider-1",   _ids(ARTICLE_SLIDER_VARIANTS), True,
          "Carousel slider for articles"),
    _meta(T.ARTICLE_TABS,     "Article Tabs",     "تبويبات المقالات", "articles", "PanelTop",          "tabs-1",     ["tabs-1", "tabs-2", "tabs-3"], True),
    _meta(T.ARTICLE_CAROUSEL, "Article Carousel", "دوّار المقالات",   "articles", "CircleDot",         "carousel-1", ["carousel-1", "carousel-2", "carousel-3"], True),
    _meta(T.ARTICLE_MASONRY,  "Article Masonry",  "فسيفساء المقالات", "articles", "LayoutDashboard",   "masonry-1",  ["masonry-1", "masonry-2"], True),
    # ── Hero ─────────────────────────────────────────────────────────────────
    _meta(T.BIG_HERO,       "Big Hero",       "البطل الكبير",  "hero", "Maximize",  "hero-classic", _ids(BIG_HERO_VARIANTS), True,
          "Large hero section with featured articles"),
    _meta(T.FEATURED_STORY, "Featured Story", "القصة المميزة", "hero", "Star",      "story-1",      ["story-1", "story-2", "story-3"], True),
    _meta(T.SPOTLIGHT,      "Spotlight",      "تحت الضوء",     "hero", "Lightbulb", "spotlight-1",  ["spotlight-1", "spotlight-2"], True),
    # ── Breaking news ────────────────────────────────────────────────────────
    _meta(T.BREAKING_TICKER, "Breaking News Ticker", "شريط الأخبار العاجلة", "breaking", "Zap",           "ticker-1", ["ticker-1", "ticker-2", "ticker-3"], True),
    _meta(T.BREAKING_BANNER, "Breaking News Banner", "بانر الأخبار العاجلة", "breaking", "AlertTriangle", "banner-1", ["banner-1", "banner-2"], True),
    # ── Navigation ───────────────────────────────────────────────────────────
    _meta(T.CATEGORY_NAV, "Category Navigation", "تصفح الأقسام", "navigation", "FolderTree",   "nav-1",        ["nav-1", "nav-2", "nav-3"]),
    _meta(T.TAG_CLOUD,    "Tag Cloud",           "سحابة الوسوم", "navigation", "Tags",         "cloud-1",      ["cloud-1", "cloud-2"]),
    _meta(T.BREADCRUMB,   "Breadcrumb",          "مسار التنقل",  "navigation", "ChevronRight", "breadcrumb-1", ["breadcrumb-1", "breadcrumb-2"]),
    # ── Publicité ────────────────────────────────────────────────────────────
    _meta(T.AD_UNIT,   "Ad Unit",   "وحدة إعلانية", "ads", "Megaphone", "ad-1",     ["ad-1", "ad-2", "ad-3"]),
    _meta(T.AD_BANNER, "Ad Banner", "بانر إعلاني",  "ads", "Image",     "banner-1", ["banner-1", "banner-2"]),
    _meta(T.AD_NATIVE, "Native Ad", "إعلان أصلي",   "ads", "Newspaper", "native-1", ["native-1", "native-2"]),
    # ── Médias ───────────────────────────────────────────────────────────────
    _meta(T.HTML_EMBED,     "HTML Embed",     "كود HTML",         "media", "Code",     "embed-1",    ["embed-1"]),
    _meta(T.VIDEO_PLAYER,   "Video Player",   "مشغل الفيديو",     "media", "Play",     "player-1",   ["player-1", "player-2"]),
    _meta(T.VIDEO_PLAYLIST, "Video Playlist", "قائمة الفيديوهات", "media", "ListVideo", "playlist-1", ["playlist-1", "playlist-2"], True),
    _meta(T.PHOTO_GALLERY,  "Photo Gallery",  "معرض الصور",       "media", "Images",   "gallery-1",  ["gallery-1", "gallery-2", "gallery-3"]),
    _meta(T.PODCAST_PLAYER, "Podcast Player", "مشغل البودكاست",   "media", "Mic",      "podcast-1",  ["podcast-1", "podcast-2"]),
    _meta(T.LIVE_STREAM,    "Live Stream",    "البث المباشر",     "media", "Radio",    "live-1",     ["live-1", "live-2"]),
    # ── Auteurs ──────────────────────────────────────────────────────────────
    _meta(T.OPINION_CARDS,    "Opinion Cards",    "بطاقات الرأي",  "authors", "MessageSquare", "opinion-1",   ["opinion-1", "opinion-2", "opinion-3"], True),
    _meta(T.AUTHOR_SPOTLIGHT, "Author Spotlight", "كاتب مميز",     "authors", "UserCheck",     "spotlight-1", ["spotlight-1", "spotlight-2"], True),
    _meta(T.AUTHOR_LIST,      "Author List",      "قائمة الكتّاب", "authors", "Users",         "authors-1",   ["authors-1", "authors-2"]),
    # ── Engagement ───────────────────────────────────────────────────────────
    _meta(T.NEWSLETTER_FORM,  "Newsletter Form",  "نموذج النشرة البريدية", "engagement", "Mail",          "newsletter-1", ["newsletter-1", "newsletter-2", "newsletter-3"]),
    _meta(T.SOCIAL_FEED,      "Social Feed",      "خلاصة التواصل",         "engagement", "Share2",        "social-1",     ["social-1", "social-2"]),
    _meta(T.COMMENTS_SECTION, "Comments Section", "قسم التعليقات",         "engagement", "MessageCircle", "comments-1",   ["comments-1", "comments-2"]),
    _meta(T.POLL_WIDGET,      "Poll Widget",      "استطلاع رأي",           "engagement", "BarChart",      "poll-1",       ["poll-1", "poll-2"]),
    # ── Widgets ──────────────────────────────────────────────────────────────
    _meta(T.WEATHER_WIDGET,  "Weather Widget",  "ودجة الطقس",      "widgets", "Cloud",      "weather-1",  ["weather-1", "weather-2"]),
    _meta(T.CURRENCY_TICKER, "Currency Ticker", "شريط العملات",    "widgets", "DollarSign", "currency-1", ["currency-1", "currency-2"]),
    _meta(T.STOCKS_TICKER,   "Stocks Ticker",   "شريط الأسهم",     "widgets", "TrendingUp", "stocks-1",   ["stocks-1", "stocks-2"]),
    _meta(T.SPORTS_SCORES,   "Sports Scores",   "نتائج المباريات", "widgets", "Trophy",     "sports-1",   ["sports-1", "sports-2"]),
    # ── Layout ───────────────────────────────────────────────────────────────
    _meta(T.SPACER,     "Spacer",     "مسافة فارغة", "layout", "MoveVertical", "spacer-1",  ["spacer-1"]),
    _meta(T.DIVIDER,    "Divider",    "فاصل",        "layout", "Minus",        "divider-1", ["divider-1", "divider-2", "divider-3"]),
    _meta(T.HEADING,    "Heading",    "عنوان",       "layout", "Type",         "heading-1", ["heading-1", "heading-2", "heading-3"]),
    _meta(T.TEXT_BLOCK, "Text Block", "كتلة نصية",   "layout", "AlignLeft",    "text-1",    ["text-1"]),
]

VARIANT_PRESETS = {
    T.ARTICLE_GRID:   ARTICLE_GRID_VARIANTS,
    T.ARTICLE_LIST:   ARTICLE_LIST_VARIANTS,
    T.ARTICLE_SLIDER: ARTICLE_SLIDER_VARIANTS,
    T.BIG_HERO:       BIG_HERO_VARIANTS,
}

BLOCK_CATEGORIES = [
    {"id": "articles",   "name": "Articles",      "nameAr": "المقالات"},
    {"id": "hero",       "name": "Hero Sections", "nameAr": "الأقسام الرئيسية"},
    {"id": "breaking",   "name": "Breaking News", "nameAr": "الأخبار العاجلة"},
    {"id": "navigation", "name": "Navigation",    "nameAr": "التنقل"},
    {"id": "ads",        "name": "Advertising",   "nameAr": "الإعلانات"},
    {"id": "media",      "name": "Media",         "nameAr": "الوسائط"},
    {"id": "authors",    "name": "Authors",       "nameAr": "الكتّاب"},
    {"id": "engagement", "name": "Engagement",    "nameAr": "التفاعل"},
    {"id": "widgets",    "name": "Widgets",       "nameAr": "الودجات"},
    {"id": "layout",     "name": "Layout",        "nameAr": "التخطيط"},
]
