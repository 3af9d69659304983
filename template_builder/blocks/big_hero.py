"""Variants du grand hero (une des premières sections d'une home)."""
from .base import BlockVariant

BIG_HERO_VARIANTS = [
    BlockVariant(
        id="hero-classic",
        name="Classic Hero",
        name_ar="البطل الكلاسيكي",
        description="Classic 60/40 split with main article and sidebar",
        preview="/variants/big-hero/hero-classic.png",
        default_config={
            "display": {
                "showImage": True, "showTitle": True, "showExcerpt": True,
                "showCategory": True, "showAuthor": True, "showDate": True,
            },
            "image": {
                "aspectRatio": "16:9",
                "position": "top",
                "overlay": {"type": "gradient", "direction": "to-top", "opacity": 0.5},
            },
            "text": {
                "titleSize": {"desktop": "2xl", "tablet": "xl", "mobile": "lg"},
                "titleLines": 3,
                "excerptLines": 2,
            },
            "card": {"style": "elevated", "shadow": "lg", "radius": "xl", "hoverEffect": "lift"},
            "custom": {
                "layout": "classic",
                "mainWidth": "60%",
                "sidebarWidth": "40%",
                "sidebarArticles": 4,
            },
        },
    ),
    BlockVariant(
        id="hero-newspaper",
        name="Newspaper Hero",
        name_ar="بطل الجريدة",
        description="Traditional newspaper style with 3 columns",
        preview="/variants/big-hero/hero-newspaper.png",
        default_config={
            "display": {
                "showImage": True, "showTitle": True, "showExcerpt": True,
                "showCategory": True, "showDate": True,
            },
            "image": {"aspectRatio": "4:3", "position": "top"},
            "text": {
                "titleSize": {"desktop": "xl", "tablet": "lg", "mobile": "md"},
                "titleLines": 3,
                "excerptLines": 2,
            },
            "card": {"style": "flat", "shadow": "none", "radius": "none", "hoverEffect": "none"},
            "custom": {
                "layout": "newspaper",
                "columns": 3,
                "columnRatio": "3-6-3",
                "mainColumn": "center",
                "showColumnDividers": True,
            },
        },
    ),
    BlockVariant(
        id="hero-magazine",
        name="Magazine Hero",
        name_ar="بطل المجلة",
        description="Full-width main with bottom grid",
        preview="/variants/big-hero/hero-magazine.png",
        default_config={
            "display": {
                "showImage": True, "showTitle": True, "showExcerpt": True,
                "showCategory": True, "showAuthor": True, "showDate": True,
            },
            "image": {
                "aspectRatio": "21:9",
                "position": "background",
                "overlay": {"type": "gradient", "direction": "to-top", "opacity": 0.7},
                "hover": {"scale": 1.02},
            },
            "text": {
                "titleSize": {"desktop": "3xl", "tablet": "2xl", "mobile": "xl"},
                "titleLines": 2,
                "excerptLines": 2,
                "alignment": "start",
            },
            "card": {"style": "flat", "shadow": "none", "radius": "none", "hoverEffect": "none"},
            "custom": {
                "layout": "magazine",
                "mainHeight": {"desktop": "70vh", "tablet": "50vh", "mobile": "40vh"},
                "minHeight": "400px",
                "bottomGrid": {
                    "enabled": True,
                    "columns": {"desktop": 4, "tablet": 2, "mobile": 1},
                    "articles": 4,
                    "gap": "md",
                },
                "textPosition": "bottom-start",
            },
        },
    ),
    BlockVariant(
        id="hero-immersive",
        name="Immersive Hero",
        name_ar="البطل الغامر",
        description="Full-screen immersive hero",
        preview="/variants/big-hero/hero-immersive.png",
        default_config={
            "display": {
                "showImage": True, "showTitle": True, "showExcerpt": True, "showCategory": True,
                "showAuthor": True, "showAuthorImage": True, "showDate": True, "showReadingTime": True,
            },
            "image": {
                "aspectRatio": "auto",
                "position": "background",
                "overlay": {"type": "gradient", "direction": "to-top", "opacity": 0.8},
            },
            "text": {
                "titleSize": {"desktop": "4xl", "tablet": "3xl", "mobile": "2xl"},
                "titleLines": 3,
                "excerptLines": 3,
                "alignment": "center",
            },
            "card": {"style": "flat", "shadow": "none", "radius": "none", "hoverEffect": "none"},
            "custom": {
                "layout": "immersive",
                "fullScreen": True,
                "minHeight": "100vh",
                "textPosition": "center",
                "parallax": True,
            },
        },
    ),
]
