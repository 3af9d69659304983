"""Variants de la grille d'articles (bloc le plus utilisé)."""
from .base import BlockVariant

ARTICLE_GRID_VARIANTS = [
    BlockVariant(
        id="grid-1",
        name="Standard Grid",
        name_ar="الشبكة القياسية",
        description="Classic 3-column grid with image on top",
        preview="/variants/article-grid/grid-1.png",
        default_config={
            "grid": {
                "columns": {"desktop": 3, "tablet": 2, "mobile": 1},
                "gap": {"desktop": "lg", "tablet": "md", "mobile": "md"},
            },
            "image": {"aspectRatio": "16:9", "position": "top"},
            "display": {
                "showImage": True, "showTitle": True, "showExcerpt": True,
                "showCategory": True, "showDate": True,
            },
            "text": {
                "titleSize": {"desktop": "lg", "tablet": "md", "mobile": "md"},
                "titleLines": 2,
                "excerptLines": 2,
            },
            "card": {"style": "elevated", "shadow": "md", "radius": "lg", "hoverEffect": "lift"},
        },
    ),
    BlockVariant(
        id="grid-2",
        name="Compact Grid",
        name_ar="الشبكة المدمجة",
        description="4-column compact grid without excerpt",
        preview="/variants/article-grid/grid-2.png",
        default_config={
            "grid": {
                "columns": {"desktop": 4, "tablet": 2, "mobile": 1},
                "gap": {"desktop": "md", "tablet": "sm", "mobile": "sm"},
            },
            "image": {"aspectRatio": "4:3", "position": "top"},
            "display": {
                "showImage": True, "showTitle": True, "showExcerpt": False,
                "showCategory": True, "showDate": True,
            },
            "text": {"titleSize": {"desktop": "md", "tablet": "sm", "mobile": "sm"}, "titleLines": 2},
            "card": {"style": "flat", "shadow": "none", "radius": "md", "hoverEffect": "none"},
        },
    ),
    BlockVariant(
        id="grid-3",
        name="Large Cards Grid",
        name_ar="شبكة البطاقات الكبيرة",
        description="2-column grid with large cards and full details",
        preview="/variants/article-grid/grid-3.png",
        default_config={
            "grid": {
                "columns": {"desktop": 2, "tablet": 2, "mobile": 1},
                "gap": {"desktop": "xl", "tablet": "lg", "mobile": "md"},
            },
            "image": {"aspectRatio": "16:9", "position": "top"},
            "display": {
                "showImage": True, "showTitle": True, "showExcerpt": True, "showCategory": True,
                "showAuthor": True, "showAuthorImage": True, "showDate": True, "showReadingTime": True,
            },
            "text": {
                "titleSize": {"desktop": "xl", "tablet": "lg", "mobile": "lg"},
                "titleLines": 2,
                "excerptLines": 3,
            },
            "card": {"style": "elevated", "shadow": "lg", "radius": "xl", "hoverEffect": "lift"},
        },
    ),
    BlockVariant(
        id="grid-4",
        name="Minimal Grid",
        name_ar="الشبكة البسيطة",
        description="Clean minimal grid with subtle styling",
        preview="/variants/article-grid/grid-4.png",
        default_config={
            "grid": {
                "columns": {"desktop": 3, "tablet": 2, "mobile": 1},
                "gap": {"desktop": "xl", "tablet": "lg", "mobile": "md"},
            },
            "image": {"aspectRatio": "3:2", "position": "top"},
            "display": {
                "showImage": True, "showTitle": True, "showExcerpt": False,
                "showCategory": False, "showDate": True,
            },
            "text": {
                "titleSize": {"desktop": "lg", "tablet": "md", "mobile": "md"},
                "titleLines": 2,
                "titleWeight": "medium",
            },
            "card": {"style": "flat", "shadow": "none", "radius": "none", "hoverEffect": "none"},
        },
    ),
    BlockVariant(
        id="grid-5",
        name="Dense Grid",
        name_ar="الشبكة الكثيفة",
        description="5-column dense grid for maximum content",
        preview="/variants/article-grid/grid-5.png",
        default_config={
            "grid": {
                "columns": {"desktop": 5, "tablet": 3, "mobile": 2},
                "gap": {"desktop": "sm", "tablet": "sm", "mobile": "xs"},
            },
            "image": {"aspectRatio": "1:1", "position": "top"},
            "display": {
                "showImage": True, "showTitle": True, "showExcerpt": False,
                "showCategory": False, "showDate": False,
            },
            "text": {"titleSize": {"desktop": "sm", "tablet": "sm", "mobile": "xs"}, "titleLines": 2},
            "card": {"style": "flat", "shadow": "sm", "radius": "md", "hoverEffect": "glow"},
        },
    ),
    BlockVariant(
        id="grid-6",
        name="Featured First",
        name_ar="المميز أولاً",
        description="First article large, rest in grid",
        preview="/variants/article-grid/grid-6.png",
        default_config={
            "grid": {
                "columns": {"desktop": 3, "tablet": 2, "mobile": 1},
                "gap": {"desktop": "lg", "tablet": "md", "mobile": "md"},
            },
            "image": {"aspectRatio": "16:9", "position": "top"},
            "display": {
                "showImage": True, "showTitle": True, "showExcerpt": True,
                "showCategory": True, "showDate": True,
            },
            "text": {
                "titleSize": {"desktop": "lg", "tablet": "md", "mobile": "md"},
                "titleLines": 2,
                "excerptLines": 2,
            },
            "card": {"style": "elevated", "shadow": "md", "radius": "lg", "hoverEffect": "lift"},
            "custom": {
                "layout": "featured-first",
                "featuredSpan": {"desktop": 2, "tablet": 2, "mobile": 1},
                "featuredConfig": {
                    "image": {"aspectRatio": "16:9"},
                    "text": {
                        "titleSize": {"desktop": "2xl", "tablet": "xl", "mobile": "lg"},
                        "excerptLines": 3,
                    },
                    "display": {"showAuthor": True, "showReadingTime": True},
                },
            },
        },
    ),
]
