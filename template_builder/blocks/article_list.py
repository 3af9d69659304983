"""Variants de la liste d'articles."""
from .base import BlockVariant

ARTICLE_LIST_VARIANTS = [
    BlockVariant(
        id="list-1",
        name="Standard List",
        name_ar="القائمة القياسية",
        description="Classic vertical list with thumbnails",
        preview="/variants/article-list/list-1.png",
        default_config={
            "display": {
                "showImage": True, "showTitle": True, "showExcerpt": True,
                "showCategory": True, "showDate": True,
            },
            "image": {"aspectRatio": "16:9", "position": "left"},
            "text": {
                "titleSize": {"desktop": "lg", "tablet": "md", "mobile": "md"},
                "titleLines": 2,
                "excerptLines": 2,
            },
            "card": {
                "style": "flat", "shadow": "none", "radius": "lg", "hoverEffect": "none",
                "padding": {"desktop": "md", "tablet": "sm", "mobile": "sm"},
            },
            "custom": {
                "imageWidth": {"desktop": "200px", "tablet": "150px", "mobile": "100px"},
                "showDivider": True,
                "dividerStyle": "dashed",
            },
        },
    ),
    BlockVariant(
        id="list-2",
        name="Compact List",
        name_ar="القائمة المدمجة",
        description="Compact list with small thumbnails",
        preview="/variants/article-list/list-2.png",
        default_config={
            "display": {
                "showImage": True, "showTitle": True, "showExcerpt": False,
                "showCategory": False, "showDate": True,
            },
            "image": {"aspectRatio": "1:1", "position": "left"},
            "text": {"titleSize": {"desktop": "md", "tablet": "sm", "mobile": "sm"}, "titleLines": 2},
            "card": {
                "style": "flat", "shadow": "none", "radius": "md", "hoverEffect": "none",
                "padding": {"desktop": "sm", "tablet": "sm", "mobile": "xs"},
            },
            "custom": {
                "imageWidth": {"desktop": "80px", "tablet": "70px", "mobile": "60px"},
                "showDivider": True,
                "dividerStyle": "solid",
                "dividerColor": "gray-100",
            },
        },
    ),
    BlockVariant(
        id="list-3",
        name="Numbered List",
        name_ar="القائمة المرقمة",
        description="List with large numbers",
        preview="/variants/article-list/list-3.png",
        default_config={
            "display": {
                "showImage": True, "showTitle": True, "showExcerpt": False,
                "showCategory": True, "showDate": True,
            },
            "image": {"aspectRatio": "16:9", "position": "left"},
            "text": {"titleSize": {"desktop": "md", "tablet": "sm", "mobile": "sm"}, "titleLines": 2},
            "card": {
                "style": "flat", "shadow": "none", "radius": "md", "hoverEffect": "none",
                "padding": {"desktop": "md", "tablet": "sm", "mobile": "sm"},
            },
            "custom": {
                "showNumber": True,
                "numberStyle": "large",
                "numberSize": {"desktop": "3xl", "tablet": "2xl", "mobile": "xl"},
                "numberColor": "primary",
                "numberPosition": "start",
                "imageWidth": {"desktop": "150px", "tablet": "120px", "mobile": "100px"},
                "showDivider": True,
            },
        },
    ),
]
