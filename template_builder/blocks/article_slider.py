"""Variants du slider d'articles."""
from .base import BlockVariant

ARTICLE_SLIDER_VARIANTS = [
    BlockVariant(
        id="slider-1",
        name="Full Width Slider",
        name_ar="سلايدر بعرض كامل",
        description="Full-width image slider with overlay text",
        preview="/variants/article-slider/slider-1.png",
        default_config={
            "display": {
                "showImage": True, "showTitle": True, "showExcerpt": True,
                "showCategory": True, "showDate": True,
            },
            "image": {
                "aspectRatio": "21:9",
                "position": "background",
                "overlay": {"type": "gradient", "direction": "to-top", "opacity": 0.7},
            },
            "text": {
                "titleSize": {"desktop": "3xl", "tablet": "2xl", "mobile": "xl"},
                "titleLines": 2,
                "excerptLines": 2,
                "alignment": "start",
            },
            "card": {"style": "flat", "shadow": "none", "radius": "none", "hoverEffect": "none"},
            "custom": {
                "height": {"desktop": "500px", "tablet": "400px", "mobile": "300px"},
                "autoplay": True,
                "autoplayDelay": 5000,
                "loop": True,
                "showArrows": True,
                "showDots": True,
                "dotsPosition": "bottom-center",
                "transition": "slide",
                "transitionDuration": 500,
                "pauseOnHover": True,
                "textPosition": "bottom-start",
            },
        },
    ),
    BlockVariant(
        id="slider-2",
        name="Fade Slider",
        name_ar="سلايدر التلاشي",
        description="Smooth fade transition slider",
        preview="/variants/article-slider/slider-2.png",
        default_config={
            "display": {
                "showImage": True, "showTitle": True, "showExcerpt": True,
                "showCategory": True, "showAuthor": True, "showDate": True,
            },
            "image": {
                "aspectRatio": "16:9",
                "position": "background",
                "overlay": {"type": "gradient", "direction": "to-top", "opacity": 0.8},
            },
            "text": {
                "titleSize": {"desktop": "2xl", "tablet": "xl", "mobile": "lg"},
                "titleLines": 2,
                "excerptLines": 2,
                "alignment": "center",
            },
            "card": {"style": "flat", "shadow": "none", "radius": "xl", "hoverEffect": "none"},
            "custom": {
                "height": {"desktop": "450px", "tablet": "350px", "mobile": "280px"},
                "autoplay": True,
                "autoplayDelay": 4000,
                "loop": True,
                "transition": "fade",
                "transitionDuration": 700,
                "textPosition": "center",
                "showProgress": True,
            },
        },
    ),
]
