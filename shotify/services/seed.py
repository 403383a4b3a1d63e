"""
Canonical default templates inserted by the catalog seed operation.

``default_templates()`` builds a fresh value set on every call; nothing here
is shared module state that a caller could mutate.
"""

from dataclasses import dataclass, field
from typing import Any

from shotify.schemas.configuration import Configuration, Platform


@dataclass(frozen=True)
class TemplateSeed:
    """One default template definition."""
    name: str
    platform: Platform
    category: str
    thumbnail: str
    json_config: dict[str, Any] = field(default_factory=dict)


# Store output sizes offered with every default template
EXPORT_SIZES: tuple[tuple[str, str, int, int], ...] = (
    ('iPhone 6.7"', "ios", 1290, 2796),
    ('iPhone 6.5"', "ios", 1242, 2688),
    ('iPhone 5.5"', "ios", 1242, 2208),
    ('iPad Pro 12.9"', "ios", 2048, 2732),
    ("Android Phone", "android", 1080, 1920),
    ("Android Tablet", "android", 1200, 1920),
)


def _exports(platform: Platform) -> list[dict[str, Any]]:
    return [
        {"name": name, "platform": target, "width": width, "height": height}
        for name, target, width, height in EXPORT_SIZES
        if platform is Platform.BOTH or target == platform.value
    ]


def _layer(layer_id: str, layer_type: str, name: str, box: tuple[float, float, float, float],
           properties: dict[str, Any], z_index: int = 10, locked: bool = False) -> dict[str, Any]:
    x, y, width, height = box
    return {
        "id": layer_id,
        "type": layer_type,
        "name": name,
        "x": x,
        "y": y,
        "width": width,
        "height": height,
        "rotation": 0,
        "visible": True,
        "locked": locked,
        "opacity": 1,
        "zIndex": z_index,
        "properties": properties,
    }


def _background(layer_id: str, width: int, height: int, fill: str) -> dict[str, Any]:
    return _layer(
        layer_id, "shape", "Background", (0, 0, width, height),
        {
            "fill": fill,
            "shapeType": "rect",
            "cornerRadius": 0,
            "stroke": "",
            "strokeWidth": 0,
            "position": "center",
            "anchorX": "center",
            "anchorY": "center",
        },
        z_index=0,
        locked=True,
    )


def _headline(layer_id: str, content: str, x: float, y: float, color: str,
              font_size: int = 20, width: float = 1000) -> dict[str, Any]:
    return _layer(
        layer_id, "text", "Title", (x, y, width, 100),
        {
            "content": content,
            "fontFamily": "Inter",
            "fontSize": font_size,
            "fontWeight": "700",
            "color": color,
            "align": "center",
            "lineHeight": 1.2,
            "position": "top",
            "anchorX": "center",
            "anchorY": "top",
            "offsetY": y,
        },
    )


def _screenshot(layer_id: str, x: float, y: float, width: float, height: float,
                offset_y: float, position: str = "bottom-overflow") -> dict[str, Any]:
    return _layer(
        layer_id, "screenshot", "App Screenshot", (x, y, width, height),
        {
            "src": "",
            "placeholder": "Drop screenshot here",
            "borderRadius": 48,
            "shadow": True,
            "shadowBlur": 60,
            "shadowColor": "rgba(0,0,0,0.25)",
            "shadowOffsetX": 0,
            "shadowOffsetY": 20,
            "position": position,
            "anchorX": "center",
            "anchorY": "top",
            "offsetY": offset_y,
            "scale": 1.0,
        },
        z_index=5,
    )


def _minimal_dark() -> TemplateSeed:
    canvas = {"width": 1242, "height": 2688, "backgroundColor": "#F2F8F3"}
    layers = [
        _background("bg-1", 1242, 2688, "#F2F8F3"),
        _headline("headline-1", "Transform Your App", 621, 280, "#1A1A1A"),
        _layer(
            "border-1", "shape", "Accent Line", (621, 420, 120, 6),
            {
                "fill": "#2FC88D",
                "shapeType": "rect",
                "cornerRadius": 3,
                "stroke": "",
                "strokeWidth": 0,
                "position": "top",
                "anchorX": "center",
                "anchorY": "top",
                "offsetY": 420,
            },
        ),
        _screenshot("screenshot-1", 621, 1600, 900, 1900, offset_y=520),
    ]
    return TemplateSeed(
        name="Minimal Dark",
        platform=Platform.BOTH,
        category="minimal",
        thumbnail="/templates/minimal-dark.png",
        json_config={
            "canvas": canvas,
            "layers": layers,
            "images": [],
            "exports": _exports(Platform.BOTH),
        },
    )


def _feature_spotlight() -> TemplateSeed:
    canvas = {"width": 1290, "height": 2796, "backgroundColor": "#0F172A"}
    captions = (
        ("Plan Every Day", "#38BDF8"),
        ("Track Your Progress", "#A78BFA"),
        ("Share With Friends", "#F472B6"),
    )
    slides = []
    for index, (caption, accent) in enumerate(captions, start=1):
        slides.append({
            "id": f"slide-{index}",
            "canvas": dict(canvas),
            "layers": [
                _background(f"bg-{index}", 1290, 2796, "#0F172A"),
                _headline(f"headline-{index}", caption, 645, 240, "#F8FAFC", font_size=24, width=1100),
                _layer(
                    f"glow-{index}", "shape", "Accent Glow", (645, 1500, 1000, 1000),
                    {
                        "fill": accent,
                        "shapeType": "circle",
                        "cornerRadius": 0,
                        "stroke": "",
                        "strokeWidth": 0,
                        "position": "center",
                        "anchorX": "center",
                        "anchorY": "center",
                    },
                    z_index=2,
                ),
                _screenshot(f"screenshot-{index}", 645, 1650, 940, 2000, offset_y=480),
            ],
        })
    return TemplateSeed(
        name="Feature Spotlight",
        platform=Platform.IOS,
        category="gradient",
        thumbnail="/templates/feature-spotlight.png",
        json_config={
            "canvas": canvas,
            "layers": slides[0]["layers"],
            "images": [],
            "slides": slides,
            "exports": _exports(Platform.IOS),
        },
    )


def _play_showcase() -> TemplateSeed:
    canvas = {"width": 1080, "height": 1920, "backgroundColor": "#FFFFFF"}
    layers = [
        _background("bg-1", 1080, 1920, "#FFF7ED"),
        _layer(
            "banner-1", "shape", "Top Banner", (540, 0, 1080, 520),
            {
                "fill": "#F97316",
                "shapeType": "rounded",
                "cornerRadius": 64,
                "stroke": "",
                "strokeWidth": 0,
                "position": "top",
                "anchorX": "center",
                "anchorY": "top",
                "offsetY": 0,
            },
            z_index=1,
        ),
        _headline("headline-1", "Built for Android", 540, 180, "#FFFFFF", font_size=18, width=900),
        _screenshot("screenshot-1", 540, 1100, 720, 1480, offset_y=420, position="bottom"),
    ]
    return TemplateSeed(
        name="Play Showcase",
        platform=Platform.ANDROID,
        category="bold",
        thumbnail="/templates/play-showcase.png",
        json_config={
            "canvas": canvas,
            "layers": layers,
            "images": [],
            "exports": _exports(Platform.ANDROID),
        },
    )


def default_templates() -> tuple[TemplateSeed, ...]:
    """Build the canonical template set, validating each configuration."""
    seeds = (_minimal_dark(), _feature_spotlight(), _play_showcase())
    return tuple(
        TemplateSeed(
            name=seed.name,
            platform=seed.platform,
            category=seed.category,
            thumbnail=seed.thumbnail,
            json_config=Configuration.from_document(seed.json_config).to_document(),
        )
        for seed in seeds
    )


DEFAULT_TEMPLATE_COUNT = len(default_templates())
