# spirithub/services/share_card.py
"""
Carduri SVG pentru distribuire (imagini OG 1200x630 și formate verticale).

Funcții publice:
- render_card(...) -> str (SVG) : cardul de bază (brand, număr mare, titlu, text, subsol)
- life_path_card(number), destiny_card(number), daily_number_card(date_str)
- compatibility_card(score, name1, name2) : cu arc de scor
- energy_card(date_str), oracle_card(message_id)
"""

from typing import Dict, Any, List, Optional
import html
import math
import textwrap
import logging

from ..config import SITE_CONFIG
from ..exceptions import MissingContentError
from ..daily import calculate_daily_number, get_energia_zilei
from ..interpretations import get_interpretation, get_compatibility_interpretation
from ..loaders import load_oracle_messages
from ..numerology import compatibility_level
from ..utils import format_romanian_date, parse_iso_date, validate_numerology_number

logger = logging.getLogger("spirithub.services.share_card")
logger.addHandler(logging.NullHandler())

IMAGE_FORMATS = {
    "og": {"width": 1200, "height": 630},
    "story": {"width": 1080, "height": 1920},
    "feed": {"width": 1080, "height": 1350},
    "square": {"width": 1080, "height": 1080},
}

COLORS = {
    "bg_start": "#1a0533",
    "bg_end": "#0d0015",
    "primary": "#FFFFFF",
    "accent": "#9F2BFF",
    "muted": "rgba(255, 255, 255, 0.7)",
    "success": "#22C55E",
    "warning": "#F59E0B",
    "danger": "#EF4444",
}


def truncate_text(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    return text[: max_length - 1].strip() + "…"


def _circle_point(cx: float, cy: float, radius: float, angle_deg: float):
    rad = math.radians(angle_deg)
    return cx + radius * math.cos(rad), cy + radius * math.sin(rad)


def _score_color(score: int) -> str:
    if score >= 76:
        return COLORS["success"]
    if score >= 51:
        return COLORS["accent"]
    if score >= 26:
        return COLORS["warning"]
    return COLORS["danger"]


def render_card(hero: str, title: str, body: str = "", *, kicker: str = "",
                accent: Optional[str] = None, footer: Optional[str] = None,
                image_format: str = "og", extra_svg: Optional[List[str]] = None) -> str:
    """
    Card SVG: pastila de brand, `kicker` deasupra, `hero` (număr/emoji) mare,
    titlu, corp de text împărțit pe rânduri și subsol cu adresa site-ului.
    """
    fmt = IMAGE_FORMATS.get(image_format)
    if fmt is None:
        raise ValueError(f"Format necunoscut: {image_format}")
    w, h = fmt["width"], fmt["height"]
    vertical = h > w
    accent = accent or COLORS["accent"]
    footer = footer if footer is not None else SITE_CONFIG["url"].replace("https://", "")
    cx = w / 2
    scale = 1.35 if vertical else 1.0

    svg_parts = []
    svg_parts.append(f'<svg width="{w}" height="{h}" viewBox="0 0 {w} {h}" xmlns="http://www.w3.org/2000/svg">')
    svg_parts.append('<defs><linearGradient id="bg" x1="0" y1="0" x2="0" y2="1">'
                     f'<stop offset="0%" stop-color="{COLORS["bg_start"]}"/>'
                     f'<stop offset="100%" stop-color="{COLORS["bg_end"]}"/></linearGradient></defs>')
    svg_parts.append('<rect width="100%" height="100%" fill="url(#bg)"/>')
    svg_parts.append(f'<rect x="{cx - 120:.0f}" y="30" width="240" height="44" rx="22" fill="none" '
                     f'stroke="{accent}" stroke-width="2"/>')
    svg_parts.append(f'<text x="{cx:.0f}" y="60" text-anchor="middle" font-family="Arial" font-size="22" '
                     f'fill="{COLORS["primary"]}">{html.escape(SITE_CONFIG["name"])}</text>')

    y = h * (0.2 if not vertical else 0.18)
    if kicker:
        svg_parts.append(f'<text x="{cx:.0f}" y="{y:.0f}" text-anchor="middle" font-family="Arial" '
                         f'font-size="{36 * scale:.0f}" fill="{COLORS["muted"]}">{html.escape(kicker)}</text>')
    hero_size = (200 if not vertical else 380)
    y += hero_size * 0.9
    svg_parts.append(f'<text x="{cx:.0f}" y="{y:.0f}" text-anchor="middle" font-family="Arial" font-weight="bold" '
                     f'font-size="{hero_size}" fill="{accent}">{html.escape(str(hero))}</text>')
    y += 72 * scale
    svg_parts.append(f'<text x="{cx:.0f}" y="{y:.0f}" text-anchor="middle" font-family="Arial" font-weight="bold" '
                     f'font-size="{56 * scale:.0f}" fill="{COLORS["primary"]}">{html.escape(title)}</text>')

    if body:
        chars = 60 if not vertical else 38
        max_lines = 2 if not vertical else 6
        for line in textwrap.wrap(truncate_text(body, chars * max_lines), chars)[:max_lines]:
            y += 40 * scale
            svg_parts.append(f'<text x="{cx:.0f}" y="{y:.0f}" text-anchor="middle" font-family="Arial" '
                             f'font-size="{30 * scale:.0f}" fill="{COLORS["muted"]}">{html.escape(line)}</text>')

    for part in extra_svg or []:
        svg_parts.append(part)

    svg_parts.append(f'<text x="{cx:.0f}" y="{h - 30}" text-anchor="middle" font-family="Arial" font-size="26" '
                     f'fill="{COLORS["muted"]}">{html.escape(footer)}</text>')
    svg_parts.append('</svg>')
    return "\n".join(svg_parts)


# -------------------------
# Carduri pe tipuri
# -------------------------
def _number_card(kind: str, kicker: str, number: int, image_format: str) -> str:
    validate_numerology_number(number)
    entry = get_interpretation(kind, number, use_fallback=True)
    if entry is None:
        raise MissingContentError(f"Nu există interpretare {kind} pentru {number}")
    hero = entry.get("hero", {})
    return render_card(
        number, hero.get("title", ""), hero.get("headline", ""),
        kicker=kicker, accent=entry.get("theme", {}).get("primary"), image_format=image_format,
    )


def life_path_card(number: int, image_format: str = "og") -> str:
    return _number_card("life-path", "Calea mea în viață este", number, image_format)


def destiny_card(number: int, image_format: str = "og") -> str:
    return _number_card("destiny", "Numărul destinului meu este", number, image_format)


def daily_number_card(date_str: str, image_format: str = "og") -> str:
    d = parse_iso_date(date_str)
    number = calculate_daily_number(date_str)
    entry = get_interpretation("daily", number, use_fallback=True)
    hero = entry.get("hero", {})
    return render_card(
        number, hero.get("title", ""), hero.get("headline", ""),
        kicker=f"Numărul zilei · {format_romanian_date(d)}",
        accent=entry.get("theme", {}).get("primary"), image_format=image_format,
    )


def compatibility_card(score: int, name1: str = "", name2: str = "", image_format: str = "og") -> str:
    level = compatibility_level(score)
    entry = get_compatibility_interpretation(score) or {}
    title = entry.get("hero", {}).get("title") or f"Compatibilitate {level['level']}"
    kicker = f"{name1} & {name2}" if name1 and name2 else "Compatibilitate numerologică"
    color = _score_color(score)

    # arc de scor în jurul numărului (0..100 -> 0..360 grade, pornind de sus)
    fmt = IMAGE_FORMATS[image_format]
    cx, cy, r = fmt["width"] / 2, fmt["height"] * 0.42, 150
    steps = max(1, int(score * 0.6))
    points = [_circle_point(cx, cy, r, -90 + 360 * score / 100 * i / steps) for i in range(steps + 1)]
    path = " ".join(f"{'M' if i == 0 else 'L'} {x:.1f} {y:.1f}" for i, (x, y) in enumerate(points))
    arc = [
        f'<circle cx="{cx:.1f}" cy="{cy:.1f}" r="{r}" fill="none" stroke="rgba(255,255,255,0.1)" stroke-width="10"/>',
        f'<path d="{path}" fill="none" stroke="{color}" stroke-width="10" stroke-linecap="round"/>',
    ]
    return render_card(f"{score}%", title, entry.get("hero", {}).get("headline", ""),
                       kicker=kicker, accent=color, image_format=image_format, extra_svg=arc)


def energy_card(date_str: str, image_format: str = "og") -> str:
    d = parse_iso_date(date_str)
    entry = get_energia_zilei(d)
    return render_card(
        entry["planetSymbol"], entry["theme"], entry.get("shortHint", ""),
        kicker=f"Energia zilei · {entry['dayName']}, {format_romanian_date(d)}",
        accent=entry.get("color"), image_format=image_format,
    )


def oracle_card(message_id: int, image_format: str = "og") -> str:
    message = next((m for m in load_oracle_messages() if m.get("id") == message_id), None)
    if message is None:
        raise MissingContentError(f"Mesajul oracolului {message_id} nu există")
    theme = message.get("theme", {})
    return render_card(
        theme.get("icon", "✨"), message["title"], message.get("mantra", ""),
        kicker="Mesajul zilei", accent=theme.get("primary"), image_format=image_format,
    )
