"""
Generation d'affiches de remplacement en SVG.

Quand un titre n'a pas d'affiche exploitable, une image vectorielle est
derivee de son titre et de son annee : meme entree, memes octets. La couleur
est choisie par un hash 32 bits du titre, compatible avec le hash Java/JS
(h = h * 31 + code) calcule sur les unites UTF-16.

Usage:
    src = render_placeholder("Inception", "2010")
    # "data:image/svg+xml;base64,PHN2ZyB4bWxucz0i..."
"""

import base64
from xml.sax.saxutils import escape

# (fond, accent, clair) - l'ordre fixe l'index choisi par le hash
PALETTE: tuple[tuple[str, str, str], ...] = (
    ("#2c3e50", "#3498db", "#ecf0f1"),
    ("#8b4513", "#d2691e", "#daa520"),
    ("#1a1a2e", "#ff6b6b", "#ee5a6f"),
    ("#0d3b66", "#ef476f", "#ffd60a"),
    ("#264653", "#2a9d8f", "#e76f51"),
    ("#540d6e", "#ee4266", "#ffd23f"),
    ("#003d5c", "#118ab2", "#06a77d"),
)

WIDTH = 300
HEIGHT = 450
TITLE_MAX_LENGTH = 25

_XML_ENTITIES = {'"': "&quot;", "'": "&#39;"}


def escape_xml(text: str) -> str:
    """Echappe & < > " ' pour un contenu texte SVG."""
    return escape(text, _XML_ENTITIES)


def title_hash(text: str) -> int:
    """
    Hash deterministe d'une chaine.

    Accumule h = h * 31 + code sur les unites UTF-16 de la chaine, avec
    debordement signe 32 bits a chaque etape, puis retourne la valeur absolue.

    Args:
        text: Chaine a hacher

    Returns:
        Entier positif ou nul (au plus 2**31)
    """
    data = text.encode("utf-16-le", "surrogatepass")
    h = 0
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = (h * 31 + unit) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return abs(h)


def pick_colors(title: str) -> tuple[str, str, str]:
    """Retourne le triplet (fond, accent, clair) associe au titre."""
    return PALETTE[title_hash(title) % len(PALETTE)]


def truncate_title(title: str) -> str:
    """Coupe le titre a TITLE_MAX_LENGTH unites UTF-16, comme substring en JS."""
    data = title.encode("utf-16-le", "surrogatepass")[: TITLE_MAX_LENGTH * 2]
    return data.decode("utf-16-le", "surrogatepass")


def _rgb(hex_color: str) -> str:
    return ",".join(str(int(hex_color[i:i + 2], 16)) for i in (1, 3, 5))


def render_placeholder_svg(title: str, year: str) -> str:
    """
    Compose le SVG d'une affiche de remplacement.

    Args:
        title: Titre affiche (tronque a 25 unites UTF-16)
        year: Annee affichee sous le titre; chaine vide pour ne rien afficher

    Returns:
        Balisage SVG complet et bien forme
    """
    bg, accent, light = pick_colors(title)
    title_text = escape_xml(truncate_title(title))

    parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{WIDTH}" height="{HEIGHT}" '
        f'viewBox="0 0 {WIDTH} {HEIGHT}">',
        "<defs>",
        '<linearGradient id="main" x1="0" y1="0" x2="1" y2="1">'
        f'<stop offset="0" stop-color="{bg}"/>'
        f'<stop offset="0.5" stop-color="{accent}"/>'
        '<stop offset="1" stop-color="#0a0a0a"/>'
        "</linearGradient>",
        '<linearGradient id="overlay" x1="0" y1="0" x2="0" y2="1">'
        '<stop offset="0" stop-color="rgba(255,255,255,0.2)"/>'
        '<stop offset="0.5" stop-color="rgba(0,0,0,0.1)"/>'
        '<stop offset="1" stop-color="rgba(0,0,0,0.7)"/>'
        "</linearGradient>",
        '<filter id="shadow" x="-50%" y="-50%" width="200%" height="200%">'
        '<feDropShadow dx="2" dy="2" stdDeviation="3" flood-opacity="0.3"/>'
        "</filter>",
        '<pattern id="dots" x="20" y="20" width="20" height="20" patternUnits="userSpaceOnUse">'
        '<circle cx="10" cy="10" r="2" fill="rgba(255,255,255,0.1)"/>'
        "</pattern>",
        "</defs>",
        f'<rect width="{WIDTH}" height="{HEIGHT}" fill="url(#main)"/>',
        f'<rect width="{WIDTH}" height="{HEIGHT}" fill="url(#dots)"/>',
        '<circle cx="50" cy="80" r="100" fill="rgba(255,255,255,0.15)" filter="url(#shadow)"/>',
        '<circle cx="250" cy="120" r="80" fill="rgba(0,0,0,0.2)" filter="url(#shadow)"/>',
        f'<circle cx="150" cy="200" r="120" fill="rgba({_rgb(accent)},0.1)" filter="url(#shadow)"/>',
        '<polygon points="0,250 100,280 0,450" fill="rgba(0,0,0,0.3)"/>',
        '<polygon points="300,350 200,300 300,450" fill="rgba(255,255,255,0.08)"/>',
        f'<rect width="{WIDTH}" height="{HEIGHT}" fill="url(#overlay)"/>',
        '<rect x="0" y="320" width="300" height="130" fill="rgba(0,0,0,0.75)"/>',
        '<text x="150" y="375" font-family="Arial, sans-serif" font-size="22" '
        'font-weight="bold" fill="#ffffff" text-anchor="middle" letter-spacing="1">'
        f"{title_text}</text>",
    ]
    if year:
        parts.append(
            '<text x="150" y="405" font-family="Arial, sans-serif" font-size="14" '
            f'fill="{light}" text-anchor="middle">{escape_xml(year)}</text>'
        )
    parts.append(
        f'<line x1="40" y1="318" x2="260" y2="318" stroke="{accent}" '
        'stroke-width="2" opacity="0.6"/>'
    )
    parts.append("</svg>")
    return "".join(parts)


def to_data_uri(svg: str) -> str:
    """Encode un SVG en URI data base64 (UTF-8)."""
    encoded = base64.b64encode(svg.encode("utf-8", "replace")).decode("ascii")
    return f"data:image/svg+xml;base64,{encoded}"


def render_placeholder(title: str, year: str) -> str:
    """
    Affiche de remplacement prete a servir de source d'image.

    Fonction pure et totale : aucune entree (str, str) ne leve d'exception.
    """
    return to_data_uri(render_placeholder_svg(title, year))


# Image neutre pour les titres sans aucune affiche
NO_IMAGE = to_data_uri(
    f'<svg width="{WIDTH}" height="{HEIGHT}" xmlns="http://www.w3.org/2000/svg">'
    f'<rect fill="#4c5668" width="{WIDTH}" height="{HEIGHT}"/>'
    '<text x="50%" y="50%" font-size="16" fill="#a0adba" font-family="Arial" '
    'text-anchor="middle" dy=".3em">No Image</text></svg>'
)
