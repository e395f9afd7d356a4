"""
Route des affiches de remplacement.
"""

from fastapi import APIRouter
from fastapi.responses import Response

from ...services.placeholder import render_placeholder_svg

router = APIRouter()


@router.get("/placeholder.svg")
async def placeholder(title: str = "", year: str = ""):
    """Affiche SVG generee pour un titre et une annee."""
    return Response(
        content=render_placeholder_svg(title, year),
        media_type="image/svg+xml",
        headers={"Cache-Control": "public, max-age=86400"},
    )
