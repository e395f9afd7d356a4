"""
Tests pour le generateur d'affiches de remplacement.
"""

import base64
import xml.etree.ElementTree as ET

import pytest

from cinescope.services.placeholder import (
    NO_IMAGE,
    PALETTE,
    escape_xml,
    pick_colors,
    render_placeholder,
    render_placeholder_svg,
    title_hash,
    truncate_title,
)

SVG_NS = "{http://www.w3.org/2000/svg}"


def _decode(data_uri: str) -> str:
    prefix = "data:image/svg+xml;base64,"
    assert data_uri.startswith(prefix)
    return base64.b64decode(data_uri[len(prefix):]).decode("utf-8")


def _texts(svg: str) -> list[ET.Element]:
    return ET.fromstring(svg).findall(f"{SVG_NS}text")


class TestTitleHash:
    """Tests pour title_hash."""

    def test_empty_string(self):
        assert title_hash("") == 0

    def test_single_character(self):
        assert title_hash("A") == 65

    def test_two_characters(self):
        assert title_hash("AB") == 65 * 31 + 66

    def test_known_collision(self):
        # "Aa" et "BB" ont le meme hash de type Java
        assert title_hash("Aa") == title_hash("BB") == 2112

    def test_long_title_stays_in_32_bits(self):
        value = title_hash("The Lord of the Rings: The Return of the King" * 10)
        assert 0 <= value <= 2**31

    def test_uses_utf16_code_units(self):
        # Un caractere hors BMP compte pour deux unites (paire de substitution)
        assert title_hash("\U0001F600") == 0xD83D * 31 + 0xDE00

    def test_lone_surrogate_is_accepted(self):
        assert title_hash("\ud800") == 0xD800


class TestPickColors:
    def test_color_depends_on_hash(self):
        assert pick_colors("") == PALETTE[0]
        assert pick_colors("A") == PALETTE[65 % 7]

    def test_palette_has_seven_triples(self):
        assert len(PALETTE) == 7
        assert all(len(triple) == 3 for triple in PALETTE)


class TestEscapeXml:
    def test_escapes_special_characters(self):
        assert escape_xml("A & B") == "A &amp; B"
        assert escape_xml("<b>") == "&lt;b&gt;"
        assert escape_xml("\"x\" 'y'") == "&quot;x&quot; &#39;y&#39;"


class TestRenderPlaceholderSvg:
    """Tests pour render_placeholder_svg."""

    def test_is_well_formed(self):
        root = ET.fromstring(render_placeholder_svg("Inception", "2010"))
        assert root.tag == f"{SVG_NS}svg"
        assert root.get("width") == "300"
        assert root.get("height") == "450"

    def test_year_adds_one_text_element(self):
        without_year = _texts(render_placeholder_svg("Inception", ""))
        with_year = _texts(render_placeholder_svg("Inception", "2010"))
        assert len(with_year) == len(without_year) + 1
        assert with_year[-1].text == "2010"

    def test_title_is_truncated(self):
        title = "A" * 40
        texts = _texts(render_placeholder_svg(title, ""))
        assert texts[0].text == "A" * 25

    def test_truncation_counts_utf16_units(self):
        assert truncate_title("\U0001F3AC" + "A" * 30) == "\U0001F3AC" + "A" * 23

    def test_truncation_may_split_surrogate_pair(self):
        title = "A" * 24 + "\U0001F3AC"
        assert truncate_title(title) == "A" * 24 + "\ud83c"
        assert "A" * 24 + "?" in _decode(render_placeholder(title, ""))

    def test_title_is_escaped(self):
        svg = render_placeholder_svg("A & B <C>", "")
        assert "A &amp; B &lt;C&gt;" in svg
        assert _texts(svg)[0].text == "A & B <C>"

    def test_uses_title_palette(self):
        bg, accent, _ = pick_colors("Inception")
        svg = render_placeholder_svg("Inception", "2010")
        assert bg in svg
        assert accent in svg


class TestRenderPlaceholder:
    """Tests pour render_placeholder (URI data)."""

    def test_deterministic(self):
        assert render_placeholder("The Matrix", "1999") == render_placeholder("The Matrix", "1999")

    def test_different_years_differ(self):
        assert render_placeholder("The Matrix", "1999") != render_placeholder("The Matrix", "2003")

    def test_decodes_to_svg(self):
        svg = _decode(render_placeholder("Amélie", "2001"))
        assert "Amélie" in svg
        ET.fromstring(svg)

    @pytest.mark.parametrize("title", ["", "\ud800", "x" * 1000, "🎬 Cinéma"])
    def test_never_raises(self, title: str):
        assert render_placeholder(title, "").startswith("data:image/svg+xml;base64,")

    def test_no_image_constant(self):
        assert "No Image" in _decode(NO_IMAGE)
