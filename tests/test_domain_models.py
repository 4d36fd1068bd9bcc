"""Tests for domain models to verify they work correctly."""

import numpy as np
import pytest
from fontTools.pens.recordingPen import RecordingPen

from handfont.domain import (
    NOTDEF,
    CharacterSet,
    FontModel,
    Glyph,
    GlyphPath,
    Point,
    Polyline,
    RasterBitmap,
    glyph_name_for,
)


def white_pixels(width: int, height: int, alpha: int = 255) -> np.ndarray:
    pixels = np.full((height, width, 4), 255, dtype=np.uint8)
    pixels[:, :, 3] = alpha
    return pixels


class TestRasterBitmap:
    """Tests for RasterBitmap class."""

    def test_dimensions(self) -> None:
        """Test width and height come from the array shape."""
        bitmap = RasterBitmap(white_pixels(40, 30))
        assert bitmap.width == 40
        assert bitmap.height == 30
        assert bitmap.size == (40, 30)

    def test_rejects_wrong_shape(self) -> None:
        """Test arrays without four channels are rejected."""
        with pytest.raises(ValueError):
            RasterBitmap(np.zeros((10, 10, 3), dtype=np.uint8))

    def test_pixels_are_read_only(self) -> None:
        """Test the stored array cannot be written."""
        bitmap = RasterBitmap(white_pixels(4, 4))
        with pytest.raises(ValueError):
            bitmap.pixels[0, 0, 0] = 0

    def test_source_array_is_copied(self) -> None:
        """Test later writes to the source array do not leak in."""
        source = white_pixels(4, 4)
        bitmap = RasterBitmap(source)
        source[0, 0] = (0, 0, 0, 255)
        assert bitmap.pixel(0, 0) == (255, 255, 255, 255)

    def test_blank_when_all_white(self) -> None:
        """Test pure white bitmaps are blank."""
        assert RasterBitmap.blank(10, 10).is_blank()

    def test_blank_ignores_alpha(self) -> None:
        """Test transparent white still counts as blank."""
        assert RasterBitmap(white_pixels(10, 10, alpha=0)).is_blank()

    def test_single_dark_pixel_is_not_blank(self) -> None:
        """Test one non-white pixel makes the bitmap non-blank."""
        pixels = white_pixels(10, 10)
        pixels[9, 9] = (255, 254, 255, 255)
        assert not RasterBitmap(pixels).is_blank()

    def test_transparent_colour_is_not_blank(self) -> None:
        """Test a non-white pixel with zero alpha is not blank."""
        pixels = white_pixels(10, 10)
        pixels[3, 3] = (0, 0, 0, 0)
        assert not RasterBitmap(pixels).is_blank()

    def test_pixel_indexing(self) -> None:
        """Test pixel(x, y) addresses column x of row y."""
        pixels = white_pixels(10, 5)
        pixels[2, 7] = (1, 2, 3, 4)
        assert RasterBitmap(pixels).pixel(7, 2) == (1, 2, 3, 4)

    def test_image_conversion(self) -> None:
        """Test conversion to and from Pillow images."""
        pixels = white_pixels(8, 6)
        pixels[1, 2] = (0, 0, 0, 255)
        bitmap = RasterBitmap(pixels)

        image = bitmap.to_image()
        assert image.mode == "RGBA"
        assert image.size == (8, 6)
        assert RasterBitmap.from_image(image) == bitmap

    def test_from_rgb_image(self) -> None:
        """Test non-RGBA images gain an opaque alpha channel."""
        from PIL import Image

        bitmap = RasterBitmap.from_image(Image.new("RGB", (3, 3), (0, 0, 0)))
        assert bitmap.pixel(1, 1) == (0, 0, 0, 255)


class TestPolyline:
    """Tests for Polyline and GlyphPath."""

    def test_commands(self) -> None:
        """Test a move followed by lines in order."""
        polyline = Polyline((Point(0, 0), Point(10, 0), Point(10, 10)))
        assert list(polyline.commands()) == [
            ("moveTo", (0, 0)),
            ("lineTo", (10, 0)),
            ("lineTo", (10, 10)),
        ]

    def test_draw_leaves_path_open(self) -> None:
        """Test drawing ends the path instead of closing it."""
        pen = RecordingPen()
        Polyline((Point(0, 0), Point(5, 5))).draw(pen)
        assert pen.value == [
            ("moveTo", ((0, 0),)),
            ("lineTo", ((5, 5),)),
            ("endPath", ()),
        ]

    def test_single_point_draws_nothing(self) -> None:
        """Test one-point polylines are not drawn."""
        pen = RecordingPen()
        Polyline((Point(1, 1),)).draw(pen)
        assert pen.value == []

    def test_glyph_path(self) -> None:
        """Test glyph path point count and emptiness."""
        path = GlyphPath(
            (
                Polyline((Point(0, 0), Point(1, 1))),
                Polyline((Point(2, 2), Point(3, 3), Point(4, 4))),
            )
        )
        assert not path.is_empty()
        assert path.point_count == 5
        assert GlyphPath().is_empty()


class TestGlyph:
    """Tests for Glyph and FontModel."""

    def test_glyph_names(self) -> None:
        """Test production names for common characters."""
        assert glyph_name_for(ord("A")) == "A"
        assert glyph_name_for(ord("!")) == "exclam"
        assert glyph_name_for(ord("0")) == "zero"
        assert glyph_name_for(0) == NOTDEF

    def test_glyph_name_derived(self) -> None:
        """Test glyph name defaults from the code point."""
        glyph = Glyph(character="?", unicode=ord("?"), advance_width=650)
        assert glyph.name == "question"
        assert glyph.path.is_empty()

    def test_font_model_requires_notdef_first(self) -> None:
        """Test a font without a leading .notdef is rejected."""
        glyph = Glyph(character="A", unicode=65, advance_width=650)
        with pytest.raises(ValueError):
            FontModel("F", "Regular", 1000, 800, -200, (glyph,))

    def test_font_model_maps(self) -> None:
        """Test glyph order and character map."""
        notdef = Glyph(character="", unicode=0, advance_width=650, name=NOTDEF)
        a = Glyph(character="a", unicode=ord("a"), advance_width=650)
        model = FontModel("F", "Regular", 1000, 800, -200, (notdef, a))

        assert model.glyph_order == [NOTDEF, "a"]
        assert model.character_map == {ord("a"): "a"}
        assert model.get_glyph("a") is a
        assert model.get_glyph("b") is None


class TestCharacterSet:
    """Tests for CharacterSet."""

    def test_total(self) -> None:
        """Test the default set has four categories in order."""
        charset = CharacterSet()
        assert list(charset.categories) == ["uppercase", "lowercase", "numbers", "symbols"]
        assert charset.total == 26 + 26 + 10 + 28
        assert charset.all_characters()[0] == "A"
        assert charset.all_characters()[-1] == "/"

    def test_next_character_crosses_categories(self) -> None:
        """Test navigation moves from one category into the next."""
        charset = CharacterSet()
        assert charset.next_character("A") == "B"
        assert charset.next_character("Z") == "a"
        assert charset.next_character("z") == "0"
        assert charset.next_character("9") == "!"

    def test_next_character_wraps(self) -> None:
        """Test the last symbol wraps to the first uppercase letter."""
        assert CharacterSet().next_character("/") == "A"

    def test_unknown_character_goes_to_start(self) -> None:
        """Test characters outside the set move to the first one."""
        assert CharacterSet().next_character("é") == "A"

    def test_progress(self) -> None:
        """Test progress uses the store size over the set size."""
        assert CharacterSet().progress(["A", "B"]) == (2, 90)

    def test_custom_categories(self) -> None:
        """Test custom category mappings."""
        charset = CharacterSet({"digits": "01"})
        assert charset.total == 2
        assert charset.next_character("1") == "0"
        assert "0" in charset
        assert "A" not in charset
