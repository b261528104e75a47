import io

import pytest
from PIL import Image

from zplgen.graphics import (
    DecodeError,
    GraphicsPayload,
    crop_to_byte_width,
    encode_rows,
    load_image,
    threshold,
    transcode,
)

from .conftest import BLACK, WHITE, make_image


class TestTranscode:

    def test_all_white_rows_are_elided(self):
        payload = transcode(make_image(24, 4))
        assert payload == GraphicsPayload(',,,,', 12, 3)

    def test_all_black(self):
        payload = transcode(make_image(16, 2, BLACK))
        assert payload.data == 'FFFF\nFFFF\n'
        assert payload.row_bytes == 2
        assert payload.total_bytes == 4

    def test_half_black(self, half_black_image):
        assert transcode(half_black_image) == GraphicsPayload('FF00\nFF00\n', 4, 2)

    def test_hex_is_uppercase(self):
        image = make_image(8, 1)
        for x in (0, 2, 4, 6, 7):
            image.putpixel((x, 0), BLACK)
        assert transcode(image).data == 'AB\n'

    def test_narrower_than_one_byte(self):
        assert transcode(make_image(5, 3, BLACK)) == GraphicsPayload(',,,', 0, 0)

    def test_bytes_input(self, png_bytes):
        assert transcode(png_bytes).data == 'FF00\nFF00\n'

    def test_path_input(self, png_path):
        assert transcode(png_path).data == 'FF00\nFF00\n'
        assert transcode(str(png_path)).data == 'FF00\nFF00\n'

    def test_file_object_input(self, png_bytes):
        assert transcode(io.BytesIO(png_bytes)).row_bytes == 2

    def test_palette_image(self, half_black_image):
        assert transcode(half_black_image.convert('RGB').convert('P')).data == 'FF00\nFF00\n'

    def test_undecodable_bytes(self):
        with pytest.raises(DecodeError):
            transcode(b'definitely not an image')

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            transcode(tmp_path / 'missing.png')


class TestCrop:

    def test_multiple_of_eight_unchanged(self):
        image = make_image(16, 3)
        assert crop_to_byte_width(image) is image

    def test_symmetric(self):
        image = make_image(10, 1)
        image.putpixel((0, 0), BLACK)
        image.putpixel((9, 0), BLACK)
        cropped = crop_to_byte_width(image)
        assert cropped.size == (8, 1)
        assert transcode(image).data == ','

    def test_keeps_second_column(self):
        image = make_image(10, 1)
        image.putpixel((1, 0), BLACK)
        image.putpixel((8, 0), BLACK)
        assert transcode(image) == GraphicsPayload('81\n', 1, 1)

    def test_odd_excess_drops_more_on_the_right(self):
        image = make_image(11, 2)
        image.putpixel((0, 0), BLACK)
        image.putpixel((9, 0), BLACK)
        image.putpixel((10, 0), BLACK)
        assert crop_to_byte_width(image).size == (8, 2)
        assert transcode(image).data == ',,'

    def test_height_unchanged(self):
        assert crop_to_byte_width(make_image(13, 7)).size == (8, 7)


class TestThreshold:

    @pytest.mark.parametrize('color, ink', [
        ((127, 127, 127, 255), True),
        ((128, 128, 128, 255), False),
        ((255, 0, 128, 255), True),
        ((255, 0, 129, 255), False),
        ((0, 0, 0, 0), True),
        (WHITE, False),
    ])
    def test_mean_of_rgb(self, color, ink):
        bitmap = threshold(make_image(8, 1, color)).tobytes()
        assert bitmap == (b'\xff' if ink else b'\x00')

    def test_mode(self):
        assert threshold(make_image(8, 1)).mode == '1'


class TestEncodeRows:

    def test_explicit_rows(self):
        assert encode_rows(bytes([0xFF, 0x00, 0x0F, 0xA0]), 2) == 'FF00\n0FA0\n'

    def test_newline_after_elided_run(self):
        assert encode_rows(bytes([0, 0, 0xFF, 0]), 1) == ',,\nFF\n,'

    def test_empty(self):
        assert encode_rows(b'', 2) == ''


class TestLoadImage:

    def test_decoded_image_passed_through(self, half_black_image):
        assert load_image(half_black_image) is half_black_image

    def test_bytearray(self, png_bytes):
        assert load_image(bytearray(png_bytes)).size == (16, 2)


def test_payload_counts_match_height():
    payload = transcode(Image.new('L', (32, 5), 0))
    assert payload.total_bytes == payload.row_bytes * 5
    assert payload.data == 'FFFFFFFF\n' * 5
