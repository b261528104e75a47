'''
Converts raster images to ZPL2 ^GF graphic field data.

Decoding is left to Pillow; this module crops, thresholds, packs and hex
encodes the pixels.
'''

import io
import logging
import os
from collections import namedtuple

from PIL import Image, UnidentifiedImageError

log = logging.getLogger(__name__)

# raised by Pillow for input it cannot identify, passed through unchanged
DecodeError = UnidentifiedImageError

# unweighted mean of R, G and B below 128 prints a dot
THRESHOLD = 128

GraphicsPayload = namedtuple('GraphicsPayload', ['data', 'total_bytes', 'row_bytes'])
GraphicsPayload.__doc__ = '''
ASCII hex graphic field body.

*total_bytes* and *row_bytes* describe the uncompressed bitmap, even when rows
of *data* were elided.
'''


def load_image(image):
    """
    returns a decoded PIL.Image for *image*, which may be a PIL.Image, the
    encoded file contents as bytes, a file name or a binary file object
    """
    if isinstance(image, Image.Image):
        return image
    if isinstance(image, (bytes, bytearray)):
        image = io.BytesIO(image)
    elif isinstance(image, str):
        image = os.path.expanduser(image)
    decoded = Image.open(image)
    # Image.open is lazy, force decoding so broken files fail here
    decoded.load()
    return decoded


def crop_to_byte_width(image):
    """
    crops *image* horizontally to the widest multiple of 8 pixels, keeping it
    centred. Odd leftovers drop one more pixel on the right than on the left.
    """
    width, height = image.size
    excess = width % 8
    if not excess:
        return image
    left = excess // 2
    return image.crop((left, 0, left + width - excess, height))


def threshold(image):
    """
    returns a mode '1' image of *image* where set bits are dots to print.

    Alpha is ignored.
    """
    rgb = image.convert('RGB')
    raw = rgb.tobytes()
    limit = THRESHOLD * 3
    ink = bytes(255 if raw[i] + raw[i + 1] + raw[i + 2] < limit else 0
                for i in range(0, len(raw), 3))
    return Image.frombytes('L', rgb.size, ink).convert('1', dither=Image.Dither.NONE)


def encode_rows(bitmap, row_bytes):
    """
    hex encodes packed *bitmap* rows of *row_bytes* each.

    A row without any dots is replaced by a single comma. Every hex row is
    followed by a newline, and a run of commas is followed by one before the
    next hex row.
    """
    data = []
    elided = False
    for offset in range(0, len(bitmap), row_bytes):
        row = bitmap[offset:offset + row_bytes]
        if not any(row):
            data.append(',')
            elided = True
            continue
        if elided:
            data.append('\n')
            elided = False
        data.append(row.hex().upper())
        data.append('\n')
    return ''.join(data)


def transcode(image):
    """
    converts *image* (see load_image) to a GraphicsPayload
    """
    image = load_image(image)
    width, height = image.size
    row_bytes = width // 8
    if not row_bytes:
        log.debug('Image %ix%i is narrower than one byte', width, height)
        return GraphicsPayload(',' * height, 0, 0)

    bitmap = threshold(crop_to_byte_width(image)).tobytes()
    payload = GraphicsPayload(encode_rows(bitmap, row_bytes), row_bytes * height, row_bytes)
    log.debug('Transcoded %ix%i image: %i bytes per row, %i total, %i characters',
              width, height, payload.row_bytes, payload.total_bytes, len(payload.data))
    return payload
