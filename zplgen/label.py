#!/usr/bin/env python

import asyncio
import logging

from . import commands
from .graphics import transcode

log = logging.getLogger(__name__)


def _as_list(zpl):
    if isinstance(zpl, str):
        return [zpl]
    return list(zpl)


class Label:
    '''
    Used to build a ZPL2 document of one or more labels.

    Commands are kept in print order, ^XA and ^XZ are only added by dump_zpl().
    A Label must not be modified by concurrent add_image_async() calls.
    '''

    def __init__(self, zpl=None):
        """
        *zpl* is an optional command string or sequence of command strings to
        start with
        """
        self.commands = [] if zpl is None else _as_list(zpl)

    def dump_zpl(self):
        return '\n'.join([commands.START_FORMAT] + self.commands + [commands.END_FORMAT])

    def __str__(self):
        return self.dump_zpl()

    def set(self, zpl):
        """replaces all commands by *zpl* (a string or a sequence of strings)"""
        self.commands = _as_list(zpl)

    def append(self, zpl):
        """appends *zpl* (a string or a sequence of strings)"""
        self.commands.extend(_as_list(zpl))

    def add_label(self):
        """
        ends the current label format and starts a new one in the same document
        """
        self.commands.extend([commands.END_FORMAT, commands.START_FORMAT])

    def _append_graphic(self, payload, x, y):
        self.commands.extend([
            commands.field_origin(x, y),
            commands.ascii_graphic_field(payload),
            commands.FIELD_SEPARATOR,
        ])
        log.debug('Added %i byte graphic at %s,%s', payload.total_bytes, x, y)

    def add_image(self, image, x=0, y=0):
        """
        embeds *image* as a graphic field with its upper-left corner at *x* and
        *y* (in dots).

        *image* is a file name, the encoded image as bytes, a binary file object
        or a PIL.Image. Images are cropped to a multiple of 8 pixels wide and
        thresholded to black and white.
        """
        self._append_graphic(transcode(image), x, y)

    async def add_image_async(self, image, x=0, y=0):
        """
        same as add_image, but decodes and converts *image* in a worker thread
        """
        payload = await asyncio.to_thread(transcode, image)
        self._append_graphic(payload, x, y)
