"""
Build ZPL2 label code and embed images as graphic fields.
"""

from .graphics import DecodeError, GraphicsPayload, transcode
from .label import Label
from .version import get_version

__version__ = get_version()
