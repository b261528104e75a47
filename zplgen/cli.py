#!/usr/bin/env python

import argparse
import logging

from .label import Label
from .version import get_version

log = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog='zplgen', description='Prints a ZPL2 label document to standard output.')
    parser.add_argument('-V', '--version', action='version', version=get_version())
    parser.add_argument('-I', '--image', metavar='PATH', help='add image')
    parser.add_argument('-x', type=int, default=0, help='image field origin x (dots)')
    parser.add_argument('-y', type=int, default=0, help='image field origin y (dots)')
    parser.add_argument('-v', '--verbose', action='store_true', help='debug logging')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')

    label = Label()
    if args.image:
        log.debug('Adding image %s', args.image)
        label.add_image(args.image, args.x, args.y)

    print(label.dump_zpl())


if __name__ == '__main__':
    main()
