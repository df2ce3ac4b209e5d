"""
Convert BMFont XML descriptor to Laya XML or classic text descriptor
(c) 2019--2024 Rob Hagemans, licence: https://opensource.org/licenses/MIT
"""

import sys
import argparse
import logging
from pathlib import Path

import bmfconv
from bmfconv.plumbing import wrap_main, ScriptError


def _get_parser():
    variants = bmfconv.get_variants()
    parser = argparse.ArgumentParser(
        prog='bmfconv',
        description='Convert AngelCode BMFont XML descriptors.',
        epilog='variants: ' + '; '.join(
            f'{_name}: {_doc}' for _name, _doc in variants.items()
        ),
    )
    parser.add_argument('infile', help='XML descriptor to convert')
    parser.add_argument(
        'outfile', nargs='?', default=None,
        help='output file (default: input name with .fnt suffix)'
    )
    parser.add_argument(
        '--variant', default=bmfconv.DEFAULT_VARIANT, choices=tuple(variants),
        help=f'output dialect (default: {bmfconv.DEFAULT_VARIANT})'
    )
    parser.add_argument(
        '--stdout', action='store_true', default=False,
        help='write result to standard output instead of a file'
    )
    parser.add_argument(
        '--overlay', default=None, metavar='IMAGE',
        help='spritesheet image to draw the char boxes on'
    )
    parser.add_argument(
        '--overlay-out', default=None, metavar='PATH',
        help='output image for --overlay (default: IMAGE stem + _overlay.png)'
    )
    parser.add_argument(
        '--debug', action='store_true', default=False,
        help='enable debugging output'
    )
    parser.add_argument(
        '--version', action='version', version=bmfconv.CONVERTER_NAME,
    )
    return parser


def _overlay(data, image, outfile):
    """Save spritesheet with char boxes drawn on it."""
    image = Path(image)
    if outfile is None:
        outfile = image.with_name(f'{image.stem}_overlay.png')
    canvas = bmfconv.draw_overlay(image, bmfconv.char_boxes(data))
    logging.info("Writing overlay '%s'", outfile)
    canvas.save(outfile)


def main(argv=None):
    args = _get_parser().parse_args(argv)
    try:
        with wrap_main(args.debug):
            if args.overlay_out and not args.overlay:
                logging.warning('Option --overlay-out has no effect without --overlay.')
            if args.stdout:
                data = bmfconv.load_descriptor(args.infile)
                sys.stdout.write(bmfconv.convert(data, args.variant))
            else:
                outfile = bmfconv.convert_file(
                    args.infile, args.outfile, variant=args.variant
                )
                logging.debug("Converted '%s' to '%s'.", args.infile, outfile)
            if args.overlay:
                _overlay(
                    bmfconv.load_descriptor(args.infile),
                    args.overlay, args.overlay_out
                )
    except ScriptError as e:
        return e.status
    return 0


if __name__ == '__main__':
    sys.exit(main())
