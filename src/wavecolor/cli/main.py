#!/usr/bin/env python3
# -*- coding: utf-8 -*-
'''
Created on 5 Oct 2026

Copyright © 2026 Wavecolor developers

This file is part of Wavecolor.

Wavecolor is free software: you can redistribute it and/or modify it under the terms
of the GNU General Public License version 2 as published by the Free Software
Foundation.

Wavecolor is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY;
without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR
PURPOSE. See the GNU General Public License for more details.

You should have received a copy of the GNU General Public License along with
Wavecolor. If not, see http://www.gnu.org/licenses/.
'''
# This is a basic command line interface to the colour conversions

import argparse
import logging
import sys

import wavecolor
from wavecolor import conversion, spectrum


def convert(options):
    """
    Run the conversion requested on the command line
    options (argparse.Namespace): the parsed options, with exactly one action set
      (if none of the others, --hex)
    return (3 floats in 0..1): the resulting colour
    raises ValueError: if the input cannot be converted
    """
    if options.wavelength is not None:
        logging.debug("Converting wavelength %g nm", options.wavelength)
        return spectrum.wavelength_to_frgb(options.wavelength)
    elif options.hsv is not None:
        logging.debug("Converting HSV %s", options.hsv)
        return conversion.hsv_to_frgb(options.hsv)
    elif options.xyz is not None:
        logging.debug("Converting XYZ %s", options.xyz)
        return spectrum.xyz_to_frgb(options.xyz)
    elif options.frgb is not None:
        return tuple(options.frgb)
    else:
        return conversion.hex_to_frgb(options.hex)


def format_colour(frgb, fmt):
    """
    Convert the colour into a string for display
    frgb (3 floats in 0..1): the colour
    fmt ("css", "bytes" or "float"): how to display the colour
    return (str)
    """
    if fmt == "float":
        return " ".join("%.6f" % c for c in frgb)

    rgb = conversion.frgb_to_rgb(frgb)
    if fmt == "bytes":
        return " ".join("%d" % c for c in rgb)
    return conversion.rgb_to_css(rgb)


def main(args):
    """
    Handles the command line arguments
    args is the list of arguments passed
    return (int): value to return to the OS as program exit code
    """

    # arguments handling
    parser = argparse.ArgumentParser(prog="wavecolor-cli",
                                     description=wavecolor.__fullname__)

    parser.add_argument('--version', dest="version", action='store_true',
                        help="show program's version number and exit")
    opt_grp = parser.add_argument_group('Options')
    opt_grp.add_argument("--log-level", dest="loglev", metavar="<level>", type=int,
                         default=0, help="set verbosity level (0-2, default = 0)")
    fmt_grpe = opt_grp.add_mutually_exclusive_group()
    fmt_grpe.add_argument("--bytes", dest="fmt", action="store_const", const="bytes",
                          default="css", help="display the colour as 3 bytes (0-255)")
    fmt_grpe.add_argument("--float", dest="fmt", action="store_const", const="float",
                          help="display the colour as 3 floats (0-1)")
    cv_grp = parser.add_argument_group('Conversions')
    cv_grpe = cv_grp.add_mutually_exclusive_group()
    cv_grpe.add_argument("--wavelength", "-w", dest="wavelength", type=float,
                         metavar="<nm>",
                         help="colour of a monochromatic light of the given wavelength (in nm)")
    cv_grpe.add_argument("--hsv", dest="hsv", type=float, nargs=3,
                         metavar=("<h>", "<s>", "<v>"),
                         help="colour of the given hue, saturation, value (all 0-1, "
                         "the hue is a fraction of the colour circle)")
    cv_grpe.add_argument("--xyz", dest="xyz", type=float, nargs=3,
                         metavar=("<x>", "<y>", "<z>"),
                         help="colour of the given CIE 1931 XYZ coordinates")
    cv_grpe.add_argument("--rgb", dest="frgb", type=float, nargs=3,
                         metavar=("<r>", "<g>", "<b>"),
                         help="colour of the given red, green, blue (all 0-1)")
    cv_grpe.add_argument("--hex", dest="hex", metavar="<#rrggbb>",
                         help="colour of the given hexadecimal representation")

    options = parser.parse_args(args[1:])

    # Cannot use the internal feature, because it doesn't support multiline
    if options.version:
        print(wavecolor.__fullname__ + " " + wavecolor.__version__ + "\n" +
              wavecolor.__copyright__ + "\n" +
              "Licensed under the " + wavecolor.__license__)
        return 0

    # Set up logging before everything else
    if options.loglev < 0:
        logging.error("Log-level must be positive.")
        return 127
    loglev_names = [logging.WARNING, logging.INFO, logging.DEBUG]
    loglev = loglev_names[min(len(loglev_names) - 1, options.loglev)]

    # change the log format to be more descriptive
    handler = logging.StreamHandler()
    logging.getLogger().setLevel(loglev)
    handler.setFormatter(logging.Formatter('%(asctime)s (%(module)s) %(levelname)s: %(message)s'))
    logging.getLogger().addHandler(handler)

    # anything to do?
    if all(a is None for a in (options.wavelength, options.hsv, options.xyz,
                               options.frgb, options.hex)):
        logging.error("No action specified.")
        return 127

    try:
        frgb = convert(options)
        logging.info("Converted to %s", frgb)
        print(format_colour(frgb, options.fmt))
    except KeyboardInterrupt:
        logging.info("Interrupted before the end of the execution")
        return 1
    except ValueError as exp:
        logging.error("%s", exp)
        return 127
    except Exception:
        logging.exception("Unexpected error while performing action.")
        return 130

    return 0


def run():
    """ Entry point of the installed script """
    return main(sys.argv)


if __name__ == '__main__':
    ret = main(sys.argv)
    exit(ret)

# vim:tabstop=4:shiftwidth=4:expandtab:spelllang=en_gb:spell:
