# -*- coding: utf-8 -*-
'''
Created on 3 Oct 2026

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

import logging
import os
import subprocess

# Generic metadata about the package

def _get_version_git():
    """
    Get the version via git
    raises LookupError if no version info found
    """
    # change directory to root
    rootdir = os.path.join(os.path.dirname(__file__), "..", "..") # wavecolor/src/wavecolor/../..

    if not os.path.isdir(rootdir) or not os.path.isdir(os.path.join(rootdir, ".git")):
        raise LookupError("Not in a git directory")

    try:
        out = subprocess.check_output(args=["git", "describe", "--tags", "--dirty", "--always"],
                                      cwd=rootdir)
        ver = out.strip().decode("utf-8", errors="replace")
        if ver.startswith("v"):
            ver = ver[1:]
        return ver
    except OSError:
        raise LookupError("Unable to run git")
    except subprocess.CalledProcessError as ex:
        logging.warning("Failed to run git: %s", ex)
        raise LookupError("Execution of git failed")


def _get_version_metadata():
    """
    Gets the version from the metadata of the installed distribution
    raises LookupError if no version info found
    """
    from importlib import metadata
    try:
        return metadata.version("wavecolor")
    except metadata.PackageNotFoundError:
        raise LookupError("Not installed as a distribution")


def _get_version():
    try:
        return _get_version_git()
    except LookupError:
        # fallback to the installed package metadata
        try:
            return _get_version_metadata()
        except LookupError:
            logging.warning("Unable to find the actual version")
            return "Unknown"


__version__ = _get_version()
__fullname__ = "Wavecolor colour conversion library"
__shortname__ = "Wavecolor"
__copyright__ = "Copyright © 2026 Wavecolor developers"
__license__ = "GNU General Public License version 2"

# vim:tabstop=4:shiftwidth=4:expandtab:spelllang=en_gb:spell:
