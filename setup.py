#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from setuptools import setup, find_packages
import subprocess
import os
import sys

# To be updated to the current version
VERSION = "1.0.0"
# We cannot use the git version because it's not (always) available when building
# the package


def _get_version_git():
    """
    Get the version via git
    raises LookupError if no version info found
    """
    # change directory to root
    rootdir = os.path.dirname(__file__)

    try:
        out = subprocess.check_output(args=["git", "describe", "--tags", "--dirty", "--always"],
                                      cwd=rootdir, stderr=subprocess.DEVNULL)

        return out.strip().decode("utf-8")
    except (EnvironmentError, subprocess.CalledProcessError):
        raise LookupError("Unable to run git")

# Check version
try:
    gver = _get_version_git()
    if "-" in gver:
        sys.stderr.write("Warning: packaging a non-tagged version: %s\n" % gver)
    if VERSION != gver:
        sys.stderr.write("Warning: package version and git version don't match:"
                         " %s <> %s\n" % (VERSION, gver))
except LookupError:
    pass


setup(name='wavecolor',
      version=VERSION,
      description='Colour conversions between wavelength, CIE XYZ, sRGB, HSV and CSS',
      author='Wavecolor developers',
      classifiers=["License :: OSI Approved :: GNU General Public License v2 (GPLv2)",
                   "Operating System :: OS Independent",
                   "Programming Language :: Python :: 3",
                   "Intended Audience :: Science/Research",
                   "Topic :: Scientific/Engineering",
                   "Topic :: Multimedia :: Graphics",
                   "Environment :: Console",
                  ],
      package_dir={'': 'src'},
      packages=find_packages('src', exclude=["*.test"]),
      python_requires=">=3.6",
      install_requires=["numpy"],
      extras_require={"test": ["pytest"]},
      entry_points={
          "console_scripts": ["wavecolor-cli = wavecolor.cli.main:run"],
      },
     )
