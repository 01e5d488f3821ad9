#!/usr/bin/env python
""" PyMuzz v 1.0.1: A Python 3.x muzzle energy calculator
Copyright (C) 2021 Dale V. Patterson (dale.v.patterson@gmail.com)

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.

Top level directory for muzz program files
 calculates the muzzle energy of a projectile given its mass and velocity or,
 given two of mass, velocity and energy, the remaining one. Results can be
 given in Imperial or Si units and as a Taylor Knockout Formula score

Requirements
 - Python 3.x https://www.python.org

External Dependencies
 - numpy
    https://numpy.org
    pip3 install numpy

Usage
 - muzz [OPTION] MASS VELOCITY [DIAMETER]
 - python -m muzz [OPTION] MASS VELOCITY [DIAMETER]

DO NOT IMPORT *
"""

#__name__ = 'muzz'
__license__ = 'GPLv3'
__version__ = '1.0.1'
__date__ = 'June 2021'
__author__ = 'Dale V. Patterson'
__maintainer__ = 'Dale V. Patterson'
__email__ = 'dale.v.patterson@gmail.com'
__status__ = 'Development'

class MuzzException(Exception):
    def __init__(self,msg): super().__init__(msg)
