#!/usr/bin/env python
"""  knockout.py
Copyright (C) 2021 Dale Patterson (dale.v.patterson@gmail.com)

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.

Defines the Taylor Knockout Formula (TKOF), an alternative to muzzle energy
developed by big-game hunter John Taylor. It is not meant to be scientific,
it gives a single number meant to correspond to a bullet's real-world
performance. The score is roughly the same in either unit system and cannot
be reversed to get mass, velocity or diameter
"""

#__name__ = 'knockout'
__license__ = 'GPLv3'
__version__ = '0.0.2'
__date__ = 'June 2021'
__author__ = 'Dale Patterson'
__maintainer__ = 'Dale Patterson'
__email__ = 'dale.v.patterson@gmail.com'
__status__ = 'Development'

import numpy as np
import muzz.ballistics as bls
from muzz.options import Units

def tkof(mass,velocity,diameter,units):
    """
     calculates the Taylor Knockout Formula score
    :param mass: mass of the projectile (gr or g)
    :param velocity: velocity of the projectile (ft/s or m/s)
    :param diameter: diameter of the projectile (inch caliber or mm)
    :param units: Units
    :return: the TKOF score
     Si: TKOF = m * v * d / 3500
     Imperial: TKOF = m * v * d / 7000
    """
    div = bls.TKOF_SI if units == Units.SI else bls.TKOF_IMP
    with np.errstate(over='ignore',invalid='ignore'):
        return np.double(mass)*np.double(velocity)*np.double(diameter) / div
