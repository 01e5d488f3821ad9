#!/usr/bin/env python
""" ballistics
Copyright (C) 2021 Dale V. Patterson (dale.v.patterson@gmail.com)

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.

Top level directory for ballistics package
Contains:
 energy: muzzle energy, mass and velocity formulas and the constant K
 knockout: Taylor Knockout Formula

Defines constants used by the formulas
"""

#__name__ = 'ballistics'
__license__ = 'GPLv3'
__version__ = '0.0.3'
__date__ = 'June 2021'
__author__ = 'Dale V. Patterson'
__maintainer__ = 'Dale V. Patterson'
__email__ = 'dale.v.patterson@gmail.com'
__status__ = 'Development'

# CONSTANTS

# sentinel for a value that was not given (or could not be read)
UNSET = -1.

# gravitational acceleration (ft/s^2)
G_APPROX = 32.163   # 'small arms' industry approximation
G_STD    = 32.1739  # standard, not approximated

GR_PER_LB = 7000 # grains per pound

# K, the divisor of m*v^2 in the energy formula
#  Imperial K = 2 * gravitational acceleration * grains per pound when
#  calculated. 450240 is the industry number used when it is not
K_IMP     = 450240.
K_APPROX  = 2*G_APPROX*GR_PER_LB
K_STD     = 2*G_STD*GR_PER_LB
K_SI      = 1000. # grams to kilograms

# Taylor Knockout Formula divisors
TKOF_IMP = 7000.
TKOF_SI  = 3500.
