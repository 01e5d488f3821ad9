#!/usr/bin/env python
""" report.py
Copyright (C) 2021 Dale V. Patterson (dale.v.patterson@gmail.com)

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.

Defines the output of results and the informational texts (help, examples,
units, version)
"""

#__name__ = 'report'
__license__ = 'GPLv3'
__version__ = '0.0.3'
__date__ = 'June 2021'
__author__ = 'Dale Patterson'
__maintainer__ = 'Dale Patterson'
__email__ = 'dale.v.patterson@gmail.com'
__status__ = 'Development'

import muzz
import muzz.ballistics as bls
from muzz.utils import round_half

"""
 Results are formatted one of two ways
  verbose: all values w/ units i.e. 230 gr @ 900 ft/s = 414 lbf
  terse: just the result i.e. 414
 and rounded or exact. In verbose, rounded Imperial rounds mass, velocity and
 energy whereas rounded Si only rounds energy (mass and velocity keep 2
 decimals). In terse, only the format (%.0f or %.2f) changes
"""

#### MUZZLE ENERGY

def result(mass,velocity,energy,opts):
    """
     formats muzzle energy results
    :param mass: mass of the projectile
    :param velocity: velocity of the projectile
    :param energy: muzzle energy of the projectile
    :param opts: Options
    :return: a single line (no newline)
    terse output is only the value of opts.target
    """
    if not opts.verbose:
        val = {'mass':mass,'velocity':velocity,'energy':energy}[opts.target.value]
        return "{:.2f}".format(val) if opts.exact else "{:.0f}".format(val)

    if opts.si:
        if opts.exact:
            return "{:.2f} g @ {:.2f} m/s = {:.2f} J".format(mass,velocity,energy)
        return "{:.2f} g @ {:.2f} m/s = {:.0f} J".format(
            mass,velocity,round_half(energy)
        )

    if opts.exact:
        return "{:.2f} gr @ {:.2f} ft/s = {:.2f} lbf".format(mass,velocity,energy)
    return "{:.0f} gr @ {:.0f} ft/s = {:.0f} lbf".format(
        round_half(mass),round_half(velocity),round_half(energy)
    )

#### TAYLOR KNOCKOUT FORMULA

def tkof_result(mass,velocity,diameter,ko,opts):
    """
     formats Taylor Knockout Formula results. The score always has 2 decimals
     and the diameter is never rounded
    :param ko: the TKOF score
    """
    if not opts.verbose: return "{:.2f}".format(ko)

    if opts.si:
        return "{:.2f} g @ {:.2f} m/s ({:.2f} mm diameter) = {:.2f} TKOF".format(
            mass,velocity,diameter,ko
        )

    if opts.exact:
        return '{:.2f} gr @ {:.2f} ft/s ({:.3f}" diameter) = {:.2f} TKOF'.format(
            mass,velocity,diameter,ko
        )
    return '{:.0f} gr @ {:.0f} ft/s ({:.3f}" diameter) = {:.2f} TKOF'.format(
        round_half(mass),round_half(velocity),diameter,ko
    )

#### INFORMATIONAL

USAGE = "Usage:  muzz [OPTION] MASS VELOCITY [DIAMETER]"

HELP = """{usage}

The program is used primarily to calculate the muzzle energy of projectiles.

Imperial gravity acceleration constants (K = 2 * GAC * {gpl}) :
GAC-1 (industry):  {g1}\tGAC-2 (standard):  {g2}

Options
  -h\t\tPrint this help text
  -H\t\tPrint additional information on units used, etc.
  -E\t\tPrint example usage
  -V\t\tPrint version and author info
  -S or q\tSilent (quiet) mode; print only the resultant number
  -s\t\tUse Si (metric) units of measure - grams, m/s, joules
  -i\t\tUse Imperial units - grains, ft/s, lbf (default)
  -m\t\tCalculate for mass (num1 = velocity, num2 = energy)
  -v\t\tCalculate for velocity (num1 = mass, num2 = energy)
  -e\t\tCalculate for energy (num1 = mass, num2 = velocity) (default)
  -K\t\tUse industry standard imperial constant ({kimp:,.0f}) (default)
  -k [num]\tCustom user constant
  -c\t\tCalculate constant using 'industry' GAC-1
  -C\t\tCalculate constant using standard GAC-2
  -p\t\tBe precise (do not round any numbers)
  -t\t\tUse Taylor Knockout Formula (give mass, velocity, diameter)""".format(
    usage=USAGE,gpl=bls.GR_PER_LB,g1=bls.G_APPROX,g2=bls.G_STD,kimp=bls.K_IMP
)

EXAMPLES = """Examples:

muzz 230 900
  Returns muzzle energy of a 230 grain bullet @ 900 ft/s

muzz -s 15 270
  Using Si units of measure, returns joules (15grams @ 270 m/s)

muzz -qp 230 900
  Same, but only the number and with nothing rounded

muzz -mq 900 414
  Given the velocity and muzzle energy, it will return only the mass
  of the projectile.

muzz -t 230 860 .45
  Prints result using Taylor Knockout Formula, with the params being
  the mass (grains), velocity (ft/s) and diameter

muzz -ts 15 255 11.6
  Same, but using Si units (grams, meters/second, mm)"""

UNITS = """All units of measure are Imperial by default.

Weight:
  Si:\t\tGrams (g)
  Imperial:\tGrains (gr) ({gpl} per pound)

Velocity:
  Si:\t\tMeters per second (m/s)
  Imperial:\tFeet per second (ft/s)

Diameter:
  Si:\t\tMillimeters (mm)
  Imperial:\tInch caliber (fractions of inch) (ex.: .45)

Energy:
  Si:\t\tJoules (J)
  Imperial:\tFoot-pounds (lbf)


To calculate the standard muzzle energy of a projectile:

  Si:\t\t( (mass / 2) * (velocity*velocity)) / K
  Imperial:\t( mass * (velocity*velocity)) / K

  Default values of K are {kimp:.0f} (Imperial) or {ksi:.0f} (Si).
  To use different numbers to calculate K, use the '-c' or '-C' options:
    -c:\t\tK = 2 * {g1} * {gpl}
    -C:\t\tK = 2 * {g2} * {gpl}

  You can also use the '-k' option to use a custom constant.

The Taylor Knockout Formula, if used, will return a number that's roughly the
same regardless of whether or not the user chooses Si or Imperial units
of measure.  The formula is as follows:

  Si:\t\t( mass * velocity * diameter ) / {tsi:.0f}
  Imperial:\t( mass * velocity * diameter ) / {timp:.0f}
""".format(
    gpl=bls.GR_PER_LB,kimp=bls.K_IMP,ksi=bls.K_SI,g1=bls.G_APPROX,g2=bls.G_STD,
    tsi=bls.TKOF_SI,timp=bls.TKOF_IMP
)

VERSION = "muzz, version {}\n{} <{}>".format(
    muzz.__version__,muzz.__author__,muzz.__email__
)
