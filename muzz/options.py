#!/usr/bin/env python
""" options.py
Copyright (C) 2021 Dale V. Patterson (dale.v.patterson@gmail.com)

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.

Defines the program options. Each group of mutually exclusive command line
flags maps to one enumeration and one attribute of Options
"""

#__name__ = 'options'
__license__ = 'GPLv3'
__version__ = '0.0.2'
__date__ = 'June 2021'
__author__ = 'Dale Patterson'
__maintainer__ = 'Dale Patterson'
__email__ = 'dale.v.patterson@gmail.com'
__status__ = 'Development'

import enum

class Units(enum.Enum):
    IMPERIAL = 'imperial' # grains, ft/s, lbf, inch caliber (default)
    SI       = 'si'       # grams, m/s, joules, mm

class Target(enum.Enum):
    ENERGY   = 'energy'   # given mass, velocity (default)
    MASS     = 'mass'     # given velocity, energy
    VELOCITY = 'velocity' # given mass, energy

class Constant(enum.Enum):
    DEFAULT  = 'default'  # industry standard K (default)
    APPROX   = 'approx'   # K calculated w/ approximated gravity
    STANDARD = 'standard' # K calculated w/ standard gravity
    CUSTOM   = 'custom'   # user supplied K

class Verbosity(enum.Enum):
    VERBOSE = 'verbose' # values w/ units (default)
    TERSE   = 'terse'   # result only

class Precision(enum.Enum):
    ROUNDED = 'rounded' # (default)
    EXACT   = 'exact'

class Formula(enum.Enum):
    STANDARD = 'standard' # muzzle energy (default)
    KNOCKOUT = 'knockout' # Taylor Knockout Formula

class Options(object):
    """
     program options, one attribute per group of mutually exclusive flags
      units = Units
      target = Target, the value to solve for
      constant = Constant, how K is found
      custom_k = user supplied K (only read if constant is Constant.CUSTOM)
      verbosity = Verbosity
      precision = Precision
      formula = Formula
    """
    def __init__(self,units=Units.IMPERIAL,target=Target.ENERGY,
                 constant=Constant.DEFAULT,custom_k=None,
                 verbosity=Verbosity.VERBOSE,precision=Precision.ROUNDED,
                 formula=Formula.STANDARD):
        self.units = units
        self.target = target
        self.constant = constant
        self.custom_k = custom_k
        self.verbosity = verbosity
        self.precision = precision
        self.formula = formula

    def __repr__(self):
        return "Options({})".format(
            ",".join("{}={}".format(k,v) for k,v in self.__dict__.items())
        )

    def __eq__(self,other):
        if not isinstance(other,Options): return NotImplemented
        return self.__dict__ == other.__dict__

    @property
    def si(self): return self.units == Units.SI

    @property
    def verbose(self): return self.verbosity == Verbosity.VERBOSE

    @property
    def exact(self): return self.precision == Precision.EXACT

    @property
    def knockout(self): return self.formula == Formula.KNOCKOUT
