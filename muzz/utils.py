#!/usr/bin/env python
""" utils.py
Copyright (C) 2021 Dale V. Patterson (dale.v.patterson@gmail.com)

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.

Defines utility functions for reading and rounding values
"""

#__name__ = 'utils'
__license__ = 'GPLv3'
__version__ = '0.0.4'
__date__ = 'June 2021'
__author__ = 'Dale Patterson'
__maintainer__ = 'Dale Patterson'
__email__ = 'dale.v.patterson@gmail.com'
__status__ = 'Development'

import logging
import numpy as np
from muzz.ballistics import UNSET

logger = logging.getLogger(__name__)

# helper function
def is_float(s):
    try:
        float(s)
        return True
    except (TypeError,ValueError):
        return False

def to_float(s):
    """
    reads s as a floating point number. float() does not depend on locale
    :param s: the string to read
    :return: s as a np.double or UNSET if s is not a number
    NOTE: an unreadable value does not stop the calculation, the result will
     just be nonsense
    """
    if is_float(s): return np.double(s)
    logger.debug("'%s' is not a number, using %s",s,UNSET)
    return np.double(UNSET)

def round_half(x):
    """
    rounds x to the nearest integer with halves rounded away from zero (i.e.
     2.5 -> 3., -2.5 -> -3.). np.round rounds halves to even
    :param x: the value to round
    :return: rounded value as np.double, inf and nan are returned as is
    """
    x = np.double(x)
    t = np.trunc(x)
    with np.errstate(invalid='ignore'):
        return t + np.copysign(np.abs(x-t) >= 0.5,x)
