#!/usr/bin/env python
"""  energy.py
Copyright (C) 2021 Dale Patterson (dale.v.patterson@gmail.com)

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.

Defines the muzzle energy formula, its inverses (mass and velocity) and the
constant K they divide/multiply by
"""

#__name__ = 'energy'
__license__ = 'GPLv3'
__version__ = '0.0.5'
__date__ = 'June 2021'
__author__ = 'Dale Patterson'
__maintainer__ = 'Dale Patterson'
__email__ = 'dale.v.patterson@gmail.com'
__status__ = 'Development'

import logging
import numpy as np
import muzz.ballistics as bls
from muzz import MuzzException
from muzz.options import Units,Target,Constant

logger = logging.getLogger(__name__)

class EnergyException(MuzzException):
    def __init__(self,msg): super().__init__(msg)

"""
 All functions take the unit system and K explicitly, units are
  Imperial: mass (gr), velocity (ft/s), energy (lbf)
  Si: mass (g), velocity (m/s), energy (J)
 Values are np.double so that division by zero and the square root of a
 negative number return inf/nan rather than raise
"""

#### CONSTANT

def resolve_k(units=Units.IMPERIAL,constant=Constant.DEFAULT,custom_k=None):
    """
     finds the constant K for a single calculation
    :param units: Units
    :param constant: Constant, how to find K
    :param custom_k: user supplied K, used only if constant is Constant.CUSTOM
    :return: K as np.double
     Imperial K is 450240 (default) or 2 * G * 7000 where G is the approximated
     or standard gravitational acceleration. Si K is always 1000 unless the
     user supplied K, a user supplied K is never changed
    """
    if constant == Constant.CUSTOM:
        if custom_k is None:
            raise EnergyException("Custom constant requires a value")
        k = np.double(custom_k)
        if not k > 0: logger.warning("Constant K (%s) is not positive",k)
        return k

    if constant == Constant.DEFAULT: k = bls.K_IMP
    elif constant == Constant.APPROX: k = bls.K_APPROX
    elif constant == Constant.STANDARD: k = bls.K_STD
    else: raise EnergyException("Invalid constant ({})".format(constant))

    if units == Units.SI: k = bls.K_SI
    return np.double(k)

#### ENERGY

def get_energy(mass,velocity,units,k):
    """
     calculates muzzle energy given mass and velocity
    :param mass: mass of the projectile
    :param velocity: velocity of the projectile
    :param units: Units
    :param k: the constant K
    :return: energy
     Si: E = (m / 2) * v^2 / K
     Imperial: E = m * v^2 / K
    """
    m,v,k = np.double(mass),np.double(velocity),np.double(k)
    with np.errstate(divide='ignore',invalid='ignore',over='ignore'):
        if units == Units.SI: return (m/2.)*np.power(v,2) / k
        return m*np.power(v,2) / k

#### MASS

def get_mass(velocity,energy,units,k):
    """
     calculates mass given velocity and muzzle energy
     Si: m = (2 * E / v^2) * K
     Imperial: m = (E / v^2) * K
    """
    v,e,k = np.double(velocity),np.double(energy),np.double(k)
    with np.errstate(divide='ignore',invalid='ignore',over='ignore'):
        if units == Units.SI: return (2.*e / np.power(v,2))*k
        return (e / np.power(v,2))*k

#### VELOCITY

def get_velocity(mass,energy,units,k):
    """
     calculates velocity given mass and muzzle energy (non-negative root)
     Si: v = sqrt((2 * E / m) * K)
     Imperial: v = sqrt((E / m) * K)
    """
    m,e,k = np.double(mass),np.double(energy),np.double(k)
    with np.errstate(divide='ignore',invalid='ignore',over='ignore'):
        if units == Units.SI: return np.sqrt((2.*e / m)*k)
        return np.sqrt((e / m)*k)

def solve(target,mass,velocity,energy,units,k):
    """
     solves for target given the other two values
    :param target: Target, the value to solve for
    :param mass: mass (ignored if target is Target.MASS)
    :param velocity: velocity (ignored if target is Target.VELOCITY)
    :param energy: energy (ignored if target is Target.ENERGY)
    :param units: Units
    :param k: the constant K
    :return: tuple t = (mass,velocity,energy) w/ the target filled in
    """
    if target == Target.ENERGY:
        energy = get_energy(mass,velocity,units,k)
    elif target == Target.MASS:
        mass = get_mass(velocity,energy,units,k)
    elif target == Target.VELOCITY:
        velocity = get_velocity(mass,energy,units,k)
    else: raise EnergyException("Invalid target ({})".format(target))
    return np.double(mass),np.double(velocity),np.double(energy)
