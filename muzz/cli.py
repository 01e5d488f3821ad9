#!/usr/bin/env python
""" cli.py
Copyright (C) 2021 Dale V. Patterson (dale.v.patterson@gmail.com)

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.

Defines the muzz command line: reads flags and values, calculates and prints
the result

 Usage:  muzz [OPTION] MASS VELOCITY [DIAMETER]

 flags are single characters and can be combined (i.e. -qp). Flags in the
 same group override each other, the last one given is used
"""

#__name__ = 'cli'
__license__ = 'GPLv3'
__version__ = '0.1.2'
__date__ = 'June 2021'
__author__ = 'Dale Patterson'
__maintainer__ = 'Dale Patterson'
__email__ = 'dale.v.patterson@gmail.com'
__status__ = 'Development'

import re
import sys
import logging
import argparse
import muzz.report as report
from muzz import MuzzException
from muzz.ballistics import UNSET
from muzz.ballistics.energy import resolve_k,solve
from muzz.ballistics.knockout import tkof
from muzz.options import (
    Options,Units,Target,Constant,Verbosity,Precision,Formula
)
from muzz.utils import to_float

logger = logging.getLogger(__name__)

class UsageError(MuzzException):
    def __init__(self,msg): super().__init__(msg)

HELP_HINT = "To view help, run with -h argument."

class _TextAction(argparse.Action):
    """ prints text and exits w/ success, the same as argparse's version action """
    def __init__(self,option_strings,text,dest=argparse.SUPPRESS,
                 default=argparse.SUPPRESS,help=None):
        super().__init__(
            option_strings=option_strings,dest=dest,default=default,nargs=0,
            help=help
        )
        self.text = text

    def __call__(self,parser,namespace,values,option_string=None):
        print(self.text)
        parser.exit()

class _CustomConstant(argparse.Action):
    """ -k NUM sets both the constant group and its value """
    def __call__(self,parser,namespace,values,option_string=None):
        namespace.constant = Constant.CUSTOM
        namespace.custom_k = values

class _Parser(argparse.ArgumentParser):
    """
     argument parser whose errors (unknown flag, missing -k value) are usage
     errors (exit status 1) and that reads any number starting w/ '-' (i.e.
     -1e3) as a value rather than a flag
    """
    def __init__(self,*args,**kwargs):
        super().__init__(*args,**kwargs)
        self._negative_number_matcher = re.compile(r'^-\.?\d')

    def error(self,message): raise UsageError(message)

def parser():
    """ returns the argument parser """
    p = _Parser(
        prog='muzz',usage=report.USAGE[len("Usage:  "):],add_help=False,
    )
    # informational, exit immediately
    p.add_argument('-h',action=_TextAction,text=report.HELP)
    p.add_argument('-H',action=_TextAction,text=report.UNITS)
    p.add_argument('-E',action=_TextAction,text=report.EXAMPLES)
    p.add_argument('-V',action=_TextAction,text=report.VERSION)

    p.add_argument('-S','-q',dest='verbosity',action='store_const',
                   const=Verbosity.TERSE,default=Verbosity.VERBOSE)
    p.add_argument('-s',dest='units',action='store_const',const=Units.SI,
                   default=Units.IMPERIAL)
    p.add_argument('-i',dest='units',action='store_const',const=Units.IMPERIAL)
    p.add_argument('-m',dest='target',action='store_const',const=Target.MASS,
                   default=Target.ENERGY)
    p.add_argument('-v',dest='target',action='store_const',const=Target.VELOCITY)
    p.add_argument('-e',dest='target',action='store_const',const=Target.ENERGY)
    p.add_argument('-K',dest='constant',action='store_const',
                   const=Constant.DEFAULT,default=Constant.DEFAULT)
    p.add_argument('-c',dest='constant',action='store_const',const=Constant.APPROX)
    p.add_argument('-C',dest='constant',action='store_const',
                   const=Constant.STANDARD)
    p.add_argument('-k',dest='custom_k',action=_CustomConstant,type=to_float,
                   metavar='NUM',default=None)
    p.add_argument('-p',dest='precision',action='store_const',
                   const=Precision.EXACT,default=Precision.ROUNDED)
    p.add_argument('-t',dest='formula',action='store_const',
                   const=Formula.KNOCKOUT,default=Formula.STANDARD)
    p.add_argument('values',nargs='*',metavar='VALUE')
    return p

def parse_args(argv):
    """
     reads flags and values from argv
    :param argv: list of arguments (without the program name)
    :return: tuple t = (Options,list of value strings)
    """
    ns = parser().parse_intermixed_args(argv)
    opts = Options(
        units=ns.units,
        target=ns.target,
        constant=ns.constant,
        custom_k=ns.custom_k,
        verbosity=ns.verbosity,
        precision=ns.precision,
        formula=ns.formula,
    )
    logger.debug("%s values=%s",opts,ns.values)
    return opts,ns.values

def read_values(opts,vals):
    """
     assigns values to mass, velocity, energy and diameter
    :param opts: Options
    :param vals: list of value strings
    :return: tuple t = (mass,velocity,energy,diameter) where values not given are
     UNSET
    standard formula reads the first two values based on the target
     energy: mass, velocity
     mass: velocity, energy
     velocity: mass, energy
    the Taylor Knockout Formula reads the first three (mass, velocity, diameter)
    extra values are ignored
    """
    if not vals: raise UsageError("Parameters required")
    if len(vals) == 1: raise UsageError("Need more than one parameter")

    mass = velocity = energy = diameter = UNSET
    if opts.knockout:
        if len(vals) < 3:
            raise UsageError(
                "The Taylor Knockout Formula requires three parameters:\n"
                "Mass, Velocity and Diameter of projectile"
            )
        mass,velocity,diameter = [to_float(v) for v in vals[:3]]
    else:
        a,b = [to_float(v) for v in vals[:2]]
        if opts.target == Target.ENERGY: mass,velocity = a,b
        elif opts.target == Target.MASS: velocity,energy = a,b
        else: mass,energy = a,b
    return mass,velocity,energy,diameter

def run(argv):
    """
     calculates and prints the result
    :param argv: list of arguments (without the program name)
    :return: the exit status
    """
    if not argv: raise UsageError("Too few arguments")
    opts,vals = parse_args(argv)
    mass,velocity,energy,diameter = read_values(opts,vals)

    if opts.knockout:
        ko = tkof(mass,velocity,diameter,opts.units)
        print(report.tkof_result(mass,velocity,diameter,ko,opts))
    else:
        k = resolve_k(opts.units,opts.constant,opts.custom_k)
        logger.debug("K = %s",k)
        mass,velocity,energy = solve(
            opts.target,mass,velocity,energy,opts.units,k
        )
        print(report.result(mass,velocity,energy,opts))
    return 0

def main(argv=None):
    """
     console entry point, returns the exit status
      0 on success or after printing help, examples, units or version
      1 on a usage error
    """
    logging.basicConfig(
        level=logging.WARNING,format="%(name)s: %(levelname)s: %(message)s"
    )
    if argv is None: argv = sys.argv[1:]
    try:
        return run(argv)
    except SystemExit as e:
        # informational flags exit the parser once their text is printed
        return e.code or 0
    except UsageError as e:
        print("ERROR:  {}".format(e),file=sys.stderr)
        print(report.USAGE,file=sys.stderr)
        print("\n"+HELP_HINT,file=sys.stderr)
        return 1
