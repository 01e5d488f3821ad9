#!/usr/bin/env python
""" __main__.py
Copyright (C) 2021 Dale V. Patterson (dale.v.patterson@gmail.com)

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.

Runs muzz as python -m muzz
"""

import sys
from muzz.cli import main

sys.exit(main())
