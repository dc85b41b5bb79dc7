# Copyright (C) 2023 Anthony Harrison
# SPDX-License-Identifier: Apache-2.0

"""
This tool writes the license file for a project
"""

import sys

from license4project.cli import main

sys.exit(main())
