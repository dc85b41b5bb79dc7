# Copyright (C) 2023 Anthony Harrison
# SPDX-License-Identifier: Apache-2.0

VERSION = "0.1.0"
