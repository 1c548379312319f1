# SPDX-FileCopyrightText: 2025-present rname contributors
#
# SPDX-License-Identifier: MIT
__version__ = "0.3.0"
