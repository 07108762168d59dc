# SPDX-License-Identifier: GPL-3.0-or-later

# Copyright (C) 2026 Darkmine Pty Ltd

# This file is part of stratalode.

# stratalode is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

# stratalode is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.

# You should have received a copy of the GNU General Public License
# along with stratalode.  If not, see <https://www.gnu.org/licenses/>.

"""Exceptions raised by stratalode.

Only fatal conditions are exceptions. Soft failures (unknown header, skipped
lines) are reported as issue dicts, see ``stratalode.well.importer``.
"""


class StratalodeError(Exception):
    """Base class for all stratalode errors."""


class ResourceError(StratalodeError, OSError):
    """An input file is missing or cannot be read."""

    def __init__(self, message, path=None):
        super().__init__(message)
        self.path = path


class ParseError(StratalodeError, ValueError):
    """Unexpected failure while processing a line of an input file."""

    def __init__(self, message, line_number=None, source=None):
        super().__init__(message)
        self.line_number = line_number
        self.source = source


class CrsIncompatibilityError(StratalodeError, ValueError):
    """Geometry refers to a geographic CRS where a projected one is required."""


class NumericInvariantError(StratalodeError, ArithmeticError):
    """A computed value left its guaranteed range (a computation bug, not bad input)."""
