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

"""
Stratalode Data Model

Column names shared by the well/marker tables and the orientation attribute
tables, so every loader and exporter agrees on the same keys.
"""

WELL_NAME = "well_name"
EASTING = "easting"
NORTHING = "northing"
ELEVATION = "elevation"
DATUM = "datum"
KB = "kb"
MAX_DEPTH = "max_depth"
MD = "md"
MARKER_NAME = "marker_name"

DIP = "dip"
STRIKE = "strike"
COMPASS_DIR = "compass_dir"
CLAR = "clar"

# Fixed header sequences recognised by the well importer, compared case-insensitively
WELL_LOCATION_HEADER = ("WELLNAME", "X", "Y", "DATUM", "KB", "MAXIMUM_DEPTH")
MARKER_HEADER = ("WELLNAME", "X", "Y", "Z", "MD", "MARKERNAME")
