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

"""Point and triangle value types."""

from typing import NamedTuple

import pyproj


class Point3D(NamedTuple):
    x: float
    y: float
    z: float


class Triangle:
    def __init__(self, p0, p1, p2, crs=None):
        """
        Create a triangle from three corner points.

        @param p0, p1, p2 - corners as Point3D or any (x, y, z) sequence
        @param crs - coordinate reference system of the corners (EPSG code,
            proj string or pyproj.CRS). None means the corners carry no
            reference system and are treated as Cartesian.
        """
        self.corners = tuple(Point3D(*(float(c) for c in p)) for p in (p0, p1, p2))
        self.crs = crs

    def corner_points(self):
        return self.corners

    def has_geographic_crs(self):
        if self.crs is None:
            return False
        return pyproj.CRS.from_user_input(self.crs).is_geographic

    def __repr__(self):
        return f"Triangle({self.corners[0]}, {self.corners[1]}, {self.corners[2]}, crs={self.crs!r})"
