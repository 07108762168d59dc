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

"""Dip, azimuth and Clar notation for triangulated surfaces.

Vertex ordering does not matter: the triangle normal is always turned to
point upwards, so dip stays within 0...90 degrees and the horizontal part of
the normal points downslope.

Convention: x heading East, y heading North, azimuth clockwise from North
(N = 0, E = 90, S = 180, W = 270).
"""

import math

from stratalode.errors import CrsIncompatibilityError, NumericInvariantError
from stratalode.numeric import (
    RAD_TO_DEGREE, RAD_TO_GON, cross_product, round_half_up, vector_angle, vector_length,
)

COMPASS_POINTS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")
NORTH = (0.0, 1.0, 0.0)


def _direction(triangle):
    p0, p1, p2 = triangle.corner_points()
    edge1 = (p1.x - p0.x, p1.y - p0.y, p1.z - p0.z)
    edge2 = (p2.x - p0.x, p2.y - p0.y, p2.z - p0.z)
    dx, dy, dz = cross_product(edge1, edge2)
    if dz < 0.0:
        dx, dy, dz = -dx, -dy, -dz
    return dx, dy, dz


class Orientation:
    def __init__(self, triangle):
        """
        Derive the orientation of a triangle.

        Raises CrsIncompatibilityError if the triangle corners refer to a
        geographic (angular) coordinate reference system, since dip and
        azimuth need projected coordinates.
        """
        if triangle.has_geographic_crs():
            raise CrsIncompatibilityError(
                f"Orientation requires projected coordinates, got geographic CRS {triangle.crs!r}"
            )
        self._dir = _direction(triangle)

    @property
    def direction(self):
        """Upward facing (unnormalized) triangle normal as (dx, dy, dz)."""
        return self._dir

    def has_zero_area(self):
        """True for degenerate (collinear) triangles. Implies is_plain() and is_vertical()."""
        return vector_length(self._dir) == 0.0

    def is_plain(self):
        """True for triangles parallel to the xy-plane."""
        return self._dir[0] == 0.0 and self._dir[1] == 0.0

    def is_vertical(self):
        """True for triangles parallel to the z-axis."""
        return self._dir[2] == 0.0

    def dip_rad(self):
        """Angle between the triangle plane and the horizontal in radians, in [0, pi/2].

        This is the complement of the normal's elevation, so a gentle slope
        gives a small value. Non-finite results raise NumericInvariantError.
        """
        if self.has_zero_area() or self.is_plain():
            return 0.0
        if self.is_vertical():
            return math.pi / 2.0

        # the normal's elevation above its horizontal projection is the complement of the dip
        dx, dy, _ = self._dir
        dip = math.pi / 2.0 - vector_angle(self._dir, (dx, dy, 0.0))
        if not 0.0 <= dip <= math.pi / 2.0:
            raise NumericInvariantError(f"numerical dip computation error: {dip} rad for direction {self._dir}")
        return dip

    def dip(self):
        """Dip in degrees, 0 for horizontal and 90 for vertical triangles (0 for zero area)."""
        return self.dip_rad() * RAD_TO_DEGREE

    def dip_int(self):
        return round_half_up(self.dip())

    def dip_gon(self):
        return self.dip_rad() * RAD_TO_GON

    def dip_gon_int(self):
        return round_half_up(self.dip_gon())

    def azimuth_rad(self):
        """Azimuth of the downslope direction in radians, in [0, 2*pi).

        Horizontal and zero-area triangles report 0.
        """
        if self.has_zero_area() or self.is_plain():
            return 0.0
        dx, dy, _ = self._dir
        if dx == 0.0:
            return 0.0 if dy > 0.0 else math.pi

        phi = vector_angle(NORTH, (dx, dy, 0.0))
        azimuth = phi if dx > 0.0 else 2.0 * math.pi - phi
        if azimuth == 2.0 * math.pi:
            return 0.0
        if not 0.0 <= azimuth < 2.0 * math.pi:
            raise NumericInvariantError(f"numerical azimuth computation error: {azimuth} rad for direction {self._dir}")
        return azimuth

    def azimuth(self):
        return self.azimuth_rad() * RAD_TO_DEGREE

    def azimuth_int(self):
        """Azimuth in whole degrees, 0...359 (360 wraps to 0)."""
        res = round_half_up(self.azimuth())
        return 0 if res >= 360 else res

    def azimuth_gon(self):
        return self.azimuth_rad() * RAD_TO_GON

    def azimuth_gon_int(self):
        res = round_half_up(self.azimuth_gon())
        return 0 if res >= 400 else res

    def clar_notation(self):
        """Orientation as 'azimuth/dip' in whole degrees, e.g. '225/8'."""
        return f"{self.azimuth_int()}/{self.dip_int()}"

    def _compass_index(self):
        return round_half_up(self.azimuth() / 45.0) % 8

    def compass_direction(self):
        """One of N, NE, E, SE, S, SW, W, NW, or '-' for horizontal triangles."""
        if self.is_plain():
            return "-"
        return COMPASS_POINTS[self._compass_index()]

    def compass_direction_class(self):
        """Compass direction as class value: N=1, NE=2, ... NW=8, and 0 for horizontal triangles."""
        if self.is_plain():
            return 0
        return self._compass_index() + 1

    def __repr__(self):
        return f"Orientation(direction={self._dir}, clar={self.clar_notation()!r})"
