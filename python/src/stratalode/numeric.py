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

"""Angle conversion constants and small vector helpers."""

import math

import numpy as np

RAD_TO_DEGREE = 180.0 / math.pi
RAD_TO_GON = 200.0 / math.pi


def round_half_up(value):
    """Round to the nearest integer, ties going towards +infinity (22.5 -> 23)."""
    return int(math.floor(value + 0.5))


def cross_product(v1, v2):
    return tuple(float(c) for c in np.cross(np.asarray(v1, dtype=float), np.asarray(v2, dtype=float)))


def vector_length(v):
    return float(np.linalg.norm(np.asarray(v, dtype=float)))


def vector_angle(v1, v2):
    """Unsigned angle in radians between two vectors, in [0, pi].

    The cosine is clipped to [-1, 1] so rounding noise on (anti)parallel
    vectors does not turn into NaN.
    """
    a = np.asarray(v1, dtype=float)
    b = np.asarray(v2, dtype=float)
    cos_phi = np.dot(a, b) / (np.linalg.norm(a) * np.linalg.norm(b))
    return float(np.arccos(np.clip(cos_phi, -1.0, 1.0)))
