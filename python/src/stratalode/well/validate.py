# SPDX-License-Identifier: GPL-3.0-or-later

# Copyright (C) 2026 Darkmine Pty Ltd

# This file is part of stratalode.

# stratalode is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the license, or
# (at your option) any later version.

# stratalode is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.

# You should have received a copy of the GNU General Public License
# along with stratalode.  If not, see <https://www.gnu.org/licenses/>.

"""QA/QC helpers for well and marker tables."""

import pandas as pd

from stratalode.datamodel import DATUM, ELEVATION, MARKER_NAME, MAX_DEPTH, MD, WELL_NAME

SURFACE_MARKER = "surface"


def validate_wells(wells, name_col=WELL_NAME):
    issues = []
    counts = wells[name_col].value_counts()
    for well_name, count in counts.items():
        if count > 1:
            issues.append({"well_name": well_name, "type": "duplicate_well", "count": int(count)})
    return issues


def validate_markers(wells, markers, tolerance=0.01):
    """Cross-check markers against their wells.

    Returns a list of issue dicts: markers referencing no known well, measured
    depth beyond the well's maximum depth, and 'Surface' markers whose z does
    not match the well datum (ground level) within ``tolerance``.
    """
    issues = []
    first_wells = wells.drop_duplicates(subset=[WELL_NAME], keep="first").set_index(WELL_NAME)

    for idx, row in markers.iterrows():
        well_name = row.get(WELL_NAME)
        if well_name not in first_wells.index:
            issues.append({"well_name": well_name, "row_index": idx, "type": "unknown_well", "row": row.to_dict()})
            continue
        well = first_wells.loc[well_name]

        md = row.get(MD)
        max_depth = well.get(MAX_DEPTH)
        if not pd.isna(md) and not pd.isna(max_depth) and md > max_depth:
            issues.append({"well_name": well_name, "row_index": idx, "type": "md_exceeds_max_depth",
                           "value": md, "row": row.to_dict()})

        marker_name = row.get(MARKER_NAME)
        if isinstance(marker_name, str) and marker_name.strip().lower() == SURFACE_MARKER:
            z = row.get(ELEVATION)
            datum = well.get(DATUM)
            if not pd.isna(z) and not pd.isna(datum) and abs(z - datum) > tolerance:
                issues.append({"well_name": well_name, "row_index": idx, "type": "surface_mismatch",
                               "value": z - datum, "row": row.to_dict()})

    return issues
