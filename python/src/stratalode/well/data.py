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

"""Table loaders for well exports.

Wrap the importer so callers get GeoDataFrames with the stratalode column
names and point geometry, ready for joins and plotting.
"""

from stratalode.well.importer import Schema, import_wells
from stratalode.well.model import WellRepository


def _import_expecting(source, expected, label, encoding, **kwargs):
    repo = WellRepository()
    report = import_wells(source, repository=repo, encoding=encoding, **kwargs)
    if report.schema is not expected:
        raise ValueError(
            f"{label} file \"{source}\" has {report.schema.value} header, expected {expected.value}"
        )
    return repo, report


def load_wells(source, crs=None, encoding="utf-8", **kwargs):
    """Load a well location file (WELLNAME X Y DATUM KB MAXIMUM_DEPTH).

    Returns a GeoDataFrame with columns well_name, easting, northing, datum,
    kb, max_depth and point geometry. The import report is kept in
    ``attrs["import_report"]``.
    """
    repo, report = _import_expecting(source, Schema.WELL_LOCATION, "Well location", encoding, **kwargs)
    out = repo.wells_frame(crs=crs)
    out.attrs["import_report"] = report.to_dict()
    return out


def load_markers(source, crs=None, encoding="utf-8", **kwargs):
    """Load a marker file (WellName X Y Z MD MarkerName)."""
    repo, report = _import_expecting(source, Schema.MARKER, "Marker", encoding, **kwargs)
    out = repo.markers_frame(crs=crs)
    out.attrs["import_report"] = report.to_dict()
    return out
