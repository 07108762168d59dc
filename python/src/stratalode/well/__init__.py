# Copyright (C) 2026 Darkmine Pty Ltd
# SPDX-License-Identifier: GPL-3.0-or-later

from . import data, importer, model, validate

__all__ = [
	"data",
	"importer",
	"model",
	"validate",
]
