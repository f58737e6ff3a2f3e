# Copyright 2026 rbxapi Contributors
# SPDX-License-Identifier: Apache-2.0

"""Outputs derived from a parsed database: JSON artifacts and property tables."""

from rbxapi.export.artifact import ARTIFACT_SUFFIX, deserialize, read_artifact, serialize, write_artifact
from rbxapi.export.properties import DEFAULT_EXCLUDED_TAGS, format_property_table, property_table

__all__ = [
    "serialize",
    "deserialize",
    "write_artifact",
    "read_artifact",
    "ARTIFACT_SUFFIX",
    "property_table",
    "format_property_table",
    "DEFAULT_EXCLUDED_TAGS",
]
