# -*- coding: utf-8 -*-
"""
I/O helpers for loading armor catalogs.

Catalog format (caret-delimited text, UTF-8):
  - line 1            : header, ignored
  - every other line  : description^cost^defense (one trailing "^" allowed)

A line with a field count other than 3 is a schema error and no catalog is
returned. A 3-field row whose values do not describe a valid armor item
(unparseable numbers, non-positive or fractional cost, negative defense,
empty description) is skipped and loading continues.

These map directly to business_objects.items.ArmorItem.
"""

from __future__ import annotations
import csv
import logging
import math
from typing import List, Optional

from maxdefense.business_objects.errors import SchemaError, StateValidationError
from maxdefense.business_objects.items import ArmorItem

logger = logging.getLogger(__name__)

FIELD_DELIMITER = "^"
EXPECTED_FIELDS = 3


def _parse_number(field: str) -> Optional[float]:
    try:
        value = float(field.strip())
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def _parse_row(fields: List[str]) -> Optional[ArmorItem]:
    description, cost_field, defense_field = fields
    cost = _parse_number(cost_field)
    defense = _parse_number(defense_field)
    if cost is None or defense is None:
        return None
    if not cost.is_integer():
        return None
    try:
        return ArmorItem(description=description, cost=int(cost), defense=defense)
    except StateValidationError:
        return None


def load_armor_database(path: str) -> List[ArmorItem]:
    """
    Load all valid armor items from a caret-delimited catalog file.

    Raises
    ------
    SchemaError
        If the file cannot be opened, or any line does not have exactly
        three fields.
    """
    items: List[ArmorItem] = []
    skipped = 0
    try:
        with open(path, "r", newline="", encoding="utf-8") as f:
            reader = csv.reader(f, delimiter=FIELD_DELIMITER, quoting=csv.QUOTE_NONE)
            for line_number, fields in enumerate(reader, start=1):
                # First line is a header row
                if line_number == 1:
                    continue
                # A trailing delimiter ends the last field; it does not open a new one.
                if fields and fields[-1] == "":
                    fields = fields[:-1]
                if len(fields) != EXPECTED_FIELDS:
                    raise SchemaError(
                        f"{path}:{line_number}: invalid field count; "
                        f"want {EXPECTED_FIELDS} but got {len(fields)}"
                    )
                item = _parse_row(fields)
                if item is None:
                    skipped += 1
                    logger.debug("%s:%d: skipping invalid row %r", path, line_number, fields)
                    continue
                items.append(item)
    except OSError as e:
        raise SchemaError(f"{path}: cannot open armor database: {e}") from e

    logger.info("Loaded %d armor items from %s (%d rows skipped)", len(items), path, skipped)
    return items
