# -*- coding: utf-8 -*-
from __future__ import annotations
from typing import List

import pytest

from maxdefense.business_objects import ArmorItem


@pytest.fixture
def abcd() -> List[ArmorItem]:
    return [
        ArmorItem("A", 2, 3.0),
        ArmorItem("B", 3, 4.0),
        ArmorItem("C", 4, 5.0),
        ArmorItem("D", 5, 6.0),
    ]


@pytest.fixture
def write_catalog(tmp_path):
    def _write(text: str, name: str = "armor.csv") -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write
