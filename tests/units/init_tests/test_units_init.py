import importlib

import pytest

import quantypes.units as units
from quantypes.core.algebra import DEFAULT_RELATIONS, RelationTable
from quantypes.units.relations import register_builtin_relations


def test_import_wires_default_relations():
    assert DEFAULT_RELATIONS.product_type(units.Mass, units.Acceleration) is units.Force
    assert DEFAULT_RELATIONS.product_type(units.Speed, units.Duration) is units.Length


def test_builtin_relations_on_a_fresh_table():
    table = RelationTable()
    register_builtin_relations(table)
    assert len(table) == 17  # 13 relations and 4 quotient-only entries
    assert table.product_type(units.Force, units.Length) is units.TorqueEnergy
    assert table.quotient_type(units.Energy, units.Force) is units.Length


def test_reimporting_relations_is_harmless():
    before = len(DEFAULT_RELATIONS)
    importlib.reload(importlib.import_module("quantypes.units.relations"))
    assert len(DEFAULT_RELATIONS) == before


def test_unknown_module_attribute_raises_attributeerror():
    with pytest.raises(AttributeError):
        _ = getattr(units, "definitely_not_a_public_attr")


def test_all_names_resolve():
    for name in units.__all__:
        assert getattr(units, name) is not None
