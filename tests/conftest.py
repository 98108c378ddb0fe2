import pytest

import quantypes.units  # noqa: F401  (wires the default relation table)
from quantypes.core.algebra import RelationTable


@pytest.fixture
def relations():
    """An empty relation table, isolated from DEFAULT_RELATIONS."""
    return RelationTable()
