"""
Configurações e fixtures compartilhadas para testes unitários
"""
from unittest.mock import MagicMock, patch

import pytest

from geocoords.application.ports.output.coordinate_record_port import FieldType
from geocoords.domain.value_objects.cartesian_coordinate import CartesianCoordinate
from geocoords.domain.value_objects.registry import ValueObjectRegistry
from geocoords.domain.value_objects.spheric_coordinate import SphericCoordinate
from geocoords.infrastructure.adapters.output.in_memory_coordinate_record import (
    InMemoryCoordinateRecord,
    coordinate_schema
)


@pytest.fixture(autouse=True)
def fresh_registries():
    """
    Cada teste roda com registries vazios (comparação exata)

    Nenhum teste depende das instâncias ou conversões criadas por outro.
    """
    with patch.object(CartesianCoordinate, '_registry', ValueObjectRegistry('cartesian')), \
            patch.object(SphericCoordinate, '_registry', ValueObjectRegistry('spheric')):
        yield


@pytest.fixture
def make_record():
    """
    Factory fixture para criar InMemoryCoordinateRecord com o schema padrão

    Usage:
        def test_something(make_record):
            record = make_record(values={'coordinate_type': 0})
            record = make_record(drop=['coordinate_3'])
    """
    def _make(values=None, drop=(), override=None) -> InMemoryCoordinateRecord:
        schema = coordinate_schema()
        for name in drop:
            schema.pop(name)
        schema.update(override or {})
        return InMemoryCoordinateRecord(schema=schema, values=values)

    return _make


@pytest.fixture
def record_mock():
    """Mock de registro que declara o schema padrão de coordenadas"""
    schema = coordinate_schema()
    record = MagicMock()
    record.field_type.side_effect = schema.get
    record.schema = schema
    return record


@pytest.fixture
def integer_component_schema():
    """Override de schema que declara coordinate_1 com o tipo errado"""
    return {'coordinate_1': FieldType.INTEGER}
