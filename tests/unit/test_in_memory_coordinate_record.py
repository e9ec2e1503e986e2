"""
Testes para o adapter InMemoryCoordinateRecord
"""
import pytest

from geocoords.application.ports.output.coordinate_record_port import FieldType
from geocoords.infrastructure.adapters.output.in_memory_coordinate_record import (
    InMemoryCoordinateRecord,
    coordinate_schema
)


class TestInMemoryCoordinateRecord:
    """Testes de acesso tipado aos campos"""

    def test_default_schema(self):
        """Testa o schema padrão do registro"""
        record = InMemoryCoordinateRecord()

        assert record.schema == coordinate_schema()
        assert record.field_type("coordinate_type") == FieldType.INTEGER
        assert record.field_type("coordinate_2") == FieldType.FLOAT
        assert record.field_type("caption") is None

    def test_set_and_get(self):
        """Testa escrita e leitura tipadas"""
        record = InMemoryCoordinateRecord()

        record.set_int("coordinate_type", 1)
        record.set_float("coordinate_1", 2)

        assert record.get_int("coordinate_type") == 1
        assert record.get_float("coordinate_1") == 2.0
        assert isinstance(record.get_float("coordinate_1"), float)

    def test_unset_fields_read_as_zero(self):
        """Testa que campos não escritos são lidos como zero"""
        record = InMemoryCoordinateRecord()

        assert record.get_int("coordinate_type") == 0
        assert record.get_float("coordinate_3") == 0.0

    def test_unknown_field(self):
        """Testa que um campo desconhecido lança KeyError"""
        with pytest.raises(KeyError):
            InMemoryCoordinateRecord().get_float("altitude")

    def test_wrong_accessor(self):
        """Testa que o acessor do tipo errado lança TypeError"""
        with pytest.raises(TypeError):
            InMemoryCoordinateRecord().set_float("coordinate_type", 1.0)

    def test_schema_is_copied(self):
        """Testa que o schema recebido é copiado"""
        schema = coordinate_schema()
        record = InMemoryCoordinateRecord(schema=schema)
        schema.pop("coordinate_1")

        assert record.field_type("coordinate_1") == FieldType.FLOAT
