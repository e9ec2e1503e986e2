"""
Output Adapter: Implementação em memória do registro persistido de coordenadas
Usada por colaboradores sem uma linha de banco à mão, e pelos testes
"""
from typing import Any, Dict, Optional

from geocoords.application.ports.output.coordinate_record_port import FieldType, ICoordinateRecord
from geocoords.domain.constants import Record


def coordinate_schema() -> Dict[str, FieldType]:
    """Schema padrão de um registro de coordenadas"""
    return {
        Record.COORDINATE_TYPE: FieldType.INTEGER,
        Record.COORDINATE_1: FieldType.FLOAT,
        Record.COORDINATE_2: FieldType.FLOAT,
        Record.COORDINATE_3: FieldType.FLOAT,
    }


class InMemoryCoordinateRecord(ICoordinateRecord):
    """
    Registro apoiado em dois dicts: o schema declarado e os valores dos campos

    Acessar um campo não declarado, ou um campo pelo acessor do tipo errado,
    lança KeyError / TypeError como um driver de banco faria.
    """

    def __init__(
        self,
        schema: Optional[Dict[str, FieldType]] = None,
        values: Optional[Dict[str, Any]] = None
    ):
        self.schema: Dict[str, FieldType] = dict(coordinate_schema() if schema is None else schema)
        self.values: Dict[str, Any] = dict(values or {})

    def field_type(self, name: str) -> Optional[FieldType]:
        return self.schema.get(name)

    def get_int(self, name: str) -> int:
        self._check_access(name, FieldType.INTEGER)
        return int(self.values.get(name, 0))

    def get_float(self, name: str) -> float:
        self._check_access(name, FieldType.FLOAT)
        return float(self.values.get(name, 0.0))

    def set_int(self, name: str, value: int) -> None:
        self._check_access(name, FieldType.INTEGER)
        self.values[name] = int(value)

    def set_float(self, name: str, value: float) -> None:
        self._check_access(name, FieldType.FLOAT)
        self.values[name] = float(value)

    def _check_access(self, name: str, field_type: FieldType) -> None:
        declared = self.schema.get(name)
        if declared is None:
            raise KeyError(f"Unknown field: {name}")
        if declared != field_type:
            raise TypeError(f"Field {name} is {declared.value}, not {field_type.value}")

    def to_dict(self) -> Dict[str, Any]:
        """Valores atuais dos campos"""
        return dict(self.values)
