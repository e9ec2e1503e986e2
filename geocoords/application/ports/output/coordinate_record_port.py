"""
Output Port: Registro persistido de coordenadas
Contrato do portador externo de campos nomeados de onde as coordenadas são lidas e onde são escritas
"""
from enum import Enum
from typing import Optional, Protocol


class FieldType(Enum):
    """Tipo declarado de um campo do registro"""
    INTEGER = "integer"
    FLOAT = "float"


class ICoordinateRecord(Protocol):
    """Interface para um registro com campos nomeados e tipados"""

    def field_type(self, name: str) -> Optional[FieldType]:
        """
        Tipo declarado de um campo

        Args:
            name: Nome do campo

        Returns:
            O FieldType declarado, ou None se o registro não tiver esse campo
        """
        ...

    def get_int(self, name: str) -> int:
        """Lê um campo INTEGER"""
        ...

    def get_float(self, name: str) -> float:
        """Lê um campo FLOAT"""
        ...

    def set_int(self, name: str, value: int) -> None:
        """Escreve um campo INTEGER"""
        ...

    def set_float(self, name: str, value: float) -> None:
        """Escreve um campo FLOAT"""
        ...
