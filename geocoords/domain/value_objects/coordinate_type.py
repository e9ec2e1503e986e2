"""
Tipo de coordenada - tag da representação em que uma coordenada é gravada
"""
from enum import Enum

from geocoords.domain.exceptions import CoordinateTypeOutOfRangeException
from geocoords.shared.config.logger_config import get_logger

logger = get_logger(child=True)


class CoordinateType(Enum):
    """Representações de coordenada suportadas; o valor é o ordinal persistido"""
    CARTESIAN = 0
    SPHERIC = 1

    @property
    def ordinal(self) -> int:
        return self.value

    @classmethod
    def from_ordinal(cls, ordinal: int) -> 'CoordinateType':
        """
        Resolve um ordinal persistido

        Args:
            ordinal: Valor gravado em coordinate_type

        Returns:
            O CoordinateType correspondente

        Raises:
            CoordinateTypeOutOfRangeException: Se nenhuma variante tiver esse ordinal
        """
        if not isinstance(ordinal, bool) and isinstance(ordinal, int):
            for coordinate_type in cls:
                if coordinate_type.value == ordinal:
                    return coordinate_type

        logger.warning("Unknown coordinate type ordinal", ordinal=ordinal)
        raise CoordinateTypeOutOfRangeException(
            f"Coordinate type ordinal {ordinal!r} is out of range",
            details={"ordinal": ordinal, "known": [t.value for t in cls]}
        )
