"""
Entidade Location - o local onde uma foto foi tirada, como os colaboradores o veem
"""
from dataclasses import dataclass
from typing import Optional

from geocoords.application.ports.output.coordinate_record_port import ICoordinateRecord
from geocoords.domain.constants import Record
from geocoords.domain.value_objects.cartesian_coordinate import CartesianCoordinate
from geocoords.domain.value_objects.coordinate import Coordinate
from geocoords.domain.value_objects.coordinate_type import CoordinateType
from geocoords.domain.value_objects.spheric_coordinate import SphericCoordinate
from geocoords.shared.config.logger_config import get_logger
from geocoords.shared.utils.validators import GenericValidator, RecordValidator

logger = get_logger(child=True)

_READERS = {
    CoordinateType.CARTESIAN: CartesianCoordinate.from_record,
    CoordinateType.SPHERIC: SphericCoordinate.from_record,
}


@dataclass
class Location:
    """Entidade Location; a coordenada é um valor canônico compartilhado e pode faltar"""
    coordinate: Optional[Coordinate] = None

    def has_coordinate(self) -> bool:
        """Verifica se uma coordenada foi informada"""
        return self.coordinate is not None

    @classmethod
    def from_record(cls, record: ICoordinateRecord) -> 'Location':
        """
        Lê uma localização de um registro persistido

        O schema completo (tipo e componentes) é verificado antes de ler qualquer campo.

        Args:
            record: Registro com coordinate_type e coordinate_1..3

        Returns:
            Location com a coordenada gravada

        Raises:
            MissingCoordinateException: Se record for None
            RecordSchemaMismatchException: Se faltar um campo ou o tipo estiver errado
            CoordinateTypeOutOfRangeException: Se o ordinal gravado for desconhecido
        """
        RecordValidator.validate_coordinate_fields(record, include_type=True)

        coordinate_type = CoordinateType.from_ordinal(record.get_int(Record.COORDINATE_TYPE))
        coordinate = _READERS[coordinate_type](record)

        logger.debug("Location read from record", coordinate_type=coordinate_type.name)
        return cls(coordinate=coordinate)

    def write_on(self, record: ICoordinateRecord) -> None:
        """
        Escreve a coordenada da localização num registro persistido

        Raises:
            MissingCoordinateException: Se a localização não tiver coordenada ou record for None
            RecordSchemaMismatchException: Se faltar um campo ou o tipo estiver errado
        """
        GenericValidator.validate_not_none(self.coordinate, "coordinate")
        self.coordinate.write_on(record)

    def cartesian_distance_to(self, other: 'Location') -> float:
        """Distância euclidiana entre as coordenadas de duas localizações"""
        GenericValidator.validate_not_none(other, "other location")
        GenericValidator.validate_not_none(self.coordinate, "coordinate")
        return self.coordinate.cartesian_distance(other.coordinate)

    def central_angle_to(self, other: 'Location') -> float:
        """Ângulo central em radianos entre as coordenadas de duas localizações"""
        GenericValidator.validate_not_none(other, "other location")
        GenericValidator.validate_not_none(self.coordinate, "coordinate")
        return self.coordinate.central_angle(other.coordinate)

    def to_dict(self) -> dict:
        """Converte para dicionário"""
        return {
            'coordinate': self.coordinate.to_dict() if self.coordinate is not None else None
        }
