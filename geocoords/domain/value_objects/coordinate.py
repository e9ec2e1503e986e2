"""
Coordinate - contrato comum a toda representação de um ponto no espaço 3D
Os template methods (distância, ângulo, igualdade, hash, persistência) ficam aqui uma única vez
"""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Tuple

from geocoords.application.ports.output.coordinate_record_port import ICoordinateRecord
from geocoords.domain.constants import Record
from geocoords.domain.services import coordinate_geometry
from geocoords.domain.value_objects.coordinate_type import CoordinateType
from geocoords.shared.utils.validators import RecordValidator

if TYPE_CHECKING:
    from geocoords.domain.value_objects.cartesian_coordinate import CartesianCoordinate
    from geocoords.domain.value_objects.spheric_coordinate import SphericCoordinate


class Coordinate(ABC):
    """
    Coordenada abstrata

    As variantes concretas são imutáveis e canonicalizadas por um registry
    por variante. Duas coordenadas são iguais quando têm a mesma identidade
    canônica (ver ``canonical_identity``), seja qual for a variante de cada uma.
    """

    @property
    @abstractmethod
    def coordinate_type(self) -> CoordinateType:
        """Tag da variante"""

    @property
    @abstractmethod
    def components(self) -> Tuple[float, float, float]:
        """Os três componentes, na ordem do registro"""

    @abstractmethod
    def as_cartesian(self) -> 'CartesianCoordinate':
        """Coordenada cartesiana canônica equivalente"""

    @abstractmethod
    def as_spheric(self) -> 'SphericCoordinate':
        """Coordenada esférica canônica equivalente"""

    @abstractmethod
    def canonical_key(self) -> Tuple[float, ...]:
        """Chave deste valor no registry da própria variante"""

    @abstractmethod
    def _assert_class_invariants(self) -> None:
        """Lança InvalidCoordinateValueException se o invariante não vale"""

    @abstractmethod
    def _write_components(self, record: ICoordinateRecord) -> None:
        """Escreve os três componentes no registro"""

    def canonical_identity(self) -> 'SphericCoordinate':
        """
        Instância esférica canônica que identifica o ponto

        Depende só do valor, nunca da ordem em que conversões foram pedidas.
        """
        return self.as_spheric().canonical_identity()

    def cartesian_distance(self, other: 'Coordinate') -> float:
        """
        Distância euclidiana até outra coordenada

        Raises:
            MissingCoordinateException: Se other for None
        """
        self._assert_class_invariants()
        distance = coordinate_geometry.cartesian_distance(self, other)
        self._assert_class_invariants()
        return distance

    def central_angle(self, other: 'Coordinate') -> float:
        """
        Ângulo central em radianos até outra coordenada, em [0, pi]

        Raises:
            MissingCoordinateException: Se other for None
        """
        self._assert_class_invariants()
        angle = coordinate_geometry.central_angle(self, other)
        self._assert_class_invariants()
        return angle

    def is_equal(self, other: 'Coordinate') -> bool:
        """Compara identidades canônicas; False para None ou não-coordenadas"""
        if not isinstance(other, Coordinate):
            return False
        return self.canonical_identity() is other.canonical_identity()

    def write_on(self, record: ICoordinateRecord) -> None:
        """
        Escreve o tipo da coordenada e os componentes num registro persistido

        O schema do registro é verificado antes de qualquer escrita.

        Raises:
            MissingCoordinateException: Se record for None
            RecordSchemaMismatchException: Se faltar um campo ou o tipo estiver errado
        """
        RecordValidator.validate_coordinate_fields(record, include_type=True)
        self._assert_class_invariants()

        record.set_int(Record.COORDINATE_TYPE, self.coordinate_type.ordinal)
        self._write_components(record)

        self._assert_class_invariants()

    def to_tuple(self) -> Tuple[float, float, float]:
        return self.components

    def __eq__(self, other) -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self.is_equal(other)

    def __hash__(self) -> int:
        return hash(self.canonical_identity().canonical_key())
