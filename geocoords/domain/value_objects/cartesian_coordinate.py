"""
Value Object para um ponto do espaço 3D na forma cartesiana (x, y, z)
"""
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Tuple

from geocoords.application.ports.output.coordinate_record_port import ICoordinateRecord
from geocoords.domain.constants import Equality, Record
from geocoords.domain.value_objects.coordinate import Coordinate
from geocoords.domain.value_objects.coordinate_type import CoordinateType
from geocoords.domain.value_objects.registry import ValueObjectRegistry
from geocoords.shared.config.logger_config import get_logger
from geocoords.shared.utils.validators import GenericValidator, RecordValidator

if TYPE_CHECKING:
    from geocoords.domain.value_objects.spheric_coordinate import SphericCoordinate

logger = get_logger(child=True)

_SPHERIC_FORM = "spheric_form"


@dataclass(frozen=True, eq=False)
class CartesianCoordinate(Coordinate):
    """
    Value Object de coordenada cartesiana

    Características:
    - Imutável (frozen=True)
    - Auto-validação no __post_init__ (todos os componentes finitos)
    - Canônico: obtenha instâncias via ``of`` / ``from_record`` para que
      valores iguais compartilhem uma instância
    """
    x: float
    y: float
    z: float

    _registry: ClassVar[ValueObjectRegistry] = ValueObjectRegistry(
        "cartesian", decimal_places=Equality.DECIMAL_PLACES
    )

    def __post_init__(self):
        """Valida componentes no momento da criação"""
        self._assert_class_invariants()

    @classmethod
    def of(cls, x: float, y: float, z: float) -> 'CartesianCoordinate':
        """
        Fábrica canônica

        Args:
            x: Componente x
            y: Componente y
            z: Componente z

        Returns:
            A instância compartilhada de (x, y, z)

        Raises:
            InvalidCoordinateValueException: Se algum componente não for finito
        """
        components = (
            GenericValidator.validate_finite(x, "x"),
            GenericValidator.validate_finite(y, "y"),
            GenericValidator.validate_finite(z, "z"),
        )
        return cls._registry.get_or_create(components, lambda: cls(*components))

    @classmethod
    def from_tuple(cls, coords: Tuple[float, float, float]) -> 'CartesianCoordinate':
        """Cria a partir de uma tupla (x, y, z)"""
        return cls.of(coords[0], coords[1], coords[2])

    @classmethod
    def origin(cls) -> 'CartesianCoordinate':
        return cls.of(0.0, 0.0, 0.0)

    @classmethod
    def from_record(cls, record: ICoordinateRecord) -> 'CartesianCoordinate':
        """
        Lê coordinate_1..3 de um registro persistido como x, y e z

        Raises:
            MissingCoordinateException: Se record for None
            RecordSchemaMismatchException: Se faltar um campo ou o tipo estiver errado
            InvalidCoordinateValueException: Se um componente gravado não for finito
        """
        RecordValidator.validate_coordinate_fields(record)
        return cls.of(
            record.get_float(Record.COORDINATE_1),
            record.get_float(Record.COORDINATE_2),
            record.get_float(Record.COORDINATE_3)
        )

    @property
    def coordinate_type(self) -> CoordinateType:
        return CoordinateType.CARTESIAN

    @property
    def components(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def canonical_key(self) -> Tuple[float, ...]:
        return self._registry.key_for(self.components)

    def as_cartesian(self) -> 'CartesianCoordinate':
        return self._registry.get_or_create(self.components, lambda: self)

    def as_spheric(self) -> 'SphericCoordinate':
        """
        Converte para a forma esférica

        O resultado é sempre a fórmula aplicada à instância canônica. Só esta
        direção é memoizada, no registry cartesiano.
        """
        from geocoords.domain.value_objects.spheric_coordinate import SphericCoordinate

        canonical = self.as_cartesian()
        spheric = self._registry.derived(_SPHERIC_FORM, canonical.components)
        if spheric is None:
            spheric = SphericCoordinate.of(*canonical._spheric_components())
            spheric = self._registry.remember(_SPHERIC_FORM, canonical.components, spheric)
        return spheric

    def _spheric_components(self) -> Tuple[float, float, float]:
        radius = math.hypot(self.x, self.y, self.z)
        if radius == 0.0:
            logger.debug("Zero radius, using spheric origin", coordinate=self.components)
            return (0.0, 0.0, 0.0)

        phi = math.atan2(self.y, self.x)
        # o arredondamento pode levar |z| / radius um pouco acima de 1
        theta = math.acos(max(-1.0, min(1.0, self.z / radius)))

        if not (math.isfinite(phi) and math.isfinite(theta)):
            logger.debug("Indeterminate angles, using spheric origin", coordinate=self.components)
            return (0.0, 0.0, 0.0)

        return (phi, theta, radius)

    def _assert_class_invariants(self) -> None:
        GenericValidator.validate_finite(self.x, "x")
        GenericValidator.validate_finite(self.y, "y")
        GenericValidator.validate_finite(self.z, "z")

    def _write_components(self, record: ICoordinateRecord) -> None:
        RecordValidator.validate_coordinate_fields(record)

        record.set_float(Record.COORDINATE_1, self.x)
        record.set_float(Record.COORDINATE_2, self.y)
        record.set_float(Record.COORDINATE_3, self.z)

    def to_dict(self) -> dict:
        """Converte para dicionário"""
        return {
            "coordinate_type": self.coordinate_type.name.lower(),
            "x": self.x,
            "y": self.y,
            "z": self.z
        }

    def __str__(self) -> str:
        return f"(x={self.x:.4f}, y={self.y:.4f}, z={self.z:.4f})"
