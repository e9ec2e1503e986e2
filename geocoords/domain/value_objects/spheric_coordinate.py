"""
Value Object para um ponto do espaço 3D na forma esférica (phi, theta, radius)
"""
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Tuple

from geocoords.application.ports.output.coordinate_record_port import ICoordinateRecord
from geocoords.domain.constants import Equality, Record
from geocoords.domain.exceptions import InvalidCoordinateValueException
from geocoords.domain.value_objects.coordinate import Coordinate
from geocoords.domain.value_objects.coordinate_type import CoordinateType
from geocoords.domain.value_objects.registry import ValueObjectRegistry
from geocoords.shared.config.logger_config import get_logger
from geocoords.shared.utils.validators import GenericValidator, RecordValidator

if TYPE_CHECKING:
    from geocoords.domain.value_objects.cartesian_coordinate import CartesianCoordinate

logger = get_logger(child=True)

_CARTESIAN_FORM = "cartesian_form"
_IDENTITY = "identity"


@dataclass(frozen=True, eq=False)
class SphericCoordinate(Coordinate):
    """
    Value Object de coordenada esférica

    phi é o azimute e theta a inclinação, ambos em radianos.
    Todos os componentes são finitos e radius nunca é negativo.
    """
    phi: float
    theta: float
    radius: float

    _registry: ClassVar[ValueObjectRegistry] = ValueObjectRegistry(
        "spheric", decimal_places=Equality.DECIMAL_PLACES
    )

    def __post_init__(self):
        """Valida componentes no momento da criação"""
        self._assert_class_invariants()

    @classmethod
    def of(cls, phi: float, theta: float, radius: float) -> 'SphericCoordinate':
        """
        Fábrica canônica

        Args:
            phi: Azimute em radianos
            theta: Inclinação em radianos
            radius: Distância até a origem (>= 0)

        Returns:
            A instância compartilhada de (phi, theta, radius)

        Raises:
            InvalidCoordinateValueException: Se um componente não for finito ou radius for negativo
        """
        components = (
            GenericValidator.validate_finite(phi, "phi"),
            GenericValidator.validate_finite(theta, "theta"),
            GenericValidator.validate_range(
                GenericValidator.validate_finite(radius, "radius"),
                min_val=0.0,
                max_val=None,
                param_name="radius",
                exception_class=InvalidCoordinateValueException
            ),
        )
        return cls._registry.get_or_create(components, lambda: cls(*components))

    @classmethod
    def from_tuple(cls, coords: Tuple[float, float, float]) -> 'SphericCoordinate':
        """Cria a partir de uma tupla (phi, theta, radius)"""
        return cls.of(coords[0], coords[1], coords[2])

    @classmethod
    def origin(cls) -> 'SphericCoordinate':
        return cls.of(0.0, 0.0, 0.0)

    @classmethod
    def from_record(cls, record: ICoordinateRecord) -> 'SphericCoordinate':
        """
        Lê coordinate_1..3 de um registro persistido como phi, theta e radius

        Raises:
            MissingCoordinateException: Se record for None
            RecordSchemaMismatchException: Se faltar um campo ou o tipo estiver errado
            InvalidCoordinateValueException: Se um componente gravado for inválido
        """
        RecordValidator.validate_coordinate_fields(record)
        return cls.of(
            record.get_float(Record.COORDINATE_1),
            record.get_float(Record.COORDINATE_2),
            record.get_float(Record.COORDINATE_3)
        )

    @property
    def coordinate_type(self) -> CoordinateType:
        return CoordinateType.SPHERIC

    @property
    def components(self) -> Tuple[float, float, float]:
        return (self.phi, self.theta, self.radius)

    def canonical_key(self) -> Tuple[float, ...]:
        return self._registry.key_for(self.components)

    def as_spheric(self) -> 'SphericCoordinate':
        return self._registry.get_or_create(self.components, lambda: self)

    def as_cartesian(self) -> 'CartesianCoordinate':
        """
        Converte para a forma cartesiana

        O resultado é sempre a fórmula aplicada à instância canônica. Só esta
        direção é memoizada, no registry esférico.
        """
        from geocoords.domain.value_objects.cartesian_coordinate import CartesianCoordinate

        canonical = self.as_spheric()
        cartesian = self._registry.derived(_CARTESIAN_FORM, canonical.components)
        if cartesian is None:
            cartesian = CartesianCoordinate.of(*canonical._cartesian_components())
            cartesian = self._registry.remember(_CARTESIAN_FORM, canonical.components, cartesian)
        return cartesian

    def canonical_identity(self) -> 'SphericCoordinate':
        """
        Instância esférica canônica que identifica o ponto

        Segue as idas e voltas s -> esférica(cartesiana(s)) até repetir uma
        chave. A órbita de s e a de esférica(cartesiana(s)) terminam no mesmo
        ciclo, e a identidade é o membro do ciclo com a menor chave. Assim um
        valor, sua conversão e a conversão de volta têm sempre a mesma
        identidade, em qualquer ordem de chamada.

        Returns:
            Membro canônico do ciclo
        """
        canonical = self.as_spheric()
        identity = self._registry.derived(_IDENTITY, canonical.components)
        if identity is not None:
            return identity

        orbit = []
        positions = {}
        current = canonical
        while current.canonical_key() not in positions:
            if len(orbit) == Equality.MAX_ROUND_TRIPS:
                logger.warning(
                    "Round trips did not settle",
                    coordinate=canonical.components,
                    round_trips=len(orbit)
                )
                break
            positions[current.canonical_key()] = len(orbit)
            orbit.append(current)
            current = current.as_cartesian().as_spheric()

        settled = current.canonical_key() in positions
        cycle = orbit[positions[current.canonical_key()]:] if settled else orbit
        identity = min(cycle, key=lambda member: member.canonical_key())

        # todo membro da órbita termina no mesmo ciclo
        for member in (orbit if settled else [canonical]):
            self._registry.remember(_IDENTITY, member.components, identity)

        return self._registry.derived(_IDENTITY, canonical.components)

    def _cartesian_components(self) -> Tuple[float, float, float]:
        sin_theta = math.sin(self.theta)
        return (
            self.radius * sin_theta * math.cos(self.phi),
            self.radius * sin_theta * math.sin(self.phi),
            self.radius * math.cos(self.theta)
        )

    def _assert_class_invariants(self) -> None:
        GenericValidator.validate_finite(self.phi, "phi")
        GenericValidator.validate_finite(self.theta, "theta")
        GenericValidator.validate_finite(self.radius, "radius")
        GenericValidator.validate_range(
            self.radius,
            min_val=0.0,
            max_val=None,
            param_name="radius",
            exception_class=InvalidCoordinateValueException
        )

    def _write_components(self, record: ICoordinateRecord) -> None:
        RecordValidator.validate_coordinate_fields(record)

        record.set_float(Record.COORDINATE_1, self.phi)
        record.set_float(Record.COORDINATE_2, self.theta)
        record.set_float(Record.COORDINATE_3, self.radius)

    def to_dict(self) -> dict:
        """Converte para dicionário"""
        return {
            "coordinate_type": self.coordinate_type.name.lower(),
            "phi": self.phi,
            "theta": self.theta,
            "radius": self.radius
        }

    def __str__(self) -> str:
        return f"(phi={self.phi:.4f}, theta={self.theta:.4f}, radius={self.radius:.4f})"
