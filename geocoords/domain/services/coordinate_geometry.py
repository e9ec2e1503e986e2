"""
Geometria de coordenadas - distância e ângulo central entre coordenadas
Escrita uma vez sobre o contrato Coordinate; funciona para qualquer par de variantes
"""
import math

from geocoords.shared.utils.validators import GenericValidator


def cartesian_distance(first, second) -> float:
    """
    Distância euclidiana entre duas coordenadas

    Os dois operandos são convertidos antes para a forma cartesiana.

    Args:
        first: Coordenada de qualquer variante
        second: Coordenada de qualquer variante

    Returns:
        Distância, na unidade das coordenadas

    Raises:
        MissingCoordinateException: Se algum operando for None
    """
    GenericValidator.validate_not_none(first, "first coordinate")
    GenericValidator.validate_not_none(second, "second coordinate")

    a = first.as_cartesian()
    b = second.as_cartesian()

    return math.hypot(a.x - b.x, a.y - b.y, a.z - b.z)


def central_angle(first, second) -> float:
    """
    Ângulo central entre duas coordenadas (lei dos cossenos esférica)

    Os dois operandos são convertidos antes para a forma esférica. O cosseno
    é limitado a [-1, 1], então o resultado fica sempre em [0, pi].

    Args:
        first: Coordenada de qualquer variante
        second: Coordenada de qualquer variante

    Returns:
        Ângulo em radianos

    Raises:
        MissingCoordinateException: Se algum operando for None
    """
    GenericValidator.validate_not_none(first, "first coordinate")
    GenericValidator.validate_not_none(second, "second coordinate")

    a = first.as_spheric()
    b = second.as_spheric()

    delta_phi = abs(a.phi - b.phi)
    cosine = (
        math.sin(a.theta) * math.sin(b.theta)
        + math.cos(a.theta) * math.cos(b.theta) * math.cos(delta_phi)
    )

    return math.acos(max(-1.0, min(1.0, cosine)))


def coordinates_structurally_equal(first, second) -> bool:
    """
    Compara as chaves de registry das identidades canônicas

    Sempre concorda com a comparação por identidade das instâncias canônicas.
    """
    if first is None or second is None:
        return False

    return first.canonical_identity().canonical_key() == second.canonical_identity().canonical_key()
