"""
Modelo de coordenadas geográficas do catálogo de fotos
Value objects cartesianos e esféricos com um contrato comum e canonicalizador
"""
from geocoords.domain.entities.location import Location
from geocoords.domain.value_objects import (
    CartesianCoordinate,
    Coordinate,
    CoordinateType,
    SphericCoordinate
)

__all__ = ['CartesianCoordinate', 'Coordinate', 'CoordinateType', 'Location', 'SphericCoordinate']
