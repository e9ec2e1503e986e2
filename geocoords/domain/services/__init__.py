"""
Serviços de Domínio - geometria pura sobre o contrato Coordinate
"""

from geocoords.domain.services.coordinate_geometry import (
    cartesian_distance,
    central_angle,
    coordinates_structurally_equal
)

__all__ = [
    'cartesian_distance',
    'central_angle',
    'coordinates_structurally_equal'
]
