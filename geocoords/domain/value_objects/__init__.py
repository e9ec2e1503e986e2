"""Value Objects do Domínio"""
from .coordinate_type import CoordinateType
from .coordinate import Coordinate
from .cartesian_coordinate import CartesianCoordinate
from .spheric_coordinate import SphericCoordinate
from .registry import ValueObjectRegistry

__all__ = ['CoordinateType', 'Coordinate', 'CartesianCoordinate', 'SphericCoordinate', 'ValueObjectRegistry']
