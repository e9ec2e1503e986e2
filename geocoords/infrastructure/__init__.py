"""
Infrastructure Layer - Clean Architecture
Implementações concretas dos output ports
"""

from geocoords.infrastructure.adapters.output.in_memory_coordinate_record import (
    InMemoryCoordinateRecord,
    coordinate_schema
)

__all__ = ['InMemoryCoordinateRecord', 'coordinate_schema']
