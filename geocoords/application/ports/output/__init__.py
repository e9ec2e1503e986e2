"""
Output Ports - Interfaces para comunicação com a infraestrutura externa
Contratos implementados pelos output adapters
"""

from .coordinate_record_port import FieldType, ICoordinateRecord
