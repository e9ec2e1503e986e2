"""Configuração compartilhada"""
from .settings import COORDINATE_EQUALITY_DECIMAL_PLACES, SERVICE_NAME
from .logger_config import get_logger, logger

__all__ = ['COORDINATE_EQUALITY_DECIMAL_PLACES', 'SERVICE_NAME', 'get_logger', 'logger']
