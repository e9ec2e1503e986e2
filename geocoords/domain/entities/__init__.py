"""Entidades do Domínio"""
from .location import Location

__all__ = ['Location']
