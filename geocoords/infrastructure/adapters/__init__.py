"""Adapters de Infraestrutura"""
