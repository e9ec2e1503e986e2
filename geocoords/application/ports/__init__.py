"""Ports da Aplicação"""
