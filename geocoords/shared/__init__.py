"""Configuração e utilitários compartilhados"""
