"""Utilitários compartilhados"""
