"""Application Layer - ports para o mundo externo"""
