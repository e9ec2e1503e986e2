"""Domain Layer - value objects de coordenadas, entidades e serviços puros"""
