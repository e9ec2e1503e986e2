"""
Configuração centralizada do modelo de coordenadas
"""
import os

# Logging
SERVICE_NAME = os.environ.get('POWERTOOLS_SERVICE_NAME', 'photo-coordinates')

# Política de igualdade: sem valor = canonicalização exata,
# um inteiro arredonda as chaves do registry (e os hashes) para essas casas decimais
_decimal_places = os.environ.get('COORDINATE_EQUALITY_DECIMAL_PLACES', '').strip()
COORDINATE_EQUALITY_DECIMAL_PLACES = int(_decimal_places) if _decimal_places else None
