"""
Constantes do Domínio - constantes do modelo de coordenadas em um só lugar
"""
from geocoords.shared.config.settings import COORDINATE_EQUALITY_DECIMAL_PLACES


class Record:
    """Nomes dos campos do registro persistido de coordenadas"""

    COORDINATE_TYPE = "coordinate_type"
    COORDINATE_1 = "coordinate_1"  # x ou phi
    COORDINATE_2 = "coordinate_2"  # y ou theta
    COORDINATE_3 = "coordinate_3"  # z ou radius

    COMPONENT_FIELDS = (COORDINATE_1, COORDINATE_2, COORDINATE_3)


class Equality:
    """Política de canonicalização compartilhada por chaves do registry e hashes"""

    # None = comparação exata
    DECIMAL_PLACES = COORDINATE_EQUALITY_DECIMAL_PLACES

    # Limite de idas e voltas esférica -> cartesiana -> esférica ao buscar a identidade
    MAX_ROUND_TRIPS = 64
