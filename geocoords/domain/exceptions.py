"""
Exceções de Domínio - violações de regras do modelo de coordenadas
Toda condição é lançada de forma síncrona para quem chamou
"""


class DomainException(Exception):
    """Exceção base para todos os erros de domínio"""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidCoordinateValueException(DomainException, ValueError):
    """Lançada quando um componente não é finito ou o raio é negativo"""
    pass


class MissingCoordinateException(DomainException, TypeError):
    """Lançada quando uma operação exige uma coordenada (ou registro) e recebeu None"""
    pass


class RecordSchemaMismatchException(DomainException, LookupError):
    """Lançada quando um registro persistido não tem um campo ou declara o tipo errado"""
    pass


class CoordinateTypeOutOfRangeException(DomainException, ValueError):
    """Lançada quando o ordinal de tipo gravado não corresponde a nenhuma variante"""
    pass
