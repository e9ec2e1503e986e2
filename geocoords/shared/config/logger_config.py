"""
Configuração centralizada de logging
Cria loggers do AWS Lambda Powertools para o modelo de coordenadas
"""
from aws_lambda_powertools import Logger

from geocoords.shared.config.settings import SERVICE_NAME


def get_logger(service_name: str = None, child: bool = False) -> Logger:
    """
    Retorna uma instância configurada de Logger

    Args:
        service_name: Nome do serviço (se None, usa POWERTOOLS_SERVICE_NAME)
        child: Se True, cria um logger filho ligado ao módulo que chamou

    Returns:
        Logger configurado
    """
    if service_name is None:
        service_name = SERVICE_NAME

    if child:
        return Logger(service=service_name, child=True)

    return Logger(service=service_name)


# Logger principal do pacote
logger = get_logger()
