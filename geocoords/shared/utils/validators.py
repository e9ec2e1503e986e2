"""
Utilitário de Validadores
Validação de entrada com exceções de domínio
"""
import math
from numbers import Real
from typing import Any, Optional, Type

from geocoords.application.ports.output.coordinate_record_port import FieldType, ICoordinateRecord
from geocoords.domain.constants import Record
from geocoords.domain.exceptions import (
    InvalidCoordinateValueException,
    MissingCoordinateException,
    RecordSchemaMismatchException
)
from geocoords.shared.config.logger_config import get_logger

logger = get_logger(child=True)


def _raise(exception_class: Type[Exception], message: str, details: dict):
    # Exceções de domínio aceitam details, as builtin só a mensagem
    try:
        exc = exception_class(message, details=details)
    except TypeError:
        exc = exception_class(message)
    raise exc


class GenericValidator:
    """Validador genérico para reduzir duplicação de código"""

    @staticmethod
    def validate_not_none(
        value: Any,
        param_name: str,
        exception_class: Type[Exception] = MissingCoordinateException
    ) -> Any:
        """
        Valida que uma referência obrigatória está presente

        Args:
            value: Valor a validar
            param_name: Nome do parâmetro (para a mensagem de erro)
            exception_class: Classe de exceção a lançar

        Returns:
            O valor validado

        Raises:
            exception_class: Se value for None
        """
        if value is None:
            _raise(exception_class, f"{param_name} must not be None", {param_name: None})
        return value

    @staticmethod
    def validate_finite(
        value: Any,
        param_name: str,
        exception_class: Type[Exception] = InvalidCoordinateValueException
    ) -> float:
        """
        Valida que value é um número real finito (sem NaN, sem infinito)

        Args:
            value: Valor a validar
            param_name: Nome do parâmetro (para a mensagem de erro)
            exception_class: Classe de exceção a lançar

        Returns:
            Valor convertido para float

        Raises:
            exception_class: Se value não for um número real finito
        """
        if isinstance(value, bool) or not isinstance(value, Real):
            _raise(exception_class, f"{param_name} must be a real number", {param_name: value})
        if not math.isfinite(value):
            _raise(exception_class, f"{param_name} must be finite", {param_name: value})
        return float(value)

    @staticmethod
    def validate_range(
        value: float,
        min_val: Optional[float],
        max_val: Optional[float],
        param_name: str,
        exception_class: Type[Exception] = ValueError
    ) -> float:
        """
        Valida que um valor numérico está dentro de um range inclusivo

        Args:
            value: Valor a validar
            min_val: Valor mínimo permitido (None = sem limite)
            max_val: Valor máximo permitido (None = sem limite)
            param_name: Nome do parâmetro (para a mensagem de erro)
            exception_class: Classe de exceção a lançar

        Returns:
            O valor validado

        Raises:
            exception_class: Se value estiver fora do range
        """
        below = min_val is not None and value < min_val
        above = max_val is not None and value > max_val
        if below or above:
            if max_val is None:
                message = f"{param_name} must be at least {min_val}"
            elif min_val is None:
                message = f"{param_name} must be at most {max_val}"
            else:
                message = f"{param_name} must be between {min_val} and {max_val}"
            _raise(
                exception_class,
                message,
                {param_name: value, "min": min_val, "max": max_val}
            )
        return value

    @staticmethod
    def validate_not_empty(
        value: str,
        param_name: str,
        exception_class: Type[Exception] = ValueError
    ) -> str:
        """
        Valida que uma string não está vazia

        Args:
            value: String a validar
            param_name: Nome do parâmetro (para a mensagem de erro)
            exception_class: Classe de exceção a lançar

        Returns:
            String validada, sem espaços nas pontas

        Raises:
            exception_class: Se a string for vazia ou só espaços
        """
        if not value or not value.strip():
            _raise(exception_class, f"{param_name} cannot be empty", {param_name: value})
        return value.strip()


class RecordValidator:
    """Valida o formato de um registro persistido de coordenadas"""

    @staticmethod
    def validate_field(record: ICoordinateRecord, field_name: str, field_type: FieldType) -> None:
        """
        Valida que o registro declara um campo com o tipo esperado

        Só o schema declarado é inspecionado, nunca os valores.

        Raises:
            MissingCoordinateException: Se record for None
            RecordSchemaMismatchException: Se o campo faltar ou tiver outro tipo
        """
        GenericValidator.validate_not_none(record, "record")
        field_name = GenericValidator.validate_not_empty(
            field_name, "field_name", RecordSchemaMismatchException
        )

        declared = record.field_type(field_name)
        if declared is None:
            logger.warning("Record field missing", field=field_name)
            raise RecordSchemaMismatchException(
                f"The field '{field_name}' must exist",
                details={"field": field_name, "expected_type": field_type.value}
            )
        if declared != field_type:
            logger.warning(
                "Record field has wrong type",
                field=field_name,
                expected_type=field_type.value,
                declared_type=getattr(declared, "value", declared)
            )
            raise RecordSchemaMismatchException(
                f"The field '{field_name}' must be of type {field_type.value}",
                details={
                    "field": field_name,
                    "expected_type": field_type.value,
                    "declared_type": getattr(declared, "value", declared)
                }
            )

    @staticmethod
    def validate_coordinate_fields(record: ICoordinateRecord, include_type: bool = False) -> None:
        """
        Valida os campos de coordenada de um registro

        Args:
            record: Registro a inspecionar
            include_type: Exige também o campo INTEGER coordinate_type

        Raises:
            MissingCoordinateException: Se record for None
            RecordSchemaMismatchException: Se algum campo obrigatório faltar ou tiver outro tipo
        """
        if include_type:
            RecordValidator.validate_field(record, Record.COORDINATE_TYPE, FieldType.INTEGER)
        for field_name in Record.COMPONENT_FIELDS:
            RecordValidator.validate_field(record, field_name, FieldType.FLOAT)
