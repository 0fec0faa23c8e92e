"""Conversion of single query tokens to typed values."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Union, get_origin

from pydantic import PydanticSchemaGenerationError, TypeAdapter

from delimited_query.errors.unsupported_element_type_error import UnsupportedElementTypeError

ElementType = Union[type, Callable[[str], Any]]


@dataclass(frozen=True)
class ConversionResult:
    """ Outcome of converting one token """
    ok: bool
    value: Any = None
    error: Optional[Exception] = None


class ElementConverter:
    """
    Converts string tokens to one element type.

    Enum types are matched on member name (case-insensitive) then on member value.
    Other types go through pydantic lax validation, so "42" validates as int,
    "yes" as bool and canonical UUID strings as UUID.
    Plain callables are used as is; ValueError, TypeError, KeyError and
    ArithmeticError raised by them count as conversion failures.
    """

    def __init__(self, element_type: ElementType):
        self.element_type = element_type
        self.type_name: str = getattr(element_type, "__name__", repr(element_type))
        self._convert = self._build(element_type)

    @staticmethod
    def _build(element_type: ElementType) -> Callable[[str], Any]:
        if (get_origin(element_type) is None and isinstance(element_type, type)
                and issubclass(element_type, Enum)):
            return _enum_converter(element_type)
        if isinstance(element_type, type) or get_origin(element_type) is not None:
            try:
                return TypeAdapter(element_type).validate_python
            except PydanticSchemaGenerationError as exc:
                raise UnsupportedElementTypeError(element_type) from exc
        if callable(element_type):
            return element_type
        raise UnsupportedElementTypeError(element_type)

    def convert(self, token: str) -> ConversionResult:
        """
        Convert a token without raising on malformed input.
        :param token: Trimmed raw token
        :return: ConversionResult carrying either the value or the conversion error
        """
        try:
            return ConversionResult(ok=True, value=self._convert(token))
        except (ValueError, TypeError, KeyError, ArithmeticError) as exc:
            return ConversionResult(ok=False, error=exc)


def _enum_converter(enum_cls: type[Enum]) -> Callable[[str], Enum]:
    by_name: Dict[str, Enum] = {name.lower(): member
                                for name, member in enum_cls.__members__.items()}
    by_value_text: Dict[str, Enum] = {str(member.value): member for member in enum_cls}
    by_value = TypeAdapter(enum_cls).validate_python

    def _convert(token: str) -> Enum:
        member = by_name.get(token.lower())
        if member is not None:
            return member
        member = by_value_text.get(token)
        if member is not None:
            return member
        return by_value(token)

    return _convert


def convert_element(token: str, element_type: ElementType) -> ConversionResult:
    """
    Convert a single token to element_type.
    :param token: Raw token
    :param element_type: Target type or conversion callable
    :return: ConversionResult
    """
    return ElementConverter(element_type).convert(token)
