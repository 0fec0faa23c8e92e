"""
Delimited array parsing: turns a raw query value source into a typed list.

Raw input is either None, a single string holding delimited items, or the
sequence of every occurrence of a repeated query parameter. Tokens that do
not convert to the element type are dropped and logged; parsing itself never
raises for bad input.
"""
from __future__ import annotations

from typing import Any, List, Optional, Sequence, Union

from loguru import logger

from delimited_query.binders.conversion import ElementConverter, ElementType
from delimited_query.utils.parameters import split_delimited

RawInput = Optional[Union[str, Sequence[str]]]


class DelimitedArrayParser:
    """
    Parser for delimited values of a single element type.
    Instances hold only immutable configuration and can be shared across requests.
    """

    def __init__(self, element_type: ElementType, delimiter: str = ","):
        if not delimiter:
            raise ValueError("delimiter must be a non-empty string")
        self.delimiter = delimiter
        self.converter = ElementConverter(element_type)

    @property
    def element_type(self) -> ElementType:
        """Target element type"""
        return self.converter.element_type

    def parse(self, raw_input: RawInput) -> List[Any]:
        """
        Parse raw input into a list of converted elements, in input order.

        :param raw_input: None, a delimited string or a sequence of already split values
        :return: Converted elements; failed conversions are left out
        """
        parsed: List[Any] = []
        for token in self._candidate_tokens(raw_input):
            result = self.converter.convert(token)
            if result.ok:
                parsed.append(result.value)
            else:
                logger.warning(
                    f"Error converting value '{token}' to {self.converter.type_name}: "
                    f"{result.error}")
        return parsed

    def _candidate_tokens(self, raw_input: RawInput) -> List[str]:
        if raw_input is None:
            return []
        if isinstance(raw_input, str):
            return split_delimited(raw_input, self.delimiter)
        values = list(raw_input)
        if len(values) > 1:
            # repeated parameter: one element per occurrence, never re-split
            return [value.strip() for value in values]
        if not values:
            return []
        return split_delimited(values[0], self.delimiter)


def parse_delimited(raw_input: RawInput, element_type: ElementType,
                    delimiter: str = ",") -> List[Any]:
    """
    Parse raw input with a one-off DelimitedArrayParser.
    :param raw_input: None, a delimited string or a sequence of already split values
    :param element_type: Target type or conversion callable
    :param delimiter: Separator for single string input
    :return: Converted elements
    """
    return DelimitedArrayParser(element_type, delimiter=delimiter).parse(raw_input)
