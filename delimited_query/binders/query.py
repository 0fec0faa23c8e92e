"""FastAPI dependencies binding delimited query parameters to typed lists."""
import inspect
from typing import Any, List, Optional

from fastapi import Query

from delimited_query.binders.conversion import ElementType
from delimited_query.binders.delimited_array import DelimitedArrayParser


class DelimitedQuery:
    """
    Dependency reading every occurrence of a query parameter and parsing it.

    Usage:
        ids: Annotated[List[int], Depends(DelimitedQuery("ids", int))]

    "?ids=1,2,3" and "?ids=1&ids=2&ids=3" both bind [1, 2, 3];
    a missing parameter binds [].
    The parameter is declared to FastAPI under its query name, so it is
    documented in the OpenAPI schema like any Query parameter.
    """

    def __init__(self, name: str, element_type: ElementType, delimiter: str = ",",
                 description: Optional[str] = None):
        self.name = name
        self.parser = DelimitedArrayParser(element_type, delimiter=delimiter)
        if description is None:
            description = (f"'{delimiter}'-delimited list of "
                           f"{self.parser.converter.type_name}, or repeated parameter.")
        self.description = description
        # FastAPI reads the dependency signature from here
        self.__signature__ = inspect.Signature([
            inspect.Parameter(
                "values",
                inspect.Parameter.POSITIONAL_OR_KEYWORD,
                default=Query(None, alias=name, description=description),
                annotation=Optional[List[str]],
            )
        ])

    def __call__(self, values: Optional[List[str]] = None) -> List[Any]:
        return self.parser.parse(values)


class PipeDelimitedQuery(DelimitedQuery):
    """ DelimitedQuery splitting single values on '|' """

    def __init__(self, name: str, element_type: ElementType,
                 description: Optional[str] = None):
        super().__init__(name, element_type, delimiter="|", description=description)
