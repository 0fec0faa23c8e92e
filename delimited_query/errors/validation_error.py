""" Request validation error handler """

from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette.requests import Request
from starlette.responses import JSONResponse
try:
    from starlette.status import HTTP_422_UNPROCESSABLE_CONTENT
except ImportError:  # starlette < 0.48
    from starlette.status import HTTP_422_UNPROCESSABLE_ENTITY as HTTP_422_UNPROCESSABLE_CONTENT


async def request_validation_error_handler(
        _: Request,
        exc: RequestValidationError,
) -> JSONResponse:
    """

    :param _: request
    :param exc: request validation error
    :return: json response with the validation errors
    """
    return JSONResponse(
        {"errors": jsonable_encoder(exc.errors())},
        status_code=HTTP_422_UNPROCESSABLE_CONTENT,
    )
