"""Decorator that turns service exceptions into failure results."""

from collections.abc import Awaitable, Callable
from functools import wraps
from logging import getLogger
from typing import Any, ParamSpec

from sqlalchemy.exc import SQLAlchemyError
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from cms.configs import file_logger
from cms.errors import BASE_EXCEPTION, BaseAppError
from cms.utils.results import ServiceResult

logger = file_logger(getLogger(__name__))

P = ParamSpec("P")
ServiceMethod = Callable[P, Awaitable[ServiceResult[Any]]]


def guarded(action: str) -> Callable[[ServiceMethod[P]], ServiceMethod[P]]:
    """
    Wrap a service method so that no exception escapes it.

    Application errors below 500 become failure results carrying their own
    message and status. Storage and OS failures roll back the session, get
    logged with their traceback, and become a generic 500 such as
    ``"Error creating category"``.

    The wrapped method must belong to an object exposing ``session`` and
    ``label``.

    Args:
        action: Verb in progressive form, used in the generic message.

    Example:
        @guarded("creating")
        async def create(self, fields: dict) -> ServiceResult[CategoryDB]:
            ...
    """

    def decorator(func: ServiceMethod[P]) -> ServiceMethod[P]:
        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> ServiceResult[Any]:
            service = args[0]
            label = getattr(service, "label", "record").lower()
            generic = f"Error {action} {label}"
            try:
                return await func(*args, **kwargs)
            except BaseAppError as e:
                if e.status_code < HTTP_500_INTERNAL_SERVER_ERROR:
                    logger.info(f"{generic}: {e.detail}")
                    return ServiceResult.from_error(e)
                await service.session.rollback()
                logger.exception(generic)
                return ServiceResult.fail(generic, e.status_code)
            except (SQLAlchemyError, *BASE_EXCEPTION):
                await service.session.rollback()
                logger.exception(generic)
                return ServiceResult.fail(generic, HTTP_500_INTERNAL_SERVER_ERROR)

        return wrapper

    return decorator
