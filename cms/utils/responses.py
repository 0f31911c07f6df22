"""
Translation of service results into HTTP responses.

Every endpoint answers with the same envelope::

    {"success": true, "message": "Category created successfully", "data": {...}}
    {"success": false, "message": "Category not found", "data": null}
"""

from typing import Any

from fastapi.responses import ORJSONResponse
from pydantic import BaseModel

from cms.errors import error_content
from cms.utils.results import PageData, ServiceResult


def serialize(data: Any, schema: type[BaseModel] | None = None) -> Any:
    """
    Turn a service payload into JSON-ready data.

    Models, dicts and lists of either are passed through ``schema`` so the
    output uses its camelCase aliases; pages keep their envelope keys.
    """
    if data is None:
        return None
    if isinstance(data, PageData):
        return data.as_dict(items=[serialize(item, schema) for item in data.items])
    if isinstance(data, list):
        return [serialize(item, schema) for item in data]
    if schema is not None:
        return schema.model_validate(data, from_attributes=True).model_dump(mode="json", by_alias=True)
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json")
    return data


def to_response(result: ServiceResult[Any], schema: type[BaseModel] | None = None) -> ORJSONResponse:
    """
    Map a result record to a response.

    Args:
        result: Outcome returned by a service.
        schema: Response schema for the payload.

    Returns:
        ORJSONResponse: The envelope with the result's status code.
    """
    if not result.success:
        return ORJSONResponse(content=error_content(result.message), status_code=result.status_code)

    content = {
        "success": True,
        "message": result.message,
        "data": serialize(result.data, schema),
    }
    return ORJSONResponse(content=content, status_code=result.status_code)
