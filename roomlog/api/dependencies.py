from typing import Any, Awaitable, Callable, Type, TypeVar, Union, get_args, get_origin

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from roomlog.core.exceptions import ValidationError
from roomlog.services.auth_service import AuthService
from roomlog.services.log_service import LogService

PayloadT = TypeVar("PayloadT", bound=BaseModel)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def get_log_service(request: Request) -> LogService:
    return request.app.state.log_service


def _is_list_annotation(annotation: Any) -> bool:
    origin = get_origin(annotation)
    if origin is list:
        return True
    if origin is Union:
        return any(_is_list_annotation(arg) for arg in get_args(annotation))
    return False


def _form_to_dict(form, model: Type[BaseModel]) -> dict:
    """Flatten form fields into a dict keyed like the JSON body.

    Repeated keys and ``key[]`` keys fill list fields; other fields take the last value.
    """
    list_keys = {
        field.alias or name for name, field in model.model_fields.items() if _is_list_annotation(field.annotation)
    }
    data: dict = {}
    for key in set(form.keys()):
        values = form.getlist(key)
        name = key[:-2] if key.endswith("[]") else key
        if name in list_keys:
            data.setdefault(name, []).extend(values)
        else:
            data[name] = values[-1]
    return data


def request_payload(model: Type[PayloadT]) -> Callable[[Request], Awaitable[PayloadT]]:
    """Build a dependency that reads ``model`` from a JSON or form-encoded body.

    A missing body yields an empty payload so the services report missing fields.
    """

    async def _read_payload(request: Request) -> PayloadT:
        content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
        if content_type in FORM_CONTENT_TYPES:
            data = _form_to_dict(await request.form(), model)
        else:
            raw = await request.body()
            if not raw.strip():
                data = {}
            else:
                try:
                    data = await request.json()
                except ValueError:
                    raise ValidationError("Request body is not valid JSON") from None
        try:
            return model.model_validate(data)
        except PydanticValidationError as e:
            raise RequestValidationError(e.errors()) from e

    return _read_payload
