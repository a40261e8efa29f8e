"""
Shared plumbing for resource wrappers.
"""

from typing import TYPE_CHECKING, Any, Optional, Type, TypeVar

import pydantic

from ..exceptions import DecodeError, MissingIdentifierError

if TYPE_CHECKING:
    from ..client import CacheFlyClient

ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)


class BaseResource:
    """Base class for a single API resource bound to a client."""

    def __init__(self, client: "CacheFlyClient"):
        self._client = client

    @staticmethod
    def _require_id(resource_id: Optional[str]) -> str:
        """Return ``resource_id`` or raise if it is empty."""
        if not resource_id:
            raise MissingIdentifierError()
        return resource_id

    @staticmethod
    def _parse(model: Type[ModelT], data: Any) -> ModelT:
        """Validate a decoded body into ``model``, raising DecodeError on mismatch."""
        try:
            return model.model_validate(data)
        except pydantic.ValidationError as e:
            raise DecodeError(f"Unexpected {model.__name__} payload: {e}")

    def _request(self, method: str, endpoint: str, **kwargs) -> Any:
        response = self._client._make_request(method, endpoint, **kwargs)
        return self._client._decode(response)

    async def _arequest(self, method: str, endpoint: str, **kwargs) -> Any:
        response = await self._client._make_async_request(method, endpoint, **kwargs)
        return self._client._decode(response)

    def _request_model(self, model: Type[ModelT], method: str, endpoint: str, **kwargs) -> ModelT:
        return self._parse(model, self._request(method, endpoint, **kwargs))

    async def _arequest_model(
        self, model: Type[ModelT], method: str, endpoint: str, **kwargs
    ) -> ModelT:
        return self._parse(model, await self._arequest(method, endpoint, **kwargs))
