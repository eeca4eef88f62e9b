"""Answer endpoint methods for Exa API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from exa_client.models import AnswerRequest, AnswerResponse
from exa_client.schema import resolve_output_schema

if TYPE_CHECKING:
    from pydantic import BaseModel


class AnswerMixin:
    """Mixin providing answer-related Exa API methods."""

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        raise NotImplementedError

    async def answer(
        self,
        query: str,
        *,
        text: bool = False,
        model: str | None = None,
        system_prompt: str | None = None,
        output_schema: dict[str, Any] | type[BaseModel] | None = None,
    ) -> AnswerResponse:
        """Generate an answer for a query via Exa `/answer`.

        Args:
            query: Question to answer.
            text: Whether to request full text for citations.
            model: Optional answer model name.
            system_prompt: Optional system prompt steering the answer.
            output_schema: JSON schema dict or pydantic model class for a structured answer.

        Returns:
            Parsed `AnswerResponse`.

        Raises:
            TypeError: If `output_schema` is neither a dict nor a pydantic model class.
            ExaAuthError: If the API key is invalid.
            ExaRateLimitError: If rate-limited.
            ExaAPIError: For other API/network/response errors.
        """
        request = AnswerRequest(
            query=query,
            text=text,
            model=model,
            system_prompt=system_prompt,
            output_schema=resolve_output_schema(output_schema),
        )
        data = await self._request(
            "POST",
            "/answer",
            json_body=request.model_dump(by_alias=True, exclude_none=True, mode="json"),
        )
        return AnswerResponse.model_validate(data)
