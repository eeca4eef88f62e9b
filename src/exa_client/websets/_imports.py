"""Import operations for Exa Websets API (including CSV upload)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx
import structlog

from exa_client._normalization import build_pagination_params
from exa_client._pagination import collect_all, iterate_pages
from exa_client._polling import poll_until_terminal
from exa_client.exceptions import ExaAPIError, ExaError
from exa_client.models import ListPage
from exa_client.websets._base import WebsetsResourceClient
from exa_client.websets.models import (
    CreateImportParameters,
    CreateImportResponse,
    CsvImportOptions,
    Entity,
    Import,
    ImportFormat,
    ImportStatus,
    UpdateImport,
)

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable

logger = structlog.get_logger()

MAX_CSV_BYTES = 50 * 1024 * 1024


def _csv_record_count(csv_text: str) -> int:
    lines = [line for line in csv_text.split("\n") if line.strip()]
    return max(0, len(lines) - 1)


class WebsetImportsClient(WebsetsResourceClient):
    """Imports of external data (CSV files) that Websets can search or enrich."""

    async def create(self, params: CreateImportParameters) -> CreateImportResponse:
        """Create an import via POST /v0/imports.

        The response carries `upload_url`, where the CSV body must be PUT.
        """
        data = await self._request(
            "POST",
            "/v0/imports",
            json_body=params.model_dump(by_alias=True, exclude_none=True, mode="json"),
        )
        return CreateImportResponse.model_validate(data)

    async def create_with_csv(
        self,
        csv_data: str | bytes,
        *,
        entity: Entity,
        title: str | None = None,
        metadata: dict[str, Any] | None = None,
        csv: CsvImportOptions | None = None,
    ) -> Import:
        """Create a CSV import, upload the data, and return the import's state.

        Size and record count are computed from `csv_data`. If the upload fails the
        import is deleted before the error is re-raised.

        Args:
            csv_data: CSV text (header row first) or its UTF-8 bytes.
            entity: Entity type of the rows.
            title: Optional import title.
            metadata: Optional key-value metadata.
            csv: Optional CSV settings (e.g. the URL column).

        Returns:
            The import as reported after the upload.

        Raises:
            ValueError: If the CSV exceeds 50 MB or has no data rows.
            ExaAPIError: If creation or upload fails.
        """
        payload = csv_data.encode("utf-8") if isinstance(csv_data, str) else csv_data
        size = len(payload)
        if size > MAX_CSV_BYTES:
            raise ValueError(
                f"CSV file too large: {size / (1024 * 1024):.1f}MB. Maximum size is 50MB."
            )
        record_count = _csv_record_count(payload.decode("utf-8"))
        if record_count == 0:
            raise ValueError("CSV file appears to have no data records (only header or empty)")

        created = await self.create(
            CreateImportParameters(
                title=title,
                format=ImportFormat.CSV,
                entity=entity,
                size=size,
                count=record_count,
                csv=csv,
                metadata=metadata,
            )
        )
        if not created.upload_url:
            raise ExaAPIError(f"Import {created.id} was created without an upload URL")

        try:
            await self._upload(created.upload_url, payload)
        except ExaError:
            await self._discard(created.id)
            raise

        return await self.get(created.id)

    async def _upload(self, upload_url: str, payload: bytes) -> None:
        # The pre-signed URL carries its own credentials; the API key must not be sent.
        try:
            async with httpx.AsyncClient(timeout=self._http.config.timeout_seconds) as client:
                response = await client.put(upload_url, content=payload)
        except httpx.HTTPError as e:
            raise ExaAPIError(f"Failed to upload CSV data: {e}", retryable=True) from e

        if response.is_error:
            raise ExaAPIError(
                f"Upload failed: {response.status_code} {response.reason_phrase}. {response.text}",
                status_code=response.status_code,
            )

    async def _discard(self, import_id: str) -> None:
        try:
            await self.delete(import_id)
        except ExaError as e:
            logger.warning("Failed to delete import after upload error", id=import_id, error=str(e))

    async def get(self, import_id: str) -> Import:
        """Get an import via GET /v0/imports/{id}."""
        data = await self._request("GET", f"/v0/imports/{import_id}")
        return Import.model_validate(data)

    async def list(
        self, *, cursor: str | None = None, limit: int | None = None
    ) -> ListPage[Import]:
        """List imports via GET /v0/imports."""
        data = await self._request(
            "GET", "/v0/imports", params=build_pagination_params(cursor, limit)
        )
        return ListPage[Import].model_validate(data)

    def list_all(self, *, limit: int | None = None) -> AsyncIterator[Import]:
        async def _page(cursor: str | None) -> ListPage[Import]:
            return await self.list(cursor=cursor, limit=limit)

        return iterate_pages(_page)

    async def get_all(self, *, limit: int | None = None) -> list[Import]:
        async def _page(cursor: str | None) -> ListPage[Import]:
            return await self.list(cursor=cursor, limit=limit)

        return await collect_all(_page)

    async def update(self, import_id: str, params: UpdateImport) -> Import:
        """Update an import via PATCH /v0/imports/{id}."""
        data = await self._request(
            "PATCH",
            f"/v0/imports/{import_id}",
            json_body=params.model_dump(by_alias=True, exclude_none=True, mode="json"),
        )
        return Import.model_validate(data)

    async def delete(self, import_id: str) -> Import:
        """Delete an import via DELETE /v0/imports/{id}."""
        data = await self._request("DELETE", f"/v0/imports/{import_id}")
        return Import.model_validate(data)

    async def wait_until_completed(
        self,
        import_id: str,
        *,
        interval_seconds: float = 2.0,
        timeout_seconds: float | None = 300.0,
        on_poll: Callable[[str], None] | None = None,
    ) -> Import:
        """Poll an import until processing completes.

        Raises:
            ExaResourceFailedError: If the import fails (carries `failed_message`).
            ExaTimeoutError: If it is still processing after `timeout_seconds`.
        """
        return await poll_until_terminal(
            lambda: self.get(import_id),
            get_status=lambda item: item.status.value,
            success={ImportStatus.COMPLETED.value},
            failure={ImportStatus.FAILED.value},
            interval_seconds=interval_seconds,
            timeout_seconds=timeout_seconds,
            on_poll=on_poll,
            describe="Import",
            resource_id=import_id,
            failure_message=lambda item: item.failed_message or "Unknown error",
        )
