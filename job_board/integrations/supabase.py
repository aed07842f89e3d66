"""
Supabase integration.

Talks to the hosted Postgres database through its PostgREST endpoint
(``<project url>/rest/v1/<table>``). Row level security on the server decides
what the given key may read or write.
"""

from typing import Optional

import requests

from .base import DataStore, DataStoreError


class SupabaseStore(DataStore):
    """Remote relational store behind the Supabase REST API."""

    REST_PATH = "/rest/v1"
    DEFAULT_TIMEOUT = 30

    def __init__(
        self,
        url: str,
        api_key: str,
        access_token: Optional[str] = None,
        timeout: int = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the Supabase store.

        Args:
            url: Project URL, e.g. https://xyz.supabase.co
            api_key: Project API key (anon or service role)
            access_token: Signed-in user's JWT; defaults to the API key
            timeout: Request timeout in seconds
            session: Optional pre-configured requests session
        """
        super().__init__()
        if not url or not api_key:
            raise ValueError("Supabase store requires a project URL and an API key")

        self.base_url = url.rstrip("/") + self.REST_PATH
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "apikey": api_key,
            "Authorization": f"Bearer {access_token or api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        })

    @property
    def name(self) -> str:
        return "supabase"

    def select(
        self,
        collection: str,
        filters: Optional[dict] = None,
        order_by: Optional[str] = None,
        descending: bool = False,
    ) -> list[dict]:
        params = {"select": "*"}
        params.update(self._filter_params(filters))
        if order_by:
            params["order"] = f"{order_by}.{'desc' if descending else 'asc'}"

        return self._request("GET", collection, params=params)

    def insert(self, collection: str, record: dict) -> dict:
        rows = self._request(
            "POST",
            collection,
            json=record,
            headers={"Prefer": "return=representation"},
        )
        if not rows:
            raise DataStoreError(f"Insert into {collection} returned no row")
        return rows[0]

    def update(self, collection: str, record_id: str, changes: dict) -> Optional[dict]:
        rows = self._request(
            "PATCH",
            collection,
            params=self._filter_params({"id": record_id}),
            json=self._prepare_update(changes),
            headers={"Prefer": "return=representation"},
        )
        return rows[0] if rows else None

    def delete(self, collection: str, record_id: str) -> bool:
        rows = self._request(
            "DELETE",
            collection,
            params=self._filter_params({"id": record_id}),
            headers={"Prefer": "return=representation"},
        )
        return bool(rows)

    def _filter_params(self, filters: Optional[dict]) -> dict:
        params = {}
        for key, value in (filters or {}).items():
            if value is None:
                params[key] = "is.null"
            elif isinstance(value, bool):
                params[key] = f"is.{str(value).lower()}"
            else:
                params[key] = f"eq.{value}"
        return params

    def _request(self, method: str, collection: str, **kwargs) -> list[dict]:
        self._check_collection(collection)
        url = f"{self.base_url}/{collection}"

        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            self.logger.error(f"Supabase {method} {collection} failed: {e}")
            raise DataStoreError(f"Could not reach Supabase: {e}") from e

        if response.status_code >= 400:
            detail = self._error_detail(response)
            self.logger.error(f"Supabase {method} {collection} returned {response.status_code}: {detail}")
            raise DataStoreError(f"Supabase error {response.status_code}: {detail}")

        if not response.content:
            return []

        try:
            data = response.json()
        except ValueError as e:
            raise DataStoreError(f"Invalid JSON from Supabase: {e}") from e

        if isinstance(data, dict):
            return [data]
        return data

    def _error_detail(self, response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text[:200]
        if isinstance(body, dict):
            return body.get("message") or body.get("hint") or str(body)
        return str(body)
