from __future__ import annotations

from ..config.urls import (
    get_backup_url,
    get_backups_url,
    get_cpe_url,
    get_index_url,
    get_indexes_url,
    get_pdns_url,
    get_purl_url,
    get_rule_url,
    get_tag_url,
)
from ..core.ports.vulncheck_port import VulnCheckPort
from .http_client import HttpClient
from .schemas import ApiEnvelope



class VulnCheckAdapter(VulnCheckPort):
    """VulnCheck v3 endpoints on top of a shared HttpClient.

    One method per endpoint; each issues a single GET. JSON endpoints return the
    parsed envelope, text endpoints return the body unchanged.
    """

    def __init__(self, http_client: HttpClient, base_url: str) -> None:
        self._http = http_client
        self._base_url = base_url.rstrip("/")

    @property
    def base_url(self) -> str:
        return self._base_url

    def _envelope(self, url: str, params: dict[str, str] | None = None) -> ApiEnvelope:
        return ApiEnvelope.model_validate(self._http.get_json(url, params))

    def list_indexes(self) -> ApiEnvelope:
        return self._envelope(get_indexes_url(self._base_url))

    def list_backups(self) -> ApiEnvelope:
        return self._envelope(get_backups_url(self._base_url))

    def get_backup(self, index: str) -> ApiEnvelope:
        return self._envelope(get_backup_url(self._base_url, index))

    def get_index(self, index: str, **filters: str | None) -> ApiEnvelope:
        params = {k: v for k, v in filters.items() if v is not None}
        return self._envelope(get_index_url(self._base_url, index), params)

    def get_cpe(self, cpe: str) -> ApiEnvelope:
        return self._envelope(get_cpe_url(self._base_url), {"cpe": cpe})

    def get_purl(self, purl: str) -> ApiEnvelope:
        return self._envelope(get_purl_url(self._base_url), {"purl": purl})

    def get_pdns(self, name: str) -> str:
        return self._http.get_text(get_pdns_url(self._base_url, name))

    def get_rule(self, rule_type: str) -> str:
        return self._http.get_text(get_rule_url(self._base_url, rule_type))

    def get_tag(self, name: str) -> str:
        return self._http.get_text(get_tag_url(self._base_url, name))
