from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ...infra.schemas import ApiEnvelope


class VulnCheckPort(Protocol):
    def list_indexes(self) -> "ApiEnvelope":
        """Return the catalogue of indexes available to the token."""
        ...

    def list_backups(self) -> "ApiEnvelope":
        """Return the catalogue of indexes that offer backups."""
        ...

    def get_backup(self, index: str) -> "ApiEnvelope":
        """Return download links for the backup of one index."""
        ...

    def get_index(self, index: str, **filters: str | None) -> "ApiEnvelope":
        """Return the first page of an index, narrowed by query filters (None values are dropped)."""
        ...

    def get_cpe(self, cpe: str) -> "ApiEnvelope":
        """Return CVEs that match a CPE 2.2 or 2.3 string."""
        ...

    def get_purl(self, purl: str) -> "ApiEnvelope":
        """Return vulnerabilities and metadata for a package URL."""
        ...

    def get_pdns(self, name: str) -> str:
        """Return a protective DNS list as plain text."""
        ...

    def get_rule(self, rule_type: str) -> str:
        """Return initial-access detection rules (e.g. suricata, snort) as plain text."""
        ...

    def get_tag(self, name: str) -> str:
        """Return a tag list as plain text."""
        ...
