from __future__ import annotations

from urllib.parse import quote


def get_base_url(scheme: str, host: str, base_path: str = "/v3") -> str:
	path = "/" + base_path.strip("/") if base_path.strip("/") else ""
	return f"{scheme}://{host}{path}"


def get_indexes_url(base_url: str) -> str:
	return f"{base_url}/index"


def get_index_url(base_url: str, index: str) -> str:
	return f"{base_url}/index/{quote(index, safe='')}"


def get_backups_url(base_url: str) -> str:
	return f"{base_url}/backup"


def get_backup_url(base_url: str, index: str) -> str:
	return f"{base_url}/backup/{quote(index, safe='')}"


def get_cpe_url(base_url: str) -> str:
	return f"{base_url}/cpe"


def get_purl_url(base_url: str) -> str:
	return f"{base_url}/purl"


def get_pdns_url(base_url: str, name: str) -> str:
	return f"{base_url}/pdns/{quote(name, safe='')}"


def get_rule_url(base_url: str, rule_type: str) -> str:
	return f"{base_url}/rules/initial-access/{quote(rule_type, safe='')}"


def get_tag_url(base_url: str, name: str) -> str:
	return f"{base_url}/tags/{quote(name, safe='')}"
