from __future__ import annotations

from ..app.container import provide_client
from .common import exit_on_api_error, print_json


def _print_index(index: str, **filters: str) -> None:
    with exit_on_api_error(), provide_client() as client:
        resp = client.get_index(index, **filters)
    print_json(resp.data)


def get_index_initial_access() -> None:
    _print_index("initial-access")


def get_index_vulnrichment() -> None:
    _print_index("vulnrichment")


def get_index_with_cve_filter() -> None:
    _print_index("initial-access", cve="CVE-2023-27350")


def get_index_with_botnet_filter() -> None:
    _print_index("botnets", botnet="Fbot")


def get_index_ip_intel() -> None:
    _print_index("ipintel-3d", country="Sweden", id="c2")


def get_index_canaries() -> None:
    _print_index("vulncheck-canaries")
