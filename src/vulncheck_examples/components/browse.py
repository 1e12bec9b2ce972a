from __future__ import annotations

from ..app.container import provide_client
from .common import exit_on_api_error, print_json


def browse_indexes() -> None:
    with exit_on_api_error(), provide_client() as client:
        resp = client.list_indexes()
    print_json(resp.data)


def browse_backups() -> None:
    with exit_on_api_error(), provide_client() as client:
        resp = client.list_backups()
    print_json(resp.data)
