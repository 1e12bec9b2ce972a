from __future__ import annotations

from ..app.container import provide_client
from .common import exit_on_api_error, print_json

BACKUP_INDEX = "mitre-cvelist-v5"


def get_index_backup() -> None:
    with exit_on_api_error(), provide_client() as client:
        resp = client.get_backup(BACKUP_INDEX)
    print_json(resp.data)
