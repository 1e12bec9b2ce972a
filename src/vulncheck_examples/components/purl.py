from __future__ import annotations

from ..app.container import provide_client
from .common import exit_on_api_error, print_json

PURL = "pkg:hex/coherence@0.1.2"


def get_purl() -> None:
    with exit_on_api_error(), provide_client() as client:
        resp = client.get_purl(PURL)
    print_json(resp.data)
