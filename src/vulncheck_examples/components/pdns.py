from __future__ import annotations

from ..app.container import provide_client
from .common import exit_on_api_error, print_text

PDNS_LIST = "vulncheck-c2"


def get_pdns() -> None:
    with exit_on_api_error(), provide_client() as client:
        body = client.get_pdns(PDNS_LIST)
    print_text(body)
