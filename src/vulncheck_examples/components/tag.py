from __future__ import annotations

from ..app.container import provide_client
from .common import exit_on_api_error, print_text

TAG = "vulncheck-c2"


def get_tag() -> None:
    with exit_on_api_error(), provide_client() as client:
        body = client.get_tag(TAG)
    print_text(body)
