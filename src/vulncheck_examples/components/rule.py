from __future__ import annotations

from ..app.container import provide_client
from .common import exit_on_api_error, print_text

RULE_TYPE = "suricata"


def get_rule() -> None:
    with exit_on_api_error(), provide_client() as client:
        body = client.get_rule(RULE_TYPE)
    print_text(body)
