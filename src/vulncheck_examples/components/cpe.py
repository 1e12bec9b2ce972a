from __future__ import annotations

from ..app.container import provide_client
from .common import exit_on_api_error, print_json

CPE = "cpe:/a:microsoft:internet_explorer:8.0.6001:beta"


def get_cpe() -> None:
    with exit_on_api_error(), provide_client() as client:
        resp = client.get_cpe(CPE)
    print_json(resp.data)
