from __future__ import annotations


class ApiError(Exception):
    """Raised when the API answers with anything other than HTTP 200."""

    def __init__(self, status_code: int, url: str, body: str = "") -> None:
        self.status_code = status_code
        self.url = url
        self.body = body
        super().__init__(self._render())

    def _render(self) -> str:
        message = f"HTTP {self.status_code} from {self.url}"
        detail = self.body.strip()
        if detail:
            if len(detail) > 200:
                detail = detail[:200] + "..."
            message = f"{message}: {detail}"
        return message
