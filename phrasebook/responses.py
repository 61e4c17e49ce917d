"""HTTP response values for the response assertions."""

from dataclasses import dataclass

import httpx


def media_type(content_type: str) -> str:
    """``application/json; charset=utf-8`` -> ``application/json``."""
    return content_type.split(";", 1)[0].strip().lower()


@dataclass(frozen=True)
class HttpResponse:
    """Status, media type and raw body of a response."""

    status: int
    content_type: str
    body: str

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> "HttpResponse":
        """Build from an httpx response.

        Parameters such as ``charset`` are dropped from the content type.
        Any object with ``status_code``, ``headers`` and ``text`` works, so
        ``requests`` responses and Starlette/FastAPI test client responses are
        accepted too.
        """
        return cls(
            status=response.status_code,
            content_type=media_type(response.headers.get("content-type", "")),
            body=response.text,
        )
