"""Response classes shared by the routes and exception handlers."""

from fastapi.responses import JSONResponse, PlainTextResponse


class NoStoreJSONResponse(JSONResponse):
    """JSON with an explicit charset, never cached by clients or proxies."""

    media_type = "application/json; charset=utf-8"

    def __init__(self, content, status_code: int = 200, headers=None, **kwargs):
        headers = dict(headers or {})
        headers.setdefault("Cache-Control", "no-store")
        super().__init__(content, status_code=status_code, headers=headers, **kwargs)


class NotFoundResponse(PlainTextResponse):
    def __init__(self):
        super().__init__("Not found", status_code=404)
