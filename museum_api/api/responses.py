"""UTF-8 JSON Response: every API body declares its charset explicitly.

Starlette only appends a charset to text/* media types, so the JSON
media type carries it itself. Non-ASCII text (Korean narration) is
rendered verbatim, not \\u-escaped.
"""

from fastapi.responses import JSONResponse


class UTF8JSONResponse(JSONResponse):
    media_type = "application/json; charset=utf-8"
