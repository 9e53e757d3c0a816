from __future__ import annotations

from urllib.parse import quote

from fastapi import Response


def attachment(content: bytes | str, filename: str, media_type: str) -> Response:
    """Download response; non-ASCII filenames go in the RFC 5987 parameter."""
    fallback = filename.encode("ascii", "replace").decode("ascii").replace("?", "_")
    disposition = f'attachment; filename="{fallback}"'
    if fallback != filename:
        disposition += f"; filename*=UTF-8''{quote(filename)}"
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": disposition},
    )
