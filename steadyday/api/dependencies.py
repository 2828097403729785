"""
Shared route dependencies.

The identity provider is external: a trusted front proxy resolves the user
and forwards it in the X-User-Id header. Requests without it are rejected.
"""

from typing import Any, Dict

from fastapi import Header, HTTPException, status


async def get_user_id(x_user_id: str | None = Header(None, alias="X-User-Id")) -> str:
    """Resolve the calling user or fail with 401."""
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Authentication required"
        )
    return x_user_id.strip()


def unwrap(result: Dict[str, Any]) -> Any:
    """
    Return a handler result's data, or raise the matching HTTP error.

    "... not found ..." errors become 404, every other failure 400.
    """
    if result.get("success"):
        return result.get("data", {"message": result.get("message")})

    error = result.get("error", "Request failed")
    if "not found" in error.lower():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=error)
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error)
