"""Result types for Google Sheets operations."""

from pydantic import BaseModel


class AppendResult(BaseModel):
    """Returned after a successful row append."""

    updated_rows: int
    updated_range: str = ""
