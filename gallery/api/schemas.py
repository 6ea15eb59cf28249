"""Request/response Pydantic models."""

from pydantic import BaseModel, Field

from gallery.pagination import ScrollPosition


class ScrollRequest(BaseModel):
    viewport_height: float = Field(ge=0)
    scroll_offset: float = Field(ge=0)
    document_height: float = Field(ge=0)

    def to_position(self) -> ScrollPosition:
        return ScrollPosition(
            viewport_height=self.viewport_height,
            scroll_offset=self.scroll_offset,
            document_height=self.document_height,
        )


class SessionCreated(BaseModel):
    session_id: str


class SessionSnapshot(BaseModel):
    session_id: str
    loader_hidden: bool
    in_flight: bool
    elements: list[str] = []
