from pathlib import Path

from pydantic import BaseModel, Field


class QuickAnalyzeRequest(BaseModel):
    resume_text: str = Field(..., max_length=50000, description="Plain text resume content")
    jd: str = Field("", max_length=10000, description="Job description text")


class UploadedDocument(BaseModel):
    """A resume upload spooled to a temporary file for the span of one request."""

    filename: str
    path: Path

    @property
    def extension(self) -> str:
        return Path(self.filename).suffix.lower()
