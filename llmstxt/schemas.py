"""
Pydantic schemas for the llms.txt generator.

- SkippedFile: a document dropped from the output because it failed to process
- GenerationResult: summary of one generation run
"""

from pydantic import BaseModel, Field
from typing import List


class SkippedFile(BaseModel):
    """A documentation file that could not be read or processed."""
    path: str = Field(description="Absolute path of the skipped file")
    error: str = Field(description="Error message from the failed read or transform")


class GenerationResult(BaseModel):
    """Summary of a completed generation run."""
    docs_path: str = Field(description="Resolved documentation directory")
    output_path: str = Field(description="Path of the written llms.txt file")
    files_found: int = Field(description="Number of Markdown files discovered")
    files_processed: int = Field(description="Number of files included in the output")
    files_skipped: List[SkippedFile] = Field(
        default_factory=list,
        description="Files that failed and contribute nothing to the output"
    )
    output_chars: int = Field(description="Length of the combined text in characters")
    timestamp: str = Field(description="ISO timestamp when the output was written")

    class Config:
        json_schema_extra = {
            "example": {
                "docs_path": "/srv/site/docs",
                "output_path": "/srv/site/llms.txt",
                "files_found": 42,
                "files_processed": 41,
                "files_skipped": [
                    {"path": "/srv/site/docs/broken.md", "error": "invalid start byte"}
                ],
                "output_chars": 183204,
                "timestamp": "2025-01-15T10:30:00"
            }
        }
