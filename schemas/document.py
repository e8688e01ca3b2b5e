# schemas/document.py
"""
Pydantic schemas for uploaded documents and for printable document content.
"""
from typing import List, Optional, Tuple

from pydantic import Field

from .base import CamelModel


class DocumentFields(CamelModel):
     """Metadata stored for a document uploaded to the blob store."""
     name: str = Field(..., min_length=1, max_length=255)
     type: str = Field("", max_length=100)
     size: str = Field("", max_length=50, description='Human-readable size, e.g. "2.4 MB"')
     uploaded: str = Field(..., description="Upload date (ISO)")
     url: str = Field(..., max_length=500)
     path: str = Field(..., max_length=500)


class DocumentPatch(CamelModel):
     name: Optional[str] = Field(None, min_length=1, max_length=255)


class DocumentRecord(DocumentFields):
     id: str


class PrintableDocument(CamelModel):
     """Structured content handed to the document renderer."""
     title: str
     issuer_lines: List[str] = Field(default_factory=list)
     rows: List[Tuple[str, str]] = Field(default_factory=list)
     note: Optional[str] = None
