# routers/documents.py
"""
Document API routes: files kept in blob storage with their metadata.
"""
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile, status

from dependencies import get_blob_store, get_optional_blob_store, get_record_store, verify_token
from schemas import DocumentPatch, DocumentRecord
from services import RecordStore, DOCUMENTS
from services.blob_store import blob_path, discard_blob

router = APIRouter(prefix="/api/documents", tags=["documents"], dependencies=[Depends(verify_token)])


def human_size(num_bytes: int) -> str:
     """e.g. 2516582 -> "2.4 MB"."""
     size = float(num_bytes)
     for unit in ("B", "KB", "MB"):
          if size < 1024:
               return f"{size:.0f} {unit}" if unit == "B" else f"{size:.1f} {unit}"
          size /= 1024
     return f"{size:.1f} GB"


@router.get("", response_model=List[DocumentRecord], summary="List documents")
def list_documents(store: RecordStore = Depends(get_record_store)):
     return sorted(store.fetch_all(DOCUMENTS), key=lambda d: d.uploaded, reverse=True)


@router.post(
     "",
     response_model=DocumentRecord,
     status_code=status.HTTP_201_CREATED,
     summary="Upload a document",
)
async def upload_document(
     file: UploadFile = File(...),
     name: Optional[str] = Form(None),
     store: RecordStore = Depends(get_record_store),
     blob_store=Depends(get_blob_store),
):
     """
     Upload a file.

     - **file**: The document
     - **name**: Display name; defaults to the file name
     """
     data = await file.read()
     path = blob_path("documents", "shared", file.filename)
     url = blob_store.upload(path, data, file.content_type or "application/octet-stream")
     fields = {
          "name": name or file.filename or "document",
          "type": file.content_type or "",
          "size": human_size(len(data)),
          "uploaded": date.today().isoformat(),
          "url": url,
          "path": path,
     }
     document_id = store.create(DOCUMENTS, fields)
     return store.get(DOCUMENTS, document_id)


@router.put("/{document_id}", response_model=DocumentRecord, summary="Rename a document")
def rename_document(document_id: str, body: DocumentPatch, store: RecordStore = Depends(get_record_store)):
     return store.update(DOCUMENTS, document_id, body.model_dump(exclude_unset=True))


@router.delete("/{document_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a document")
def delete_document(
     document_id: str,
     store: RecordStore = Depends(get_record_store),
     blob_store=Depends(get_optional_blob_store),
):
     document = store.get(DOCUMENTS, document_id)
     store.delete(DOCUMENTS, document_id)
     discard_blob(blob_store, document.path)
     return Response(status_code=status.HTTP_204_NO_CONTENT)
