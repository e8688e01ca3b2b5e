# services/blob_store.py
"""
Blob storage for ID-card photos, property images and documents.

Files are stored under a caller-chosen path and served from the returned
URL. ``AzureBlobStore`` is the production implementation.
"""
import logging
import os
import uuid
from typing import Optional, Protocol

from azure.storage.blob import BlobServiceClient, ContentSettings
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


class BlobStore(Protocol):
     def upload(self, path: str, data: bytes, content_type: str = "application/octet-stream") -> str:
          ...

     def delete(self, path: str) -> None:
          ...


def blob_path(folder: str, owner_id: str, filename: str) -> str:
     """Unique path for an upload, keeping the original extension."""
     ext = os.path.splitext(filename or "")[1]
     return f"{folder}/{owner_id}/{uuid.uuid4()}{ext}"


class AzureBlobStore:
     """Azure Blob Storage, configured from AZURE_STORAGE_ACCOUNT / _KEY / _CONTAINER."""

     def __init__(self, account: str = None, key: str = None, container: str = None):
          self.account = account or os.getenv("AZURE_STORAGE_ACCOUNT")
          self.container = container or os.getenv("AZURE_STORAGE_CONTAINER", "rentify")
          key = key or os.getenv("AZURE_STORAGE_KEY")
          self._service = BlobServiceClient.from_connection_string(
               f"DefaultEndpointsProtocol=https;"
               f"AccountName={self.account};"
               f"AccountKey={key};"
               f"EndpointSuffix=core.windows.net"
          )

     def upload(self, path: str, data: bytes, content_type: str = "application/octet-stream") -> str:
          blob_client = self._service.get_blob_client(container=self.container, blob=path)
          blob_client.upload_blob(
               data,
               overwrite=True,
               content_settings=ContentSettings(content_type=content_type),
          )
          return f"https://{self.account}.blob.core.windows.net/{self.container}/{path}"

     def delete(self, path: str) -> None:
          """
          Deletes a file from Azure Blob Storage using its path
          """
          blob_client = self._service.get_blob_client(container=self.container, blob=path)
          blob_client.delete_blob()


def discard_blob(blob_store: Optional[BlobStore], path: Optional[str]) -> None:
     """Delete a replaced or orphaned blob; failures are logged, the record write stands."""
     if blob_store is None or not path:
          return
     try:
          blob_store.delete(path)
     except Exception as e:
          logger.warning("Could not delete blob %s: %s", path, e)
