# models/document.py
from sqlalchemy import Column, String, DateTime, func
from .base import Base, generate_id


class Document(Base):
     """Document model - metadata of a file held in the blob store."""

     id = Column(String(36), primary_key=True, default=generate_id)
     name = Column(String(255), nullable=False)
     type = Column(String(100), default="", nullable=False)
     size = Column(String(50), default="", nullable=False)
     uploaded = Column(String(20), nullable=False)  # ISO date
     url = Column(String(500), nullable=False)
     path = Column(String(500), nullable=False)

     created_at = Column(DateTime, server_default=func.now(), nullable=False)

     def __repr__(self):
          return f"<Document(id={self.id}, name='{self.name}')>"
