# dependencies.py
"""
FastAPI dependencies shared by the routers.

Collaborators live on ``app.state`` (set up by ``main.create_app``) so tests
can swap in an in-memory store, a fake blob store or a fake mailer.
"""
import os
import threading

from dotenv import load_dotenv
from fastapi import HTTPException, Request
from jose import JWTError, jwt

from services import LiveGroupedPayments, RecordStore

load_dotenv()
SECRET_KEY = os.getenv("JWT_SECRET")
ALGORITHM = "HS256"

_live_lock = threading.Lock()


# Token Auth Dependency
def verify_token(request: Request):
     auth = request.headers.get("Authorization")
     if not auth or not auth.startswith("Bearer "):
          raise HTTPException(status_code=401, detail="Missing token")
     token = auth.split(" ")[1]
     try:
          payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
          return payload
     except JWTError:
          raise HTTPException(status_code=403, detail="Invalid token")


def get_record_store(request: Request) -> RecordStore:
     return request.app.state.store


def get_live_payments(request: Request) -> LiveGroupedPayments:
     """The grouped-payments view, subscribed on first use."""
     state = request.app.state
     with _live_lock:
          if getattr(state, "live_payments", None) is None:
               state.live_payments = LiveGroupedPayments(state.store)
     return state.live_payments


def get_blob_store(request: Request):
     blob_store = request.app.state.blob_store
     if blob_store is None:
          raise HTTPException(status_code=503, detail="File storage is not configured")
     return blob_store


def get_optional_blob_store(request: Request):
     return request.app.state.blob_store


def get_mailer(request: Request):
     return request.app.state.mailer


def get_analysis_client(request: Request):
     return request.app.state.analysis_client
