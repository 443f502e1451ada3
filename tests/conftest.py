import os
import tempfile

# Keep logs and staged uploads out of the working tree
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="legal-assist-logs-"))
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="legal-assist-uploads-"))

import mongomock
import pytest
from fastapi.testclient import TestClient

from common.db import MongoDB
from common.exceptions import UpstreamError


def build_pdf(text: str = "") -> bytes:
    """Single-page PDF with an optional line of Helvetica text."""
    stream = f"BT /F1 24 Tf 72 720 Td ({text}) Tj ET".encode("latin-1") if text else b""
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Resources << /Font << /F1 5 0 R >> >> /Contents 4 0 R >>",
        b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    out = b"%PDF-1.4\n"
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"
    xref_offset = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (
        len(objects) + 1, xref_offset)
    return out


class FakeGemini:
    """Records prompts instead of calling Gemini."""

    def __init__(self, reply="A concise summary.", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    async def generate(self, prompt, variant):
        self.calls.append((prompt, variant))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def mongo_client():
    return mongomock.MongoClient()


@pytest.fixture
def store(mongo_client):
    db = MongoDB(uri="mongodb://localhost:27017", database_name="legal_assist_test", client=mongo_client)
    db.collection("cases").insert_many([
        {"userId": "u1", "caseNumber": "ABC123", "status": "Open", "lawyerAssigned": "", "__v": 0},
        {"userId": "u2", "caseNumber": "XYZ789", "status": "Closed", "lawyerAssigned": "Jane Roe"},
    ])
    db.collection("lawyers").insert_many([
        {"name": "Ann Tax", "expertise": "Tax Law", "location": "New York", "rating": 4.5},
        {"name": "Bob Kin", "expertise": "Family Law", "location": "Boston", "rating": 4},
        {"name": "Cy Crim", "expertise": "Criminal Defense", "location": "New Orleans", "rating": 3.8},
    ])
    return db


@pytest.fixture
def gemini():
    return FakeGemini()


@pytest.fixture
def failing_gemini():
    return FakeGemini(error=UpstreamError("Gemini returned 503: overloaded", status_code=503))


@pytest.fixture
def client_factory():
    from run import app
    from view.api_view import get_gemini, get_store

    def make(store=None, gemini=None):
        if store is not None:
            app.dependency_overrides[get_store] = lambda: store
        if gemini is not None:
            app.dependency_overrides[get_gemini] = lambda: gemini
        return TestClient(app)

    yield make
    app.dependency_overrides.clear()


@pytest.fixture
def client(client_factory, store, gemini):
    return client_factory(store=store, gemini=gemini)


@pytest.fixture
def pdf_bytes():
    return build_pdf("Lease agreement between Alice and Bob")


@pytest.fixture
def make_pdf():
    return build_pdf
