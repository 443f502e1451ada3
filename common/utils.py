import os
import tempfile
from contextlib import contextmanager
from common.config import Config


@contextmanager
def temporary_upload(content: bytes, suffix: str = "", upload_dir: str = None):
    """Stage uploaded bytes in a temp file and yield its path.

    The file is removed when the block exits, whether or not it raised.
    """
    directory = upload_dir or Config.UPLOAD_DIR
    os.makedirs(directory, exist_ok=True)
    fd, path = tempfile.mkstemp(suffix=suffix, dir=directory)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(content)
        yield path
    finally:
        if os.path.exists(path):
            os.remove(path)


def load_document(file_path: str) -> bytes:
    """Read a staged upload back as bytes."""
    with open(file_path, "rb") as handle:
        return handle.read()
