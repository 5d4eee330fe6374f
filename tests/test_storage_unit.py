# tests/test_storage_unit.py
import re
from io import BytesIO

import pytest
from fastapi import UploadFile
from starlette.datastructures import Headers

import careerconnect.services.storage as storage_mod


def test_stored_filename_format():
    assert storage_mod.build_stored_filename("cv.pdf", now_ms=1700000000000, rand=42) == "1700000000000-42-cv.pdf"

    name = storage_mod.build_stored_filename("resume final.docx")
    assert re.fullmatch(r"\d{13}-\d{1,10}-resume final\.docx", name)


def test_stored_filename_drops_client_directories():
    assert storage_mod.build_stored_filename("../../etc/passwd", now_ms=1, rand=2) == "1-2-passwd"
    assert storage_mod.build_stored_filename("C:\\docs\\cv.pdf", now_ms=1, rand=2) == "1-2-cv.pdf"


@pytest.mark.asyncio
async def test_store_and_discard_file(tmp_path):
    content = b"hello unit test"
    headers = Headers({"content-type": "text/plain"})
    upload = UploadFile(file=BytesIO(content), filename="test.txt", size=len(content), headers=headers)

    upload_dir = tmp_path / "nested" / "uploads"
    stored = await storage_mod.store_file(upload, str(upload_dir))
    assert stored.filename.endswith("-test.txt")
    assert (upload_dir / stored.filename).read_bytes() == content

    await storage_mod.discard_file(stored.path)
    assert not (upload_dir / stored.filename).exists()
    # already gone
    await storage_mod.discard_file(stored.path)
