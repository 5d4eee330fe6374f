# careerconnect/services/storage.py
import logging
import random
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import aiofiles
import aiofiles.os
from fastapi import UploadFile

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1 << 20


@dataclass
class StoredFile:
    filename: str
    path: str


def build_stored_filename(original: str, now_ms: Optional[int] = None, rand: Optional[int] = None) -> str:
    """
    `<epoch-ms>-<random 0..1e9>-<original basename>`; the prefix keeps
    concurrent uploads of the same name apart.
    """
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    if rand is None:
        rand = random.randint(0, 10**9)
    # keep only the last path component of whatever the client sent
    base = Path(original.replace("\\", "/")).name
    return f"{now_ms}-{rand}-{base}"


def ensure_upload_dir(upload_dir: str) -> Path:
    p = Path(upload_dir)
    p.mkdir(parents=True, exist_ok=True)
    return p


async def store_file(file: UploadFile, upload_dir: str) -> StoredFile:
    """
    Write an uploaded file under `upload_dir` and return its generated
    name and path (the path is relative when `upload_dir` is).
    """
    filename = build_stored_filename(file.filename or "")
    local_path = ensure_upload_dir(upload_dir) / filename
    written = 0
    async with aiofiles.open(local_path, "wb") as out:
        while True:
            chunk = await file.read(CHUNK_SIZE)
            if not chunk:
                break
            await out.write(chunk)
            written += len(chunk)
    logger.info("Stored upload %s (%d bytes)", local_path, written)
    return StoredFile(filename=filename, path=str(local_path))


async def discard_file(path: str) -> None:
    try:
        await aiofiles.os.remove(path)
        logger.info("Removed orphaned upload %s", path)
    except FileNotFoundError:
        pass
