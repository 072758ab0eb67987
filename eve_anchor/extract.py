"""Unpacking of the bundled data archive."""

from __future__ import annotations

import gzip
import shutil
import tarfile
from pathlib import Path


def extract_data(archive: str | Path, target: str | Path) -> list[Path]:
    """Unpack ``archive`` into ``target`` and decompress ``target/data/*.gz``.

    Each ``.gz`` file is replaced by its decompressed contents. Returns the
    paths of the decompressed files, sorted.
    """
    target = Path(target)
    target.mkdir(parents=True, exist_ok=True)
    with tarfile.open(archive, "r:gz") as tar:
        if hasattr(tarfile, "data_filter"):
            tar.extractall(target, filter="data")
        else:
            tar.extractall(target)

    produced = []
    for path in sorted((target / "data").iterdir()):
        if path.suffix != ".gz":
            continue
        destination = path.with_suffix("")
        with gzip.open(path, "rb") as source, destination.open("wb") as sink:
            shutil.copyfileobj(source, sink)
        path.unlink()
        produced.append(destination)
    return produced