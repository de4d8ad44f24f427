import gzip
import logging
import os
from pathlib import Path

from site_gzip.config import is_zippable, zippable_extensions

logger = logging.getLogger(__name__)

COMPRESS_LEVEL = 9


def compress_file(path, extensions):
    """Write ``<path>.gz`` beside ``path`` and return its path.

    Files whose suffix is not in ``extensions`` are skipped and ``None`` is
    returned. The gzip header carries the source mtime and the source's base
    name (``GzipFile`` drops the directory part, so the full path is not
    embedded). The ``.gz`` file itself gets the source's atime/mtime.
    """
    path = Path(path)
    if not is_zippable(path, extensions):
        return None

    stat = path.stat()
    data = path.read_bytes()
    gz_path = path.with_name(path.name + ".gz")
    tmp_path = path.with_name(path.name + ".gz.tmp")
    try:
        with tmp_path.open("wb") as raw, gzip.GzipFile(
            filename=str(path),
            mode="wb",
            fileobj=raw,
            compresslevel=COMPRESS_LEVEL,
            mtime=int(stat.st_mtime),
        ) as gz:
            gz.write(data)
        os.replace(tmp_path, gz_path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
    os.utime(gz_path, (stat.st_atime, stat.st_mtime))

    logger.debug(
        f"Compressed {path}: {len(data):,} -> {gz_path.stat().st_size:,} bytes"
    )
    return gz_path


def compress_site(site):
    """Compress every output file reported by ``site`` that is on the allow-list."""
    extensions = zippable_extensions(site.config)
    written = []
    for site_file in site.each_site_file():
        gz_path = compress_file(site_file.destination(site.dest), extensions)
        if gz_path is not None:
            written.append(gz_path)
    logger.info(f"Compressed {len(written)} files in {site.dest}")
    return written


def directory_files(directory, extensions):
    root = Path(directory).expanduser()
    return sorted(
        path for path in root.rglob("*")
        if path.is_file() and is_zippable(path, extensions)
    )


def compress_directory(directory, config=None):
    """Compress allow-listed files under ``directory`` in place."""
    extensions = zippable_extensions(config)
    written = [compress_file(path, extensions) for path in directory_files(directory, extensions)]
    logger.info(f"Compressed {len(written)} files in {directory}")
    return written
