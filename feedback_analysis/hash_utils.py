# Feedback Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""MD5 digests for change detection.

`analyze` compares the digests of feedback files and taxonomies with the ones
recorded in the work files. The spreadsheet writer derives style names from
them. Nothing here is security relevant, so the hashes are created with
`usedforsecurity=False` to keep working on FIPS-restricted builds.
"""

import hashlib
from pathlib import Path


CHUNK_SIZE = 1024 * 1024


def md5_file(path: Path) -> str:
    """Return the hex MD5 digest of a file's content (read in 1 MiB chunks)."""

    digest = hashlib.md5(usedforsecurity=False)
    with path.open("rb") as handle:
        for chunk in iter(lambda: handle.read(CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


def md5_text(text: str) -> str:
    """Return the hex MD5 digest of a UTF-8 encoded string."""

    return hashlib.md5(text.encode("utf-8"), usedforsecurity=False).hexdigest()
