"""Reading from an empty file, with and without a length check first."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from idiombench.bench.catalog import suite


@suite("file-reading", title="Empty file: read vs. check length first", baseline="max")
def file_reading():
    """Seek-and-read on an empty file compared with checking its size first."""
    with tempfile.TemporaryDirectory(prefix="idiombench-") as tmp:
        path = Path(tmp) / "empty.bin"
        path.write_bytes(b"")
        with path.open("rb") as fh:
            fileno = fh.fileno()

            def read_blindly() -> None:
                fh.seek(0)
                fh.read(1)

            def check_length_first() -> None:
                for _ in range(os.fstat(fileno).st_size):
                    fh.seek(0)
                    fh.read(1)

            yield "Read empty file", read_blindly
            yield "Check length before reading", check_length_first
