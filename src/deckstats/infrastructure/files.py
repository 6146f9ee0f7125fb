"""Template and output file access."""

import logging
import os
import tempfile
from pathlib import Path

from deckstats.domain.exceptions import OutputIOError, TemplateIOError

logger = logging.getLogger(__name__)


def read_template(path: Path) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise TemplateIOError(path, f"not valid UTF-8 ({e})") from e
    except OSError as e:
        raise TemplateIOError(path, e.strerror or str(e)) from e


def write_output(path: Path, text: str) -> None:
    """
    Write the rendered report, replacing any existing file.

    The text goes to a temporary file in the target directory first and is
    moved into place with os.replace, so readers never see a partial file.
    """
    path = Path(path)
    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        os.replace(tmp_name, path)
        tmp_name = None
    except OSError as e:
        raise OutputIOError(path, e.strerror or str(e)) from e
    finally:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)

    logger.debug(f"Wrote {len(text)} characters to {path}")
