from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Thin wrappers over 'os' for reading input documents and writing rendered
output, so that encoding and directory handling stay uniform across the
service and the CLI.
"""

import os

# -----------------------------------------------------------------------------
# READ API
# -----------------------------------------------------------------------------

def read_text_file(path: str) -> str:
    """
    Read a UTF-8 text file, tolerating a leading byte order mark.

    Args:
        path: File to read.

    Returns:
        str: Decoded content.
    """
    with open(path, "r", encoding="utf-8-sig") as f:
        return f.read()


def derive_root_label(path: str) -> str:
    """
    Compute the default root label from a file name.

    Strips the directory and the last extension: 'conf/app.yaml' -> 'app'.
    """
    base = os.path.basename(path)
    return os.path.splitext(base)[0]

# -----------------------------------------------------------------------------
# WRITE API
# -----------------------------------------------------------------------------

def write_text_file(path: str, content: str) -> None:
    """
    Write UTF-8 text, creating missing parent directories.

    Args:
        path: Destination file.
        content: Text written verbatim.
    """
    _ensure_parent_dir(path)
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(content)


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _ensure_parent_dir(path: str) -> None:
    parent = os.path.dirname(os.path.abspath(path))
    if parent and not os.path.exists(parent):
        os.makedirs(parent, exist_ok=True)
