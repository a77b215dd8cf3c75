"""File-system helpers: existence checks, whole-file I/O and path manipulation."""

from __future__ import annotations

import os
from typing import Iterable, Union

PathLike = Union[str, "os.PathLike[str]"]

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def file_exists(path: PathLike) -> bool:
    """Return True if path names an existing regular file."""
    return os.path.isfile(path)


def directory_exists(path: PathLike) -> bool:
    """Return True if path names an existing directory."""
    return os.path.isdir(path)


def create_directory(path: PathLike, recursive: bool = True) -> None:
    """Create a directory unless it already exists.

    With ``recursive`` missing parents are created as well. Raises OSError
    when the directory cannot be created.
    """
    if directory_exists(path):
        return
    if recursive:
        os.makedirs(path)
    else:
        os.mkdir(path)


def read_file(path: PathLike) -> str:
    """Return the whole content of a file, without newline translation."""
    with open(path, "rb") as handle:
        return handle.read().decode(_ENCODING, _ERRORS)


def read_file_lines(path: PathLike) -> list[str]:
    """Return the lines of a file without their terminating newlines."""
    lines = read_file(path).split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def _ensure_parent(path: PathLike) -> None:
    parent = get_dirname(path)
    if parent and not directory_exists(parent):
        create_directory(parent)


def write_file(path: PathLike, content: Union[str, bytes], append: bool = False) -> None:
    """Write content to a file, creating its directory if needed."""
    _ensure_parent(path)
    data = content.encode(_ENCODING, _ERRORS) if isinstance(content, str) else bytes(content)
    with open(path, "ab" if append else "wb") as handle:
        handle.write(data)


def write_file_lines(path: PathLike, lines: Iterable[str], append: bool = False) -> None:
    """Write each line followed by a newline, creating the directory if needed."""
    _ensure_parent(path)
    with open(path, "a" if append else "w", encoding=_ENCODING, errors=_ERRORS) as handle:
        handle.writelines(f"{line}\n" for line in lines)


def delete_file(path: PathLike) -> bool:
    """Remove a file or an empty directory.

    Returns False if nothing existed at path; raises OSError on other failures.
    """
    try:
        if os.path.isdir(path) and not os.path.islink(path):
            os.rmdir(path)
        else:
            os.remove(path)
    except FileNotFoundError:
        return False
    return True


def get_basename(path: PathLike) -> str:
    """Return the final component of a path ('' when it ends in a separator)."""
    return os.path.basename(os.fspath(path))


def get_dirname(path: PathLike) -> str:
    """Return everything before the final component of a path."""
    return os.path.dirname(os.fspath(path))


def get_extension(path: PathLike) -> str:
    """Return the extension of the final component, dot included."""
    return os.path.splitext(get_basename(path))[1]


def normalize_path(path: PathLike) -> str:
    """Normalise a path lexically, without touching the file system.

    Dot components are removed and ``..`` cancels the preceding component.
    A trailing separator is kept where the last component was a directory
    reference, an empty path stays empty and a path that reduces to nothing
    becomes ``.``.
    """
    text = os.fspath(path)
    if not text:
        return ""
    absolute = text.startswith("/")
    stack: list[str] = []
    ends_with_dir = False
    for part in text.split("/"):
        if part == "":
            continue
        if part == ".":
            ends_with_dir = True
        elif part == "..":
            if stack and stack[-1] != "..":
                stack.pop()
                ends_with_dir = True
            elif absolute:
                ends_with_dir = True
            else:
                stack.append("..")
                ends_with_dir = False
        else:
            stack.append(part)
            ends_with_dir = False
    if text.endswith("/"):
        ends_with_dir = True

    body = "/".join(stack)
    trailing = "/" if body and ends_with_dir and stack[-1] != ".." else ""
    if absolute:
        return "/" + body + trailing
    if not body:
        return "."
    return body + trailing


def join_path(*args: Union[PathLike, Iterable[PathLike]]) -> str:
    """Join path components.

    Accepts either the components as separate arguments or a single list
    or tuple of them. An absolute component discards what came before it.
    Returns '' when there are no components.
    """
    if len(args) == 1 and isinstance(args[0], (list, tuple)):
        components = list(args[0])
    else:
        components = list(args)
    if not components:
        return ""
    return os.path.join(*(os.fspath(part) for part in components))