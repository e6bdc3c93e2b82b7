"""
Reading source text from files.
"""

from pathlib import Path
from typing import Tuple, Union

from .exceptions import InputReadError


def resolve_path(path: Union[str, Path]) -> Path:
    """
    Resolve a path, interpreting relative paths from the working directory.

    Raises:
        InputReadError: If the path is empty or does not exist.
    """
    if not str(path).strip():
        raise InputReadError("ファイルパスが指定されていません。", path=str(path))

    resolved = Path(path).expanduser()
    if not resolved.is_absolute():
        resolved = Path.cwd() / resolved

    if not resolved.exists():
        raise InputReadError(
            f'ファイル "{path}" が見つかりませんでした。絶対パスで指定してください。',
            path=str(path),
        )
    if resolved.is_dir():
        raise InputReadError(f'"{path}" はディレクトリです。', path=str(path))
    return resolved


def read_text_file(path: Union[str, Path]) -> Tuple[Path, str]:
    """
    Read a UTF-8 text file.

    Args:
        path: Absolute path, or path relative to the working directory.

    Returns:
        Tuple of (resolved path, file content).

    Raises:
        InputReadError: If the file is missing, unreadable or not UTF-8.
    """
    resolved = resolve_path(path)
    try:
        return resolved, resolved.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise InputReadError(
            f"ファイル '{resolved}' はUTF-8として読み込めません: {e}", path=str(path)
        ) from e
    except OSError as e:
        raise InputReadError(f"ファイル '{resolved}' を読み込めません: {e}", path=str(path)) from e


__all__ = ["read_text_file", "resolve_path"]
