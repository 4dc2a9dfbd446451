"""Read an input file into an immutable sequence of lines."""

from pathlib import Path

from file_processor.errors import SourceNotFoundError, SourceReadError

DEFAULT_ENCODING = "utf-8"


def read_all_lines(path: str | Path, encoding: str = DEFAULT_ENCODING) -> tuple[str, ...]:
    """
    Read every line of a text file with a single physical read.

    Lines end at LF, CR or CRLF only; other Unicode separators such as
    form feed or U+2028 stay inside the line. Terminators are stripped and an
    empty file yields an empty tuple.

    Raises:
        SourceNotFoundError: If the path is missing or not a regular file.
        SourceReadError: For any other read or decode failure.
    """
    file_path = Path(path)
    resolved = str(file_path.resolve())

    if not file_path.is_file():
        raise SourceNotFoundError(resolved)

    try:
        text = file_path.read_text(encoding=encoding)
    except FileNotFoundError as exc:
        # Removed between the existence check and the read.
        raise SourceNotFoundError(resolved) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(resolved, str(exc)) from exc

    if not text:
        return ()

    # read_text already normalized CRLF and CR to LF.
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return tuple(lines)
