import os
import stat
import tempfile

from utils.errors import InputUnreadable, OutputUnwritable
from utils.formatting import format_result


def read_text_file(path: str, encoding: str = "utf-8") -> str:
    """Full decoded content of `path`; any open/decode failure is InputUnreadable."""
    try:
        with open(path, "r", encoding=encoding, newline="") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise InputUnreadable(path, f"not valid {encoding} text") from e
    except OSError as e:
        raise InputUnreadable(path, e.strerror or str(e)) from e


def _result_mode(path: str) -> int:
    # keep an existing file's mode, otherwise what open() would give under the umask
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_result(path: str, similarity: float, encoding: str = "utf-8") -> str:
    """
    Write the formatted percentage to `path` and return it.
    The text goes to a temp file beside the destination and is moved into
    place with os.replace, so `path` either gets the whole result or is untouched.
    """
    text = format_result(similarity)
    directory = os.path.dirname(os.path.abspath(path))
    try:
        fd, tmp = tempfile.mkstemp(prefix=".result-", dir=directory)
    except OSError as e:
        raise OutputUnwritable(path, e.strerror or str(e)) from e
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as f:
            f.write(text)
        os.chmod(tmp, _result_mode(path))
        os.replace(tmp, path)
    except OSError as e:
        try:
            os.unlink(tmp)
        except FileNotFoundError:
            pass
        raise OutputUnwritable(path, e.strerror or str(e)) from e
    return text


def read_files_as_texts(files, encoding: str = "utf-8"):
    """Decode uploaded file-like objects; bytes that are not valid `encoding` raise InputUnreadable."""
    texts, names = [], []
    if not files:
        return texts, names
    for f in files:
        name = getattr(f, "name", "uploaded.txt")
        data = f.read()
        if isinstance(data, bytes):
            try:
                data = data.decode(encoding)
            except UnicodeDecodeError as e:
                raise InputUnreadable(name, f"not valid {encoding} text") from e
        texts.append(data)
        names.append(name)
    return texts, names
