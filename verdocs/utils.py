import posixpath


def normalize_newlines(s: str) -> str:
    return s.replace("\r\n", "\n").replace("\r", "\n")


def join_path(*parts: str) -> str:
    """Join slash-separated segments, skipping empty ones, and clean the result.

    Returns "" when every part is empty. A leading slash on any part does not
    discard the parts before it.
    """
    joined = "/".join(p for p in parts if p)
    if not joined:
        return ""
    cleaned = posixpath.normpath(joined)
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def strip_ext(p: str) -> str:
    root, _ = posixpath.splitext(p)
    return root
