from typing import Iterable, Optional

ALLOWED_ORIGIN_MARKERS = ("localhost", "127.0.0.1")
ALLOWED_ORIGIN_REGEX = r".*(localhost|127\.0\.0\.1).*"


def is_allowed_origin(origin: Optional[str], markers: Iterable[str] = ALLOWED_ORIGIN_MARKERS) -> bool:
    # requests without an Origin header (curl, mobile apps) are always allowed
    if not origin:
        return True
    return any(marker in origin for marker in markers)


def is_json_content_type(value: Optional[str]) -> bool:
    if not value:
        return False
    media_type = value.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


def is_api_path(path: str, prefix: str = "/api/") -> bool:
    return path.startswith(prefix)
