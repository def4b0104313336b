import re
from dataclasses import dataclass
from typing import Callable

from fastapi import Request, Response

from core.config import settings
from core.errors import (
    AmbiguousApiVersionError,
    InvalidApiVersionError,
    UnsupportedApiVersionError,
)

_VERSION_RE = re.compile(r"^\s*v?(\d+)(?:\.(\d+))?\s*$", re.IGNORECASE)

SUPPORTED_VERSIONS_HEADER = "api-supported-versions"


@dataclass(frozen=True, order=True)
class ApiVersion:
    major: int
    minor: int = 0

    @classmethod
    def parse(cls, raw: str) -> "ApiVersion":
        m = _VERSION_RE.match(raw or "")
        if not m:
            raise InvalidApiVersionError(f"Invalid API version: {raw!r}")
        return cls(int(m.group(1)), int(m.group(2) or 0))

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


def read_requested_version(request: Request) -> ApiVersion | None:
    """
    Version from the query string or the version header.
    Both may be given as long as they agree.
    """
    raw_query = request.query_params.get(settings.API_VERSION_QUERY_PARAM)
    raw_header = request.headers.get(settings.API_VERSION_HEADER)

    from_query = ApiVersion.parse(raw_query) if raw_query else None
    from_header = ApiVersion.parse(raw_header) if raw_header else None

    if from_query and from_header and from_query != from_header:
        raise AmbiguousApiVersionError(
            f"Ambiguous API version: query={from_query}, header={from_header}"
        )
    return from_query or from_header


class ApiVersionSet:
    """
    FastAPI dependency declaring which versions a controller serves.
    Resolves the requested version (default when unspecified) and reports
    the supported ones on the response.
    """

    def __init__(self, *versions: str) -> None:
        self.versions = tuple(sorted(ApiVersion.parse(v) for v in versions))

    @property
    def default(self) -> ApiVersion:
        return ApiVersion.parse(settings.API_DEFAULT_VERSION)

    def __call__(self, request: Request, response: Response) -> ApiVersion:
        version = read_requested_version(request) or self.default
        if version not in self.versions:
            raise UnsupportedApiVersionError(
                f"API version {version} is not supported for {request.url.path}"
            )
        response.headers[SUPPORTED_VERSIONS_HEADER] = ", ".join(str(v) for v in self.versions)
        return version


RouteKey = tuple[str, str, ApiVersion]


class VersionedRouteTable:
    """
    Explicit (method, path, version) -> handler mapping.
    Filled at import time by controllers and frozen when the app is built.
    """

    def __init__(self) -> None:
        self._routes: dict[RouteKey, Callable] = {}
        self._frozen = False

    def route(self, method: str, path: str, *versions: str) -> Callable[[Callable], Callable]:
        def decorator(fn: Callable) -> Callable:
            for v in versions:
                self.add(method, path, v, fn)
            return fn
        return decorator

    def add(self, method: str, path: str, version: str, handler: Callable) -> None:
        if self._frozen:
            raise RuntimeError("Route table is frozen; register handlers before startup")
        key = (method.upper(), path, ApiVersion.parse(version))
        if key in self._routes:
            raise ValueError(f"Duplicate versioned route: {key[0]} {key[1]} v{key[2]}")
        self._routes[key] = handler

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def resolve(self, method: str, path: str, version: ApiVersion) -> Callable:
        handler = self._routes.get((method.upper(), path, version))
        if handler is None:
            raise UnsupportedApiVersionError(
                f"API version {version} is not supported for {method.upper()} {path}"
            )
        return handler

    def routes(self) -> list[RouteKey]:
        return sorted(self._routes.keys())


route_table = VersionedRouteTable()
