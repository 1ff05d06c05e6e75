"""Request URLs for connection candidates."""

from __future__ import annotations

from media_reach.config import ACCESS_TOKEN_PARAMETER, DIRECT_TLS_SUFFIX
from media_reach.models import ConnectionCandidate, Endpoint


def build_url(
    candidate: ConnectionCandidate,
    path: str,
    *,
    token_parameter: str = ACCESS_TOKEN_PARAMETER,
) -> Endpoint:
    """Return the candidate's endpoint targeting ``path``, authenticated if possible.

    Only a single leading "/" is stripped, so "//x" targets "/x".
    The token is appended as ``token_parameter`` only when it is non-empty.
    """
    resource = path[1:] if path.startswith("/") else path
    url = candidate.endpoint.with_path(resource)
    if candidate.token:
        url = url.with_query_param(token_parameter, candidate.token)
    return url


def plain_url(endpoint: Endpoint, *, direct_suffix: str = DIRECT_TLS_SUFFIX) -> str:
    """Render ``endpoint`` for display and duplicate detection.

    A secure endpoint on a ``<a-b-c-d>.<...><direct_suffix>`` hostname is
    rendered as ``http://a.b.c.d:<port>/``: the hostname only exists to carry a
    wildcard certificate for a local address.
    """
    if endpoint.is_secure and endpoint.host.endswith(direct_suffix):
        label, dot, _ = endpoint.host.partition(".")
        if label and dot:
            address = label.replace("-", ".")
            return f"http://{address}:{endpoint.port}/"
    return endpoint.render()
