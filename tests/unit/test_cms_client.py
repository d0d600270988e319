import httpx
import pytest

from storefront.cms.client import PrismicClient
from storefront.checkout.errors import UpstreamError

ENDPOINT = "https://perfume.cdn.prismic.io/api/v2"

API_ROOT = {
    "refs": [
        {"id": "preview", "ref": "preview-ref", "isMasterRef": False},
        {"id": "master", "ref": "master-ref", "isMasterRef": True},
    ]
}

VAPOR = {"id": "doc-1", "uid": "vapor75", "type": "product", "data": {"name": "Vapor75", "price": 49.99}}


def _client(handler, token=""):
    http = httpx.Client(transport=httpx.MockTransport(handler))
    return PrismicClient(ENDPOINT, access_token=token, http=http)


def test_get_by_uid_uses_master_ref_and_uid_predicate():
    seen = []

    def handler(request: httpx.Request):
        seen.append(request)
        if request.url.path == "/api/v2":
            return httpx.Response(200, json=API_ROOT)
        return httpx.Response(200, json={"results": [VAPOR]})

    doc = _client(handler).get_by_uid("product", "vapor75")
    assert doc == VAPOR
    search = seen[-1]
    assert search.url.path == "/api/v2/documents/search"
    assert search.url.params["ref"] == "master-ref"
    assert search.url.params["q"] == '[[at(my.product.uid,"vapor75")]]'


def test_get_by_uid_explicit_ref_skips_api_root():
    paths = []

    def handler(request: httpx.Request):
        paths.append(request.url.path)
        return httpx.Response(200, json={"results": [VAPOR]})

    _client(handler).get_by_uid("product", "vapor75", ref="preview-ref")
    assert paths == ["/api/v2/documents/search"]


def test_access_token_is_sent():
    tokens = []

    def handler(request: httpx.Request):
        tokens.append(request.url.params.get("access_token"))
        if request.url.path == "/api/v2":
            return httpx.Response(200, json=API_ROOT)
        return httpx.Response(200, json={"results": []})

    _client(handler, token="secret").get_by_uid("product", "vapor75")
    assert tokens == ["secret", "secret"]


def test_get_by_uid_no_result_returns_none():
    def handler(request: httpx.Request):
        if request.url.path == "/api/v2":
            return httpx.Response(200, json=API_ROOT)
        return httpx.Response(200, json={"results": []})

    assert _client(handler).get_by_uid("product", "unknown") is None


def test_uid_is_quoted_in_predicate():
    queries = []

    def handler(request: httpx.Request):
        queries.append(request.url.params.get("q"))
        return httpx.Response(200, json={"results": []})

    _client(handler).get_by_uid("product", 'a"b', ref="r")
    assert queries == ['[[at(my.product.uid,"a\\"b")]]']


def test_server_error_is_upstream_error():
    def handler(request: httpx.Request):
        return httpx.Response(503, text="unavailable")

    with pytest.raises(UpstreamError):
        _client(handler).get_by_uid("product", "vapor75")


def test_transport_error_is_upstream_error():
    def handler(request: httpx.Request):
        raise httpx.ConnectError("boom", request=request)

    with pytest.raises(UpstreamError):
        _client(handler).get_master_ref()


def test_non_json_is_upstream_error():
    def handler(request: httpx.Request):
        return httpx.Response(200, text="<html></html>")

    with pytest.raises(UpstreamError):
        _client(handler).get_master_ref()


def test_missing_master_ref_is_upstream_error():
    def handler(request: httpx.Request):
        return httpx.Response(200, json={"refs": []})

    with pytest.raises(UpstreamError):
        _client(handler).get_master_ref()


def test_missing_endpoint_is_upstream_error():
    with pytest.raises(UpstreamError):
        PrismicClient("")
