"""Tests for the GitHub REST client."""

import json

import httpx
import pytest

from todd.core.config import ToddConfig
from todd.core.errors import (
    ConflictError,
    MergeConflictError,
    NotFoundError,
    TransportError,
)
from todd.core.github import PAGE_SIZE, GitHubClient, extract_api_message

API = "https://api.github.test"


def pr_payload(number, base="next", head="next", state="open", merged=False):
    return {
        "number": number,
        "state": state,
        "merged": merged,
        "title": f"PR {number}",
        "html_url": f"https://github.test/acme/widgets/pull/{number}",
        "base": {"ref": base},
        "head": {"ref": head},
    }


def make_client(handler):
    http = httpx.Client(base_url=API, transport=httpx.MockTransport(handler))
    return GitHubClient("secret", api_url=API, http_client=http)


def test_auth_headers_sent():
    seen = {}

    def handler(request):
        seen["headers"] = request.headers
        return httpx.Response(200, json=pr_payload(1))

    make_client(handler).get_pull_request("acme", "widgets", 1)

    assert seen["headers"]["Authorization"] == "Bearer secret"
    assert seen["headers"]["Accept"] == "application/vnd.github+json"


def test_from_config():
    config = ToddConfig(repo_owner="acme", repo_name="widgets", token="t", api_url=API)
    with GitHubClient.from_config(config) as client:
        assert str(client._http.base_url).rstrip("/") == API


def test_list_open_pull_requests_follows_pages():
    requests = []
    first_page = [pr_payload(n, base="master") for n in range(1, PAGE_SIZE + 1)]

    def handler(request):
        requests.append(request)
        if request.url.params.get("page") == "2":
            return httpx.Response(200, json=[pr_payload(101, base="master")])
        return httpx.Response(
            200,
            json=first_page,
            headers={
                "Link": f'<{API}/repos/acme/widgets/pulls?state=open&page=2>; rel="next"'
            },
        )

    pulls = make_client(handler).list_open_pull_requests("acme", "widgets", "next")

    assert len(pulls) == PAGE_SIZE + 1
    assert pulls[-1].number == 101
    assert len(requests) == 2
    first = requests[0].url.params
    assert first["state"] == "open"
    assert first["head"] == "acme:next"
    assert first["per_page"] == str(PAGE_SIZE)


def test_list_open_pull_requests_filters_other_heads():
    def handler(request):
        return httpx.Response(200, json=[pr_payload(1, head="next"), pr_payload(2, head="other")])

    pulls = make_client(handler).list_open_pull_requests("acme", "widgets", "next")

    assert [pr.number for pr in pulls] == [1]


def test_list_open_pull_requests_network_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(TransportError, match="ConnectError"):
        make_client(handler).list_open_pull_requests("acme", "widgets", "next")


def test_bad_credentials():
    def handler(request):
        return httpx.Response(401, json={"message": "Bad credentials"})

    with pytest.raises(TransportError) as exc_info:
        make_client(handler).list_open_pull_requests("acme", "widgets", "next")

    assert exc_info.value.message == "Bad credentials"
    assert exc_info.value.status_code == 401
    assert not isinstance(exc_info.value, NotFoundError)


def test_create_pull_request_payload():
    bodies = []

    def handler(request):
        bodies.append(json.loads(request.content))
        return httpx.Response(201, json=pr_payload(12, base="master", head="next"))

    pull = make_client(handler).create_pull_request("acme", "widgets", "next", "next", "master")

    assert pull.number == 12
    assert pull.base_branch == "master"
    assert bodies == [
        {"title": "next", "head": "next", "base": "master", "maintainer_can_modify": True}
    ]


def test_create_pull_request_conflict():
    def handler(request):
        return httpx.Response(
            422,
            json={
                "message": "Validation Failed",
                "errors": [{"message": "A pull request already exists for acme:next."}],
            },
        )

    with pytest.raises(ConflictError, match="already exists"):
        make_client(handler).create_pull_request("acme", "widgets", "next", "next", "master")


def test_create_pull_request_other_validation_error():
    def handler(request):
        return httpx.Response(
            422,
            json={"message": "Validation Failed", "errors": [{"message": "No commits between"}]},
        )

    with pytest.raises(TransportError) as exc_info:
        make_client(handler).create_pull_request("acme", "widgets", "next", "next", "master")

    assert not isinstance(exc_info.value, ConflictError)


def test_get_pull_request_not_found():
    def handler(request):
        return httpx.Response(404, json={"message": "Not Found"})

    with pytest.raises(NotFoundError, match="Not Found"):
        make_client(handler).get_pull_request("acme", "widgets", 999)


def test_get_pull_request_merged_state():
    def handler(request):
        return httpx.Response(200, json=pr_payload(5, state="closed", merged=True))

    pull = make_client(handler).get_pull_request("acme", "widgets", 5)

    assert pull.state == "merged"


def test_merge_pull_request_squash():
    seen = []

    def handler(request):
        seen.append((request.method, request.url.path, json.loads(request.content)))
        return httpx.Response(200, json={"merged": True})

    make_client(handler).merge_pull_request("acme", "widgets", 42)

    assert seen == [("PUT", "/repos/acme/widgets/pulls/42/merge", {"merge_method": "squash"})]


@pytest.mark.parametrize("status", [405, 409])
def test_merge_pull_request_not_mergeable(status):
    def handler(request):
        return httpx.Response(status, json={"message": "Pull Request is not mergeable"})

    with pytest.raises(MergeConflictError, match="not mergeable"):
        make_client(handler).merge_pull_request("acme", "widgets", 42)


def test_merge_pull_request_not_found():
    def handler(request):
        return httpx.Response(404, json={"message": "Not Found"})

    with pytest.raises(NotFoundError):
        make_client(handler).merge_pull_request("acme", "widgets", 42)


def test_add_labels_is_additive_post():
    seen = []

    def handler(request):
        seen.append((request.method, request.url.path, json.loads(request.content)))
        return httpx.Response(200, json=[])

    make_client(handler).add_labels("acme", "widgets", 5, {"Needs Canary", "Frozen"})

    assert seen == [
        ("POST", "/repos/acme/widgets/issues/5/labels", {"labels": ["Frozen", "Needs Canary"]})
    ]


def test_add_comment():
    seen = []

    def handler(request):
        seen.append((request.url.path, json.loads(request.content)))
        return httpx.Response(201, json={"id": 1})

    make_client(handler).add_comment("acme", "widgets", 5, "Todd is helping!")

    assert seen == [("/repos/acme/widgets/issues/5/comments", {"body": "Todd is helping!"})]


def test_extract_api_message_falls_back_to_text():
    response = httpx.Response(502, text="upstream unavailable")
    assert extract_api_message(response) == "upstream unavailable"


def test_extract_api_message_empty_body():
    response = httpx.Response(500)
    assert extract_api_message(response) == "HTTP 500"
