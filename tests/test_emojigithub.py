import subprocess
from unittest import mock

import pytest
import requests

from emojitools.emojigithub import GitHubClient
from emojitools.errors import ConfigurationError, UpstreamUnavailable


def _response(json=None, error=None):
    response = mock.Mock()
    response.json.return_value = json
    if error:
        response.raise_for_status.side_effect = error
    return response


@pytest.fixture
def client():
    return GitHubClient("olivvybee", "emojis", token="secret")


def test_token_from_environment(monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "from-env")
    client = GitHubClient("olivvybee", "emojis")
    assert client.gh_token == "from-env"
    assert client.session.headers["Authorization"] == "bearer from-env"


def test_missing_token(monkeypatch):
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    with pytest.raises(ConfigurationError):
        GitHubClient("olivvybee", "emojis")


def test_from_env(monkeypatch):
    monkeypatch.setenv("GITHUB_REPOSITORY", "olivvybee/emojis")
    client = GitHubClient.from_env(token="secret")
    assert (client.repo_owner, client.repo_name) == ("olivvybee", "emojis")


def test_from_env_bad_repository(monkeypatch):
    monkeypatch.setenv("GITHUB_REPOSITORY", "emojis")
    with pytest.raises(ConfigurationError):
        GitHubClient.from_env(token="secret")


def test_from_env_uses_origin_remote(monkeypatch):
    monkeypatch.delenv("GITHUB_REPOSITORY", raising=False)
    with mock.patch(
        "emojitools.emojigithub.origin_remote_url",
        return_value="git@github.com:olivvybee/emojis.git",
    ):
        client = GitHubClient.from_env(token="secret")
    assert (client.repo_owner, client.repo_name) == ("olivvybee", "emojis")


@pytest.mark.parametrize(
    "remote",
    [
        mock.Mock(
            side_effect=subprocess.CalledProcessError(2, ["git", "remote"])
        ),
        mock.Mock(side_effect=FileNotFoundError("git")),
        mock.Mock(return_value="https://gitlab.com/olivvybee/emojis.git"),
    ],
)
def test_from_env_without_github_remote(monkeypatch, remote):
    monkeypatch.delenv("GITHUB_REPOSITORY", raising=False)
    with mock.patch("emojitools.emojigithub.origin_remote_url", remote):
        with pytest.raises(ConfigurationError, match="GITHUB_REPOSITORY"):
            GitHubClient.from_env(token="secret")


@pytest.mark.parametrize(
    "server,want",
    [
        (None, "https://github.com/olivvybee/emojis"),
        ("https://ghe.example.com", "https://ghe.example.com/olivvybee/emojis"),
    ],
)
def test_repo_url(client, monkeypatch, server, want):
    if server:
        monkeypatch.setenv("GITHUB_SERVER_URL", server)
    else:
        monkeypatch.delenv("GITHUB_SERVER_URL", raising=False)
    assert client.repo_url == want


def test_rest_url(client):
    assert (
        client.rest_url("releases", per_page=100)
        == "https://api.github.com/repos/olivvybee/emojis/releases?per_page=100"
    )


def test_list_releases(client):
    releases = [{"tag_name": "v1", "prerelease": False}]
    with mock.patch.object(
        client.session, "get", return_value=_response(releases)
    ) as get:
        assert client.list_releases() == releases
    get.assert_called_once_with(
        "https://api.github.com/repos/olivvybee/emojis/releases?per_page=100"
    )


def test_compare_commits(client):
    with mock.patch.object(
        client.session, "get", return_value=_response({"commits": [], "files": []})
    ) as get:
        client.compare_commits("2023.10", "refs/tags/2023.11")
    get.assert_called_once_with(
        "https://api.github.com/repos/olivvybee/emojis/compare/"
        "2023.10...refs%2Ftags%2F2023.11"
    )


@pytest.mark.parametrize(
    "response",
    [
        _response(error=requests.HTTPError("403 Client Error: rate limit exceeded")),
        _response(json={"errors": [{"message": "Bad credentials"}]}),
    ],
)
def test_failed_requests(client, response):
    with mock.patch.object(client.session, "get", return_value=response):
        with pytest.raises(UpstreamUnavailable):
            client.list_releases()


def test_connection_error(client):
    with mock.patch.object(
        client.session, "get", side_effect=requests.ConnectionError("offline")
    ):
        with pytest.raises(UpstreamUnavailable, match="offline"):
            client.compare_commits("v1", "v2")
