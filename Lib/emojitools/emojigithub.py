import logging
import os
import pprint
import subprocess
import typing
import urllib.parse

import requests

from emojitools.errors import ConfigurationError, UpstreamUnavailable
from emojitools.utils import github_user_repo, origin_remote_url

GITHUB_V3_REST_API = "https://api.github.com"
GITHUB_SERVER_URL = "https://github.com"

log = logging.getLogger("emojitools.github")


class GitHubClient:
    def __init__(self, repo_owner, repo_name, token=None):
        if token is None:
            if not "GITHUB_TOKEN" in os.environ:
                raise ConfigurationError("GITHUB_TOKEN environment variable not set")
            token = os.environ["GITHUB_TOKEN"]
        self.gh_token = token
        self.repo_owner = repo_owner
        self.repo_name = repo_name
        self.session = requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"bearer {self.gh_token}",
                "Accept": "application/vnd.github+json",
            }
        )

    @classmethod
    def from_env(cls, token=None):
        """Build a client for the repository the current action runs in.

        GITHUB_REPOSITORY is set by GitHub Actions. When running locally the
        origin remote of the current checkout is used instead.
        """
        repository = os.environ.get("GITHUB_REPOSITORY")
        if repository:
            owner, _, name = repository.partition("/")
            if not owner or not name:
                raise ConfigurationError(
                    f"GITHUB_REPOSITORY must look like 'owner/repo', got '{repository}'"
                )
            return cls(owner, name, token=token)
        try:
            url = origin_remote_url()
            owner, name = github_user_repo(url)
        except (subprocess.CalledProcessError, OSError, ValueError) as e:
            raise ConfigurationError(
                "GITHUB_REPOSITORY is not set and the origin remote of the "
                f"current checkout is not a GitHub repository: {e}"
            ) from e
        return cls(owner, name, token=token)

    @property
    def repo_url(self):
        server = os.environ.get("GITHUB_SERVER_URL", GITHUB_SERVER_URL)
        return f"{server}/{self.repo_owner}/{self.repo_name}"

    def _get(self, url):
        log.debug(f"GET {url}")
        try:
            response = self.session.get(url)
            response.raise_for_status()
            json = response.json()
        except (requests.RequestException, ValueError) as e:
            raise UpstreamUnavailable(f"GitHub REST query failed to url {url}: {e}") from e
        if isinstance(json, dict) and "errors" in json:
            errors = pprint.pformat(json["errors"], indent=2)
            raise UpstreamUnavailable(f"GitHub REST query failed:\n {errors}")
        return json

    def rest_url(self, path, **kwargs):
        base_url = (
            f"{GITHUB_V3_REST_API}/repos/{self.repo_owner}/{self.repo_name}/{path}"
        )
        if kwargs:
            base_url += "?" + "&".join(
                f"{k}={urllib.parse.quote(str(v))}" for k, v in kwargs.items()
            )
        return base_url

    def list_releases(self) -> typing.List:
        """https://docs.github.com/en/rest/releases/releases#list-releases

        Newest first. Only the first page of 100 is requested."""
        return self._get(self.rest_url("releases", per_page=100))

    def compare_commits(self, base: str, head: str) -> typing.Dict:
        """https://docs.github.com/en/rest/commits/commits#compare-two-commits"""
        basehead = urllib.parse.quote(f"{base}...{head}", safe="")
        return self._get(self.rest_url(f"compare/{basehead}"))
