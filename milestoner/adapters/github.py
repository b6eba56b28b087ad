"""GitHub API adapter."""

from typing import Any, Dict, List

import requests

from milestoner.adapters.base import ROLE_ALL, GitPlatformAdapter, GitPlatformError
from milestoner.models import Milestone, TeamMember

PER_PAGE = 100


def _member_from_api(data: Dict[str, Any]) -> TeamMember:
    return TeamMember(login=data.get("login") or "")


def _milestone_from_api(data: Dict[str, Any]) -> Milestone:
    return Milestone(title=data.get("title") or "", number=data["number"])


class GitHubAdapter(GitPlatformAdapter):
    """GitHub REST API implementation."""

    def __init__(self, token: str, api_url: str = "https://api.github.com") -> None:
        self._api_url = api_url.rstrip("/")
        self._session = requests.Session()
        self._session.headers["Authorization"] = f"token {token}"
        self._session.headers["Accept"] = "application/vnd.github.v3+json"

    def _url(self, path: str) -> str:
        return f"{self._api_url}{path}" if path.startswith("/") else f"{self._api_url}/{path}"

    def _request(
        self,
        method: str,
        path: str,
        params: Dict[str, Any] | None = None,
        json: Any = None,
    ) -> requests.Response:
        url = path if path.startswith("http") else self._url(path)
        try:
            resp = self._session.request(method, url, params=params, json=json, timeout=30)
        except requests.RequestException as e:
            raise GitPlatformError(f"{method} {url} failed: {e}") from e
        if resp.status_code >= 400:
            msg = resp.text or resp.reason or str(resp.status_code)
            try:
                msg = resp.json().get("message", msg)
            except ValueError:
                pass
            raise GitPlatformError(f"{resp.status_code}: {msg}")
        return resp

    def _get_all(self, path: str, params: Dict[str, Any] | None = None) -> List[Dict[str, Any]]:
        """GET every page of a list endpoint, following Link rel="next"."""
        items: List[Dict[str, Any]] = []
        url: str | None = path
        page_params: Dict[str, Any] | None = {**(params or {}), "per_page": PER_PAGE}
        while url:
            resp = self._request("GET", url, params=page_params)
            items.extend(resp.json() or [])
            url = (resp.links or {}).get("next", {}).get("url")
            # The next URL already carries the query string
            page_params = None
        return items

    def create_comment(self, org: str, repo: str, number: int, body: str) -> None:
        self._request("POST", f"/repos/{org}/{repo}/issues/{number}/comments", json={"body": body})

    def list_team_members_by_slug(self, org: str, team_slug: str, role: str = ROLE_ALL) -> List[TeamMember]:
        data = self._get_all(f"/orgs/{org}/teams/{team_slug}/members", params={"role": role})
        return [_member_from_api(d) for d in data]

    def list_team_members_by_id(self, org: str, team_id: int, role: str = ROLE_ALL) -> List[TeamMember]:
        # Legacy endpoint; teams are addressable by ID without the org
        data = self._get_all(f"/teams/{team_id}/members", params={"role": role})
        return [_member_from_api(d) for d in data]

    def list_milestones(self, org: str, repo: str) -> List[Milestone]:
        data = self._get_all(f"/repos/{org}/{repo}/milestones")
        return [_milestone_from_api(d) for d in data]

    def set_milestone(self, org: str, repo: str, number: int, milestone_number: int) -> None:
        self._request("PATCH", f"/repos/{org}/{repo}/issues/{number}", json={"milestone": milestone_number})

    def clear_milestone(self, org: str, repo: str, number: int) -> None:
        self._request("PATCH", f"/repos/{org}/{repo}/issues/{number}", json={"milestone": None})

    def add_label(self, org: str, repo: str, number: int, label: str) -> None:
        self._request("POST", f"/repos/{org}/{repo}/issues/{number}/labels", json={"labels": [label]})
