"""Project identifier to project name lookup."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

FALLBACK_PROJECT = "Other"

DEFAULT_PROJECTS = {
    "2fced264-4bae-8115-a01b-fd544ed8c038": "Woojoosnt",
    "2fced264-4bae-8147-987f-d61e6171ba4c": "Ark Academy",
    "2fced264-4bae-810a-bb17-e03566a75c9b": "Oilyburger",
}


class ProjectRegistry:
    """Read-only project table; every identifier resolves to some name."""

    __slots__ = ("_projects", "_fallback")

    def __init__(self, projects: Mapping[str, str], fallback: str = FALLBACK_PROJECT) -> None:
        self._projects = MappingProxyType({str(key): str(value) for key, value in projects.items()})
        self._fallback = fallback

    @classmethod
    def default(cls) -> "ProjectRegistry":
        return cls(DEFAULT_PROJECTS)

    @property
    def fallback(self) -> str:
        return self._fallback

    @property
    def projects(self) -> Mapping[str, str]:
        return self._projects

    def resolve(self, project_id: object) -> str:
        if not isinstance(project_id, str):
            return self._fallback
        return self._projects.get(project_id, self._fallback)

    def __len__(self) -> int:
        return len(self._projects)

    def __repr__(self) -> str:
        return f"ProjectRegistry({len(self._projects)} projects, fallback={self._fallback!r})"
