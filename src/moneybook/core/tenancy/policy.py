"""Minimum tenant role per tenant-scoped route."""

from collections.abc import Iterable, Mapping

from starlette.routing import BaseRoute

from src.moneybook.models.enums import TenantRole

TENANT_KEY_PATH_PARAM = "tenant_key"


class TenantRoutePolicy:
    """Registry of the minimum role each tenant-scoped route requires.

    Routes are identified by name. A tenant-scoped route with no entry is
    rejected at request time, and ``undeclared_routes`` lets the application
    refuse to start in that state.
    """

    def __init__(self, rules: Mapping[str, TenantRole] | None = None) -> None:
        self._rules: dict[str, TenantRole] = {}
        if rules:
            self.register_many(rules)

    def register(self, route_name: str, minimum_role: TenantRole) -> None:
        existing = self._rules.get(route_name)
        if existing is not None and existing != minimum_role:
            raise ValueError(
                f"Route {route_name!r} already requires {existing.value}, "
                f"cannot also require {minimum_role.value}"
            )
        self._rules[route_name] = minimum_role

    def register_many(self, rules: Mapping[str, TenantRole]) -> None:
        for route_name, minimum_role in rules.items():
            self.register(route_name, minimum_role)

    def minimum_role_for(self, route_name: str | None) -> TenantRole | None:
        if route_name is None:
            return None
        return self._rules.get(route_name)

    def undeclared_routes(self, routes: Iterable[BaseRoute]) -> list[str]:
        """Names of tenant-scoped routes that have no declared minimum role."""
        missing = []
        for route in routes:
            path = getattr(route, "path", "")
            if not is_tenant_scoped_path(path):
                continue
            name = getattr(route, "name", None)
            if name not in self._rules:
                missing.append(name or path)
        return missing

    def __contains__(self, route_name: object) -> bool:
        return route_name in self._rules

    def __len__(self) -> int:
        return len(self._rules)


def is_tenant_scoped_path(path: str) -> bool:
    return f"{{{TENANT_KEY_PATH_PARAM}}}" in path
