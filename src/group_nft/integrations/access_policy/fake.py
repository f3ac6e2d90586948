"""In-memory fake policy engine for testing."""

from group_nft.integrations.access_policy.abc import AccessPolicy
from group_nft.principal import normalize_principal


class FakeAccessPolicy(AccessPolicy):
    """In-memory fake implementation for testing.

    All state is provided via constructor using keyword arguments.
    This class has NO public setup methods.
    """

    def __init__(self, *, grants: dict[str, set[str]] | None = None) -> None:
        """Create FakeAccessPolicy with pre-configured grants.

        Args:
            grants: Mapping of caller -> operations the caller may run
        """
        self._grants = {
            normalize_principal(caller): set(operations)
            for caller, operations in (grants or {}).items()
        }
        self._checks: list[tuple[str, str, str]] = []

    @property
    def checks(self) -> list[tuple[str, str, str]]:
        """Read-only access to decisions requested, for test assertions.

        Returns list of (authority, caller, operation) tuples.
        """
        return self._checks.copy()

    async def is_authorized(self, authority: str, caller: str, operation: str) -> bool:
        self._checks.append((authority, caller, operation))
        return operation in self._grants.get(normalize_principal(caller), set())
