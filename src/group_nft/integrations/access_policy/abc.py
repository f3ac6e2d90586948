"""Abstract interface for the administrative policy engine."""

from abc import ABC, abstractmethod


class AccessPolicy(ABC):
    """Decides whether a caller may run a privileged operation.

    The registry only enforces the decision; the rules themselves live in
    the policy engine and can change without touching the registry.
    """

    @abstractmethod
    async def is_authorized(self, authority: str, caller: str, operation: str) -> bool:
        """Ask the policy engine for a decision.

        Args:
            authority: Administrative authority bound at initialization
            caller: Principal invoking the operation
            operation: Operation name (e.g., "set_image_reference", "upgrade_to")

        Returns:
            True if the caller may proceed
        """
        ...
