"""Business logic for group identifier issuance."""

import logging

from group_nft import metadata
from group_nft.context import RegistryContext
from group_nft.errors import (
    AlreadyInitialized,
    CounterOverflow,
    InvalidAdministrativeBinding,
    InvalidImplementation,
    NotInitialized,
)
from group_nft.interfaces import supports_interface
from group_nft.models import events
from group_nft.models.events import RegistryEvent
from group_nft.models.state import (
    UINT256_MAX,
    AccessState,
    ImplementationState,
    InitializationState,
    RegistryState,
)
from group_nft.principal import is_null_principal
from group_nft.services.gate import AuthorizationGate
from group_nft.storage.location import (
    ACCESS_NAMESPACE,
    IMPLEMENTATION_NAMESPACE,
    INITIALIZABLE_NAMESPACE,
    REGISTRY_NAMESPACE,
)
from group_nft.storage.slot import NamespacedSlot

logger = logging.getLogger(__name__)

INITIALIZED_VERSION = 1
INITIAL_IMPLEMENTATION = "group-nft/1"

SET_IMAGE_REFERENCE = "set_image_reference"
UPGRADE_TO = "upgrade_to"


class GroupNFTService:
    """Issues group identifiers and renders their metadata.

    Mutating operations run under the storage lock and write state only after
    every check has passed, so a failed call leaves storage untouched. Events
    are emitted inside the lock, in commit order, after the state is written.
    """

    def __init__(self, ctx: RegistryContext) -> None:
        """Create GroupNFTService with registry context.

        Args:
            ctx: Registry context with injected dependencies

        Raises:
            InvalidMinterBinding: If ctx.minter is a null principal
        """
        self._ctx = ctx
        self._gate = AuthorizationGate(ctx.minter, ctx.access_policy)
        self._registry = NamespacedSlot(ctx.storage, REGISTRY_NAMESPACE, RegistryState.from_fields)
        self._initialization = NamespacedSlot(
            ctx.storage, INITIALIZABLE_NAMESPACE, InitializationState.from_fields
        )
        self._access = NamespacedSlot(ctx.storage, ACCESS_NAMESPACE, AccessState.from_fields)
        self._implementation = NamespacedSlot(
            ctx.storage, IMPLEMENTATION_NAMESPACE, ImplementationState.from_fields
        )

    @property
    def minter(self) -> str:
        return self._gate.minter

    @property
    def name(self) -> str:
        return self._ctx.collection_name

    @property
    def symbol(self) -> str:
        return self._ctx.collection_symbol

    async def initialize(self, admin_authority: str, image_reference: str) -> None:
        """Bind the administrative authority and create the registry state.

        Args:
            admin_authority: Authority the policy engine decides for
            image_reference: Initial image shared by every identifier

        Raises:
            AlreadyInitialized: If initialize() already succeeded
            InvalidAdministrativeBinding: If admin_authority is a null principal
        """
        async with self._ctx.storage.locked():
            if await self._is_initialized():
                raise AlreadyInitialized()
            if is_null_principal(admin_authority):
                raise InvalidAdministrativeBinding()

            await self._access.write(AccessState(authority=admin_authority))
            await self._registry.write(RegistryState(image_reference=image_reference))
            if await self._implementation.read() is None:
                await self._implementation.write(
                    ImplementationState(implementation=INITIAL_IMPLEMENTATION)
                )
            # Written last: a registry without this marker is still uninitialized
            await self._initialization.write(
                InitializationState(initialized_version=INITIALIZED_VERSION)
            )

            logger.info("Initialized with authority %s", admin_authority)
            await self._emit(events.initialized(INITIALIZED_VERSION))

    async def set_image_reference(self, caller: str, image_reference: str) -> None:
        """Replace the image shared by every identifier.

        The new value is stored as given. Observers are told that every
        identifier issued so far has new metadata.

        Raises:
            NotInitialized: If the registry is not initialized
            NotAuthorizedAdmin: If the policy engine rejects the caller
        """
        async with self._ctx.storage.locked():
            authority = await self._load_authority()
            await self._gate.ensure_admin(authority, caller, SET_IMAGE_REFERENCE)

            state = await self._load_registry()
            state.image_reference = image_reference
            await self._registry.write(state)

            logger.info("Image reference set to %s by %s", image_reference, caller)
            await self._emit(
                events.batch_metadata_update(from_identifier=0, to_identifier=state.next_identifier)
            )

    async def issue(self, caller: str, minter_origin: str, receiver: str) -> int:
        """Issue the next identifier to a receiver.

        Args:
            caller: Principal invoking the call; must be the designated minter
            minter_origin: Originator reported by the minter, carried in the event
            receiver: Principal that will own the new identifier

        Returns:
            The issued identifier, equal to the issued count before this call

        Raises:
            NotAuthorizedMinter: If caller is not the designated minter
            NotInitialized: If the registry is not initialized
            CounterOverflow: If the counter would exceed the uint256 range
            InvalidReceiver: If receiver is a null principal
        """
        self._gate.ensure_minter(caller)

        async with self._ctx.storage.locked():
            state = await self._load_registry()
            identifier = state.next_identifier
            if identifier >= UINT256_MAX:
                raise CounterOverflow(identifier)

            await self._ctx.ownership.bind(identifier, receiver)
            state.next_identifier = identifier + 1
            try:
                await self._registry.write(state)
            except Exception:
                logger.warning("State write failed, releasing identifier %d", identifier)
                await self._ctx.ownership.unbind(identifier)
                raise

            logger.info("Issued identifier %d to %s", identifier, receiver)
            await self._emit(events.group_minted(minter_origin, receiver, identifier))

        return identifier

    async def total_issued(self) -> int:
        """Number of identifiers issued so far."""
        state = await self._load_registry()
        return state.next_identifier

    async def render_metadata(self, identifier: int) -> str:
        """Render an identifier's metadata from the current image reference.

        Existence is not checked; use owner_of() to find out whether an
        identifier has been issued.
        """
        state = await self._load_registry()
        return metadata.render_metadata(
            identifier, state.image_reference, self._ctx.metadata_template
        )

    async def owner_of(self, identifier: int) -> str:
        """Owner of an issued identifier.

        Raises:
            IdentifierNotBound: If identifier was never issued
        """
        await self._load_registry()
        return await self._ctx.ownership.owner_of(identifier)

    def supports_interface(self, interface_id: str) -> bool:
        return supports_interface(interface_id)

    async def authority(self) -> str:
        return await self._load_authority()

    async def implementation(self) -> str:
        await self._load_registry()
        current = await self._implementation.read()
        if current is None:
            return INITIAL_IMPLEMENTATION
        return current.implementation

    async def upgrade_to(self, caller: str, implementation: str) -> None:
        """Record a new logic version operating on the existing state.

        Stored records stay where they are; only the implementation record
        changes.

        Raises:
            InvalidImplementation: If implementation is empty
            NotInitialized: If the registry is not initialized
            NotAuthorizedAdmin: If the policy engine rejects the caller
        """
        if not implementation.strip():
            raise InvalidImplementation(implementation)

        async with self._ctx.storage.locked():
            authority = await self._load_authority()
            await self._gate.ensure_admin(authority, caller, UPGRADE_TO)

            await self._implementation.write(ImplementationState(implementation=implementation))

            logger.info("Upgraded to %s by %s", implementation, caller)
            await self._emit(events.upgraded(implementation))

    async def _emit(self, event: RegistryEvent) -> None:
        # State is already committed; a lost event must not fail the call
        try:
            await self._ctx.event_log.emit(event)
        except Exception:
            logger.exception("Failed to emit %s event", event.event_type.value)

    async def _is_initialized(self) -> bool:
        marker = await self._initialization.read()
        return marker is not None and marker.initialized_version > 0

    async def _load_registry(self) -> RegistryState:
        if not await self._is_initialized():
            raise NotInitialized()
        state = await self._registry.read()
        if state is None:
            raise NotInitialized()
        return state

    async def _load_authority(self) -> str:
        if not await self._is_initialized():
            raise NotInitialized()
        access = await self._access.read()
        if access is None:
            raise NotInitialized()
        return access.authority
