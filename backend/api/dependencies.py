"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

Routes only ever see the interfaces; tests override the FastAPI
dependency functions at the bottom of this file.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IIdentityProvider
    from modules.profiles.interfaces import IProfileRepository
    from modules.profiles.notifier import ProfileChangeNotifier
    from modules.access.service import AccessService
    from modules.admission.interfaces import IAdmissionController
    from modules.billing.interfaces import ICheckoutInitiator, IEntitlementResolver
    from modules.community.interfaces import ICommunityService


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._identity: "IIdentityProvider | None" = None
        self._profiles: "IProfileRepository | None" = None
        self._access: "AccessService | None" = None
        self._admission: "IAdmissionController | None" = None
        self._entitlements: "IEntitlementResolver | None" = None
        self._checkout: "ICheckoutInitiator | None" = None
        self._community: "ICommunityService | None" = None

    @property
    def identity(self) -> "IIdentityProvider":
        """Get the identity provider instance."""
        if self._identity is None:
            from modules.auth.service import get_auth_service
            self._identity = get_auth_service()
        return self._identity

    @property
    def notifier(self) -> "ProfileChangeNotifier":
        """Get the process-wide profile change notifier."""
        from modules.profiles.notifier import get_profile_notifier
        return get_profile_notifier()

    @property
    def profiles(self) -> "IProfileRepository":
        """Get the profile repository instance."""
        if self._profiles is None:
            from modules.profiles.repository import get_profile_repository
            self._profiles = get_profile_repository()
        return self._profiles

    @property
    def access(self) -> "AccessService":
        """Get the access service instance."""
        if self._access is None:
            from modules.access.service import AccessService
            self._access = AccessService(
                identity=self.identity,
                profiles=self.profiles,
                notifier=self.notifier,
            )
        return self._access

    @property
    def admission(self) -> "IAdmissionController":
        """Get the admission controller instance."""
        if self._admission is None:
            from modules.admission.service import AdmissionController
            self._admission = AdmissionController(
                profiles=self.profiles,
                identity=self.identity,
            )
        return self._admission

    @property
    def entitlements(self) -> "IEntitlementResolver":
        """Get the entitlement resolver instance."""
        if self._entitlements is None:
            from modules.billing.entitlements import EntitlementResolver
            self._entitlements = EntitlementResolver()
        return self._entitlements

    @property
    def checkout(self) -> "ICheckoutInitiator":
        """Get the checkout initiator instance."""
        if self._checkout is None:
            from modules.billing.checkout import CheckoutInitiator
            self._checkout = CheckoutInitiator()
        return self._checkout

    @property
    def community(self) -> "ICommunityService":
        """Get the community service instance."""
        if self._community is None:
            from modules.community.repository import EventRepository, SuggestionRepository
            from modules.community.service import CommunityService
            from shared.database import get_supabase_client
            db = get_supabase_client()
            self._community = CommunityService(
                events=EventRepository(db),
                suggestions=SuggestionRepository(db),
            )
        return self._community

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._identity = None
        self._profiles = None
        self._access = None
        self._admission = None
        self._entitlements = None
        self._checkout = None
        self._community = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_identity_provider() -> "IIdentityProvider":
    """FastAPI dependency for the identity provider."""
    return get_container().identity


def get_profile_repository() -> "IProfileRepository":
    """FastAPI dependency for the profile repository."""
    return get_container().profiles


def get_access_service() -> "AccessService":
    """FastAPI dependency for the access service."""
    return get_container().access


def get_admission_controller() -> "IAdmissionController":
    """FastAPI dependency for the admission controller."""
    return get_container().admission


def get_entitlement_resolver() -> "IEntitlementResolver":
    """FastAPI dependency for the entitlement resolver."""
    return get_container().entitlements


def get_checkout_initiator() -> "ICheckoutInitiator":
    """FastAPI dependency for the checkout initiator."""
    return get_container().checkout


def get_community_service() -> "ICommunityService":
    """FastAPI dependency for the community service."""
    return get_container().community
