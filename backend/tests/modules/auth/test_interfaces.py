from unittest.mock import MagicMock, patch

from modules.auth.interfaces import IIdentityProvider
from modules.auth.service import AuthService


class TestIdentityProviderInterface:
    METHODS = ["validate_token", "get_current_user", "sign_out", "delete_identity"]

    def test_interface_methods_exist(self):
        """IIdentityProvider should define required methods."""
        for method in self.METHODS:
            assert hasattr(IIdentityProvider, method)

    def test_auth_service_has_interface_methods(self):
        """AuthService should have all IIdentityProvider methods."""
        for method in self.METHODS:
            assert hasattr(AuthService, method)
            assert callable(getattr(AuthService, method))

    def test_auth_service_is_instance(self):
        """runtime_checkable lets isinstance() verify the implementation."""
        with patch("modules.auth.service.get_settings"):
            service = AuthService(db=MagicMock())
        assert isinstance(service, IIdentityProvider)
