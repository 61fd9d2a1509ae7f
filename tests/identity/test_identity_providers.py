import pytest

from identity import StaticIdentityProvider, User, get_identity_provider, owner_key
from identity.providers.config_file import ConfigIdentityProvider
from identity.providers.environment import (
    EMAIL_VARIABLE,
    NAME_VARIABLE,
    EnvironmentIdentityProvider,
)


class TestGetIdentityProvider:
    """Tests for the identity provider factory."""

    def test_config_provider_is_default(self, test_config):
        provider = get_identity_provider(test_config)

        assert isinstance(provider, ConfigIdentityProvider)
        assert provider.current_user() == User("alice@example.com", "Alice Example")

    def test_environment_provider(self, test_config):
        test_config.identity_provider = "environment"

        assert isinstance(get_identity_provider(test_config), EnvironmentIdentityProvider)

    def test_unknown_provider(self, test_config):
        test_config.identity_provider = "ldap"

        with pytest.raises(ValueError, match="Unknown identity provider: ldap"):
            get_identity_provider(test_config)


class TestConfigIdentityProvider:
    def test_no_email_means_signed_out(self, test_config):
        test_config.user_email = None

        assert ConfigIdentityProvider(test_config).current_user() is None

    def test_name_is_optional(self, test_config):
        test_config.user_name = None

        user = ConfigIdentityProvider(test_config).current_user()

        assert user.full_name is None


class TestEnvironmentIdentityProvider:
    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv(EMAIL_VARIABLE, "carol@example.com")
        monkeypatch.setenv(NAME_VARIABLE, "Carol")

        user = EnvironmentIdentityProvider().current_user()

        assert user == User("carol@example.com", "Carol")

    def test_blank_email_means_signed_out(self, monkeypatch):
        monkeypatch.setenv(EMAIL_VARIABLE, "  ")

        assert EnvironmentIdentityProvider().current_user() is None

    def test_sign_in_is_picked_up_without_restart(self, monkeypatch):
        monkeypatch.delenv(EMAIL_VARIABLE, raising=False)
        provider = EnvironmentIdentityProvider()
        assert provider.current_user() is None

        monkeypatch.setenv(EMAIL_VARIABLE, "carol@example.com")

        assert owner_key(provider) == "carol@example.com"


class TestOwnerKey:
    def test_email_is_the_key(self):
        assert owner_key(StaticIdentityProvider(User("dave@example.com"))) == "dave@example.com"

    def test_signed_out_is_none(self):
        assert owner_key(StaticIdentityProvider()) is None

    def test_services_current_owner(self, services):
        assert services.current_owner() == "alice@example.com"
