"""ProviderRegistry construction, isolation of failures and queries."""

from __future__ import annotations

import pytest

from gateway_providers.base.errors import ConfigurationError, ProviderNotConfiguredError, RegistryInitializationError
from gateway_providers.base.identity import ProviderFamily, ProviderIdentity
from gateway_providers.base.interfaces import ChatProvider
from gateway_providers.base.registry import ProviderRegistry
from gateway_providers.config import load_registry_config


def test_identity_families_and_display_names():
    assert ProviderIdentity.TOGETHER.family is ProviderFamily.SDK_COMPLETIONS
    assert ProviderIdentity.OPENAI.family is ProviderFamily.SDK_COMPLETIONS
    assert ProviderIdentity.CLAUDE.family is ProviderFamily.SDK_MESSAGES
    assert ProviderIdentity.TC_WRAPPER.family is ProviderFamily.REST_CHAT
    assert ProviderIdentity.SQL_API.family is ProviderFamily.REST_SQL
    assert ProviderIdentity.TC_WRAPPER.display_name == "TC Wrapper"


def test_one_invalid_and_one_valid_credential(log_capture):
    registry = ProviderRegistry().initialize(
        load_registry_config({"TOGETHER_API_KEY": "tk", "TC_API_KEY": "", "TC_BASE_URL": "https://tc.example"})
    )
    assert registry.available() == ["together"]
    assert registry.provider_count == 1
    errors = registry.initialization_errors()
    assert len(errors) == 1
    assert errors[0].startswith("TC Wrapper: ")
    assert "TC_API_KEY" in errors[0]
    assert isinstance(registry.get("together"), ChatProvider)
    ready = log_capture.events("registry.provider.ready")
    assert [(e["provider"], e["family"]) for e in ready] == [("together", "sdk_completions")]
    assert [e["provider"] for e in log_capture.events("registry.provider.failed")] == ["tc_wrapper"]


def test_rest_identity_without_base_url_is_recorded_failure():
    registry = ProviderRegistry().initialize(load_registry_config({"OPENAI_API_KEY": "ok", "SQL_API_KEY": "k"}))
    assert registry.available() == ["openai"]
    assert registry.initialization_errors() == ["SQL API: SQL_BASE_URL is empty or not set"]


def test_placeholder_key_in_environment_is_recorded_failure():
    registry = ProviderRegistry().initialize(
        load_registry_config({"TOGETHER_API_KEY": "tk", "OPENAI_API_KEY": "your_openai_key"})
    )
    assert registry.available() == ["together"]
    assert registry.initialization_errors() == ["OpenAI: OPENAI_API_KEY holds a placeholder value"]


def test_zero_valid_credentials_is_fatal():
    registry = ProviderRegistry()
    with pytest.raises(RegistryInitializationError) as info:
        registry.initialize(load_registry_config({"OPENAI_API_KEY": "  "}))
    assert info.value.errors == ["OpenAI: OPENAI_API_KEY is empty or not set"]
    assert not registry.is_initialized
    assert registry.provider_count == 0
    assert registry.initialization_errors() == []


def test_no_credentials_at_all_is_fatal():
    with pytest.raises(RegistryInitializationError):
        ProviderRegistry().initialize(load_registry_config({}))


def test_factory_failures_are_isolated(recording_provider):
    def _boom(_creds):
        raise RuntimeError("sdk exploded")

    registry = ProviderRegistry(
        factories={
            ProviderIdentity.OPENAI: _boom,
            ProviderIdentity.CLAUDE: lambda creds: recording_provider(ProviderIdentity.CLAUDE),
        }
    ).initialize(load_registry_config({"OPENAI_API_KEY": "a", "CLAUDE_API_KEY": "b"}))
    assert registry.available() == ["claude"]
    assert registry.initialization_errors() == ["OpenAI: sdk exploded"]


def test_get_unknown_and_uninitialized(recording_provider):
    registry = ProviderRegistry()
    with pytest.raises(ProviderNotConfiguredError) as info:
        registry.get("claude")
    assert "not initialized" in info.value.message

    registry.register(ProviderIdentity.TOGETHER, recording_provider())
    with pytest.raises(ProviderNotConfiguredError) as info:
        registry.get(ProviderIdentity.CLAUDE)
    assert info.value.message == "Provider claude is not configured. Available providers: together"
    assert info.value.available == ["together"]

    with pytest.raises(ProviderNotConfiguredError) as info:
        registry.get("gemini")
    assert info.value.message == "Provider gemini is not configured. Available providers: together"
    assert not registry.is_available("gemini")


def test_status_health_and_reset(recording_provider):
    registry = ProviderRegistry()
    registry.register(ProviderIdentity.OPENAI, recording_provider(ProviderIdentity.OPENAI))
    assert registry.status() == {
        "together": False,
        "openai": True,
        "claude": False,
        "tc_wrapper": False,
        "sql_api": False,
    }
    assert registry.is_available("openai")
    assert not registry.is_available("nonexistent")
    health = registry.health_check().to_dict()
    assert health == {"is_healthy": True, "provider_count": 1, "available_providers": ["openai"], "errors": []}

    registry.reset()
    assert not registry.is_initialized
    assert registry.available() == []
    assert registry.health_check().is_healthy is False


def test_errors_list_is_a_copy():
    registry = ProviderRegistry().initialize(load_registry_config({"OPENAI_API_KEY": "ok", "SQL_API_KEY": "k"}))
    registry.initialization_errors().append("tampered")
    assert len(registry.initialization_errors()) == 1


def test_configuration_error_shape():
    err = ConfigurationError("X is empty or not set", provider="openai")
    assert err.code.value == "configuration"
