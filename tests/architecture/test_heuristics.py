"""Tests for the noise filter, dependency markers and layer rules."""

import pytest

from sharingan.architecture.heuristics import (
    DEPENDENCY_MARKERS,
    VALUE_SUFFIXES,
    classify,
    is_noise,
    looks_like_dependency,
)
from sharingan.architecture.models import ComponentKind


class TestIsNoise:
    """Names that must never become components."""

    @pytest.mark.parametrize(
        "name",
        ["UserMock", "MockStore", "CreateUserRequest", "CreateUserResponse", "internalHelper"],
    )
    def test_canonical_noise(self, name):
        assert is_noise(name)

    @pytest.mark.parametrize("name", ["AppConfig", "DBConf", "Config", "ConfigLoader", "RuntimeConfiguration"])
    def test_config_records(self, name):
        assert is_noise(name)

    @pytest.mark.parametrize("suffix", VALUE_SUFFIXES)
    def test_value_suffixes(self, suffix):
        assert is_noise(f"Order{suffix}")

    def test_short_names(self):
        assert is_noise("ID")
        assert is_noise("X")
        assert not is_noise("DB")

    def test_unexported(self):
        assert is_noise("orderService")

    def test_underscore_prefix_is_not_unexported(self):
        # Only ASCII lowercase initials mark an unexported type here
        assert not is_noise("_Service")

    def test_empty_name(self):
        assert is_noise("")

    @pytest.mark.parametrize("name", ["OrderService", "UserRepository", "Server", "PaymentGateway"])
    def test_architectural_names_pass(self, name):
        assert not is_noise(name)

    def test_suffix_match_is_case_sensitive(self):
        # "data" in lowercase is not the Data suffix
        assert not is_noise("Metadatabase")


class TestLooksLikeDependency:
    """Substring markers for collaborator types."""

    @pytest.mark.parametrize(
        "name", ["UserService", "KVStore", "OrderRepo", "HTTPClient", "APIGateway", "AuthToken", "DB"]
    )
    def test_markers_match(self, name):
        assert looks_like_dependency(name)

    @pytest.mark.parametrize("name", ["string", "int", "Duration", "Mutex", "Order"])
    def test_plain_types_do_not_match(self, name):
        assert not looks_like_dependency(name)

    def test_every_marker_matches_itself(self):
        for marker in DEPENDENCY_MARKERS:
            assert looks_like_dependency(marker.upper())


class TestClassify:
    """Layer rules in priority order."""

    def test_handler_by_package(self):
        assert classify("internal/transport", "Orders", ["OrderService"]) is ComponentKind.HANDLER
        assert classify("internal/http", "Orders", ["OrderService"]) is ComponentKind.HANDLER
        assert classify("pkg/api", "Orders", ["OrderService"]) is ComponentKind.HANDLER

    def test_handler_by_name(self):
        assert classify("internal/app", "GRPCServer", ["OrderService"]) is ComponentKind.HANDLER
        assert classify("internal/app", "OrderHandler", ["OrderService"]) is ComponentKind.HANDLER

    def test_handler_requires_dependency(self):
        assert classify("handler", "PingHandler", []) is None

    def test_handler_without_deps_falls_through(self):
        # Handler-shaped but dependency-free: later rules still apply
        assert classify("internal/http/store", "Cache", []) is ComponentKind.REPOSITORY

    def test_repository_by_package_beats_service_name(self):
        assert classify("internal/repository", "UserService", ["DB"]) is ComponentKind.REPOSITORY

    def test_repository_by_name(self):
        assert classify("internal/app", "UserRepository", []) is ComponentKind.REPOSITORY
        assert classify("internal/app", "SessionStore", []) is ComponentKind.REPOSITORY
        assert classify("internal/app", "DB", []) is ComponentKind.REPOSITORY

    def test_repository_skipped_in_config_package(self):
        assert classify("internal/config/store", "SessionStore", []) is None

    def test_adapter_by_package(self):
        assert classify("internal/external", "Stripe", []) is ComponentKind.ADAPTER
        assert classify("internal/integration", "Slack", []) is ComponentKind.ADAPTER

    def test_adapter_beats_service(self):
        assert classify("internal/adapter", "BillingService", ["Logger"]) is ComponentKind.ADAPTER

    def test_service_by_package(self):
        assert classify("internal/usecase", "Checkout", ["OrderRepository"]) is ComponentKind.SERVICE

    def test_service_by_name(self):
        assert classify("internal/app", "Service", ["Logger"]) is ComponentKind.SERVICE
        assert classify("internal/app", "BillingService", ["Logger"]) is ComponentKind.SERVICE

    def test_service_requires_dependency(self):
        assert classify("internal/service", "BillingService", []) is None

    def test_fallback_service(self):
        deps = ["UserClient", "OrderClient"]
        assert classify("foo", "Orchestrator", deps) is ComponentKind.SERVICE

    def test_single_dependency_is_not_enough_for_fallback(self):
        assert classify("foo", "Orchestrator", ["UserClient"]) is None

    def test_package_match_is_case_insensitive(self):
        assert classify("internal/Persistence", "Orders", []) is ComponentKind.REPOSITORY


class TestShortNamesByteLength:
    """Identifier length is measured in UTF-8 bytes."""

    def test_two_byte_single_letter(self):
        assert is_noise("Ä")

    def test_two_letters_three_bytes(self):
        assert not is_noise("ÄB")
