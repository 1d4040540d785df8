"""End-to-end tests for architecture analysis."""

import pytest

from sharingan.architecture import analyze
from sharingan.architecture.models import ComponentKind
from sharingan.config import AnalysisConfig
from sharingan.exceptions import EnumerationError
from sharingan.scanning.treesitter_parser import TREE_SITTER_AVAILABLE


@pytest.mark.skipif(not TREE_SITTER_AVAILABLE, reason="tree-sitter-go not installed")
class TestAnalyze:
    """Two-pass analysis over small repositories."""

    def test_minimal_service_graph(self, order_repo):
        arch = analyze(order_repo)

        by_name = {c.name: c for c in arch.components}
        assert set(by_name) == {"OrderService", "OrderRepository"}
        assert by_name["OrderService"].kind is ComponentKind.SERVICE
        assert by_name["OrderRepository"].kind is ComponentKind.REPOSITORY
        assert by_name["OrderService"].dependencies == ["OrderRepository"]
        assert arch.dependency_index == {
            "OrderRepository": [],
            "OrderService": ["OrderRepository"],
        }

    def test_layered_repository(self, layered_repo):
        arch = analyze(layered_repo)

        assert [(c.name, c.kind) for c in arch.components] == [
            ("StripeGateway", ComponentKind.ADAPTER),
            ("OrderRepository", ComponentKind.REPOSITORY),
            ("OrderService", ComponentKind.SERVICE),
            ("OrderHandler", ComponentKind.HANDLER),
        ]
        handler = arch.components[-1]
        assert handler.package == "http"
        assert handler.source_path == "internal/transport/http/handler.go"
        assert handler.dependencies == ["OrderService"]
        assert arch.dependency_count() == 2

    def test_noise_never_detected(self, layered_repo):
        names = {c.name for c in analyze(layered_repo).components}
        for noise in ("OrderServiceMock", "orderCache", "CreateOrderRequest", "AppConfig"):
            assert noise not in names

    def test_interfaces_are_not_components(self, layered_repo):
        names = {c.name for c in analyze(layered_repo).components}
        assert "PaymentClient" not in names
        assert "Logger" not in names

    def test_dependencies_are_closed(self, layered_repo):
        arch = analyze(layered_repo)
        names = {c.name for c in arch.components}
        for component in arch.components:
            assert set(component.dependencies) <= names
            assert arch.dependency_index[component.name] == component.dependencies

    def test_idempotent(self, layered_repo):
        assert analyze(layered_repo) == analyze(layered_repo)

    def test_malformed_file_is_skipped(self, order_repo):
        broken = order_repo / "internal" / "service" / "broken.go"
        broken.write_text("package service\n\ntype Broken struct {\n", encoding="utf-8")

        arch = analyze(order_repo)
        assert {c.name for c in arch.components} == {"OrderService", "OrderRepository"}

    def test_excluded_and_test_files(self, write_go):
        service = "package service\n\ntype UserService struct{ repo UserRepository }\n"
        root = write_go(
            {
                "vendor/lib/service.go": service,
                "internal/mocks/service.go": service,
                "internal/service/user_test.go": service,
                "internal/service/user_mock.go": service,
                "internal/repo/user.go": "package repo\n\ntype UserRepository struct{}\n",
            }
        )
        arch = analyze(root)
        assert [c.name for c in arch.components] == ["UserRepository"]

    def test_empty_repository(self, tmp_path):
        arch = analyze(tmp_path)
        assert arch.is_empty
        assert arch.dependency_index == {}

    def test_respects_config(self, layered_repo):
        config = AnalysisConfig(excluded_dirs=("transport",))
        names = [c.name for c in analyze(layered_repo, config).components]
        assert "OrderHandler" not in names
        assert "OrderService" in names


class TestAnalyzeErrors:
    def test_missing_root(self, tmp_path):
        with pytest.raises(EnumerationError):
            analyze(tmp_path / "nope")

    def test_root_is_a_file(self, tmp_path):
        path = tmp_path / "main.go"
        path.write_text("package main\n")
        with pytest.raises(EnumerationError):
            analyze(path)


@pytest.mark.skipif(not TREE_SITTER_AVAILABLE, reason="tree-sitter-go not installed")
class TestClassificationScenarios:
    """Field extraction and layer rules checked together from Go source."""

    def test_handler_without_dependencies_is_discarded(self, write_go):
        root = write_go(
            {
                "handler/ping.go": """
                    package handler

                    type PingHandler struct{}
                """,
            }
        )
        assert analyze(root).is_empty

    def test_orchestrator_falls_back_to_service(self, write_go):
        root = write_go(
            {
                "foo/orchestrator.go": """
                    package foo

                    type Orchestrator struct {
                        users  UserClient
                        orders OrderClient
                    }
                """,
            }
        )
        [component] = analyze(root).components
        assert component.name == "Orchestrator"
        assert component.kind is ComponentKind.SERVICE
        assert component.package == "foo"
        # Neither client is a component, so both are pruned
        assert component.dependencies == []

    def test_single_collaborator_is_not_enough(self, write_go):
        root = write_go(
            {
                "foo/orchestrator.go": """
                    package foo

                    type Orchestrator struct {
                        users UserClient
                        name  string
                    }
                """,
            }
        )
        assert analyze(root).is_empty


@pytest.mark.skipif(not TREE_SITTER_AVAILABLE, reason="tree-sitter-go not installed")
class TestNoImplicitLimits:
    """Default settings analyze every candidate file."""

    def test_many_packages(self, write_go):
        files = {
            f"internal/svc{i:03d}/service.go": (
                f"package svc{i:03d}\n\ntype Svc{i:03d}Service struct{{ r UserRepository }}\n"
            )
            for i in range(60)
        }
        arch = analyze(write_go(files))
        assert [c.name for c in arch.components] == [f"Svc{i:03d}Service" for i in range(60)]

    def test_large_file_still_feeds_catalog(self, write_go):
        padding = "// generated\n" * (1024 * 1024)
        root = write_go(
            {
                "internal/gen/notifier.go": "package gen\n\n"
                "type Notifier interface{ Notify() }\n" + padding,
                "internal/app/checkout.go": """
                    package app

                    type Checkout struct {
                        notify Notifier
                        orders OrderStore
                    }
                """,
            }
        )
        [component] = analyze(root).components
        assert component.name == "Checkout"
        assert component.kind is ComponentKind.SERVICE
