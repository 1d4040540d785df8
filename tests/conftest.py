"""Shared test fixtures for Sharingan tests."""

import textwrap
from pathlib import Path

import pytest


@pytest.fixture
def write_go(tmp_path):
    """Write dedented Go sources into a repository under tmp_path.

    Usage:
        root = write_go({"internal/service/order.go": "package service ..."})
    """
    root = tmp_path / "repo"
    root.mkdir()

    def _write(files: dict) -> Path:
        for rel, source in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(textwrap.dedent(source).lstrip(), encoding="utf-8")
        return root

    return _write


@pytest.fixture
def order_repo(write_go):
    """Minimal service graph: service -> repository, plus an interface."""
    return write_go(
        {
            "internal/service/order.go": """
                package service

                type OrderService struct {
                    repo   OrderRepository
                    client PaymentClient
                }
            """,
            "internal/repository/order.go": """
                package repository

                type OrderRepository struct{}
            """,
            "internal/payment/client.go": """
                package payment

                type PaymentClient interface {
                    Charge(amount int) error
                }
            """,
        }
    )


@pytest.fixture
def layered_repo(write_go):
    """A small layered service with noise types mixed in."""
    return write_go(
        {
            "cmd/api/main.go": """
                package main

                func main() {}
            """,
            "internal/transport/http/handler.go": """
                package http

                type OrderHandler struct {
                    svc    OrderService
                    logger Logger
                }

                type CreateOrderRequest struct {
                    ID string
                }

                type CreateOrderResponse struct {
                    ID string
                }
            """,
            "internal/service/order.go": """
                package service

                import "context"

                type OrderService struct {
                    repo     *OrderRepository
                    payments PaymentClient
                    logger   Logger
                }

                type OrderServiceMock struct {
                    repo OrderRepository
                }

                type orderCache struct {
                    repo OrderRepository
                }

                func (s *OrderService) Place(ctx context.Context) error {
                    return nil
                }
            """,
            "internal/persistence/order.go": """
                package persistence

                import "database/sql"

                type OrderRepository struct {
                    db *sql.DB
                }
            """,
            "internal/adapter/payment.go": """
                package adapter

                type PaymentClient interface {
                    Charge(amount int) error
                }

                type StripeGateway struct {
                    apiKey string
                }
            """,
            "internal/config/config.go": """
                package config

                type AppConfig struct {
                    DatabaseURL string
                }
            """,
            "internal/log/logger.go": """
                package log

                type Logger interface {
                    Info(msg string)
                }
            """,
        }
    )


@pytest.fixture
def sample_architecture():
    """Hand-built architecture covering every layer."""
    from sharingan.architecture.models import Architecture, Component, ComponentKind

    components = [
        Component(
            "OrderHandler",
            ComponentKind.HANDLER,
            "http",
            "internal/transport/http/handler.go",
            ["OrderService"],
        ),
        Component(
            "OrderService",
            ComponentKind.SERVICE,
            "service",
            "internal/service/order.go",
            ["OrderRepository", "StripeGateway"],
        ),
        Component(
            "OrderRepository",
            ComponentKind.REPOSITORY,
            "persistence",
            "internal/persistence/order.go",
        ),
        Component(
            "StripeGateway",
            ComponentKind.ADAPTER,
            "adapter",
            "internal/adapter/stripe.go",
        ),
    ]
    return Architecture(
        components=components,
        dependency_index={c.name: c.dependencies for c in components},
    )
