"""Prometheus metrics for outgoing API requests."""

from __future__ import annotations

from prometheus_client import CollectorRegistry, Counter, Histogram, generate_latest

REGISTRY = CollectorRegistry()

REQUEST_COUNT = Counter(
    "yuque_requests_total",
    "Total Yuque API requests",
    labelnames=("resource", "method", "status"),
    registry=REGISTRY,
)

REQUEST_LATENCY = Histogram(
    "yuque_request_latency_seconds",
    "Latency of Yuque API requests",
    labelnames=("resource", "method"),
    registry=REGISTRY,
)


def resource_of(api: str) -> str:
    """Label for an API path: its first segment, e.g. ``repos`` for ``/repos/a/b``."""
    head = api.lstrip("/").split("/", 1)[0]
    return head.split("?", 1)[0] or "root"


def render_metrics() -> bytes:
    """Return metrics in the Prometheus exposition format."""
    return generate_latest(REGISTRY)


__all__ = [
    "REGISTRY",
    "REQUEST_COUNT",
    "REQUEST_LATENCY",
    "resource_of",
    "render_metrics",
]
