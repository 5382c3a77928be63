"""Prometheus exporter helpers."""

from __future__ import annotations

from prometheus_client import Counter, Gauge


calculator_evaluations_total = Counter(
    "calculator_evaluations_total",
    "Total number of styling calculator evaluations.",
    ["engine"],
)

celebrations_total = Counter(
    "celebrations_total",
    "Celebration events that passed the cooldown window.",
    ["anchor"],
)

board_pins_total = Counter(
    "board_pins_total",
    "Total number of looks pinned to the studio board.",
)

board_persist_failures_total = Counter(
    "board_persist_failures_total",
    "Board writes that could not reach durable storage.",
)

board_size = Gauge(
    "board_size",
    "Number of looks currently pinned to the studio board.",
)
