"""Enumeration types shared by the ORM models and the API schemas."""

from __future__ import annotations

from enum import StrEnum


class Diet(StrEnum):
    """Dietary classification of a recipe."""

    VEGETARIAN = "VEGETARIAN"
    VEGAN = "VEGAN"
    PESCATARIAN = "PESCATARIAN"
    GLUTEN_FREE = "GLUTEN_FREE"
    DAIRY_FREE = "DAIRY_FREE"
    KETO = "KETO"
    PALEO = "PALEO"
    OMNIVORE = "OMNIVORE"


class Course(StrEnum):
    """Course of the meal a recipe is served as."""

    BREAKFAST = "BREAKFAST"
    STARTER = "STARTER"
    MAIN = "MAIN"
    SIDE = "SIDE"
    DESSERT = "DESSERT"
    SNACK = "SNACK"
    DRINK = "DRINK"


class HealthStatus(StrEnum):
    """Health check status values."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"
    NOT_CONFIGURED = "not_configured"


class ReadinessStatus(StrEnum):
    """Readiness probe status values."""

    READY = "ready"
    DEGRADED = "degraded"
