"""Dependency injection container for the matching engine."""

from __future__ import annotations

from typing import Any

from dependency_injector import containers, providers

from .adapters import InMemoryStore, LanguageProvider
from .catalog import default_languages
from .core import EligibilityEvaluator, LanguageResolver, LanguageResolverConfig, ScheduleConflictDetector
from .core.gates import ExperienceGateConfig, LocationGateConfig, RateGateConfig, build_gates
from .pipeline import MatchingPipeline
from .schemas import LanguageRecord


def _language_catalogue(store: LanguageProvider) -> list[LanguageRecord]:
    return store.list_languages() or default_languages()


class MatchingContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    store = providers.Singleton(InMemoryStore)

    language_records = providers.Callable(_language_catalogue, store)

    resolver_config = providers.Singleton(LanguageResolverConfig)
    resolver = providers.Singleton(
        LanguageResolver,
        records=language_records,
        config=resolver_config,
    )

    location_config = providers.Singleton(LocationGateConfig)
    experience_config = providers.Singleton(ExperienceGateConfig)
    rate_config = providers.Singleton(RateGateConfig)

    gates = providers.Singleton(
        build_gates,
        resolver,
        enabled=config.gates.enabled,
        location=location_config,
        experience=experience_config,
        rate=rate_config,
    )

    evaluator = providers.Singleton(EligibilityEvaluator, gates=gates)

    detector = providers.Singleton(ScheduleConflictDetector)

    pipeline = providers.Factory(
        MatchingPipeline,
        evaluator=evaluator,
        tutors=store,
        postings=store,
        schedule=store,
        detector=detector,
        max_workers=config.pipeline.max_workers,
    )


def create_container(
    *,
    settings: dict[str, Any] | None = None,
    store: Any | None = None,
) -> MatchingContainer:
    """Instantiate container with an optional data store and setting overrides."""

    container = MatchingContainer()

    if store is not None:
        container.store.override(providers.Object(store))

    if not settings or not isinstance(settings, dict):
        return container

    gate_settings = dict(settings.get("gates") or {})
    pipeline_settings = settings.get("pipeline") or {}
    container.config.from_dict(
        {
            "gates": {"enabled": gate_settings.get("enabled")},
            "pipeline": {"max_workers": pipeline_settings.get("max_workers")},
        }
    )

    resolver_settings = settings.get("resolver") or {}
    if resolver_settings:
        container.resolver_config.override(
            providers.Object(LanguageResolverConfig(**resolver_settings))
        )

    if gate_settings.get("location"):
        location_settings = dict(gate_settings["location"])
        if "remote_modalities" in location_settings:
            location_settings["remote_modalities"] = tuple(location_settings["remote_modalities"])
        container.location_config.override(
            providers.Object(LocationGateConfig(**location_settings))
        )

    if gate_settings.get("experience"):
        container.experience_config.override(
            providers.Object(ExperienceGateConfig(**gate_settings["experience"]))
        )

    if gate_settings.get("rate"):
        container.rate_config.override(
            providers.Object(RateGateConfig(**gate_settings["rate"]))
        )

    return container
