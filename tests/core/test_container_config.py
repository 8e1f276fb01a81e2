from __future__ import annotations

import pytest
from pydantic import ValidationError

from tutormatch.adapters import InMemoryStore
from tutormatch.container import create_container
from tutormatch.schemas import LanguageRecord
from tutormatch.schemas.config import AppConfig, load_config


def test_create_container_with_overrides():
    container = create_container(
        settings={
            "resolver": {"fuzzy_threshold": 95.0},
            "gates": {
                "enabled": ["location", "rate"],
                "location": {"remote_modalities": ["virtual", "hybrid"]},
                "experience": {"allow_representation_mismatch": False},
                "rate": {"tolerance_ratio": 0.15},
            },
            "pipeline": {"max_workers": 3},
        }
    )

    resolver = container.resolver()
    evaluator = container.evaluator()
    pipeline = container.pipeline()

    assert resolver._config.fuzzy_threshold == 95.0
    assert evaluator.gate_names == ["location", "rate"]
    assert container.location_config().remote_modalities == ("virtual", "hybrid")
    assert container.experience_config().allow_representation_mismatch is False
    assert container.rate_config().tolerance_ratio == 0.15
    assert pipeline._max_workers == 3


def test_default_container_uses_seed_catalogue_and_all_gates():
    container = create_container()

    assert len(container.resolver().records) == 20
    assert container.evaluator().gate_names == [
        "location",
        "target_language",
        "required_languages",
        "experience",
        "rate",
    ]
    assert container.pipeline()._max_workers == 1


def test_store_languages_replace_seed_catalogue():
    store = InMemoryStore(languages=[LanguageRecord(code="eo", name="Esperanto")])

    resolver = create_container(store=store).resolver()

    assert [record.code for record in resolver.records] == ["eo"]
    assert not resolver.resolve("English")


def test_unknown_gate_name_is_rejected():
    container = create_container(settings={"gates": {"enabled": ["location", "vibes"]}})

    with pytest.raises(ValueError):
        container.evaluator()


def test_load_config_validation():
    data = {
        "resolver": {"fuzzy_threshold": 90},
        "gates": {"rate": {"tolerance_ratio": 0.1}},
    }
    app_config = load_config(data)
    assert isinstance(app_config, AppConfig)
    settings = app_config.to_settings()
    assert settings["resolver"]["fuzzy_threshold"] == 90
    assert settings["gates"]["rate"]["tolerance_ratio"] == 0.1
    assert "pipeline" not in settings


def test_load_config_rejects_non_mapping():
    with pytest.raises(ValueError):
        load_config(["not", "a", "mapping"])


def test_load_config_rejects_unknown_gate_settings():
    with pytest.raises(ValidationError):
        load_config({"gates": {"rate": {"tolerance": 0.1}}})
    with pytest.raises(ValidationError):
        load_config({"gates": {"enabled": ["location", "locaton"]}})
    with pytest.raises(ValidationError):
        load_config({"gates": {"rate": {"tolerance_ratio": -0.5}}})


def test_load_config_gate_sections_feed_container():
    settings = load_config(
        {
            "gates": {
                "enabled": ["rate"],
                "location": {"remote_modalities": ["virtual", "hybrid"]},
                "rate": {"tolerance_ratio": 0.2},
            }
        }
    ).to_settings()

    container = create_container(settings=settings)

    assert container.evaluator().gate_names == ["rate"]
    assert container.location_config().remote_modalities == ("virtual", "hybrid")
    assert container.rate_config().tolerance_ratio == 0.2
