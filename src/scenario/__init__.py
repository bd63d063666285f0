"""Scenario — демонстрационный сценарий каталога и корзин."""

from .demo import ScenarioConfig, build_sample_carts, build_sample_catalog, main, run_scenario

__all__ = [
    "ScenarioConfig",
    "build_sample_catalog",
    "build_sample_carts",
    "run_scenario",
    "main",
]
