from __future__ import annotations

from itertools import permutations

import pytest
from pydantic import ValidationError

from models.catalog import STRATEGY_CATALOG
from models.strategy import Operation, Strategy


def test_name_joins_operations_in_order() -> None:
    strategy = Strategy.of("setup:upgrade", "cache:flush", "indexer:reindex", "setup:di:compile")

    assert strategy.name() == "setup:upgrade, cache:flush, indexer:reindex, setup:di:compile"


def test_strategy_is_immutable() -> None:
    strategy = STRATEGY_CATALOG[0]

    with pytest.raises(ValidationError):
        strategy.operations = tuple(reversed(strategy.operations))


@pytest.mark.parametrize(
    "commands",
    [
        ("cache:flush", "setup:di:compile", "setup:upgrade"),
        ("cache:flush", "cache:flush", "setup:upgrade", "indexer:reindex"),
        ("cache:flush", "setup:di:compile", "setup:upgrade", "indexer:reindex", "cache:flush"),
    ],
)
def test_strategy_must_be_a_permutation(commands) -> None:
    with pytest.raises(ValidationError):
        Strategy.of(*commands)


def test_unknown_operation_is_rejected() -> None:
    with pytest.raises(ValueError):
        Strategy.of("cache:clean", "setup:di:compile", "setup:upgrade", "indexer:reindex")


def test_catalog_starts_with_flush_compile_upgrade_reindex() -> None:
    assert STRATEGY_CATALOG[0].operations == (
        Operation.CACHE_FLUSH,
        Operation.DI_COMPILE,
        Operation.SETUP_UPGRADE,
        Operation.REINDEX,
    )
    assert STRATEGY_CATALOG[-1].name() == "setup:upgrade, indexer:reindex, cache:flush, setup:di:compile"


def test_catalog_has_no_duplicate_orderings() -> None:
    names = [strategy.name() for strategy in STRATEGY_CATALOG]

    assert len(names) == 24
    assert len(set(names)) == len(names)


def test_catalog_covers_every_ordering() -> None:
    every_ordering = set(permutations(Operation))

    assert {strategy.operations for strategy in STRATEGY_CATALOG} == every_ordering


def test_catalog_priority_order() -> None:
    flush, compile_, upgrade, reindex = "cache:flush", "setup:di:compile", "setup:upgrade", "indexer:reindex"
    expected = [
        (flush, compile_, upgrade, reindex),
        (flush, upgrade, compile_, reindex),
        (compile_, upgrade, flush, reindex),
        (upgrade, compile_, flush, reindex),
        (reindex, flush, compile_, upgrade),
        (reindex, flush, upgrade, compile_),
        (reindex, compile_, upgrade, flush),
        (reindex, upgrade, compile_, flush),
        (compile_, flush, upgrade, reindex),
        (upgrade, flush, compile_, reindex),
        (reindex, compile_, flush, upgrade),
        (reindex, upgrade, flush, compile_),
        (flush, reindex, compile_, upgrade),
        (flush, reindex, upgrade, compile_),
        (flush, compile_, reindex, upgrade),
        (flush, upgrade, reindex, compile_),
        (compile_, reindex, upgrade, flush),
        (upgrade, reindex, compile_, flush),
        (compile_, upgrade, reindex, flush),
        (upgrade, compile_, reindex, flush),
        (compile_, flush, reindex, upgrade),
        (compile_, reindex, flush, upgrade),
        (upgrade, flush, reindex, compile_),
        (upgrade, reindex, flush, compile_),
    ]

    assert [strategy.name() for strategy in STRATEGY_CATALOG] == [", ".join(names) for names in expected]
