"""
Strategy catalog
The fixed priority order in which orderings are attempted
"""
from typing import Tuple
from models.strategy import Strategy


STRATEGY_CATALOG: Tuple[Strategy, ...] = (
    # cache:flush first
    Strategy.of("cache:flush", "setup:di:compile", "setup:upgrade", "indexer:reindex"),
    Strategy.of("cache:flush", "setup:upgrade", "setup:di:compile", "indexer:reindex"),

    # cache:flush later, just to make sure
    Strategy.of("setup:di:compile", "setup:upgrade", "cache:flush", "indexer:reindex"),
    Strategy.of("setup:upgrade", "setup:di:compile", "cache:flush", "indexer:reindex"),

    # reindex first
    Strategy.of("indexer:reindex", "cache:flush", "setup:di:compile", "setup:upgrade"),
    Strategy.of("indexer:reindex", "cache:flush", "setup:upgrade", "setup:di:compile"),
    Strategy.of("indexer:reindex", "setup:di:compile", "setup:upgrade", "cache:flush"),
    Strategy.of("indexer:reindex", "setup:upgrade", "setup:di:compile", "cache:flush"),

    # cache:flush between setup commands
    Strategy.of("setup:di:compile", "cache:flush", "setup:upgrade", "indexer:reindex"),
    Strategy.of("setup:upgrade", "cache:flush", "setup:di:compile", "indexer:reindex"),
    Strategy.of("indexer:reindex", "setup:di:compile", "cache:flush", "setup:upgrade"),
    Strategy.of("indexer:reindex", "setup:upgrade", "cache:flush", "setup:di:compile"),

    # cache:flush before reindexing
    Strategy.of("cache:flush", "indexer:reindex", "setup:di:compile", "setup:upgrade"),
    Strategy.of("cache:flush", "indexer:reindex", "setup:upgrade", "setup:di:compile"),

    # reindex between setup commands
    Strategy.of("cache:flush", "setup:di:compile", "indexer:reindex", "setup:upgrade"),
    Strategy.of("cache:flush", "setup:upgrade", "indexer:reindex", "setup:di:compile"),
    Strategy.of("setup:di:compile", "indexer:reindex", "setup:upgrade", "cache:flush"),
    Strategy.of("setup:upgrade", "indexer:reindex", "setup:di:compile", "cache:flush"),

    # setup, reindex, flush
    Strategy.of("setup:di:compile", "setup:upgrade", "indexer:reindex", "cache:flush"),
    Strategy.of("setup:upgrade", "setup:di:compile", "indexer:reindex", "cache:flush"),

    # remaining obscure permutations
    Strategy.of("setup:di:compile", "cache:flush", "indexer:reindex", "setup:upgrade"),
    Strategy.of("setup:di:compile", "indexer:reindex", "cache:flush", "setup:upgrade"),
    Strategy.of("setup:upgrade", "cache:flush", "indexer:reindex", "setup:di:compile"),
    Strategy.of("setup:upgrade", "indexer:reindex", "cache:flush", "setup:di:compile"),
)
