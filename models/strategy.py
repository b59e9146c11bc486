"""
Strategy data structures
Defines the maintenance operations and the orderings they are tried in
"""
from enum import Enum
from typing import ClassVar, Tuple
from pydantic import BaseModel, ConfigDict, field_validator


class Operation(Enum):
    """Magento maintenance commands understood by bin/magento"""
    CACHE_FLUSH = "cache:flush"
    DI_COMPILE = "setup:di:compile"
    SETUP_UPGRADE = "setup:upgrade"
    REINDEX = "indexer:reindex"


class Strategy(BaseModel):
    """One ordering of all maintenance operations, run as an all-or-nothing pipeline"""
    model_config = ConfigDict(frozen=True)

    operations: Tuple[Operation, ...]

    NAME_SEPARATOR: ClassVar[str] = ", "

    @field_validator('operations')
    @classmethod
    def must_be_permutation(cls, operations: Tuple[Operation, ...]) -> Tuple[Operation, ...]:
        """Every operation exactly once"""
        if len(operations) != len(Operation):
            raise ValueError(f"strategy must contain {len(Operation)} operations, got {len(operations)}")
        if set(operations) != set(Operation):
            raise ValueError("strategy must not repeat operations")
        return operations

    @classmethod
    def of(cls, *commands: str) -> 'Strategy':
        """Build a strategy from bin/magento command names"""
        return cls(operations=tuple(Operation(command) for command in commands))

    def name(self) -> str:
        """Display name, used for logging only"""
        return self.NAME_SEPARATOR.join(operation.value for operation in self.operations)
