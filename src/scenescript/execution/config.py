"""
Configuration for the SceneScript executor.
"""

from dataclasses import dataclass


@dataclass
class ExecutorConfig:
    """
    Configuration for executor behavior.

    Params:
        strict_parameters: Reject parameter names a command does not declare
        lenient_values: Let non-literal value tokens degrade to null instead of
            failing the invocation
    """

    strict_parameters: bool = False
    lenient_values: bool = True

    @classmethod
    def from_dict(cls, config: dict | None = None) -> "ExecutorConfig":
        """Factory method to create config from dict with defaults."""
        if config is None:
            config = {}
        return cls(**config)
