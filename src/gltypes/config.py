"""
Runtime configuration for gltypes.

This module centralizes the tunable policies of the algebra core:
- How singular matrix inversion is reported
- The default tolerance used by the ``is_close`` helpers

Usage:
    from gltypes.config import configure, get_config

    # Raise instead of returning a matrix of infinities
    configure(singular_matrix='raise')

    # Check the active settings
    get_config().epsilon
"""

from dataclasses import dataclass, replace
from typing import Literal, get_args


SingularPolicy = Literal['ignore', 'warn', 'raise']


# =============================================================================
# Configuration
# =============================================================================

@dataclass(frozen=True)
class AlgebraConfig:
    """
    Configuration options for the algebra core.

    Attributes:
        singular_matrix: What ``inverse()`` does when the determinant is zero.
            - 'ignore': Return the IEEE result (infinities/NaNs) silently
            - 'warn': Return the IEEE result and issue a SingularMatrixWarning (default)
            - 'raise': Raise SingularMatrixError before computing any entry

        epsilon: Absolute tolerance used by ``is_close`` when none is given.
    """
    singular_matrix: SingularPolicy = 'warn'
    epsilon: float = 1e-6

    def __post_init__(self):
        if self.singular_matrix not in get_args(SingularPolicy):
            raise ValueError(
                f"Unknown singular matrix policy: {self.singular_matrix}. "
                f"Use 'ignore', 'warn', or 'raise'."
            )
        if self.epsilon < 0:
            raise ValueError(f"epsilon must be non-negative, got {self.epsilon}")


# =============================================================================
# Active Configuration
# =============================================================================

_config = AlgebraConfig()


def set_config(config: AlgebraConfig) -> None:
    """Replace the active configuration."""
    global _config
    if not isinstance(config, AlgebraConfig):
        raise TypeError(f"Expected AlgebraConfig, got {type(config).__name__}")
    _config = config


def get_config() -> AlgebraConfig:
    """Get the active configuration."""
    return _config


def configure(**changes) -> AlgebraConfig:
    """Update individual fields of the active configuration and return it."""
    set_config(replace(_config, **changes))
    return _config


def reset_config() -> None:
    """Restore the default configuration."""
    set_config(AlgebraConfig())
