# ============================================================================
# CONFIGURATION MODULE
# ============================================================================
# STATUS: Core - Configuration and defaults
# PURPOSE: Centralized configuration management
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Module

Execution defaults and environment-declared probe targets.
"""

from core.config.defaults import (
    HealthDefaults,
    ProbeTargets,
)

__all__ = [
    "HealthDefaults",
    "ProbeTargets",
]
