# ============================================================================
# CORE MODULE
# ============================================================================
# STATUS: Core module initialization
# PURPOSE: Logging and configuration shared by the health packages
# ============================================================================
"""
Core

- core.logging: structured logging with per-task context
- core.config: execution defaults and probe targets from the environment
"""
