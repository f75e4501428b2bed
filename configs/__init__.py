# -*- coding: utf-8 -*-
"""
Configuration module
====================
Central place for paths and solver parameters
"""

from .config import (
    PROJECT_ROOT,
    INPUTS_DIR,
    FIRST_DAY,
    LAST_DAY,
    LOG_FORMAT,
    CUBE_LIMITS,
    SeedSearchConfig,
    seed_search,
    input_path,
)
