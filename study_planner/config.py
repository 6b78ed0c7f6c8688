# -*- coding: utf-8 -*-
"""Planner limits and logging settings, configurable via environment variables."""
import os

# Longest recurring range the CLI and REST service accept, in days
MAX_RANGE_DAYS = int(os.getenv("STUDY_PLANNER_MAX_RANGE_DAYS", "365"))

LOG_LEVEL = os.getenv("STUDY_PLANNER_LOG_LEVEL", "WARNING").upper()
