"""Helpers shared by the pipemon subcommands."""

import logging
from typing import Optional

import click

from pipeline_monitor.models import Pipeline
from pipeline_monitor.presets import get_preset
from pipeline_monitor.settings import MonitorSettings, load_settings


def context_settings(ctx: click.Context) -> MonitorSettings:
    """Load settings named by the global ``--config`` option.

    Applies the configured log level unless ``-v`` was given.
    """
    obj = ctx.obj or {}
    settings = load_settings(obj.get("config_path"))
    if not obj.get("verbose"):
        logging.getLogger().setLevel(settings.log_level)
    return settings


def resolve_pipeline(settings: MonitorSettings, preset: Optional[str]) -> Pipeline:
    return get_preset(preset or settings.default_preset)
