from __future__ import annotations

import copy
import logging
import logging.config
import os

import toml
import yaml

from clusterfit.utils.log_utils import set_log_level

# Read in environment variables, set defaults if not present
package_location = os.path.dirname(__file__)

config_file = os.environ.get("CLUSTERFIT_CONFIG", f"{package_location}/package_config.toml")
log_config_file = os.environ.get("CLUSTERFIT_LOG_CONFIG", f"{package_location}/log.yml")

log = logging.getLogger()

DEFAULT_CONFIG = {
    "fit": {
        # empirical cell size -> position resolution divisor, tunable
        "resolution_divisor": 3.46,
        "parallel_cos_threshold": 0.99,
        "reference_axis": [0.0, 0.0, 1.0],
        "fallback_rotation_axis": [1.0, 0.0, 0.0],
        "min_fit_points": 2,
        "min_occupied_layers": 2,
    },
    "logging": {
        "level": "INFO",
    },
}


def load_config(config_file: str) -> dict:
    config = dict()
    try:
        with open(config_file) as f:
            if 'toml' in config_file:
                config = toml.load(f)
            elif 'yml' in config_file or 'yaml' in config_file:
                config = yaml.safe_load(f) or {}
            log.info(f"Loaded config from {config_file}")
    except Exception as error:
        log.error(f"Error loading config {config_file}: {error}")
        log.error(f"Default values will be used")
    return config


def merge_config(defaults: dict, overrides: dict) -> dict:
    """
    Returns a copy of defaults with the values in overrides
        layered on top, section by section
    """
    merged = copy.deepcopy(defaults)
    for key, val in overrides.items():
        if isinstance(val, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], val)
        else:
            merged[key] = val
    return merged


log_config = load_config(log_config_file)
try:
    logging.config.dictConfig(log_config)
except Exception as e:
    log.error(f"Error loading log config {log_config_file}: {e}")
    log.error(f"Default values will be used")
log = logging.getLogger('clusterfit')

config = merge_config(DEFAULT_CONFIG, load_config(config_file))

set_log_level(config["logging"]["level"])
