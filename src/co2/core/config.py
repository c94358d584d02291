#!/usr/bin/env python3
"""
CO2 - Configuration
Library defaults, optionally overridden by a JSON configuration file.
"""

import os
import json
import logging

logger = logging.getLogger("co2")

CONFIG_ENV_VAR = "CO2_CONFIG"

SUPPORTED_RSA_KEY_SIZES = (1024, 2048, 3072, 4096)

DEFAULT_CONFIG = {
    "rsa_key_size": 3072,
    "miller_rabin_rounds": 40,
    "hash_algorithm": "sha256",
    "log_level": "WARNING",
}

_config = None


def load_config(config_file=None):
    """
    Load the configuration.

    Starts from DEFAULT_CONFIG and merges the JSON object found in
    config_file (or the file named by CO2_CONFIG) over it.

    Args:
        config_file: Optional path to a JSON configuration file

    Returns:
        dict: The merged configuration
    """
    config = dict(DEFAULT_CONFIG)

    if config_file is None:
        config_file = os.environ.get(CONFIG_ENV_VAR)
    if not config_file:
        return config

    try:
        with open(config_file, 'r') as f:
            overrides = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Error loading configuration from {config_file}: {str(e)}; using defaults")
        return config

    if not isinstance(overrides, dict):
        logger.warning(f"Configuration in {config_file} is not a JSON object; using defaults")
        return config

    for key, value in overrides.items():
        if key not in DEFAULT_CONFIG:
            logger.warning(f"Ignoring unknown configuration key: {key}")
            continue
        config[key] = value

    logger.info(f"Loaded configuration from {config_file}")
    return config


def get_config():
    # process-wide configuration, loaded once
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config):
    global _config
    _config = config
