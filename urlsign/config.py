import logging
import os
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "config.yml"
DEFAULT_SECRET_ENV = "URL_SIGNING_SECRET"


class SignerConfig(BaseModel):
    secret_key: Optional[str] = None
    secret_key_env: str = DEFAULT_SECRET_ENV
    log_level: str = "WARNING"


#
# Read the yaml configuration; entries of the "config" list are merged in order
#
def load_config(path: Union[str, Path] = DEFAULT_CONFIG_FILE) -> SignerConfig:
    config_path = Path(path)
    if not config_path.exists():
        logger.debug("Config file %s not found, using defaults", config_path)
        return SignerConfig()

    with open(config_path, 'r', encoding='utf-8') as file:
        try:
            config_data = yaml.safe_load(file) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(config_data, dict):
        raise ValueError(f"{config_path} must contain a mapping at the top level")

    conf = config_data.get('config', [])
    if isinstance(conf, dict):
        conf = [conf]
    if not isinstance(conf, list):
        raise ValueError(f"'config' in {config_path} must be a list of mappings")

    merged = {}
    for c in conf:
        if not isinstance(c, dict):
            raise ValueError(f"Every 'config' entry in {config_path} must be a mapping")
        merged.update(c)

    try:
        config = SignerConfig(**merged)
    except ValidationError as e:
        raise ValueError(f"Invalid signer configuration in {config_path}: {e}") from e

    logger.debug("Loaded signer configuration from %s", config_path)
    return config


def resolve_secret_key(config: SignerConfig, override: Optional[str] = None) -> str:
    """
    Pick the signing secret: explicit override, then config file, then environment.

    Raises:
        RuntimeError: If no secret is available from any source.
    """
    for source, value in (
        ("command line", override),
        ("config file", config.secret_key),
        (f"environment variable {config.secret_key_env}", os.environ.get(config.secret_key_env)),
    ):
        if value and value.strip():
            logger.debug("Using signing secret from %s", source)
            return value.strip()

    raise RuntimeError(
        f"No URL signing secret set (use --key, 'secret_key' in the config file "
        f"or the {config.secret_key_env} environment variable)."
    )
