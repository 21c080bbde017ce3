import copy
import json
import logging
import os

from .methods import METHODS, get_calculation_method, method_from_params

logger = logging.getLogger(__name__)

CONFIG_DIR = os.path.join(os.path.expanduser("~"), ".config", "praye")
CONFIG_PATH = os.path.join(CONFIG_DIR, "config.json")

DEFAULT_CONFIG = {
    "location": None,
    "method": "MWL",
    "ramadan": False,
    "asr_method": "Standard",
    "high_lat_method": None,
    "params": {}
}


def load_config(path=CONFIG_PATH):
    """Read the JSON config at ``path`` on top of the defaults.

    The file is optional and never written.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if not os.path.exists(path):
        logger.debug("No config at %s, using defaults", path)
        return config
    with open(path, "r", encoding="utf-8") as f:
        config.update(json.load(f))
    logger.debug("Loaded config from %s", path)
    return config


def method_from_config(config):
    """Preset named by ``config["method"]`` with the asr school and ``params`` applied.

    ``params`` use the same values as the preset table: ``18`` is an angle,
    ``"10 min"`` a number of minutes.
    """
    method_key = config.get("method") or DEFAULT_CONFIG["method"]
    if method_key not in METHODS:
        raise ValueError(f"Unknown method: {method_key}")
    params = dict(METHODS[method_key]["params"])
    if config.get("ramadan"):
        preset = get_calculation_method(method_key, True)
        params["isha"] = preset.isha
    params["asr"] = config.get("asr_method") or DEFAULT_CONFIG["asr_method"]
    params.update(config.get("params") or {})
    return method_from_params(params)
