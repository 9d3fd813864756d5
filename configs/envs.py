from pathlib import Path

from tclogger import OSEnver, logger

configs_root = Path(__file__).parents[1] / "configs"
envs_path = configs_root / "envs.json"
ENVS_ENVER = OSEnver(envs_path)

MATCH_SORTER_ENVS = ENVS_ENVER["match_sorter"]
if not isinstance(MATCH_SORTER_ENVS, dict):
    MATCH_SORTER_ENVS = {}
    logger.warn(
        f"WARN: [match_sorter] not found in envs.json. Using defaults though. Please check {envs_path}."
    )
