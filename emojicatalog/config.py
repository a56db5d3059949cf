from typing import Dict

ConfigSection = Dict[str, str]
Config = Dict[str, ConfigSection]


def get_bool(section: ConfigSection, key: str, default: bool = False) -> bool:
    value = section.get(key)
    if value is None:
        return default
    return value.strip().lower() in ("1", "yes", "true", "on")
