from pathlib import Path

from dynaconf import Dynaconf

SETTINGS_DIR = Path(__file__).parent / "settings"

settings = Dynaconf(
    settings_files=[str(SETTINGS_DIR / "base_settings.yaml"), str(SETTINGS_DIR / "settings.yaml")],
    environments=True,
    load_dotenv=True,
    env_switcher="ENV_FOR_DYNACONF",
    env="default",
    merge_enabled=True,
)
