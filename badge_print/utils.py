import yaml
from pathlib import Path
from .models import PaperSizeConfiguration, PrintProfiles, PrintProfile

CONFIG_DIR = Path("config")

def load_print_profiles(path: Path = CONFIG_DIR / "print_profiles.yaml") -> PrintProfiles:
    """Loads named print profiles from YAML file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Print profiles file not found at {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    return PrintProfiles(**data)

def get_profile(name: str = "default_a4", path: Path = CONFIG_DIR / "print_profiles.yaml") -> PrintProfile:
    """Helper to get a specific print profile."""
    profiles = load_print_profiles(path)
    if name not in profiles.profiles:
        raise ValueError(f"Profile '{name}' not found. Available: {list(profiles.profiles.keys())}")
    return profiles.profiles[name]

def dump_configuration(config: PaperSizeConfiguration) -> str:
    """Serializes a configuration in its persisted (camelCase) JSON form."""
    return config.model_dump_json(by_alias=True)

def load_configuration(data: str) -> PaperSizeConfiguration:
    return PaperSizeConfiguration.model_validate_json(data)
