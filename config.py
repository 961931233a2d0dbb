import tomllib
import shutil
from pathlib import Path
from typing import Any, Dict, Optional
from dotenv import load_dotenv
import os

CONFIG_DIR = Path.home() / ".senderos"
CONFIG_PATH = CONFIG_DIR / "config.toml"
PROJECT_CONFIG_EXAMPLE = Path(__file__).parent / "config.toml"
PROJECT_VOCABULARY = Path(__file__).parent / "data" / "vocabulary.json"

def load_config() -> Dict[str, Any]:
    """Load config from ~/.senderos/config.toml, copy example if missing, load .env overrides."""
    load_dotenv()  # Load .env for overrides (e.g., SENDEROS_MAX_NEW env var)
    if not CONFIG_PATH.exists():
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        shutil.copy(PROJECT_CONFIG_EXAMPLE, CONFIG_PATH)
    with open(CONFIG_PATH, "rb") as f:
        config = tomllib.load(f)

    grading_cfg = config.get("grading", {})
    config["grading"] = {
        "easy_threshold_ms": int(os.getenv(
            "SENDEROS_EASY_THRESHOLD_MS", grading_cfg.get("easy_threshold_ms", 8000)
        )),
        "good_threshold_ms": int(os.getenv(
            "SENDEROS_GOOD_THRESHOLD_MS", grading_cfg.get("good_threshold_ms", 30000)
        )),
        "near_miss_threshold": float(os.getenv(
            "SENDEROS_NEAR_MISS_THRESHOLD", grading_cfg.get("near_miss_threshold", 0.85)
        )),
    }
    session_cfg = config.get("session", {})
    config["session"] = {
        "max_new": int(os.getenv("SENDEROS_MAX_NEW", session_cfg.get("max_new", 20))),
        "direction": os.getenv("SENDEROS_DIRECTION", session_cfg.get("direction", "es-en")),
    }
    vocabulary_cfg = config.get("vocabulary", {})
    vocabulary_path = os.getenv("SENDEROS_VOCABULARY", vocabulary_cfg.get("path") or "")
    config["vocabulary"] = {
        "path": str(Path(vocabulary_path).expanduser()) if vocabulary_path else str(PROJECT_VOCABULARY),
    }
    return config

def get_config_value(section: str, key: str, default: Optional[Any] = None) -> Any:
    """Get nested config value, e.g., get_config_value('session', 'max_new')."""
    config = load_config()
    value = config.get(section, {}).get(key, default)
    return value
