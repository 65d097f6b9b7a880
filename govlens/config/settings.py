# govlens/config/settings.py

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional


class Config:
    """Configuration management for GovLens"""

    DEFAULT_CONFIG_DIR = Path.home() / ".govlens"

    # Defaults for the batch analysis pass
    DEFAULT_ANALYSIS_CONFIG = {
        'entity_min_length': 5,
        'word_min_length': 2,
        'top_words': 50,
        'preview_chars': 5000,
    }

    # Defaults for interactive search
    DEFAULT_SEARCH_CONFIG = {
        'min_query_length': 2,
        'snippet_context': 40,
        'filtered_snippet_context': 60,
        'highlight_start': '<mark>',
        'highlight_end': '</mark>',
        'category_strategy': 'keyword',  # keyword or classifier
    }

    def __init__(self, config_dir: Optional[Path] = None):
        env_dir = os.environ.get('GOVLENS_HOME')
        self.config_dir = config_dir or (Path(env_dir) if env_dir else self.DEFAULT_CONFIG_DIR)
        self.logs_dir = self.config_dir / "logs"
        self.global_config_path = self.config_dir / "config.yaml"

        self._ensure_directories()

    def _ensure_directories(self):
        """Ensure configuration directories exist"""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.logs_dir.mkdir(parents=True, exist_ok=True)

    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        """Load YAML file"""
        if not path.exists():
            return {}
        with open(path, 'r') as f:
            return yaml.safe_load(f) or {}

    def _save_yaml(self, path: Path, data: Dict[str, Any]):
        """Save YAML file"""
        with open(path, 'w') as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

    @staticmethod
    def _merge_section(defaults: Dict[str, Any], overrides: Any) -> Dict[str, Any]:
        """Overlay known keys from a config section onto its defaults"""
        merged = defaults.copy()
        if isinstance(overrides, dict):
            for key, value in overrides.items():
                if key in merged and value is not None:
                    merged[key] = value
        return merged

    # Global config methods

    def load_global_config(self) -> Dict[str, Any]:
        """Load global configuration"""
        return self._load_yaml(self.global_config_path)

    def save_global_config(self, config: Dict[str, Any]):
        """Save global configuration"""
        self._save_yaml(self.global_config_path, config)

    def get_active_corpus(self) -> Optional[str]:
        """Get path or URL of the active corpus"""
        config = self.load_global_config()
        return config.get('active_corpus')

    def set_active_corpus(self, source: str):
        """Set active corpus"""
        config = self.load_global_config()
        config['active_corpus'] = source
        self.save_global_config(config)

    def clear_active_corpus(self):
        """Forget the active corpus"""
        config = self.load_global_config()
        config.pop('active_corpus', None)
        self.save_global_config(config)

    # Section accessors

    def get_analysis_config(self) -> Dict[str, Any]:
        """Analysis settings merged over defaults"""
        config = self.load_global_config()
        return self._merge_section(self.DEFAULT_ANALYSIS_CONFIG, config.get('analysis'))

    def get_search_config(self) -> Dict[str, Any]:
        """Search settings merged over defaults"""
        config = self.load_global_config()
        return self._merge_section(self.DEFAULT_SEARCH_CONFIG, config.get('search'))

    def update_section(self, section: str, values: Dict[str, Any]):
        """Persist overrides for one config section"""
        if section not in ('analysis', 'search'):
            raise ValueError(f"Unknown config section: '{section}'")
        config = self.load_global_config()
        current = config.get(section) or {}
        current.update(values)
        config[section] = current
        self.save_global_config(config)
