import json
from pathlib import Path
from typing import Any, Dict, Optional


# SWIG XML conventions
NAMESPACE_SEPARATOR = '::'
STATIC_MEMBER_VIEW = 'staticmemberfunctionHandler'
CALLBACK_ALIAS = 'SWIGLUA_REF'

# Lua annotation output
LUA_PATH_SEPARATOR = '.'
HEADER_LINES = ['---', '---@meta']
OUTPUT_SUFFIX = '.lua'

CONFIG_FILENAME = 'swig_lls.json'


class GeneratorConfig:
    """
    Generator settings, optionally loaded from a JSON file.

    Recognized keys: output_dir, static_view_marker, callback_alias,
    type_overrides, global_file_name.
    """

    _defaults: Dict[str, Any] = {
        'output_dir': '.',
        'static_view_marker': STATIC_MEMBER_VIEW,
        'callback_alias': CALLBACK_ALIAS,
        'type_overrides': {},
        'global_file_name': None,
    }

    def __init__(self, values: Optional[Dict[str, Any]] = None):
        self._config: Dict[str, Any] = dict(self._defaults)
        self._config['type_overrides'] = {}
        for key, value in (values or {}).items():
            if key not in self._defaults:
                raise KeyError(f"Unknown setting '{key}' in {CONFIG_FILENAME}")
            self._config[key] = value

    @classmethod
    def from_file(cls, config_path: Path) -> 'GeneratorConfig':
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"{CONFIG_FILENAME} not found at {config_path}")

        with open(config_path, 'r', encoding='utf-8') as f:
            return cls(json.load(f))

    def get(self, key: str) -> Any:
        if key not in self._config:
            raise KeyError(f"Setting '{key}' not found in {CONFIG_FILENAME}")
        return self._config[key]

    @property
    def output_dir(self) -> Path:
        return Path(self.get('output_dir'))

    @property
    def static_view_marker(self) -> str:
        return self.get('static_view_marker')

    @property
    def callback_alias(self) -> str:
        return self.get('callback_alias')

    @property
    def type_overrides(self) -> Dict[str, str]:
        return self.get('type_overrides')

    @property
    def global_file_name(self) -> Optional[str]:
        return self.get('global_file_name')
