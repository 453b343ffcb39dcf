import json
import pytest
from pathlib import Path

from swig_lls.config import GeneratorConfig, STATIC_MEMBER_VIEW, CALLBACK_ALIAS


class TestGeneratorConfig:
    def test_defaults(self):
        config = GeneratorConfig()
        assert config.output_dir == Path('.')
        assert config.static_view_marker == STATIC_MEMBER_VIEW
        assert config.callback_alias == CALLBACK_ALIAS
        assert config.type_overrides == {}
        assert config.global_file_name is None

    def test_overrides_are_not_shared_between_instances(self):
        first = GeneratorConfig()
        first.type_overrides['Foo'] = 'any'
        assert GeneratorConfig().type_overrides == {}

    def test_from_file(self, temp_dir):
        config_path = temp_dir / 'swig_lls.json'
        config_path.write_text(json.dumps({
            'output_dir': 'annotations',
            'type_overrides': {'lua_State': 'userdata'},
        }), encoding='utf-8')
        config = GeneratorConfig.from_file(config_path)
        assert config.output_dir == Path('annotations')
        assert config.type_overrides == {'lua_State': 'userdata'}

    def test_missing_file_raises(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            GeneratorConfig.from_file(temp_dir / 'missing.json')

    def test_unknown_key_raises(self):
        with pytest.raises(KeyError) as exc_info:
            GeneratorConfig({'compiler': 'clang'})
        assert 'compiler' in str(exc_info.value)

    def test_get_unknown_setting_raises(self):
        with pytest.raises(KeyError):
            GeneratorConfig().get('compiler')
