"""Settings tests"""
import pytest

from canvas_groups.config.settings import Settings
from canvas_groups.utils.exceptions import ConfigurationError


def test_defaults_are_placeholders(clean_env, tmp_path):
    settings = Settings.from_env(str(tmp_path / "absent.env"))
    
    assert settings.category_name == 'Project Groups'
    assert settings.request_delay == 0.5
    assert settings.get_errors() == [
        'CANVAS_API_TOKEN not set or using default value',
        'COURSE_ID not set or using default value',
        'CANVAS_URL not set or using default value',
    ]
    with pytest.raises(ConfigurationError) as excinfo:
        settings.validate()
    assert len(excinfo.value.errors) == 3


def test_from_environment(clean_env, tmp_path):
    clean_env.setenv('CANVAS_URL', 'https://canvas.example.edu/')
    clean_env.setenv('CANVAS_API_TOKEN', 'abc')
    clean_env.setenv('COURSE_ID', '42')
    clean_env.setenv('REQUEST_DELAY', '0')
    clean_env.setenv('LOG_LEVEL', 'debug')
    
    settings = Settings.from_env(str(tmp_path / "absent.env"))
    
    assert settings.canvas_url == 'https://canvas.example.edu'
    assert settings.course_id == '42'
    assert settings.request_delay == 0.0
    assert settings.log_level == 'DEBUG'
    settings.validate()


def test_dotenv_file_is_read(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "CANVAS_URL=https://canvas.example.edu\nCANVAS_API_TOKEN=abc\nCOURSE_ID=7\n",
        encoding="utf-8"
    )
    
    settings = Settings.from_env(str(env_file))
    
    assert settings.course_id == '7'
    assert settings.get_errors() == []


def test_environment_wins_over_dotenv(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("COURSE_ID=7\n", encoding="utf-8")
    clean_env.setenv('COURSE_ID', '8')
    
    assert Settings.from_env(str(env_file)).course_id == '8'


def test_overrides_ignore_none():
    settings = Settings(course_id='1')
    changed = settings.with_overrides(category_name='Capstone', roster_path=None)
    
    assert changed.category_name == 'Capstone'
    assert changed.roster_path == settings.roster_path
    assert settings.with_overrides(roster_path=None) is settings


def test_settings_are_immutable():
    with pytest.raises(AttributeError):
        Settings().course_id = '2'


def test_token_not_in_repr():
    assert 'secret' not in repr(Settings(api_token='secret'))


@pytest.mark.parametrize("name, raw, message", [
    ('REQUEST_DELAY', 'fast', "REQUEST_DELAY must be a float, got 'fast'"),
    ('REQUEST_DELAY', '-1', "REQUEST_DELAY must be positive, got '-1'"),
    ('REQUEST_TIMEOUT', 'soon', "REQUEST_TIMEOUT must be a float, got 'soon'"),
    ('PAGE_SIZE', '0', "PAGE_SIZE must be positive, got '0'"),
    ('PAGE_SIZE', '2.5', "PAGE_SIZE must be a int, got '2.5'"),
])
def test_bad_numbers_are_configuration_errors(clean_env, tmp_path, name, raw, message):
    clean_env.setenv(name, raw)
    
    with pytest.raises(ConfigurationError) as excinfo:
        Settings.from_env(str(tmp_path / "absent.env"))
    assert excinfo.value.errors == [message]


def test_every_bad_number_is_reported(clean_env, tmp_path):
    clean_env.setenv('REQUEST_DELAY', 'fast')
    clean_env.setenv('PAGE_SIZE', 'many')
    
    with pytest.raises(ConfigurationError) as excinfo:
        Settings.from_env(str(tmp_path / "absent.env"))
    assert len(excinfo.value.errors) == 2
