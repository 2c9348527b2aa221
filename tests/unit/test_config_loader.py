"""
Unit tests for configuration loading.
"""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from classcomposer.config.loader import (
    ConfigurationError,
    generate_default_config,
    load_config_from_yaml,
    validate_log_level,
)
from classcomposer.config.models import ClassTemplate, ComposerConfig


def test_template_defaults():
    template = ClassTemplate()

    assert template.base_type == "SparkRequirement"
    assert template.session_type == "SparkSession"
    assert template.session_param == "spark"
    assert template.temp_row_type == "Dataset<Row>"
    assert template.execute_routine == "execute"
    assert template.default_class_name == "DefaultRequirement_0"


@pytest.mark.parametrize(
    "field, value",
    [
        ("base_type", "Not A Type"),
        ("default_class_name", "1Bad"),
        ("session_param", ""),
        ("indent", "xx"),
    ],
)
def test_template_rejects_invalid_values(field, value):
    with pytest.raises(ValidationError):
        ClassTemplate(**{field: value})


def test_generate_and_load_default_config(tmp_path):
    config_path = tmp_path / "nested" / "classcomposer.yaml"
    generate_default_config(config_path)

    assert config_path.exists()
    config = load_config_from_yaml(config_path)

    assert config.template == ClassTemplate()
    assert config.output_dir == Path("./generated")
    assert config.log_level == "INFO"


def test_load_partial_template(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        yaml.dump({"template": {"base_type": "FlinkRequirement"}, "log_level": "debug"})
    )

    config = load_config_from_yaml(config_path)

    assert config.template.base_type == "FlinkRequirement"
    assert config.template.session_type == "SparkSession"
    assert config.log_level == "DEBUG"


def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        load_config_from_yaml(tmp_path / "absent.yaml")


def test_empty_file(tmp_path):
    config_path = tmp_path / "empty.yaml"
    config_path.write_text("")

    with pytest.raises(ConfigurationError, match="empty"):
        load_config_from_yaml(config_path)


def test_invalid_yaml(tmp_path):
    config_path = tmp_path / "bad.yaml"
    config_path.write_text("template: [unclosed\n")

    with pytest.raises(ConfigurationError, match="Invalid YAML"):
        load_config_from_yaml(config_path)


def test_validation_failure(tmp_path):
    config_path = tmp_path / "bad.yaml"
    config_path.write_text(yaml.dump({"template": {"temp_var": "not valid"}}))

    with pytest.raises(ConfigurationError, match="validation failed"):
        load_config_from_yaml(config_path)


def test_non_mapping_document(tmp_path):
    config_path = tmp_path / "list.yaml"
    config_path.write_text("- a\n- b\n")

    with pytest.raises(ConfigurationError):
        load_config_from_yaml(config_path)


def test_validate_log_level():
    assert validate_log_level("warning") == "WARNING"
    with pytest.raises(ConfigurationError):
        validate_log_level("LOUD")


def test_config_defaults():
    config = ComposerConfig()

    assert config.template == ClassTemplate()
    assert config.log_level == "INFO"
