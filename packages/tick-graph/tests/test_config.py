"""Tests for GraphConfig and load_config."""
import dataclasses

import pytest

from tick_graph import LINE, TRACE, GraphConfig, GraphParameters, InvalidArgumentError, load_config


class TestDefaults:
    def test_defaults(self):
        cfg = GraphConfig()
        assert cfg.function_type == "sine"
        assert cfg.output_mode == TRACE
        assert cfg.positive_exponent is True
        assert cfg.speed == 1.0
        assert cfg.reset_interval == 5.0
        assert cfg.reset_delay == 1.0
        assert cfg.trace_spawn_interval == 0.5
        assert cfg.line_y_cutoff == 3.0
        assert cfg.anchor == (0.0, 0.0)

    def test_frozen(self):
        cfg = GraphConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.speed = 2.0  # type: ignore[misc]

    def test_parameters(self):
        cfg = GraphConfig(positive_exponent=False, coefficient=2.0, y_intercept=-1.0)
        assert cfg.parameters == GraphParameters(False, 2.0, -1.0)


class TestValidation:
    def test_function_type_is_normalized(self):
        assert GraphConfig(function_type="SquareRoot").function_type == "square_root"

    def test_unknown_function_type(self):
        with pytest.raises(InvalidArgumentError):
            GraphConfig(function_type="tangent")

    def test_unknown_output_mode(self):
        with pytest.raises(InvalidArgumentError, match="Unknown output mode"):
            GraphConfig(output_mode="xaxis")

    @pytest.mark.parametrize("speed", [-1.0, float("inf"), float("nan")])
    def test_bad_speed(self, speed):
        with pytest.raises(ValueError, match="speed"):
            GraphConfig(speed=speed)

    def test_zero_speed_allowed(self):
        assert GraphConfig(speed=0.0).speed == 0.0

    @pytest.mark.parametrize("name", ["reset_interval", "reset_delay", "trace_spawn_interval"])
    @pytest.mark.parametrize("value", [0.0, -1.0])
    def test_intervals_must_be_positive(self, name, value):
        with pytest.raises(ValueError, match=name):
            GraphConfig(**{name: value})

    def test_negative_line_width(self):
        with pytest.raises(ValueError):
            GraphConfig(line_width=-0.1)

    @pytest.mark.parametrize(
        "name", ["coefficient", "y_intercept", "speed", "reset_interval", "line_y_cutoff", "line_width"]
    )
    @pytest.mark.parametrize("value", ["2", None, True, [1.0]])
    def test_numeric_fields_reject_other_types(self, name, value):
        with pytest.raises(ValueError, match=f"{name} must be a number"):
            GraphConfig(**{name: value})

    def test_integers_accepted_as_numbers(self):
        cfg = GraphConfig(coefficient=2, y_intercept=-1, line_y_cutoff=3)
        assert cfg.coefficient == 2
        assert cfg.parameters == GraphParameters(True, 2, -1)

    @pytest.mark.parametrize("value", ["false", "true", 0, 1, None])
    def test_positive_exponent_must_be_bool(self, value):
        with pytest.raises(ValueError, match="positive_exponent must be a bool"):
            GraphConfig(positive_exponent=value)

    @pytest.mark.parametrize("anchor", [(1.0,), (1.0, 2.0, 3.0), ("1", 2.0), (True, 0.0)])
    def test_anchor_must_be_two_numbers(self, anchor):
        with pytest.raises(ValueError, match="anchor"):
            GraphConfig(anchor=anchor)

    def test_replace_revalidates(self):
        cfg = GraphConfig()
        assert cfg.replace(output_mode=LINE).output_mode == LINE
        with pytest.raises(InvalidArgumentError):
            cfg.replace(function_type="nope")


class TestFromMapping:
    def test_sequences_become_tuples(self):
        cfg = GraphConfig.from_mapping({"anchor": [1, -2], "marker_color": [10, 20, 30]})
        assert cfg.anchor == (1.0, -2.0)
        assert cfg.marker_color == (10, 20, 30)

    def test_unknown_keys(self):
        with pytest.raises(InvalidArgumentError, match="graph_speed"):
            GraphConfig.from_mapping({"graph_speed": 2.0})


class TestLoadConfig:
    def test_graph_table(self, tmp_path):
        path = tmp_path / "graph.toml"
        path.write_text(
            '[graph]\nfunction_type = "Cubed"\noutput_mode = "line"\n'
            "coefficient = 0.5\nanchor = [-4.0, 1.0]\n"
        )
        cfg = load_config(path)
        assert cfg.function_type == "cubed"
        assert cfg.output_mode == LINE
        assert cfg.coefficient == 0.5
        assert cfg.anchor == (-4.0, 1.0)

    def test_top_level_keys(self, tmp_path):
        path = tmp_path / "graph.toml"
        path.write_text('function_type = "cosine"\nspeed = 2.5\n')
        cfg = load_config(str(path))
        assert cfg.function_type == "cosine"
        assert cfg.speed == 2.5

    def test_invalid_values_raise(self, tmp_path):
        path = tmp_path / "graph.toml"
        path.write_text('function_type = "tangent"\n')
        with pytest.raises(InvalidArgumentError):
            load_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.toml")

    def test_string_number_rejected(self, tmp_path):
        path = tmp_path / "graph.toml"
        path.write_text('coefficient = "2"\n')
        with pytest.raises(ValueError, match="coefficient must be a number"):
            load_config(path)

    def test_string_boolean_rejected(self, tmp_path):
        path = tmp_path / "graph.toml"
        path.write_text('positive_exponent = "false"\n')
        with pytest.raises(ValueError, match="positive_exponent must be a bool"):
            load_config(path)

    def test_toml_boolean_accepted(self, tmp_path):
        path = tmp_path / "graph.toml"
        path.write_text("positive_exponent = false\nline_y_cutoff = 2\n")
        cfg = load_config(path)
        assert cfg.positive_exponent is False
        assert cfg.line_y_cutoff == 2
