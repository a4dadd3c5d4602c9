import pytest

from blockly_api.models.connection import ConnectionType
from blockly_api.models.input import InputType
from blockly_api.plugins.base import BlockDefinitionPlugin

from block_definitions_core.plugin import CoreBlockDefinitionsPlugin


@pytest.fixture
def plugin():
    return CoreBlockDefinitionsPlugin()

@pytest.fixture
def definitions(plugin):
    return {d.type_name: d for d in plugin.get_block_definitions()}


# ── Plugin metadata ───────────────────────────────────────────────────────────

class TestPluginMetadata:
    def test_plugin_name(self, plugin):
        assert plugin.get_plugin_name() == "Core Blocks"

    def test_plugin_is_block_definition_plugin(self, plugin):
        assert isinstance(plugin, BlockDefinitionPlugin)

    def test_type_names(self, definitions):
        assert set(definitions) == {
            "controls_if", "controls_repeat_ext", "logic_boolean", "logic_compare",
            "math_number", "math_arithmetic", "text", "text_print",
            "variables_get", "variables_set",
        }

# ── Definitions ───────────────────────────────────────────────────────────────

class TestDefinitions:
    @pytest.mark.parametrize("type_name", ["controls_if", "controls_repeat_ext",
                                           "text_print", "variables_set"])
    def test_statement_blocks(self, definitions, type_name):
        block = definitions[type_name].build()
        assert block.get_previous_connection() is not None
        assert block.get_next_connection() is not None
        assert block.get_output_connection() is None

    @pytest.mark.parametrize("type_name, check", [
        ("logic_boolean", ("Boolean",)),
        ("logic_compare", ("Boolean",)),
        ("math_number", ("Number",)),
        ("math_arithmetic", ("Number",)),
        ("text", ("String",)),
        ("variables_get", None),
    ])
    def test_value_blocks(self, definitions, type_name, check):
        block = definitions[type_name].build()
        assert block.get_previous_connection() is None
        assert block.get_output_connection().check == check

    def test_if_condition_is_boolean(self, definitions):
        block = definitions["controls_if"].build()
        condition = block.get_input("IF0")
        assert condition.input_type == InputType.VALUE
        assert condition.connection.check == ("Boolean",)
        assert block.get_input("DO0").connection.get_type() == ConnectionType.NEXT

    def test_defaults(self, definitions):
        assert definitions["math_number"].build().get_field_value("NUM") == 0
        assert definitions["logic_compare"].build().get_field_value("OP") == "EQ"
        assert definitions["variables_get"].build().get_field_value("VAR") == "item"

    def test_compare_plugs_into_if(self, definitions):
        if_block = definitions["controls_if"].build()
        compare = definitions["logic_compare"].build()
        assert if_block.get_input("IF0").connection.can_connect(compare.get_output_connection())
