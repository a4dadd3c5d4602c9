from blockly_api.plugins import BlockDefinitionPlugin
from blockly_api.models.definition import BlockDefinition

from typing import List


# Blockly JSON style: 'previousStatement' / 'nextStatement' / 'output'
# present means the connection exists, the value is its type check.
_DEFINITIONS = [
    {
        'type': 'controls_if',
        'inputs': [
            {'name': 'IF0', 'type': 'value', 'check': 'Boolean'},
            {'name': 'DO0', 'type': 'statement'},
        ],
        'previousStatement': None,
        'nextStatement': None,
    },
    {
        'type': 'controls_repeat_ext',
        'inputs': [
            {'name': 'TIMES', 'type': 'value', 'check': 'Number'},
            {'name': 'DO', 'type': 'statement'},
        ],
        'previousStatement': None,
        'nextStatement': None,
    },
    {
        'type': 'logic_boolean',
        'inputs': [
            {'name': '', 'type': 'dummy', 'fields': [
                {'name': 'BOOL', 'type': 'dropdown', 'options': ['TRUE', 'FALSE']},
            ]},
        ],
        'output': 'Boolean',
    },
    {
        'type': 'logic_compare',
        'inputs': [
            {'name': 'A', 'type': 'value'},
            {'name': 'B', 'type': 'value', 'fields': [
                {'name': 'OP', 'type': 'dropdown', 'options': ['EQ', 'NEQ', 'LT', 'LTE', 'GT', 'GTE']},
            ]},
        ],
        'output': 'Boolean',
    },
    {
        'type': 'math_number',
        'inputs': [
            {'name': '', 'type': 'dummy', 'fields': [
                {'name': 'NUM', 'type': 'number', 'value': 0},
            ]},
        ],
        'output': 'Number',
    },
    {
        'type': 'math_arithmetic',
        'inputs': [
            {'name': 'A', 'type': 'value', 'check': 'Number'},
            {'name': 'B', 'type': 'value', 'check': 'Number', 'fields': [
                {'name': 'OP', 'type': 'dropdown', 'options': ['ADD', 'MINUS', 'MULTIPLY', 'DIVIDE', 'POWER']},
            ]},
        ],
        'output': 'Number',
    },
    {
        'type': 'text',
        'inputs': [
            {'name': '', 'type': 'dummy', 'fields': [
                {'name': 'TEXT', 'type': 'text', 'value': ''},
            ]},
        ],
        'output': 'String',
    },
    {
        'type': 'text_print',
        'inputs': [
            {'name': 'TEXT', 'type': 'value'},
        ],
        'previousStatement': None,
        'nextStatement': None,
    },
    {
        'type': 'variables_get',
        'inputs': [
            {'name': '', 'type': 'dummy', 'fields': [
                {'name': 'VAR', 'type': 'variable', 'value': 'item'},
            ]},
        ],
        'output': None,
    },
    {
        'type': 'variables_set',
        'inputs': [
            {'name': 'VALUE', 'type': 'value', 'fields': [
                {'name': 'VAR', 'type': 'variable', 'value': 'item'},
            ]},
        ],
        'previousStatement': None,
        'nextStatement': None,
    },
]


class CoreBlockDefinitionsPlugin(BlockDefinitionPlugin):
    """
    BlockDefinitionPlugin with the standard logic, loop, math, text and
    variable blocks.
    """

    def get_plugin_name(self) -> str:
        return "Core Blocks"

    def get_block_definitions(self) -> List[BlockDefinition]:
        return [BlockDefinition.from_dict(data) for data in _DEFINITIONS]
