# tests/conftest.py
"""
Shared test fixtures.
Block factory with the core block definitions and a small program:

    variables_set(VAR=count, VALUE=math_number 3)
      -> controls_repeat_ext(TIMES=math_number 2)
           DO: text_print(TEXT=text "hi")
      -> text_print(TEXT=variables_get count)
"""
import pytest

from blockly_api.factory import BlockFactory
from blockly_api.models.block import Block
from block_definitions_core.plugin import CoreBlockDefinitionsPlugin
from blockly_workspace.workspace import Workspace


def _build_factory() -> BlockFactory:
    factory = BlockFactory()
    factory.register_plugin(CoreBlockDefinitionsPlugin())
    return factory


def _plug(parent: Block, input_name: str, child: Block) -> None:
    block_input = parent.get_input(input_name)
    block_input.connection.connect(block_input.get_child_connection(child))


def build_program(factory: BlockFactory, prefix: str = "p") -> Block:
    """Stack of three statements with nested values; returns the top block."""
    set_var = factory.obtain_block('variables_set', f'{prefix}-set')
    set_var.set_field_value('VAR', 'count')
    three = factory.obtain_block('math_number', f'{prefix}-three')
    three.set_field_value('NUM', 3)
    _plug(set_var, 'VALUE', three)

    repeat = factory.obtain_block('controls_repeat_ext', f'{prefix}-repeat')
    two = factory.obtain_block('math_number', f'{prefix}-two')
    two.set_field_value('NUM', 2)
    _plug(repeat, 'TIMES', two)

    say = factory.obtain_block('text_print', f'{prefix}-say')
    hi = factory.obtain_block('text', f'{prefix}-hi')
    hi.set_field_value('TEXT', 'hi')
    _plug(say, 'TEXT', hi)
    _plug(repeat, 'DO', say)

    show = factory.obtain_block('text_print', f'{prefix}-show')
    get_var = factory.obtain_block('variables_get', f'{prefix}-get')
    get_var.set_field_value('VAR', 'count')
    _plug(show, 'TEXT', get_var)

    set_var.get_next_connection().connect(repeat.get_previous_connection())
    repeat.get_next_connection().connect(show.get_previous_connection())
    return set_var


# ── Pytest fixtures ──────────────────────────────────────────────

@pytest.fixture
def factory() -> BlockFactory:
    """Factory with every core block type registered."""
    return _build_factory()


@pytest.fixture
def workspace() -> Workspace:
    """Empty workspace."""
    return Workspace("test")


@pytest.fixture
def program(factory) -> Block:
    """Top block of the sample program (8 blocks in total)."""
    return build_program(factory)


@pytest.fixture
def make_program(factory):
    """Builds further independent copies of the sample program (distinct ids per prefix)."""
    def _make(prefix: str) -> Block:
        return build_program(factory, prefix)
    return _make
