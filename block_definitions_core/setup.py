from setuptools import setup, find_packages

setup(
    name='block-definitions-core',
    version='1.0.0',
    description='Standard block definitions plugin for the Blockly workspace',
    packages=find_packages(),
    install_requires=[
        'blockly-workspace-api',
    ],
    entry_points={
        'blockly.block_definitions': [
            'core = block_definitions_core.plugin:CoreBlockDefinitionsPlugin',
        ],
    },
    python_requires='>=3.10',
)
