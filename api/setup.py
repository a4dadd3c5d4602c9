from setuptools import setup, find_packages

setup(
    name='blockly-workspace-api',
    version='1.0.0',
    description='Block, connection and factory contracts for the Blockly workspace',
    packages=find_packages(),
    install_requires=[
        'lxml>=6.0.0',
    ],
    python_requires='>=3.10',
)
