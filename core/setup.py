from setuptools import setup, find_packages

setup(
    name='blockly-workspace-core',
    version='1.0.0',
    description='Workspace block graph and XML load/save for Blockly',
    packages=find_packages(),
    install_requires=[
        'blockly-workspace-api',
        'lxml>=6.0.0',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    python_requires='>=3.10',
)
