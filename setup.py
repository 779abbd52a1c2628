from setuptools import setup, find_packages

setup(
    name='weighted-graph',
    version='1.0.0',
    description='Directed graph of weighted nodes with shortest-path and DFS algorithms',
    packages=find_packages(include=['api', 'api.*', 'core', 'core.*']),
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'weighted-graph = core.graph_platform.cli.main:main',
        ],
    },
    python_requires='>=3.8',
)
