from setuptools import setup, find_packages

setup(
    name='runselect',
    version='0.3.0',
    description='Selection of the runs out of the history of the jobs',
    python_requires='>=3.10',
    packages=find_packages(include=['runselect', 'runselect.*']),
    install_requires=[
        'click', 'termcolor>=2.1', 'ruamel.yaml',
    ],
    extras_require={
        'test': ['pytest'],
    },

    entry_points='''
        [console_scripts]
        runselect=runselect.cli:launch_cli
    ''',
)
