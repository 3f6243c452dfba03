import re
from pathlib import Path
from setuptools import setup, find_packages

version = re.search(r"^__version__ = '([^']+)'",
                    (Path(__file__).parent / 'bart' / '__init__.py').read_text(), re.M).group(1)

setup(
    name = 'bart.tools',
    version = version,
    description = 'Optional values and a mockable OS shell wrapper',
    python_requires = '>=3.10',
    entry_points={
        'console_scripts': [
            'bart_exec = scripts.bart_exec:main',
        ],
    },
    install_requires = [
        'omegaconf>=2.1.2',

        # logger configuration
        'PyYAML',
    ],
    extras_require = {
        'test': ['pytest'],
    },
    packages = find_packages(exclude=['tests', 'tests.*']),
    package_data = {
        'conf': ['logger.yaml']
    },
    zip_safe = False
)
