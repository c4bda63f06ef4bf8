"""Setup for natural_sort module.
"""

from setuptools import setup

setup(
    name = "natural-sort",
    version = "1.0.0",
    description = "Natural sort order comparator for text and byte strings",
    packages = ["natural_sort"],
    python_requires = ">=3.8",
    install_requires = [
        "typing_extensions>=4.6",
    ],
    extras_require = {
        "test": ["pytest"],
    },
    entry_points = {
        "console_scripts": [
            "natsort-lines = natural_sort.cli:main",
        ],
    },
)
