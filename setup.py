#!/usr/bin/env python3
import setuptools

setuptools.setup(
    name="solidity-import-sorter",
    version="0.1.0",
    packages=["solidity_import_sorter"],
    python_requires=">=3.11",
    install_requires=[
        "click",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "sis = solidity_import_sorter.cli:main",
        ],
    },
    author="",
    description="Command-line tool to group, sort and deduplicate Solidity import statements",
    license="MIT",
)
