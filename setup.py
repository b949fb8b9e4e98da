# setup.py
from setuptools import setup, find_packages

setup(
    name="listscript",
    version="0.6.0",
    description="Tree-walking interpreter for the ListScript language",
    packages=find_packages(include=["listscript", "listscript.*", "listscript_lsp", "listscript_lsp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "termcolor>=2.0",
        "pygls>=1.1,<2",
        "lsprotocol>=2023.0.0",
    ],
    extras_require={
        "test": ["pytest>=7", "hypothesis>=6"],
    },
    entry_points={
        "console_scripts": [
            "listscript=listscript.__main__:main",
            "listscript-ls=listscript_lsp.server:main",
        ],
    },
    zip_safe=False,
)
