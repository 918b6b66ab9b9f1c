from setuptools import setup, find_packages

setup(
    name="connect4cli",
    version="0.1.0",
    packages=find_packages(include=["connect4cli", "connect4cli.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "connect4cli=connect4cli.interfaces.cli:main",
        ],
    },
)
