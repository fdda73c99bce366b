from setuptools import setup, find_packages

setup(
    name="countdown",
    version="0.1.0",
    description="Terminal countdown timer w/ a live progress bar & digital readout",
    packages=find_packages(include=["countdown", "countdown.*"]),
    install_requires=[
        "typer",
        "rich",
        "python-dotenv",
    ],
    extras_require={
        "tests": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "countdown=countdown.cli.app:app",
        ],
    },
    python_requires=">=3.11",
)
