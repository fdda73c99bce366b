# countdown/__init__.py
# Countdown timer engine w/ a Rich-rendered Typer CLI

__version__ = "0.1.0"
