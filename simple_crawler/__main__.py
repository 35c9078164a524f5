"""Allows ``python -m simple_crawler config.toml``."""

from simple_crawler.cli import main

if __name__ == "__main__":
    main()
